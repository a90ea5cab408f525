"""Application ports package."""

from .database import DatabaseEnginePort
from .key_store import KeyPairGeneratorPort, KeyStoreError, KeyStorePort
from .network_client import (
    AccountCreationRejectedError,
    NetworkClientError,
    NetworkClientPort,
    NetworkTransportError,
)

__all__ = [
    "DatabaseEnginePort",
    "KeyPairGeneratorPort",
    "KeyStoreError",
    "KeyStorePort",
    "AccountCreationRejectedError",
    "NetworkClientError",
    "NetworkClientPort",
    "NetworkTransportError",
]
