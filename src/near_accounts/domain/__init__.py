"""Domain package for naming rules and provisioning models."""

from .constants import (
    ACCOUNT_SEPARATOR,
    DEFAULT_NETWORK_SUFFIXES,
    TLA_MIN_LENGTH,
)
from .models import (
    Accepted,
    AccountConfirmation,
    CreationFailureReason,
    KeyMaterial,
    KeyPair,
    ProvisionError,
    ProvisionErrorKind,
    ProvisionResult,
    ProvisionState,
    Rejected,
    ValidationOutcome,
)
from .services import NamingValidator, validate_account_id

__all__ = [
    "ACCOUNT_SEPARATOR",
    "DEFAULT_NETWORK_SUFFIXES",
    "TLA_MIN_LENGTH",
    "Accepted",
    "AccountConfirmation",
    "CreationFailureReason",
    "KeyMaterial",
    "KeyPair",
    "ProvisionError",
    "ProvisionErrorKind",
    "ProvisionResult",
    "ProvisionState",
    "Rejected",
    "ValidationOutcome",
    "NamingValidator",
    "validate_account_id",
]
