"""Composition root for wiring infrastructure adapters."""

from near_accounts.application.ports.key_store import (
    KeyPairGeneratorPort,
    KeyStorePort,
)
from near_accounts.application.ports.network_client import NetworkClientPort
from near_accounts.application.use_cases.create_account import (
    CreateAccountUseCase,
)
from near_accounts.infrastructure.helper_network_client import (
    HelperNetworkClient,
)
from near_accounts.infrastructure.key_generator import Ed25519KeyPairGenerator
from near_accounts.infrastructure.key_store_factory import create_key_store
from near_accounts.infrastructure.logging.logger import get_app_logger
from near_accounts.infrastructure.settings import NearSettings


def build_network_client(
    settings: NearSettings,
    initial_balance: int | None = None,
) -> NetworkClientPort:
    """Return the network client for the selected network."""
    if not settings.helper_url:
        raise RuntimeError(
            f'No account helper known for network "{settings.network_id}". '
            "Set NEAR_HELPER_URL."
        )
    return HelperNetworkClient(
        settings.helper_url,
        timeout_seconds=settings.http_timeout_seconds,
        initial_balance=initial_balance,
        logger=get_app_logger(),
    )


def build_key_store(settings: NearSettings) -> KeyStorePort:
    """Return the configured key store."""
    return create_key_store(settings, logger=get_app_logger())


def build_key_generator() -> KeyPairGeneratorPort:
    """Return the ed25519 key pair generator."""
    return Ed25519KeyPairGenerator()


def build_create_account_use_case(
    settings: NearSettings,
    initial_balance: int | None = None,
) -> CreateAccountUseCase:
    """Return a fully wired CreateAccountUseCase."""
    return CreateAccountUseCase(
        network_client=build_network_client(settings, initial_balance),
        key_store=build_key_store(settings),
        key_generator=build_key_generator(),
    )


__all__ = [
    "build_network_client",
    "build_key_store",
    "build_key_generator",
    "build_create_account_use_case",
]
