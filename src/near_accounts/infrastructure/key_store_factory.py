"""Factory helpers to select the key store backend."""

from near_accounts.application.ports.database import DatabaseEnginePort
from near_accounts.application.ports.key_store import KeyStorePort
from near_accounts.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from near_accounts.infrastructure.filesystem_key_store import (
    FileSystemKeyStore,
)
from near_accounts.infrastructure.logging.logger import get_app_logger
from near_accounts.infrastructure.settings import NearSettings
from near_accounts.infrastructure.sqlalchemy_key_store import (
    SqlAlchemyKeyStore,
)


def create_key_store(
    settings: NearSettings,
    db_port: DatabaseEnginePort | None = None,
    logger=None,
) -> KeyStorePort:
    """Return a key store implementation based on configuration.

    Args:
        settings: Settings naming the backend and its location.
        db_port: Optional engine port for the SQL backend.
        logger: Optional logger compatible with logging.Logger-like API.

    Returns:
        KeyStorePort: Concrete key store implementation.

    Raises:
        RuntimeError: If the SQL backend has no database URL.
        ValueError: If the backend is unknown.
    """
    resolved_logger = logger or get_app_logger()
    backend = settings.key_store_backend.strip().lower()

    if backend == "filesystem":
        return FileSystemKeyStore(settings.credentials_dir, logger=resolved_logger)

    if backend == "sqlalchemy":
        if db_port is None:
            if not settings.key_store_db_url:
                raise RuntimeError(
                    "SQLAlchemy key store requires NEAR_KEY_STORE_DB_URL."
                )
            db_port = SqlAlchemyDatabaseEngineAdapter(settings.key_store_db_url)
        return SqlAlchemyKeyStore(db_port, logger=resolved_logger)

    raise ValueError(
        f"Unsupported key store backend: {backend}. "
        "Expected filesystem or sqlalchemy."
    )


__all__ = ["create_key_store"]
