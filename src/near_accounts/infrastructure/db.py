"""Database infrastructure for the SQL key store.

This module exposes helpers to create and reuse the SQLAlchemy engine
connected to the key store database. It belongs to the infrastructure layer
because it deals with external systems.
"""

import os
from typing import Optional

import dotenv
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.pool import QueuePool

from near_accounts.application.ports.database import DatabaseEnginePort


def _get_env_var(name: str) -> str:
    """Read an environment variable or raise a descriptive error.

    Args:
        name: Name of the environment variable to read.

    Returns:
        str: The raw value of the environment variable.

    Raises:
        RuntimeError: If the environment variable is missing or empty.
    """
    dotenv.load_dotenv()
    value = os.getenv(name)
    if not value:
        raise RuntimeError(f"Missing environment variable: {name}")
    return value


def _create_engine(db_url: str) -> Engine:
    """Create a configured SQLAlchemy engine.

    Args:
        db_url: Fully qualified database URL (including driver and credentials)

    Returns:
        Engine: A SQLAlchemy engine instance with a small connection pool and
        health checks enabled.
    """
    return create_engine(
        db_url,
        poolclass=QueuePool,
        pool_size=5,
        max_overflow=5,
        pool_pre_ping=True,
        future=True,
    )


_key_store_engine: Optional[Engine] = None


def get_key_store_engine() -> Engine:
    """Get a singleton SQLAlchemy engine for the key store database.

    Returns:
        Engine: Lazily initialized engine connected to the key store.
    """
    global _key_store_engine
    if _key_store_engine is None:
        db_url = _get_env_var("NEAR_KEY_STORE_DB_URL")
        _key_store_engine = _create_engine(db_url)
    return _key_store_engine


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """DatabaseEnginePort implementation backed by a SQLAlchemy engine.

    Args:
        db_url: Optional explicit URL; the ``NEAR_KEY_STORE_DB_URL``
            environment variable is used otherwise.
    """

    def __init__(self, db_url: str | None = None) -> None:
        self._db_url = db_url
        self._engine: Optional[Engine] = None

    def get_key_store_engine(self) -> Engine:
        """Get the engine for the key store database.

        Returns:
            Engine: SQLAlchemy engine connected to the key store.
        """
        if self._db_url is None:
            return get_key_store_engine()
        if self._engine is None:
            self._engine = _create_engine(self._db_url)
        return self._engine


__all__ = [
    "get_key_store_engine",
    "SqlAlchemyDatabaseEngineAdapter",
]
