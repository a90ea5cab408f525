"""Tests for the SQLAlchemy key store."""

from pathlib import Path
from unittest.mock import MagicMock

import pytest
from sqlalchemy import create_engine
from sqlalchemy.exc import OperationalError

from near_accounts.application.ports.key_store import KeyStoreError
from near_accounts.domain.models.keys import KeyPair
from near_accounts.infrastructure.sqlalchemy_key_store import (
    SqlAlchemyKeyStore,
)


class _SqliteDbPort:
    def __init__(self, path: Path) -> None:
        self.engine = create_engine(f"sqlite:///{path}", future=True)

    def get_key_store_engine(self):
        return self.engine


@pytest.mark.asyncio
async def test_set_key_then_get_key(tmp_path: Path) -> None:
    """Stored pairs are scoped per network and account."""
    store = SqlAlchemyKeyStore(
        _SqliteDbPort(tmp_path / "keys.db"),
        logger=MagicMock(),
    )
    key_pair = KeyPair(public_key="ed25519:pub", secret_key="ed25519:sec")

    await store.set_key("default", "app.alice.test", key_pair)

    assert await store.get_key("default", "app.alice.test") == key_pair
    assert await store.get_key("production", "app.alice.test") is None


@pytest.mark.asyncio
async def test_set_key_replaces_existing_pair(tmp_path: Path) -> None:
    """Writing twice keeps only the latest pair."""
    store = SqlAlchemyKeyStore(
        _SqliteDbPort(tmp_path / "keys.db"),
        logger=MagicMock(),
    )
    first = KeyPair(public_key="ed25519:one", secret_key="ed25519:one-s")
    second = KeyPair(public_key="ed25519:two", secret_key="ed25519:two-s")

    await store.set_key("default", "app.alice.test", first)
    await store.set_key("default", "app.alice.test", second)

    assert await store.get_key("default", "app.alice.test") == second


@pytest.mark.asyncio
async def test_database_errors_raise_key_store_error() -> None:
    """SQLAlchemy failures are reported through KeyStoreError."""
    engine = MagicMock()
    engine.begin.side_effect = OperationalError("stmt", {}, Exception("down"))
    db_port = MagicMock()
    db_port.get_key_store_engine.return_value = engine
    store = SqlAlchemyKeyStore(db_port, logger=MagicMock())

    with pytest.raises(KeyStoreError):
        await store.set_key(
            "default",
            "app.alice.test",
            KeyPair(public_key="p", secret_key="s"),
        )


@pytest.mark.asyncio
async def test_missing_database_driver_raises_key_store_error() -> None:
    """An engine that cannot load its driver is reported as KeyStoreError."""
    db_port = MagicMock()
    db_port.get_key_store_engine.side_effect = ModuleNotFoundError(
        "No module named 'psycopg'"
    )
    store = SqlAlchemyKeyStore(db_port, logger=MagicMock())

    with pytest.raises(KeyStoreError) as exc_info:
        await store.set_key(
            "default",
            "app.alice.test",
            KeyPair(public_key="p", secret_key="s"),
        )

    assert "psycopg" in str(exc_info.value)
