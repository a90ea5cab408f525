"""Tests for the key store factory."""

from dataclasses import replace
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from near_accounts.infrastructure import key_store_factory
from near_accounts.infrastructure.filesystem_key_store import (
    FileSystemKeyStore,
)
from near_accounts.infrastructure.settings import NearSettings
from near_accounts.infrastructure.sqlalchemy_key_store import (
    SqlAlchemyKeyStore,
)


def test_filesystem_backend_uses_credentials_dir(tmp_path: Path) -> None:
    """The default backend writes credential files."""
    settings = NearSettings(credentials_dir=tmp_path)

    store = key_store_factory.create_key_store(settings, logger=MagicMock())

    assert isinstance(store, FileSystemKeyStore)
    assert store.key_path("default", "a.test") == tmp_path / "default" / "a.test.json"


def test_sqlalchemy_backend_uses_db_port() -> None:
    """An injected engine port is used as-is."""
    settings = NearSettings(key_store_backend="sqlalchemy")

    store = key_store_factory.create_key_store(
        settings,
        db_port=MagicMock(),
        logger=MagicMock(),
    )

    assert isinstance(store, SqlAlchemyKeyStore)


def test_sqlalchemy_backend_builds_adapter_from_url(monkeypatch) -> None:
    """Without a port the configured URL builds the engine adapter."""
    captured = {}

    def _fake_adapter(db_url):
        captured["db_url"] = db_url
        return MagicMock()

    monkeypatch.setattr(
        key_store_factory,
        "SqlAlchemyDatabaseEngineAdapter",
        _fake_adapter,
    )
    settings = NearSettings(
        key_store_backend="sqlalchemy",
        key_store_db_url="sqlite:///keys.db",
    )

    store = key_store_factory.create_key_store(settings, logger=MagicMock())

    assert isinstance(store, SqlAlchemyKeyStore)
    assert captured["db_url"] == "sqlite:///keys.db"


def test_sqlalchemy_backend_requires_url() -> None:
    """The SQL backend cannot be built without a database URL."""
    settings = NearSettings(key_store_backend="sqlalchemy")

    with pytest.raises(RuntimeError):
        key_store_factory.create_key_store(settings, logger=MagicMock())


def test_unknown_backend_raises_value_error() -> None:
    """Unsupported backends are refused."""
    settings = replace(NearSettings(), key_store_backend="vault")

    with pytest.raises(ValueError):
        key_store_factory.create_key_store(settings, logger=MagicMock())
