"""Tests for infrastructure settings."""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from near_accounts.infrastructure import settings as settings_module
from near_accounts.infrastructure.settings import NearSettings


_ENV_VARS = (
    "NEAR_ENV",
    "NEAR_HELPER_URL",
    "NEAR_KEY_STORE_BACKEND",
    "NEAR_CREDENTIALS_DIR",
    "NEAR_KEY_STORE_DB_URL",
    "NEAR_HTTP_TIMEOUT_SECONDS",
)


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch):
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr(settings_module.dotenv, "load_dotenv", lambda: None)
    fake_logger = MagicMock()
    monkeypatch.setattr(settings_module, "get_app_logger", lambda: fake_logger)
    return fake_logger


def test_from_env_uses_defaults() -> None:
    """Without environment variables the default network is selected."""
    settings = NearSettings.from_env()

    assert settings.network_id == "default"
    assert settings.helper_url == "https://helper.testnet.near.org"
    assert settings.key_store_backend == "filesystem"
    assert settings.credentials_dir == Path("~/.near-credentials").expanduser()
    assert settings.key_store_db_url is None
    assert settings.http_timeout_seconds == 30.0


def test_from_env_reads_network_and_overrides(
    monkeypatch,
    tmp_path: Path,
) -> None:
    """Environment variables override every default."""
    monkeypatch.setenv("NEAR_ENV", "production")
    monkeypatch.setenv("NEAR_HELPER_URL", "https://helper.example.org/")
    monkeypatch.setenv("NEAR_KEY_STORE_BACKEND", " SQLAlchemy ")
    monkeypatch.setenv("NEAR_CREDENTIALS_DIR", str(tmp_path))
    monkeypatch.setenv("NEAR_KEY_STORE_DB_URL", "sqlite:///keys.db")
    monkeypatch.setenv("NEAR_HTTP_TIMEOUT_SECONDS", "5")

    settings = NearSettings.from_env()

    assert settings.network_id == "production"
    assert settings.helper_url == "https://helper.example.org"
    assert settings.key_store_backend == "sqlalchemy"
    assert settings.credentials_dir == tmp_path
    assert settings.key_store_db_url == "sqlite:///keys.db"
    assert settings.http_timeout_seconds == 5.0


def test_explicit_network_wins_over_env(monkeypatch) -> None:
    """The network_id argument takes precedence over NEAR_ENV."""
    monkeypatch.setenv("NEAR_ENV", "production")

    settings = NearSettings.from_env(network_id="betanet")

    assert settings.network_id == "betanet"
    assert settings.helper_url == "https://helper.betanet.near.org"


def test_unknown_network_has_no_helper() -> None:
    """Custom networks need an explicit NEAR_HELPER_URL."""
    settings = NearSettings.from_env(network_id="ci-staging")

    assert settings.helper_url is None


def test_invalid_timeout_falls_back_with_warning(
    monkeypatch,
    _isolated_env,
) -> None:
    """A malformed timeout is logged and replaced by the default."""
    monkeypatch.setenv("NEAR_HTTP_TIMEOUT_SECONDS", "soon")

    settings = NearSettings.from_env()

    assert settings.http_timeout_seconds == 30.0
    _isolated_env.warning.assert_called_once()


def test_unknown_backend_is_logged(monkeypatch, _isolated_env) -> None:
    """An unsupported backend name is kept but reported."""
    monkeypatch.setenv("NEAR_KEY_STORE_BACKEND", "vault")

    settings = NearSettings.from_env()

    assert settings.key_store_backend == "vault"
    _isolated_env.warning.assert_called_once()
