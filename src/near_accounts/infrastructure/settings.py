"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os
from pathlib import Path
from typing import Optional

import dotenv

from near_accounts.infrastructure.logging.logger import get_app_logger


DEFAULT_NETWORK_ID = "default"

DEFAULT_HELPER_URLS = {
    "production": "https://helper.mainnet.near.org",
    "mainnet": "https://helper.mainnet.near.org",
    "default": "https://helper.testnet.near.org",
    "development": "https://helper.testnet.near.org",
    "testnet": "https://helper.testnet.near.org",
    "devnet": "https://helper.devnet.near.org",
    "betanet": "https://helper.betanet.near.org",
    "local": "http://localhost:3000",
}

KEY_STORE_BACKENDS = ("filesystem", "sqlalchemy")


@dataclass(frozen=True)
class NearSettings:
    """Settings for the network client and key store adapters.

    Attributes:
        network_id: Selected network environment.
        helper_url: Base URL of the account helper service, if known.
        key_store_backend: Key store identifier (filesystem or sqlalchemy).
        credentials_dir: Root directory of the filesystem key store.
        key_store_db_url: SQLAlchemy URL of the SQL key store.
        http_timeout_seconds: Timeout applied to network client requests.
    """

    network_id: str = DEFAULT_NETWORK_ID
    helper_url: Optional[str] = DEFAULT_HELPER_URLS[DEFAULT_NETWORK_ID]
    key_store_backend: str = "filesystem"
    credentials_dir: Path = Path("~/.near-credentials").expanduser()
    key_store_db_url: Optional[str] = None
    http_timeout_seconds: float = 30.0

    @classmethod
    def from_env(cls, network_id: str | None = None) -> "NearSettings":
        """Build settings from environment variables.

        Args:
            network_id: Optional override for ``NEAR_ENV``.

        Returns:
            NearSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        resolved_network = (
            network_id or os.getenv("NEAR_ENV") or DEFAULT_NETWORK_ID
        ).strip()
        helper_url = os.getenv("NEAR_HELPER_URL") or DEFAULT_HELPER_URLS.get(
            resolved_network
        )
        backend = os.getenv("NEAR_KEY_STORE_BACKEND", "filesystem")
        backend = backend.strip().lower()
        if backend not in KEY_STORE_BACKENDS:
            logger.warning(
                f"Unknown NEAR_KEY_STORE_BACKEND '{backend}'. "
                f"Expected one of {', '.join(KEY_STORE_BACKENDS)}."
            )
        credentials_dir = Path(
            os.getenv("NEAR_CREDENTIALS_DIR", "~/.near-credentials")
        ).expanduser()
        timeout = cls._parse_timeout(
            os.getenv("NEAR_HTTP_TIMEOUT_SECONDS"),
            logger=logger,
        )
        return cls(
            network_id=resolved_network,
            helper_url=helper_url.rstrip("/") if helper_url else None,
            key_store_backend=backend,
            credentials_dir=credentials_dir,
            key_store_db_url=os.getenv("NEAR_KEY_STORE_DB_URL") or None,
            http_timeout_seconds=timeout,
        )

    @staticmethod
    def _parse_timeout(raw_value: str | None, logger) -> float:
        """Parse the HTTP timeout, falling back to the default on bad input.

        Args:
            raw_value: Raw environment value.
            logger: Logger used for warnings.

        Returns:
            float: Timeout in seconds.
        """
        default = NearSettings.http_timeout_seconds
        if not raw_value:
            return default
        try:
            value = float(raw_value)
        except ValueError:
            logger.warning(
                f"Invalid NEAR_HTTP_TIMEOUT_SECONDS '{raw_value}'; "
                f"using {default}."
            )
            return default
        if value <= 0:
            logger.warning(
                f"NEAR_HTTP_TIMEOUT_SECONDS must be positive; using {default}."
            )
            return default
        return value


__all__ = ["NearSettings", "DEFAULT_HELPER_URLS", "KEY_STORE_BACKENDS"]
