"""Key store writing NEAR-style credential files.

Layout: ``<credentials_dir>/<network_id>/<account_id>.json`` holding the
account id and the encoded public and private keys.
"""

import asyncio
import json
import os
from pathlib import Path

from near_accounts.application.ports.key_store import (
    KeyStoreError,
    KeyStorePort,
)
from near_accounts.domain.models.keys import KeyPair
from near_accounts.infrastructure.logging.logger import get_app_logger


CREDENTIAL_FILE_MODE = 0o600


class FileSystemKeyStore(KeyStorePort):
    """Unencrypted key store backed by JSON files."""

    def __init__(self, credentials_dir: Path | str, logger=None) -> None:
        """Initialize the key store.

        Args:
            credentials_dir: Root directory holding one folder per network.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._root = Path(credentials_dir).expanduser()
        self._logger = logger or get_app_logger()

    def key_path(self, network_id: str, account_id: str) -> Path:
        """Return the credential file path for an account."""
        return self._root / network_id / f"{account_id}.json"

    async def set_key(
        self,
        network_id: str,
        account_id: str,
        key_pair: KeyPair,
    ) -> None:
        await asyncio.to_thread(self._write, network_id, account_id, key_pair)

    async def get_key(self, network_id: str, account_id: str) -> KeyPair | None:
        return await asyncio.to_thread(self._read, network_id, account_id)

    def _write(self, network_id: str, account_id: str, key_pair: KeyPair) -> None:
        path = self.key_path(network_id, account_id)
        payload = {
            "account_id": account_id,
            "public_key": key_pair.public_key,
            "private_key": key_pair.secret_key,
        }
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            fd = os.open(
                path,
                os.O_WRONLY | os.O_CREAT | os.O_TRUNC,
                CREDENTIAL_FILE_MODE,
            )
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                json.dump(payload, handle)
        except (OSError, ValueError) as exc:
            raise KeyStoreError(
                f"Cannot write credentials to {path}: {exc}"
            ) from exc
        self._logger.info(f"Key pair for {account_id} saved to {path}")

    def _read(self, network_id: str, account_id: str) -> KeyPair | None:
        path = self.key_path(network_id, account_id)
        if not path.exists():
            return None
        try:
            payload = json.loads(path.read_text(encoding="utf-8"))
            return KeyPair(
                public_key=payload["public_key"],
                secret_key=payload["private_key"],
            )
        except (OSError, ValueError, KeyError, TypeError) as exc:
            raise KeyStoreError(
                f"Cannot read credentials from {path}: {exc}"
            ) from exc


__all__ = ["FileSystemKeyStore", "CREDENTIAL_FILE_MODE"]
