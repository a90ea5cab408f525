"""Ports for key material persistence and generation."""

from typing import Protocol

from near_accounts.domain.models.keys import KeyPair


class KeyStoreError(Exception):
    """Raised when a key pair cannot be persisted or read."""


class KeyStorePort(Protocol):
    """Port exposing per-network, per-account key storage."""

    async def set_key(
        self,
        network_id: str,
        account_id: str,
        key_pair: KeyPair,
    ) -> None:
        """Persist the key pair of ``account_id`` on ``network_id``.

        Raises:
            KeyStoreError: If the key pair cannot be written.
        """

    async def get_key(self, network_id: str, account_id: str) -> KeyPair | None:
        """Return the stored key pair, or None when none is stored."""


class KeyPairGeneratorPort(Protocol):
    """Port producing fresh ed25519 key pairs."""

    def generate(self) -> KeyPair:
        """Return a new random key pair."""


__all__ = ["KeyStoreError", "KeyStorePort", "KeyPairGeneratorPort"]
