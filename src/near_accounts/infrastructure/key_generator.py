"""ed25519 key pair generation."""

import base58
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey

from near_accounts.application.ports.key_store import KeyPairGeneratorPort
from near_accounts.domain.models.keys import KeyPair


KEY_TYPE_PREFIX = "ed25519:"


def encode_key(raw: bytes) -> str:
    """Encode raw key bytes as ``ed25519:<base58>``."""
    return KEY_TYPE_PREFIX + base58.b58encode(raw).decode("ascii")


def decode_key(encoded: str) -> bytes:
    """Decode an ``ed25519:<base58>`` string into raw bytes.

    Raises:
        ValueError: If the key type prefix is missing or unsupported.
    """
    key_type, sep, data = encoded.partition(":")
    if not sep:
        return base58.b58decode(encoded)
    if key_type != "ed25519":
        raise ValueError(f"Unsupported key type: {key_type}")
    return base58.b58decode(data)


class Ed25519KeyPairGenerator(KeyPairGeneratorPort):
    """Generate key pairs with the ``cryptography`` ed25519 backend.

    The secret key holds the 32-byte seed followed by the 32-byte public key,
    the layout expected by NEAR credential files.
    """

    def generate(self) -> KeyPair:
        private_key = Ed25519PrivateKey.generate()
        seed = private_key.private_bytes_raw()
        public = private_key.public_key().public_bytes_raw()
        return KeyPair(
            public_key=encode_key(public),
            secret_key=encode_key(seed + public),
        )


__all__ = [
    "Ed25519KeyPairGenerator",
    "encode_key",
    "decode_key",
    "KEY_TYPE_PREFIX",
]
