"""Domain models for account key material."""

from dataclasses import dataclass


@dataclass(frozen=True)
class KeyPair:
    """ed25519 key pair encoded as ``ed25519:<base58>`` strings."""

    public_key: str
    secret_key: str

    def __repr__(self) -> str:
        return f"KeyPair(public_key={self.public_key!r}, secret_key='***')"


@dataclass(frozen=True)
class KeyMaterial:
    """Public key used to initialize an account.

    Attributes:
        public_key: Encoded public key sent to the network.
        key_pair: Locally generated pair, None when the caller supplied the
            public key and keeps the private half elsewhere.
    """

    public_key: str
    key_pair: KeyPair | None = None

    @property
    def locally_owned(self) -> bool:
        """Return True when this process is responsible for the secret key."""
        return self.key_pair is not None

    @classmethod
    def supplied(cls, public_key: str) -> "KeyMaterial":
        return cls(public_key=public_key)

    @classmethod
    def generated(cls, key_pair: KeyPair) -> "KeyMaterial":
        return cls(public_key=key_pair.public_key, key_pair=key_pair)


__all__ = ["KeyPair", "KeyMaterial"]
