"""Domain models describing the result of an account provisioning run."""

from dataclasses import dataclass
from enum import Enum

from near_accounts.domain.models.keys import KeyPair


class ProvisionState(str, Enum):
    """States of a provisioning run; only terminal ones reach a result."""

    START = "start"
    VALIDATED = "validated"
    KEY_RESOLVED = "key_resolved"
    ACCOUNT_CREATED = "account_created"
    KEY_PERSISTED = "key_persisted"
    DONE = "done"
    REJECTED = "rejected"
    CREATION_FAILED = "creation_failed"
    PERSISTENCE_FAILED = "persistence_failed"


class ProvisionErrorKind(str, Enum):
    """Failure categories, ordered by operational severity."""

    INVALID_NAME = "invalid_name"
    CREATION_FAILED = "creation_failed"
    PERSISTENCE_FAILED = "persistence_failed"


class CreationFailureReason(str, Enum):
    """Why the network refused or could not process the creation."""

    REJECTED = "rejected"
    TRANSPORT = "transport"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class ProvisionError:
    """Structured failure returned by the provisioner.

    Attributes:
        kind: Failure category.
        message: Message suitable for display to the operator.
        reason: Creation failure detail, set only for CREATION_FAILED.
        key_pair: Generated key pair that could not be stored, set only for
            PERSISTENCE_FAILED so the operator can recover it manually.
    """

    kind: ProvisionErrorKind
    message: str
    reason: CreationFailureReason | None = None
    key_pair: KeyPair | None = None


@dataclass(frozen=True)
class AccountConfirmation:
    """Confirmation that an account exists on the selected network."""

    account_id: str
    network_id: str


@dataclass(frozen=True)
class ProvisionResult:
    """Outcome of a provisioning run."""

    account_id: str
    network_id: str
    state: ProvisionState
    confirmation: AccountConfirmation | None = None
    error: ProvisionError | None = None
    warning: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def rejected(
        cls,
        account_id: str,
        network_id: str,
        message: str,
    ) -> "ProvisionResult":
        """Build the terminal result for a naming rejection."""
        return cls(
            account_id=account_id,
            network_id=network_id,
            state=ProvisionState.REJECTED,
            error=ProvisionError(
                kind=ProvisionErrorKind.INVALID_NAME,
                message=message,
            ),
        )


__all__ = [
    "ProvisionState",
    "ProvisionErrorKind",
    "CreationFailureReason",
    "ProvisionError",
    "AccountConfirmation",
    "ProvisionResult",
]
