"""Domain models package."""

from .keys import KeyMaterial, KeyPair
from .outcomes import Accepted, Rejected, ValidationOutcome
from .provisioning import (
    AccountConfirmation,
    CreationFailureReason,
    ProvisionError,
    ProvisionErrorKind,
    ProvisionResult,
    ProvisionState,
)

__all__ = [
    "Accepted",
    "Rejected",
    "ValidationOutcome",
    "KeyPair",
    "KeyMaterial",
    "AccountConfirmation",
    "CreationFailureReason",
    "ProvisionError",
    "ProvisionErrorKind",
    "ProvisionResult",
    "ProvisionState",
]
