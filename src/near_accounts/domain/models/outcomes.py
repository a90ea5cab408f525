"""Outcome values produced by the naming validator."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Rejected:
    """The requested account name breaks a naming rule.

    Attributes:
        message: Human readable explanation for the rejection.
    """

    message: str


@dataclass(frozen=True)
class Accepted:
    """The requested account name is legal.

    Attributes:
        warning: Optional advisory message; never blocks provisioning.
    """

    warning: str | None = None


ValidationOutcome = Rejected | Accepted


__all__ = ["Rejected", "Accepted", "ValidationOutcome"]
