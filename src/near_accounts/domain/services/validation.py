"""Naming rules for top-level accounts and subaccounts.

Account identifiers form a dot-separated hierarchy (``app.alice.test``).
A single label is a top-level account and must be at least
``TLA_MIN_LENGTH`` characters long. A subaccount must end with the full
identifier of its master account. When the selected network has a known
root-label convention, a mismatch produces an advisory warning only.
"""

from collections.abc import Mapping
from types import MappingProxyType

from near_accounts.domain.constants import (
    ACCOUNT_SEPARATOR,
    DEFAULT_NETWORK_SUFFIXES,
    TLA_MIN_LENGTH,
)
from near_accounts.domain.models.outcomes import (
    Accepted,
    Rejected,
    ValidationOutcome,
)


def split_account_id(account_id: str) -> list[str]:
    """Split an account identifier into its labels.

    Args:
        account_id: Identifier such as ``app.alice.test``.

    Returns:
        list[str]: Labels in order; the last one is the root label.

    Raises:
        ValueError: If the identifier is empty.
    """
    if not account_id:
        raise ValueError("Account id must be a non-empty string")
    return account_id.split(ACCOUNT_SEPARATOR)


def root_label(account_id: str) -> str:
    """Return the last label of an account identifier."""
    return account_id.split(ACCOUNT_SEPARATOR)[-1]


class NamingValidator:
    """Decide whether an account name may be created under a master account.

    The validator holds no mutable state: the convention table is copied into
    a read-only mapping at construction.
    """

    def __init__(
        self,
        conventions: Mapping[str, str] = DEFAULT_NETWORK_SUFFIXES,
        min_top_level_length: int = TLA_MIN_LENGTH,
    ) -> None:
        """Initialize the validator.

        Args:
            conventions: Mapping from network id to its expected root label.
            min_top_level_length: Minimum length of a top-level account.
        """
        self._conventions = MappingProxyType(dict(conventions))
        self._min_length = min_top_level_length

    @property
    def conventions(self) -> Mapping[str, str]:
        return self._conventions

    def validate(
        self,
        account_id: str,
        master_account_id: str,
        network_id: str,
    ) -> ValidationOutcome:
        """Validate a requested account name.

        Args:
            account_id: Identifier of the account to create.
            master_account_id: Identifier of the account paying for creation.
            network_id: Selected network environment.

        Returns:
            ValidationOutcome: Rejected with a reason, or Accepted with an
            optional advisory warning.

        Raises:
            ValueError: If ``account_id`` is empty.
        """
        labels = split_account_id(account_id)
        if len(labels) == 1:
            return self._validate_top_level(labels[0])
        return self._validate_subaccount(labels, master_account_id, network_id)

    def _validate_top_level(self, name: str) -> ValidationOutcome:
        if len(name) < self._min_length:
            return Rejected(
                f"Top-level accounts must be greater than {self._min_length} "
                "characters.\n"
                "Note: this is for advanced usage only. Typical account names "
                "are of the form:\n"
                "app.alice.test, where the masterAccount shares the top-level "
                "account (.test)."
            )
        return Accepted()

    def _validate_subaccount(
        self,
        labels: list[str],
        master_account_id: str,
        network_id: str,
    ) -> ValidationOutcome:
        account_root = labels[-1]
        account_tla = ACCOUNT_SEPARATOR.join(labels[1:])
        if account_tla != master_account_id:
            return Rejected(
                "New account doesn't share the same top-level account. "
                f'Expecting account name to end in ".{master_account_id}".'
            )

        network_tla = self._conventions.get(network_id)
        if network_tla is None:
            return Accepted()
        master_root = root_label(master_account_id)
        if network_tla != master_root or network_tla != account_root:
            return Accepted(
                warning=(
                    f'In most cases, when connected to "{network_id}" both '
                    f'account and masterAccount will end in ".{network_tla}".'
                )
            )
        return Accepted()


_default_validator = NamingValidator()


def validate_account_id(
    account_id: str,
    master_account_id: str,
    network_id: str,
) -> ValidationOutcome:
    """Validate an account name against the default network conventions."""
    return _default_validator.validate(
        account_id,
        master_account_id,
        network_id,
    )


__all__ = [
    "NamingValidator",
    "validate_account_id",
    "split_account_id",
    "root_label",
]
