"""Domain services package."""

from .validation import (
    NamingValidator,
    root_label,
    split_account_id,
    validate_account_id,
)

__all__ = [
    "NamingValidator",
    "root_label",
    "split_account_id",
    "validate_account_id",
]
