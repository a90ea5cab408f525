"""Domain constants for account naming rules."""

from types import MappingProxyType

TLA_MIN_LENGTH = 32

ACCOUNT_SEPARATOR = "."

# Networks missing from this table (local, test, ci, ci-staging) are exempt
# from the root-label convention check.
DEFAULT_NETWORK_SUFFIXES = MappingProxyType(
    {
        "production": "near",
        "default": "test",
        "development": "test",
        "devnet": "dev",
        "betanet": "beta",
    }
)


__all__ = ["TLA_MIN_LENGTH", "ACCOUNT_SEPARATOR", "DEFAULT_NETWORK_SUFFIXES"]
