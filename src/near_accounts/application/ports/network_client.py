"""Port for the remote account-creation call."""

from typing import Protocol


class NetworkClientError(Exception):
    """Base error raised by network client adapters."""


class AccountCreationRejectedError(NetworkClientError):
    """The network refused the account (name taken, insufficient funds)."""


class NetworkTransportError(NetworkClientError):
    """The request could not be delivered or answered (connectivity, 5xx)."""


class NetworkClientPort(Protocol):
    """Port exposing account creation on the remote network."""

    async def create_account(self, account_id: str, public_key: str) -> None:
        """Create ``account_id`` initialized with ``public_key``.

        Raises:
            AccountCreationRejectedError: If the network rejects the request.
            NetworkTransportError: If the network cannot be reached.
        """


__all__ = [
    "NetworkClientError",
    "AccountCreationRejectedError",
    "NetworkTransportError",
    "NetworkClientPort",
]
