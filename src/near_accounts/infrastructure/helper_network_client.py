"""Network client creating accounts through an account helper service.

The helper exposes ``POST <helper_url>/account`` with a JSON body holding
``newAccountId`` and ``newAccountPublicKey``; it signs and funds the
creation transaction on the caller's behalf.
"""

from typing import Any

import httpx

from near_accounts.application.ports.network_client import (
    AccountCreationRejectedError,
    NetworkClientPort,
    NetworkTransportError,
)
from near_accounts.infrastructure.logging.logger import get_app_logger


def build_async_client(timeout_seconds: float) -> httpx.AsyncClient:
    """Create an ``httpx.AsyncClient`` with JSON defaults.

    Args:
        timeout_seconds: Timeout applied to connect, read and write.

    Returns:
        httpx.AsyncClient: Configured client; callers own its lifetime.
    """
    return httpx.AsyncClient(
        timeout=httpx.Timeout(timeout_seconds),
        headers={
            "Accept": "application/json",
            "Content-Type": "application/json",
        },
    )


class HelperNetworkClient(NetworkClientPort):
    """NetworkClientPort implementation backed by an account helper."""

    def __init__(
        self,
        helper_url: str,
        timeout_seconds: float = 30.0,
        initial_balance: int | None = None,
        client: httpx.AsyncClient | None = None,
        logger=None,
    ) -> None:
        """Initialize the client.

        Args:
            helper_url: Base URL of the helper service.
            timeout_seconds: Request timeout when no client is supplied.
            initial_balance: Optional funding amount in yocto units.
            client: Optional preconfigured client, mainly for tests.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._helper_url = helper_url.rstrip("/")
        self._timeout_seconds = timeout_seconds
        self._initial_balance = initial_balance
        self._client = client
        self._logger = logger or get_app_logger()

    @property
    def account_url(self) -> str:
        return f"{self._helper_url}/account"

    def _payload(self, account_id: str, public_key: str) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "newAccountId": account_id,
            "newAccountPublicKey": public_key,
        }
        if self._initial_balance is not None:
            payload["initialBalance"] = str(self._initial_balance)
        return payload

    async def create_account(self, account_id: str, public_key: str) -> None:
        """Ask the helper to create ``account_id`` with ``public_key``.

        Raises:
            AccountCreationRejectedError: On HTTP 4xx answers.
            NetworkTransportError: On HTTP 5xx answers or transport errors.
        """
        payload = self._payload(account_id, public_key)
        self._logger.info(
            f"Requesting creation of {account_id} at {self.account_url}"
        )
        try:
            if self._client is not None:
                response = await self._client.post(
                    self.account_url,
                    json=payload,
                )
            else:
                async with build_async_client(self._timeout_seconds) as client:
                    response = await client.post(self.account_url, json=payload)
        except httpx.TransportError as exc:
            self._logger.error(
                f"Helper request for {account_id} failed: {exc!r}"
            )
            raise NetworkTransportError(
                f"Cannot reach account helper at {self._helper_url}: {exc}"
            ) from exc

        if response.is_success:
            return
        detail = response.text.strip() or response.reason_phrase
        self._logger.warning(
            f"Helper answered {response.status_code} for {account_id}: {detail}"
        )
        if response.is_client_error:
            raise AccountCreationRejectedError(
                f"Account {account_id} was rejected by the network: {detail}"
            )
        raise NetworkTransportError(
            f"Account helper failed with HTTP {response.status_code}: {detail}"
        )


__all__ = ["HelperNetworkClient", "build_async_client"]
