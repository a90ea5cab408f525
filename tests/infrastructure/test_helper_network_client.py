"""Tests for the account helper network client."""

import json
from unittest.mock import MagicMock

import httpx
import pytest

from near_accounts.application.ports.network_client import (
    AccountCreationRejectedError,
    NetworkTransportError,
)
from near_accounts.infrastructure.helper_network_client import (
    HelperNetworkClient,
)


def _client_for(handler) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
async def test_create_account_posts_to_helper() -> None:
    """The helper receives the new account id and public key."""
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"ok": True})

    async with _client_for(handler) as http_client:
        client = HelperNetworkClient(
            "https://helper.example.org/",
            client=http_client,
            logger=MagicMock(),
        )
        await client.create_account("app.alice.test", "ed25519:pub")

    assert len(seen) == 1
    assert str(seen[0].url) == "https://helper.example.org/account"
    assert seen[0].method == "POST"
    assert json.loads(seen[0].content) == {
        "newAccountId": "app.alice.test",
        "newAccountPublicKey": "ed25519:pub",
    }


@pytest.mark.asyncio
async def test_initial_balance_is_sent_in_yocto_units() -> None:
    """A configured funding amount is forwarded as a string."""
    bodies: list[dict] = []

    def handler(request: httpx.Request) -> httpx.Response:
        bodies.append(json.loads(request.content))
        return httpx.Response(201)

    async with _client_for(handler) as http_client:
        client = HelperNetworkClient(
            "https://helper.example.org",
            initial_balance=10**26,
            client=http_client,
            logger=MagicMock(),
        )
        await client.create_account("app.alice.test", "ed25519:pub")

    assert bodies[0]["initialBalance"] == "100000000000000000000000000"


@pytest.mark.asyncio
async def test_client_error_means_rejected_account() -> None:
    """HTTP 4xx answers are rejections by the network."""

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(400, text="Account app.alice.test already exists")

    logger = MagicMock()
    async with _client_for(handler) as http_client:
        client = HelperNetworkClient(
            "https://helper.example.org",
            client=http_client,
            logger=logger,
        )
        with pytest.raises(AccountCreationRejectedError) as exc_info:
            await client.create_account("app.alice.test", "ed25519:pub")

    assert "already exists" in str(exc_info.value)
    logger.warning.assert_called_once()


@pytest.mark.asyncio
async def test_server_error_means_transport_failure() -> None:
    """HTTP 5xx answers are reported as transport failures."""

    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(503)

    async with _client_for(handler) as http_client:
        client = HelperNetworkClient(
            "https://helper.example.org",
            client=http_client,
            logger=MagicMock(),
        )
        with pytest.raises(NetworkTransportError) as exc_info:
            await client.create_account("app.alice.test", "ed25519:pub")

    assert "503" in str(exc_info.value)


@pytest.mark.asyncio
async def test_connection_errors_mean_transport_failure() -> None:
    """httpx transport errors are wrapped in NetworkTransportError."""

    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    logger = MagicMock()
    async with _client_for(handler) as http_client:
        client = HelperNetworkClient(
            "https://helper.example.org",
            client=http_client,
            logger=logger,
        )
        with pytest.raises(NetworkTransportError):
            await client.create_account("app.alice.test", "ed25519:pub")

    logger.error.assert_called_once()
