"""Tests for HTTP pool ownership and the per-request fallback."""

from unittest.mock import AsyncMock, patch

import httpx
import pytest

from tasty_client import Exchange, TastyClient, TastyConfig
from tasty_client.models import ListEnvelope, Order


@pytest.fixture
def config() -> TastyConfig:
    """Create a test configuration."""
    return TastyConfig(sandbox=True, timeout=12.5)


def _modules(client: TastyClient) -> list:
    return [client.sessions, client.customers, client.accounts, client.orders, client.instruments]


class TestContextManager:
    """async with TastyClient(...)."""

    async def test_context_manager_creates_http_client(self, config: TastyConfig) -> None:
        """Entering opens a pool using the configured timeout."""
        async with TastyClient(config) as client:
            assert client._http_client is not None
            assert isinstance(client._http_client, httpx.AsyncClient)
            assert client._http_client.timeout.read == 12.5

    async def test_context_manager_closes_http_client(self, config: TastyConfig) -> None:
        """Leaving closes the pool and detaches it."""
        async with TastyClient(config) as client:
            http_client = client._http_client
            assert http_client is not None

        assert client._http_client is None
        assert http_client.is_closed

    async def test_context_manager_propagates_to_api_modules(self, config: TastyConfig) -> None:
        """Every API module shares the pool."""
        async with TastyClient(config) as client:
            http_client = client._http_client
            for module in _modules(client):
                assert module._http_client is http_client


class TestExternalHttpClient:
    """Caller-owned pools."""

    async def test_external_client_is_used(self, config: TastyConfig) -> None:
        """A supplied pool reaches every API module."""
        external_client = httpx.AsyncClient(timeout=60.0)
        try:
            client = TastyClient(config, http_client=external_client)

            assert client._http_client is external_client
            for module in _modules(client):
                assert module._http_client is external_client
        finally:
            await external_client.aclose()

    async def test_external_client_not_closed_by_context_manager(
        self, config: TastyConfig
    ) -> None:
        """Leaving the context does not close a caller-owned pool."""
        external_client = httpx.AsyncClient(timeout=60.0)
        try:
            async with TastyClient(config, http_client=external_client) as client:
                assert client._http_client is external_client

            assert not external_client.is_closed
        finally:
            await external_client.aclose()

    async def test_external_client_not_closed_by_close_method(self, config: TastyConfig) -> None:
        """close() leaves a caller-owned pool open."""
        external_client = httpx.AsyncClient(timeout=60.0)
        try:
            client = TastyClient(config, http_client=external_client)
            await client.close()

            assert not external_client.is_closed
        finally:
            await external_client.aclose()


class TestExplicitLifecycle:
    """open() and close() called by hand."""

    async def test_open_creates_http_client(self, config: TastyConfig) -> None:
        """open() creates the pool."""
        client = TastyClient(config)
        assert client._http_client is None

        await client.open()
        assert isinstance(client._http_client, httpx.AsyncClient)

        await client.close()

    async def test_close_clears_api_modules(self, config: TastyConfig) -> None:
        """close() detaches the pool from every module."""
        client = TastyClient(config)
        await client.open()
        await client.close()

        for module in _modules(client):
            assert module._http_client is None

    async def test_multiple_open_calls_are_idempotent(self, config: TastyConfig) -> None:
        """A second open() keeps the first pool."""
        client = TastyClient(config)
        await client.open()
        first_http_client = client._http_client

        await client.open()
        assert client._http_client is first_http_client

        await client.close()


class TestFallbackBehavior:
    """Requests made without a pool."""

    async def test_no_pooling_without_open(self, config: TastyConfig) -> None:
        """No pool exists until open() is called."""
        client = TastyClient(config)
        assert client._http_client is None
        assert client.accounts._http_client is None

    async def test_api_modules_work_without_pooling(self, config: TastyConfig) -> None:
        """Endpoint methods still run without a pool."""
        client = TastyClient(config)

        with patch.object(client.orders, "_request", new_callable=AsyncMock) as mock_request:
            mock_request.return_value = Exchange(data=ListEnvelope[Order]())

            orders = await client.orders.get_live_orders("5WT0001")

            assert orders == []
            mock_request.assert_called_once()

    async def test_per_request_client_uses_configured_timeout(self, config: TastyConfig) -> None:
        """Unpooled requests open a short-lived client with the configured timeout."""
        client = TastyClient(config, session=None)
        client.session.session_token = "abc"

        seen: list[httpx.AsyncClient] = []
        original_init = httpx.AsyncClient.__init__

        def spy_init(self, *args, **kwargs):
            kwargs["transport"] = httpx.MockTransport(lambda request: httpx.Response(204))
            original_init(self, *args, **kwargs)
            seen.append(self)

        with patch.object(httpx.AsyncClient, "__init__", spy_init):
            exchange = await client.customers._request("GET", "/customers/me")

        assert exchange.status_code == 204
        assert len(seen) == 1
        assert seen[0].timeout.read == 12.5
        assert seen[0].is_closed


class TestOwnershipTracking:
    """Who closes the pool."""

    async def test_owns_client_when_no_external(self, config: TastyConfig) -> None:
        """A client owns the pool it creates."""
        client = TastyClient(config)
        assert client._owns_http_client is True

    async def test_does_not_own_external_client(self, config: TastyConfig) -> None:
        """A supplied pool is never owned."""
        external_client = httpx.AsyncClient()
        try:
            client = TastyClient(config, http_client=external_client)
            assert client._owns_http_client is False
        finally:
            await external_client.aclose()


class TestSessionIsolation:
    """Each client owns its own session."""

    async def test_clients_do_not_share_tokens(self, config: TastyConfig) -> None:
        first = TastyClient(config)
        second = TastyClient(config)

        first.session.session_token = "first-token"

        assert second.session.session_token is None
        assert first.customers.session is first.session
