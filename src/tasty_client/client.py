"""Main tastytrade client."""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx

from tasty_client.api.accounts import AccountsAPI
from tasty_client.api.customers import CustomersAPI
from tasty_client.api.instruments import InstrumentsAPI
from tasty_client.api.orders import OrdersAPI
from tasty_client.api.sessions import SessionsAPI
from tasty_client.auth import Session, TokenStore
from tasty_client.config import TastyConfig
from tasty_client.models.sessions import LoginInfo, SessionResult

if TYPE_CHECKING:
    from types import TracebackType


class TastyClient:
    """tastytrade API client.

    Provides a unified interface to the tastytrade REST API. Each client
    owns its own session; two clients only share tokens when given the same
    ``Session`` object.

    Pooled, as an async context manager:
        async with TastyClient.certification() as client:
            await client.login("user", "password")
            accounts = await client.customers.get_customer_accounts("me")

    Pooled, managed by hand:
        client = TastyClient(config)
        await client.open()
        try:
            orders = await client.orders.get_live_orders("5WT00000")
        finally:
            await client.close()

    Sharing a caller-owned pool (left open by close()):
        client = TastyClient(config, http_client=app_http_client)
    """

    def __init__(
        self,
        config: TastyConfig | None = None,
        *,
        session: Session | None = None,
        token_store: TokenStore | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Create a client for one environment.

        Args:
            config: Production or certification settings (default: production)
            session: Tokens to start from (default: logged out)
            token_store: Where save_session/load_session keep tokens
            http_client: Caller-owned pool. Without one, requests use a pool
                opened by open() or the context manager, or a short-lived
                client per request.
        """
        self.config = config or TastyConfig()
        self.session = session if session is not None else Session()
        self.token_store = token_store or TokenStore()

        self._http_client = http_client
        self._owns_http_client = http_client is None

        self.sessions = SessionsAPI(self.config, self.session, http_client)
        self.customers = CustomersAPI(self.config, self.session, http_client)
        self.accounts = AccountsAPI(self.config, self.session, http_client)
        self.orders = OrdersAPI(self.config, self.session, http_client)
        self.instruments = InstrumentsAPI(self.config, self.session, http_client)

    def _set_http_client(self, http_client: httpx.AsyncClient | None) -> None:
        """Point every API module at the same pool."""
        self._http_client = http_client
        self.sessions.set_http_client(http_client)
        self.customers.set_http_client(http_client)
        self.accounts.set_http_client(http_client)
        self.orders.set_http_client(http_client)
        self.instruments.set_http_client(http_client)

    async def open(self) -> None:
        """Create the pooled client, unless one is already set or supplied."""
        if self._http_client is None and self._owns_http_client:
            http_client = httpx.AsyncClient(timeout=self.config.timeout)
            self._set_http_client(http_client)

    async def close(self) -> None:
        """Close the pool created by open(). A caller-owned pool stays open."""
        if self._owns_http_client and self._http_client is not None:
            await self._http_client.aclose()
            self._set_http_client(None)

    async def __aenter__(self) -> TastyClient:
        await self.open()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.close()

    @classmethod
    def production(cls, **kwargs) -> TastyClient:
        """Create a client for the production API."""
        return cls(TastyConfig.production(), **kwargs)

    @classmethod
    def certification(cls, **kwargs) -> TastyClient:
        """Create a client for the certification (sandbox) API."""
        return cls(TastyConfig.certification(), **kwargs)

    @classmethod
    def from_env(cls) -> TastyClient:
        """Create client from environment variables (see TastyConfig.from_env)."""
        return cls(TastyConfig.from_env())

    @property
    def websocket_url(self) -> str:
        """Account streamer websocket URL for the configured environment."""
        return self.config.websocket_url

    @property
    def is_authenticated(self) -> bool:
        """Check if the client holds a session token."""
        return self.session.is_valid

    async def login(
        self,
        login: str,
        password: str | None = None,
        *,
        remember_me: bool = False,
        remember_token: str | None = None,
    ) -> SessionResult:
        """Create a session with a password or a remember token."""
        return await self.sessions.create_session(
            LoginInfo(
                login=login,
                password=password,
                remember_me=remember_me,
                remember_token=remember_token,
            )
        )

    async def logout(self) -> None:
        """Destroy the session on the server and forget the tokens."""
        await self.sessions.destroy_session()

    def load_session(self) -> bool:
        """Load saved session tokens.

        Returns:
            True if tokens were loaded, False if nothing is saved
        """
        saved = self.token_store.load()
        if saved is None:
            return False
        self.session.session_token = saved.session_token
        self.session.remember_token = saved.remember_token
        return True

    def save_session(self) -> None:
        """Save current session tokens."""
        if self.session.is_valid:
            self.token_store.save(self.session)

    def clear_saved_session(self) -> None:
        """Remove saved session tokens."""
        self.token_store.clear()
