"""Sessions API endpoints."""

from tasty_client.api.base import BaseAPI
from tasty_client.models.common import DataEnvelope
from tasty_client.models.sessions import LoginInfo, SessionResult


class SessionsAPI(BaseAPI):
    """tastytrade Sessions API.

    The only endpoints that change the client's session state.
    """

    async def create_session(self, login_info: LoginInfo) -> SessionResult:
        """Log in and store the returned tokens on the session.

        Args:
            login_info: Login name plus password or remember token

        Returns:
            SessionResult with the user and the issued tokens
        """
        exchange = await self._no_auth_request(
            "POST",
            "/sessions",
            json_body=login_info,
            result=DataEnvelope[SessionResult],
        )
        result = self._expect(exchange).data
        self.session.update(result)
        return result

    async def validate_session(self) -> SessionResult:
        """Check that the current session token is still accepted."""
        envelope = await self._post("/sessions/validate", DataEnvelope[SessionResult])
        return envelope.data

    async def destroy_session(self) -> None:
        """Log out and clear the session tokens."""
        exchange = await self._request("DELETE", "/sessions")
        exchange.unwrap()
        self.session.clear()
