"""Session state for an authenticated client."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from tasty_client.exceptions import InvalidSessionError

if TYPE_CHECKING:
    from tasty_client.models.sessions import SessionResult


@dataclass
class Session:
    """Tokens for the current login.

    Created empty, filled by a successful login and cleared by logout.
    Each client owns its own instance.
    """

    session_token: str | None = None
    remember_token: str | None = None

    @property
    def is_valid(self) -> bool:
        """Check whether a session token is held."""
        return self.session_token is not None

    def update(self, result: SessionResult) -> None:
        """Store the tokens returned by a login."""
        self.session_token = result.session_token
        if result.remember_token is not None:
            self.remember_token = result.remember_token

    def clear(self) -> None:
        self.session_token = None
        self.remember_token = None

    def auth_headers(self) -> dict[str, str]:
        """Headers authorizing a request with the current token.

        Raises:
            InvalidSessionError: If no session token is held
        """
        if self.session_token is None:
            raise InvalidSessionError()
        return {"Authorization": self.session_token}
