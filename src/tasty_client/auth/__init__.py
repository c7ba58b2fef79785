"""Session handling for the tastytrade API."""

from tasty_client.auth.session import Session
from tasty_client.auth.tokens import TokenStore

__all__ = ["Session", "TokenStore"]
