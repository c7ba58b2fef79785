"""tastytrade API client library.

A typed, async Python client for the tastytrade REST API.

Example:
    from tasty_client import TastyClient

    async with TastyClient.certification() as client:
        # Authenticate (first time)
        await client.login("username", "password", remember_me=True)
        client.save_session()

        # Subsequent runs - load saved session
        if client.load_session():
            await client.sessions.validate_session()

        # Use the client
        accounts = await client.customers.get_customer_accounts("me")
        orders = await client.orders.get_live_orders(accounts[0].account_number)
        hits = await client.instruments.symbol_search("BRK/B")
"""

from tasty_client.api.base import Exchange
from tasty_client.auth import Session, TokenStore
from tasty_client.client import TastyClient
from tasty_client.codec import ERROR_STATUS_CODES
from tasty_client.config import TastyConfig
from tasty_client.exceptions import (
    ClientSideError,
    InvalidSessionError,
    TastyAPIError,
    TastyError,
)
from tasty_client.symbology import OCCSymbol, OptionType

__version__ = "0.1.0"

__all__ = [
    # Main client
    "TastyClient",
    "TastyConfig",
    "Exchange",
    "ERROR_STATUS_CODES",
    # Session
    "Session",
    "TokenStore",
    # Symbology
    "OCCSymbol",
    "OptionType",
    # Exceptions
    "ClientSideError",
    "InvalidSessionError",
    "TastyAPIError",
    "TastyError",
]
