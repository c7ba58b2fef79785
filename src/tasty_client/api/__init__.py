"""tastytrade API client modules."""

from tasty_client.api.accounts import AccountsAPI
from tasty_client.api.base import BaseAPI, Exchange
from tasty_client.api.customers import CustomersAPI
from tasty_client.api.instruments import InstrumentsAPI
from tasty_client.api.orders import OrdersAPI
from tasty_client.api.sessions import SessionsAPI

__all__ = [
    "AccountsAPI",
    "BaseAPI",
    "CustomersAPI",
    "Exchange",
    "InstrumentsAPI",
    "OrdersAPI",
    "SessionsAPI",
]
