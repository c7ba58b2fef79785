"""Pydantic models for tastytrade API requests and responses."""

from tasty_client.models.accounts import (
    AccountBalance,
    AccountPosition,
    AccountPositionQuery,
    TradingStatus,
)
from tasty_client.models.common import (
    DataEnvelope,
    ItemList,
    ListEnvelope,
    Pagination,
    TastyModel,
)
from tasty_client.models.customers import (
    Account,
    AccountAuthorityEntry,
    Address,
    Customer,
    QuoteStreamerTokenAuthResult,
)
from tasty_client.models.errors import ErrorBody, ErrorDetail, ErrorEnvelope
from tasty_client.models.instruments import EquitiesQuery, Equity, SymbolData, TickSize
from tasty_client.models.orders import (
    BuyingPowerEffect,
    FeeCalculation,
    InstrumentType,
    NewOrder,
    NewOrderECR,
    NewOrderLeg,
    Order,
    OrderAction,
    OrderErrorResponse,
    OrderFill,
    OrderLeg,
    OrderResponse,
    OrdersQuery,
    OrderStatus,
    OrderSubmitEnvelope,
    OrderType,
    OrderWarning,
    PriceEffect,
    SortOrder,
    TimeInForce,
)
from tasty_client.models.sessions import LoginInfo, SessionResult, User

__all__ = [
    # Envelopes
    "DataEnvelope",
    "ItemList",
    "ListEnvelope",
    "Pagination",
    "TastyModel",
    # Errors
    "ErrorBody",
    "ErrorDetail",
    "ErrorEnvelope",
    # Sessions
    "LoginInfo",
    "SessionResult",
    "User",
    # Customers
    "Account",
    "AccountAuthorityEntry",
    "Address",
    "Customer",
    "QuoteStreamerTokenAuthResult",
    # Accounts
    "AccountBalance",
    "AccountPosition",
    "AccountPositionQuery",
    "TradingStatus",
    # Instruments
    "EquitiesQuery",
    "Equity",
    "SymbolData",
    "TickSize",
    # Order enums
    "InstrumentType",
    "OrderAction",
    "OrderStatus",
    "OrderType",
    "PriceEffect",
    "SortOrder",
    "TimeInForce",
    # Order models
    "BuyingPowerEffect",
    "FeeCalculation",
    "NewOrder",
    "NewOrderECR",
    "NewOrderLeg",
    "Order",
    "OrderErrorResponse",
    "OrderFill",
    "OrderLeg",
    "OrderResponse",
    "OrderSubmitEnvelope",
    "OrderWarning",
    "OrdersQuery",
]
