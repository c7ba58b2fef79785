"""Order-related models."""

from datetime import date, datetime
from decimal import Decimal
from enum import StrEnum

from pydantic import Field

from tasty_client.models.common import TastyModel


class OrderType(StrEnum):
    """Order price types."""

    LIMIT = "Limit"
    MARKET = "Market"
    MARKETABLE_LIMIT = "Marketable Limit"
    STOP = "Stop"
    STOP_LIMIT = "Stop Limit"
    NOTIONAL_MARKET = "Notional Market"


class TimeInForce(StrEnum):
    """Order duration."""

    DAY = "Day"
    GTC = "GTC"
    GTD = "GTD"
    EXT = "Ext"
    GTC_EXT = "GTC Ext"
    IOC = "IOC"


class PriceEffect(StrEnum):
    """Whether a price is paid or received."""

    CREDIT = "Credit"
    DEBIT = "Debit"
    NONE = "None"


class OrderAction(StrEnum):
    """Leg actions."""

    BUY_TO_OPEN = "Buy to Open"
    BUY_TO_CLOSE = "Buy to Close"
    SELL_TO_OPEN = "Sell to Open"
    SELL_TO_CLOSE = "Sell to Close"
    BUY = "Buy"
    SELL = "Sell"


class InstrumentType(StrEnum):
    """Instrument types accepted in order legs."""

    EQUITY = "Equity"
    EQUITY_OPTION = "Equity Option"
    EQUITY_OFFERING = "Equity Offering"
    FUTURE = "Future"
    FUTURE_OPTION = "Future Option"
    CRYPTOCURRENCY = "Cryptocurrency"
    BOND = "Bond"
    WARRANT = "Warrant"
    FIXED_INCOME_SECURITY = "Fixed Income Security"
    INDEX = "Index"


class OrderStatus(StrEnum):
    """Order status values."""

    RECEIVED = "Received"
    ROUTED = "Routed"
    IN_FLIGHT = "In Flight"
    LIVE = "Live"
    CANCEL_REQUESTED = "Cancel Requested"
    REPLACE_REQUESTED = "Replace Requested"
    CONTINGENT = "Contingent"
    FILLED = "Filled"
    CANCELLED = "Cancelled"
    EXPIRED = "Expired"
    REJECTED = "Rejected"
    REMOVED = "Removed"
    PARTIALLY_REMOVED = "Partially Removed"


class SortOrder(StrEnum):
    ASC = "Asc"
    DESC = "Desc"


# =============================================================================
# Responses
# =============================================================================


class OrderFill(TastyModel):
    ext_group_fill_id: str | None = None
    ext_exec_id: str | None = None
    fill_id: str | None = None
    quantity: Decimal | None = None
    fill_price: Decimal | None = None
    filled_at: datetime | None = None
    destination_venue: str | None = None


class OrderLeg(TastyModel):
    """A leg of a placed order."""

    instrument_type: str
    symbol: str
    quantity: Decimal | None = None
    remaining_quantity: Decimal | None = None
    action: str
    fills: list[OrderFill] = Field(default_factory=list)


class Order(TastyModel):
    """A placed order."""

    id: int
    account_number: str
    time_in_force: str | None = None
    gtc_date: date | None = None
    order_type: str | None = None
    size: Decimal | None = None
    underlying_symbol: str | None = None
    underlying_instrument_type: str | None = None
    price: Decimal | None = None
    price_effect: str | None = None
    value: Decimal | None = None
    value_effect: str | None = None
    stop_trigger: Decimal | None = None
    status: str | None = None
    contingent_status: str | None = None
    confirmation_status: str | None = None
    cancellable: bool | None = None
    cancelled_at: datetime | None = None
    cancel_user_id: str | None = None
    cancel_username: str | None = None
    editable: bool | None = None
    edited: bool | None = None
    replacing_order_id: str | None = None
    replaces_order_id: str | None = None
    received_at: datetime | None = None
    updated_at: int | None = None
    in_flight_at: datetime | None = None
    live_at: datetime | None = None
    reject_reason: str | None = None
    user_id: str | None = None
    username: str | None = None
    terminal_at: datetime | None = None
    complex_order_id: int | None = None
    complex_order_tag: str | None = None
    preflight_id: str | None = None
    source: str | None = None
    legs: list[OrderLeg] = Field(default_factory=list)


class OrderWarning(TastyModel):
    """A preflight warning or error attached to an order response."""

    code: str = ""
    message: str = ""
    preflight_id: str | None = None


class BuyingPowerEffect(TastyModel):
    change_in_margin_requirement: Decimal | None = None
    change_in_margin_requirement_effect: str | None = None
    change_in_buying_power: Decimal | None = None
    change_in_buying_power_effect: str | None = None
    current_buying_power: Decimal | None = None
    current_buying_power_effect: str | None = None
    new_buying_power: Decimal | None = None
    new_buying_power_effect: str | None = None
    isolated_order_margin_requirement: Decimal | None = None
    isolated_order_margin_requirement_effect: str | None = None
    is_spread: bool | None = None
    impact: Decimal | None = None
    effect: str | None = None


class FeeCalculation(TastyModel):
    regulatory_fees: Decimal | None = None
    regulatory_fees_effect: str | None = None
    clearing_fees: Decimal | None = None
    clearing_fees_effect: str | None = None
    commission: Decimal | None = None
    commission_effect: str | None = None
    proprietary_index_option_fees: Decimal | None = None
    proprietary_index_option_fees_effect: str | None = None
    total_fees: Decimal | None = None
    total_fees_effect: str | None = None


class OrderResponse(TastyModel):
    """Result of submitting, dry-running or editing an order."""

    order: Order | None = None
    warnings: list[OrderWarning] = Field(default_factory=list)
    buying_power_effect: BuyingPowerEffect | None = None
    fee_calculation: FeeCalculation | None = None


class OrderErrorResponse(TastyModel):
    """Preflight failures returned alongside a successful submit response."""

    code: str = ""
    message: str = ""
    errors: list[OrderWarning] = Field(default_factory=list)


class OrderSubmitEnvelope(TastyModel):
    """Submit responses can carry both ``data`` and ``error``."""

    data: OrderResponse = Field(default_factory=OrderResponse)
    error: OrderErrorResponse | None = None
    context: str | None = None


# =============================================================================
# Requests
# =============================================================================


class NewOrderLeg(TastyModel):
    """A leg of an order to submit."""

    instrument_type: InstrumentType
    symbol: str
    quantity: Decimal | None = None
    action: OrderAction


class NewOrder(TastyModel):
    """An order to submit."""

    time_in_force: TimeInForce
    gtc_date: date | None = None
    order_type: OrderType
    stop_trigger: Decimal | None = None
    price: Decimal | None = None
    price_effect: PriceEffect | None = None
    value: Decimal | None = None
    value_effect: PriceEffect | None = None
    source: str | None = None
    partition_key: str | None = None
    preflight_id: str | None = None
    automated_source: bool | None = None
    legs: list[NewOrderLeg] = Field(default_factory=list)


class NewOrderECR(TastyModel):
    """Edit/cancel-replace request for a live order."""

    time_in_force: TimeInForce
    gtc_date: date | None = None
    order_type: OrderType
    stop_trigger: Decimal | None = None
    price: Decimal | None = None
    price_effect: PriceEffect | None = None
    value: Decimal | None = None
    value_effect: PriceEffect | None = None
    source: str | None = None
    partition_key: str | None = None
    preflight_id: str | None = None
    automated_source: bool | None = None


class OrdersQuery(TastyModel):
    """Filters for order history endpoints."""

    per_page: int | None = None
    page_offset: int | None = None
    start_date: date | None = None
    end_date: date | None = None
    underlying_symbol: str | None = None
    status: list[OrderStatus] | None = Field(default=None, alias="status[]")
    futures_symbol: str | None = None
    underlying_instrument_type: InstrumentType | None = None
    sort: SortOrder | None = None
    start_at: datetime | None = None
    end_at: datetime | None = None
    account_numbers: list[str] | None = Field(default=None, alias="account-numbers[]")
