"""Symbol search and equity instrument models."""

from decimal import Decimal

from pydantic import Field

from tasty_client.models.common import TastyModel


class SymbolData(TastyModel):
    """A symbol search hit."""

    symbol: str
    description: str | None = None
    listed_market: str | None = None
    price_increments: str | None = None
    trading_hours: str | None = None
    options: bool | None = None
    instrument_type: str | None = None


class TickSize(TastyModel):
    value: Decimal
    threshold: Decimal | None = None
    symbol: str | None = None


class Equity(TastyModel):
    """An equity instrument."""

    symbol: str
    id: int | None = None
    instrument_type: str | None = None
    cusip: str | None = None
    short_description: str | None = None
    is_index: bool | None = None
    listed_market: str | None = None
    description: str | None = None
    lendability: str | None = None
    borrow_rate: Decimal | None = None
    market_time_instrument_collection: str | None = None
    is_closing_only: bool | None = None
    is_options_closing_only: bool | None = None
    active: bool | None = None
    is_fractional_quantity_eligible: bool | None = None
    is_illiquid: bool | None = None
    is_etf: bool | None = None
    streamer_symbol: str | None = None
    tick_sizes: list[TickSize] | None = None
    option_tick_sizes: list[TickSize] | None = None


class EquitiesQuery(TastyModel):
    """Filters for the equities endpoint."""

    symbol: list[str] | None = Field(default=None, alias="symbol[]")
    lendability: str | None = None
    is_index: bool = False
    is_etf: bool = False
