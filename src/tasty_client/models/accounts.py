"""Account balance, position and trading status models."""

from datetime import date, datetime
from decimal import Decimal

from pydantic import Field

from tasty_client.models.common import TastyModel


class AccountBalance(TastyModel):
    """Current balances of an account."""

    account_number: str
    cash_balance: Decimal | None = None
    long_equity_value: Decimal | None = None
    short_equity_value: Decimal | None = None
    long_derivative_value: Decimal | None = None
    short_derivative_value: Decimal | None = None
    long_futures_value: Decimal | None = None
    short_futures_value: Decimal | None = None
    debit_margin_balance: Decimal | None = None
    long_margineable_value: Decimal | None = None
    short_margineable_value: Decimal | None = None
    margin_equity: Decimal | None = None
    equity_buying_power: Decimal | None = None
    derivative_buying_power: Decimal | None = None
    day_trading_buying_power: Decimal | None = None
    futures_margin_requirement: Decimal | None = None
    available_trading_funds: Decimal | None = None
    maintenance_requirement: Decimal | None = None
    maintenance_call_value: Decimal | None = None
    reg_t_call_value: Decimal | None = None
    day_trading_call_value: Decimal | None = None
    day_equity_call_value: Decimal | None = None
    net_liquidating_value: Decimal | None = None
    cash_available_to_withdraw: Decimal | None = None
    day_trade_excess: Decimal | None = None
    pending_cash: Decimal | None = None
    pending_cash_effect: str | None = None
    snapshot_date: date | None = None
    updated_at: datetime | None = None


class AccountPosition(TastyModel):
    """An open position."""

    account_number: str
    symbol: str
    instrument_type: str | None = None
    underlying_symbol: str | None = None
    quantity: Decimal = Decimal("0")
    quantity_direction: str | None = None
    close_price: Decimal | None = None
    average_open_price: Decimal | None = None
    average_yearly_market_close_price: Decimal | None = None
    average_daily_market_close_price: Decimal | None = None
    multiplier: Decimal | None = None
    cost_effect: str | None = None
    is_suppressed: bool | None = None
    is_frozen: bool | None = None
    restricted_quantity: Decimal | None = None
    realized_day_gain: Decimal | None = None
    realized_day_gain_effect: str | None = None
    realized_today: Decimal | None = None
    realized_today_effect: str | None = None
    expires_at: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class AccountPositionQuery(TastyModel):
    """Filters for the positions endpoint."""

    underlying_symbol: list[str] | None = Field(default=None, alias="underlying-symbol[]")
    symbol: str | None = None
    instrument_type: str | None = None
    include_closed_positions: bool = False
    underlying_product_code: str | None = None
    partition_keys: list[str] | None = Field(default=None, alias="partition-keys[]")
    net_positions: bool = False
    include_marks: bool = False


class TradingStatus(TastyModel):
    """Trading permissions and restrictions of an account."""

    account_number: str
    id: int | None = None
    day_trade_count: int | None = None
    equities_margin_calculation_type: str | None = None
    fee_schedule_name: str | None = None
    futures_margin_rate_multiplier: Decimal | None = None
    has_intraday_equities_margin: bool | None = None
    is_aggregated_at_clearing: bool | None = None
    is_closed: bool | None = None
    is_closing_only: bool | None = None
    is_cryptocurrency_enabled: bool | None = None
    is_frozen: bool | None = None
    is_full_equity_margin_required: bool | None = None
    is_futures_closing_only: bool | None = None
    is_futures_enabled: bool | None = None
    is_in_day_trade_equity_maintenance_call: bool | None = None
    is_in_margin_call: bool | None = None
    is_pattern_day_trader: bool | None = None
    is_small_notional_futures_intra_day_enabled: bool | None = None
    options_level: str | None = None
    pdt_reset_on: date | None = None
    short_calls_enabled: bool | None = None
    small_notional_futures_margin_rate_multiplier: Decimal | None = None
    updated_at: datetime | None = None
