"""Customer and customer-account models."""

from datetime import date, datetime

from tasty_client.models.common import TastyModel


class Address(TastyModel):
    street_one: str | None = None
    street_two: str | None = None
    city: str | None = None
    state_region: str | None = None
    postal_code: str | None = None
    country: str | None = None
    is_foreign: bool | None = None
    is_domestic: bool | None = None


class Customer(TastyModel):
    """A tastytrade customer."""

    id: str
    prefix_name: str | None = None
    first_name: str | None = None
    middle_name: str | None = None
    last_name: str | None = None
    suffix_name: str | None = None
    first_surname: str | None = None
    second_surname: str | None = None
    address: Address | None = None
    mailing_address: Address | None = None
    usa_citizenship_type: str | None = None
    is_foreign: bool | None = None
    mobile_phone_number: str | None = None
    work_phone_number: str | None = None
    home_phone_number: str | None = None
    email: str | None = None
    tax_number_type: str | None = None
    tax_number: str | None = None
    birth_date: date | None = None
    external_id: str | None = None
    citizenship_country: str | None = None
    subject_to_tax_withholding: bool | None = None
    agreed_to_margining: bool | None = None
    agreed_to_terms: bool | None = None
    has_industry_affiliation: bool | None = None
    has_political_affiliation: bool | None = None
    has_listed_affiliation: bool | None = None
    is_professional: bool | None = None
    has_delayed_quotes: bool | None = None
    has_pending_or_approved_application: bool | None = None
    permitted_account_types: list[dict] | None = None


class Account(TastyModel):
    """A customer account."""

    account_number: str
    external_id: str | None = None
    opened_at: datetime | None = None
    nickname: str | None = None
    account_type_name: str | None = None
    day_trader_status: bool | None = None
    is_closed: bool | None = None
    is_firm_error: bool | None = None
    is_firm_proprietary: bool | None = None
    is_futures_approved: bool | None = None
    is_test_drive: bool | None = None
    margin_or_cash: str | None = None
    is_foreign: bool | None = None
    funding_date: date | None = None
    investment_objective: str | None = None
    futures_account_purpose: str | None = None
    suitable_options_level: str | None = None
    created_at: datetime | None = None


class AccountAuthorityEntry(TastyModel):
    """One entry of a customer's account list."""

    account: Account
    authority_level: str | None = None


class QuoteStreamerTokenAuthResult(TastyModel):
    """Credentials for the market data streamer."""

    token: str
    streamer_url: str | None = None
    websocket_url: str | None = None
    dxlink_url: str | None = None
    level: str | None = None
    issued_at: datetime | None = None
    expires_at: datetime | None = None
