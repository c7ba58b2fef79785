"""Tests for endpoint helpers against recorded requests."""

import json
from decimal import Decimal

import httpx
import pytest

from tasty_client.exceptions import TastyAPIError
from tasty_client.models import (
    InstrumentType,
    NewOrder,
    NewOrderECR,
    NewOrderLeg,
    OrderAction,
    OrdersQuery,
    OrderStatus,
    OrderType,
    PriceEffect,
    TimeInForce,
)

LOGIN_RESPONSE = {
    "data": {
        "user": {"email": "jane@example.com", "username": "jane", "external-id": "U0001"},
        "session-token": "session-abc",
        "remember-token": "remember-xyz",
    },
    "context": "/sessions",
}

ORDER = {
    "id": 17,
    "account-number": "5WT0001",
    "time-in-force": "Day",
    "order-type": "Limit",
    "size": "1",
    "underlying-symbol": "AAPL",
    "price": "150.25",
    "price-effect": "Debit",
    "status": "Live",
    "cancellable": True,
    "legs": [
        {
            "instrument-type": "Equity",
            "symbol": "AAPL",
            "quantity": "1",
            "remaining-quantity": "1",
            "action": "Buy to Open",
            "fills": [],
        }
    ],
}


def _limit_order() -> NewOrder:
    return NewOrder(
        time_in_force=TimeInForce.DAY,
        order_type=OrderType.LIMIT,
        price=Decimal("150.25"),
        price_effect=PriceEffect.DEBIT,
        legs=[
            NewOrderLeg(
                instrument_type=InstrumentType.EQUITY,
                symbol="AAPL",
                quantity=Decimal("1"),
                action=OrderAction.BUY_TO_OPEN,
            )
        ],
    )


class TestSessions:
    """Tests for login, validation and logout."""

    async def test_login_stores_tokens(self, make_client, recorder) -> None:
        recorder.handler = lambda request: httpx.Response(201, json=LOGIN_RESPONSE)
        client = make_client(session_token=None)

        result = await client.login("jane", "secret", remember_me=True)

        assert result.user.username == "jane"
        assert client.session.session_token == "session-abc"
        assert client.session.remember_token == "remember-xyz"
        assert client.is_authenticated

        request = recorder.last
        assert request.method == "POST"
        assert request.url.path == "/sessions"
        assert "Authorization" not in request.headers
        assert json.loads(request.content) == {
            "login": "jane",
            "password": "secret",
            "remember-me": True,
        }

    async def test_login_with_remember_token(self, make_client, recorder) -> None:
        recorder.handler = lambda request: httpx.Response(201, json=LOGIN_RESPONSE)
        client = make_client(session_token=None)

        await client.login("jane", remember_token="remember-old")

        body = json.loads(recorder.last.content)
        assert body["remember-token"] == "remember-old"
        assert "password" not in body

    async def test_failed_login_leaves_session_empty(self, make_client, recorder) -> None:
        recorder.handler = lambda request: httpx.Response(
            401,
            json={"error": {"code": "invalid_credentials", "message": "Invalid login"}},
        )
        client = make_client(session_token=None)

        with pytest.raises(TastyAPIError) as exc_info:
            await client.login("jane", "wrong")

        assert exc_info.value.status_code == 401
        assert exc_info.value.code == "invalid_credentials"
        assert not client.is_authenticated

    async def test_full_lifecycle(self, make_client, recorder) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            if request.method == "POST" and request.url.path == "/sessions":
                return httpx.Response(201, json=LOGIN_RESPONSE)
            if request.url.path == "/customers/me":
                return httpx.Response(200, json={"data": {"id": "me", "first-name": "Jane"}})
            if request.method == "DELETE":
                return httpx.Response(204)
            return httpx.Response(404, json={"error": {"code": "not_found", "message": "?"}})

        recorder.handler = handler
        client = make_client(session_token=None)

        await client.login("jane", "secret")
        customer = await client.customers.get_my_customer_info()
        await client.logout()

        assert customer.first_name == "Jane"
        assert recorder.requests[1].headers["Authorization"] == "session-abc"
        assert recorder.requests[2].headers["Authorization"] == "session-abc"
        assert not client.is_authenticated
        assert client.session.remember_token is None

    async def test_failed_logout_keeps_session(self, make_client, recorder) -> None:
        recorder.handler = lambda request: httpx.Response(
            401, json={"error": {"code": "token_invalid", "message": "Token is invalid"}}
        )
        client = make_client(session_token="stale")

        with pytest.raises(TastyAPIError):
            await client.logout()

        assert client.session.session_token == "stale"

    async def test_validate_session(self, make_client, recorder) -> None:
        recorder.handler = lambda request: httpx.Response(201, json=LOGIN_RESPONSE)
        client = make_client(session_token="session-abc")

        result = await client.sessions.validate_session()

        assert result.user.email == "jane@example.com"
        assert recorder.last.url.path == "/sessions/validate"


class TestCustomers:
    """Tests for customer endpoints."""

    async def test_customer_accounts(self, make_client, recorder) -> None:
        recorder.handler = lambda request: httpx.Response(
            200,
            json={
                "data": {
                    "items": [
                        {
                            "account": {
                                "account-number": "5WT0001",
                                "nickname": "Main",
                                "margin-or-cash": "Margin",
                            },
                            "authority-level": "owner",
                        },
                        {"account": {"account-number": "5WT0002"}, "authority-level": "owner"},
                    ]
                },
                "context": "/customers/me/accounts",
            },
        )
        client = make_client()

        accounts = await client.customers.get_customer_accounts("me")

        assert [a.account_number for a in accounts] == ["5WT0001", "5WT0002"]
        assert accounts[0].margin_or_cash == "Margin"
        assert recorder.last.url.path == "/customers/me/accounts"

    async def test_my_account(self, make_client, recorder) -> None:
        recorder.handler = lambda request: httpx.Response(
            200, json={"data": {"account-number": "5WT0001"}}
        )
        client = make_client()

        account = await client.customers.get_my_account("5WT0001")

        assert account.account_number == "5WT0001"
        assert recorder.last.url.path == "/customers/me/accounts/5WT0001"

    async def test_quote_streamer_tokens(self, make_client, recorder) -> None:
        recorder.handler = lambda request: httpx.Response(
            200,
            json={
                "data": {
                    "token": "dx-token",
                    "dxlink-url": "wss://tasty-openapi-ws.dxfeed.com/realtime",
                    "level": "api",
                }
            },
        )
        client = make_client()

        tokens = await client.customers.get_quote_streamer_tokens()

        assert tokens.token == "dx-token"
        assert tokens.level == "api"


class TestAccounts:
    """Tests for balance and position endpoints."""

    async def test_balances(self, make_client, recorder) -> None:
        recorder.handler = lambda request: httpx.Response(
            200,
            json={
                "data": {
                    "account-number": "5WT0001",
                    "cash-balance": "1000.50",
                    "net-liquidating-value": "2500.00",
                }
            },
        )
        client = make_client()

        balance = await client.accounts.get_balances("5WT0001")

        assert balance.cash_balance == Decimal("1000.50")
        assert balance.net_liquidating_value == Decimal("2500.00")

    async def test_positions(self, make_client, recorder) -> None:
        recorder.handler = lambda request: httpx.Response(
            200,
            json={
                "data": {
                    "items": [
                        {
                            "account-number": "5WT0001",
                            "symbol": "AAPL",
                            "instrument-type": "Equity",
                            "quantity": "10",
                            "quantity-direction": "Long",
                        }
                    ]
                }
            },
        )
        client = make_client()

        positions = await client.accounts.get_positions("5WT0001")

        assert len(positions) == 1
        assert positions[0].quantity == Decimal("10")
        assert recorder.last.url.path == "/accounts/5WT0001/positions"


class TestOrders:
    """Tests for order endpoints."""

    async def test_live_orders(self, make_client, recorder) -> None:
        recorder.handler = lambda request: httpx.Response(200, json={"data": {"items": [ORDER]}})
        client = make_client()

        orders = await client.orders.get_live_orders("5WT0001")

        assert orders[0].id == 17
        assert orders[0].legs[0].action == "Buy to Open"
        assert recorder.last.url.path == "/accounts/5WT0001/orders/live"

    async def test_orders_with_pagination(self, make_client, recorder) -> None:
        recorder.handler = lambda request: httpx.Response(
            200,
            json={
                "data": {"items": [ORDER]},
                "pagination": {
                    "per-page": 1,
                    "page-offset": 0,
                    "total-items": 3,
                    "total-pages": 3,
                    "current-item-count": 1,
                },
            },
        )
        client = make_client()

        orders, pagination = await client.orders.get_orders(
            "5WT0001", OrdersQuery(per_page=1, status=[OrderStatus.LIVE])
        )

        assert len(orders) == 1
        assert pagination.total_pages == 3
        assert pagination.total_items == 3
        params = recorder.last.url.params
        assert params["per-page"] == "1"
        assert params.get_list("status[]") == ["Live"]

    async def test_orders_without_pagination(self, make_client, recorder) -> None:
        recorder.handler = lambda request: httpx.Response(200, json={"data": {"items": []}})
        client = make_client()

        orders, pagination = await client.orders.get_orders("5WT0001")

        assert orders == []
        assert pagination.total_pages is None

    async def test_submit_order_body(self, make_client, recorder) -> None:
        recorder.handler = lambda request: httpx.Response(
            201, json={"data": {"order": ORDER, "warnings": []}}
        )
        client = make_client()

        response, error = await client.orders.submit_order("5WT0001", _limit_order())

        assert error is None
        assert response.order is not None
        assert response.order.id == 17

        body = json.loads(recorder.last.content)
        assert body["time-in-force"] == "Day"
        assert body["order-type"] == "Limit"
        assert body["price"] == "150.25"
        assert body["price-effect"] == "Debit"
        assert body["legs"] == [
            {
                "instrument-type": "Equity",
                "symbol": "AAPL",
                "quantity": "1",
                "action": "Buy to Open",
            }
        ]
        assert "gtc-date" not in body

    async def test_submit_order_with_preflight_error(self, make_client, recorder) -> None:
        recorder.handler = lambda request: httpx.Response(
            201,
            json={
                "data": {"order": ORDER},
                "error": {
                    "code": "preflight_check_failure",
                    "message": "One or more preflight checks failed",
                    "errors": [{"code": "margin_check_failed", "message": "Not enough BP"}],
                },
            },
        )
        client = make_client()

        response, error = await client.orders.submit_order_dry_run("5WT0001", _limit_order())

        assert response.order is not None
        assert error is not None
        assert error.code == "preflight_check_failure"
        assert error.errors[0].code == "margin_check_failed"
        assert recorder.last.url.path == "/accounts/5WT0001/orders/dry-run"

    async def test_rejected_order(self, make_client, recorder) -> None:
        recorder.handler = lambda request: httpx.Response(
            422,
            json={
                "error": {
                    "code": "validation_error",
                    "message": "Request validation failed",
                    "errors": [{"domain": "price", "reason": "must be positive"}],
                }
            },
        )
        client = make_client()

        with pytest.raises(TastyAPIError) as exc_info:
            await client.orders.submit_order("5WT0001", _limit_order())

        assert exc_info.value.status_code == 422
        assert exc_info.value.errors[0].domain == "price"

    async def test_cancel_order(self, make_client, recorder) -> None:
        cancelled = {**ORDER, "status": "Cancel Requested"}
        recorder.handler = lambda request: httpx.Response(200, json={"data": cancelled})
        client = make_client()

        order = await client.orders.cancel_order("5WT0001", 17)

        assert order.status == "Cancel Requested"
        assert recorder.last.method == "DELETE"
        assert recorder.last.url.path == "/accounts/5WT0001/orders/17"

    async def test_replace_order_uses_put(self, make_client, recorder) -> None:
        recorder.handler = lambda request: httpx.Response(200, json={"data": ORDER})
        client = make_client()

        await client.orders.replace_order(
            "5WT0001",
            17,
            NewOrderECR(
                time_in_force=TimeInForce.DAY,
                order_type=OrderType.LIMIT,
                price=Decimal("149"),
                price_effect=PriceEffect.DEBIT,
            ),
        )

        assert recorder.last.method == "PUT"
        assert json.loads(recorder.last.content)["price"] == "149"

    async def test_customer_orders(self, make_client, recorder) -> None:
        recorder.handler = lambda request: httpx.Response(200, json={"data": {"items": [ORDER]}})
        client = make_client()

        orders, _ = await client.orders.get_customer_orders(
            "me", OrdersQuery(account_numbers=["5WT0001", "5WT0002"])
        )

        assert len(orders) == 1
        assert recorder.last.url.params.get_list("account-numbers[]") == ["5WT0001", "5WT0002"]


class TestInstruments:
    """Tests for symbol lookups."""

    async def test_symbol_search(self, make_client, recorder) -> None:
        recorder.handler = lambda request: httpx.Response(
            200,
            json={
                "data": {
                    "items": [
                        {"symbol": "BRK/B", "description": "Berkshire Hathaway Inc Class B"}
                    ]
                }
            },
        )
        client = make_client()

        results = await client.instruments.symbol_search("BRK/B")

        assert results[0].symbol == "BRK/B"

    async def test_get_equity_escapes_symbol(self, make_client, recorder) -> None:
        recorder.handler = lambda request: httpx.Response(
            200, json={"data": {"symbol": "BRK/B", "is-etf": False}}
        )
        client = make_client()

        equity = await client.instruments.get_equity("BRK/B")

        assert equity.symbol == "BRK/B"
        assert recorder.last.url.raw_path == b"/instruments/equities/BRK%2FB"
