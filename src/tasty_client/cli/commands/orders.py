"""Orders commands."""

from datetime import date

import typer

from tasty_client.cli.async_runner import async_command
from tasty_client.cli.client_factory import get_client
from tasty_client.cli.config import CLIConfig, OutputFormat
from tasty_client.cli.formatters import (
    console,
    format_money,
    format_output,
    print_error,
    print_success,
)
from tasty_client.models import Order, OrdersQuery, OrderStatus

app = typer.Typer(no_args_is_help=True)

ORDER_COLUMNS = ["id", "underlying_symbol", "order_type", "status", "price", "time_in_force"]


def _order_rows(orders: list[Order]) -> list[dict]:
    rows = []
    for order in orders:
        row = order.model_dump(mode="json", exclude_none=True)
        row["price"] = format_money(order.price, order.price_effect) if order.price else ""
        rows.append(row)
    return rows


@app.command("live")
@async_command
async def live(
    ctx: typer.Context,
    account_number: str = typer.Argument(..., help="Account number."),
    output: OutputFormat = typer.Option(
        OutputFormat.TABLE,
        "--output",
        "-o",
        help="Output format.",
    ),
) -> None:
    """List orders that are live or were updated today."""
    config: CLIConfig = ctx.obj

    async with get_client(config) as client:
        orders = await client.orders.get_live_orders(account_number)

    format_output(_order_rows(orders), output, title="Live Orders", columns=ORDER_COLUMNS)


@app.command("list")
@async_command
async def list_orders(
    ctx: typer.Context,
    account_number: str = typer.Argument(..., help="Account number."),
    status: list[OrderStatus] | None = typer.Option(
        None,
        "--status",
        "-s",
        help="Filter by status (repeatable).",
    ),
    symbol: str | None = typer.Option(
        None,
        "--symbol",
        help="Filter by underlying symbol.",
    ),
    from_date: str | None = typer.Option(
        None,
        "--from",
        help="Start date (YYYY-MM-DD).",
    ),
    to_date: str | None = typer.Option(
        None,
        "--to",
        help="End date (YYYY-MM-DD).",
    ),
    per_page: int = typer.Option(
        25,
        "--limit",
        "-n",
        help="Orders per page.",
    ),
    page: int = typer.Option(
        0,
        "--page",
        help="Page offset.",
    ),
    output: OutputFormat = typer.Option(
        OutputFormat.TABLE,
        "--output",
        "-o",
        help="Output format.",
    ),
) -> None:
    """List order history of an account."""
    config: CLIConfig = ctx.obj

    start_date = None
    end_date = None
    if from_date:
        try:
            start_date = date.fromisoformat(from_date)
        except ValueError:
            print_error("Invalid from date format. Use YYYY-MM-DD.")
            raise typer.Exit(1) from None
    if to_date:
        try:
            end_date = date.fromisoformat(to_date)
        except ValueError:
            print_error("Invalid to date format. Use YYYY-MM-DD.")
            raise typer.Exit(1) from None

    query = OrdersQuery(
        per_page=per_page,
        page_offset=page,
        start_date=start_date,
        end_date=end_date,
        underlying_symbol=symbol,
        status=status or None,
    )

    async with get_client(config) as client:
        orders, pagination = await client.orders.get_orders(account_number, query)

    format_output(_order_rows(orders), output, title="Orders", columns=ORDER_COLUMNS)

    if output == OutputFormat.TABLE and pagination.total_pages:
        console.print(
            f"[dim]Page {(pagination.page_offset or 0) + 1} of {pagination.total_pages} "
            f"({pagination.total_items} orders)[/dim]"
        )


@app.command("cancel")
@async_command
async def cancel(
    ctx: typer.Context,
    account_number: str = typer.Argument(..., help="Account number."),
    order_id: int = typer.Argument(..., help="Order ID to cancel."),
) -> None:
    """Request cancellation of a live order."""
    config: CLIConfig = ctx.obj

    async with get_client(config) as client:
        order = await client.orders.cancel_order(account_number, order_id)

    print_success(f"Order {order.id} cancellation requested (status: {order.status}).")
