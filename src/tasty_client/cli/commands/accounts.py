"""Account commands."""

import typer

from tasty_client.cli.async_runner import async_command
from tasty_client.cli.client_factory import get_client
from tasty_client.cli.config import CLIConfig, OutputFormat
from tasty_client.cli.formatters import console, format_money, format_output

app = typer.Typer(no_args_is_help=True)


@app.command("list")
@async_command
async def list_accounts(
    ctx: typer.Context,
    output: OutputFormat = typer.Option(
        OutputFormat.TABLE,
        "--output",
        "-o",
        help="Output format.",
    ),
) -> None:
    """List accounts the logged-in customer can access."""
    config: CLIConfig = ctx.obj

    async with get_client(config) as client:
        accounts = await client.customers.get_customer_accounts("me")

    format_output(
        accounts,
        output,
        title="Accounts",
        columns=["account_number", "nickname", "account_type_name", "margin_or_cash"],
    )


@app.command("balances")
@async_command
async def balances(
    ctx: typer.Context,
    account_number: str = typer.Argument(..., help="Account number."),
    output: OutputFormat = typer.Option(
        OutputFormat.TABLE,
        "--output",
        "-o",
        help="Output format.",
    ),
) -> None:
    """Show account balances."""
    config: CLIConfig = ctx.obj

    async with get_client(config) as client:
        balance = await client.accounts.get_balances(account_number)

    if output != OutputFormat.TABLE:
        format_output(balance, output)
        return

    console.print(f"[bold]Account {balance.account_number}[/bold]")
    console.print(f"  Net liquidating value: {format_money(balance.net_liquidating_value)}")
    console.print(f"  Cash balance:          {format_money(balance.cash_balance)}")
    console.print(f"  Equity buying power:   {format_money(balance.equity_buying_power)}")
    console.print(f"  Derivative BP:         {format_money(balance.derivative_buying_power)}")
    console.print(f"  Maintenance req:       {format_money(balance.maintenance_requirement)}")
    console.print(
        f"  Pending cash:          "
        f"{format_money(balance.pending_cash, balance.pending_cash_effect)}"
    )


@app.command("positions")
@async_command
async def positions(
    ctx: typer.Context,
    account_number: str = typer.Argument(..., help="Account number."),
    output: OutputFormat = typer.Option(
        OutputFormat.TABLE,
        "--output",
        "-o",
        help="Output format.",
    ),
) -> None:
    """List open positions of an account."""
    config: CLIConfig = ctx.obj

    async with get_client(config) as client:
        items = await client.accounts.get_positions(account_number)

    format_output(
        items,
        output,
        title=f"Positions ({account_number})",
        columns=[
            "symbol",
            "instrument_type",
            "quantity",
            "quantity_direction",
            "average_open_price",
            "close_price",
        ],
    )
