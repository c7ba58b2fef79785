"""Symbol lookup commands."""

import typer

from tasty_client.cli.async_runner import async_command
from tasty_client.cli.client_factory import get_client
from tasty_client.cli.config import CLIConfig, OutputFormat
from tasty_client.cli.formatters import format_output

app = typer.Typer(no_args_is_help=True)


@app.command("search")
@async_command
async def search(
    ctx: typer.Context,
    symbol: str = typer.Argument(..., help="Symbol or prefix, e.g. AAPL or BRK/B."),
    output: OutputFormat = typer.Option(
        OutputFormat.TABLE,
        "--output",
        "-o",
        help="Output format.",
    ),
) -> None:
    """Search symbols by prefix."""
    config: CLIConfig = ctx.obj

    async with get_client(config) as client:
        results = await client.instruments.symbol_search(symbol)

    format_output(
        results,
        output,
        title=f"Symbols matching {symbol}",
        columns=["symbol", "description", "listed_market", "options"],
    )


@app.command("equity")
@async_command
async def equity(
    ctx: typer.Context,
    symbol: str = typer.Argument(..., help="Equity symbol."),
    output: OutputFormat = typer.Option(
        OutputFormat.TABLE,
        "--output",
        "-o",
        help="Output format.",
    ),
) -> None:
    """Show a single equity instrument."""
    config: CLIConfig = ctx.obj

    async with get_client(config) as client:
        instrument = await client.instruments.get_equity(symbol)

    format_output(
        instrument,
        output,
        title=instrument.symbol,
        columns=["symbol", "description", "listed_market", "is_etf", "lendability"],
    )
