"""Output formatters for CLI commands."""

import csv
import io
import json
from collections.abc import Sequence
from decimal import Decimal
from typing import Any

from pydantic import BaseModel
from rich.console import Console
from rich.table import Table

from tasty_client.cli.config import OutputFormat
from tasty_client.exceptions import TastyError

console = Console()
error_console = Console(stderr=True)

Row = dict[str, Any]


def _to_rows(data: BaseModel | Row | Sequence[BaseModel | Row]) -> list[Row]:
    if isinstance(data, BaseModel | dict):
        data = [data]
    return [
        item.model_dump(mode="json", exclude_none=True) if isinstance(item, BaseModel) else item
        for item in data
    ]


def format_output(
    data: BaseModel | Row | Sequence[BaseModel | Row],
    output_format: OutputFormat,
    *,
    title: str | None = None,
    columns: list[str] | None = None,
) -> None:
    """Print models or rows as a table, JSON or CSV.

    Args:
        data: A model, a row dict, or a sequence of either
        output_format: Output format (table, json, csv)
        title: Optional title for table output
        columns: Optional column names to include (for table/csv)
    """
    rows = _to_rows(data)

    if output_format == OutputFormat.JSON:
        payload: Any = rows[0] if len(rows) == 1 else rows
        console.print_json(json.dumps(payload, default=str))
        return

    if not rows:
        if output_format == OutputFormat.TABLE:
            console.print("[dim]No data[/dim]")
        return

    columns = columns or list(rows[0].keys())

    if output_format == OutputFormat.CSV:
        buffer = io.StringIO()
        writer = csv.DictWriter(buffer, fieldnames=columns, extrasaction="ignore")
        writer.writeheader()
        writer.writerows(rows)
        console.print(buffer.getvalue(), end="")
        return

    table = Table(title=title, show_header=True, header_style="bold")
    for column in columns:
        table.add_column(column.replace("_", " ").title())
    for row in rows:
        table.add_row(*[_cell(row.get(column)) for column in columns])
    console.print(table)


def _cell(value: Any) -> str:
    return "" if value is None else str(value)


def format_money(value: Decimal | None, effect: str | None = None) -> str:
    """Render an amount with its Credit/Debit effect sign."""
    if value is None:
        return "N/A"
    sign = "-" if effect == "Debit" else ""
    return f"{sign}${value:,.2f}"


def print_api_error(error: TastyError) -> None:
    """Print an API error with every field-level reason."""
    label = f" ({error.code})" if error.code else ""
    print_error(f"{error.message}{label}")
    for detail in error.errors:
        error_console.print(f"  - {detail.domain}: {detail.reason}")


def print_error(message: str) -> None:
    """Print an error message to stderr."""
    error_console.print(f"[red]Error:[/red] {message}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[green]✓[/green] {message}")


def print_warning(message: str) -> None:
    """Print a warning message."""
    console.print(f"[yellow]Warning:[/yellow] {message}")


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[blue]i[/blue] {message}")
