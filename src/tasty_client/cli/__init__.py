"""tastytrade CLI - Command-line interface for the tastytrade API."""

from tasty_client.cli.app import app

# Import command modules to register them with the app
from tasty_client.cli.commands import accounts, auth, orders, symbols

# Register sub-apps
app.add_typer(auth.app, name="auth", help="Session commands.")
app.add_typer(accounts.app, name="accounts", help="Accounts, balances and positions.")
app.add_typer(orders.app, name="orders", help="Order management.")
app.add_typer(symbols.app, name="symbols", help="Symbol search and instruments.")


def main() -> None:
    """Entry point for the CLI."""
    app()


__all__ = ["app", "main"]
