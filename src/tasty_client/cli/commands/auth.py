"""Authentication commands."""

import typer

from tasty_client.auth import TokenStore
from tasty_client.cli.async_runner import async_command
from tasty_client.cli.client_factory import get_client
from tasty_client.cli.config import CLIConfig
from tasty_client.cli.formatters import console, print_error, print_info, print_success
from tasty_client.exceptions import TastyError

app = typer.Typer(no_args_is_help=True)


@app.command("login")
@async_command
async def login(
    ctx: typer.Context,
    username: str | None = typer.Option(
        None,
        "--username",
        "-u",
        help="Login name (default: from config file or TASTY_LOGIN).",
    ),
    remember: bool = typer.Option(
        True,
        "--remember/--no-remember",
        help="Ask for a remember token to log in again without a password.",
    ),
) -> None:
    """Log in to tastytrade and save the session token."""
    config: CLIConfig = ctx.obj

    password: str | None = None
    if username is None:
        try:
            username, password = config.load_credentials()
        except ValueError:
            username = typer.prompt("Login")

    async with get_client(config) as client:
        remember_token = client.session.remember_token if password is None else None
        if remember_token is None and password is None:
            password = typer.prompt("Password", hide_input=True)

        print_info(f"Logging in to {config.environment} as {username}...")
        result = await client.login(
            username,
            password,
            remember_me=remember,
            remember_token=remember_token,
        )
        client.save_session()

    print_success(f"Logged in as {result.user.username or username}.")
    print_info(f"Session saved to {config.token_path}")


@app.command("status")
def status(ctx: typer.Context) -> None:
    """Show whether a session is saved for the current environment."""
    config: CLIConfig = ctx.obj

    token_store = TokenStore(path=config.token_path)

    console.print(f"Environment: [bold]{config.environment}[/bold]")
    console.print(f"Session path: {config.token_path}")

    saved = token_store.load()
    if saved is None:
        print_info("Not logged in - run 'tasty-cli auth login'")
        return

    print_success("Session found")
    if saved.remember_token:
        print_info("A remember token is saved; 'auth login' will not ask for a password")


@app.command("validate")
@async_command
async def validate(ctx: typer.Context) -> None:
    """Check the saved session with the server."""
    config: CLIConfig = ctx.obj

    async with get_client(config) as client:
        result = await client.sessions.validate_session()

    print_success(f"Session is valid for {result.user.username or result.user.email}.")


@app.command("logout")
@async_command
async def logout(
    ctx: typer.Context,
    destroy: bool = typer.Option(
        True,
        "--destroy/--no-destroy",
        help="Destroy the session on the server before clearing it locally.",
    ),
) -> None:
    """Log out and clear the saved session."""
    config: CLIConfig = ctx.obj

    token_store = TokenStore(path=config.token_path)

    if not token_store.has_token():
        print_info("No session to clear.")
        return

    if destroy:
        try:
            async with get_client(config) as client:
                if client.is_authenticated:
                    print_info("Destroying session on the server...")
                    await client.logout()
        except TastyError as e:
            print_error(f"Failed to destroy session: {e.message}")
            print_info("Clearing local session anyway...")

    token_store.clear()
    print_success(f"Logged out from {config.environment}.")
