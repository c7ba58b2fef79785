"""Async command support for Typer."""

import asyncio
from collections.abc import Callable, Coroutine
from functools import wraps
from typing import Any, TypeVar

import typer

from tasty_client.exceptions import InvalidSessionError, TastyAPIError, TastyError

T = TypeVar("T")

# API error codes meaning the session token is no longer accepted
SESSION_ERROR_CODES = frozenset({"token_invalid", "invalid_session", "session_expired"})


def _is_session_invalid_error(e: TastyError) -> bool:
    """Check if the error means the user has to log in again."""
    if isinstance(e, InvalidSessionError):
        return True
    return isinstance(e, TastyAPIError) and e.code in SESSION_ERROR_CODES


def _find_context(args: tuple[Any, ...], kwargs: dict[str, Any]) -> typer.Context | None:
    for arg in args:
        if isinstance(arg, typer.Context):
            return arg
    ctx = kwargs.get("ctx")
    return ctx if isinstance(ctx, typer.Context) else None


async def _handle_session_invalid(ctx: typer.Context) -> None:
    """Prompt for a new login after the session was rejected."""
    from tasty_client.cli.formatters import console, print_error, print_info

    print_error("Your session is missing, invalid or has expired.")
    console.print()

    if not typer.confirm("Would you like to log in now?", default=True):
        print_info("Run 'tasty-cli auth login' when ready to log in.")
        raise typer.Exit(1)

    # login is wrapped by @async_command; run the original coroutine
    from tasty_client.cli.commands.auth import login

    console.print()
    await login.__wrapped__(ctx, username=None, remember=True)


def async_command(f: Callable[..., Coroutine[Any, Any, T]]) -> Callable[..., T]:
    """Decorator to run async Typer commands.

    Rejected or missing sessions prompt for a login and the command is run
    once more. API errors are printed with their field-level reasons.

    Usage:
        @app.command()
        @async_command
        async def my_command(ctx: typer.Context):
            async with get_client(ctx.obj) as client:
                accounts = await client.customers.get_customer_accounts("me")
                ...
    """

    @wraps(f)
    def wrapper(*args: Any, **kwargs: Any) -> T:
        async def run_with_error_handling() -> T:
            try:
                return await f(*args, **kwargs)
            except TastyError as e:
                ctx = _find_context(args, kwargs)
                if ctx is None or not _is_session_invalid_error(e):
                    raise
                await _handle_session_invalid(ctx)
                return await f(*args, **kwargs)

        try:
            return asyncio.run(run_with_error_handling())
        except TastyError as e:
            from tasty_client.cli.formatters import print_api_error

            print_api_error(e)
            raise typer.Exit(1) from None

    return wrapper
