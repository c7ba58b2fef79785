"""Client factory for CLI commands."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from tasty_client.auth import TokenStore
from tasty_client.client import TastyClient
from tasty_client.config import TastyConfig

if TYPE_CHECKING:
    from tasty_client.cli.config import CLIConfig


@asynccontextmanager
async def get_client(config: "CLIConfig") -> AsyncGenerator[TastyClient]:
    """Create and configure a TastyClient for CLI use.

    This context manager:
    1. Selects production or certification from the CLI flags
    2. Uses environment-specific session storage (XDG_DATA_HOME)
    3. Loads any saved session tokens
    4. Manages connection pooling lifecycle

    Usage:
        async with get_client(cli_config) as client:
            accounts = await client.customers.get_customer_accounts("me")
    """
    tasty_config = TastyConfig(sandbox=config.sandbox)
    token_store = TokenStore(path=config.token_path)

    client = TastyClient(tasty_config, token_store=token_store)
    client.load_session()

    async with client:
        yield client
