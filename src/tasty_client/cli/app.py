"""Main Typer application."""

import logging
from pathlib import Path

import typer
from rich.logging import RichHandler

from tasty_client.cli.config import CLIConfig, _default_config_dir
from tasty_client.cli.formatters import error_console

app = typer.Typer(
    name="tasty-cli",
    help="tastytrade API command-line interface.",
    no_args_is_help=True,
)


def _configure_logging(verbose: bool) -> None:
    """Route library logging to stderr, at debug level when verbose."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=error_console, show_path=False)],
        force=True,
    )


@app.callback()
def main(
    ctx: typer.Context,
    sandbox: bool = typer.Option(
        False,
        "--sandbox/--production",
        "-s/-p",
        help="Use the certification sandbox or production (default).",
        envvar="TASTY_SANDBOX",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Log every request and response status.",
    ),
    config_dir: Path | None = typer.Option(
        None,
        "--config-dir",
        "-c",
        help="Config directory (default: ~/.config/tasty-cli).",
        envvar="TASTY_CLI_CONFIG_DIR",
    ),
) -> None:
    """tastytrade API command-line interface.

    Use --sandbox to run against the certification environment.
    """
    _configure_logging(verbose)
    ctx.obj = CLIConfig(
        sandbox=sandbox,
        verbose=verbose,
        config_dir=config_dir or _default_config_dir(),
    )
