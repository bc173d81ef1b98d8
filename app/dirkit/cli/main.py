"""Main CLI application entry point.

Defines the Typer application and global options.
"""

import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.logging import RichHandler

from dirkit import __version__
from dirkit.cli.commands import config, copy, info, search, walk
from dirkit.core.config import load_config_or_default
from dirkit.errors import ConfigError
from dirkit.utils.formatting import err_console, print_error

# Create main Typer app
app = typer.Typer(
    name="dirkit",
    help="Inspect, walk, search and copy filesystem trees.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"dirkit version {__version__}")
        raise typer.Exit()


def configure_logging(verbose: bool, quiet: bool) -> None:
    """Route dirkit log records to stderr through Rich.

    Only the ``dirkit`` package logger is configured; the root logger is
    left to the host application.

    Args:
        verbose: Show DEBUG records.
        quiet: Show ERROR records only.
    """
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    else:
        level = logging.WARNING

    package_logger = logging.getLogger("dirkit")
    package_logger.setLevel(level)
    if not any(isinstance(h, RichHandler) for h in package_logger.handlers):
        handler = RichHandler(console=err_console, show_path=False, show_time=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
        package_logger.addHandler(handler)


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable verbose output.",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Suppress non-essential output.",
        ),
    ] = False,
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            "-c",
            help="Path to config.toml (default: ~/.config/dirkit/config.toml).",
        ),
    ] = None,
) -> None:
    """dirkit - filesystem inspection and traversal toolkit.

    Show file and folder attributes, walk directory trees, search by
    name, and copy files and folders in bulk.
    """
    configure_logging(verbose, quiet)

    try:
        settings = load_config_or_default(config_path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    # Store options in context for subcommands
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    ctx.obj["config_path"] = config_path
    ctx.obj["config"] = settings


# Register commands
app.command(name="info")(info.show_info)
app.command(name="walk")(walk.walk_tree)
app.command(name="search")(search.search_names)
app.command(name="copy")(copy.copy_sources)
app.add_typer(config.app, name="config")


if __name__ == "__main__":
    app()
