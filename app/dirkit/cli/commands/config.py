"""Config commands.

Provides commands to show the effective configuration and to write a
default config file.
"""

from pathlib import Path
from typing import Annotated

import tomli_w
import typer

from dirkit.core.config import DirkitConfig, save_config
from dirkit.core.paths import get_config_path
from dirkit.errors import ConfigError
from dirkit.utils.formatting import console, print_error, print_success, print_warning

app = typer.Typer(
    help="Show or initialize the dirkit configuration.",
    invoke_without_command=True,
    no_args_is_help=True,
)


@app.command()
def show(ctx: typer.Context) -> None:
    """Show the effective configuration as TOML."""
    settings: DirkitConfig = ctx.obj["config"]
    path: Path = ctx.obj.get("config_path") or get_config_path()

    console.print(f"[dim]# {path}{'' if path.exists() else ' (not found, defaults)'}[/dim]")
    console.print(tomli_w.dumps(settings.model_dump(by_alias=True)), highlight=False, markup=False)


@app.command()
def init(
    ctx: typer.Context,
    force: Annotated[
        bool,
        typer.Option("--force", help="Overwrite an existing config file."),
    ] = False,
) -> None:
    """Write a config file with default settings."""
    path: Path = ctx.obj.get("config_path") or get_config_path()

    if path.exists() and not force:
        print_warning(f"Config already exists: {path} (use --force to overwrite)")
        raise typer.Exit(code=1)

    try:
        saved = save_config(DirkitConfig(), path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Config written to {saved}")
