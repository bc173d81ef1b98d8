"""Walk command implementation.

Walks a directory tree and lists visited and failed entries.
"""

import json
from enum import Enum
from pathlib import Path
from typing import Annotated

import typer

from dirkit.core.config import DirkitConfig
from dirkit.errors import StructuralWalkError
from dirkit.utils.formatting import console, create_table, print_error, print_warning
from dirkit.walker import VisitResult, walk


class OutputFormat(str, Enum):
    """Output format options."""

    TABLE = "table"
    JSON = "json"


def walk_tree(
    ctx: typer.Context,
    root: Annotated[Path, typer.Argument(help="Directory to walk.")],
    hidden: Annotated[
        bool | None,
        typer.Option(
            "--hidden/--no-hidden",
            help="Include hidden entries (default from config).",
        ),
    ] = None,
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format.",
            case_sensitive=False,
        ),
    ] = OutputFormat.TABLE,
) -> None:
    """Walk a directory tree, children before their folder."""
    settings: DirkitConfig = ctx.obj["config"]
    show_hidden = settings.walk.show_hidden if hidden is None else hidden

    try:
        result = walk(root, show_hidden)
    except StructuralWalkError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if output_format == OutputFormat.JSON:
        _print_json(result)
        return

    _print_table(result)


def _print_json(result: VisitResult) -> None:
    """Display a walk result as JSON."""
    data = {
        "root": str(result.root),
        "show_hidden": result.show_hidden,
        "visited": [str(p) for p in result.visited],
        "failed": [{"path": str(f.path), "error": f.error} for f in result.failures],
        "cancelled": result.cancelled,
    }
    console.print_json(json.dumps(data))


def _print_table(result: VisitResult) -> None:
    """Display a walk result as a Rich table with a summary."""
    table = create_table(f"Walk of {result.root}")
    table.add_column("Status", width=8, justify="center")
    table.add_column("Path", no_wrap=True)
    table.add_column("Details", style="dim")

    for path in result.visited:
        table.add_row("[success]OK[/success]", _relative(path, result.root), "")
    for failure in result.failures:
        table.add_row("[error]FAIL[/error]", _relative(failure.path, result.root), failure.error)

    console.print(table)
    console.print(
        f"\n[dim]{len(result.visited)} visited, {len(result.failures)} failed[/dim]"
    )
    if result.failures:
        print_warning("Some entries could not be visited.")


def _relative(path: Path, root: Path) -> str:
    """Show a path relative to the walk root where possible."""
    try:
        return str(path.relative_to(root)) or "."
    except ValueError:
        return str(path)
