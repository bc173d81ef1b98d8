"""Search command implementation.

Searches a directory tree for entries whose name matches a key.
"""

from pathlib import Path
from typing import Annotated

import typer

from dirkit.core.config import DirkitConfig
from dirkit.errors import StructuralWalkError
from dirkit.search import FolderSearchEngine, SearchQueryBuilder
from dirkit.utils.formatting import console, print_error, print_info, print_success


def search_names(
    ctx: typer.Context,
    root: Annotated[Path, typer.Argument(help="Directory to search below.")],
    key: Annotated[str, typer.Argument(help="Name or name fragment to find.")],
    exact: Annotated[
        bool | None,
        typer.Option(
            "--exact/--substring",
            help="Match whole names or name fragments (default from config).",
        ),
    ] = None,
    case_sensitive: Annotated[
        bool | None,
        typer.Option(
            "--case-sensitive/--ignore-case",
            help="Compare names case-sensitively (default from config).",
        ),
    ] = None,
    hidden: Annotated[
        bool | None,
        typer.Option(
            "--hidden/--no-hidden",
            help="Search hidden entries too (default from config).",
        ),
    ] = None,
    first: Annotated[
        bool,
        typer.Option("--first", help="Stop at the first match and only report whether one exists."),
    ] = False,
) -> None:
    """Search a directory tree by name. Exits with 1 when nothing matches."""
    settings: DirkitConfig = ctx.obj["config"]

    try:
        query = (
            SearchQueryBuilder(root, key)
            .with_exact_match(settings.search.exact_match if exact is None else exact)
            .with_case_sensitive(
                settings.search.case_sensitive if case_sensitive is None else case_sensitive
            )
            .build()
        )
    except ValueError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    show_hidden = settings.walk.show_hidden if hidden is None else hidden
    engine = FolderSearchEngine(query)

    try:
        if first:
            found = engine.contains(show_hidden)
            matches: list[Path] = []
        else:
            matches = engine.search(show_hidden)
            found = bool(matches)
    except StructuralWalkError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    if not found:
        print_info(f"No entries matching '{key}' under {query.root_path}.")
        raise typer.Exit(code=1)

    if first:
        print_success(f"Found an entry matching '{key}' under {query.root_path}.")
        return

    for path in matches:
        console.print(str(path), highlight=False, soft_wrap=True)
    console.print(f"\n[dim]{len(matches)} match(es)[/dim]")
