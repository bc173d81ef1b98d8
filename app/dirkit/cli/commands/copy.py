"""Copy command implementation.

Copies files and folders into a destination directory and reports the
outcome of each source.
"""

from pathlib import Path
from typing import Annotated

import typer

from dirkit.copy import Copier, CopyReport, CopyStatus
from dirkit.core.config import DirkitConfig
from dirkit.utils.formatting import console, create_table, print_success, print_warning


def copy_sources(
    ctx: typer.Context,
    sources: Annotated[list[Path], typer.Argument(help="Files and folders to copy.")],
    destination: Annotated[
        Path,
        typer.Option("--to", "-t", help="Destination directory."),
    ],
    replace: Annotated[
        bool | None,
        typer.Option(
            "--replace/--no-replace",
            help="Overwrite existing destinations (default from config).",
        ),
    ] = None,
    move: Annotated[
        bool | None,
        typer.Option(
            "--move/--keep-source",
            help="Remove each source after it was copied (default from config).",
        ),
    ] = None,
) -> None:
    """Copy files and folders into a directory. Exits with 1 if any source failed."""
    settings: DirkitConfig = ctx.obj["config"]
    copier = Copier(
        replace=settings.copy_settings.replace if replace is None else replace,
        delete_source=settings.copy_settings.delete_source if move is None else move,
    )

    report = copier.copy([str(s) for s in sources], destination)

    _print_report(report)

    if report.failed:
        raise typer.Exit(code=1)


def _print_report(report: CopyReport) -> None:
    """Display copy results and a summary."""
    table = create_table("Copy Results")
    table.add_column("Status", width=8, justify="center")
    table.add_column("Source", no_wrap=True)
    table.add_column("Destination", no_wrap=True)
    table.add_column("Details", style="dim")

    for r in report.results:
        if r.status == CopyStatus.COPIED:
            status = "[success]copied[/]"
            detail = "source removed" if r.source_deleted else ""
        elif r.status == CopyStatus.SKIPPED:
            status = "[info]skipped[/]"
            detail = "destination exists"
        else:
            status = "[error]failed[/]"
            detail = r.error or "Unknown error"
        table.add_row(status, r.source, r.destination or "-", detail)

    console.print(table)

    copied = len(report.succeeded)
    failed = len(report.failed)
    skipped = len(report.skipped)

    if failed:
        print_warning(f"{copied} copied, {skipped} skipped, {failed} failed")
    else:
        print_success(f"{copied} copied, {skipped} skipped.")
