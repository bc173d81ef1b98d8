"""Info command implementation.

Binds a file or folder entity and prints its attribute snapshot.
"""

import json
from dataclasses import asdict
from enum import Enum
from pathlib import Path
from typing import Annotated

import typer

from dirkit.entities import FileEntity, FolderEntity
from dirkit.entities.attributes import EntityAttributes, FileAttributes
from dirkit.errors import EntityError
from dirkit.utils.formatting import console, create_table, format_size, print_error


class OutputFormat(str, Enum):
    """Output format options."""

    TABLE = "table"
    JSON = "json"


def show_info(
    path: Annotated[Path, typer.Argument(help="File or folder to inspect.")],
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format.",
            case_sensitive=False,
        ),
    ] = OutputFormat.TABLE,
    measure: Annotated[
        bool,
        typer.Option("--size", "-s", help="Measure total size of a folder."),
    ] = False,
) -> None:
    """Show the attributes of a file or folder."""
    entity: FileEntity | FolderEntity
    try:
        entity = FolderEntity(path) if path.is_dir() else FileEntity(path)
    except EntityError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    folder_size = entity.get_size() if measure and isinstance(entity, FolderEntity) else None
    kind = "folder" if isinstance(entity, FolderEntity) else "file"

    if output_format == OutputFormat.JSON:
        data: dict[str, object] = {"path": str(entity.path), "kind": kind}
        data.update(asdict(entity.attributes))
        if folder_size is not None:
            data["size"] = folder_size
        console.print_json(json.dumps(data))
        return

    _print_table(entity.path, kind, entity.attributes, folder_size)


def _print_table(
    path: Path,
    kind: str,
    attributes: EntityAttributes,
    folder_size: int | None,
) -> None:
    """Display attributes as a two-column Rich table."""
    table = create_table(str(path))
    table.add_column("Attribute", style="muted", no_wrap=True)
    table.add_column("Value", style="text")

    table.add_row("Kind", kind)
    table.add_row("Name", attributes.name)
    table.add_row("Parent", f"{attributes.parent_name} [dim]({attributes.parent_path})[/dim]")
    table.add_row("Owner", attributes.owner or "-")

    if isinstance(attributes, FileAttributes):
        table.add_row("Base name", attributes.base_name)
        table.add_row("Extension", attributes.extension or "-")
        table.add_row("Type", attributes.mime_type)
        table.add_row("Size", f"{format_size(attributes.size)} ({attributes.size} bytes)")
    elif folder_size is not None:
        table.add_row("Size", f"{format_size(folder_size)} ({folder_size} bytes)")

    table.add_row("Created", f"{attributes.created.date} {attributes.created.time}")
    table.add_row("Modified", f"{attributes.modified.date} {attributes.modified.time}")
    table.add_row("Accessed", f"{attributes.accessed.date} {attributes.accessed.time}")

    console.print(table)
