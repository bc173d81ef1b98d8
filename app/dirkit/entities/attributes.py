"""Attribute snapshots for files and folders.

Attributes are read from the OS in one pass and frozen. Any failure
while reading aborts the whole snapshot, so a caller either gets a
fully populated record or an exception.
"""

import os
import stat
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from dirkit.core.probes import detect_type, owner_name
from dirkit.errors import AttributeReadError, PathNotFoundError, WrongKindError

DATE_FORMAT = "%Y-%m-%d"
TIME_FORMAT = "%H:%M:%S"


@dataclass(frozen=True, slots=True)
class Timestamp:
    """A point in time split into local date and time strings.

    Attributes:
        epoch: Seconds since the epoch as reported by the OS.
        date: Local date as ``YYYY-MM-DD``.
        time: Local time as ``HH:MM:SS``.
    """

    epoch: float
    date: str
    time: str

    @classmethod
    def from_epoch(cls, epoch: float) -> "Timestamp":
        """Build a Timestamp from an epoch value, converting to local time."""
        moment = datetime.fromtimestamp(epoch)
        return cls(
            epoch=epoch,
            date=moment.strftime(DATE_FORMAT),
            time=moment.strftime(TIME_FORMAT),
        )


@dataclass(frozen=True, slots=True)
class EntityAttributes:
    """Attributes shared by files and folders.

    Attributes:
        name: Final path segment.
        parent_path: Absolute path of the parent directory.
        parent_name: Name of the parent, or the filesystem root name.
        owner: Account name owning the path.
        created: Creation time (birth time where the OS exposes it).
        modified: Last modification time.
        accessed: Last access time.
    """

    name: str
    parent_path: str
    parent_name: str
    owner: str
    created: Timestamp
    modified: Timestamp
    accessed: Timestamp


@dataclass(frozen=True, slots=True)
class FileAttributes(EntityAttributes):
    """Attributes of a single file.

    Attributes:
        base_name: Name without the final extension.
        extension: Final extension without the dot, empty if none.
        size: Size in bytes.
        mime_type: Content-sniffed MIME type.
    """

    base_name: str
    extension: str
    size: int
    mime_type: str


@dataclass(frozen=True, slots=True)
class FolderAttributes(EntityAttributes):
    """Attributes of a single folder."""


def normalize_path(path: str | os.PathLike[str]) -> Path:
    """Expand ``~`` and make a path absolute using the host conventions."""
    return Path(os.path.abspath(os.path.expanduser(path)))


def read_file_attributes(path: Path) -> FileAttributes:
    """Snapshot the attributes of a file.

    Args:
        path: Absolute path of the file.

    Returns:
        Fully populated FileAttributes.

    Raises:
        PathNotFoundError: If the path does not exist.
        WrongKindError: If the path is a directory.
        AttributeReadError: If any attribute cannot be read.
    """
    st = _stat_existing(path)
    if stat.S_ISDIR(st.st_mode):
        msg = f"Expected a file but found a directory: {path}"
        raise WrongKindError(msg)

    try:
        owner = owner_name(path, st)
        mime_type = detect_type(path)
    except OSError as e:
        msg = f"Cannot read attributes of {path}: {e}"
        raise AttributeReadError(msg) from e

    # Path.suffix is empty for dotfiles like ".bashrc"
    extension = path.suffix[1:]
    base_name = path.name[: -len(path.suffix)] if path.suffix else path.name

    created, modified, accessed = _timestamps(st)
    return FileAttributes(
        name=path.name,
        parent_path=str(path.parent),
        parent_name=_parent_name(path),
        owner=owner,
        created=created,
        modified=modified,
        accessed=accessed,
        base_name=base_name,
        extension=extension,
        size=st.st_size,
        mime_type=mime_type,
    )


def read_folder_attributes(path: Path) -> FolderAttributes:
    """Snapshot the attributes of a folder.

    A filesystem root has no name or parent of its own; for a root all
    three of name, parent_path and parent_name are the root path.

    Args:
        path: Absolute path of the folder.

    Returns:
        Fully populated FolderAttributes.

    Raises:
        PathNotFoundError: If the path does not exist.
        WrongKindError: If the path is not a directory.
        AttributeReadError: If any attribute cannot be read.
    """
    st = _stat_existing(path)
    if not stat.S_ISDIR(st.st_mode):
        msg = f"Expected a directory but found something else: {path}"
        raise WrongKindError(msg)

    try:
        owner = owner_name(path, st)
    except OSError as e:
        msg = f"Cannot read attributes of {path}: {e}"
        raise AttributeReadError(msg) from e

    if path.parent == path:
        name = parent_path = parent_name = str(path)
    else:
        name = path.name
        parent_path = str(path.parent)
        parent_name = _parent_name(path)

    created, modified, accessed = _timestamps(st)
    return FolderAttributes(
        name=name,
        parent_path=parent_path,
        parent_name=parent_name,
        owner=owner,
        created=created,
        modified=modified,
        accessed=accessed,
    )


def _stat_existing(path: Path) -> os.stat_result:
    """Stat a path, mapping a missing path to PathNotFoundError."""
    try:
        return path.stat()
    except FileNotFoundError as e:
        msg = f"Path does not exist: {path}"
        raise PathNotFoundError(msg) from e
    except OSError as e:
        msg = f"Cannot read attributes of {path}: {e}"
        raise AttributeReadError(msg) from e


def _parent_name(path: Path) -> str:
    """Name of the parent directory, or the root name for top-level paths."""
    return path.parent.name or path.anchor


def _timestamps(st: os.stat_result) -> tuple[Timestamp, Timestamp, Timestamp]:
    """Build (created, modified, accessed) from a stat result."""
    birth = getattr(st, "st_birthtime", None)
    created = birth if birth is not None else st.st_ctime
    return (
        Timestamp.from_epoch(created),
        Timestamp.from_epoch(st.st_mtime),
        Timestamp.from_epoch(st.st_atime),
    )
