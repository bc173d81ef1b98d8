"""Walker domain models.

This module defines the data structures produced by a directory walk:
entry kinds, the per-entry event stream, and the folded visit result
that separates visited paths from failed ones.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class EntryKind(str, Enum):
    """Type of filesystem entry seen during a walk.

    Attributes:
        DIRECTORY: Regular directory.
        FILE: Regular file.
        SYMLINK: Symbolic link with a readable target.
        DEAD_SYMLINK: Symbolic link whose target cannot be read.
        OTHER: Socket, FIFO, device or other special file.
        UNKNOWN: Metadata could not be read at all.
    """

    DIRECTORY = "directory"
    FILE = "file"
    SYMLINK = "symlink"
    DEAD_SYMLINK = "dead_symlink"
    OTHER = "other"
    UNKNOWN = "unknown"


@dataclass(frozen=True, slots=True)
class VisitEvent:
    """A single entry reported by the walker.

    Attributes:
        path: Path of the entry.
        kind: Type of the entry.
        error: Exception captured while visiting the entry, None on success.
        size_bytes: Size of regular files (lstat), None for everything else.
    """

    path: Path
    kind: EntryKind
    error: OSError | None = None
    size_bytes: int | None = None

    @property
    def ok(self) -> bool:
        """Check if the entry was visited successfully."""
        return self.error is None


@dataclass(frozen=True, slots=True)
class VisitFailure:
    """A path whose visitation failed, with the captured cause.

    Attributes:
        path: Path that could not be visited.
        exception: The captured OS error.
    """

    path: Path
    exception: OSError

    @property
    def error(self) -> str:
        """Human-readable description of the failure."""
        return self.exception.strerror or str(self.exception)


@dataclass(frozen=True, slots=True)
class VisitResult:
    """Outcome of one walk.

    Attributes:
        root: Directory the walk started from (never part of ``visited``).
        show_hidden: Hidden-entry policy used for the walk.
        visited: Successfully visited paths, directories after their children.
        failures: Failed entries in the order they were encountered.
        cancelled: True if the walk was stopped before completing.
    """

    root: Path
    show_hidden: bool
    visited: tuple[Path, ...]
    failures: tuple[VisitFailure, ...]
    cancelled: bool = False

    @property
    def failed(self) -> tuple[Path, ...]:
        """Paths that could not be visited, in encounter order."""
        return tuple(f.path for f in self.failures)

    @property
    def complete(self) -> bool:
        """Check if every entry was visited without failure or cancellation."""
        return not self.failures and not self.cancelled
