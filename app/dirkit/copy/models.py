"""Copy result models.

This module defines the per-source outcome of a bulk copy and the
report that partitions a batch into copied, failed and skipped sources.
"""

from dataclasses import dataclass
from enum import Enum


class CopyStatus(str, Enum):
    """Outcome of copying one source.

    Attributes:
        COPIED: Source was copied to the destination.
        FAILED: Source was missing or the copy raised an error.
        SKIPPED: Destination already existed and replacing was disabled.
    """

    COPIED = "copied"
    FAILED = "failed"
    SKIPPED = "skipped"


@dataclass(frozen=True, slots=True)
class CopyResult:
    """Result of copying a single source.

    Attributes:
        source: Source path exactly as the caller passed it.
        destination: Computed destination path, None if it could not be computed.
        status: Outcome of the copy.
        error: Error message if the copy failed, None otherwise.
        source_deleted: Whether the source was removed after copying.
    """

    source: str
    destination: str | None
    status: CopyStatus
    error: str | None = None
    source_deleted: bool = False

    @property
    def success(self) -> bool:
        """Check if the source was copied."""
        return self.status == CopyStatus.COPIED


@dataclass(frozen=True, slots=True)
class CopyReport:
    """Outcome of a bulk copy, one result per requested source in input order.

    Attributes:
        results: Per-source results.
    """

    results: tuple[CopyResult, ...]

    @property
    def succeeded(self) -> list[str]:
        """Sources that were copied."""
        return [r.source for r in self.results if r.status == CopyStatus.COPIED]

    @property
    def failed(self) -> list[str]:
        """Sources that could not be copied."""
        return [r.source for r in self.results if r.status == CopyStatus.FAILED]

    @property
    def skipped(self) -> list[str]:
        """Sources left alone because their destination already existed."""
        return [r.source for r in self.results if r.status == CopyStatus.SKIPPED]

    @property
    def errors(self) -> dict[str, str]:
        """Error message per failed source."""
        return {
            r.source: r.error or "Unknown error"
            for r in self.results
            if r.status == CopyStatus.FAILED
        }
