"""Bulk copy of files and folders into a destination directory.

Each source is copied independently: a missing or failing source is
recorded in the report and the batch moves on to the next one.
"""

import logging
import os
import shutil
from collections.abc import Callable, Sequence
from pathlib import Path

from dirkit.copy.models import CopyReport, CopyResult, CopyStatus

logger = logging.getLogger(__name__)


class Copier:
    """Copies a list of sources into a destination directory.

    Attributes:
        _replace: If True, existing destinations are overwritten (folders
            are merged); if False, sources with an existing destination
            are skipped.
        _delete_source: If True, each successfully copied source is removed.
    """

    def __init__(self, *, replace: bool = True, delete_source: bool = False) -> None:
        """Initialize the Copier.

        Args:
            replace: Overwrite existing destinations instead of skipping them.
            delete_source: Remove each source after it was copied.
        """
        self._replace = replace
        self._delete_source = delete_source

    def copy(
        self,
        sources: Sequence[str | os.PathLike[str]],
        destination_dir: str | os.PathLike[str],
        *,
        should_stop: Callable[[], bool] | None = None,
    ) -> CopyReport:
        """Copy every source into ``destination_dir``.

        Args:
            sources: Files and folders to copy, processed in order.
            destination_dir: Directory receiving the copies. Created on demand.
            should_stop: Optional callback checked before each source; once it
                returns True the remaining sources are left out of the report.

        Returns:
            CopyReport with one result per processed source.
        """
        destination = Path(destination_dir)
        results: list[CopyResult] = []

        for source in sources:
            if should_stop is not None and should_stop():
                logger.info("Copy stopped after %d of %d source(s)", len(results), len(sources))
                break
            results.append(self._copy_single(os.fspath(source), destination))

        return CopyReport(results=tuple(results))

    def _copy_single(self, source: str, destination_dir: Path) -> CopyResult:
        """Copy a single source.

        Steps:
        1. Check the source exists
        2. Compute the destination from the source's final segment
        3. Skip if the destination exists and replacing is disabled
        4. Copy the folder tree or the file
        5. Remove the source if requested (failure is non-fatal)

        Args:
            source: Source path as passed by the caller.
            destination_dir: Directory receiving the copy.

        Returns:
            CopyResult for this source.
        """
        src = Path(source)

        # 1. Check existence (a dangling symlink counts as missing)
        if not os.path.exists(src):
            return CopyResult(
                source=source,
                destination=None,
                status=CopyStatus.FAILED,
                error=f"Source does not exist: {source}",
            )

        # 2. Compute destination
        name = Path(os.path.abspath(src)).name
        if not name:
            return CopyResult(
                source=source,
                destination=None,
                status=CopyStatus.FAILED,
                error=f"Source has no name to copy under: {source}",
            )
        target = destination_dir / name

        # 3. Skip existing
        if os.path.lexists(target) and not self._replace:
            logger.debug("Skipping %s: %s already exists", source, target)
            return CopyResult(source=source, destination=str(target), status=CopyStatus.SKIPPED)

        # 4. Copy
        try:
            self._copy_path(src, target)
        except (OSError, shutil.Error, ValueError) as e:
            logger.debug("Copy of %s to %s failed: %s", source, target, e)
            return CopyResult(
                source=source,
                destination=str(target),
                status=CopyStatus.FAILED,
                error=str(e),
            )

        logger.info("Copied %s to %s", source, target)

        # 5. Remove source (non-fatal)
        source_deleted = False
        if self._delete_source:
            source_deleted = _remove_source(src)

        return CopyResult(
            source=source,
            destination=str(target),
            status=CopyStatus.COPIED,
            source_deleted=source_deleted,
        )

    @staticmethod
    def _copy_path(src: Path, target: Path) -> None:
        """Copy a folder tree or a single file to ``target``.

        An existing symlink or file at ``target`` is removed first so the
        copy lands at ``target`` itself. Folders merge into an existing
        folder.

        Raises:
            ValueError: If a folder would be copied into its own subtree.
            IsADirectoryError: If a file would replace an existing folder.
            NotADirectoryError: If a folder would replace an existing file.
            OSError: If the copy itself fails.
            shutil.Error: If some files inside a folder failed to copy.
        """
        if os.path.islink(target):
            # Replace the link itself, never whatever it points at
            target.unlink()

        if src.is_dir() and not src.is_symlink():
            resolved_src = src.resolve()
            resolved_target = target.resolve()
            if resolved_target == resolved_src or resolved_target.is_relative_to(resolved_src):
                msg = f"Cannot copy {src} into its own subtree: {target}"
                raise ValueError(msg)
            if os.path.lexists(target) and not target.is_dir():
                msg = f"Destination exists and is not a directory: {target}"
                raise NotADirectoryError(msg)
            target.parent.mkdir(parents=True, exist_ok=True)
            shutil.copytree(src, target, symlinks=True, dirs_exist_ok=True)
            return

        if target.is_dir():
            msg = f"Destination exists and is a directory: {target}"
            raise IsADirectoryError(msg)
        if os.path.lexists(target):
            target.unlink()
        target.parent.mkdir(parents=True, exist_ok=True)
        shutil.copy2(src, target, follow_symlinks=False)


def copy_paths(
    sources: Sequence[str | os.PathLike[str]],
    destination_dir: str | os.PathLike[str],
    *,
    replace: bool = True,
    delete_source: bool = False,
    should_stop: Callable[[], bool] | None = None,
) -> CopyReport:
    """Copy sources into a destination directory.

    Convenience wrapper around ``Copier``.

    Args:
        sources: Files and folders to copy, processed in order.
        destination_dir: Directory receiving the copies.
        replace: Overwrite existing destinations instead of skipping them.
        delete_source: Remove each source after it was copied.
        should_stop: Optional callback checked before each source.

    Returns:
        CopyReport with one result per processed source.
    """
    copier = Copier(replace=replace, delete_source=delete_source)
    return copier.copy(sources, destination_dir, should_stop=should_stop)


def _remove_source(src: Path) -> bool:
    """Remove a copied source, logging instead of raising on failure."""
    try:
        if src.is_dir() and not src.is_symlink():
            shutil.rmtree(src)
        else:
            src.unlink()
    except OSError as e:
        logger.warning("Copied %s but could not remove the source: %s", src, e)
        return False
    return True
