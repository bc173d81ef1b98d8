"""Folder entity.

Binds to a single directory and adds folder-specific operations:
listing, walking, size measurement, erasing, and deletion.
"""

import logging
import shutil
from enum import Enum
from pathlib import Path

from dirkit.core.probes import is_hidden
from dirkit.entities.attributes import FolderAttributes, read_folder_attributes
from dirkit.entities.base import Entity
from dirkit.walker.engine import iter_tree, walk
from dirkit.walker.models import EntryKind, VisitResult

logger = logging.getLogger(__name__)


class ListKind(str, Enum):
    """Filter for direct folder listings.

    Attributes:
        ALL: Every child.
        FILE: Children that are not directories.
        FOLDER: Children that are directories.
    """

    ALL = "all"
    FILE = "file"
    FOLDER = "folder"


class FolderEntity(Entity[FolderAttributes]):
    """A directory bound to a path.

    Binding fails if the path is not a directory. The folder's size is
    not part of the attribute snapshot; ``get_size`` measures it on
    demand through the walker.
    """

    def _read_attributes(self, path: Path) -> FolderAttributes:
        return read_folder_attributes(path)

    def _is_expected_kind(self, path: Path) -> bool:
        return path.is_dir()

    def get_size(self) -> int:
        """Measure the total size of all regular files below the folder.

        Hidden entries are included. Symlinks are never followed, so each
        file is counted once even when links form a cycle. Entries that
        cannot be read are left out of the sum.

        Returns:
            Total size in bytes.

        Raises:
            StructuralWalkError: If the folder no longer exists.
        """
        return sum(
            event.size_bytes or 0
            for event in iter_tree(self._path, show_hidden=True)
            if event.ok and event.kind == EntryKind.FILE
        )

    def is_empty(self) -> bool:
        """Check if the folder holds no file data.

        A folder containing only empty files or empty sub-folders
        counts as empty.
        """
        return self.get_size() == 0

    def list(self, kind: ListKind = ListKind.ALL, show_hidden: bool = False) -> list[Path]:
        """List the direct children of the folder.

        Args:
            kind: Which children to include.
            show_hidden: If True, include hidden children.

        Returns:
            Sorted list of child paths.

        Raises:
            OSError: If the folder cannot be listed.
        """
        children: list[Path] = []
        for child in sorted(self._path.iterdir()):
            try:
                if not show_hidden and is_hidden(child):
                    continue
                is_dir = child.is_dir()
            except OSError as e:
                logger.debug("Skipping unreadable child %s: %s", child, e)
                continue

            if kind == ListKind.FILE and is_dir:
                continue
            if kind == ListKind.FOLDER and not is_dir:
                continue
            children.append(child)

        return children

    def walk(self, show_hidden: bool = False) -> VisitResult:
        """Walk the folder's subtree.

        Args:
            show_hidden: If True, include hidden entries.

        Returns:
            VisitResult for the subtree, the folder itself excluded.

        Raises:
            StructuralWalkError: If the folder no longer exists.
        """
        return walk(self._path, show_hidden)

    def erase(self) -> bool:
        """Remove every child of the folder, keeping the folder itself.

        Removal stops at the first child that cannot be removed, which
        may leave the folder partially erased.

        Returns:
            True if the folder is now empty, False otherwise.
        """
        try:
            for child in self._path.iterdir():
                _remove_tree(child)
        except OSError as e:
            logger.warning("Cannot erase %s: %s", self._path, e)
            return False

        logger.info("Erased contents of %s", self._path)
        return not any(self._path.iterdir())

    def delete(self) -> bool:
        """Delete the folder and everything below it.

        A failure partway through may leave a partially emptied tree.

        Returns:
            True if the folder no longer exists, False otherwise.
        """
        try:
            _remove_tree(self._path)
        except OSError as e:
            logger.warning("Cannot delete %s: %s", self._path, e)
            return False

        logger.info("Deleted folder %s", self._path)
        return not self._path.exists() and not self._path.is_symlink()


def _remove_tree(path: Path) -> None:
    """Remove a file, a symlink, or a directory tree."""
    if path.is_dir() and not path.is_symlink():
        shutil.rmtree(path)
    else:
        path.unlink()
