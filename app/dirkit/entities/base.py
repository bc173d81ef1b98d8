"""Abstract base class for filesystem entities.

An entity is bound to one path and holds an immutable attribute
snapshot of it. Binding, re-binding and renaming are shared here;
subclasses supply the snapshot reader and the kind check.
"""

import logging
import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Generic, TypeVar

from dirkit.entities.attributes import EntityAttributes, normalize_path
from dirkit.errors import EntityError

logger = logging.getLogger(__name__)

AttributesT = TypeVar("AttributesT", bound=EntityAttributes)


class Entity(ABC, Generic[AttributesT]):
    """A file or folder bound to a path.

    Example:
        >>> entity = FileEntity("notes.txt")
        >>> entity.attributes.modified.date
        '2024-01-15'
    """

    def __init__(self, path: str | os.PathLike[str]) -> None:
        """Bind the entity to a path.

        Args:
            path: Path to bind to. Relative paths are made absolute.

        Raises:
            PathNotFoundError: If the path does not exist.
            WrongKindError: If the path is not the kind this entity models.
            AttributeReadError: If any attribute cannot be read.
        """
        self._path = normalize_path(path)
        self._attributes = self._read_attributes(self._path)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self._path)!r})"

    @property
    def path(self) -> Path:
        """Absolute path this entity is bound to."""
        return self._path

    @property
    def attributes(self) -> AttributesT:
        """Attribute snapshot taken at the last bind."""
        return self._attributes

    @abstractmethod
    def _read_attributes(self, path: Path) -> AttributesT:
        """Snapshot the attributes of ``path``, checking its kind."""

    @abstractmethod
    def _is_expected_kind(self, path: Path) -> bool:
        """Check if ``path`` currently is the kind this entity models."""

    @abstractmethod
    def delete(self) -> bool:
        """Remove the entity from disk.

        Returns:
            True if the path no longer exists afterward.
        """

    def rebind(self, path: str | os.PathLike[str]) -> None:
        """Point the entity at a new path and take a fresh snapshot.

        The switch is atomic: if the new snapshot fails, the entity keeps
        its previous path and attributes.

        Args:
            path: New path to bind to.

        Raises:
            PathNotFoundError: If the path does not exist.
            WrongKindError: If the path is not the kind this entity models.
            AttributeReadError: If any attribute cannot be read.
        """
        new_path = normalize_path(path)
        attributes = self._read_attributes(new_path)
        self._path = new_path
        self._attributes = attributes

    def exists(self) -> bool:
        """Check if the bound path still exists and is still the expected kind."""
        return self._is_expected_kind(self._path)

    def rename(self, new_name: str) -> bool:
        """Rename the entity within its parent directory.

        The target is always ``parent / new_name``; names containing a
        path separator are rejected rather than treated as a move. An
        existing target is never overwritten.

        Args:
            new_name: New final path segment.

        Returns:
            True if the rename succeeded and the entity was re-bound,
            False otherwise (the entity stays bound to its old path). If
            the renamed entry cannot be read back, the rename is undone.
        """
        if not _is_plain_name(new_name):
            logger.warning("Rejected rename of %s to invalid name %r", self._path, new_name)
            return False

        target = self._path.parent / new_name
        if os.path.lexists(target):
            logger.warning("Rename target already exists: %s", target)
            return False

        try:
            os.rename(self._path, target)
        except OSError as e:
            logger.warning("Cannot rename %s to %s: %s", self._path, target, e)
            return False

        old_path = self._path
        try:
            self.rebind(target)
        except EntityError as e:
            logger.warning("Renamed %s to %s but cannot re-read it: %s", self._path, target, e)
            try:
                os.rename(target, self._path)
            except OSError as restore_error:
                logger.error(
                    "Cannot move %s back to %s: %s", target, self._path, restore_error
                )
            return False

        logger.info("Renamed %s to %s", old_path, target)
        return True


def _is_plain_name(name: str) -> bool:
    """Check if a name is a single path segment."""
    if not name or name in (".", ".."):
        return False
    return not any(sep and sep in name for sep in (os.sep, os.altsep))
