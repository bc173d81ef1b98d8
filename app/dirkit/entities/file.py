"""File entity.

Binds to a single non-directory path and adds file-specific
operations: emptiness check, deletion, and lock probing.
"""

import logging
import os
import sys
import uuid
from pathlib import Path

from dirkit.entities.attributes import FileAttributes, read_file_attributes
from dirkit.entities.base import Entity

if sys.platform == "win32":
    import msvcrt
else:
    import fcntl

logger = logging.getLogger(__name__)


class FileEntity(Entity[FileAttributes]):
    """A file bound to a path.

    Binding fails if the path is a directory. Attributes are a snapshot;
    call ``rebind`` or ``rename`` to refresh them.
    """

    def _read_attributes(self, path: Path) -> FileAttributes:
        return read_file_attributes(path)

    def _is_expected_kind(self, path: Path) -> bool:
        return path.exists() and not path.is_dir()

    def is_empty(self) -> bool:
        """Check if the file currently has zero bytes.

        Raises:
            OSError: If the file cannot be read.
        """
        return self._path.stat().st_size == 0

    def delete(self) -> bool:
        """Delete the file.

        Returns:
            True if the file was removed and no longer exists,
            False if it was missing or could not be removed.
        """
        try:
            self._path.unlink()
        except FileNotFoundError:
            logger.warning("Cannot delete %s: path does not exist", self._path)
            return False
        except OSError as e:
            logger.warning("Cannot delete %s: %s", self._path, e)
            return False

        logger.info("Deleted file %s", self._path)
        return not os.path.lexists(self._path)

    def is_locked(self) -> bool:
        """Check if another process holds the file locked.

        Two probes run in order:
        1. Open for read/write and take a non-blocking exclusive lock.
        2. Rename the file to a throwaway sibling name and back, which
           catches share-mode locks the advisory lock misses.

        The handle and lock from probe 1 are always released before
        probe 2 runs.

        Returns:
            True if either probe failed, False if the file is free.
        """
        if not _can_lock_exclusively(self._path):
            logger.debug("Exclusive lock probe failed for %s", self._path)
            return True

        probe_path = self._path.with_name(f".{uuid.uuid4().hex}.lockprobe")
        try:
            os.rename(self._path, probe_path)
        except OSError as e:
            logger.debug("Rename probe failed for %s: %s", self._path, e)
            return True

        try:
            os.rename(probe_path, self._path)
        except OSError as e:
            logger.error("Cannot restore %s from lock probe %s: %s", self._path, probe_path, e)
            return True

        return False


def _can_lock_exclusively(path: Path) -> bool:
    """Try to open a file read/write and take an exclusive lock on it.

    Args:
        path: File to probe.

    Returns:
        True if the lock was acquired (and released), False otherwise.
    """
    # Closing the handle drops the lock even if the explicit unlock fails
    try:
        with open(path, "r+b") as handle:
            _lock(handle.fileno())
            _unlock(handle.fileno())
    except OSError:
        return False
    return True


if sys.platform == "win32":

    def _lock(fd: int) -> None:
        msvcrt.locking(fd, msvcrt.LK_NBLCK, 1)

    def _unlock(fd: int) -> None:
        os.lseek(fd, 0, os.SEEK_SET)
        msvcrt.locking(fd, msvcrt.LK_UNLCK, 1)

else:

    def _lock(fd: int) -> None:
        fcntl.flock(fd, fcntl.LOCK_EX | fcntl.LOCK_NB)

    def _unlock(fd: int) -> None:
        fcntl.flock(fd, fcntl.LOCK_UN)
