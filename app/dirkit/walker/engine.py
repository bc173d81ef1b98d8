"""Depth-first directory walker with per-entry failure tracking.

The walker reports every entry below a root as a ``VisitEvent``.
Directories are reported after their whole subtree (post-order), and
the root itself is never reported. Errors on a single entry are
captured in its event and never stop the walk.
"""

import logging
import os
import stat
from collections.abc import Callable, Generator, Iterator
from pathlib import Path

from dirkit.core.probes import is_hidden
from dirkit.errors import StructuralWalkError
from dirkit.walker.models import EntryKind, VisitEvent, VisitFailure, VisitResult

logger = logging.getLogger(__name__)

StopCallback = Callable[[], bool]

# Generator return value: True if the entry (and its subtree) was fully processed
_EntryWalk = Generator[VisitEvent, None, bool]


def iter_tree(
    root: str | os.PathLike[str],
    *,
    show_hidden: bool = False,
    should_stop: StopCallback | None = None,
) -> Iterator[VisitEvent]:
    """Walk a directory tree and yield an event per entry.

    The root is validated eagerly; the walk itself is lazy.

    Args:
        root: Directory to walk.
        show_hidden: If True, include hidden entries and their subtrees.
        should_stop: Optional callback checked before each entry. The walk
            ends as soon as it returns True.

    Returns:
        Iterator of VisitEvent in post-order, root excluded.

    Raises:
        StructuralWalkError: If the root does not exist or is not a directory.
    """
    root_path = _check_root(root)
    return _visit_directory(root_path, show_hidden, should_stop, record=False)


def walk(
    root: str | os.PathLike[str],
    show_hidden: bool = False,
    *,
    should_stop: StopCallback | None = None,
) -> VisitResult:
    """Walk a directory tree and split entries into visited and failed.

    Args:
        root: Directory to walk.
        show_hidden: If True, include hidden entries and their subtrees.
        should_stop: Optional callback checked before each entry.

    Returns:
        VisitResult with visited paths in post-order and captured failures.

    Raises:
        StructuralWalkError: If the root does not exist or is not a directory.
    """
    root_path = _check_root(root)

    visited: list[Path] = []
    failures: list[VisitFailure] = []

    events = _visit_directory(root_path, show_hidden, should_stop, record=False)
    while True:
        try:
            event = next(events)
        except StopIteration as done:
            completed = done.value
            break
        if event.error is None:
            visited.append(event.path)
        else:
            failures.append(VisitFailure(path=event.path, exception=event.error))

    if not completed:
        logger.debug("Walk of %s stopped early", root_path)

    return VisitResult(
        root=root_path,
        show_hidden=show_hidden,
        visited=tuple(visited),
        failures=tuple(failures),
        cancelled=not completed,
    )


def entry_kind(st: os.stat_result) -> EntryKind:
    """Classify an lstat result.

    Args:
        st: Result of ``lstat`` on the entry.

    Returns:
        EntryKind for the entry (symlinks are never followed here).
    """
    mode = st.st_mode
    if stat.S_ISLNK(mode):
        return EntryKind.SYMLINK
    if stat.S_ISDIR(mode):
        return EntryKind.DIRECTORY
    if stat.S_ISREG(mode):
        return EntryKind.FILE
    return EntryKind.OTHER


def _check_root(root: str | os.PathLike[str]) -> Path:
    """Validate the walk root and return it as an absolute path."""
    root_path = Path(os.path.abspath(os.path.expanduser(root)))
    try:
        st = root_path.stat()
    except FileNotFoundError as e:
        msg = f"Walk root does not exist: {root_path}"
        raise StructuralWalkError(msg) from e
    except OSError as e:
        msg = f"Cannot read walk root {root_path}: {e}"
        raise StructuralWalkError(msg) from e

    if not stat.S_ISDIR(st.st_mode):
        msg = f"Walk root is not a directory: {root_path}"
        raise StructuralWalkError(msg)

    return root_path


def _visit_directory(
    directory: Path,
    show_hidden: bool,
    should_stop: StopCallback | None,
    *,
    record: bool,
) -> _EntryWalk:
    """Visit all children of a directory, then the directory itself.

    A directory whose listing fails is reported as failed: its subtree
    was not seen, so it cannot count as visited.

    Args:
        directory: Directory to process.
        show_hidden: Hidden-entry policy.
        should_stop: Optional stop callback.
        record: If False, the directory's own success event is not emitted
            (used for the root).

    Returns:
        True if the directory was fully processed, False if stopped.
    """
    try:
        with os.scandir(directory) as it:
            children = sorted(Path(entry.path) for entry in it)
    except OSError as e:
        logger.debug("Cannot list directory %s: %s", directory, e)
        yield VisitEvent(path=directory, kind=EntryKind.DIRECTORY, error=e)
        return True

    for child in children:
        if should_stop is not None and should_stop():
            return False
        finished = yield from _visit_entry(child, show_hidden, should_stop)
        if not finished:
            return False

    if record:
        yield VisitEvent(path=directory, kind=EntryKind.DIRECTORY)
    return True


def _visit_entry(
    path: Path,
    show_hidden: bool,
    should_stop: StopCallback | None,
) -> _EntryWalk:
    """Visit one entry, descending into it if it is a directory."""
    try:
        st = path.lstat()
    except OSError as e:
        logger.debug("Cannot read metadata of %s: %s", path, e)
        yield VisitEvent(path=path, kind=EntryKind.UNKNOWN, error=e)
        return True

    kind = entry_kind(st)

    try:
        hidden = is_hidden(path, st)
    except OSError as e:
        logger.debug("Hidden check failed for %s: %s", path, e)
        yield VisitEvent(path=path, kind=kind, error=e)
        return True

    if hidden and not show_hidden:
        return True

    if kind == EntryKind.DIRECTORY:
        return (yield from _visit_directory(path, show_hidden, should_stop, record=True))

    if kind == EntryKind.SYMLINK:
        try:
            path.stat()
        except OSError as e:
            logger.debug("Symlink target unreadable for %s: %s", path, e)
            yield VisitEvent(path=path, kind=EntryKind.DEAD_SYMLINK, error=e)
            return True
        yield VisitEvent(path=path, kind=kind)
        return True

    size = st.st_size if kind == EntryKind.FILE else None
    yield VisitEvent(path=path, kind=kind, size_bytes=size)
    return True
