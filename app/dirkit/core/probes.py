"""Platform capability probes.

Thin wrappers over the host OS for the few facts dirkit cannot read
from a plain ``stat`` result: content type, owner name, and the hidden
flag. Everything here takes a path and returns a plain value; failures
surface as ``OSError`` for the caller to classify.
"""

import logging
import mimetypes
import os
import stat
from pathlib import Path

import filetype

logger = logging.getLogger(__name__)

# Number of leading bytes inspected when deciding text vs. binary
_TEXT_PROBE_BYTES = 8192

DEFAULT_MIME_TYPE = "application/octet-stream"
TEXT_MIME_TYPE = "text/plain"


def detect_type(path: str | os.PathLike[str]) -> str:
    """Detect the MIME type of a file.

    Tries, in order:
    1. Magic-number sniffing of the file header (filetype)
    2. Guess from the file name (mimetypes)
    3. text/plain if the head contains no NUL bytes, otherwise
       application/octet-stream

    Args:
        path: File to inspect.

    Returns:
        MIME type string.

    Raises:
        OSError: If the file cannot be read.
    """
    target = Path(path)

    with open(target, "rb") as f:
        head = f.read(_TEXT_PROBE_BYTES)

    kind = filetype.guess(head)
    if kind is not None:
        return kind.mime

    guessed, _ = mimetypes.guess_type(target.name)
    if guessed:
        return guessed

    if b"\x00" in head:
        return DEFAULT_MIME_TYPE
    return TEXT_MIME_TYPE


def owner_name(path: str | os.PathLike[str], st: os.stat_result | None = None) -> str:
    """Resolve the account name that owns a path.

    Falls back to the numeric uid when the uid has no account entry
    (common in containers), and to an empty string on platforms without
    ownership lookup.

    Args:
        path: Path to inspect.
        st: Stat result for the path, read if not provided.

    Returns:
        Owner account name.

    Raises:
        OSError: If the path metadata cannot be read.
    """
    target = Path(path)
    try:
        return target.owner()
    except KeyError:
        if st is None:
            st = target.stat()
        return str(st.st_uid)
    except NotImplementedError:
        logger.debug("Owner lookup not supported on this platform: %s", target)
        return ""


def is_hidden(path: str | os.PathLike[str], st: os.stat_result | None = None) -> bool:
    """Check if a path carries the OS-level hidden flag.

    A path is hidden when its name starts with a dot, when the Windows
    ``FILE_ATTRIBUTE_HIDDEN`` attribute is set, or when the BSD/macOS
    ``UF_HIDDEN`` flag is set.

    Args:
        path: Path to check.
        st: lstat result for the path, read if not provided.

    Returns:
        True if the path is hidden.

    Raises:
        OSError: If the path metadata has to be read and cannot be.
    """
    target = Path(path)
    if target.name.startswith("."):
        return True

    if st is None:
        st = target.lstat()

    attributes = getattr(st, "st_file_attributes", 0)
    if attributes & getattr(stat, "FILE_ATTRIBUTE_HIDDEN", 0):
        return True

    flags = getattr(st, "st_flags", 0)
    return bool(flags & getattr(stat, "UF_HIDDEN", 0))
