"""Bulk copy of files and folders.

This module provides the copier and the report models it produces.
"""

from dirkit.copy.copier import Copier, copy_paths
from dirkit.copy.models import CopyReport, CopyResult, CopyStatus

__all__ = [
    "CopyReport",
    "CopyResult",
    "CopyStatus",
    "Copier",
    "copy_paths",
]
