"""Directory tree walking.

This module provides the depth-first walker and the models it
produces.
"""

from dirkit.walker.engine import entry_kind, iter_tree, walk
from dirkit.walker.models import EntryKind, VisitEvent, VisitFailure, VisitResult

__all__ = [
    "EntryKind",
    "VisitEvent",
    "VisitFailure",
    "VisitResult",
    "entry_kind",
    "iter_tree",
    "walk",
]
