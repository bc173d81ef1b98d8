"""File and folder entities.

This module provides path-bound entities with immutable attribute
snapshots.
"""

from dirkit.entities.attributes import (
    EntityAttributes,
    FileAttributes,
    FolderAttributes,
    Timestamp,
)
from dirkit.entities.base import Entity
from dirkit.entities.file import FileEntity
from dirkit.entities.folder import FolderEntity, ListKind

__all__ = [
    "Entity",
    "EntityAttributes",
    "FileAttributes",
    "FileEntity",
    "FolderAttributes",
    "FolderEntity",
    "ListKind",
    "Timestamp",
]
