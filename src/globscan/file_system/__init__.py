"""Filesystem abstraction consumed by the walker and carried by the traversal context."""

from .base import FileSystem
from .entries import DirectoryEntry, FileEntry, FileSystemEntry
from .permission_action import PermissionAction

__all__ = [
    "DirectoryEntry",
    "FileEntry",
    "FileSystem",
    "FileSystemEntry",
    "PermissionAction",
]
