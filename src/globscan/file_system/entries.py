"""Handles for files and directories returned by a filesystem."""

from pathlib import PurePosixPath
from typing import Any

from globscan.types import FileType, PathType


class FileSystemEntry:
    """Handle representing a file or directory supplied by a filesystem.

    Entries are plain values: they carry the path and metadata captured when the
    filesystem listed them and never touch the filesystem again. Two entries are equal
    when they have the same type and path.

    Attributes:
        path (PurePosixPath): Absolute path of the entry, using forward slashes.
        file_type (FileType): Whether the entry is a file or a directory.
        hidden (bool): Whether the filesystem reports the entry as hidden.

    Example:
        >>> entry = DirectoryEntry("/work/src")
        >>> entry.name
        'src'
        >>> entry.is_dir
        True
        >>> entry == DirectoryEntry("/work/src")
        True
    """

    file_type: FileType

    def __init__(self, path: PathType, hidden: bool = False) -> None:
        self.path = PurePosixPath(path)
        self.hidden = hidden

    @property
    def name(self) -> str:
        """The final path component of the entry."""
        return self.path.name

    @property
    def is_dir(self) -> bool:
        return self.file_type is FileType.DIRECTORY

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, FileSystemEntry):
            return False
        return self.file_type is other.file_type and self.path == other.path

    def __hash__(self) -> int:
        return hash((self.file_type, self.path))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(path={str(self.path)!r})"


class DirectoryEntry(FileSystemEntry):
    """Handle for a directory."""

    file_type = FileType.DIRECTORY


class FileEntry(FileSystemEntry):
    """Handle for a regular file.

    Attributes:
        length (int): Size of the file in bytes.

    Example:
        >>> entry = FileEntry("/work/src/main.py", length=120)
        >>> entry.name, entry.length, entry.is_dir
        ('main.py', 120, False)
    """

    file_type = FileType.FILE

    def __init__(self, path: PathType, length: int = 0, hidden: bool = False) -> None:
        super().__init__(path, hidden=hidden)
        self.length = length

    def __repr__(self) -> str:
        return f"FileEntry(path={str(self.path)!r}, length={self.length})"
