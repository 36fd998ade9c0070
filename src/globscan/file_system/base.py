from abc import ABC, abstractmethod
from typing import Iterator

from globscan.file_system.entries import DirectoryEntry, FileEntry
from globscan.types import PathType


class FileSystem(ABC):
    """
    Abstract base class defining the filesystem capabilities used during discovery.

    A filesystem hands out entry handles and enumerates the children of a directory.
    The traversal core never calls it; it is only carried through so that the walker
    and any downstream consumers can resolve entries. Implementations must be safe for
    concurrent reads if several traversals share one instance.

    All paths are absolute and use forward slashes.

    Errors:
        Listing a directory that does not exist raises FileNotFoundError, listing a path
        that is a file raises NotADirectoryError, and listing a directory that cannot be
        read raises PermissionError. Recovering from these is the walker's job.
    """

    @abstractmethod
    def exists(self, path: PathType) -> bool:
        """
        Check whether a file or directory exists at the given path.

        Args:
            path: Absolute path to check.

        Returns:
            bool: True if something exists at the path, False otherwise.
        """
        pass

    @abstractmethod
    def get_directory(self, path: PathType) -> DirectoryEntry:
        """
        Get a handle for the directory at the given path.

        Args:
            path: Absolute path of the directory.

        Returns:
            DirectoryEntry: Handle for the directory.

        Raises:
            FileNotFoundError: If nothing exists at the path.
            NotADirectoryError: If the path refers to a file.
        """
        pass

    @abstractmethod
    def get_file(self, path: PathType) -> FileEntry:
        """
        Get a handle for the file at the given path.

        Raises:
            FileNotFoundError: If nothing exists at the path.
            IsADirectoryError: If the path refers to a directory.
        """
        pass

    @abstractmethod
    def list_directories(self, directory: DirectoryEntry) -> Iterator[DirectoryEntry]:
        """
        Enumerate the immediate subdirectories of a directory.

        The order of the returned entries is unspecified; callers needing a stable
        order sort them.

        Raises:
            FileNotFoundError: If the directory does not exist.
            NotADirectoryError: If the entry refers to a file.
            PermissionError: If the directory cannot be read.
        """
        pass

    @abstractmethod
    def list_files(self, directory: DirectoryEntry) -> Iterator[FileEntry]:
        """
        Enumerate the immediate files of a directory.

        Raises the same errors as list_directories.
        """
        pass
