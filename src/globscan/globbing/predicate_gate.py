"""Optional directory and file predicates evaluated during traversal."""

from typing import Optional

from globscan.file_system.entries import DirectoryEntry, FileEntry
from globscan.types import DirectoryPredicate, FilePredicate


class PredicateGate:
    """Holds the two decision functions supplied for one traversal.

    A missing predicate means "always true". Predicate results are returned as-is on
    every call, and any exception a predicate raises reaches the caller unchanged.

    Example:
        >>> gate = PredicateGate(file_predicate=lambda f: f.name.endswith(".txt"))
        >>> gate.should_include(FileEntry("/work/a.txt"))
        True
        >>> gate.should_include(FileEntry("/work/b.log"))
        False
        >>> gate.should_traverse(DirectoryEntry("/work/node_modules"))
        True
    """

    def __init__(
        self,
        directory_predicate: Optional[DirectoryPredicate] = None,
        file_predicate: Optional[FilePredicate] = None,
    ) -> None:
        if directory_predicate is not None and not callable(directory_predicate):
            raise TypeError(f"directory_predicate must be callable, got {type(directory_predicate).__name__}")
        if file_predicate is not None and not callable(file_predicate):
            raise TypeError(f"file_predicate must be callable, got {type(file_predicate).__name__}")
        self._directory_predicate = directory_predicate
        self._file_predicate = file_predicate

    def should_traverse(self, directory: DirectoryEntry) -> bool:
        """Decide whether the walker should descend into a directory."""
        if self._directory_predicate is not None:
            return self._directory_predicate(directory)
        return True

    def should_include(self, file: FileEntry) -> bool:
        """Decide whether a file belongs in the results."""
        if self._file_predicate is not None:
            return self._file_predicate(file)
        return True
