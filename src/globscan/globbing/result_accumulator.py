"""Append-only collection of matched entries."""

from typing import Iterator, List

from globscan.file_system.entries import FileSystemEntry


class ResultAccumulator:
    """Ordered sink for entries approved by the walker.

    Entries are kept exactly in the order they were added. Nothing is deduplicated,
    reordered or filtered: deciding what belongs here is the walker's job.

    Example:
        >>> from globscan.file_system.entries import FileEntry
        >>> results = ResultAccumulator()
        >>> results.add(FileEntry("/work/b.txt"))
        >>> results.add(FileEntry("/work/a.txt"))
        >>> [entry.name for entry in results]
        ['b.txt', 'a.txt']
    """

    def __init__(self) -> None:
        self._entries: List[FileSystemEntry] = []

    def add(self, entry: FileSystemEntry) -> None:
        self._entries.append(entry)

    @property
    def results(self) -> List[FileSystemEntry]:
        """A copy of the accumulated entries in discovery order."""
        return list(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[FileSystemEntry]:
        return iter(list(self._entries))
