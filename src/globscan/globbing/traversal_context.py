"""Traversal state for a single glob evaluation.

This module provides the TraversalContext class, the only interface a walker uses while
it enumerates a directory tree. The context tracks the current position as a stack of
path segments, answers whether a directory should be entered or a file included, and
collects the entries the walker approves.
"""

from typing import List, Optional

from globscan.environment import Environment
from globscan.file_system.base import FileSystem
from globscan.file_system.entries import DirectoryEntry, FileEntry, FileSystemEntry
from globscan.globbing.path_stack import PathSegmentStack
from globscan.globbing.predicate_gate import PredicateGate
from globscan.globbing.result_accumulator import ResultAccumulator
from globscan.types import DirectoryPredicate, FilePredicate


class TraversalContext:
    """Passive state and decision logic driven by a depth-first walker.

    A context is created once per glob evaluation and discarded afterwards. It performs
    no I/O: the filesystem and environment are carried so that consumers can resolve
    entries relative to the current path, but the context never calls them.

    Contract with the walker:
        - push() on entering a directory and pop() on leaving it, so that the path
          stack always matches the recursion depth.
        - add_result() only for entries approved by should_traverse() or
          should_include().

    The context is not safe for concurrent mutation. Concurrent evaluations each need
    their own context.

    Attributes:
        file_system (FileSystem): Filesystem the walk runs against.
        environment (Environment): Environment used to resolve the working directory.
        path (str): Current directory relative to the traversal root, "./" at the root.
        results (List[FileSystemEntry]): Entries added so far, in discovery order.

    Example:
        >>> from globscan.testing import FakeEnvironment, FakeFileSystem
        >>> context = TraversalContext(
        ...     FakeFileSystem(), FakeEnvironment(), file_predicate=lambda f: f.name.endswith(".txt")
        ... )
        >>> context.push("src")
        >>> context.path
        'src'
        >>> a, b = FileEntry("/Working/src/a.txt"), FileEntry("/Working/src/b.log")
        >>> for entry in (a, b):
        ...     if context.should_include(entry):
        ...         context.add_result(entry)
        >>> context.pop()
        'src'
        >>> context.results
        [FileEntry(path='/Working/src/a.txt', length=0)]
        >>> context.path
        './'
    """

    def __init__(
        self,
        file_system: FileSystem,
        environment: Environment,
        directory_predicate: Optional[DirectoryPredicate] = None,
        file_predicate: Optional[FilePredicate] = None,
    ) -> None:
        """Initialize a TraversalContext.

        Args:
            file_system: Filesystem the walk runs against. Required.
            environment: Environment of the walk. Required.
            directory_predicate: Decides whether to descend into a directory. When None,
                every directory is traversed.
            file_predicate: Decides whether a file is included. When None, every file is
                included.

        Raises:
            ValueError: If file_system or environment is None.
            TypeError: If a predicate is supplied but is not callable.
        """
        if file_system is None:
            raise ValueError("file_system must not be None")
        if environment is None:
            raise ValueError("environment must not be None")

        self._file_system = file_system
        self._environment = environment
        self._stack = PathSegmentStack()
        self._gate = PredicateGate(directory_predicate, file_predicate)
        self._results = ResultAccumulator()

    @property
    def file_system(self) -> FileSystem:
        return self._file_system

    @property
    def environment(self) -> Environment:
        return self._environment

    @property
    def path(self) -> str:
        return self._stack.path

    @property
    def depth(self) -> int:
        """Number of segments currently on the path stack."""
        return len(self._stack)

    def push(self, segment: str) -> None:
        """Descend into the directory named by segment."""
        self._stack.push(segment)

    def pop(self) -> str:
        """Ascend out of the current directory and return its name.

        Raises:
            PathStackUnderflowError: If there is no directory left to leave.
        """
        return self._stack.pop()

    def should_traverse(self, directory: DirectoryEntry) -> bool:
        return self._gate.should_traverse(directory)

    def should_include(self, file: FileEntry) -> bool:
        return self._gate.should_include(file)

    def add_result(self, entry: FileSystemEntry) -> None:
        self._results.add(entry)

    @property
    def results(self) -> List[FileSystemEntry]:
        return self._results.results
