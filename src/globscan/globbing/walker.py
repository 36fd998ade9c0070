"""Depth-first walker that drives a TraversalContext over a filesystem.

The walker owns all filesystem access and all recovery from filesystem errors. For every
evaluation it builds a fresh TraversalContext, keeps the context's path stack in step
with its own recursion, and asks the context which directories to enter and which files
to keep.
"""

import logging
from pathlib import PurePosixPath
from typing import List, Optional, Tuple, Union

from globscan.environment import Environment
from globscan.file_system.base import FileSystem
from globscan.file_system.entries import DirectoryEntry, FileEntry, FileSystemEntry
from globscan.file_system.permission_action import PermissionAction
from globscan.globbing.traversal_context import TraversalContext
from globscan.types import DirectoryPredicate, FilePredicate, PathType

logger = logging.getLogger(__name__)


class DirectoryWalker:
    """Enumerates the entries below a root directory in a stable depth-first order.

    Children of each directory are visited in ascending name order with files and
    directories interleaved, and every directory is reported before its contents. The
    order therefore depends only on the names in the tree, never on the order in which
    the filesystem lists them.

    Permission Handling:
        A PermissionError raised while listing a directory is handled according to
        permission_action:
        - IGNORE (default): log a warning and skip the directory's contents
        - RAISE: propagate the error to the caller of walk()

    Attributes:
        file_system (FileSystem): Filesystem to enumerate.
        environment (Environment): Environment used to resolve relative roots.
        permission_action (PermissionAction): How to handle permission errors.
        include_directories (bool): Whether traversed directories are added to the results.

    Example:
        >>> from globscan.testing import FakeEnvironment, FakeFileSystem
        >>> fs = FakeFileSystem()
        >>> _ = fs.create_file("/Working/src/b.py")
        >>> _ = fs.create_file("/Working/src/a.txt")
        >>> _ = fs.create_file("/Working/docs/readme.md")
        >>> walker = DirectoryWalker(fs, FakeEnvironment("/Working"))
        >>> [str(entry.path) for entry in walker.walk()]
        ['/Working/docs/readme.md', '/Working/src/a.txt', '/Working/src/b.py']
        >>> [entry.name for entry in walker.walk("src", file_predicate=lambda f: f.name.endswith(".txt"))]
        ['a.txt']
    """

    def __init__(
        self,
        file_system: FileSystem,
        environment: Environment,
        *,
        permission_action: Union[str, PermissionAction] = PermissionAction.IGNORE,
        include_directories: bool = False,
    ) -> None:
        """Initialize a DirectoryWalker.

        Args:
            file_system: Filesystem to enumerate.
            environment: Environment whose working directory anchors relative roots.
            permission_action: How to handle permission errors during traversal.
                Can be either "ignore" or "raise", or a PermissionAction enum value.
                Defaults to "ignore".
            include_directories: Whether directories approved for traversal are also
                added to the results. Defaults to False.

        Raises:
            ValueError: If file_system or environment is None, or permission_action is
                not a recognised value.
        """
        if file_system is None:
            raise ValueError("file_system must not be None")
        if environment is None:
            raise ValueError("environment must not be None")

        if isinstance(permission_action, str) and not isinstance(permission_action, PermissionAction):
            try:
                permission_action = PermissionAction(permission_action.lower())
            except ValueError:
                raise ValueError(
                    f"Invalid permission_action: {permission_action}. " "Must be one of: 'ignore', 'raise'"
                )
        elif not isinstance(permission_action, PermissionAction):
            raise ValueError(f"Invalid permission_action: {permission_action!r}. Must be one of: 'ignore', 'raise'")

        self.file_system = file_system
        self.environment = environment
        self.permission_action = permission_action
        self.include_directories = include_directories

    def walk(
        self,
        root: PathType = ".",
        directory_predicate: Optional[DirectoryPredicate] = None,
        file_predicate: Optional[FilePredicate] = None,
    ) -> List[FileSystemEntry]:
        """Enumerate the entries below root that the predicates approve.

        Args:
            root: Directory to start from. Relative roots are resolved against the
                environment's working directory.
            directory_predicate: Decides whether to descend into a directory. When None,
                every directory is traversed.
            file_predicate: Decides whether a file is included. When None, every file is
                included.

        Returns:
            The approved entries in discovery order.

        Raises:
            FileNotFoundError: If root does not exist.
            NotADirectoryError: If root is a file.
            PermissionError: If a directory cannot be listed and permission_action is RAISE.
        """
        context = TraversalContext(self.file_system, self.environment, directory_predicate, file_predicate)
        root_path, root_segments = self._resolve_root(root)
        logger.debug("Walking %s", root_path)

        if not self.file_system.exists(root_path):
            raise FileNotFoundError(f"Root path does not exist: {root_path}")
        directory = self.file_system.get_directory(root_path)

        for segment in root_segments:
            context.push(segment)
        try:
            self._visit(context, directory)
        finally:
            for _ in root_segments:
                context.pop()

        return context.results

    def _resolve_root(self, root: PathType) -> Tuple[PurePosixPath, List[str]]:
        """Return the absolute root and the segments to push for it."""
        relative = PurePosixPath(str(root).replace("\\", "/"))
        if relative.is_absolute():
            return relative, []
        segments = [part for part in relative.parts if part != "."]
        return self.environment.working_directory.joinpath(*segments), segments

    def _visit(self, context: TraversalContext, directory: DirectoryEntry) -> None:
        """Recursively visit the children of a directory."""
        try:
            children: List[FileSystemEntry] = [
                *self.file_system.list_directories(directory),
                *self.file_system.list_files(directory),
            ]
        except PermissionError as e:
            if self.permission_action == PermissionAction.RAISE:
                raise
            logger.warning("Skipping %s: %s", directory.path, e)
            return

        for child in sorted(children, key=lambda entry: entry.name):
            if isinstance(child, DirectoryEntry):
                if not context.should_traverse(child):
                    continue
                if self.include_directories:
                    context.add_result(child)
                context.push(child.name)
                try:
                    self._visit(context, child)
                finally:
                    context.pop()
            elif isinstance(child, FileEntry) and context.should_include(child):
                context.add_result(child)
