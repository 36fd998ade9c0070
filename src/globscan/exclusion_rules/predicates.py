"""Adapter from exclusion rules to the predicates consumed by a traversal."""

import posixpath
from pathlib import PurePosixPath, PureWindowsPath
from typing import Tuple

from globscan.file_system.entries import DirectoryEntry, FileEntry, FileSystemEntry
from globscan.types import DirectoryPredicate, FilePredicate, PathType

from .base_rules import BaseExclusionRules


def relative_rule_path(entry: FileSystemEntry, base: PathType) -> str:
    """Express an entry's path the way exclusion rules expect it.

    The path is made relative to base, uses forward slashes, and directories carry a
    trailing slash.

    Example:
        >>> relative_rule_path(DirectoryEntry("/work/src/lib"), "/work")
        'src/lib/'
        >>> relative_rule_path(FileEntry("/work/src/main.py"), "/work/src")
        'main.py'
    """
    path = posixpath.relpath(str(entry.path), str(base).replace("\\", "/"))
    if entry.is_dir:
        path += "/"
    return path


def rules_to_predicates(rules: BaseExclusionRules, base: PathType) -> Tuple[DirectoryPredicate, FilePredicate]:
    """Build the directory and file predicates for a rule set.

    Each predicate approves an entry when the rules do not exclude it. Rules are
    consulted on every call, so rules added later are honoured by predicates built
    earlier.

    Args:
        rules: Exclusion rules to consult.
        base: Absolute directory that rule paths are relative to, normally the walk root.

    Returns:
        A (directory_predicate, file_predicate) pair.

    Raises:
        ValueError: If base is not an absolute path.

    Example:
        >>> from globscan.exclusion_rules.git_rules import GitIgnoreExclusionRules
        >>> rules = GitIgnoreExclusionRules()
        >>> rules.add_rule("node_modules/")
        >>> should_traverse, should_include = rules_to_predicates(rules, "/work")
        >>> should_traverse(DirectoryEntry("/work/node_modules"))
        False
        >>> should_traverse(DirectoryEntry("/work/src"))
        True
        >>> should_include(FileEntry("/work/node_modules.txt"))
        True
    """
    base = str(base).replace("\\", "/")
    if not (PurePosixPath(base).is_absolute() or PureWindowsPath(base).is_absolute()):
        raise ValueError(f"base must be an absolute path, got '{base}'")

    def directory_predicate(directory: DirectoryEntry) -> bool:
        return not rules.exclude(relative_rule_path(directory, base), directory)

    def file_predicate(file: FileEntry) -> bool:
        return not rules.exclude(relative_rule_path(file, base), file)

    return directory_predicate, file_predicate
