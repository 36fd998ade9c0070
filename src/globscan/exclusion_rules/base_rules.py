from abc import ABC, abstractmethod
from typing import Optional, Sequence, Union

from globscan.file_system.entries import FileSystemEntry
from globscan.types import PathType


class BaseExclusionRules(ABC):
    """
    Abstract base class defining the interface for file/directory exclusion rules.

    Exclusion rules are the user-facing way of deciding which entries a walk reports.
    Each implementation checks a path relative to the walk root (and, where the rule
    needs metadata, the entry itself) and answers whether it should be excluded.
    rules_to_predicates() turns any rule set into the directory and file predicates a
    traversal consumes. File loading and individual rule addition are optional
    capabilities that depend on the rule type.

    Paths passed to exclude() use forward slashes, and directory paths end with "/".

    Example:
        >>> from globscan.exclusion_rules.git_rules import GitIgnoreExclusionRules
        >>> git_rules = GitIgnoreExclusionRules()
        >>> git_rules.add_rule('*.pyc')  # Add rule programmatically
        >>> git_rules.exclude('test.pyc')
        True
        >>> git_rules.exclude('test.py')
        False
        >>>
        >>> from globscan.exclusion_rules.size_rules import SizeExclusionRules
        >>> size_rules = SizeExclusionRules('1MB')  # Constructor-only configuration
        >>> size_rules.max_size_bytes
        1000000
    """

    @abstractmethod
    def exclude(self, path: str, entry: Optional[FileSystemEntry] = None) -> bool:
        """
        Determine if a given path should be excluded based on the loaded rules.

        Args:
            path (str): The path to check, relative to the walk root. Directory paths
                end with "/".
            entry (Optional[FileSystemEntry]): The entry being checked, for rules that
                need its metadata. Rules that only look at paths ignore it.

        Returns:
            bool: True if the path should be excluded, False if it should be included.
        """
        pass

    def has_rules(self) -> bool:
        """
        Check whether this rule set can exclude anything at all.

        Rule types without a notion of emptiness use this default.
        """
        return True

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """
        Load and parse exclusion rules from one or more files.

        This method may be overridden by subclasses that support file-based rule loading
        (e.g., .gitignore-style rules). Rule types that don't support file operations
        (e.g., size-based or composite rules) use the default implementation which raises
        NotImplementedError.

        Args:
            rules_files: Path to a file or sequence of paths containing exclusion rules.

        Raises:
            NotImplementedError: If this rule type doesn't support loading from files.
            FileNotFoundError: If any rules file does not exist (for file-supporting rule types).
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support loading rules from files.")

    def add_rule(self, rule: str) -> None:
        """
        Add a single exclusion rule directly.

        Args:
            rule (str): The exclusion rule to add. The format depends on the specific
                implementation (e.g., a gitignore pattern like "*.pyc").

        Raises:
            NotImplementedError: If this rule type doesn't support adding individual rules.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support adding individual rules.")
