"""Implementation of exclusion rules using .gitignore pattern syntax."""

from os import PathLike
from pathlib import Path
from typing import List, Optional, Sequence, Union

from pathspec import GitIgnoreSpec

from globscan.file_system.entries import FileSystemEntry
from globscan.types import PathType

from .base_rules import BaseExclusionRules


class GitIgnoreExclusionRules(BaseExclusionRules):
    """Implementation of exclusion rules using .gitignore pattern syntax.

    This class implements the BaseExclusionRules interface using standard .gitignore pattern
    matching rules. It uses the pathspec library to match file paths against patterns in
    the same way that Git does.

    The rules support all standard .gitignore syntax including:
    - Basic globs (*, ?, [abc], [0-9], etc.)
    - Directory-specific patterns (ending in /)
    - Negation patterns (starting with !)
    - Double-asterisk matching (**)
    - Comment lines (starting with #)

    Multiple rule files can be provided during initialization or added incrementally
    with load_rules(). Rules from all files are combined, with later rules potentially
    overriding earlier ones (particularly for negation patterns with !). Individual rules
    can also be added directly using add_rule().

    Attributes:
        spec (GitIgnoreSpec): Compiled pattern matcher from the pathspec library.

    Example:
        >>> rules = GitIgnoreExclusionRules()
        >>> rules.add_rule("node_modules/")
        >>> rules.exclude("node_modules/")
        True
        >>> rules.exclude("src/")
        False
        >>> rules.add_rule("*.log")
        >>> rules.add_rule("!keep.log")
        >>> rules.exclude("app.log"), rules.exclude("keep.log")
        (True, False)

    Note:
        Paths must use forward slashes (/) as separators, and directories are only matched
        by directory-specific patterns when they carry a trailing slash.
    """

    def __init__(self, rules_files: Optional[Union[PathType, Sequence[PathType]]] = None):
        """Initialize GitIgnoreExclusionRules with patterns from specified files.

        Args:
            rules_files: Path(s) to the file(s) containing .gitignore patterns.
                     Can be a single path-like object or a sequence of path-like objects.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        self._lines: List[str] = []
        self.spec = GitIgnoreSpec.from_lines(self._lines)

        if rules_files is not None:
            self.load_rules(rules_files)

    def exclude(self, path: str, entry: Optional[FileSystemEntry] = None) -> bool:
        """Check if a path should be excluded based on the loaded .gitignore patterns.

        The path is matched exactly as provided - no normalization is performed. The
        entry is not consulted.

        Returns:
            bool: True if the last pattern matching the path is a non-negated pattern,
                False otherwise.
        """
        return bool(self.spec.match_file(path))

    def has_rules(self) -> bool:
        """Check whether any non-blank, non-comment pattern has been loaded."""
        return any(pattern.include is not None for pattern in self.spec.patterns)

    def load_rules(self, rules_files: Union[PathType, Sequence[PathType]]) -> None:
        """Load and combine .gitignore patterns from one or more files.

        Patterns are appended after the existing ones in the order the files are given.

        Args:
            rules_files: Path(s) to file(s) containing .gitignore patterns.

        Raises:
            FileNotFoundError: If any rules file does not exist.
        """
        if isinstance(rules_files, (str, PathLike)):
            rules_files = [rules_files]

        for rules_file in rules_files:
            path = Path(rules_file)
            if not path.exists():
                raise FileNotFoundError(f"Rules file not found: {path}")

            with open(path, "r") as f:
                self._lines.extend(f.read().splitlines())

        self._compile()

    def add_rule(self, rule: str) -> None:
        """Add a single .gitignore pattern directly.

        The pattern follows the same syntax as a line in a .gitignore file and is
        evaluated after every pattern added before it.

        Args:
            rule: A single .gitignore pattern to add (e.g., "*.pyc", "node_modules/",
                 "!important.txt").
        """
        self._lines.append(rule)
        self._compile()

    def _compile(self) -> None:
        self.spec = GitIgnoreSpec.from_lines(self._lines)
