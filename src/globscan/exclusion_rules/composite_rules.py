"""Composite exclusion rules for combining multiple rule types."""

from typing import List, Optional, Sequence

from globscan.file_system.entries import FileSystemEntry

from .base_rules import BaseExclusionRules


class CompositeExclusionRules(BaseExclusionRules):
    """Composite exclusion rules that combine multiple rule types.

    A path is excluded if ANY of the constituent rules determines it should be excluded.
    This follows the logical OR pattern: if any rule says "exclude", the entry is excluded.

    Attributes:
        rules (List[BaseExclusionRules]): List of constituent exclusion rules.

    Example:
        >>> from globscan.exclusion_rules.git_rules import GitIgnoreExclusionRules
        >>> from globscan.exclusion_rules.size_rules import SizeExclusionRules
        >>> from globscan.file_system.entries import FileEntry
        >>> git_rules = GitIgnoreExclusionRules()
        >>> git_rules.add_rule("*.log")
        >>> composite = CompositeExclusionRules([git_rules, SizeExclusionRules("10B")])
        >>> composite.exclude("app.log", FileEntry("/work/app.log", length=1))
        True
        >>> composite.exclude("data.csv", FileEntry("/work/data.csv", length=100))
        True
        >>> composite.exclude("notes.txt", FileEntry("/work/notes.txt", length=1))
        False
    """

    def __init__(self, rules: Sequence[BaseExclusionRules]):
        """Initialize composite exclusion rules.

        Args:
            rules: Sequence of exclusion rules to combine. Each rule must implement
                  the BaseExclusionRules interface.

        Raises:
            ValueError: If rules list is empty.
            TypeError: If any rule doesn't implement BaseExclusionRules.

        Note:
            Rules are evaluated in the order provided. For performance, consider
            placing cheaper rules (like size checks) before pattern matching.
        """
        if not rules:
            raise ValueError("At least one exclusion rule must be provided")

        for i, rule in enumerate(rules):
            if not isinstance(rule, BaseExclusionRules):
                raise TypeError(f"Rule at index {i} must implement BaseExclusionRules, " f"got {type(rule)}")

        self.rules: List[BaseExclusionRules] = list(rules)

    def exclude(self, path: str, entry: Optional[FileSystemEntry] = None) -> bool:
        """Check if a path should be excluded by any constituent rule.

        Uses short-circuit evaluation: stops checking as soon as any rule returns True.
        """
        return any(rule.exclude(path, entry) for rule in self.rules)

    def has_rules(self) -> bool:
        """Check if any constituent rule has rules configured."""
        return any(rule.has_rules() for rule in self.rules)

    def add_rule_object(self, rule: BaseExclusionRules) -> None:
        """Add another exclusion rule object to this composite.

        Raises:
            TypeError: If rule doesn't implement BaseExclusionRules.
        """
        if not isinstance(rule, BaseExclusionRules):
            raise TypeError(f"Rule must implement BaseExclusionRules, got {type(rule)}")
        self.rules.append(rule)

    def remove_rule_object(self, rule: BaseExclusionRules) -> bool:
        """Remove an exclusion rule object from this composite.

        Returns:
            True if the rule was found and removed, False if it wasn't in the composite.
        """
        try:
            self.rules.remove(rule)
            return True
        except ValueError:
            return False

    def get_rule_count(self) -> int:
        return len(self.rules)

    def get_rules(self) -> List[BaseExclusionRules]:
        """Get a copy of the constituent rules list."""
        return list(self.rules)
