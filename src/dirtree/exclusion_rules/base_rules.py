from abc import ABC, abstractmethod
from typing import Iterable


class BaseExclusionRules(ABC):
    """
    Abstract base class defining the interface for tree exclusion rules.

    Exclusion rules decide whether a traversed entry is omitted from the tree. The
    tree builder consults path rules before it inspects an entry's metadata and
    extension rules after symlink resolution, so each concrete implementation only
    ever sees the kind of input it was written for.

    Example:
        >>> from dirtree.exclusion_rules.regex_rules import RegexExclusionRules
        >>> rules = RegexExclusionRules([r"\\.git$"])
        >>> rules.exclude("project/.git")
        True
        >>> rules.exclude("project/.github")
        False
        >>> rules.has_rules()
        True
    """

    @abstractmethod
    def exclude(self, path: str) -> bool:
        """
        Determine if a given path should be excluded.

        Args:
            path (str): The path of the traversed entry, as built during traversal
                (the root path joined with the entry names below it).

        Returns:
            bool: True if the entry should be omitted, False if it should be kept.
        """
        pass

    @abstractmethod
    def has_rules(self) -> bool:
        """
        Check whether any rules are configured.

        Returns:
            bool: True if at least one rule is configured.
        """
        pass

    def add_rule(self, rule: str) -> None:
        """
        Add a single exclusion rule.

        Args:
            rule (str): The rule to add. The format depends on the implementation.

        Raises:
            NotImplementedError: If this rule type doesn't support adding individual rules.
        """
        raise NotImplementedError(f"{self.__class__.__name__} doesn't support adding individual rules.")

    def add_rules(self, rules: Iterable[str]) -> None:
        """Add several rules in order."""
        for rule in rules:
            self.add_rule(rule)
