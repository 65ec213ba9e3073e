"""Path exclusion using regular expressions."""

import logging
import re
from typing import List, Optional, Pattern, Sequence

from .base_rules import BaseExclusionRules

logger = logging.getLogger(__name__)


class RegexExclusionRules(BaseExclusionRules):
    """Exclusion rules that match regular expressions against full paths.

    A path is excluded when any pattern is found anywhere in it (``re.search``
    semantics), so patterns must be anchored explicitly when a whole-path match is
    wanted. The path tested is the one built during traversal, not a canonical path.

    Patterns that fail to compile are kept but never match: a malformed pattern
    excludes nothing instead of aborting the build. A warning is logged for each one
    when it is added.

    Attributes:
        patterns (List[str]): The patterns in the order they were added, including
            invalid ones.

    Example:
        >>> rules = RegexExclusionRules([".*test.*", "["])
        >>> rules.exclude("/home/user/test")
        True
        >>> rules.exclude("/home/user/docs")
        False
        >>> rules.invalid_patterns
        ['[']
    """

    def __init__(self, patterns: Optional[Sequence[str]] = None):
        """Initialize the rules with an optional sequence of patterns.

        Args:
            patterns: Regular expressions to add, in order.
        """
        self.patterns: List[str] = []
        self._compiled: List[Pattern[str]] = []
        self.invalid_patterns: List[str] = []
        if patterns is not None:
            self.add_rules(patterns)

    def add_rule(self, rule: str) -> None:
        """Add a regular expression.

        Args:
            rule: The regular expression. An invalid expression is recorded in
                ``invalid_patterns`` and otherwise ignored.
        """
        self.patterns.append(rule)
        try:
            self._compiled.append(re.compile(rule))
        except re.error as e:
            logger.warning("Ignoring invalid exclusion pattern %r: %s", rule, e)
            self.invalid_patterns.append(rule)

    def exclude(self, path: str) -> bool:
        """Check whether any valid pattern is found in ``path``.

        Args:
            path: The path to test.

        Returns:
            True if at least one compiled pattern matches.
        """
        return any(pattern.search(path) for pattern in self._compiled)

    def has_rules(self) -> bool:
        return bool(self._compiled)
