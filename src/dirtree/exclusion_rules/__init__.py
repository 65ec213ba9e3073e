"""Exclusion rules for filtering entries out of the tree."""

from .base_rules import BaseExclusionRules
from .extension_rules import ExtensionExclusionRules, get_extension
from .regex_rules import RegexExclusionRules

__all__ = [
    "BaseExclusionRules",
    "ExtensionExclusionRules",
    "RegexExclusionRules",
    "get_extension",
]
