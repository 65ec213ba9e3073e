"""File-type exclusion based on file name extensions."""

import os
from typing import Optional, Sequence, Set

from .base_rules import BaseExclusionRules


def get_extension(path: str) -> str:
    """Return the last dot-delimited suffix of a path's base name, lower-cased.

    The suffix includes the leading dot. A base name made only of a leading-dot
    suffix such as ``.bashrc`` counts as that extension.

    Args:
        path: File path or base name.

    Returns:
        The extension, or an empty string when the base name contains no dot.

    Example:
        >>> get_extension("src/Main.GO")
        '.go'
        >>> get_extension("archive.tar.gz")
        '.gz'
        >>> get_extension(".bashrc")
        '.bashrc'
        >>> get_extension("README")
        ''
    """
    name = os.path.basename(path)
    dot = name.rfind(".")
    if dot == -1:
        return ""
    return name[dot:].lower()


class ExtensionExclusionRules(BaseExclusionRules):
    """Exclusion rules that omit files by extension, case-insensitively.

    Extensions may be configured with or without the leading dot; ``"go"`` and
    ``".GO"`` both exclude ``main.go``. These rules are meant for files only: the
    tree builder never consults them for directories.

    Example:
        >>> rules = ExtensionExclusionRules([".go", "TXT"])
        >>> rules.exclude("file.GO")
        True
        >>> rules.exclude("notes.txt")
        True
        >>> rules.exclude("file.py")
        False
    """

    def __init__(self, extensions: Optional[Sequence[str]] = None):
        self.extensions: Set[str] = set()
        if extensions is not None:
            self.add_rules(extensions)

    def add_rule(self, rule: str) -> None:
        """Add an extension, normalized to lower case with a leading dot.

        Args:
            rule: Extension such as ``".log"`` or ``"log"``. Blank values are ignored.
        """
        extension = rule.strip().lower()
        if not extension:
            return
        if not extension.startswith("."):
            extension = "." + extension
        self.extensions.add(extension)

    def exclude(self, path: str) -> bool:
        """Check whether the path's extension is one of the configured extensions."""
        extension = get_extension(path)
        return bool(extension) and extension in self.extensions

    def has_rules(self) -> bool:
        return bool(self.extensions)
