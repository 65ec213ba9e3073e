"""Immutable input of one tree build."""

import os
from dataclasses import dataclass
from typing import Tuple

from dirtree.types import PathType


@dataclass(frozen=True)
class BuildOptions:
    """Options controlling a single tree build.

    Sequence arguments are stored as tuples so an options object can be shared
    between builds without being modified.

    Attributes:
        path: Root path of the build. Must name an existing entry.
        max_depth: Deepest level included, counting the root as 0. -1 means
            unlimited.
        exclude_paths: Regular expressions searched for in each entry's path; a
            match omits the entry and its subtree.
        exclude_types: File extensions (case-insensitive, leading dot optional)
            whose files are omitted.
        include_files: Whether non-directory entries are included.
        follow_links: Whether symbolic links are resolved and traversed.

    Example:
        >>> options = BuildOptions("src", max_depth=2, exclude_types=[".pyc"])
        >>> options.exclude_types
        ('.pyc',)
        >>> BuildOptions("src", max_depth=-2)
        Traceback (most recent call last):
            ...
        ValueError: max depth cannot be less than -1
    """

    path: PathType
    max_depth: int = -1
    exclude_paths: Tuple[str, ...] = ()
    exclude_types: Tuple[str, ...] = ()
    include_files: bool = True
    follow_links: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "exclude_paths", tuple(self.exclude_paths))
        object.__setattr__(self, "exclude_types", tuple(self.exclude_types))
        if not os.fspath(self.path):
            raise ValueError("path cannot be empty")
        if self.max_depth < -1:
            raise ValueError("max depth cannot be less than -1")
