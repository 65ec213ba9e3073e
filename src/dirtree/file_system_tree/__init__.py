"""File system tree construction.

This package builds an in-memory tree of FileSystemNode objects from a
directory subtree, applying depth limits, path and type exclusions and the
symlink policy described by BuildOptions.
"""

from .build_options import BuildOptions
from .file_system_node import FileSystemNode, is_hidden_name
from .file_system_tree import FileSystemTree, build_tree

__all__ = [
    "BuildOptions",
    "FileSystemNode",
    "FileSystemTree",
    "build_tree",
    "is_hidden_name",
]
