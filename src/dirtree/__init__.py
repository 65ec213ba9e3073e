"""Directory tree snapshot utilities.

This package walks a filesystem subtree, builds an in-memory tree of its
directories, files and symbolic links, and renders that tree as JSON, YAML,
XML or an indented text listing.
"""

from importlib.metadata import PackageNotFoundError, version

# Expose the version for both programmatic use and CLI
try:
    __version__ = version("dirtree")
except PackageNotFoundError:
    __version__ = "unknown"
