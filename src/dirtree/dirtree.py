"""High-level API for generating directory tree snapshots.

These functions tie the tree builder and the formatter together for callers that
embed dirtree as a library. Each call validates its configuration, builds the tree
in one pass and serializes it.
"""

from pathlib import Path
from threading import Event
from typing import Optional

from dirtree.config import Config, FormatConfig
from dirtree.exceptions import ConfigError
from dirtree.file_system_tree.file_system_tree import build_tree
from dirtree.output_strategies import format_tree
from dirtree.types import OutputFormat, PathType


def generate(config: Config, cancel_event: Optional[Event] = None) -> bytes:
    """Build and format the tree described by ``config``.

    Args:
        config: Configuration of the build and of the output format.
        cancel_event: Optional event that aborts the build when set.

    Returns:
        The formatted tree.

    Raises:
        ConfigError: If the configuration is invalid.
        AccessError: If the root path cannot be stat-ed.
        DirectoryReadError: If a directory cannot be listed.
        BuildCancelledError: If ``cancel_event`` was set during the build.

    Example:
        >>> data = generate(Config(path="src", max_depth=1))  # doctest: +SKIP
        >>> data[:1]  # doctest: +SKIP
        b'{'
    """
    config.validate()
    root = build_tree(config.to_build_options(), cancel_event)
    return format_tree(root, config.format.output_format, config.format.indent, config.format.exclude_node_fields)


def generate_to_file(config: Config, cancel_event: Optional[Event] = None) -> Path:
    """Build and format a tree and write it to the configured output file.

    The format's extension is appended to ``config.format.output_path`` when it is
    missing.

    Args:
        config: Configuration; ``config.format.output_path`` must be set.
        cancel_event: Optional event that aborts the build when set.

    Returns:
        The path that was written.

    Raises:
        ConfigError: If no output path is configured or the configuration is invalid.
        OSError: If the output file cannot be written.
    """
    output_path = config.format.get_output_path()
    if output_path is None:
        raise ConfigError("output path is required for file generation")

    data = generate(config, cancel_event)
    output_path.write_bytes(data)
    return output_path


def generate_json(path: PathType, max_depth: int = -1) -> bytes:
    """Generate a JSON snapshot of ``path`` with default options."""
    config = Config(path=str(path), max_depth=max_depth, format=FormatConfig(output_format=OutputFormat.JSON.value))
    return generate(config)


def generate_text(path: PathType, max_depth: int = -1) -> str:
    """Generate an indented text listing of ``path`` with default options.

    Example:
        >>> print(generate_text("src", max_depth=1))  # doctest: +SKIP
        📁 src
          📁 dirtree
    """
    config = Config(path=str(path), max_depth=max_depth, format=FormatConfig(output_format=OutputFormat.TXT.value))
    return generate(config).decode("utf-8", "surrogateescape")
