"""Command-line argument parsing for dirtree.

This module defines the command-line interface for dirtree, handling argument
parsing, validation, and merging of command-line values with a config file.
"""

import argparse
from pathlib import Path
from typing import Optional

from dirtree import __version__
from dirtree.config import Config, config_from_mapping, load_config_file, parse_comma_separated
from dirtree.types import NodeField, OutputFormat

# Options stored on the namespace under their config-file names
_TOP_LEVEL_KEYS = ("path", "max_depth", "exclude_paths", "exclude_types", "include_files", "follow_links")
_FORMAT_KEYS = {
    "output_format": "type",
    "output": "output_path",
    "indent": "indent",
    "exclude_node_fields": "exclude_node_fields",
}


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the command-line argument parser.

    Every option defaults to ``argparse.SUPPRESS``, so the namespace only carries
    the options given on the command line. This lets explicit flags override a
    config file while defaults do not.

    Returns:
        An ArgumentParser instance configured with dirtree's options.
    """
    description = """
    dirtree: snapshot a directory hierarchy as JSON, YAML, XML or text.

    The tool walks a directory depth-first and records every directory, file and
    symbolic link with its path, type, size and hidden flag. The result can be
    limited in depth, filtered by path patterns and file extensions, and rendered
    with selected fields left out.
    """

    epilog = """
    Examples:
      # JSON snapshot of the current directory
      dirtree

      # Two levels deep, as an indented text listing
      dirtree -d 2 -f txt /path/to/project

      # Skip VCS metadata and compiled files
      dirtree -e '/\\.git$' -x .pyc,.pyo /path/to/project

      # Directories only, following symbolic links
      dirtree --no-include-files -L /path/to/project

      # Names and structure only, written to tree.yaml
      dirtree -f yaml -F path,size,type,is_hidden -o tree /path/to/project

      # Options from a config file, overriding its depth
      dirtree -c dirtree.yaml -d 3
    """

    parser = argparse.ArgumentParser(
        prog="dirtree",
        description=description,
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        argument_default=argparse.SUPPRESS,
    )

    parser.add_argument(
        "-V", "--version", action="version", version=f"dirtree {__version__}", help="Show the version and exit"
    )
    parser.add_argument(
        "path",
        nargs="?",
        help="Root path to walk (default: the current directory).",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        metavar="FILE",
        help="JSON or YAML config file. Options given on the command line take precedence over it.",
    )
    parser.add_argument(
        "-f",
        "--format",
        dest="output_format",
        type=str.lower,
        choices=[f.value for f in OutputFormat],
        help="Output format (default: json).",
    )
    parser.add_argument(
        "-o",
        "--output",
        metavar="FILE",
        help=(
            "Output file. The format's extension is appended when missing. "
            "If not specified, output is written to stdout."
        ),
    )
    parser.add_argument(
        "-d",
        "--max-depth",
        type=int,
        metavar="N",
        help="Maximum depth below the root, -1 for unlimited (default: -1).",
    )
    parser.add_argument(
        "-e",
        "--exclude-path",
        dest="exclude_paths",
        action="extend",
        type=parse_comma_separated,
        metavar="REGEX",
        help=(
            "Regular expression searched for in each entry's path; matching entries are omitted with "
            "their subtree. Comma-separated or repeated. Invalid expressions match nothing."
        ),
    )
    parser.add_argument(
        "-x",
        "--exclude-type",
        dest="exclude_types",
        action="extend",
        type=parse_comma_separated,
        metavar="EXT",
        help="File extension to omit, case-insensitive (e.g. .log). Comma-separated or repeated.",
    )
    parser.add_argument(
        "--include-files",
        action=argparse.BooleanOptionalAction,
        help="Include files, or only directories with --no-include-files (default: include).",
    )
    parser.add_argument(
        "-L",
        "--follow-links",
        action=argparse.BooleanOptionalAction,
        help="Follow symbolic links and traverse their targets (default: do not follow).",
    )
    parser.add_argument(
        "-F",
        "--exclude-field",
        dest="exclude_node_fields",
        action="extend",
        type=parse_comma_separated,
        metavar="FIELD",
        help=(
            "Node field to omit from the output: "
            + ", ".join(f.value for f in NodeField)
            + ". Comma-separated or repeated."
        ),
    )
    parser.add_argument(
        "--indent",
        type=int,
        metavar="N",
        help="Indentation width; 0 gives compact JSON and single-line XML (default: 2).",
    )
    parser.add_argument(
        "-s",
        "--summary",
        action="store_true",
        help="Print directory, file and symlink counts to stderr.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        help="Log progress to stderr; repeat for debug output.",
    )

    return parser


def validate_args(args: argparse.Namespace) -> None:
    """Validate command-line arguments.

    Performs checks argparse cannot express directly. The merged configuration is
    validated separately by Config.validate.

    Args:
        args: Parsed command-line arguments.

    Raises:
        ValueError: If any arguments fail validation.
    """
    config_path: Optional[Path] = getattr(args, "config", None)
    if config_path is not None and not config_path.is_file():
        raise ValueError(f"Config file not found: {config_path}")
    if getattr(args, "max_depth", -1) < -1:
        raise ValueError("--max-depth cannot be less than -1")
    if getattr(args, "indent", 0) < 0:
        raise ValueError("--indent cannot be negative")


def build_config(args: argparse.Namespace) -> Config:
    """Merge defaults, the optional config file and explicit flags into a Config.

    Args:
        args: Parsed command-line arguments.

    Returns:
        The merged configuration (not yet validated).

    Raises:
        ConfigError: If the config file is invalid.
    """
    config = Config()
    config_path = getattr(args, "config", None)
    if config_path is not None:
        config = load_config_file(config_path, config)

    overrides = {key: getattr(args, key) for key in _TOP_LEVEL_KEYS if hasattr(args, key)}
    format_overrides = {name: getattr(args, dest) for dest, name in _FORMAT_KEYS.items() if hasattr(args, dest)}
    if format_overrides:
        overrides["format"] = format_overrides
    return config_from_mapping(overrides, config)
