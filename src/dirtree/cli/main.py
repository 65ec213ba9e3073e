"""Command-line interface for dirtree.

This module provides the entry point of the ``dirtree`` command. It parses the
command line, merges it with an optional config file, builds the tree, formats it
and writes the result to stdout or to a file.

Signal Handling Notes:
    - SIGINT: the build stops before expanding the next directory and nothing is
      written.
    - SIGPIPE: raised when the reading end of a pipe closes (e.g. ``| head``);
      remaining output is dropped.

Exit Codes:
    0: Successful completion
    1: Runtime error (inaccessible root, unreadable directory, invalid config)
    2: Command-line syntax error
    130: Interrupted by SIGINT (Ctrl+C)
    141: Broken pipe (SIGPIPE) on Unix-like systems

Example:
    # Text listing of a project, three levels deep
    $ dirtree -f txt -d 3 /path/to/project

    # Display version information
    $ dirtree --version
"""

import logging
import sys

from dirtree.cli.argparser import build_config, create_parser, validate_args
from dirtree.cli.safe_writer import SafeWriter
from dirtree.cli.signal_handler import setup_signal_handling, signal_handler
from dirtree.exceptions import BuildCancelledError
from dirtree.file_system_tree.file_system_tree import FileSystemTree
from dirtree.output_strategies import format_tree

LOG_FORMAT = "%(levelname)s: %(message)s"


def configure_logging(verbosity: int) -> None:
    """Send log records to stderr at a level chosen by the number of -v flags.

    Args:
        verbosity: 0 for warnings only, 1 for info, 2 or more for debug output.
    """
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)


def format_counts(tree: FileSystemTree) -> str:
    """Format the node counts of a built tree into a human-readable summary.

    Args:
        tree: A tree whose build has completed.

    Returns:
        One ``Label: count`` line per node kind.
    """
    result = [
        f"Directories: {tree.get_directory_count()}",
        f"Files: {tree.get_file_count()}",
        f"Symlinks: {tree.get_symlink_count()}",
    ]
    return "\n".join(result)


def main() -> None:
    """Main entry point for the dirtree command-line interface.

    Exit codes:
        0: Successful completion
        1: Runtime error during execution
        2: Command-line syntax error
        130: Interrupted by SIGINT (Ctrl+C)
        141: Broken pipe (SIGPIPE) on Unix-like systems
    """
    setup_signal_handling()

    try:
        parser = create_parser()
        # argparse calls sys.exit(2) for argument errors or sys.exit(0) for --version
        args = parser.parse_args()

        validate_args(args)
        configure_logging(getattr(args, "verbose", 0))

        config = build_config(args)
        config.validate()

        tree = FileSystemTree(config.to_build_options(), cancel_event=signal_handler.sigint_received)
        root = tree.get_tree()
        data = format_tree(root, config.format.output_format, config.format.indent, config.format.exclude_node_fields)

        output_path = config.format.get_output_path()
        # Terminate the document for terminals and line-oriented consumers
        if output_path is None and data and not data.endswith(b"\n"):
            data += b"\n"

        with SafeWriter(output_path if output_path is not None else sys.stdout.fileno()) as safe_writer:
            try:
                safe_writer.write(data)
            except BrokenPipeError:
                pass  # SafeWriter will automatically close in the context manager

        if output_path is not None and not signal_handler.interrupted():
            print(f"Tree successfully written to: {output_path}", file=sys.stderr)

        if getattr(args, "summary", False):
            print(format_counts(tree), file=sys.stderr)

    except BuildCancelledError:
        pass  # exit status is set from the signal below
    except Exception as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)

    exit_code = signal_handler.exit_code()
    if exit_code is not None:
        sys.exit(exit_code)


if __name__ == "__main__":
    main()
