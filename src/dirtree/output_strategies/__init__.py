"""Output strategies that serialize directory trees.

The format_tree function is the entry point used by the rest of the package: it
selects a strategy by format name and returns the serialized bytes.
"""

from typing import Dict, Iterable, Optional, Type, Union

from dirtree.exceptions import UnsupportedFormatError
from dirtree.file_system_tree.file_system_node import FileSystemNode
from dirtree.types import NodeField, OutputFormat

from .base_strategy import OutputStrategy
from .json_strategy import JSONOutputStrategy
from .projection import parse_tree, project_node
from .text_strategy import TextOutputStrategy
from .xml_strategy import XMLOutputStrategy
from .yaml_strategy import YAMLOutputStrategy

STRATEGIES: Dict[OutputFormat, Type[OutputStrategy]] = {
    OutputFormat.JSON: JSONOutputStrategy,
    OutputFormat.YAML: YAMLOutputStrategy,
    OutputFormat.XML: XMLOutputStrategy,
    OutputFormat.TXT: TextOutputStrategy,
}


def create_strategy(
    output_format: Union[str, OutputFormat],
    indent: int = 2,
    exclude_fields: Iterable[Union[str, NodeField]] = (),
) -> OutputStrategy:
    """Create the strategy for a format selector.

    Args:
        output_format: One of ``json``, ``yaml``, ``xml``, ``txt`` (case-insensitive)
            or an OutputFormat member.
        indent: Indentation width.
        exclude_fields: Fields to omit from the output.

    Returns:
        A configured OutputStrategy.

    Raises:
        UnsupportedFormatError: If the selector is not a known format.
        ValueError: If indent is negative or a field name is unknown.

    Example:
        >>> create_strategy("YAML").get_file_extension()
        '.yaml'
        >>> create_strategy("csv")
        Traceback (most recent call last):
            ...
        dirtree.exceptions.UnsupportedFormatError: Unsupported format: csv
    """
    if isinstance(output_format, OutputFormat):
        selected = output_format
    else:
        try:
            selected = OutputFormat(str(output_format).lower())
        except ValueError:
            raise UnsupportedFormatError(str(output_format))
    return STRATEGIES[selected](indent=indent, exclude_fields=exclude_fields)


def format_tree(
    root: Optional[FileSystemNode],
    output_format: Union[str, OutputFormat],
    indent: int = 2,
    exclude_fields: Iterable[Union[str, NodeField]] = (),
) -> bytes:
    """Serialize a tree in the selected format.

    Args:
        root: Root node, or None for an empty tree.
        output_format: Format selector.
        indent: Indentation width.
        exclude_fields: Fields to omit from the output.

    Returns:
        The serialized tree. A None root yields ``null`` for JSON and YAML and empty
        output for XML and text.

    Raises:
        UnsupportedFormatError: If the selector is not a known format.
    """
    return create_strategy(output_format, indent, exclude_fields).format_tree(root)


__all__ = [
    "JSONOutputStrategy",
    "OutputStrategy",
    "STRATEGIES",
    "TextOutputStrategy",
    "XMLOutputStrategy",
    "YAMLOutputStrategy",
    "create_strategy",
    "format_tree",
    "parse_tree",
    "project_node",
]
