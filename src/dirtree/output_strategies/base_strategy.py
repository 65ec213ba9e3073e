"""Output strategy base class defining the interface for tree serialization.

This module provides the abstract base class that every output format implements.
A strategy is configured once with an indentation width and a set of excluded node
fields, and then turns a whole tree into bytes.
"""

from abc import ABC, abstractmethod
from typing import AbstractSet, Iterable, Optional, Union

from dirtree.file_system_tree.file_system_node import FileSystemNode
from dirtree.types import NodeField, OutputFormat, parse_node_fields

# Output is UTF-8; undecodable file names round-trip through surrogateescape
ENCODING = "utf-8"
ENCODING_ERRORS = "surrogateescape"


class OutputStrategy(ABC):
    """Abstract base class for tree output formats.

    This class implements the Strategy pattern for rendering a FileSystemNode tree in
    different formats. Each concrete strategy projects the tree, omitting excluded
    fields, and serializes the result. A ``None`` root must be accepted and rendered
    as the format's empty representation.

    Attributes:
        indent (int): Indentation width. Its meaning depends on the format.
        exclude_fields (FrozenSet[NodeField]): Fields omitted from the output.

    Example:
        >>> class NamesOnlyStrategy(OutputStrategy):
        ...     output_format = OutputFormat.TXT
        ...
        ...     def format_tree(self, root):
        ...         if root is None:
        ...             return b""
        ...         return "\\n".join(n.name for n in root.descendants).encode()
        >>> NamesOnlyStrategy().format_tree(None)
        b''
    """

    output_format: OutputFormat

    def __init__(self, indent: int = 2, exclude_fields: Iterable[Union[str, NodeField]] = ()) -> None:
        """Initialize the strategy.

        Args:
            indent: Indentation width; must not be negative.
            exclude_fields: Field names or NodeField members to omit.

        Raises:
            ValueError: If indent is negative or a field name is unknown.
        """
        if indent < 0:
            raise ValueError(f"Indent cannot be negative: {indent}")
        self.indent = indent
        self.exclude_fields: AbstractSet[NodeField] = parse_node_fields(exclude_fields)

    def includes(self, field: NodeField) -> bool:
        """Return True if ``field`` is part of the output."""
        return field not in self.exclude_fields

    @abstractmethod
    def format_tree(self, root: Optional[FileSystemNode]) -> bytes:
        """Serialize a tree.

        Args:
            root: Root node of the tree, or None.

        Returns:
            The serialized tree.
        """
        pass

    def get_file_extension(self) -> str:
        """Get the file extension for this format, including the leading dot.

        Example:
            >>> from dirtree.output_strategies.xml_strategy import XMLOutputStrategy
            >>> XMLOutputStrategy().get_file_extension()
            '.xml'
        """
        return self.output_format.extension
