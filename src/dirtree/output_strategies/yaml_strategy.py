"""YAML output strategy for directory trees."""

from typing import Optional

import yaml

from dirtree.file_system_tree.file_system_node import FileSystemNode
from dirtree.types import OutputFormat

from .base_strategy import ENCODING, ENCODING_ERRORS, OutputStrategy
from .projection import project_node


class YAMLOutputStrategy(OutputStrategy):
    """Output strategy that serializes the tree as a YAML document.

    Nodes are emitted in block style with keys in projection order rather than
    sorted. PyYAML only honours indentation widths from 2 to 9; other values fall
    back to its default of 2.

    Example:
        >>> strategy = YAMLOutputStrategy(exclude_fields=["path", "is_hidden"])
        >>> print(strategy.format_tree(FileSystemNode("a.txt", file_size=10)).decode(), end="")
        name: a.txt
        type: file
        size: 10
    """

    output_format = OutputFormat.YAML

    def format_tree(self, root: Optional[FileSystemNode]) -> bytes:
        data = project_node(root, self.exclude_fields)
        text = yaml.safe_dump(
            data,
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
            indent=self.indent or None,
        )
        return text.encode(ENCODING, ENCODING_ERRORS)
