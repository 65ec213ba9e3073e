"""XML output strategy for directory trees.

This module renders a projected tree as nested XML elements, escaping text with
xml.sax.saxutils so arbitrary file names produce well-formed output.
"""

from typing import Any, Dict, List, Optional
from xml.sax.saxutils import escape as xml_escape

from dirtree.file_system_tree.file_system_node import FileSystemNode
from dirtree.types import NodeField, OutputFormat

from .base_strategy import ENCODING, ENCODING_ERRORS, OutputStrategy
from .projection import project_node

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'


class XMLOutputStrategy(OutputStrategy):
    """Output strategy that formats the tree as nested ``<node>`` elements.

    Every node becomes a ``<node>`` element holding one child element per included
    field. Children are wrapped in a ``<children>`` element, which is self-closing
    for empty directories:

    <?xml version="1.0" encoding="UTF-8"?>
    <node>
      <name>src</name>
      <path>src</path>
      <type>directory</type>
      <size>0</size>
      <is_hidden>false</is_hidden>
      <children>
        <node>
          ...
        </node>
      </children>
    </node>

    Booleans are written as ``true``/``false``. With an indent of 0 the document is
    written on a single line. A None tree produces empty output.

    Example:
        >>> strategy = XMLOutputStrategy(exclude_fields=["path", "size", "is_hidden"])
        >>> print(strategy.format_tree(FileSystemNode("a & b.txt")).decode(), end="")
        <?xml version="1.0" encoding="UTF-8"?>
        <node>
          <name>a &amp; b.txt</name>
          <type>file</type>
        </node>
    """

    output_format = OutputFormat.XML

    def format_tree(self, root: Optional[FileSystemNode]) -> bytes:
        data = project_node(root, self.exclude_fields)
        if data is None:
            return b""

        lines = [XML_DECLARATION]
        self._write_node(data, 0, lines)
        separator = "\n" if self.indent > 0 else ""
        text = separator.join(lines) + separator
        return text.encode(ENCODING, ENCODING_ERRORS)

    def _write_node(self, data: Dict[str, Any], level: int, lines: List[str]) -> None:
        pad = self._pad(level)
        field_pad = self._pad(level + 1)
        lines.append(f"{pad}<node>")
        for key, value in data.items():
            if key == NodeField.CHILDREN.value:
                if not value:
                    lines.append(f"{field_pad}<children />")
                    continue
                lines.append(f"{field_pad}<children>")
                for child in value:
                    self._write_node(child, level + 2, lines)
                lines.append(f"{field_pad}</children>")
            else:
                lines.append(f"{field_pad}<{key}>{_format_value(value)}</{key}>")
        lines.append(f"{pad}</node>")

    def _pad(self, level: int) -> str:
        return " " * (self.indent * level)


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return xml_escape(str(value))
