"""JSON output strategy for directory trees."""

import json
from typing import Optional

from dirtree.file_system_tree.file_system_node import FileSystemNode
from dirtree.types import OutputFormat

from .base_strategy import ENCODING, ENCODING_ERRORS, OutputStrategy
from .projection import project_node


class JSONOutputStrategy(OutputStrategy):
    """Output strategy that serializes the tree as a single JSON document.

    Each node becomes an object with the keys ``name``, ``path``, ``type``,
    ``size``, ``is_hidden`` and, for directories, ``children``:

    {
        "name": "project",
        "path": "project",
        "type": "directory",
        "size": 0,
        "is_hidden": false,
        "children": [...]
    }

    With a positive indent the document is pretty-printed using that many spaces per
    level; with an indent of 0 it is emitted on one line without optional
    whitespace. A None tree serializes to ``null``.

    Example:
        >>> strategy = JSONOutputStrategy(indent=0, exclude_fields=["path", "size", "is_hidden"])
        >>> strategy.format_tree(FileSystemNode("a.txt"))
        b'{"name":"a.txt","type":"file"}'
        >>> strategy.format_tree(None)
        b'null'
    """

    output_format = OutputFormat.JSON

    def format_tree(self, root: Optional[FileSystemNode]) -> bytes:
        data = project_node(root, self.exclude_fields)
        if self.indent > 0:
            text = json.dumps(data, indent=self.indent, ensure_ascii=False)
        else:
            text = json.dumps(data, separators=(",", ":"), ensure_ascii=False)
        return text.encode(ENCODING, ENCODING_ERRORS)
