"""Plain-text output strategy for directory trees."""

from typing import Iterator, Optional

from dirtree.file_system_tree.file_system_node import FileSystemNode
from dirtree.types import FileType, NodeField, OutputFormat

from .base_strategy import ENCODING, ENCODING_ERRORS, OutputStrategy

TYPE_MARKERS = {
    FileType.DIRECTORY: "\U0001f4c1",  # 📁
    FileType.FILE: "\U0001f4c4",  # 📄
    FileType.SYMLINK: "\U0001f517",  # 🔗
}


class TextOutputStrategy(OutputStrategy):
    """Output strategy that renders the tree as an indented listing.

    Each node is written on its own line, indented by ``indent`` spaces per level
    and starting with a marker for its type. The name follows, then the size for
    non-empty files and a ``[hidden]`` tag for dotfiles, each only when the
    corresponding field is included. A None tree produces empty output.

    Example:
        >>> root = FileSystemNode("project", node_type=FileType.DIRECTORY)
        >>> _ = FileSystemNode("main.py", parent=root, file_size=120)
        >>> _ = FileSystemNode(".env", parent=root, file_size=0)
        >>> print(TextOutputStrategy().format_tree(root).decode(), end="")
        📁 project
          📄 main.py (120 bytes)
          📄 .env [hidden]
    """

    output_format = OutputFormat.TXT

    def format_tree(self, root: Optional[FileSystemNode]) -> bytes:
        if root is None:
            return b""
        return "".join(self.stream_lines(root)).encode(ENCODING, ENCODING_ERRORS)

    def stream_lines(self, node: FileSystemNode, level: int = 0) -> Iterator[str]:
        """Generate the listing one newline-terminated line at a time.

        Args:
            node: Node to render together with its subtree.
            level: Nesting level of ``node``.

        Yields:
            Lines of the listing.
        """
        parts = [TYPE_MARKERS[node.node_type]]
        if self.includes(NodeField.NAME):
            parts.append(node.name)
        if self.includes(NodeField.SIZE) and node.node_type is FileType.FILE and node.file_size > 0:
            parts.append(f"({node.file_size} bytes)")
        if self.includes(NodeField.IS_HIDDEN) and node.is_hidden:
            parts.append("[hidden]")

        yield " " * (self.indent * level) + " ".join(parts) + "\n"

        if self.includes(NodeField.CHILDREN):
            for child in node.children:
                yield from self.stream_lines(child, level + 1)
