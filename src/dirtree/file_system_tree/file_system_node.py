"""Node representation for file system entries in the tree."""

from typing import Any, Optional

from anytree import Node

from dirtree.types import FileType


def is_hidden_name(name: str) -> bool:
    """Return True if a base name follows the dotfile convention.

    Example:
        >>> [is_hidden_name(n) for n in (".hidden", ".", "..", ".file.txt", "file.txt", "")]
        [True, True, True, True, False, False]
    """
    return name.startswith(".")


class FileSystemNode(Node):  # type: ignore
    """Node class representing one filesystem entry observed during traversal.

    Extends anytree.Node with the entry's type, size, traversal path and hidden flag.
    Tree navigation (``parent``, ``children``, ``depth``, iteration) is inherited
    from anytree; since anytree reserves ``path`` for the tuple of ancestor nodes,
    the filesystem path is stored as ``file_path``.

    Attributes:
        name (str): Base name of the entry.
        node_type (FileType): Directory, file or symlink.
        file_path (str): Path as passed to or derived during traversal. It is not
            canonicalized, so entries below a followed link keep the link's path.
        file_size (int): 0 for directories, the byte size for files, the raw link size
            for unresolved symlinks.
        is_hidden (bool): True if the base name starts with a dot.
        children (tuple[FileSystemNode]): Child nodes in traversal order.

    Example:
        >>> root = FileSystemNode("root", node_type=FileType.DIRECTORY, file_path="root")
        >>> child = FileSystemNode(".env", parent=root, file_path="root/.env", file_size=12)
        >>> child.is_hidden, child.depth, child.is_dir
        (True, 1, False)
    """

    def __init__(
        self,
        name: str,
        parent: Optional["FileSystemNode"] = None,
        node_type: FileType = FileType.FILE,
        file_path: str = "",
        file_size: int = 0,
        is_hidden: Optional[bool] = None,
        **kwargs: Any,
    ) -> None:
        """Initialize a FileSystemNode.

        Args:
            name: Base name of the entry.
            parent: The parent node. Defaults to None.
            node_type: The entry's type. Defaults to FILE.
            file_path: Path of the entry. Defaults to the name.
            file_size: Size in bytes. Defaults to 0.
            is_hidden: Hidden flag. Derived from the name when omitted.
            **kwargs: Additional arguments passed to anytree.Node.
        """
        super().__init__(name, parent, **kwargs)
        self.node_type = FileType(node_type)
        self.file_path = file_path or name
        self.file_size = file_size
        self.is_hidden = is_hidden_name(name) if is_hidden is None else is_hidden

    @property
    def is_dir(self) -> bool:
        return self.node_type is FileType.DIRECTORY

    @property
    def is_symlink(self) -> bool:
        return self.node_type is FileType.SYMLINK
