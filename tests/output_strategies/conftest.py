import pytest

from dirtree.file_system_tree import FileSystemNode
from dirtree.types import FileType


@pytest.fixture
def small_tree():
    """A hand-built tree: src/ holding a.txt (3 bytes), .env, an empty dir and a link."""
    root = FileSystemNode("src", node_type=FileType.DIRECTORY, file_path="src")
    FileSystemNode("a.txt", parent=root, file_path="src/a.txt", file_size=3)
    FileSystemNode(".env", parent=root, file_path="src/.env", file_size=0)
    FileSystemNode("empty", parent=root, node_type=FileType.DIRECTORY, file_path="src/empty")
    FileSystemNode("link", parent=root, node_type=FileType.SYMLINK, file_path="src/link", file_size=5)
    return root
