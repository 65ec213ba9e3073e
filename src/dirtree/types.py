from enum import Enum
from os import PathLike
from typing import FrozenSet, Iterable, Union

# Complete path type including strings and any path-like object
PathType = Union[str, PathLike[str]]


class FileType(str, Enum):
    """Enumeration of node types produced during traversal.

    The type is decided from filesystem metadata, never from the file name. A
    symbolic link keeps the SYMLINK type unless links are followed and its
    target can be resolved, in which case it takes the target's type.

    Attributes:
        DIRECTORY: Directory (or a followed link to one)
        FILE: Regular file (or a followed link to one)
        SYMLINK: Symbolic link that was not followed or could not be resolved
    """

    DIRECTORY = "directory"
    FILE = "file"
    SYMLINK = "symlink"


class OutputFormat(str, Enum):
    """Serialization formats supported by the formatter.

    Example:
        >>> OutputFormat("yaml").extension
        '.yaml'
    """

    JSON = "json"
    YAML = "yaml"
    XML = "xml"
    TXT = "txt"

    @property
    def extension(self) -> str:
        """File extension for this format, including the leading dot."""
        return f".{self.value}"


class NodeField(str, Enum):
    """Closed set of node attributes that can be omitted from formatted output.

    Excluding CHILDREN removes the whole subtree from the representation, not just
    the key.
    """

    NAME = "name"
    PATH = "path"
    TYPE = "type"
    SIZE = "size"
    IS_HIDDEN = "is_hidden"
    CHILDREN = "children"


def parse_node_fields(fields: Iterable[Union[str, NodeField]]) -> FrozenSet[NodeField]:
    """Convert field names into a set of NodeField members.

    Args:
        fields: Field names (case-insensitive, surrounding whitespace ignored) or
            NodeField members.

    Returns:
        The set of fields to exclude.

    Raises:
        ValueError: If a name does not denote a known field.

    Example:
        >>> sorted(f.value for f in parse_node_fields(["size", " Path "]))
        ['path', 'size']
    """
    result = set()
    for field in fields:
        if isinstance(field, NodeField):
            result.add(field)
            continue
        try:
            result.add(NodeField(field.strip().lower()))
        except ValueError:
            valid = ", ".join(f.value for f in NodeField)
            raise ValueError(f"Unknown node field: {field!r}. Must be one of: {valid}")
    return frozenset(result)
