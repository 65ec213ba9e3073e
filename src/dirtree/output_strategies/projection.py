"""Projection of node trees into plain data structures and back."""

from typing import AbstractSet, Any, Callable, Dict, List, Mapping, Optional, Tuple

from dirtree.file_system_tree.file_system_node import FileSystemNode
from dirtree.types import FileType, NodeField

# Scalar fields in output order; children always come last
_SCALAR_FIELDS: List[Tuple[NodeField, Callable[[FileSystemNode], Any]]] = [
    (NodeField.NAME, lambda node: node.name),
    (NodeField.PATH, lambda node: node.file_path),
    (NodeField.TYPE, lambda node: node.node_type.value),
    (NodeField.SIZE, lambda node: node.file_size),
    (NodeField.IS_HIDDEN, lambda node: node.is_hidden),
]


def project_node(
    node: Optional[FileSystemNode], exclude_fields: AbstractSet[NodeField] = frozenset()
) -> Optional[Dict[str, Any]]:
    """Project a node and its subtree into nested dictionaries.

    Keys appear in the order ``name, path, type, size, is_hidden, children`` and
    excluded fields are left out at every level. ``children`` is only present for
    directories (possibly as an empty list); excluding it drops the whole subtree.

    Args:
        node: The node to project, or None.
        exclude_fields: Fields to omit.

    Returns:
        The projected dictionary, or None for a None node.

    Example:
        >>> root = FileSystemNode("docs", node_type=FileType.DIRECTORY)
        >>> _ = FileSystemNode("a.md", parent=root, file_path="docs/a.md", file_size=3)
        >>> project_node(root, {NodeField.PATH, NodeField.IS_HIDDEN})
        {'name': 'docs', 'type': 'directory', 'size': 0, 'children': [{'name': 'a.md', 'type': 'file', 'size': 3}]}
    """
    if node is None:
        return None

    data: Dict[str, Any] = {}
    for field, getter in _SCALAR_FIELDS:
        if field not in exclude_fields:
            data[field.value] = getter(node)

    if node.is_dir and NodeField.CHILDREN not in exclude_fields:
        data[NodeField.CHILDREN.value] = [project_node(child, exclude_fields) for child in node.children]

    return data


def parse_tree(data: Optional[Mapping[str, Any]], parent: Optional[FileSystemNode] = None) -> Optional[FileSystemNode]:
    """Rebuild a node tree from projected (or parsed JSON/YAML) data.

    Missing fields fall back to neutral values: an empty name, the name as path,
    DIRECTORY when children are present and FILE otherwise, size 0, and a hidden
    flag derived from the name.

    Args:
        data: A projected node, or None.
        parent: Parent to attach the rebuilt node to.

    Returns:
        The rebuilt node, or None for None data.
    """
    if data is None:
        return None

    children = data.get(NodeField.CHILDREN.value)
    default_type = FileType.DIRECTORY if children is not None else FileType.FILE
    node = FileSystemNode(
        data.get(NodeField.NAME.value, ""),
        parent=parent,
        node_type=FileType(data.get(NodeField.TYPE.value, default_type)),
        file_path=data.get(NodeField.PATH.value, ""),
        file_size=data.get(NodeField.SIZE.value, 0),
        is_hidden=data.get(NodeField.IS_HIDDEN.value),
    )
    for child in children or ():
        parse_tree(child, parent=node)
    return node
