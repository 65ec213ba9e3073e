"""File system tree construction with depth limiting and exclusion rules.

This module provides the FileSystemTree class, which walks a directory subtree
depth-first and builds a tree of FileSystemNode objects, and the build_tree
convenience function.
"""

import logging
import os
import stat
from threading import Event
from typing import Optional, Set, Tuple

from anytree import PreOrderIter

from dirtree.exceptions import AccessError, BuildCancelledError, DirectoryReadError
from dirtree.exclusion_rules.extension_rules import ExtensionExclusionRules
from dirtree.exclusion_rules.regex_rules import RegexExclusionRules
from dirtree.file_system_tree.build_options import BuildOptions
from dirtree.file_system_tree.file_identifier import FileIdentifier
from dirtree.file_system_tree.file_system_node import FileSystemNode, is_hidden_name
from dirtree.types import FileType

logger = logging.getLogger(__name__)


class FileSystemTree:
    """A tree representation of a directory structure built from BuildOptions.

    The tree is built lazily on first access and can be rebuilt with refresh().
    Every entry below the root goes through the same checks, in this order:

    1. depth limit (no filesystem access beyond it),
    2. path exclusion by regular expression,
    3. the ``include_files`` flag, judged on ``lstat`` metadata so that a
       symlink is dropped even when it points at a directory,
    4. type resolution, resolving symlinks when ``follow_links`` is set,
    5. extension exclusion (files only, after symlink resolution).

    An entry removed by any of these checks is omitted together with its subtree.
    The root is always included.

    Symbolic Link Behavior:
        Without ``follow_links`` a symlink is a leaf SYMLINK node with the size of
        the link itself. With it, a link to a directory becomes a DIRECTORY node whose
        children are listed through the link path, a link to a file becomes a FILE
        node with the target's size, and a dangling link stays a SYMLINK. The
        device/inode identity of each directory on the current descent path is
        tracked; an entry leading back into one of them is omitted, so cyclic links
        cannot cause unbounded recursion.

    Error Handling:
        A root that cannot be stat-ed raises AccessError. A directory that has to be
        expanded but cannot be listed raises DirectoryReadError and aborts the whole
        build. An entry whose own metadata cannot be read is silently skipped.

    Attributes:
        options (BuildOptions): The options of this build.
        path_rules (RegexExclusionRules): Compiled path exclusion patterns.
        type_rules (ExtensionExclusionRules): Excluded file extensions.
        cancel_event (Optional[Event]): When set, the build stops before expanding
            the next directory.

    Example:
        >>> tree = FileSystemTree(BuildOptions(".", max_depth=1))  # doctest: +SKIP
        >>> [child.name for child in tree.get_tree().children]  # doctest: +SKIP
        ['README.md', 'src', 'tests']
    """

    def __init__(self, options: BuildOptions, cancel_event: Optional[Event] = None) -> None:
        """Initialize a FileSystemTree.

        Args:
            options: Options of the build.
            cancel_event: Optional event consulted before each directory expansion.
        """
        self.options = options
        self.path_rules = RegexExclusionRules(options.exclude_paths)
        self.type_rules = ExtensionExclusionRules(options.exclude_types)
        self.cancel_event = cancel_event
        self._tree: Optional[FileSystemNode] = None

    def get_tree(self) -> FileSystemNode:
        """Get the root node of the tree, building it on first access.

        Returns:
            The root node.

        Raises:
            AccessError: If the root path cannot be stat-ed.
            DirectoryReadError: If a directory that must be expanded cannot be listed.
            BuildCancelledError: If the cancel event was set during the build.
        """
        if self._tree is None:
            self._tree = self._build_tree()
        return self._tree

    def refresh(self) -> FileSystemNode:
        """Discard the cached tree and build it again from the filesystem."""
        self._tree = None
        return self.get_tree()

    def _build_tree(self) -> FileSystemNode:
        root_path = os.fspath(self.options.path)
        try:
            info = os.stat(root_path)
        except OSError as e:
            raise AccessError(root_path, e) from e

        logger.debug("Building tree for %s (max depth %d)", root_path, self.options.max_depth)
        node_type, size, target_info = self._resolve_type(root_path, info)
        file_id = FileIdentifier.from_stat(target_info) if node_type is FileType.DIRECTORY else None
        return self._make_node(root_path, _root_name(root_path), node_type, size, file_id, 0, set())

    def _create_node(
        self,
        path: str,
        info: os.stat_result,
        depth: int,
        active_dirs: Set[FileIdentifier],
    ) -> Optional[FileSystemNode]:
        """Filter the entry at ``path`` and create its node and children.

        Returns None when the entry is filtered out.
        """
        max_depth = self.options.max_depth
        if max_depth != -1 and depth > max_depth:
            return None

        if self.path_rules.exclude(path):
            logger.debug("Excluding %s: matches a path pattern", path)
            return None

        # lstat metadata, so every symlink counts as a non-directory here
        if not self.options.include_files and not stat.S_ISDIR(info.st_mode):
            return None

        node_type, size, target_info = self._resolve_type(path, info)

        if node_type is FileType.FILE and self.type_rules.exclude(path):
            logger.debug("Excluding %s: excluded file type", path)
            return None

        file_id = None
        if node_type is FileType.DIRECTORY:
            file_id = FileIdentifier.from_stat(target_info)
            if file_id in active_dirs:
                logger.warning("Skipping %s: it leads back into an enclosing directory", path)
                return None

        return self._make_node(path, os.path.basename(path), node_type, size, file_id, depth, active_dirs)

    def _make_node(
        self,
        path: str,
        name: str,
        node_type: FileType,
        size: int,
        file_id: Optional[FileIdentifier],
        depth: int,
        active_dirs: Set[FileIdentifier],
    ) -> FileSystemNode:
        node = FileSystemNode(name, node_type=node_type, file_path=path, file_size=size, is_hidden=is_hidden_name(name))

        max_depth = self.options.max_depth
        if file_id is not None and (max_depth == -1 or depth < max_depth):
            self._add_children(node, path, depth, file_id, active_dirs)

        return node

    def _resolve_type(self, path: str, info: os.stat_result) -> Tuple[FileType, int, os.stat_result]:
        """Classify an entry from its metadata, applying the symlink policy.

        Returns:
            The node type, the size to record, and the stat result of the entry the
            node stands for (the link target for resolved symlinks).
        """
        if stat.S_ISDIR(info.st_mode):
            return FileType.DIRECTORY, 0, info
        if not stat.S_ISLNK(info.st_mode):
            return FileType.FILE, info.st_size, info

        if self.options.follow_links:
            try:
                target_info = os.stat(path)
            except OSError as e:
                logger.debug("Cannot resolve symlink %s: %s", path, e)
            else:
                if stat.S_ISDIR(target_info.st_mode):
                    return FileType.DIRECTORY, 0, target_info
                return FileType.FILE, target_info.st_size, target_info

        return FileType.SYMLINK, info.st_size, info

    def _add_children(
        self,
        node: FileSystemNode,
        path: str,
        depth: int,
        file_id: FileIdentifier,
        active_dirs: Set[FileIdentifier],
    ) -> None:
        if self.cancel_event is not None and self.cancel_event.is_set():
            raise BuildCancelledError(path)

        try:
            with os.scandir(path) as it:
                entries = sorted(it, key=lambda entry: entry.name)
        except OSError as e:
            raise DirectoryReadError(path, e) from e

        active_dirs.add(file_id)
        try:
            for entry in entries:
                try:
                    entry_info = entry.stat(follow_symlinks=False)
                except OSError as e:
                    logger.debug("Skipping %s: cannot read metadata: %s", entry.path, e)
                    continue

                child = self._create_node(entry.path, entry_info, depth + 1, active_dirs)
                if child is not None:
                    child.parent = node
        finally:
            active_dirs.discard(file_id)

    def get_file_count(self) -> int:
        """Get the number of FILE nodes in the tree."""
        return self._count(FileType.FILE)

    def get_directory_count(self) -> int:
        """Get the number of DIRECTORY nodes in the tree, excluding the root."""
        count = self._count(FileType.DIRECTORY)
        if self.get_tree().is_dir:
            count -= 1
        return count

    def get_symlink_count(self) -> int:
        """Get the number of SYMLINK nodes (unfollowed or unresolvable links)."""
        return self._count(FileType.SYMLINK)

    def _count(self, node_type: FileType) -> int:
        return sum(1 for node in PreOrderIter(self.get_tree()) if node.node_type is node_type)


def _root_name(path: str) -> str:
    """Base name of the root path as given, keeping '.' and '..' and falling back to the path for '/'."""
    return os.path.basename(os.path.normpath(path)) or path


def build_tree(options: BuildOptions, cancel_event: Optional[Event] = None) -> FileSystemNode:
    """Build the tree described by ``options`` in one synchronous pass.

    Args:
        options: Options of the build.
        cancel_event: Optional event; when set, the build raises BuildCancelledError
            before expanding the next directory.

    Returns:
        The root node. The caller owns the tree exclusively.

    Raises:
        AccessError: If the root path cannot be stat-ed.
        DirectoryReadError: If a directory that must be expanded cannot be listed.
        BuildCancelledError: If ``cancel_event`` was set during the build.

    Example:
        >>> root = build_tree(BuildOptions("/nonexistent", max_depth=1))
        Traceback (most recent call last):
            ...
        dirtree.exceptions.AccessError: Error accessing path /nonexistent: [Errno 2] No such file or directory: '/nonexistent'
    """
    return FileSystemTree(options, cancel_event).get_tree()
