"""Identity of a directory on disk, used to detect symlink cycles."""

import os
from typing import Any


class FileIdentifier:
    """Device and inode pair that identifies a directory independently of its path.

    Two different paths (for instance a directory and a symlink pointing back at
    one of its ancestors) resolve to equal identifiers when they denote the same
    directory.

    Attributes:
        device_id (int): ``st_dev`` of the entry.
        inode_number (int): ``st_ino`` of the entry.
    """

    def __init__(self, device_id: int, inode_number: int):
        self.device_id = device_id
        self.inode_number = inode_number

    @classmethod
    def from_stat(cls, info: os.stat_result) -> "FileIdentifier":
        """Build an identifier from a stat result of the resolved entry."""
        return cls(info.st_dev, info.st_ino)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, FileIdentifier):
            return False
        return self.device_id == other.device_id and self.inode_number == other.inode_number

    def __hash__(self) -> int:
        return hash((self.device_id, self.inode_number))

    def __repr__(self) -> str:
        return f"FileIdentifier(device_id={self.device_id}, inode_number={self.inode_number})"
