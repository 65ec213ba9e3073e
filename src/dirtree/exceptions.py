from typing import Optional


class TreeBuildError(Exception):
    """
    Base class for errors that abort a tree build.

    A build either returns a complete tree or raises one of these; a partial tree is
    never handed back alongside an error.

    Attributes:
        path (str): The filesystem path the build failed on.
    """

    def __init__(self, path: str, message: str) -> None:
        self.path = path
        super().__init__(message)


class AccessError(TreeBuildError):
    """
    Exception raised when the root path of a build cannot be stat-ed.

    This covers a missing root, a permission failure on one of its parent
    directories, or any other error reported by ``os.stat``. The underlying
    ``OSError`` is chained as ``__cause__`` and also kept in ``reason``.

    Attributes:
        path (str): The root path that could not be accessed.
        reason (Optional[OSError]): The error reported by the operating system.

    Example:
        >>> error = AccessError("/missing")
        >>> str(error)
        'Error accessing path /missing'
        >>> str(AccessError("/missing", FileNotFoundError(2, "No such file or directory")))
        'Error accessing path /missing: [Errno 2] No such file or directory'
    """

    def __init__(self, path: str, reason: Optional[OSError] = None) -> None:
        """
        Initialize the exception with the inaccessible path.

        Args:
            path (str): The root path that could not be accessed.
            reason (Optional[OSError]): The error reported by the operating system.
        """
        self.reason = reason
        message = f"Error accessing path {path}"
        if reason is not None:
            message += f": {reason}"
        super().__init__(path, message)


class DirectoryReadError(TreeBuildError):
    """
    Exception raised when a directory that must be expanded cannot be listed.

    Raised for permission failures or races in which a directory disappears between
    being stat-ed and being read. The whole build is aborted.

    Attributes:
        path (str): The directory that could not be read.
        reason (Optional[OSError]): The error reported by the operating system.

    Example:
        >>> error = DirectoryReadError("/root/secret", PermissionError(13, "Permission denied"))
        >>> str(error)
        'Error reading directory /root/secret: [Errno 13] Permission denied'
    """

    def __init__(self, path: str, reason: Optional[OSError] = None) -> None:
        self.reason = reason
        message = f"Error reading directory {path}"
        if reason is not None:
            message += f": {reason}"
        super().__init__(path, message)


class BuildCancelledError(TreeBuildError):
    """
    Exception raised when a build is cancelled before expanding a directory.

    Example:
        >>> str(BuildCancelledError("/data"))
        'Tree build cancelled before expanding /data'
    """

    def __init__(self, path: str) -> None:
        super().__init__(path, f"Tree build cancelled before expanding {path}")


class UnsupportedFormatError(ValueError):
    """
    Exception raised when the formatter receives an unknown format selector.

    Attributes:
        output_format (str): The selector that was not recognized.

    Example:
        >>> str(UnsupportedFormatError("csv"))
        'Unsupported format: csv'
    """

    def __init__(self, output_format: str) -> None:
        self.output_format = output_format
        super().__init__(f"Unsupported format: {output_format}")


class ConfigError(ValueError):
    """
    Exception raised for an invalid configuration or an unreadable config file.

    Example:
        >>> str(ConfigError("max depth cannot be less than -1"))
        'max depth cannot be less than -1'
    """

    pass
