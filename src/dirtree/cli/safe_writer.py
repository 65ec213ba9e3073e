"""Signal-aware output writing for the dirtree CLI."""

import errno
import os
import types
from pathlib import Path
from typing import Optional, Type, Union

from dirtree.cli.signal_handler import signal_handler


class SafeWriter:
    """Writes formatted output to a file descriptor or a file path.

    Writes go straight to the descriptor with ``os.write`` and are refused once
    SIGPIPE or SIGINT has been received. A file given by path is created (or
    truncated) in binary mode and closed with the writer; a descriptor passed in
    is left open.

    Attributes:
        file: The descriptor or path the writer was created with.
        fd: The descriptor being written to.

    Example:
        >>> with SafeWriter(Path("tree.json")) as writer:  # doctest: +SKIP
        ...     writer.write(b'{"name": "src"}')
    """

    def __init__(self, file: Union[int, str, Path]):
        """Initialize the safe writer.

        Args:
            file: A file descriptor, or a path to open for writing.

        Raises:
            TypeError: If ``file`` is neither an int nor path-like.
        """
        self.file = file
        self._closed = False

        if isinstance(file, int):
            self.fd = file
            self._file_obj = None
        elif isinstance(file, (str, os.PathLike)):
            self._file_obj = Path(file).open("wb")
            self.fd = self._file_obj.fileno()
        else:
            raise TypeError(f"Expected int, str, or PathLike, got {type(file).__name__}")

    def write(self, data: Union[str, bytes]) -> None:
        """Write all of ``data``, encoding text as UTF-8.

        Raises:
            BrokenPipeError: If SIGPIPE or SIGINT was received or the pipe is closed.
            OSError: If another I/O error occurs.
            ValueError: If the writer is closed.
        """
        if self._closed:
            raise ValueError("Cannot write to closed SafeWriter")

        if signal_handler.interrupted():
            raise BrokenPipeError()

        payload = data.encode("utf-8") if isinstance(data, str) else data
        view = memoryview(payload)
        try:
            # os.write may accept only part of the buffer on pipes
            while view:
                written = os.write(self.fd, view)
                view = view[written:]
        except OSError as e:
            if e.errno == errno.EPIPE:
                raise BrokenPipeError()
            raise

    def close(self) -> None:
        """Close the file if this writer opened it.

        The writer is marked closed even when the close fails with a broken pipe.
        """
        if self._closed:
            return

        if self._file_obj is not None:
            try:
                self._file_obj.close()
            except OSError as e:
                if e.errno != errno.EPIPE:
                    raise

        self._closed = True

    def __enter__(self) -> "SafeWriter":
        return self

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[types.TracebackType],
    ) -> None:
        """Close the writer, letting an exception from the with block take priority."""
        try:
            self.close()
        except OSError:
            if exc_type is None:
                raise
