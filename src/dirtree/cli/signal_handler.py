"""Signal handling utilities for the dirtree CLI.

SIGINT and SIGPIPE are recorded in threading events instead of raising
immediately. The tree builder consults the SIGINT event before expanding each
directory, and the writer consults both before each write, so an interrupted run
stops at a well-defined point and exits with the conventional status code.
"""

import atexit
import os
import signal
import sys
from threading import Event
from types import FrameType
from typing import Optional

EXIT_SIGINT = 130
EXIT_SIGPIPE = 141


class SignalHandler:
    """Records SIGPIPE and SIGINT so the CLI can stop cleanly.

    Each handler sets its event and then restores the original handler, so a
    second Ctrl+C falls back to the default behaviour.

    Attributes:
        sigpipe_received: Event set when SIGPIPE is received.
        sigint_received: Event set when SIGINT is received. Also used as the
            cancellation event of the tree build.
        original_sigpipe_handler: SIGPIPE handler installed before ours.
        original_sigint_handler: SIGINT handler installed before ours.
    """

    def __init__(self) -> None:
        self.sigpipe_received = Event()
        self.sigint_received = Event()
        self.original_sigpipe_handler = signal.getsignal(signal.SIGPIPE)
        self.original_sigint_handler = signal.getsignal(signal.SIGINT)

    def handle_sigpipe(self, signum: int, frame: Optional[FrameType]) -> None:
        """Record a SIGPIPE and restore the previous SIGPIPE handler."""
        self.sigpipe_received.set()
        signal.signal(signal.SIGPIPE, self.original_sigpipe_handler)

    def handle_sigint(self, signum: int, frame: Optional[FrameType]) -> None:
        """Record a SIGINT, cancelling any running build, and restore the previous SIGINT handler."""
        self.sigint_received.set()
        signal.signal(signal.SIGINT, self.original_sigint_handler)

    def interrupted(self) -> bool:
        """Return True once either signal has been received."""
        return self.sigpipe_received.is_set() or self.sigint_received.is_set()

    def exit_code(self) -> Optional[int]:
        """Exit status owed to a received signal, or None if none was received.

        SIGPIPE takes precedence over SIGINT.
        """
        if self.sigpipe_received.is_set():
            return EXIT_SIGPIPE
        if self.sigint_received.is_set():
            return EXIT_SIGINT
        return None


# Create a singleton instance for the application
signal_handler = SignalHandler()


def setup_signal_handling() -> None:
    """Install the SIGPIPE and SIGINT handlers of the singleton."""
    signal.signal(signal.SIGPIPE, signal_handler.handle_sigpipe)
    signal.signal(signal.SIGINT, signal_handler.handle_sigint)


def cleanup() -> None:
    """Redirect stdout to the null device after an interruption.

    Registered with atexit to keep the interpreter from reporting a broken stdout
    while shutting down.
    """
    if signal_handler.interrupted():
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())


atexit.register(cleanup)
