"""Terminal ownership for interactive sessions.

Raw input mode and the active key reader are one exclusive resource.
``TerminalController.acquire`` hands out a ``TerminalSession`` handle that
must be released (directly or as a context manager) before another session
can start; releasing restores cooked mode and cursor visibility.
"""

from __future__ import annotations

import logging
import os
import termios
import tty

logger = logging.getLogger(__name__)

HIDE_CURSOR = b"\x1b[?25l"
SHOW_CURSOR = b"\x1b[?25h"


class GeetoError(Exception):
    """Base class for engine errors raised to callers."""


class TerminalUnavailableError(GeetoError):
    """Raised when stdin is not an interactive terminal."""


class SessionBusyError(GeetoError):
    """Raised when a second session is requested while one is still active."""


class TerminalSession:
    """Handle proving ownership of raw mode; consumed by ``release``."""

    def __init__(self, controller: TerminalController) -> None:
        self._controller = controller
        self.active = True

    @property
    def stdin_fd(self) -> int:
        return self._controller.stdin_fd

    @property
    def stdout_fd(self) -> int:
        return self._controller.stdout_fd

    def release(self) -> None:
        """Return the terminal to cooked mode. Safe to call more than once."""
        if not self.active:
            return
        self.active = False
        self._controller._release(self)

    def __enter__(self) -> TerminalSession:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()


class TerminalController:
    """Capture tty state and manage raw-mode sessions on a descriptor pair."""

    def __init__(self, stdin_fd: int, stdout_fd: int) -> None:
        """Capture tty state and bind stdin/stdout file descriptors."""
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        try:
            self._saved_tty_state = termios.tcgetattr(stdin_fd)
        except termios.error as exc:
            raise TerminalUnavailableError("interactive prompts need a terminal on stdin") from exc
        self._session: TerminalSession | None = None

    @property
    def busy(self) -> bool:
        return self._session is not None

    def acquire(self) -> TerminalSession:
        """Enter raw mode with a hidden cursor and return the owning session."""
        if self._session is not None:
            raise SessionBusyError("another interactive prompt is still active")
        tty.setraw(self.stdin_fd, termios.TCSAFLUSH)
        os.write(self.stdout_fd, HIDE_CURSOR)
        self._session = TerminalSession(self)
        logger.debug("terminal acquired (stdin fd %d)", self.stdin_fd)
        return self._session

    def _release(self, session: TerminalSession) -> None:
        if session is not self._session:
            return
        self._session = None
        try:
            os.write(self.stdout_fd, SHOW_CURSOR)
        finally:
            termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_tty_state)
        logger.debug("terminal released (stdin fd %d)", self.stdin_fd)
