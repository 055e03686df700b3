"""Single-threaded event loop shared by every interactive call.

The loop is idle between input chunks. Each chunk is decoded, every event is
dispatched to the controller, and the frame is repainted at most once per
chunk. The loop ends when the controller returns an outcome or input ends.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, Protocol

from ..input.keys import KeyEvent
from ..input.reader import InputReader

logger = logging.getLogger(__name__)


class KeyController(Protocol):
    """Anything that consumes key events and reports whether it changed."""

    changed: bool

    def handle_key(self, event: KeyEvent) -> Any | None: ...


class EndOfInput:
    """Outcome used when the input descriptor reaches end-of-file."""

    def __repr__(self) -> str:
        return "END_OF_INPUT"


END_OF_INPUT = EndOfInput()


def run_session(
    reader: InputReader,
    controller: KeyController,
    repaint: Callable[[], None],
) -> Any:
    """Paint once, then feed input to ``controller`` until it resolves.

    Returns the controller's outcome, or ``END_OF_INPUT``.
    """
    repaint()
    while True:
        events = reader.read_events()
        if events is None:
            logger.debug("input ended before the session resolved")
            return END_OF_INPUT

        dirty = False
        for event in events:
            outcome = controller.handle_key(event)
            dirty = dirty or controller.changed
            if outcome is not None:
                if dirty:
                    repaint()
                logger.debug("session resolved with %r", outcome)
                return outcome
        if dirty:
            repaint()
