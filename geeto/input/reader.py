"""Low-level terminal input reading.

Waits on the input descriptor with ``select`` and hands each chunk to a
``KeyDecoder``. The wait honors the decoder's Escape deadline so a lone
Escape keypress resolves without needing another key.
"""

from __future__ import annotations

import os
import select
import time

from .decoder import KeyDecoder
from .keys import KeyEvent

READ_CHUNK_SIZE = 1024


class InputReader:
    """Turns a raw file descriptor into batches of ``KeyEvent``."""

    def __init__(self, fd: int, decoder: KeyDecoder, clock=time.monotonic) -> None:
        self.fd = fd
        self.decoder = decoder
        self._clock = clock

    def _wait_readable(self, timeout: float | None) -> bool:
        if timeout is not None:
            timeout = max(0.0, timeout)
        ready, _, _ = select.select([self.fd], [], [], timeout)
        return bool(ready)

    def read_events(self, timeout: float | None = None) -> list[KeyEvent] | None:
        """Block until at least one event is decoded, ``timeout`` elapses, or input ends.

        Returns ``None`` on end-of-input; any buffered Escape text is
        discarded then. An empty list means ``timeout`` passed with nothing
        to report.
        """
        give_up_at = None if timeout is None else self._clock() + timeout
        while True:
            now = self._clock()
            deadline = self.decoder.deadline()
            wait_until = deadline
            if give_up_at is not None:
                wait_until = give_up_at if wait_until is None else min(wait_until, give_up_at)
            wait = None if wait_until is None else wait_until - now

            if self._wait_readable(wait):
                data = os.read(self.fd, READ_CHUNK_SIZE)
                if not data:
                    self.decoder.flush()
                    return None
                events = self.decoder.feed(data, self._clock())
            else:
                events = self.decoder.expire(self._clock())

            if events:
                return events
            if give_up_at is not None and self._clock() >= give_up_at and not self.decoder.pending:
                return []
