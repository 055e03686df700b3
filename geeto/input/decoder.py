"""Raw byte stream to key event decoding.

A terminal sends a standalone Escape keypress and the first byte of an arrow
or Home/End sequence as the same ``ESC`` byte. The decoder buffers a trailing
``ESC`` (or an incomplete CSI/SS3 sequence) and arms a deadline; bytes that
arrive before the deadline are appended and matched against the sequence
table, and when the deadline passes first a lone ``ESC`` becomes ``ESCAPE``.

The fixed window is an approximation: over a slow link a sequence split by a
gap longer than the window decodes as ``ESCAPE`` followed by printable keys.
"""

from __future__ import annotations

import codecs
import logging
import re

from .keys import (
    BACKSPACE,
    DELETE,
    DOWN,
    ENTER,
    ESCAPE,
    LEFT,
    LINE_END,
    LINE_START,
    RIGHT,
    TAB,
    UP,
    WORD_LEFT,
    WORD_RIGHT,
    Key,
    KeyEvent,
    ctrl,
    printable,
)

logger = logging.getLogger(__name__)

DEFAULT_ESCAPE_TIMEOUT_MS = 50

# Different emulators encode the same logical key differently, so each key
# lists every alternate form we have seen in the wild.
ESCAPE_SEQUENCES: dict[str, KeyEvent] = {
    "\x1b[A": UP,
    "\x1b[B": DOWN,
    "\x1b[C": RIGHT,
    "\x1b[D": LEFT,
    "\x1bOA": UP,
    "\x1bOB": DOWN,
    "\x1bOC": RIGHT,
    "\x1bOD": LEFT,
    # Home: xterm, application mode, vt220/rxvt, rxvt alternate.
    "\x1b[H": LINE_START,
    "\x1bOH": LINE_START,
    "\x1b[1~": LINE_START,
    "\x1b[7~": LINE_START,
    # macOS Cmd+Left.
    "\x1b[1;9D": LINE_START,
    "\x1b[F": LINE_END,
    "\x1bOF": LINE_END,
    "\x1b[4~": LINE_END,
    "\x1b[8~": LINE_END,
    "\x1b[1;9C": LINE_END,
    "\x1b[3~": DELETE,
    # Option+Left (meta and xterm forms), Ctrl+Left on Linux/Windows.
    "\x1bb": WORD_LEFT,
    "\x1b[1;3D": WORD_LEFT,
    "\x1b[1;5D": WORD_LEFT,
    "\x1bf": WORD_RIGHT,
    "\x1b[1;3C": WORD_RIGHT,
    "\x1b[1;5C": WORD_RIGHT,
}

_CSI_RE = re.compile(r"\x1b\[[0-?]*[ -/]*[@-~]")
_CSI_PREFIX_RE = re.compile(r"\x1b\[[0-?]*[ -/]*")
_SS3_RE = re.compile(r"\x1bO[ -~]")


def _unknown(raw: str) -> KeyEvent:
    return KeyEvent(Key.UNKNOWN, raw=raw)


class KeyDecoder:
    """Incremental decoder from raw input chunks to ``KeyEvent`` lists.

    The decoder never reads a clock itself: callers pass ``now`` so the
    debounce logic stays deterministic under test.
    """

    def __init__(self, escape_timeout_ms: int = DEFAULT_ESCAPE_TIMEOUT_MS) -> None:
        self.escape_timeout = max(0, escape_timeout_ms) / 1000.0
        self._utf8 = codecs.getincrementaldecoder("utf-8")(errors="replace")
        self._pending = ""
        self._deadline: float | None = None

    @property
    def pending(self) -> str:
        """Buffered, not yet resolved escape text."""
        return self._pending

    def deadline(self) -> float | None:
        """Monotonic time at which buffered escape text resolves, if any."""
        return self._deadline

    def feed(self, data: bytes, now: float) -> list[KeyEvent]:
        """Decode one chunk of raw bytes received at time ``now``."""
        text = self._pending + self._utf8.decode(data)
        self._pending = ""
        self._deadline = None
        events = self._decode_text(text, now)
        for event in events:
            if event.key is Key.UNKNOWN:
                logger.debug("dropping unrecognized input %r", event.raw)
        return events

    def expire(self, now: float) -> list[KeyEvent]:
        """Resolve buffered escape text once its deadline has passed."""
        if self._deadline is None or now < self._deadline:
            return []
        logger.debug("escape window expired with %r buffered", self._pending)
        return self.flush()

    def flush(self) -> list[KeyEvent]:
        """Resolve buffered escape text immediately (timer fired or input ended)."""
        pending = self._pending
        self._pending = ""
        self._deadline = None
        if not pending:
            return []
        if pending == "\x1b":
            return [ESCAPE]
        return [_unknown(pending)]

    def _decode_text(self, text: str, now: float) -> list[KeyEvent]:
        events: list[KeyEvent] = []
        i = 0
        n = len(text)
        while i < n:
            ch = text[i]
            if ch == "\x1b":
                length, event = self._match_escape(text, i)
                if event is None:
                    self._pending = text[i:]
                    self._deadline = now + self.escape_timeout
                    break
                events.append(event)
                i += length
                continue
            i += 1
            if ch == "\r":
                if i < n and text[i] == "\n":
                    i += 1
                events.append(ENTER)
            elif ch == "\n":
                events.append(ENTER)
            elif ch in ("\x7f", "\x08"):
                events.append(BACKSPACE)
            elif ch == "\t":
                events.append(TAB)
            elif ord(ch) < 0x20:
                events.append(ctrl(ord(ch)))
            elif 0x80 <= ord(ch) <= 0x9F:
                events.append(_unknown(ch))
            else:
                events.append(printable(ch))
        return events

    def _match_escape(self, text: str, start: int) -> tuple[int, KeyEvent | None]:
        """Match an escape-prefixed sequence at ``start``.

        Returns ``(length, event)``; ``event`` is ``None`` when the text ends in
        a prefix that more bytes could still complete.
        """
        rest = text[start:]
        if len(rest) == 1:
            return 0, None

        second = rest[1]
        if second == "\x1b":
            # Meta-prefixed key (Alt+arrow with meta-sends-escape): the whole
            # run is one key, never an Escape followed by the inner key.
            length, inner = self._match_escape(text, start + 1)
            if inner is None:
                return 0, None
            return 1 + length, _unknown(rest[: 1 + length])

        if second == "[":
            match = _CSI_RE.match(text, start)
            if match is not None:
                seq = match.group(0)
                return len(seq), ESCAPE_SEQUENCES.get(seq, _unknown(seq))
            prefix = _CSI_PREFIX_RE.match(text, start)
            if prefix is not None and prefix.end() == len(text):
                return 0, None
            return 2, _unknown(rest[:2])

        if second == "O":
            if len(rest) == 2:
                return 0, None
            match = _SS3_RE.match(text, start)
            if match is not None:
                seq = match.group(0)
                return len(seq), ESCAPE_SEQUENCES.get(seq, _unknown(seq))
            return 2, _unknown(rest[:2])

        seq = rest[:2]
        return 2, ESCAPE_SEQUENCES.get(seq, _unknown(seq))
