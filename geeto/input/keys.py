"""Symbolic key events produced by the decoder."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

CTRL_C = 0x03
CTRL_D = 0x04
CTRL_K = 0x0B
CTRL_S = 0x13


class Key(Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    WORD_LEFT = "word_left"
    WORD_RIGHT = "word_right"
    LINE_START = "line_start"
    LINE_END = "line_end"
    ENTER = "enter"
    BACKSPACE = "backspace"
    DELETE = "delete"
    TAB = "tab"
    PRINTABLE = "printable"
    CTRL = "ctrl"
    ESCAPE = "escape"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class KeyEvent:
    """One decoded keypress.

    ``char`` is set for ``PRINTABLE``, ``code`` for ``CTRL``; ``raw`` keeps the
    source text for ``UNKNOWN`` events so they can be logged.
    """

    key: Key
    char: str = ""
    code: int = 0
    raw: str = ""

    @property
    def is_printable(self) -> bool:
        return self.key is Key.PRINTABLE

    def is_ctrl(self, code: int) -> bool:
        return self.key is Key.CTRL and self.code == code

    def is_char(self, *chars: str) -> bool:
        return self.key is Key.PRINTABLE and self.char in chars


def printable(char: str) -> KeyEvent:
    return KeyEvent(Key.PRINTABLE, char=char)


def ctrl(code: int) -> KeyEvent:
    return KeyEvent(Key.CTRL, code=code)


UP = KeyEvent(Key.UP)
DOWN = KeyEvent(Key.DOWN)
LEFT = KeyEvent(Key.LEFT)
RIGHT = KeyEvent(Key.RIGHT)
WORD_LEFT = KeyEvent(Key.WORD_LEFT)
WORD_RIGHT = KeyEvent(Key.WORD_RIGHT)
LINE_START = KeyEvent(Key.LINE_START)
LINE_END = KeyEvent(Key.LINE_END)
ENTER = KeyEvent(Key.ENTER)
BACKSPACE = KeyEvent(Key.BACKSPACE)
DELETE = KeyEvent(Key.DELETE)
TAB = KeyEvent(Key.TAB)
ESCAPE = KeyEvent(Key.ESCAPE)
