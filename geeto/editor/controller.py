"""Key bindings for the modal inline editor.

Ctrl-S saves, Escape (or Ctrl-C) cancels and discards every edit, Ctrl-K
deletes the current line, and the remaining keys map onto ``EditBuffer``.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..input.keys import CTRL_C, CTRL_K, CTRL_S, Key, KeyEvent
from .buffer import EditBuffer


@dataclass(frozen=True)
class EditorDone:
    """Terminal outcome of an edit session; ``text`` is ``None`` on cancel."""

    text: str | None


class EditorController:
    def __init__(self, buffer: EditBuffer) -> None:
        self.buffer = buffer
        self.changed = False
        self._bindings = {
            Key.UP: buffer.move_up,
            Key.DOWN: buffer.move_down,
            Key.LEFT: buffer.move_left,
            Key.RIGHT: buffer.move_right,
            Key.WORD_LEFT: buffer.word_left,
            Key.WORD_RIGHT: buffer.word_right,
            Key.LINE_START: buffer.line_start,
            Key.LINE_END: buffer.line_end,
            Key.ENTER: buffer.split_line,
            Key.BACKSPACE: buffer.backspace,
            Key.DELETE: buffer.delete,
            Key.TAB: buffer.indent,
        }

    def handle_key(self, event: KeyEvent) -> EditorDone | None:
        self.changed = False
        if event.is_ctrl(CTRL_S):
            return EditorDone(self.buffer.text())
        if event.key is Key.ESCAPE or event.is_ctrl(CTRL_C):
            return EditorDone(None)
        if event.is_ctrl(CTRL_K):
            self.buffer.delete_line()
        elif event.is_printable:
            self.buffer.insert(event.char)
        elif event.key in self._bindings:
            self._bindings[event.key]()
        else:
            return None
        self.changed = True
        return None
