"""Multi-line text buffer with a 2D cursor.

The cursor column may sit one past the last character, the canonical
end-of-line position. Every operation keeps ``0 <= row < len(lines)`` and
``0 <= col <= len(lines[row])``.
"""

from __future__ import annotations

import re

_WORD_CHAR_RE = re.compile(r"\w")


def _is_word_char(ch: str) -> bool:
    return _WORD_CHAR_RE.match(ch) is not None


class EditBuffer:
    def __init__(self, text: str = "", *, tab_text: str = "  ") -> None:
        self.lines: list[str] = text.split("\n")
        self.row = 0
        self.col = len(self.lines[0])
        self.tab_text = tab_text

    @property
    def line(self) -> str:
        return self.lines[self.row]

    def text(self) -> str:
        """Buffer content joined by newlines with outer whitespace trimmed."""
        return "\n".join(self.lines).strip()

    def _clamp_col(self) -> None:
        self.col = max(0, min(self.col, len(self.line)))

    # -- movement ------------------------------------------------------------

    def move_up(self) -> None:
        if self.row > 0:
            self.row -= 1
            self._clamp_col()

    def move_down(self) -> None:
        if self.row < len(self.lines) - 1:
            self.row += 1
            self._clamp_col()

    def move_left(self) -> None:
        if self.col > 0:
            self.col -= 1
        elif self.row > 0:
            self.row -= 1
            self.col = len(self.line)

    def move_right(self) -> None:
        if self.col < len(self.line):
            self.col += 1
        elif self.row < len(self.lines) - 1:
            self.row += 1
            self.col = 0

    def word_left(self) -> None:
        """Hop back over separators, then over the word before them."""
        line = self.line
        col = self.col
        while col > 0 and not _is_word_char(line[col - 1]):
            col -= 1
        while col > 0 and _is_word_char(line[col - 1]):
            col -= 1
        self.col = col

    def word_right(self) -> None:
        """Hop over the rest of the current word, then the separators after it."""
        line = self.line
        col = self.col
        while col < len(line) and _is_word_char(line[col]):
            col += 1
        while col < len(line) and not _is_word_char(line[col]):
            col += 1
        self.col = col

    def line_start(self) -> None:
        self.col = 0

    def line_end(self) -> None:
        self.col = len(self.line)

    # -- edits ---------------------------------------------------------------

    def insert(self, text: str) -> None:
        """Insert single-line ``text`` at the cursor."""
        line = self.line
        self.lines[self.row] = line[: self.col] + text + line[self.col :]
        self.col += len(text)

    def indent(self) -> None:
        self.insert(self.tab_text)

    def backspace(self) -> None:
        """Delete left of the cursor; at column 0 join onto the previous line."""
        if self.col > 0:
            line = self.line
            self.lines[self.row] = line[: self.col - 1] + line[self.col :]
            self.col -= 1
        elif self.row > 0:
            previous = self.lines[self.row - 1]
            self.lines[self.row - 1] = previous + self.line
            del self.lines[self.row]
            self.row -= 1
            self.col = len(previous)

    def delete(self) -> None:
        """Delete under the cursor; at end of line pull the next line up."""
        line = self.line
        if self.col < len(line):
            self.lines[self.row] = line[: self.col] + line[self.col + 1 :]
        elif self.row < len(self.lines) - 1:
            self.lines[self.row] = line + self.lines[self.row + 1]
            del self.lines[self.row + 1]

    def split_line(self) -> None:
        line = self.line
        self.lines[self.row] = line[: self.col]
        self.lines.insert(self.row + 1, line[self.col :])
        self.row += 1
        self.col = 0

    def delete_line(self) -> None:
        """Drop the current line, or blank it when it is the only one left."""
        if len(self.lines) > 1:
            del self.lines[self.row]
            if self.row >= len(self.lines):
                self.row = len(self.lines) - 1
            self._clamp_col()
        else:
            self.lines[0] = ""
            self.col = 0
