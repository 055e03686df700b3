"""Incremental frame painting without full-screen clears.

The only state carried between paints is how many lines the previous frame
occupied. Each paint moves the cursor back up over that frame, erases to the
end of the screen, and writes the new frame, all in one ``os.write``.
"""

from __future__ import annotations

import os

# Raw mode turns off output post-processing, so a bare "\n" would not return
# the carriage.
NEWLINE = "\r\n"
ERASE_DOWN = "\x1b[0J"
CLEAR_SCREEN = "\x1b[2J\x1b[H"


def cursor_up(lines: int) -> str:
    return f"\x1b[{lines}A" if lines > 0 else ""


class FrameWriter:
    """Repaints a block of lines in place below the current cursor row."""

    def __init__(self, stdout_fd: int) -> None:
        self.stdout_fd = stdout_fd
        self.previous_line_count = 0

    def compose(self, lines: list[str]) -> str:
        """Return the exact text ``paint`` would write for ``lines``."""
        out: list[str] = []
        if self.previous_line_count:
            out.append(cursor_up(self.previous_line_count))
            out.append("\r")
            out.append(ERASE_DOWN)
        for line in lines:
            out.append(line)
            out.append(NEWLINE)
        return "".join(out)

    def paint(self, lines: list[str]) -> None:
        """Replace the previous frame with ``lines``."""
        payload = self.compose(lines)
        self.previous_line_count = len(lines)
        os.write(self.stdout_fd, payload.encode("utf-8"))

    def clear_screen(self) -> None:
        """Wipe the whole screen and home the cursor.

        Only used for an explicit user request; regular repaints never clear.
        """
        os.write(self.stdout_fd, CLEAR_SCREEN.encode("ascii"))
        self.previous_line_count = 0

    def reset(self) -> None:
        """Forget the previous frame so the next paint starts below it."""
        self.previous_line_count = 0
