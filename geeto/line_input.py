"""Simple non-modal prompts read through the same decoder as the menus.

Single-line prompts submit on Enter; multi-line prompts treat Enter as a
newline and submit on Ctrl-D. Ctrl-D on a single-line prompt, like
end-of-input, submits whatever was typed.
"""

from __future__ import annotations

from dataclasses import dataclass

from .ansi import ELLIPSIS, char_display_width, clip_ansi_line, display_width, truncate_plain
from .input.keys import CTRL_C, CTRL_D, Key, KeyEvent
from .menu.options import Quit
from .ui_theme import UITheme


@dataclass(frozen=True)
class LineDone:
    text: str


class LineInputController:
    def __init__(self, *, multiline: bool = False) -> None:
        self.multiline = multiline
        self.text = ""
        self.changed = False

    def handle_key(self, event: KeyEvent) -> LineDone | Quit | None:
        self.changed = False
        if event.is_ctrl(CTRL_C):
            return Quit()
        if event.is_ctrl(CTRL_D):
            return LineDone(self.text)
        if event.key is Key.ENTER:
            if not self.multiline:
                return LineDone(self.text)
            self.text += "\n"
        elif event.key is Key.BACKSPACE:
            if not self.text:
                return None
            self.text = self.text[:-1]
        elif event.key is Key.TAB and self.multiline:
            self.text += "\t"
        elif event.is_printable:
            self.text += event.char
        else:
            return None
        self.changed = True
        return None


def _fit_tail(prefix: str, text: str, max_cols: int) -> str:
    """Fit ``prefix + text`` into ``max_cols``, dropping the start of ``text`` first."""
    if display_width(prefix) + display_width(text) <= max_cols:
        return prefix + text
    if display_width(prefix) > max_cols // 2:
        prefix = clip_ansi_line(prefix, max_cols // 2)
    room = max_cols - display_width(prefix) - 1
    tail: list[str] = []
    used = 0
    for ch in reversed(text):
        width = char_display_width(ch)
        if used + width > room:
            break
        tail.append(ch)
        used += width
    return prefix + ELLIPSIS + "".join(reversed(tail))


def render_line_prompt(
    question: str,
    controller: LineInputController,
    theme: UITheme,
    columns: int = 80,
) -> list[str]:
    """Echo typed text after the question, with a reverse-video cell as the cursor.

    Rows never reach the last column; the cursor row keeps the end of the
    typed text visible and elides its start.
    """
    limit = max(2, columns - 1)
    cursor = f"{theme.reverse} {theme.reverse_off}"
    typed = controller.text.replace("\t", " ").split("\n")
    rows = [(question, typed[0])] + [("", line) for line in typed[1:]]
    lines = [truncate_plain(prefix + text, limit) for prefix, text in rows[:-1]]
    prefix, text = rows[-1]
    lines.append(_fit_tail(prefix, text, limit - 1) + cursor)
    if controller.multiline:
        hint = clip_ansi_line(f"{theme.hint}  (Enter new line, Ctrl+D finish)", limit)
        lines.append(f"{hint}{theme.reset}")
    return lines
