"""Frame builder for the inline editor."""

from __future__ import annotations

from ..ansi import ELLIPSIS, clip_ansi_line, display_width, mask_control_chars
from ..editor.buffer import EditBuffer
from ..highlight import highlight_spans, paint_spans
from ..ui_theme import UITheme

# "  NNN │ " before the text plus one cell for an end-of-line cursor;
# text is fitted by display columns, so wide characters count twice.
TEXT_GUTTER = 9
FOOTER_HINTS = "Ctrl+S save · Esc cancel · Ctrl+K del line · ⌥←→ word"


def editor_viewport_rows(terminal_rows: int) -> int:
    """Rows of text shown: terminal height minus chrome, kept within 3..20."""
    return max(min(terminal_rows - 6, 20), 3)


def editor_scroll_top(cursor_row: int, viewport_rows: int) -> int:
    """The viewport ends at or after the cursor row and scrolls only downward past it."""
    return max(0, cursor_row - viewport_rows + 1)


def _fit_line(line: str, max_cols: int) -> str:
    """Shorten ``line`` to ``max_cols`` display columns, ending in an ellipsis.

    The kept text is a prefix of ``line``, so buffer columns before the cut
    still index the same characters.
    """
    if display_width(line) <= max_cols:
        return line
    return clip_ansi_line(line, max(0, max_cols - 1)) + ELLIPSIS


def render_editor_frame(
    buffer: EditBuffer,
    label: str,
    category: str | None,
    theme: UITheme,
    columns: int,
    rows: int,
) -> list[str]:
    viewport_rows = editor_viewport_rows(rows)
    scroll_top = editor_scroll_top(buffer.row, viewport_rows)
    max_cols = max(1, columns - TEXT_GUTTER)

    frame: list[str] = []
    for offset in range(viewport_rows):
        idx = scroll_top + offset
        if idx >= len(buffer.lines):
            frame.append(f"  {theme.gutter_number}    │ ~{theme.reset}")
            continue
        number = f"{theme.gutter_number}{idx + 1:>3}{theme.reset}"
        visible = _fit_line(mask_control_chars(buffer.lines[idx]), max_cols)
        spans = highlight_spans(visible, category)
        if idx == buffer.row:
            cursor = max(0, min(buffer.col, len(visible)))
            text = paint_spans(visible, spans, theme, cursor_col=cursor)
            frame.append(f"  {number} {theme.gutter_bar_active}│{theme.reset} {text}")
        else:
            text = paint_spans(visible, spans, theme)
            frame.append(f"  {number} {theme.gutter_bar}│{theme.reset} {text}")

    footer = (
        f"  {theme.footer_title}─── {label} ───{theme.reset}  "
        f"{theme.footer_hint}{FOOTER_HINTS} · Ln {buffer.row + 1}/{len(buffer.lines)} · "
        f"Col {buffer.col + 1}{theme.reset}"
    )
    frame.append(clip_ansi_line(footer, max(1, columns - 1)) + theme.reset)
    return frame
