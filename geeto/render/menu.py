"""Frame builders for single- and multi-select menus.

Frames are plain lists of styled lines; ``FrameWriter`` paints them. Every
row is fitted to the terminal width so a frame never wraps, which keeps the
line count used for the next repaint exact.
"""

from __future__ import annotations

from ..ansi import clip_ansi_line, truncate_label
from ..menu.options import Option
from ..menu.state import GroupState, Mode, SelectionState
from ..ui_theme import UITheme

POINTER = "❯"
BOX_CHECKED = "◉"
BOX_PARTIAL = "◐"
BOX_UNCHECKED = "○"
# "❯ " plus one spare column.
SINGLE_GUTTER = 3
# "❯ ◉ " plus spare columns.
MULTI_GUTTER = 6

SINGLE_HINT = "  (↑↓/jk arrows, / search, Enter select, 'c' clear, 'q' quit)"
MULTI_HINT = "  (↑↓/jk Space toggle, 'a' all, 'n' none, '#' range, / search, Enter confirm, 'q' quit)"
SEARCH_HINT_SINGLE = "  (Esc cancel search, Enter select)"
SEARCH_HINT_MULTI = "  (Esc cancel search, Space toggle, Enter confirm)"
RANGE_HINT = '  (Type numbers: "1 3 5" or "1-10", Enter apply, Esc cancel)'


def _pointer(active: bool, theme: UITheme) -> str:
    return f"{theme.pointer}{POINTER}{theme.reset}" if active else " "


def _styled_label(option: Option, active: bool, columns: int, gutter: int, theme: UITheme) -> str:
    text, truncated = truncate_label(option.label, columns - gutter)
    style = theme.row_active if active else theme.row_muted
    if truncated or style:
        return f"{style}{text}{theme.reset}"
    return text


def _box(state: GroupState | bool, theme: UITheme) -> str:
    if state is GroupState.ALL or state is True:
        return f"{theme.box_checked}{BOX_CHECKED}{theme.reset}"
    if state is GroupState.SOME:
        return f"{theme.box_partial}{BOX_PARTIAL}{theme.reset}"
    return f"{theme.box_unchecked}{BOX_UNCHECKED}{theme.reset}"


def render_single_row(option: Option, active: bool, columns: int, theme: UITheme) -> str:
    return f"{_pointer(active, theme)} {_styled_label(option, active, columns, SINGLE_GUTTER, theme)}"


def render_multi_row(state: SelectionState, option: Option, active: bool, columns: int, theme: UITheme) -> str:
    if option.is_group:
        text, _ = truncate_label(option.label, columns - MULTI_GUTTER)
        style = theme.row_active if active else theme.row_heading
        label = f"{style}{text}{theme.reset}"
        return f"{_pointer(active, theme)} {_box(state.group_state(option), theme)} {label}"
    if option.disabled:
        text, _ = truncate_label(option.label, columns - 2)
        return f"  {theme.row_heading}{text}{theme.reset}"
    label = _styled_label(option, active, columns, MULTI_GUTTER, theme)
    return f"{_pointer(active, theme)} {_box(state.is_checked(option), theme)} {label}"


def _fit_row(line: str, columns: int, theme: UITheme) -> str:
    if "\x1b" not in line:
        return clip_ansi_line(line, columns - 1)
    return clip_ansi_line(line, columns - 1) + theme.reset


def _hint_text(state: SelectionState) -> str:
    if state.mode is Mode.RANGE:
        return RANGE_HINT
    if state.mode is Mode.SEARCH:
        return SEARCH_HINT_MULTI if state.multi else SEARCH_HINT_SINGLE
    return MULTI_HINT if state.multi else SINGLE_HINT


def render_menu_frame(state: SelectionState, prompt: str, theme: UITheme, columns: int) -> list[str]:
    """Build the full frame for ``state``; the cursor row is always inside it."""
    columns = max(8, columns)
    lines = [f"{theme.prompt_marker}?{theme.reset} {prompt}"]
    if state.multi:
        lines.append(
            f"{theme.hint}  Selected: {theme.counter}{state.checked_leaf_count}"
            f"{theme.hint}/{state.total_selectable}{theme.reset}"
        )

    start, end = state.visible_range()
    if start > 0:
        lines.append(f"{theme.hint}  ↑ {start} more above{theme.reset}")
    lines.append("")

    if not state.filtered:
        lines.append(f"{theme.hint}  No matches{theme.reset}")
    for idx in range(start, end):
        option = state.filtered[idx]
        active = idx == state.cursor
        if state.multi:
            lines.append(render_multi_row(state, option, active, columns, theme))
        else:
            lines.append(render_single_row(option, active, columns, theme))

    below = len(state.filtered) - end
    if below > 0:
        lines.append("")
        lines.append(f"{theme.hint}  ↓ {below} more below{theme.reset}")

    lines.append("")
    lines.append(f"{theme.hint}{_hint_text(state)}{theme.reset}")
    if state.mode is Mode.SEARCH:
        lines.append(f"{theme.query_prompt}/ search:{theme.reset} {state.search_query}")
    elif state.mode is Mode.RANGE:
        lines.append(f"{theme.query_prompt}# range:{theme.reset} {state.range_query}")
    return [_fit_row(line, columns, theme) for line in lines]
