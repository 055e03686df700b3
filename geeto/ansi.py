"""ANSI-aware text measurement and label shaping utilities.

Provides stripping, clipping, and ellipsis truncation that preserve escape
sequences. Menu and editor frames rely on these to never wrap a row.
"""

from __future__ import annotations

import re
import unicodedata

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]|\x1b\]8;;[^\x07]*\x07")
_CONTROL_RE = re.compile(r"[\x00-\x08\x0a-\x1f\x7f-\x9f]")
ELLIPSIS = "…"
RESET = "\033[0m"


def strip_ansi(text: str) -> str:
    """Remove SGR/CSI sequences and OSC 8 hyperlinks from ``text``."""
    return ANSI_ESCAPE_RE.sub("", text)


def char_display_width(ch: str) -> int:
    """Return terminal column width for one character.

    Combining marks consume no columns, and East Asian wide/fullwidth
    characters consume two.
    """
    if unicodedata.combining(ch):
        return 0
    if unicodedata.east_asian_width(ch) in {"W", "F"}:
        return 2
    return 1


def display_width(text: str) -> int:
    """Return the number of terminal columns ``text`` occupies once painted."""
    return sum(char_display_width(ch) for ch in strip_ansi(text))


def clip_ansi_line(text: str, max_cols: int) -> str:
    """Trim a styled line to at most ``max_cols`` display columns.

    ANSI escape sequences are preserved verbatim and do not count toward width.
    """
    if max_cols <= 0 or not text:
        return ""

    out: list[str] = []
    col = 0
    i = 0
    n = len(text)
    while i < n:
        if text[i] == "\x1b":
            match = ANSI_ESCAPE_RE.match(text, i)
            if match:
                out.append(match.group(0))
                i = match.end()
                continue
        ch = text[i]
        w = char_display_width(ch)
        if col + w > max_cols:
            break
        out.append(ch)
        col += w
        i += 1

    return "".join(out)


def truncate_plain(text: str, max_cols: int) -> str:
    """Shorten unstyled ``text`` to ``max_cols`` columns, ending in an ellipsis."""
    if display_width(text) <= max_cols:
        return text
    if max_cols <= 1:
        return ELLIPSIS if max_cols == 1 else ""
    return clip_ansi_line(text, max_cols - 1) + ELLIPSIS


def truncate_label(label: str, max_cols: int) -> tuple[str, bool]:
    """Fit a styled label into ``max_cols`` columns.

    Returns ``(text, truncated)``. Labels that already fit are returned with
    their styling intact. Oversized labels lose their styling (the caller
    re-applies the row style) and end with an ellipsis. Very narrow widths
    (three columns or fewer) leave the label untouched.
    """
    plain = strip_ansi(label)
    if display_width(plain) <= max_cols or max_cols <= 3:
        return label, False
    return truncate_plain(plain, max_cols), True


def mask_control_chars(source: str) -> str:
    """Replace terminal control characters one-for-one so columns stay aligned.

    Tabs become a single space and every other C0/DEL/C1 control becomes
    U+FFFD, so a buffer column always maps to exactly one painted cell.
    """
    if _CONTROL_RE.search(source) is None and "\t" not in source:
        return source
    return _CONTROL_RE.sub("\ufffd", source.replace("\t", " "))
