"""Numeric range expressions typed in multi-select range mode."""

from __future__ import annotations

import re

_SEPARATOR_RE = re.compile(r"[\s,]+")


def parse_range_expression(text: str, count: int) -> list[int]:
    """Resolve ``"1-5 8, 10-12"`` into zero-based indices below ``count``.

    Tokens are one-based, as displayed. A token is dropped whole when it is
    malformed, reversed, or reaches outside ``1..count``. The result keeps
    first-seen order without duplicates.
    """
    indices: list[int] = []
    seen: set[int] = set()

    def add(index: int) -> None:
        if index not in seen:
            seen.add(index)
            indices.append(index)

    for token in _SEPARATOR_RE.split(text.strip()):
        if not token:
            continue
        if "-" in token:
            bounds = token.split("-")
            if len(bounds) != 2 or not bounds[0].isdigit() or not bounds[1].isdigit():
                continue
            first, last = int(bounds[0]), int(bounds[1])
            if first < 1 or last > count:
                continue
            for number in range(first, last + 1):
                add(number - 1)
            continue
        if not token.isdigit():
            continue
        number = int(token)
        if 1 <= number <= count:
            add(number - 1)
    return indices
