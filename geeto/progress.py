"""Single-line progress bar for long, non-interactive operations."""

from __future__ import annotations

import sys
from typing import TextIO


class ProgressBar:
    """Redraws ``title: [████░░░░] n/total (p%)`` in place with a carriage return."""

    def __init__(self, total: int, title: str = "Progress", width: int = 40, stream: TextIO | None = None) -> None:
        self.total = max(0, total)
        self.current = 0
        self.width = max(1, width)
        self.title = title
        self.stream = stream if stream is not None else sys.stdout

    def update(self, current: int) -> None:
        self.current = max(0, min(current, self.total))
        self._render()

    def increment(self, amount: int = 1) -> None:
        self.update(self.current + amount)

    def complete(self) -> None:
        self.current = self.total
        self._render()
        self.stream.write("\n")
        self.stream.flush()

    def line(self) -> str:
        if self.total > 0:
            ratio = self.current / self.total
        else:
            ratio = 1.0
        filled = round(ratio * self.width)
        bar = "█" * filled + "░" * (self.width - filled)
        return f"{self.title}: [{bar}] {self.current}/{self.total} ({round(ratio * 100)}%)"

    def _render(self) -> None:
        self.stream.write(f"\r{self.line()}")
        self.stream.flush()
