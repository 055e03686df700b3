"""Menu option model and the outcomes a menu can resolve to."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Option:
    """One selectable row.

    ``children`` lists the values of the options this row groups; such a row
    is a group header whose own value never appears in a multi-select result.
    ``disabled`` leaf rows render as non-interactive separators.
    """

    label: str
    value: Any
    disabled: bool = False
    children: tuple[Any, ...] | None = None

    @property
    def is_group(self) -> bool:
        return bool(self.children)

    @property
    def is_selectable_leaf(self) -> bool:
        return not self.disabled and not self.children

    @property
    def is_separator(self) -> bool:
        return self.disabled and not self.children


@dataclass(frozen=True)
class Selected:
    """Menu confirmed; ``value`` is one value or a list for multi-select."""

    value: Any


@dataclass(frozen=True)
class Quit:
    """User asked to leave the whole program (``q`` or Ctrl-C)."""


def coerce_option(raw: Option | dict | tuple | str) -> Option:
    """Accept ``Option``, ``{"label": ..}`` mappings, ``(label, value)`` pairs or bare labels."""
    if isinstance(raw, Option):
        return raw
    if isinstance(raw, dict):
        children = raw.get("children")
        return Option(
            label=str(raw.get("label", raw.get("value", ""))),
            value=raw.get("value", raw.get("label")),
            disabled=bool(raw.get("disabled", False)),
            children=tuple(children) if children else None,
        )
    if isinstance(raw, tuple) and len(raw) == 2:
        return Option(label=str(raw[0]), value=raw[1])
    return Option(label=str(raw), value=raw)


def coerce_options(raw_options: Iterable[Option | dict | tuple | str]) -> list[Option]:
    return [coerce_option(raw) for raw in raw_options]


def with_cancel(options: Sequence[Option]) -> list[Option]:
    """Append a standard ``Cancel`` row."""
    return [*options, Option("Cancel", "cancel")]


def with_back(options: Sequence[Option], back_label: str = "Back") -> list[Option]:
    """Append a standard back-navigation row."""
    return [*options, Option(back_label, "back")]


def yes_no_options() -> list[Option]:
    return [Option("Yes", "yes"), Option("No", "no")]


def retry_cancel_options() -> list[Option]:
    return [Option("Retry", "retry"), Option("Cancel", "cancel")]
