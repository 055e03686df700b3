"""Single- and multi-select menu state machine.

``SelectionState`` owns the cursor, scroll window, search/range modes, and
the checked set. It is pure: ``handle_key`` consumes a ``KeyEvent`` and
either keeps going (``None``) or returns a terminal outcome. Rendering reads
the state afterwards.
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum
from typing import Any

from ..ansi import strip_ansi
from ..input.keys import CTRL_C, Key, KeyEvent
from .options import Option, Quit, Selected
from .ranges import parse_range_expression

DEFAULT_VIEWPORT_HEIGHT = 15
RANGE_CHARS = frozenset("0123456789 -,")


class Mode(Enum):
    NORMAL = "normal"
    SEARCH = "search"
    RANGE = "range"


class GroupState(Enum):
    ALL = "all"
    SOME = "some"
    NONE = "none"


class SelectionState:
    """Menu state for one interactive call."""

    def __init__(
        self,
        items: Sequence[Option],
        *,
        multi: bool = False,
        viewport_height: int = DEFAULT_VIEWPORT_HEIGHT,
    ) -> None:
        self.items: tuple[Option, ...] = tuple(items)
        self.multi = multi
        self.viewport_height = max(1, viewport_height)
        self.filtered: list[Option] = list(self.items)
        self.cursor = 0
        self.scroll_offset = 0
        self.mode = Mode.NORMAL
        self.search_query = ""
        self.range_query = ""
        # dict keys double as an insertion-ordered set.
        self.checked: dict[Any, None] = {}
        self.changed = False
        self.clear_requested = False
        self._group_values = {option.value for option in self.items if option.is_group}
        # Group children may only name rows of this menu.
        self._leaf_values = {option.value for option in self.items if option.is_selectable_leaf}
        self._skip_separators_forward()
        self._ensure_visible()

    @property
    def total_selectable(self) -> int:
        return sum(1 for option in self.items if option.is_selectable_leaf)

    @property
    def checked_leaf_count(self) -> int:
        return sum(1 for value in self.checked if value not in self._group_values)

    def current(self) -> Option | None:
        if not self.filtered:
            return None
        return self.filtered[self.cursor]

    def is_checked(self, option: Option) -> bool:
        return option.value in self.checked

    def children_of(self, option: Option) -> tuple[Any, ...]:
        """Child values of a header that name selectable rows of this menu."""
        return tuple(value for value in option.children or () if value in self._leaf_values)

    def group_state(self, option: Option) -> GroupState:
        """Derive a header's tri-state purely from its children."""
        children = self.children_of(option)
        count = sum(1 for value in children if value in self.checked)
        if children and count == len(children):
            return GroupState.ALL
        if count:
            return GroupState.SOME
        return GroupState.NONE

    def result(self) -> Any:
        """Checked leaf values (multi) or the value under the cursor (single)."""
        if self.multi:
            return [value for value in self.checked if value not in self._group_values]
        option = self.current()
        return None if option is None else option.value

    # -- cursor and viewport -------------------------------------------------

    def move(self, delta: int) -> None:
        """Move the cursor by ``delta`` rows, wrapping and skipping separators."""
        count = len(self.filtered)
        if not count:
            return
        for _ in range(count):
            self.cursor = (self.cursor + delta) % count
            if not self.filtered[self.cursor].is_separator:
                break
        self._ensure_visible()

    def _skip_separators_forward(self) -> None:
        count = len(self.filtered)
        for step in range(count):
            index = (self.cursor + step) % count
            if not self.filtered[index].is_separator:
                self.cursor = index
                return

    def _ensure_visible(self) -> None:
        if self.cursor < self.scroll_offset:
            self.scroll_offset = self.cursor
        elif self.cursor >= self.scroll_offset + self.viewport_height:
            self.scroll_offset = self.cursor - self.viewport_height + 1

    def visible_range(self) -> tuple[int, int]:
        """Return ``(start, end)`` of the rows inside the viewport."""
        self._ensure_visible()
        start = self.scroll_offset
        end = min(start + self.viewport_height, len(self.filtered))
        return start, end

    # -- search --------------------------------------------------------------

    def apply_filter(self) -> None:
        """Recompute ``filtered`` from ``search_query`` and reset the cursor."""
        query = self.search_query.casefold()
        if query:
            self.filtered = [option for option in self.items if query in strip_ansi(option.label).casefold()]
        else:
            self.filtered = list(self.items)
        self.cursor = 0
        self.scroll_offset = 0
        self._skip_separators_forward()

    def _leave_search(self) -> None:
        self.mode = Mode.NORMAL
        self.search_query = ""
        self.apply_filter()

    # -- checked set ---------------------------------------------------------

    def toggle(self, option: Option) -> None:
        """Flip a leaf, or set a whole group to all-or-none."""
        if option.is_group:
            children = self.children_of(option)
            if all(value in self.checked for value in children):
                for value in children:
                    self.checked.pop(value, None)
            else:
                for value in children:
                    self.checked[value] = None
            return
        if option.disabled:
            return
        if option.value in self.checked:
            del self.checked[option.value]
        else:
            self.checked[option.value] = None

    def check_all(self) -> None:
        for option in self.items:
            if option.is_selectable_leaf:
                self.checked[option.value] = None

    def clear_all(self) -> None:
        self.checked.clear()

    def apply_range(self) -> None:
        """Add every option named by ``range_query``; never removes checks."""
        for index in parse_range_expression(self.range_query, len(self.items)):
            option = self.items[index]
            if option.is_group:
                for value in self.children_of(option):
                    self.checked[value] = None
            elif option.is_selectable_leaf:
                self.checked[option.value] = None

    # -- key dispatch --------------------------------------------------------

    def handle_key(self, event: KeyEvent) -> Selected | Quit | None:
        """Apply one key event; return an outcome once the menu resolves."""
        self.changed = False
        if event.is_ctrl(CTRL_C):
            return Quit()
        if event.key is Key.UNKNOWN:
            return None
        if self.mode is Mode.RANGE:
            return self._handle_range_key(event)
        if self.mode is Mode.SEARCH:
            return self._handle_search_key(event)
        return self._handle_normal_key(event)

    def _resolve(self) -> Selected | None:
        if self.multi:
            return Selected(self.result())
        option = self.current()
        if option is None or option.disabled:
            return None
        return Selected(option.value)

    def _handle_range_key(self, event: KeyEvent) -> None:
        if event.key is Key.ESCAPE:
            self.mode = Mode.NORMAL
            self.range_query = ""
        elif event.key is Key.ENTER:
            self.apply_range()
            self.mode = Mode.NORMAL
            self.range_query = ""
        elif event.key is Key.BACKSPACE:
            self.range_query = self.range_query[:-1]
        elif event.is_printable and event.char in RANGE_CHARS:
            self.range_query += event.char
        else:
            return None
        self.changed = True
        return None

    def _handle_search_key(self, event: KeyEvent) -> Selected | None:
        if event.key is Key.ENTER:
            return self._resolve()
        if event.key is Key.ESCAPE:
            self._leave_search()
        elif event.key is Key.BACKSPACE:
            self.search_query = self.search_query[:-1]
            self.apply_filter()
        elif event.key is Key.UP:
            self.move(-1)
        elif event.key is Key.DOWN:
            self.move(1)
        elif self.multi and event.is_char(" "):
            option = self.current()
            if option is not None:
                self.toggle(option)
        elif event.is_printable:
            self.search_query += event.char
            self.apply_filter()
        else:
            return None
        self.changed = True
        return None

    def _handle_normal_key(self, event: KeyEvent) -> Selected | Quit | None:
        if event.key is Key.ENTER:
            return self._resolve()
        if event.is_char("q", "Q"):
            return Quit()
        if event.key is Key.UP or event.is_char("k"):
            self.move(-1)
        elif event.key is Key.DOWN or event.is_char("j"):
            self.move(1)
        elif event.is_char("/"):
            self.mode = Mode.SEARCH
        elif event.is_char("c", "C"):
            self.clear_requested = True
        elif self.multi and event.is_char("#"):
            self.mode = Mode.RANGE
            self.range_query = ""
        elif self.multi and event.is_char(" "):
            option = self.current()
            if option is not None:
                self.toggle(option)
        elif self.multi and event.is_char("a", "A"):
            self.check_all()
        elif self.multi and event.is_char("n", "N"):
            self.clear_all()
        else:
            return None
        self.changed = True
        return None
