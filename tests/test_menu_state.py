"""Selection state machine transition tests.

Covers cursor wrapping, live search, toggling, tri-state groups, range mode,
and how each mode reacts to Enter, Escape, and the quit keys.
"""

from __future__ import annotations

import random
import unittest

from geeto.input import CTRL_C
from geeto.input import keys
from geeto.menu import GroupState, Mode, Option, Quit, Selected, SelectionState


def _options(*labels: str) -> list[Option]:
    return [Option(label, label.lower()) for label in labels]


def _type(state: SelectionState, text: str):
    outcome = None
    for ch in text:
        outcome = state.handle_key(keys.printable(ch))
    return outcome


class CursorTests(unittest.TestCase):
    def test_up_at_top_wraps_to_bottom_and_down_wraps_back(self) -> None:
        state = SelectionState(_options("A", "B", "C", "D", "E"))
        state.handle_key(keys.UP)
        self.assertEqual(state.cursor, 4)
        state.handle_key(keys.DOWN)
        self.assertEqual(state.cursor, 0)

    def test_random_navigation_keeps_cursor_in_bounds(self) -> None:
        rng = random.Random(7)
        for size in (1, 2, 9, 40):
            state = SelectionState(_options(*[f"Item {i}" for i in range(size)]), viewport_height=5)
            for _ in range(300):
                state.handle_key(rng.choice([keys.UP, keys.DOWN, keys.printable("j"), keys.printable("k")]))
                self.assertGreaterEqual(state.cursor, 0)
                self.assertLess(state.cursor, size)
                start, end = state.visible_range()
                self.assertTrue(start <= state.cursor < end)

    def test_viewport_scrolls_to_keep_cursor_visible(self) -> None:
        state = SelectionState(_options(*[f"Item {i}" for i in range(30)]), viewport_height=15)
        for _ in range(20):
            state.handle_key(keys.DOWN)
        self.assertEqual(state.cursor, 20)
        self.assertEqual(state.visible_range(), (6, 21))

    def test_navigation_skips_separators(self) -> None:
        items = [Option("A", "a"), Option("── tools ──", None, disabled=True), Option("B", "b")]
        state = SelectionState(items)
        state.handle_key(keys.DOWN)
        self.assertEqual(state.current().value, "b")
        state.handle_key(keys.UP)
        self.assertEqual(state.current().value, "a")

    def test_leading_separator_is_skipped_initially(self) -> None:
        items = [Option("header", None, disabled=True), Option("A", "a")]
        self.assertEqual(SelectionState(items).cursor, 1)


class SingleSelectTests(unittest.TestCase):
    def test_enter_selects_value_under_cursor(self) -> None:
        state = SelectionState(_options("One", "Two"))
        state.handle_key(keys.DOWN)
        self.assertEqual(state.handle_key(keys.ENTER), Selected("two"))

    def test_q_and_ctrl_c_quit(self) -> None:
        self.assertEqual(SelectionState(_options("A")).handle_key(keys.printable("q")), Quit())
        self.assertEqual(SelectionState(_options("A")).handle_key(keys.printable("Q")), Quit())
        self.assertEqual(SelectionState(_options("A")).handle_key(keys.ctrl(CTRL_C)), Quit())

    def test_ctrl_c_quits_from_search_mode(self) -> None:
        state = SelectionState(_options("A"))
        state.handle_key(keys.printable("/"))
        self.assertEqual(state.handle_key(keys.ctrl(CTRL_C)), Quit())

    def test_q_in_search_mode_is_query_text(self) -> None:
        state = SelectionState(_options("Quartz", "Amber"))
        state.handle_key(keys.printable("/"))
        self.assertIsNone(state.handle_key(keys.printable("q")))
        self.assertEqual(state.search_query, "q")
        self.assertEqual([option.value for option in state.filtered], ["quartz"])

    def test_enter_with_no_matches_is_ignored(self) -> None:
        state = SelectionState(_options("A", "B"))
        _type(state, "/zzz")
        self.assertEqual(state.filtered, [])
        self.assertIsNone(state.handle_key(keys.ENTER))

    def test_unknown_key_is_ignored_without_repaint(self) -> None:
        state = SelectionState(_options("A"))
        self.assertIsNone(state.handle_key(keys.KeyEvent(keys.Key.UNKNOWN, raw="\x1b[Z")))
        self.assertFalse(state.changed)

    def test_clear_key_requests_screen_clear(self) -> None:
        state = SelectionState(_options("A"))
        state.handle_key(keys.printable("c"))
        self.assertTrue(state.clear_requested)
        self.assertTrue(state.changed)


class SearchTests(unittest.TestCase):
    def test_filter_is_case_insensitive_substring(self) -> None:
        state = SelectionState(_options("Apple", "banana", "Cherry", "apricot"))
        _type(state, "/AP")
        self.assertIs(state.mode, Mode.SEARCH)
        self.assertEqual([option.label for option in state.filtered], ["Apple", "apricot"])
        for option in state.filtered:
            self.assertIn("ap", option.label.casefold())
        self.assertLessEqual(len(state.filtered), len(state.items))

    def test_filter_ignores_ansi_styling_in_labels(self) -> None:
        state = SelectionState([Option("\x1b[1mBold\x1b[0m name", "b"), Option("other", "o")])
        _type(state, "/bold")
        self.assertEqual([option.value for option in state.filtered], ["b"])

    def test_escape_discards_query_and_restores_items(self) -> None:
        state = SelectionState(_options("Apple", "banana"))
        _type(state, "/ban")
        state.handle_key(keys.ESCAPE)
        self.assertIs(state.mode, Mode.NORMAL)
        self.assertEqual(state.search_query, "")
        self.assertEqual(len(state.filtered), 2)

    def test_backspace_widens_filter(self) -> None:
        state = SelectionState(_options("Apple", "Apricot"))
        _type(state, "/apr")
        self.assertEqual(len(state.filtered), 1)
        state.handle_key(keys.BACKSPACE)
        self.assertEqual(state.search_query, "ap")
        self.assertEqual(len(state.filtered), 2)

    def test_filter_change_resets_cursor(self) -> None:
        state = SelectionState(_options("ab", "ac", "ad"))
        state.handle_key(keys.DOWN)
        state.handle_key(keys.DOWN)
        _type(state, "/a")
        self.assertEqual(state.cursor, 0)
        self.assertEqual(state.scroll_offset, 0)

    def test_enter_in_search_selects_filtered_row(self) -> None:
        state = SelectionState(_options("Apple", "banana"))
        _type(state, "/nan")
        self.assertEqual(state.handle_key(keys.ENTER), Selected("banana"))


class MultiSelectTests(unittest.TestCase):
    def test_space_toggle_is_an_involution(self) -> None:
        state = SelectionState(_options("A", "B"), multi=True)
        before = dict(state.checked)
        state.handle_key(keys.printable(" "))
        self.assertTrue(state.is_checked(state.current()))
        state.handle_key(keys.printable(" "))
        self.assertEqual(state.checked, before)

    def test_enter_returns_checked_values_in_check_order(self) -> None:
        state = SelectionState(_options("A", "B", "C"), multi=True)
        state.handle_key(keys.DOWN)
        state.handle_key(keys.DOWN)
        state.handle_key(keys.printable(" "))
        state.handle_key(keys.DOWN)
        state.handle_key(keys.printable(" "))
        self.assertEqual(state.handle_key(keys.ENTER), Selected(["c", "a"]))

    def test_enter_with_nothing_checked_returns_empty_list(self) -> None:
        state = SelectionState(_options("A"), multi=True)
        self.assertEqual(state.handle_key(keys.ENTER), Selected([]))

    def test_check_all_and_clear_all(self) -> None:
        items = [Option("A", "a"), Option("sep", None, disabled=True), Option("B", "b")]
        state = SelectionState(items, multi=True)
        state.handle_key(keys.printable("a"))
        self.assertEqual(state.result(), ["a", "b"])
        self.assertEqual(state.checked_leaf_count, 2)
        self.assertEqual(state.total_selectable, 2)
        state.handle_key(keys.printable("n"))
        self.assertEqual(state.result(), [])

    def test_space_in_search_mode_toggles_instead_of_typing(self) -> None:
        state = SelectionState(_options("Apple", "banana"), multi=True)
        _type(state, "/ban ")
        self.assertEqual(state.search_query, "ban")
        self.assertEqual(state.result(), ["banana"])

    def test_checks_survive_filter_changes(self) -> None:
        state = SelectionState(_options("Apple", "banana"), multi=True)
        state.handle_key(keys.printable(" "))
        _type(state, "/ban")
        state.handle_key(keys.ESCAPE)
        self.assertEqual(state.result(), ["apple"])


class GroupTests(unittest.TestCase):
    def setUp(self) -> None:
        self.items = [
            Option("Backend", "backend", children=("api", "db")),
            Option("API", "api"),
            Option("DB", "db"),
            Option("Docs", "docs"),
        ]

    def test_group_state_is_derived_from_children(self) -> None:
        state = SelectionState(self.items, multi=True)
        header = self.items[0]
        self.assertIs(state.group_state(header), GroupState.NONE)
        state.toggle(self.items[1])
        self.assertIs(state.group_state(header), GroupState.SOME)
        state.toggle(self.items[2])
        self.assertIs(state.group_state(header), GroupState.ALL)

    def test_header_toggle_checks_all_then_unchecks_all(self) -> None:
        state = SelectionState(self.items, multi=True)
        state.toggle(self.items[1])
        state.handle_key(keys.printable(" "))
        self.assertEqual(state.result(), ["api", "db"])
        state.handle_key(keys.printable(" "))
        self.assertEqual(state.result(), [])

    def test_header_value_never_appears_in_result(self) -> None:
        state = SelectionState(self.items, multi=True)
        state.handle_key(keys.printable("a"))
        state.handle_key(keys.printable(" "))
        state.handle_key(keys.printable(" "))
        outcome = state.handle_key(keys.ENTER)
        self.assertNotIn("backend", outcome.value)
        self.assertEqual(sorted(outcome.value), ["api", "db", "docs"])

    def test_children_naming_missing_rows_are_ignored(self) -> None:
        items = [
            Option("Backend", "backend", children=("api", "ghost", "sep")),
            Option("API", "api"),
            Option("──", "sep", disabled=True),
        ]
        state = SelectionState(items, multi=True)
        state.handle_key(keys.printable(" "))
        self.assertEqual(list(state.checked), ["api"])
        self.assertIs(state.group_state(items[0]), GroupState.ALL)

        state.clear_all()
        for ch in "#1":
            state.handle_key(keys.printable(ch))
        state.handle_key(keys.ENTER)
        self.assertEqual(state.handle_key(keys.ENTER), Selected(["api"]))


class RangeModeTests(unittest.TestCase):
    def _state(self) -> SelectionState:
        return SelectionState(_options(*[f"Item{i}" for i in range(1, 11)]), multi=True)

    def test_range_adds_one_based_positions(self) -> None:
        state = self._state()
        _type(state, "#2-4")
        self.assertIs(state.mode, Mode.RANGE)
        self.assertIsNone(state.handle_key(keys.ENTER))
        self.assertIs(state.mode, Mode.NORMAL)
        self.assertEqual(state.result(), ["item2", "item3", "item4"])

    def test_out_of_bounds_and_repeated_numbers(self) -> None:
        state = self._state()
        _type(state, "#11")
        state.handle_key(keys.ENTER)
        self.assertEqual(state.result(), [])
        _type(state, "#1 1 1")
        state.handle_key(keys.ENTER)
        self.assertEqual(state.result(), ["item1"])

    def test_range_only_adds(self) -> None:
        state = self._state()
        state.handle_key(keys.printable(" "))
        _type(state, "#3")
        state.handle_key(keys.ENTER)
        self.assertEqual(state.result(), ["item1", "item3"])

    def test_escape_abandons_range_entry(self) -> None:
        state = self._state()
        _type(state, "#1-3")
        state.handle_key(keys.ESCAPE)
        self.assertIs(state.mode, Mode.NORMAL)
        self.assertEqual(state.range_query, "")
        self.assertEqual(state.result(), [])

    def test_range_mode_accepts_only_range_characters(self) -> None:
        state = self._state()
        _type(state, "#1x, 3-q4")
        self.assertEqual(state.range_query, "1, 3-4")
        state.handle_key(keys.BACKSPACE)
        self.assertEqual(state.range_query, "1, 3-")

    def test_range_over_group_header_checks_children(self) -> None:
        items = [
            Option("Backend", "backend", children=("api", "db")),
            Option("API", "api"),
            Option("DB", "db"),
        ]
        state = SelectionState(items, multi=True)
        _type(state, "#1")
        state.handle_key(keys.ENTER)
        self.assertEqual(state.result(), ["api", "db"])

    def test_hash_is_plain_text_in_single_select(self) -> None:
        state = SelectionState(_options("A"))
        state.handle_key(keys.printable("#"))
        self.assertIs(state.mode, Mode.NORMAL)


if __name__ == "__main__":
    unittest.main()
