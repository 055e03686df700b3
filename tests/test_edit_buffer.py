"""Edit buffer cursor and editing behavior.

Guards the 2D cursor invariants, line joins and splits, and the word-jump
boundary scan used by the inline editor.
"""

from __future__ import annotations

import unittest

from geeto.editor import EditBuffer


class EditBufferMovementTests(unittest.TestCase):
    def test_cursor_starts_at_end_of_first_line(self) -> None:
        buffer = EditBuffer("hello\nworld")
        self.assertEqual((buffer.row, buffer.col), (0, 5))

    def test_word_left_hops_to_previous_word_starts(self) -> None:
        buffer = EditBuffer("foo bar baz")
        buffer.word_left()
        self.assertEqual(buffer.col, 8)
        buffer.word_left()
        self.assertEqual(buffer.col, 4)
        buffer.word_left()
        self.assertEqual(buffer.col, 0)
        buffer.word_left()
        self.assertEqual(buffer.col, 0)

    def test_word_right_hops_past_word_and_separators(self) -> None:
        buffer = EditBuffer("foo bar baz")
        buffer.line_start()
        buffer.word_right()
        self.assertEqual(buffer.col, 4)
        buffer.word_right()
        self.assertEqual(buffer.col, 8)
        buffer.word_right()
        self.assertEqual(buffer.col, 11)

    def test_word_jumps_treat_punctuation_as_separators(self) -> None:
        buffer = EditBuffer("call(arg_one, two)")
        buffer.word_left()
        self.assertEqual(buffer.col, 14)
        buffer.word_left()
        self.assertEqual(buffer.col, 5)

    def test_left_and_right_wrap_across_lines(self) -> None:
        buffer = EditBuffer("ab\ncd")
        buffer.move_right()
        self.assertEqual((buffer.row, buffer.col), (1, 0))
        buffer.move_left()
        self.assertEqual((buffer.row, buffer.col), (0, 2))

    def test_movement_clamps_at_buffer_edges(self) -> None:
        buffer = EditBuffer("ab\ncd")
        buffer.line_start()
        buffer.move_left()
        buffer.move_up()
        self.assertEqual((buffer.row, buffer.col), (0, 0))
        buffer.move_down()
        buffer.line_end()
        buffer.move_right()
        buffer.move_down()
        self.assertEqual((buffer.row, buffer.col), (1, 2))

    def test_vertical_moves_clamp_column_to_shorter_line(self) -> None:
        buffer = EditBuffer("a\nlong line")
        buffer.move_down()
        buffer.line_end()
        buffer.move_up()
        self.assertEqual((buffer.row, buffer.col), (0, 1))


class EditBufferEditingTests(unittest.TestCase):
    def test_typing_into_empty_buffer(self) -> None:
        buffer = EditBuffer()
        for ch in "abc":
            buffer.insert(ch)
        self.assertEqual(buffer.text(), "abc")

    def test_insert_at_cursor(self) -> None:
        buffer = EditBuffer("ac")
        buffer.move_left()
        buffer.insert("b")
        self.assertEqual(buffer.lines, ["abc"])
        self.assertEqual(buffer.col, 2)

    def test_backspace_at_column_zero_joins_previous_line(self) -> None:
        buffer = EditBuffer("ab\ncd")
        buffer.move_down()
        buffer.line_start()
        buffer.backspace()
        self.assertEqual(buffer.lines, ["abcd"])
        self.assertEqual((buffer.row, buffer.col), (0, 2))

    def test_backspace_at_buffer_start_is_noop(self) -> None:
        buffer = EditBuffer("ab")
        buffer.line_start()
        buffer.backspace()
        self.assertEqual(buffer.lines, ["ab"])

    def test_delete_at_end_of_line_joins_next_line(self) -> None:
        buffer = EditBuffer("ab\ncd")
        buffer.delete()
        self.assertEqual(buffer.lines, ["abcd"])
        self.assertEqual((buffer.row, buffer.col), (0, 2))

    def test_delete_removes_character_under_cursor(self) -> None:
        buffer = EditBuffer("abc")
        buffer.line_start()
        buffer.delete()
        self.assertEqual(buffer.lines, ["bc"])

    def test_split_line_at_cursor(self) -> None:
        buffer = EditBuffer("abcd")
        buffer.move_left()
        buffer.move_left()
        buffer.split_line()
        self.assertEqual(buffer.lines, ["ab", "cd"])
        self.assertEqual((buffer.row, buffer.col), (1, 0))

    def test_indent_inserts_tab_text(self) -> None:
        buffer = EditBuffer("x", tab_text="    ")
        buffer.line_start()
        buffer.indent()
        self.assertEqual(buffer.lines, ["    x"])
        self.assertEqual(buffer.col, 4)

    def test_delete_line_removes_line_or_clears_last_one(self) -> None:
        buffer = EditBuffer("one\ntwo\nthree")
        buffer.move_down()
        buffer.delete_line()
        self.assertEqual(buffer.lines, ["one", "three"])
        self.assertEqual(buffer.row, 1)

        buffer.delete_line()
        self.assertEqual(buffer.lines, ["one"])
        self.assertEqual(buffer.row, 0)
        self.assertLessEqual(buffer.col, len(buffer.line))

        buffer.delete_line()
        self.assertEqual(buffer.lines, [""])
        self.assertEqual(buffer.col, 0)

    def test_text_joins_lines_and_trims(self) -> None:
        buffer = EditBuffer("  subject\n\nbody  \n\n")
        self.assertEqual(buffer.text(), "subject\n\nbody")


if __name__ == "__main__":
    unittest.main()
