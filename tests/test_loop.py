"""Session loop tests over real pipes.

Bytes are written to a pipe before the loop starts, so each test sees the
same chunking a fast typist or a paste would produce.
"""

from __future__ import annotations

import os
import unittest
from unittest import mock

from geeto.editor import EditBuffer, EditorController, EditorDone
from geeto.input import InputReader, KeyDecoder
from geeto.menu import Option, Selected, SelectionState
from geeto.runtime import END_OF_INPUT, run_session


class RunSessionTests(unittest.TestCase):
    def setUp(self) -> None:
        self.read_fd, self.write_fd = os.pipe()
        self.addCleanup(self._close)

    def _close(self) -> None:
        os.close(self.read_fd)
        if self.write_fd is not None:
            os.close(self.write_fd)

    def _close_input(self) -> None:
        os.close(self.write_fd)
        self.write_fd = None

    def _reader(self) -> InputReader:
        return InputReader(self.read_fd, KeyDecoder(20))

    def test_save_after_typing_returns_text_and_repaints_once_per_chunk(self) -> None:
        os.write(self.write_fd, b"abc\x13")
        controller = EditorController(EditBuffer())
        repaint = mock.Mock()

        outcome = run_session(self._reader(), controller, repaint)

        self.assertEqual(outcome, EditorDone("abc"))
        self.assertEqual(repaint.call_count, 2)

    def test_standalone_escape_cancels_editor(self) -> None:
        os.write(self.write_fd, b"abc")
        controller = EditorController(EditBuffer())
        reader = self._reader()
        repaint = mock.Mock()

        def type_escape_after_first_paint() -> None:
            if repaint.call_count == 2:
                os.write(self.write_fd, b"\x1b")

        repaint.side_effect = type_escape_after_first_paint
        outcome = run_session(reader, controller, repaint)

        self.assertEqual(outcome, EditorDone(None))
        self.assertEqual(controller.buffer.text(), "abc")

    def test_escape_sequence_moves_menu_cursor_instead_of_cancelling(self) -> None:
        os.write(self.write_fd, b"\x1b[A\r")
        state = SelectionState([Option("A", "a"), Option("B", "b"), Option("C", "c")])

        outcome = run_session(self._reader(), state, mock.Mock())

        self.assertEqual(outcome, Selected("c"))

    def test_end_of_input_ends_session(self) -> None:
        os.write(self.write_fd, b"j")
        self._close_input()
        state = SelectionState([Option("A", "a"), Option("B", "b")])
        repaint = mock.Mock()

        outcome = run_session(self._reader(), state, repaint)

        self.assertIs(outcome, END_OF_INPUT)
        self.assertEqual(state.cursor, 1)
        self.assertEqual(repaint.call_count, 2)

    def test_ignored_keys_do_not_repaint(self) -> None:
        os.write(self.write_fd, b"\x1b[Z")
        self._close_input()
        repaint = mock.Mock()

        run_session(self._reader(), SelectionState([Option("A", "a")]), repaint)

        repaint.assert_called_once()


if __name__ == "__main__":
    unittest.main()
