from __future__ import annotations

import logging
import tempfile
import unittest
from pathlib import Path
from unittest import mock

from geeto.logs import configure_logging
from geeto.ui_theme import DEFAULT_THEME, PLAIN_THEME, available_theme_names, normalize_theme_name, resolve_theme


class ConfigureLoggingTests(unittest.TestCase):
    def tearDown(self) -> None:
        logger = logging.getLogger("geeto")
        for handler in list(logger.handlers):
            if isinstance(handler, logging.FileHandler):
                logger.removeHandler(handler)
                handler.close()
        logger.setLevel(logging.NOTSET)

    def test_records_go_to_the_log_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "logs" / "geeto.log"
            self.assertEqual(configure_logging("debug", target), target)

            logging.getLogger("geeto.input.decoder").debug("dropping unrecognized input %r", "\x1b[Z")
            for handler in logging.getLogger("geeto").handlers:
                handler.flush()

            content = target.read_text(encoding="utf-8")
            self.assertIn("DEBUG", content)
            self.assertIn("geeto.input.decoder", content)
            self.tearDown()

    def test_reconfiguring_replaces_file_handler(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            configure_logging("INFO", Path(tmp) / "a.log")
            configure_logging("INFO", Path(tmp) / "b.log")
            file_handlers = [
                handler for handler in logging.getLogger("geeto").handlers if isinstance(handler, logging.FileHandler)
            ]
            self.assertEqual(len(file_handlers), 1)
            self.assertTrue(file_handlers[0].baseFilename.endswith("b.log"))
            self.tearDown()

    def test_unknown_level_falls_back_to_warning(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            configure_logging("chatty", Path(tmp) / "x.log")
            self.assertEqual(logging.getLogger("geeto").level, logging.WARNING)
            self.tearDown()

    def test_unwritable_log_directory_disables_logging(self) -> None:
        with mock.patch("geeto.logs.Path.mkdir", side_effect=OSError("read-only")):
            self.assertIsNone(configure_logging("INFO", Path("/nonexistent/geeto.log")))


class ThemeTests(unittest.TestCase):
    def test_resolve_theme_by_name(self) -> None:
        self.assertEqual(resolve_theme("ocean").name, "ocean")
        self.assertIs(resolve_theme("nope"), DEFAULT_THEME)
        self.assertIs(resolve_theme(None), DEFAULT_THEME)

    def test_plain_theme_for_no_color_or_name(self) -> None:
        self.assertIs(resolve_theme("ocean", no_color=True), PLAIN_THEME)
        self.assertIs(resolve_theme(" Plain "), PLAIN_THEME)
        self.assertNotIn("plain", available_theme_names())

    def test_normalize_theme_name(self) -> None:
        self.assertEqual(normalize_theme_name(" OCEAN "), "ocean")
        self.assertEqual(normalize_theme_name(""), "default")

    def test_syntax_style_lookup(self) -> None:
        self.assertEqual(DEFAULT_THEME.syntax_style("keyword"), DEFAULT_THEME.syntax_keyword)
        self.assertEqual(DEFAULT_THEME.syntax_style("missing"), "")


if __name__ == "__main__":
    unittest.main()
