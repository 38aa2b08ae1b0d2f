"""Tests for logging level resolution and handler setup."""

from __future__ import annotations

import logging
import tempfile
import unittest
from logging.handlers import RotatingFileHandler
from pathlib import Path

from fsnav.log import resolve_level, setup_logging


class LoggingSetupTests(unittest.TestCase):
    def setUp(self) -> None:
        root = logging.getLogger()
        saved_handlers = list(root.handlers)
        saved_level = root.level

        def restore() -> None:
            for handler in list(root.handlers):
                root.removeHandler(handler)
                handler.close()
            for handler in saved_handlers:
                root.addHandler(handler)
            root.setLevel(saved_level)

        self.addCleanup(restore)

    def test_resolve_level_defaults_to_warning(self) -> None:
        self.assertEqual(resolve_level("debug"), logging.DEBUG)
        self.assertEqual(resolve_level(" Info "), logging.INFO)
        self.assertEqual(resolve_level("nonsense"), logging.WARNING)
        self.assertEqual(resolve_level(None), logging.WARNING)

    def test_repeated_setup_replaces_handlers_and_writes_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            log_file = Path(tmp) / "logs" / "fsnav.log"
            setup_logging("INFO", log_file)
            setup_logging("INFO", log_file)

            root = logging.getLogger()
            self.assertEqual(len(root.handlers), 2)
            self.assertEqual(sum(isinstance(handler, RotatingFileHandler) for handler in root.handlers), 1)

            logging.getLogger("fsnav.test").info("card mounted")
            for handler in root.handlers:
                handler.flush()
            self.assertIn("INFO | fsnav.test | card mounted", log_file.read_text(encoding="utf-8"))


if __name__ == "__main__":
    unittest.main()
