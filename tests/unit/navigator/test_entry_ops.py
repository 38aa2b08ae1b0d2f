"""Tests for folder creation, rename and recursive delete."""

from __future__ import annotations

import tempfile
import unittest
from pathlib import Path
from unittest import mock

from fsnav import Navigator
from fsnav.entry_ops import (
    create_folder,
    delete_path,
    is_valid_entry_name,
    normalize_entry_name,
    rename_path,
)
from fsnav.errors import InvalidArgumentError, InvalidStateError, NavigatorIOError


class EntryNameTests(unittest.TestCase):
    def test_normalize_trims_whitespace(self) -> None:
        self.assertEqual(normalize_entry_name("  notes \t\r\n"), "notes")

    def test_forbidden_characters_are_rejected(self) -> None:
        for name in ("", ".", "..", "a/b", "a\\b", "c:", "what?", 'q"', "<x>", "a|b", "*"):
            with self.subTest(name=name):
                self.assertFalse(is_valid_entry_name(name))
        self.assertTrue(is_valid_entry_name("report 2024.txt"))


class EntryOpsTests(unittest.TestCase):
    def test_create_folder_reports_existing_target(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "new"
            create_folder(str(target))
            self.assertTrue(target.is_dir())
            with self.assertRaises(InvalidStateError):
                create_folder(str(target))

    def test_rename_does_not_clobber(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            (root / "a.txt").write_text("a", encoding="utf-8")
            (root / "b.txt").write_text("b", encoding="utf-8")

            with self.assertRaises(InvalidStateError):
                rename_path(str(root / "a.txt"), str(root / "b.txt"))
            self.assertEqual((root / "b.txt").read_text(encoding="utf-8"), "b")

            rename_path(str(root / "a.txt"), str(root / "c.txt"))
            self.assertEqual((root / "c.txt").read_text(encoding="utf-8"), "a")

    def test_rename_missing_source_is_io_error(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            with self.assertRaises(NavigatorIOError):
                rename_path(str(Path(tmp) / "nope"), str(Path(tmp) / "other"))

    def test_delete_is_recursive_and_tolerates_missing_paths(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            tree = Path(tmp) / "tree"
            (tree / "sub" / "deeper").mkdir(parents=True)
            (tree / "sub" / "deeper" / "leaf.txt").write_text("x", encoding="utf-8")
            (tree / "top.txt").write_text("y", encoding="utf-8")

            delete_path(str(tree))
            self.assertFalse(tree.exists())
            delete_path(str(tree))

    def test_delete_failure_is_io_error(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "file.txt"
            target.write_text("x", encoding="utf-8")
            with mock.patch("fsnav.entry_ops.os.remove", side_effect=PermissionError("read-only card")):
                with self.assertRaises(NavigatorIOError):
                    delete_path(str(target))


class NavigatorEntryOpsTests(unittest.TestCase):
    def test_create_rename_delete_refresh_the_listing(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            (root / "file.txt").write_text("x", encoding="utf-8")
            navigator = Navigator()
            navigator.init(str(root))

            path = navigator.create_folder("  photos ")
            self.assertEqual(path, f"{root}/photos")
            self.assertEqual([entry.name for entry in navigator.entries()], ["photos", "file.txt"])

            navigator.rename(1, "notes.txt")
            self.assertEqual([entry.name for entry in navigator.entries()], ["photos", "notes.txt"])

            navigator.delete(0)
            self.assertEqual([entry.name for entry in navigator.entries()], ["notes.txt"])
            self.assertFalse((root / "photos").exists())

    def test_invalid_names_are_rejected_before_touching_disk(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp).resolve()
            navigator = Navigator()
            navigator.init(str(root))
            with self.assertRaises(InvalidArgumentError):
                navigator.create_folder("bad:name")
            with self.assertRaises(InvalidArgumentError):
                navigator.create_folder("   ")
            self.assertEqual(list(root.iterdir()), [])


if __name__ == "__main__":
    unittest.main()
