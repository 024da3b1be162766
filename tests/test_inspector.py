"""Tests for the inspector module."""

import os
import shutil
import tempfile
import unittest
from unittest import mock

from rotatedlog.inspector import count_by_category, read_file, search_files


class _InspectorTestCase(unittest.TestCase):
    def setUp(self):
        self.tmpdir = tempfile.mkdtemp()
        self.base = os.path.join(self.tmpdir, "app.log")

    def tearDown(self):
        shutil.rmtree(self.tmpdir)

    def _touch(self, name, content=""):
        path = os.path.join(self.tmpdir, name)
        with open(path, "w") as f:
            f.write(content)
        return path


class TestReadFile(_InspectorTestCase):
    def test_read_plain_text(self):
        path = self._touch("app_2025-01-15-12.log", "INFO 2025-01-15 12:00:00 hi\n")
        self.assertEqual(read_file(path), "INFO 2025-01-15 12:00:00 hi\n")

    def test_file_not_found(self):
        with self.assertRaises(FileNotFoundError):
            read_file(os.path.join(self.tmpdir, "nonexistent.log"))


class TestSearchFiles(_InspectorTestCase):
    def test_search_across_rotated_files(self):
        self._touch("app_2025-01-15-12.log",
                    "INFO 2025-01-15 12:00:00 all good\nERROR 2025-01-15 12:30:00 broke\n")
        self._touch("app_2025-01-15-13.log", "ERROR 2025-01-15 13:00:00 still broken\n")
        self._touch("unrelated.log", "ERROR not ours\n")

        results = search_files(self.base, "ERROR")

        self.assertEqual([(os.path.basename(p), n) for p, n, _ in results], [
            ("app_2025-01-15-12.log", 2),
            ("app_2025-01-15-13.log", 1),
        ])
        self.assertEqual(results[1][2], "ERROR 2025-01-15 13:00:00 still broken")

    def test_search_no_results(self):
        self._touch("app_2025-01-15-12.log", "INFO 2025-01-15 12:00:00 all good\n")
        self.assertEqual(search_files(self.base, "FATAL"), [])


class TestCountByCategory(_InspectorTestCase):
    def test_counts(self):
        self._touch("app_2025-01-15-12.log",
                    "INFO 2025-01-15 12:00:00 a\nINFO 2025-01-15 12:00:01 b\n\n")
        self._touch("app_2025-01-15-13.log", "ERROR 2025-01-15 13:00:00 c\n")

        self.assertEqual(count_by_category(self.base), {"INFO": 2, "ERROR": 1})

    def test_no_files(self):
        self.assertEqual(count_by_category(self.base), {})

    def test_skips_file_removed_after_listing(self):
        kept = self._touch("app_2025-01-15-12.log", "WARN 2025-01-15 12:00:00 a\n")
        gone = os.path.join(self.tmpdir, "app_2025-01-15-11.log")

        with mock.patch("rotatedlog.inspector.list_rotated_files", return_value=[gone, kept]):
            self.assertEqual(count_by_category(self.base), {"WARN": 1})


if __name__ == "__main__":
    unittest.main()
