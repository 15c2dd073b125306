#!/usr/bin/env python3
"""
test_integration.py - Integration tests for photosync

Creates real test data and runs the command line end-to-end to verify
argument handling, the summary output, and repeated syncs.
"""

import datetime
import os
import shutil
import subprocess
import sys
import tempfile
import unittest
from pathlib import Path


SCRIPT = Path(__file__).parent / "photosync.py"


def _has_birthtime(path: Path) -> bool:
    """Creation dates only follow os.utime() where there is no birth time."""
    return hasattr(os.stat(path), "st_birthtime")


class TestCommandLine(unittest.TestCase):
    """Run photosync.py as a subprocess against temporary trees."""

    def setUp(self):
        self.test_root = Path(tempfile.mkdtemp(prefix="photosync_test_"))
        self.addCleanup(shutil.rmtree, self.test_root)

        self.source_dir = self.test_root / "source"
        self.dest_dir = self.test_root / "target"
        self.source_dir.mkdir()

    def create_test_image(self, path: Path, content: str = None, size_kb: int = 1, when=None):
        """Create a test file with approximate size and, optionally, a fixed mtime."""
        path.parent.mkdir(parents=True, exist_ok=True)

        if content is None:
            content = f"Test image data for {path.name}"

        content_bytes = content.encode() * (size_kb * 1024 // len(content.encode()) + 1)
        path.write_bytes(content_bytes[: size_kb * 1024])

        if when is not None:
            ts = when.timestamp()
            os.utime(path, (ts, ts))
        return path

    def run_sync(self, args: list):
        cmd = [sys.executable, str(SCRIPT)] + args
        return subprocess.run(cmd, capture_output=True, text=True, timeout=60)

    def synced_files(self):
        return sorted(
            p.relative_to(self.dest_dir).as_posix()
            for p in self.dest_dir.rglob("*")
            if p.is_file() and p.name != "events.log"
        )

    def test_no_arguments_prints_usage(self):
        result = self.run_sync([])
        self.assertEqual(result.returncode, 2)
        self.assertIn("usage:", result.stderr)

    def test_one_argument_prints_usage_and_touches_nothing(self):
        result = self.run_sync([str(self.source_dir)])
        self.assertNotEqual(result.returncode, 0)
        self.assertIn("usage:", result.stderr)
        self.assertFalse(self.dest_dir.exists())

    def test_too_many_arguments(self):
        result = self.run_sync([str(self.source_dir), str(self.dest_dir), "extra"])
        self.assertEqual(result.returncode, 2)
        self.assertFalse(self.dest_dir.exists())

    def test_help_command(self):
        result = self.run_sync(["-h"])
        self.assertEqual(result.returncode, 0)
        self.assertIn("usage:", result.stdout)

    def test_examples_command(self):
        result = self.run_sync(["--examples"])
        self.assertEqual(result.returncode, 0)
        self.assertIn("USAGE EXAMPLES", result.stdout)

    def test_version_command(self):
        result = self.run_sync(["--version"])
        self.assertEqual(result.returncode, 0)
        self.assertIn("photosync", result.stdout)

    def test_missing_source_directory(self):
        result = self.run_sync([str(self.test_root / "missing"), str(self.dest_dir)])
        self.assertEqual(result.returncode, 1)
        self.assertIn("Source directory does not exist", result.stderr)
        self.assertFalse(self.dest_dir.exists())

    def test_destination_inside_source(self):
        inner = self.source_dir / "organized"
        result = self.run_sync([str(self.source_dir), str(inner)])
        self.assertEqual(result.returncode, 1)
        self.assertFalse(inner.exists())

    def test_basic_copy_and_summary(self):
        june_1 = datetime.datetime(2021, 6, 1, 10, 0)
        self.create_test_image(self.source_dir / "photo1.jpg", "Photo 1 content", when=june_1)
        self.create_test_image(self.source_dir / "sub" / "photo2.jpg", "Photo 2 content", when=june_1)
        self.create_test_image(self.source_dir / ".hidden.jpg", "Hidden")
        (self.source_dir / "empty.jpg").write_bytes(b"")

        result = self.run_sync([str(self.source_dir), str(self.dest_dir)])

        self.assertEqual(result.returncode, 0, result.stderr)
        self.assertIn("4 files checked.", result.stdout)
        self.assertIn("2 files copied.", result.stdout)
        self.assertIn("Finished sync in:", result.stdout)
        self.assertTrue((self.dest_dir / "events.log").exists())
        self.assertEqual(len(self.synced_files()), 2)

        if not _has_birthtime(self.source_dir / "photo1.jpg"):
            self.assertEqual(
                self.synced_files(),
                [
                    "2021/06-June/01-Tuesday/photo1.jpg",
                    "2021/06-June/01-Tuesday/photo2.jpg",
                ],
            )

    def test_second_run_copies_nothing(self):
        self.create_test_image(self.source_dir / "a.jpg", "A content")
        self.create_test_image(self.source_dir / "trip" / "b.jpg", "B content", size_kb=2)

        first = self.run_sync([str(self.source_dir), str(self.dest_dir)])
        second = self.run_sync([str(self.source_dir), str(self.dest_dir)])

        self.assertIn("2 files copied.", first.stdout)
        self.assertIn("2 files checked.", second.stdout)
        self.assertIn("0 files copied.", second.stdout)
        self.assertEqual(len(self.synced_files()), 2)

    def test_name_clash_with_different_file_is_renamed(self):
        self.create_test_image(self.source_dir / "one" / "IMG_0001.jpg", "first", size_kb=1)
        self.create_test_image(self.source_dir / "two" / "IMG_0001.jpg", "second", size_kb=2)
        for path in self.source_dir.rglob("*.jpg"):
            ts = datetime.datetime(2021, 6, 1, 10, 0).timestamp()
            os.utime(path, (ts, ts))

        result = self.run_sync([str(self.source_dir), str(self.dest_dir)])

        self.assertIn("2 files copied.", result.stdout)
        names = sorted(Path(p).name for p in self.synced_files())
        if not _has_birthtime(self.source_dir / "one" / "IMG_0001.jpg"):
            self.assertEqual(names, ["IMG_0001.jpg", "IMG_0001_1.jpg"])

    def test_old_dates_use_source_folder(self):
        old = datetime.datetime(1995, 7, 7, 12, 0)
        path = self.create_test_image(self.source_dir / "Scans" / "scan01.jpg", when=old)
        if _has_birthtime(path):
            self.skipTest("file system keeps its own creation time")

        result = self.run_sync([str(self.source_dir), str(self.dest_dir)])

        self.assertEqual(result.returncode, 0, result.stderr)
        self.assertEqual(self.synced_files(), ["Scans/scan01.jpg"])

    def test_failed_file_is_reported_and_run_continues(self):
        old = datetime.datetime(1995, 7, 7, 12, 0)
        bad = self.create_test_image(self.source_dir / "Blocked" / "bad.jpg", when=old)
        self.create_test_image(self.source_dir / "Fine" / "good.jpg", when=old)
        if _has_birthtime(bad):
            self.skipTest("file system keeps its own creation time")

        # A plain file where the destination folder should go
        self.dest_dir.mkdir()
        (self.dest_dir / "Blocked").write_text("not a folder")

        result = self.run_sync([str(self.source_dir), str(self.dest_dir)])

        self.assertEqual(result.returncode, 0, result.stderr)
        self.assertIn("Unable to copy", result.stderr)
        self.assertIn("bad.jpg", result.stderr)
        self.assertIn("2 files checked.", result.stdout)
        self.assertIn("1 files copied.", result.stdout)
        self.assertEqual(self.synced_files(), ["Blocked", "Fine/good.jpg"])

    def test_dry_run_copies_nothing(self):
        self.create_test_image(self.source_dir / "test.jpg", "test image content")

        result = self.run_sync(["-d", str(self.source_dir), str(self.dest_dir)])

        self.assertEqual(result.returncode, 0, result.stderr)
        self.assertIn("1 files copied.", result.stdout)
        self.assertEqual(self.synced_files(), [])
        self.assertIn("[DRY RUN]", (self.dest_dir / "events.log").read_text(encoding="utf-8"))


if __name__ == "__main__":
    unittest.main(verbosity=2)
