"""Unit tests for FileSystemStorage.

Exercises the walker against real directories created in a temporary
location.
"""

import os
import sys
import tempfile
import unittest
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from treewalker import (
    FileSystemInfo,
    FileSystemStorage,
    Walker,
    create_storage,
)
from treewalker.testing import RecordingCallback


def create_test_tree(base_dir: Path) -> None:
    """Create a test directory structure.

    Structure:
    base_dir/
    ├── file1.txt
    ├── dir1/
    │   ├── file3.txt
    │   └── subdir1/
    │       └── file5.txt
    ├── dir2/
    │   └── file6.txt
    └── file2.py
    """
    (base_dir / "dir1").mkdir()
    (base_dir / "dir1" / "subdir1").mkdir()
    (base_dir / "dir2").mkdir()

    (base_dir / "file1.txt").write_text("content1")
    (base_dir / "file2.py").write_text("# python file")
    (base_dir / "dir1" / "file3.txt").write_text("content3")
    (base_dir / "dir1" / "subdir1" / "file5.txt").write_text("content5")
    (base_dir / "dir2" / "file6.txt").write_text("content6")


class TestFileSystemStorage(unittest.TestCase):

    def setUp(self):
        self.test_dir = tempfile.mkdtemp()
        self.test_path = Path(self.test_dir)
        create_test_tree(self.test_path)

    def tearDown(self):
        import shutil
        shutil.rmtree(self.test_dir, ignore_errors=True)

    def relative(self, paths):
        return [os.path.relpath(p, self.test_dir) for p in paths]

    def test_absolute_paths_keep_root_prefix(self):
        recorder = RecordingCallback()
        Walker(FileSystemStorage()).walk(self.test_dir, recorder)

        self.assertTrue(all(p.startswith(self.test_dir) for p in recorder.paths()))
        self.assertEqual(self.relative(recorder.paths()), [
            ".",
            "dir1",
            os.path.join("dir1", "subdir1"),
            os.path.join("dir1", "subdir1", "file5.txt"),
            os.path.join("dir1", "file3.txt"),
            "dir2",
            os.path.join("dir2", "file6.txt"),
            "file1.txt",
            "file2.py",
        ])

    def test_base_relative_paths(self):
        storage = FileSystemStorage(base=self.test_path)
        recorder = RecordingCallback()

        Walker(storage).walk("dir1", recorder)

        self.assertEqual(recorder.paths(), [
            "dir1",
            os.path.join("dir1", "subdir1"),
            os.path.join("dir1", "subdir1", "file5.txt"),
            os.path.join("dir1", "file3.txt"),
        ])

    def test_absolute_path_rejected_with_base(self):
        storage = FileSystemStorage(base=self.test_path)

        with self.assertRaises(ValueError):
            storage.stat(self.test_dir)
        with self.assertRaises(ValueError):
            storage.list_children(os.path.join(self.test_dir, "dir1"))

    def test_absolute_root_reported_as_stat_error(self):
        storage = FileSystemStorage(base=self.test_path)
        recorder = RecordingCallback()

        Walker(storage).walk(self.test_dir, recorder)

        self.assertEqual(recorder.paths(), [self.test_dir])
        self.assertIsInstance(recorder.results[0].error, ValueError)

    def test_stat_metadata(self):
        storage = FileSystemStorage(base=self.test_path)

        info = storage.stat("file1.txt")
        self.assertIsInstance(info, FileSystemInfo)
        self.assertEqual(info.name(), "file1.txt")
        self.assertFalse(info.is_dir())
        self.assertEqual(info.size(), len("content1"))

        metadata = info.metadata()
        self.assertTrue(metadata['is_file'])
        self.assertIn('mtime_dt', metadata)

        self.assertTrue(storage.stat("dir1").is_dir())

    def test_root_names(self):
        storage = FileSystemStorage(base=self.test_path)
        self.assertEqual(storage.stat(".").name(), ".")
        self.assertEqual(storage.stat("dir1/").name(), "dir1")

    def test_list_children_sorted(self):
        storage = FileSystemStorage(base=self.test_path)
        names = [child.name() for child in storage.list_children(".")]
        self.assertEqual(names, ["dir1", "dir2", "file1.txt", "file2.py"])

        kinds = {child.name(): child.is_dir() for child in storage.list_children(".")}
        self.assertTrue(kinds["dir1"])
        self.assertFalse(kinds["file2.py"])

    def test_child_size_on_demand(self):
        storage = FileSystemStorage(base=self.test_path)
        child = next(c for c in storage.list_children("dir2") if c.name() == "file6.txt")
        self.assertEqual(child.size(), len("content6"))

    def test_missing_path(self):
        recorder = RecordingCallback(continue_on_stat_error=True)
        Walker(FileSystemStorage(base=self.test_path)).walk("missing", recorder)

        self.assertEqual(recorder.paths(), ["missing"])
        self.assertIsInstance(recorder.results[0].error, FileNotFoundError)

    def test_walk_or_fail_missing_root(self):
        walker = Walker(FileSystemStorage(base=self.test_path))
        with self.assertRaises(FileNotFoundError):
            walker.walk_or_fail("missing", lambda p, i: True)

    def test_empty_directory(self):
        (self.test_path / "empty").mkdir()
        recorder = RecordingCallback()
        Walker(FileSystemStorage(base=self.test_path)).walk("empty", recorder)
        self.assertEqual(recorder.paths(), ["empty"])

    @unittest.skipIf(sys.platform == "win32", "Unix permissions required")
    @unittest.skipIf(hasattr(os, "geteuid") and os.geteuid() == 0, "root ignores permissions")
    def test_unreadable_directory_reported_twice(self):
        locked = self.test_path / "dir2"
        os.chmod(locked, 0o000)
        try:
            recorder = RecordingCallback(continue_on_list_error=True)
            Walker(FileSystemStorage(base=self.test_path)).walk(".", recorder)
        finally:
            os.chmod(locked, 0o755)

        locked_records = [r for r in recorder.results if r.path == os.path.join(".", "dir2")]
        self.assertEqual(len(locked_records), 2)
        self.assertIsNone(locked_records[0].error)
        self.assertIsInstance(locked_records[1].error, PermissionError)
        self.assertNotIn(os.path.join(".", "dir2", "file6.txt"), recorder.paths())
        self.assertIn(os.path.join(".", "file2.py"), recorder.paths())

    @unittest.skipUnless(hasattr(os, "symlink"), "symlinks not supported")
    def test_symlink_follow_setting(self):
        link = self.test_path / "link_to_dir1"
        try:
            os.symlink(self.test_path / "dir1", link)
        except (OSError, NotImplementedError):
            self.skipTest("cannot create symlinks")

        following = FileSystemStorage(base=self.test_path)
        self.assertTrue(following.stat("link_to_dir1").is_dir())

        not_following = FileSystemStorage(base=self.test_path, follow_symlinks=False)
        self.assertFalse(not_following.stat("link_to_dir1").is_dir())
        self.assertTrue(not_following.stat("link_to_dir1").metadata()['is_link'])


class TestCreateStorage(unittest.TestCase):

    def test_directory_gives_filesystem_storage(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            storage = create_storage(tmpdir)
            self.assertIsInstance(storage, FileSystemStorage)
            self.assertEqual(storage.base, Path(tmpdir))


if __name__ == "__main__":
    unittest.main()
