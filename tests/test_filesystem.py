"""Tests for filesystem abstraction."""

from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from treepath.exceptions import FileSystemError
from treepath.filesystem import RealFileSystem
from treepath.paths import FilePath
from treepath.protocols import FileSystem


class TestRealFileSystem:
    """Tests for RealFileSystem implementation."""

    def test_satisfies_protocol(self) -> None:
        assert isinstance(RealFileSystem(), FileSystem)

    def test_exists_true(self, tmp_path: Path) -> None:
        """Test exists returns True for existing path."""
        fs = RealFileSystem()
        test_file = tmp_path / "exists.txt"
        test_file.touch()

        assert fs.exists(test_file) is True

    def test_exists_false(self, tmp_path: Path) -> None:
        """Test exists returns False for non-existent path."""
        fs = RealFileSystem()

        assert fs.exists(tmp_path / "missing.txt") is False

    def test_accepts_file_path(self, tmp_path: Path) -> None:
        """FilePath values are accepted anywhere a path is expected."""
        fs = RealFileSystem()
        (tmp_path / "f.txt").touch()

        assert fs.exists(FilePath.parse(tmp_path / "f.txt")) is True

    def test_is_dir(self, tmp_path: Path) -> None:
        fs = RealFileSystem()
        (tmp_path / "subdir").mkdir()
        (tmp_path / "file.txt").touch()

        assert fs.is_dir(tmp_path / "subdir") is True
        assert fs.is_dir(tmp_path / "file.txt") is False
        assert fs.is_dir(tmp_path / "missing") is False

    def test_is_symlink(self, tmp_path: Path) -> None:
        fs = RealFileSystem()
        (tmp_path / "target").touch()
        os.symlink(tmp_path / "target", tmp_path / "link")

        assert fs.is_symlink(tmp_path / "link") is True
        assert fs.is_symlink(tmp_path / "target") is False

    def test_list_dir(self, tmp_path: Path) -> None:
        fs = RealFileSystem()
        (tmp_path / "a").touch()
        (tmp_path / "b").mkdir()

        assert sorted(p.name for p in fs.list_dir(tmp_path)) == ["a", "b"]

    def test_list_empty_dir(self, tmp_path: Path) -> None:
        assert RealFileSystem().list_dir(tmp_path) == []

    def test_list_missing_dir_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            RealFileSystem().list_dir(tmp_path / "missing")

    def test_mkdir_parents(self, tmp_path: Path) -> None:
        """Test creating nested directories with parents=True."""
        fs = RealFileSystem()
        nested_dir = tmp_path / "a" / "b" / "c"

        fs.mkdir(nested_dir, parents=True)

        assert nested_dir.is_dir()

    def test_mkdir_raises_without_exist_ok(self, tmp_path: Path) -> None:
        """Test mkdir raises FileExistsError without exist_ok."""
        fs = RealFileSystem()
        existing_dir = tmp_path / "existing"
        existing_dir.mkdir()

        with pytest.raises(FileExistsError):
            fs.mkdir(existing_dir, exist_ok=False)

    def test_remove_file(self, tmp_path: Path) -> None:
        fs = RealFileSystem()
        test_file = tmp_path / "to_delete.txt"
        test_file.touch()

        fs.remove(test_file)

        assert not test_file.exists()

    def test_remove_empty_dir(self, tmp_path: Path) -> None:
        fs = RealFileSystem()
        (tmp_path / "d").mkdir()

        fs.remove(tmp_path / "d")

        assert not (tmp_path / "d").exists()

    def test_remove_non_empty_dir_raises(self, tmp_path: Path) -> None:
        fs = RealFileSystem()
        (tmp_path / "d").mkdir()
        (tmp_path / "d" / "f").touch()

        with pytest.raises(OSError):
            fs.remove(tmp_path / "d")

    def test_remove_symlink_to_dir_keeps_target(self, tmp_path: Path) -> None:
        fs = RealFileSystem()
        (tmp_path / "target").mkdir()
        os.symlink(tmp_path / "target", tmp_path / "link", target_is_directory=True)

        fs.remove(tmp_path / "link")

        assert not (tmp_path / "link").exists()
        assert (tmp_path / "target").is_dir()

    def test_remove_missing_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            RealFileSystem().remove(tmp_path / "missing")

    def test_canonicalize(self, tmp_path: Path) -> None:
        fs = RealFileSystem()
        (tmp_path / "a").mkdir()

        assert fs.canonicalize(tmp_path / "a" / ".." / "a") == (tmp_path / "a").resolve()

    def test_canonicalize_failure(self, tmp_path: Path) -> None:
        """OS errors during resolution surface as FileSystemError."""
        fs = RealFileSystem()

        with patch.object(Path, "resolve", side_effect=OSError("Too many levels of symbolic links")):
            with pytest.raises(FileSystemError, match="Cannot canonicalize"):
                fs.canonicalize(tmp_path / "loop")

    def test_size(self, tmp_path: Path) -> None:
        (tmp_path / "f").write_bytes(b"12345")

        assert RealFileSystem().size(tmp_path / "f") == 5

    def test_open_read_write(self, tmp_path: Path) -> None:
        fs = RealFileSystem()

        with fs.open_write(tmp_path / "f") as writer:
            writer.write(b"bytes")
        with fs.open_read(tmp_path / "f") as reader:
            assert reader.read() == b"bytes"
