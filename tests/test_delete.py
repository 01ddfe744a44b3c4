"""Tests for delete module."""

from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from treepath.delete import TreeDeleter
from treepath.filesystem import RealFileSystem
from treepath.platforms import PosixPlatform
from treepath.protocols import StrPath


class StubbornFileSystem(RealFileSystem):
    """Real filesystem that refuses to remove one path."""

    def __init__(self, protected: Path) -> None:
        self.protected = protected

    def remove(self, path: StrPath) -> None:
        if Path(path) == self.protected:
            raise PermissionError(f"Operation not permitted: {path}")
        super().remove(path)


@pytest.fixture
def deleter() -> TreeDeleter:
    """Create a TreeDeleter using factory method."""
    return TreeDeleter.create()


class TestDeleteTree:
    """Tests for best-effort recursive delete."""

    def test_delete_file(self, deleter: TreeDeleter, tmp_path: Path) -> None:
        target = tmp_path / "file.txt"
        target.write_text("x")

        assert deleter.delete_tree(target) is True
        assert not target.exists()

    def test_delete_tree(self, deleter: TreeDeleter, source_tree: Path) -> None:
        assert deleter.delete_tree(source_tree) is True
        assert not source_tree.exists()

    def test_delete_empty_directory(self, deleter: TreeDeleter, tmp_path: Path) -> None:
        target = tmp_path / "empty"
        target.mkdir()

        assert deleter.delete_tree(target) is True
        assert not target.exists()

    def test_delete_missing(self, deleter: TreeDeleter, tmp_path: Path) -> None:
        assert deleter.delete_tree(tmp_path / "missing") is False

    def test_undeletable_nested_file(self, source_tree: Path) -> None:
        """Everything removable is removed, but the root survives and reports False."""
        (source_tree / "sub" / "c.txt").write_text("charlie")
        protected = source_tree / "sub" / "b.txt"
        deleter = TreeDeleter.create(filesystem=StubbornFileSystem(protected))

        assert deleter.delete_tree(source_tree) is False

        assert protected.exists()
        assert not (source_tree / "a.txt").exists()
        assert not (source_tree / "sub" / "c.txt").exists()

    def test_symlink_is_not_followed(self, deleter: TreeDeleter, tmp_path: Path) -> None:
        outside = tmp_path / "outside"
        outside.mkdir()
        (outside / "keep.txt").write_text("keep")
        tree = tmp_path / "tree"
        tree.mkdir()
        os.symlink(outside, tree / "link", target_is_directory=True)

        assert deleter.delete_tree(tree) is True

        assert not tree.exists()
        assert (outside / "keep.txt").read_text() == "keep"


class TestDeleteTreeWithMock:
    """Outcome rules checked against a mock filesystem."""

    @pytest.fixture
    def tree_filesystem(self, mock_filesystem: MagicMock) -> MagicMock:
        """Mock layout: /root containing /root/a and /root/b."""
        mock_filesystem.is_dir.side_effect = lambda path: str(path) == "/root"
        mock_filesystem.list_dir.return_value = [Path("/root/a"), Path("/root/b")]
        return mock_filesystem

    def test_child_failures_do_not_change_result(
        self, tree_filesystem: MagicMock, posix: PosixPlatform
    ) -> None:
        """Only removal of the target itself decides the result."""

        def remove(path: StrPath) -> None:
            if str(path) == "/root/a":
                raise PermissionError("denied")

        tree_filesystem.remove.side_effect = remove
        deleter = TreeDeleter(tree_filesystem, posix)

        assert deleter.delete_tree("/root") is True

    def test_every_child_is_attempted(
        self, tree_filesystem: MagicMock, posix: PosixPlatform
    ) -> None:
        tree_filesystem.remove.side_effect = PermissionError("denied")
        deleter = TreeDeleter(tree_filesystem, posix)

        assert deleter.delete_tree("/root") is False

        removed = [str(call.args[0]) for call in tree_filesystem.remove.call_args_list]
        assert sorted(removed[:2]) == ["/root/a", "/root/b"]
        assert removed[2] == "/root"

    def test_unlistable_directory_is_still_removed(
        self, tree_filesystem: MagicMock, posix: PosixPlatform
    ) -> None:
        tree_filesystem.list_dir.side_effect = PermissionError("denied")
        deleter = TreeDeleter(tree_filesystem, posix)

        assert deleter.delete_tree("/root") is True
        assert [str(call.args[0]) for call in tree_filesystem.remove.call_args_list] == ["/root"]
