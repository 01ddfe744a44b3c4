"""Shared test fixtures."""

from __future__ import annotations

import os
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from treepath.platforms import PosixPlatform, WindowsPlatform


@pytest.fixture
def posix() -> PosixPlatform:
    """POSIX path syntax."""
    return PosixPlatform()


@pytest.fixture
def windows() -> WindowsPlatform:
    """Windows path syntax."""
    return WindowsPlatform()


# ============================================================================
# Mock FileSystem Fixtures
# ============================================================================


@pytest.fixture
def mock_filesystem() -> MagicMock:
    """Create a mock FileSystem for testing.

    The mock tracks all filesystem operations without touching real files.
    """
    fs = MagicMock()
    fs.exists.return_value = False
    fs.is_dir.return_value = False
    fs.is_symlink.return_value = False
    fs.list_dir.return_value = []
    return fs


@pytest.fixture
def identity_filesystem(mock_filesystem: MagicMock) -> MagicMock:
    """Mock FileSystem whose canonical form of a path is the path itself."""
    mock_filesystem.canonicalize.side_effect = lambda path: os.fspath(path)
    return mock_filesystem


# ============================================================================
# Sample Tree Fixtures
# ============================================================================


@pytest.fixture
def source_tree(tmp_path: Path) -> Path:
    """Create a small source tree.

    Layout::

        source/a.txt
        source/sub/b.txt
    """
    root = tmp_path / "source"
    (root / "sub").mkdir(parents=True)
    (root / "a.txt").write_text("alpha")
    (root / "sub" / "b.txt").write_text("bravo bravo")
    return root
