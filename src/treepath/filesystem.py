"""Filesystem abstraction for testability.

The RealFileSystem implementation wraps standard library operations and
satisfies the FileSystem protocol structurally.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import BinaryIO

from treepath.exceptions import FileSystemError
from treepath.protocols import StrPath


class RealFileSystem:
    """Production filesystem implementation.

    Wraps standard library Path and os operations.
    """

    def exists(self, path: StrPath) -> bool:
        """Check if a path exists."""
        return Path(path).exists()

    def is_dir(self, path: StrPath) -> bool:
        """Check if a path is a directory."""
        return Path(path).is_dir()

    def is_symlink(self, path: StrPath) -> bool:
        """Check if a path is a symbolic link."""
        return Path(path).is_symlink()

    def list_dir(self, path: StrPath) -> list[Path]:
        """List the entries of a directory."""
        return list(Path(path).iterdir())

    def mkdir(self, path: StrPath, parents: bool = False, exist_ok: bool = False) -> None:
        """Create a directory."""
        Path(path).mkdir(parents=parents, exist_ok=exist_ok)

    def remove(self, path: StrPath) -> None:
        """Remove a file, a symbolic link or an empty directory."""
        target = Path(path)
        if target.is_dir() and not target.is_symlink():
            target.rmdir()
        else:
            target.unlink()

    def canonicalize(self, path: StrPath) -> Path:
        """Resolve a path to its absolute, symlink-free form."""
        try:
            return Path(path).resolve()
        except (OSError, RuntimeError) as e:
            raise FileSystemError(path, reason=f"Cannot canonicalize path: {e}") from e

    def size(self, path: StrPath) -> int:
        """Get the size of a file in bytes."""
        return os.stat(path).st_size

    def open_read(self, path: StrPath) -> BinaryIO:
        """Open a file for binary reading."""
        return open(path, "rb")

    def open_write(self, path: StrPath) -> BinaryIO:
        """Create or truncate a file and open it for binary writing."""
        return open(path, "wb")
