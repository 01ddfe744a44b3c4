"""Protocol definitions for the filesystem collaborator.

The path and tree algorithms never call `os` or `pathlib` directly; they go
through the `FileSystem` protocol so tests can substitute a double without
touching real files. All concrete implementations satisfy the protocol
structurally (duck typing).
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import BinaryIO, Protocol, runtime_checkable

StrPath = str | os.PathLike[str]


@runtime_checkable
class FileSystem(Protocol):
    """Protocol for filesystem operations.

    Abstracts filesystem access to enable testing without real I/O.
    """

    def exists(self, path: StrPath) -> bool:
        """Check if a path exists.

        Args:
            path: Path to check.

        Returns:
            True if path exists, False otherwise.
        """
        ...

    def is_dir(self, path: StrPath) -> bool:
        """Check if a path is a directory.

        Args:
            path: Path to check.

        Returns:
            True if path is a directory, False otherwise.
        """
        ...

    def is_symlink(self, path: StrPath) -> bool:
        """Check if a path is a symbolic link.

        Args:
            path: Path to check.

        Returns:
            True if path is a symbolic link, False otherwise.
        """
        ...

    def list_dir(self, path: StrPath) -> list[Path]:
        """List the entries of a directory.

        An empty directory yields an empty list; failure to list raises.

        Args:
            path: Directory to list.

        Returns:
            Paths of the directory entries.

        Raises:
            OSError: If the directory cannot be opened.
        """
        ...

    def mkdir(self, path: StrPath, parents: bool = False, exist_ok: bool = False) -> None:
        """Create a directory.

        Args:
            path: Path to create.
            parents: Create parent directories if needed.
            exist_ok: Don't raise if directory exists.
        """
        ...

    def remove(self, path: StrPath) -> None:
        """Remove a file, a symbolic link or an empty directory.

        Args:
            path: Path to remove.

        Raises:
            OSError: If the entry cannot be removed.
        """
        ...

    def canonicalize(self, path: StrPath) -> Path:
        """Resolve a path to its absolute, symlink-free form.

        Args:
            path: Path to resolve.

        Returns:
            The canonical path.

        Raises:
            FileSystemError: If the path cannot be canonicalized.
        """
        ...

    def size(self, path: StrPath) -> int:
        """Get the size of a file in bytes.

        Args:
            path: File to measure.

        Returns:
            Size in bytes.
        """
        ...

    def open_read(self, path: StrPath) -> BinaryIO:
        """Open a file for binary reading.

        Args:
            path: File to open.

        Returns:
            Readable binary stream; the caller closes it.
        """
        ...

    def open_write(self, path: StrPath) -> BinaryIO:
        """Create or truncate a file and open it for binary writing.

        Args:
            path: File to open.

        Returns:
            Writable binary stream; the caller closes it.
        """
        ...
