"""Exception taxonomy for path and file-tree operations.

Every filesystem failure raised by treepath derives from `FileSystemError`,
which is an `OSError`. The concrete kinds additionally inherit from the
matching builtin (`FileNotFoundError`, `FileExistsError`, ...) so callers
can catch either family.
"""

from __future__ import annotations

import os

__all__ = [
    "AccessDeniedError",
    "CopyLengthMismatchError",
    "DifferentRootsError",
    "DirectoryNotEmptyError",
    "FileAlreadyExistsError",
    "FileIsDirectoryError",
    "FileSystemError",
    "NoSuchFileError",
    "SymlinkLoopError",
]


class FileSystemError(OSError):
    """Failure while operating on a file, optionally involving a second file.

    Attributes:
        file: The file the operation was applied to.
        other: The second file involved, if any.
        reason: Human-readable cause.
    """

    def __init__(
        self,
        file: str | os.PathLike[str],
        other: str | os.PathLike[str] | None = None,
        reason: str | None = None,
    ) -> None:
        self.file = os.fspath(file)
        self.other = os.fspath(other) if other is not None else None
        self.reason = reason
        super().__init__(self._build_message())

    def _build_message(self) -> str:
        message = self.file
        if self.other is not None:
            message += f" -> {self.other}"
        if self.reason is not None:
            message += f": {self.reason}"
        return message

    def __str__(self) -> str:
        return self._build_message()


class NoSuchFileError(FileSystemError, FileNotFoundError):
    """The file an operation needs does not exist."""

    pass


class FileIsDirectoryError(FileSystemError, IsADirectoryError):
    """A file operation was attempted on a directory."""

    pass


class FileAlreadyExistsError(FileSystemError, FileExistsError):
    """The destination of an operation already exists."""

    pass


class DirectoryNotEmptyError(FileSystemError):
    """A directory that must be replaced still has entries."""

    pass


class AccessDeniedError(FileSystemError, PermissionError):
    """A directory could not be opened or listed."""

    pass


class CopyLengthMismatchError(FileSystemError):
    """Fewer or more bytes were written than the source holds."""

    pass


class SymlinkLoopError(FileSystemError):
    """A symbolic link points at a directory that contains it."""

    pass


class DifferentRootsError(ValueError):
    """Two paths cannot be related because their roots differ."""

    pass
