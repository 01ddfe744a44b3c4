"""POSIX platform implementation."""

from __future__ import annotations

from treepath.platforms.base import BasePlatform


class PosixPlatform(BasePlatform):
    """Path syntax for Linux, macOS and other POSIX systems."""

    name = "posix"
    separator = "/"
    alt_separator = None
    path_separator = ":"

    def has_drive_letter(self, text: str) -> bool:
        """POSIX paths never carry a drive letter."""
        return False
