"""Platform-specific path syntax."""

from __future__ import annotations

import os
from typing import Protocol, runtime_checkable

from .base import BasePlatform
from .posix import PosixPlatform
from .windows import WindowsPlatform


@runtime_checkable
class Platform(Protocol):
    """Protocol defining the path-syntax capability.

    Separator and drive-letter logic is consulted through this interface
    so the path algorithms never branch on the host OS themselves.
    """

    name: str
    separator: str
    alt_separator: str | None
    path_separator: str

    @property
    def separators(self) -> str:
        """All characters accepted as directory separators."""
        raise NotImplementedError

    def has_drive_letter(self, text: str) -> bool:
        """Check whether a path string begins with drive-letter syntax.

        Args:
            text: Raw path string.

        Returns:
            True if the string starts with a drive specifier.
        """
        raise NotImplementedError

    def is_separator(self, char: str) -> bool:
        """Check if a single character separates path components."""
        raise NotImplementedError

    def split_root(self, text: str) -> tuple[str, str]:
        """Split a path string into its root token and the remainder.

        Args:
            text: Raw path string.

        Returns:
            Tuple of (root, remainder).
        """
        raise NotImplementedError


__all__ = [
    "BasePlatform",
    "Platform",
    "PosixPlatform",
    "WindowsPlatform",
    "current_platform",
    "get_platform",
]


PLATFORMS: dict[str, type[Platform]] = {
    "posix": PosixPlatform,
    "windows": WindowsPlatform,
}


def get_platform(name: str) -> Platform:
    """Get a platform instance by name.

    Args:
        name: Platform name (posix, windows).

    Returns:
        Platform instance.

    Raises:
        ValueError: If platform is not supported.
    """
    if name not in PLATFORMS:
        raise ValueError(f"Unknown platform: {name}. Supported: {list(PLATFORMS.keys())}")
    return PLATFORMS[name]()


def current_platform() -> Platform:
    """Get the platform matching the running interpreter."""
    return get_platform("windows" if os.name == "nt" else "posix")
