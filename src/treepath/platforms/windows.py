"""Windows platform implementation."""

from __future__ import annotations

from treepath.platforms.base import BasePlatform


class WindowsPlatform(BasePlatform):
    """Path syntax for Windows.

    Backslash is the primary separator; forward slash is accepted on input
    and rewritten to backslash when a path is rendered.
    """

    name = "windows"
    separator = "\\"
    alt_separator = "/"
    path_separator = ";"

    def has_drive_letter(self, text: str) -> bool:
        """Check for a leading ``X:`` drive specifier.

        Args:
            text: Raw path string.

        Returns:
            True if the first character is a letter and the second a colon.
        """
        return len(text) >= 2 and text[0].isalpha() and text[1] == ":"
