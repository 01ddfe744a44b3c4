"""Base platform implementation with shared path-syntax behavior.

All platforms share the same root-extraction algorithm; they vary only in
their separator characters and whether drive letters are recognised.

Pattern: Template Method - base class defines the scan, subclasses provide
the separator set and the drive-letter predicate.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class BasePlatform(ABC):
    """Base class for platform implementations.

    Subclasses set the separator attributes and override
    `has_drive_letter()`.
    """

    name: str
    separator: str
    alt_separator: str | None
    path_separator: str

    @abstractmethod
    def has_drive_letter(self, text: str) -> bool:
        """Check whether a path string begins with drive-letter syntax."""
        ...

    @property
    def separators(self) -> str:
        """All characters accepted as directory separators."""
        return self.separator + (self.alt_separator or "")

    def is_separator(self, char: str) -> bool:
        """Check if a single character separates path components."""
        return char != "" and char in self.separators

    def split_root(self, text: str) -> tuple[str, str]:
        """Split a path string into its root token and the remainder.

        The root is a drive letter followed by a separator, a bare drive
        letter (drive-relative), a single separator, or empty. Leading runs
        of separators are folded into the root.

        Args:
            text: Raw path string.

        Returns:
            Tuple of (root, remainder). The root always uses the primary
            separator.
        """
        if self.has_drive_letter(text):
            drive, rest = text[:2], text[2:]
            if rest and self.is_separator(rest[0]):
                return drive + self.separator, rest.lstrip(self.separators)
            return drive, rest
        if text and self.is_separator(text[0]):
            return self.separator, text.lstrip(self.separators)
        return "", text

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
