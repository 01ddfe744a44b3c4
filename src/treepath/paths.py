"""Path values decomposed into a root token and name components.

A `FilePath` is parsed once, left to right, into a root (drive letter plus
separator, a bare drive letter, a leading separator, or nothing) and the
ordered name components between separators. Empty and ``.`` components are
dropped during the scan, so two spellings of the same location compare
equal.
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from typing import TYPE_CHECKING, Union

from treepath.platforms import Platform, current_platform

if TYPE_CHECKING:
    from treepath.protocols import FileSystem

__all__ = ["FilePath", "PathLike", "as_file_path"]

CURRENT_DIR = "."
PARENT_DIR = ".."

PathLike = Union["FilePath", str, "os.PathLike[str]"]


class FilePath:
    """Immutable path value: a root token plus ordered name components.

    Equality and hashing are structural over ``(root, components)``; the
    platform only controls how the value is parsed and rendered.
    """

    __slots__ = ("_components", "_platform", "_root")

    def __init__(
        self,
        root: str = "",
        components: tuple[str, ...] | list[str] = (),
        platform: Platform | None = None,
    ) -> None:
        """Initialize from already-decomposed parts.

        Args:
            root: Root token, empty for relative paths.
            components: Name components; ``.`` and empty entries are dropped.
            platform: Path syntax to render with. Defaults to the host.
        """
        self._root = root
        self._components = tuple(c for c in components if c and c != CURRENT_DIR)
        self._platform = platform or current_platform()

    @classmethod
    def parse(cls, text: str | os.PathLike[str], platform: Platform | None = None) -> FilePath:
        """Decompose a path string.

        Args:
            text: Path string or path-like object.
            platform: Path syntax to parse with. Defaults to the host.

        Returns:
            The decomposed path.
        """
        platform = platform or current_platform()
        root, rest = platform.split_root(os.fspath(text))

        components: list[str] = []
        start = 0
        for index, char in enumerate(rest):
            if platform.is_separator(char):
                components.append(rest[start:index])
                start = index + 1
        components.append(rest[start:])
        return cls(root, components, platform)

    @property
    def root(self) -> str:
        """Root token; empty for relative paths."""
        return self._root

    @property
    def components(self) -> tuple[str, ...]:
        """Name components in order."""
        return self._components

    @property
    def platform(self) -> Platform:
        """Path syntax this value was parsed under."""
        return self._platform

    @property
    def name_count(self) -> int:
        return len(self._components)

    @property
    def is_absolute(self) -> bool:
        """Whether the path has a root token.

        A bare drive letter such as ``C:x`` counts as a root here even
        though Windows treats it as relative to that drive's current
        directory, so `resolve` returns such a path unchanged.
        """
        return self._root != ""

    @property
    def name(self) -> str:
        """Last component, or an empty string when there is none."""
        return self._components[-1] if self._components else ""

    @property
    def parent(self) -> FilePath | None:
        """The path without its last component.

        Returns None for a bare root, an empty path, or a single relative
        component.
        """
        if not self._components:
            return None
        if len(self._components) == 1 and not self._root:
            return None
        return FilePath(self._root, self._components[:-1], self._platform)

    def iter_components(self) -> Iterator[str]:
        """Lazily yield the name components; each call starts afresh."""
        yield from self._components

    def __iter__(self) -> Iterator[str]:
        return self.iter_components()

    def __str__(self) -> str:
        return self._root + self._platform.separator.join(self._components)

    def __fspath__(self) -> str:
        return str(self)

    def __repr__(self) -> str:
        return f"FilePath({str(self)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FilePath):
            return NotImplemented
        return self._root == other._root and self._components == other._components

    def __hash__(self) -> int:
        return hash((self._root, self._components))

    def __truediv__(self, other: PathLike) -> FilePath:
        return self.resolve(other)

    # Relation operations; the algorithms live in treepath.relations.

    def starts_with(self, other: PathLike) -> bool:
        from treepath.relations import starts_with

        return starts_with(self, other)

    def ends_with(self, other: PathLike) -> bool:
        from treepath.relations import ends_with

        return ends_with(self, other)

    def normalize(self) -> FilePath:
        from treepath.relations import normalize

        return normalize(self)

    def resolve(self, other: PathLike) -> FilePath:
        from treepath.relations import resolve

        return resolve(self, other)

    def resolve_sibling(self, other: PathLike) -> FilePath:
        from treepath.relations import resolve_sibling

        return resolve_sibling(self, other)

    def relative_to(
        self,
        base: PathLike,
        filesystem: FileSystem | None = None,
        canonicalize: bool = True,
    ) -> FilePath:
        from treepath.relations import relative_to

        return relative_to(self, base, filesystem, canonicalize)

    def is_descendant(self, other: PathLike, filesystem: FileSystem | None = None) -> bool:
        from treepath.relations import is_descendant

        return is_descendant(self, other, filesystem)


def as_file_path(path: PathLike, platform: Platform | None = None) -> FilePath:
    """Coerce a string or path-like object to a `FilePath`.

    Existing `FilePath` values are returned unchanged.
    """
    if isinstance(path, FilePath):
        return path
    return FilePath.parse(path, platform)
