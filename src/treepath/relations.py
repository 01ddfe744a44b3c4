"""Structural relations between paths.

Prefix/suffix containment, relative paths, normalization and resolution,
all computed on decomposed `FilePath` values. Only `relative_to` and
`is_descendant` touch the filesystem, and only to canonicalize their
arguments.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from treepath.exceptions import DifferentRootsError
from treepath.paths import PARENT_DIR, FilePath, PathLike, as_file_path
from treepath.platforms import Platform, current_platform

if TYPE_CHECKING:
    from treepath.protocols import FileSystem


__all__ = [
    "all_separators_to_system",
    "ends_with",
    "is_descendant",
    "normalize",
    "path_separators_to_system",
    "relative_to",
    "resolve",
    "resolve_sibling",
    "separators_to_system",
    "starts_with",
]


def _default_filesystem() -> FileSystem:
    from treepath.filesystem import RealFileSystem

    return RealFileSystem()


def _roots_compatible(path: FilePath, other: FilePath) -> bool:
    # A rootless pattern matches a path under any root.
    return other.root == "" or path.root == other.root


def starts_with(path: PathLike, other: PathLike) -> bool:
    """Check whether `path` begins with all components of `other`.

    Args:
        path: Path to test.
        other: Expected prefix. If it has a root, the roots must match.

    Returns:
        True if the first components of `path` equal those of `other`.
    """
    path = as_file_path(path)
    other = as_file_path(other, path.platform)
    if not _roots_compatible(path, other):
        return False
    if not other.components:
        return True
    if path.name_count < other.name_count:
        return False
    return path.components[: other.name_count] == other.components


def ends_with(path: PathLike, other: PathLike) -> bool:
    """Check whether `path` ends with all components of `other`.

    Args:
        path: Path to test.
        other: Expected suffix. If it has a root, the roots must match.

    Returns:
        True if the last components of `path` equal those of `other`.
    """
    path = as_file_path(path)
    other = as_file_path(other, path.platform)
    if not _roots_compatible(path, other):
        return False
    if not other.components:
        return True
    if path.name_count < other.name_count:
        return False
    return path.components[path.name_count - other.name_count :] == other.components


def _common_prefix_length(first: str, second: str, separator: str) -> int:
    """Length of the longest common prefix ending on a component boundary.

    ``/foo/bar`` and ``/foo/bar/gav`` share ``/foo/bar``; ``/foo/bar`` and
    ``/foo/baran`` share only ``/foo/``.
    """
    shorter, longer = sorted((first, second), key=len)
    last_separator = -1
    index = 0
    while index < len(shorter) and shorter[index] == longer[index]:
        if shorter[index] == separator:
            last_separator = index
        index += 1

    if index == len(shorter) and (
        index == len(longer) or longer[index] == separator or shorter.endswith(separator)
    ):
        return index
    return last_separator + 1


def _segments(text: str, separator: str) -> list[str]:
    return [segment for segment in text.split(separator) if segment]


def relative_to(
    path: PathLike,
    base: PathLike,
    filesystem: FileSystem | None = None,
    canonicalize: bool = True,
) -> FilePath:
    """Compute the relative path that leads from `base` to `path`.

    Both arguments are canonicalized first unless `canonicalize` is False,
    in which case they are compared exactly as given and symbolic links
    along either path are not followed. `base` is treated as a directory.

    Args:
        path: Target path.
        base: Directory the result is relative to.
        filesystem: Collaborator used for canonicalization.
        canonicalize: Resolve both paths through `filesystem` first.

    Returns:
        A relative path; empty when both resolve to the same location.

    Raises:
        FileSystemError: If either path cannot be canonicalized.
        DifferentRootsError: If the compared forms have different roots.
    """
    path = as_file_path(path)
    base = as_file_path(base, path.platform)
    platform = path.platform
    separator = platform.separator

    if canonicalize:
        filesystem = filesystem or _default_filesystem()
        this_canonical = FilePath.parse(filesystem.canonicalize(path), platform)
        base_canonical = FilePath.parse(filesystem.canonicalize(base), platform)
    else:
        this_canonical = FilePath(path.root, path.components, platform)
        base_canonical = FilePath(base.root, base.components, platform)
    if this_canonical == base_canonical:
        return FilePath("", (), platform)
    if this_canonical.root != base_canonical.root:
        raise DifferentRootsError(
            f"{this_canonical} and {base_canonical} have different roots"
        )

    this_text = str(this_canonical)
    base_text = str(base_canonical)
    prefix = _common_prefix_length(this_text, base_text, separator)

    ups = [PARENT_DIR] * len(_segments(base_text[prefix:], separator))
    descent = _segments(this_text[prefix:], separator)
    return FilePath("", ups + descent, platform)


def normalize(path: PathLike) -> FilePath:
    """Remove every ``.`` and cancel every ``..`` that has a real predecessor.

    Leading ``..`` components that cannot be cancelled are kept as they are.

    Args:
        path: Path to normalize.

    Returns:
        The normalized path with the original root.
    """
    path = as_file_path(path)
    parts = list(path.components)
    index = 0
    while index < len(parts):
        if parts[index] == PARENT_DIR and index > 0 and parts[index - 1] != PARENT_DIR:
            del parts[index - 1 : index + 1]
            # The component now at index - 1 may itself cancel against its
            # predecessor.
            index = max(index - 1, 0)
        else:
            index += 1
    return FilePath(path.root, parts, path.platform)


def resolve(path: PathLike, other: PathLike) -> FilePath:
    """Append `other` to `path`, treating `path` as a directory.

    Args:
        path: Base path.
        other: Path to append.

    Returns:
        `other` unchanged if it has a root, otherwise the joined path.
    """
    path = as_file_path(path)
    other = as_file_path(other, path.platform)
    if other.root:
        return other

    text = str(path)
    if not text:
        return other
    if not text.endswith(path.platform.separator):
        text += path.platform.separator
    return FilePath.parse(text + str(other), path.platform)


def resolve_sibling(path: PathLike, other: PathLike) -> FilePath:
    """Append `other` to the parent directory of `path`.

    Returns:
        `other` unchanged if `path` has no parent or `other` has a root.
    """
    path = as_file_path(path)
    parent = path.parent
    if parent is None:
        return as_file_path(other, path.platform)
    return resolve(parent, other)


def is_descendant(
    path: PathLike, other: PathLike, filesystem: FileSystem | None = None
) -> bool:
    """Check whether `other` lies in the directory of `path` or below it.

    The directory of a file is its parent; a directory is its own. Both
    sides are canonicalized and compared component by component.
    """
    filesystem = filesystem or _default_filesystem()
    path = as_file_path(path)
    other = as_file_path(other, path.platform)

    def directory_of(target: FilePath) -> FilePath:
        canonical = FilePath.parse(filesystem.canonicalize(target), target.platform)
        parent = canonical.parent
        if filesystem.is_dir(canonical) or parent is None:
            return canonical
        return parent

    return starts_with(directory_of(other), directory_of(path))


def separators_to_system(text: str, platform: Platform | None = None) -> str:
    """Replace the foreign directory separator with the platform one."""
    platform = platform or current_platform()
    foreign = "\\" if platform.separator == "/" else "/"
    return text.replace(foreign, platform.separator)


def path_separators_to_system(text: str, platform: Platform | None = None) -> str:
    """Replace the foreign path-list separator with the platform one."""
    platform = platform or current_platform()
    foreign = ";" if platform.path_separator == ":" else ":"
    return text.replace(foreign, platform.path_separator)


def all_separators_to_system(text: str, platform: Platform | None = None) -> str:
    """Apply both `separators_to_system` and `path_separators_to_system`."""
    return path_separators_to_system(separators_to_system(text, platform), platform)
