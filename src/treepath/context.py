"""Application context for dependency injection.

Separates object creation from object use: `create_context()` wires the
default collaborators once, tests construct `TreePathContext` directly with
doubles.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from treepath.config import TreePathConfig
from treepath.copy import TreeCopier
from treepath.delete import TreeDeleter
from treepath.platforms import Platform
from treepath.protocols import FileSystem


def _default_filesystem() -> FileSystem:
    """Create the default filesystem implementation."""
    from treepath.filesystem import RealFileSystem

    return RealFileSystem()


@dataclass
class TreePathContext:
    """Container for the services used by path and tree operations.

    Dependencies are typed using Protocol interfaces, not concrete classes,
    so test doubles can be injected without inheritance.
    """

    platform: Platform
    copier: TreeCopier
    deleter: TreeDeleter
    config: TreePathConfig = field(default_factory=TreePathConfig)
    filesystem: FileSystem = field(default_factory=_default_filesystem)


def create_context(
    config: TreePathConfig | None = None,
    filesystem: FileSystem | None = None,
) -> TreePathContext:
    """Factory for treepath dependencies.

    Args:
        config: Settings to apply. Defaults are used when omitted.
        filesystem: Override the filesystem collaborator (for testing).

    Returns:
        Configured TreePathContext with all dependencies.
    """
    config = config or TreePathConfig()
    filesystem = filesystem or _default_filesystem()
    copier = TreeCopier.create(filesystem=filesystem, config=config)
    deleter = TreeDeleter.create(filesystem=filesystem, config=config)

    return TreePathContext(
        platform=copier.platform,
        copier=copier,
        deleter=deleter,
        config=config,
        filesystem=filesystem,
    )
