"""Best-effort recursive deletion."""

from __future__ import annotations

import logging

from treepath.config import TreePathConfig
from treepath.filesystem import RealFileSystem
from treepath.paths import FilePath, PathLike, as_file_path
from treepath.platforms import Platform, current_platform, get_platform
from treepath.protocols import FileSystem

logger = logging.getLogger(__name__)

__all__ = ["TreeDeleter"]


class TreeDeleter:
    """Deletes files and directory trees, children before parents."""

    def __init__(self, filesystem: FileSystem, platform: Platform) -> None:
        """Initialize deleter with required dependencies.

        Args:
            filesystem: Filesystem abstraction (required).
            platform: Path syntax used to parse string arguments (required).
        """
        self.fs = filesystem
        self.platform = platform

    @classmethod
    def create(
        cls,
        filesystem: FileSystem | None = None,
        config: TreePathConfig | None = None,
    ) -> TreeDeleter:
        """Factory method for production instantiation.

        Args:
            filesystem: Optional filesystem abstraction (created if not provided).
            config: Optional settings (defaults if not provided).

        Returns:
            Configured TreeDeleter instance.
        """
        config = config or TreePathConfig()
        platform = get_platform(config.platform) if config.platform else current_platform()
        return cls(filesystem=filesystem or RealFileSystem(), platform=platform)

    def delete_tree(self, target: PathLike) -> bool:
        """Delete a file or a directory with all its children.

        Every child is attempted even if earlier siblings could not be
        removed; their failures are only logged. Symbolic links are removed
        without following them.

        Note that if this operation fails, partial deletion may have
        taken place.

        Args:
            target: File or directory to delete.

        Returns:
            True if `target` itself was removed, False otherwise.
        """
        root = as_file_path(target, self.platform)

        # (path, children_scheduled) pairs; a directory is pushed back
        # beneath its children so it is removed after them.
        pending: list[tuple[FilePath, bool]] = [(root, False)]
        while pending:
            node, children_scheduled = pending.pop()
            if not children_scheduled and self._is_real_dir(node):
                pending.append((node, True))
                try:
                    children = self.fs.list_dir(node)
                except OSError as e:
                    logger.debug("Cannot list %s: %s", node, e)
                    continue
                pending.extend((node.resolve(child.name), False) for child in children)
                continue

            try:
                self.fs.remove(node)
            except OSError as e:
                logger.debug("Cannot delete %s: %s", node, e)
                if node is root:
                    return False

        return True

    def _is_real_dir(self, path: FilePath) -> bool:
        return self.fs.is_dir(path) and not self.fs.is_symlink(path)
