"""Single-file and whole-tree copy operations."""

from __future__ import annotations

import logging

from treepath.config import DEFAULT_BUFFER_SIZE, TreePathConfig
from treepath.exceptions import (
    AccessDeniedError,
    CopyLengthMismatchError,
    DirectoryNotEmptyError,
    FileAlreadyExistsError,
    FileIsDirectoryError,
    NoSuchFileError,
    SymlinkLoopError,
)
from treepath.filesystem import RealFileSystem
from treepath.paths import FilePath, PathLike, as_file_path
from treepath.platforms import Platform, current_platform, get_platform
from treepath.protocols import FileSystem
from treepath.relations import relative_to, resolve
from treepath.types import ErrorDecision, ErrorPolicy

logger = logging.getLogger(__name__)

__all__ = [
    "TreeCopier",
    "raise_on_error",
    "skip_on_error",
    "terminate_on_error",
]


def raise_on_error(path: FilePath, error: OSError) -> ErrorDecision:
    """Default policy: re-raise the error and abort the walk."""
    raise error


def skip_on_error(path: FilePath, error: OSError) -> ErrorDecision:
    """Policy that skips every offending node."""
    return ErrorDecision.SKIP


def terminate_on_error(path: FilePath, error: OSError) -> ErrorDecision:
    """Policy that stops the walk at the first failure without raising."""
    return ErrorDecision.TERMINATE


class TreeCopier:
    """Copies single files and whole directory trees.

    Follows Separate Use from Creation: constructor requires all dependencies.
    Use factory method `create()` for production instantiation with defaults.
    """

    def __init__(
        self,
        filesystem: FileSystem,
        platform: Platform,
        buffer_size: int = DEFAULT_BUFFER_SIZE,
    ) -> None:
        """Initialize copier with required dependencies.

        Args:
            filesystem: Filesystem abstraction (required).
            platform: Path syntax used to parse string arguments (required).
            buffer_size: Default chunk size for streaming copies.
        """
        self.fs = filesystem
        self.platform = platform
        self.buffer_size = buffer_size

    @classmethod
    def create(
        cls,
        filesystem: FileSystem | None = None,
        config: TreePathConfig | None = None,
    ) -> TreeCopier:
        """Factory method for production instantiation.

        Args:
            filesystem: Optional filesystem abstraction (created if not provided).
            config: Optional settings (defaults if not provided).

        Returns:
            Configured TreeCopier instance.
        """
        config = config or TreePathConfig()
        platform = get_platform(config.platform) if config.platform else current_platform()
        return cls(
            filesystem=filesystem or RealFileSystem(),
            platform=platform,
            buffer_size=config.buffer_size,
        )

    def copy_file(
        self,
        source: PathLike,
        destination: PathLike,
        overwrite: bool = False,
        buffer_size: int | None = None,
    ) -> int:
        """Copy one file, creating missing parent directories of the destination.

        Args:
            source: File to copy.
            destination: Target file path.
            overwrite: Replace an existing destination file or empty directory.
            buffer_size: Chunk size; defaults to the copier's setting.

        Returns:
            Number of bytes copied.

        Raises:
            NoSuchFileError: If the source does not exist.
            FileIsDirectoryError: If the source is a directory.
            FileAlreadyExistsError: If the destination exists and overwrite is False.
            DirectoryNotEmptyError: If the destination is a non-empty directory.
            ValueError: If buffer_size is not positive.
        """
        src = as_file_path(source, self.platform)
        dst = as_file_path(destination, self.platform)
        chunk_size = self.buffer_size if buffer_size is None else buffer_size
        if chunk_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {chunk_size}")

        if not self.fs.exists(src):
            raise NoSuchFileError(src, reason="The source file doesn't exist")
        if self.fs.is_dir(src):
            raise FileIsDirectoryError(src, reason="Cannot copy a directory")
        if self.fs.exists(dst):
            if not overwrite:
                raise FileAlreadyExistsError(
                    src, dst, reason="The destination file already exists"
                )
            if self.fs.is_dir(dst) and self.fs.list_dir(dst):
                raise DirectoryNotEmptyError(
                    src, dst, reason="The destination file is a non-empty directory"
                )

        parent = dst.parent
        if parent is not None:
            self.fs.mkdir(parent, parents=True, exist_ok=True)
        if self.fs.exists(dst) or self.fs.is_symlink(dst):
            self.fs.remove(dst)

        copied = 0
        with self.fs.open_read(src) as reader, self.fs.open_write(dst) as writer:
            while True:
                chunk = reader.read(chunk_size)
                if not chunk:
                    break
                writer.write(chunk)
                copied += len(chunk)

        logger.debug("Copied %s to %s (%d bytes)", src, dst, copied)
        return copied

    def copy_tree(
        self,
        source: PathLike,
        destination: PathLike,
        on_error: ErrorPolicy | None = None,
    ) -> bool:
        """Copy a file or directory with all its children onto `destination`.

        Every failure is passed to `on_error` together with the offending
        path. A SKIP decision continues with the next pending node; a
        TERMINATE decision stops the walk. Work already done is not rolled
        back.

        Symbolic links inside the source are followed, and their contents
        land under the link's own name in the destination. A link to a
        directory that contains it is reported as a `SymlinkLoopError`.

        Args:
            source: File or directory to copy.
            destination: Path the source root is copied to.
            on_error: Error policy. Defaults to re-raising the first error.

        Returns:
            False if the walk was terminated by the policy, True otherwise.
        """
        policy = on_error or raise_on_error
        root = as_file_path(source, self.platform)
        target_root = as_file_path(destination, self.platform)

        # Children are pushed in reverse so they pop in sorted order.
        pending: list[FilePath] = [root]
        while pending:
            node = pending.pop()
            failure = self._copy_node(node, root, target_root, pending)
            if failure is None:
                continue

            offending, error = failure
            decision = policy(offending, error)
            logger.debug("Copy failure at %s (%s): %s", offending, error, decision)
            if decision is ErrorDecision.TERMINATE:
                return False

        return True

    def _copy_node(
        self,
        node: FilePath,
        root: FilePath,
        target_root: FilePath,
        pending: list[FilePath],
    ) -> tuple[FilePath, OSError] | None:
        """Copy a single node of the walk.

        Args:
            node: Source node being visited.
            root: Source root of the walk.
            target_root: Destination root of the walk.
            pending: Work stack; children of a directory are pushed here.

        Returns:
            (offending path, error) on failure, None on success.
        """
        try:
            if not self.fs.exists(node):
                return node, NoSuchFileError(node, reason="The source file doesn't exist")

            node_is_dir = self.fs.is_dir(node)
            if node_is_dir and self.fs.is_symlink(node) and self._links_to_ancestor(node):
                return node, SymlinkLoopError(
                    node, reason="The link points at a directory that contains it"
                )

            # Every node is the root plus child names, so the lexical relative
            # path keeps symlinked entries under the destination.
            target = resolve(target_root, relative_to(node, root, canonicalize=False))
            if self.fs.exists(target) and not (node_is_dir and self.fs.is_dir(target)):
                return target, FileAlreadyExistsError(
                    node, target, reason="The destination file already exists"
                )

            if node_is_dir:
                self.fs.mkdir(target, parents=True, exist_ok=True)
                logger.debug("Created directory %s", target)
                try:
                    children = self.fs.list_dir(node)
                except OSError as e:
                    return node, AccessDeniedError(
                        node, reason=f"Cannot list files in a directory: {e}"
                    )
                names = sorted(child.name for child in children)
                pending.extend(node.resolve(name) for name in reversed(names))
                return None

            copied = self.copy_file(node, target, overwrite=True)
            expected = self.fs.size(node)
            if copied != expected:
                return node, CopyLengthMismatchError(
                    node, target, reason=f"Copied {copied} bytes but the source has {expected}"
                )
        except OSError as e:
            return node, e

        return None

    def _links_to_ancestor(self, link: FilePath) -> bool:
        parent = link.parent
        if parent is None:
            return False
        destination = FilePath.parse(self.fs.canonicalize(link), self.platform)
        return FilePath.parse(self.fs.canonicalize(parent), self.platform).starts_with(
            destination
        )
