"""Cross-platform path algebra and file-tree copy/delete operations."""

__version__ = "0.1.0"

from treepath.context import TreePathContext, create_context
from treepath.copy import TreeCopier, raise_on_error, skip_on_error, terminate_on_error
from treepath.delete import TreeDeleter
from treepath.exceptions import (
    AccessDeniedError,
    CopyLengthMismatchError,
    DifferentRootsError,
    DirectoryNotEmptyError,
    FileAlreadyExistsError,
    FileIsDirectoryError,
    FileSystemError,
    NoSuchFileError,
    SymlinkLoopError,
)
from treepath.paths import FilePath
from treepath.protocols import FileSystem
from treepath.relations import (
    ends_with,
    is_descendant,
    normalize,
    relative_to,
    resolve,
    resolve_sibling,
    starts_with,
)
from treepath.types import ErrorDecision, ErrorPolicy

__all__ = [
    "__version__",
    "AccessDeniedError",
    "CopyLengthMismatchError",
    "DifferentRootsError",
    "DirectoryNotEmptyError",
    "ErrorDecision",
    "ErrorPolicy",
    "FileAlreadyExistsError",
    "FileIsDirectoryError",
    "FilePath",
    "FileSystem",
    "FileSystemError",
    "NoSuchFileError",
    "SymlinkLoopError",
    "TreeCopier",
    "TreeDeleter",
    "TreePathContext",
    "create_context",
    "ends_with",
    "is_descendant",
    "normalize",
    "raise_on_error",
    "relative_to",
    "resolve",
    "resolve_sibling",
    "skip_on_error",
    "starts_with",
    "terminate_on_error",
]
