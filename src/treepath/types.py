"""Shared data types for treepath."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from treepath.paths import FilePath

__all__ = ["ErrorDecision", "ErrorPolicy"]


class ErrorDecision(Enum):
    """What a tree walk does after a failure was reported to the policy."""

    SKIP = "skip"
    """Skip the offending node and continue with the next one."""

    TERMINATE = "terminate"
    """Stop the walk immediately."""


ErrorPolicy = Callable[["FilePath", OSError], ErrorDecision]
