"""Exceptions and failure classification for treewalker.

Storage errors are never wrapped: the walker passes them along exactly as
the storage raised them. The classes here cover the library's own failure
modes.
"""

from enum import Enum
from typing import Optional

from .core.info import EntryInfo


class FailureKind(Enum):
    """Which traversal step failed."""
    STAT = "stat"            # Metadata for the path could not be read
    LIST = "list_children"   # Directory exists but could not be enumerated


def classify_failure(info: Optional[EntryInfo]) -> FailureKind:
    """Tell a stat failure from a list failure.

    The walker reports a stat failure without metadata and a list failure
    with the directory's metadata, so the presence of ``info`` is enough.
    """
    if info is None:
        return FailureKind.STAT
    return FailureKind.LIST


class TreeWalkerError(Exception):
    """Base class for errors raised by treewalker itself."""
    pass


class ConfigurationError(TreeWalkerError):
    """Raised when a WalkConfig is inconsistent."""
    pass


class ErrorThresholdExceeded(TreeWalkerError, RuntimeError):
    """Raised by ThresholdPolicy once too many failures were seen.

    The storage error that crossed the threshold is chained as
    ``__cause__``.
    """

    def __init__(self, max_errors: int, path: Optional[str] = None):
        self.max_errors = max_errors
        self.path = path
        super().__init__(f"Error threshold exceeded ({max_errors} errors)")
