"""Storage abstraction for treewalker.

The Storage is what makes the walker independent of any concrete tree:
a native filesystem, a zip archive, or a virtual tree built in a test all
look the same once they implement ``stat`` and ``list_children``.
"""

import posixpath
from abc import ABC, abstractmethod
from typing import Iterable

from .info import EntryInfo


class Storage(ABC):
    """Read-only access to a hierarchical store.

    Storages report failures by raising. The walker never interprets
    those exceptions; it passes them to the traversal callback exactly
    as raised, so a storage should raise whatever describes the problem
    best (``FileNotFoundError``, ``PermissionError``, a driver error...).

    No mutation capability is required, and a storage that is safe for
    concurrent reads can back several traversals at once.
    """

    @abstractmethod
    def stat(self, path: str) -> EntryInfo:
        """Return metadata for ``path``.

        Args:
            path: Path of the entry, in the storage's own addressing

        Returns:
            EntryInfo describing the entry

        Raises:
            Exception: Any error that prevented reading the metadata
        """
        pass

    @abstractmethod
    def list_children(self, path: str) -> Iterable[EntryInfo]:
        """Return metadata for the direct children of directory ``path``.

        The order of the result is the storage's own; the walker only
        reorders it to put directories first.

        Args:
            path: Path of a directory

        Returns:
            Iterable of EntryInfo, one per child

        Raises:
            Exception: Any error that prevented listing the directory
        """
        pass

    def join(self, parent: str, name: str) -> str:
        """Build a child path from its parent path and its name.

        The default joins with ``/`` and performs no normalization.
        Storages with a different path-segment rule override this.
        """
        return posixpath.join(parent, name)
