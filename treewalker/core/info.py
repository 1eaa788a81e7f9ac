"""Entry metadata abstraction for treewalker.

EntryInfo is deliberately small: the walker only needs a name to build
child paths and a directory flag to decide ordering and descent. Storages
are free to expose richer facts through ``metadata()``.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional


class EntryInfo(ABC):
    """Abstract metadata for a single entry in a hierarchical store.

    This is what the walker hands to callbacks alongside the entry path.
    It describes the entry (name, kind, size) without touching its
    contents.
    """

    @abstractmethod
    def name(self) -> str:
        """Return the base name of the entry.

        This is the last path segment, the piece the walker joins onto
        the parent path when it builds child paths.
        """
        pass

    @abstractmethod
    def is_dir(self) -> bool:
        """Return True if the entry is a directory."""
        pass

    @abstractmethod
    def size(self) -> int:
        """Return the entry size in bytes.

        Only meaningful for non-directories; storages may return any
        value (usually 0) for directories.
        """
        pass

    def metadata(self) -> Dict[str, Any]:
        """Return the entry facts as a dictionary.

        Subclasses can extend this with storage-specific fields such as
        modification times or permission bits.
        """
        return {
            'name': self.name(),
            'is_dir': self.is_dir(),
            'size': self.size(),
        }

    def __repr__(self) -> str:
        kind = "dir" if self.is_dir() else "file"
        return f"{self.__class__.__name__}(name={self.name()!r}, kind={kind})"


class BasicEntryInfo(EntryInfo):
    """Plain value implementation of EntryInfo.

    Used by storages that already know everything about an entry up
    front, such as the in-memory and archive storages.
    """

    def __init__(self,
                 name: str,
                 is_dir: bool = False,
                 size: int = 0,
                 mtime: Optional[float] = None):
        self._name = name
        self._is_dir = is_dir
        self._size = size
        self._mtime = mtime

    def name(self) -> str:
        return self._name

    def is_dir(self) -> bool:
        return self._is_dir

    def size(self) -> int:
        return self._size

    def mtime(self) -> Optional[float]:
        """Modification time as a POSIX timestamp, if known."""
        return self._mtime

    def metadata(self) -> Dict[str, Any]:
        metadata = super().metadata()
        if self._mtime is not None:
            metadata['mtime'] = self._mtime
        return metadata

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BasicEntryInfo):
            return NotImplemented
        return (self._name, self._is_dir, self._size, self._mtime) == \
            (other._name, other._is_dir, other._size, other._mtime)

    def __hash__(self) -> int:
        return hash((self._name, self._is_dir, self._size, self._mtime))
