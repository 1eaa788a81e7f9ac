"""Filesystem storage for treewalker.

This storage lets the walker traverse the native filesystem, either with
paths taken as-is or relative to a base directory.
"""

import os
import stat
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from ..core.info import EntryInfo
from ..core.storage import Storage


class FileSystemInfo(EntryInfo):
    """Metadata for a filesystem entry, backed by an ``os.stat_result``."""

    def __init__(self, name: str, stat_result: os.stat_result):
        """Initialize from a stat result.

        Args:
            name: Base name of the entry
            stat_result: Result of ``os.stat``/``os.lstat`` for the entry
        """
        self._name = name
        self._stat_result = stat_result

    def name(self) -> str:
        return self._name

    def is_dir(self) -> bool:
        return stat.S_ISDIR(self._stat_result.st_mode)

    def size(self) -> int:
        return self._stat_result.st_size

    def mode(self) -> int:
        return self._stat_result.st_mode

    def mtime(self) -> float:
        return self._stat_result.st_mtime

    def metadata(self) -> Dict[str, Any]:
        """Return filesystem metadata for this entry."""
        st = self._stat_result
        metadata = super().metadata()
        metadata.update({
            'mtime': st.st_mtime,
            'mtime_dt': datetime.fromtimestamp(st.st_mtime),
            'mode': st.st_mode,
            'is_file': stat.S_ISREG(st.st_mode),
            'is_link': stat.S_ISLNK(st.st_mode),
            'uid': getattr(st, 'st_uid', None),
            'gid': getattr(st, 'st_gid', None),
        })
        return metadata


class DirEntryInfo(EntryInfo):
    """Metadata for a listed child, backed by an ``os.DirEntry``.

    The name and kind come from the directory listing itself; the size
    needs a stat call, which is only made if somebody asks for it.
    """

    def __init__(self, entry: os.DirEntry, follow_symlinks: bool = True):
        self._entry = entry
        self._follow_symlinks = follow_symlinks

    def name(self) -> str:
        return self._entry.name

    def is_dir(self) -> bool:
        return self._entry.is_dir(follow_symlinks=self._follow_symlinks)

    def size(self) -> int:
        return self._entry.stat(follow_symlinks=self._follow_symlinks).st_size


class FileSystemStorage(Storage):
    """Storage for native filesystem traversal.

    With no ``base``, paths are used exactly as given. With a ``base``
    directory, paths are interpreted relative to it, so a walk of ``"docs"``
    reports ``"docs"``, ``"docs/index.md"`` and so on while reading from
    ``base``. Absolute paths are rejected in that mode.
    """

    def __init__(self,
                 base: Optional[Union[str, Path]] = None,
                 follow_symlinks: bool = True):
        """Initialize filesystem storage.

        Args:
            base: Directory that paths are relative to (None = as given)
            follow_symlinks: Whether stat and kind checks follow symbolic
                links. Links are never resolved in reported paths, and
                no cycle detection is performed.
        """
        self.base = Path(base) if base is not None else None
        self.follow_symlinks = follow_symlinks

    def resolve_path(self, path: str) -> str:
        """Map a storage path to the OS path actually read.

        Raises:
            ValueError: If ``path`` is absolute while a ``base`` is set
        """
        if self.base is None:
            return path
        if os.path.isabs(path):
            raise ValueError(f"absolute path {path!r} given to storage based at {str(self.base)!r}")
        return os.path.join(self.base, path)

    def stat(self, path: str) -> FileSystemInfo:
        real_path = self.resolve_path(path)
        stat_result = os.stat(real_path, follow_symlinks=self.follow_symlinks)
        return FileSystemInfo(_base_name(path), stat_result)

    def list_children(self, path: str) -> List[DirEntryInfo]:
        """List children sorted by name."""
        with os.scandir(self.resolve_path(path)) as entries:
            children = [DirEntryInfo(entry, self.follow_symlinks) for entry in entries]
        children.sort(key=lambda child: child.name())
        return children

    def join(self, parent: str, name: str) -> str:
        return os.path.join(parent, name)

    def __repr__(self) -> str:
        return f"FileSystemStorage(base={self.base!r})"


def _base_name(path: str) -> str:
    """Last segment of ``path``, or the path itself for roots like ``/``."""
    name = os.path.basename(os.path.normpath(path))
    return name or path
