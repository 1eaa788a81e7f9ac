"""In-memory storage for treewalker.

MemoryStorage holds a virtual tree in dictionaries. It is the storage to
reach for in tests: trees are built in a line or two, and stat or list
failures can be injected at any path.

Paths follow the usual slash-separated, relative convention: ``"."`` is
the root, ``"docs"`` a top-level entry, ``"docs/index.md"`` one below it.
Lookups ignore empty and ``.`` segments, so ``"./docs//index.md"`` names
the same entry.
"""

import errno
import os
import posixpath
from typing import Any, Dict, List, Mapping, Optional

from ..core.info import BasicEntryInfo
from ..core.storage import Storage

ROOT = "."


class MemoryStorage(Storage):
    """Virtual hierarchical storage with failure injection.

    Example:
        >>> storage = MemoryStorage.from_dict({"a": {"b": {"c": 3}, "d": 5}})
        >>> storage.fail_list("a/b")
        >>> Walker(storage).walk("a", callback)
    """

    def __init__(self):
        self._entries: Dict[str, BasicEntryInfo] = {ROOT: BasicEntryInfo(ROOT, is_dir=True)}
        self._children: Dict[str, Dict[str, None]] = {ROOT: {}}
        self._stat_errors: Dict[str, Exception] = {}
        self._list_errors: Dict[str, Exception] = {}

    @classmethod
    def from_dict(cls, tree: Mapping[str, Any]) -> 'MemoryStorage':
        """Build a storage from a nested mapping.

        Mapping values describe entries: a mapping is a directory, an int
        is a file of that size, ``bytes``/``str`` is a file with that
        content's length, and None is an empty file.

        Args:
            tree: Top-level entries keyed by name

        Returns:
            A populated MemoryStorage
        """
        storage = cls()
        pending = [(ROOT, tree)]
        while pending:
            parent, entries = pending.pop()
            for name, value in entries.items():
                path = storage.join(parent, name)
                if isinstance(value, Mapping):
                    storage.add_dir(path)
                    pending.append((path, value))
                else:
                    storage.add_file(path, _size_of(value))
        return storage

    def add_dir(self, path: str, mtime: Optional[float] = None) -> BasicEntryInfo:
        """Add a directory, creating missing parents.

        Adding a directory that already exists returns the existing one.
        """
        path = _clean(path)
        existing = self._entries.get(path)
        if existing is not None and existing.is_dir():
            return existing
        return self._add(path, BasicEntryInfo(posixpath.basename(path), is_dir=True, mtime=mtime))

    def add_file(self, path: str, size: int = 0, mtime: Optional[float] = None) -> BasicEntryInfo:
        """Add a file of ``size`` bytes, creating missing parents."""
        path = _clean(path)
        return self._add(path, BasicEntryInfo(posixpath.basename(path), size=size, mtime=mtime))

    def fail_stat(self, path: str, error: Optional[Exception] = None) -> None:
        """Make ``stat(path)`` raise ``error`` (PermissionError by default)."""
        self._stat_errors[_clean(path)] = error or _os_error(PermissionError, errno.EACCES, path)

    def fail_list(self, path: str, error: Optional[Exception] = None) -> None:
        """Make ``list_children(path)`` raise ``error`` (PermissionError by default)."""
        self._list_errors[_clean(path)] = error or _os_error(PermissionError, errno.EACCES, path)

    def exists(self, path: str) -> bool:
        return _clean(path) in self._entries

    def stat(self, path: str) -> BasicEntryInfo:
        key = _clean(path)
        if key in self._stat_errors:
            raise self._stat_errors[key]
        info = self._entries.get(key)
        if info is None:
            raise _os_error(FileNotFoundError, errno.ENOENT, path)
        return info

    def list_children(self, path: str) -> List[BasicEntryInfo]:
        """List children sorted by name."""
        key = _clean(path)
        if key in self._list_errors:
            raise self._list_errors[key]
        info = self._entries.get(key)
        if info is None:
            raise _os_error(FileNotFoundError, errno.ENOENT, path)
        if not info.is_dir():
            raise _os_error(NotADirectoryError, errno.ENOTDIR, path)
        return [self._entries[_child_key(key, name)] for name in sorted(self._children[key])]

    def join(self, parent: str, name: str) -> str:
        """Join with ``/``; children of the root are addressed by name alone."""
        if parent in (ROOT, ""):
            return name
        return posixpath.join(parent, name)

    def _add(self, path: str, info: BasicEntryInfo) -> BasicEntryInfo:
        if path == ROOT or path in self._entries:
            raise _os_error(FileExistsError, errno.EEXIST, path)

        missing = []
        ancestor = _parent(path)
        while ancestor not in self._entries:
            missing.append(ancestor)
            ancestor = _parent(ancestor)
        if not self._entries[ancestor].is_dir():
            raise _os_error(NotADirectoryError, errno.ENOTDIR, ancestor)

        for directory in reversed(missing):
            self._insert(directory, BasicEntryInfo(posixpath.basename(directory), is_dir=True))
        self._insert(path, info)
        return info

    def _insert(self, path: str, info: BasicEntryInfo) -> None:
        self._entries[path] = info
        self._children[_parent(path)][info.name()] = None
        if info.is_dir():
            self._children[path] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(entries={len(self._entries)})"


def _clean(path: str) -> str:
    """Canonical key for ``path``: no empty or ``.`` segments, root as ``"."``.

    ``".."`` segments are kept as they are.
    """
    parts = [part for part in path.split("/") if part and part != "."]
    return "/".join(parts) or ROOT


def _parent(path: str) -> str:
    return posixpath.dirname(path) or ROOT


def _child_key(parent: str, name: str) -> str:
    return name if parent == ROOT else f"{parent}/{name}"


def _size_of(value: Any) -> int:
    if value is None:
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        return len(value.encode("utf-8"))
    return len(value)


def _os_error(error_class, code: int, path: str) -> OSError:
    return error_class(code, os.strerror(code), path)
