"""Zip archive storage for treewalker.

Lets the walker traverse a tree bundled inside a zip file (for example
data files shipped with an application) exactly like a directory on disk.
"""

import time
import zipfile
from pathlib import Path
from typing import BinaryIO, Dict, Union

from .memory import ROOT, MemoryStorage, _clean


class ZipStorage(MemoryStorage):
    """Read-only storage over the contents of a zip archive.

    The archive's member list is indexed once, on construction; after
    that, ``stat`` and ``list_children`` never touch the archive again.
    Directories that only exist implicitly (as a prefix of member names)
    are synthesized. Paths are slash-separated and relative, with ``"."``
    as the archive root; member names written as ``./docs/a.txt`` are
    addressed as ``docs/a.txt``.

    Example:
        >>> with ZipStorage("bundle.zip") as storage:
        ...     paths = collect_paths(storage, ".")
    """

    def __init__(self, source: Union[str, Path, BinaryIO, zipfile.ZipFile]):
        """Open and index an archive.

        Args:
            source: Path or binary file object of a zip file, or an
                already open ZipFile (which is then closed by ``close``)

        Raises:
            zipfile.BadZipFile: If ``source`` is not a zip archive
        """
        super().__init__()
        if isinstance(source, zipfile.ZipFile):
            self._archive = source
        else:
            self._archive = zipfile.ZipFile(source)
        self._members: Dict[str, str] = {}
        self._index()

    def _index(self) -> None:
        for member in self._archive.infolist():
            path = _clean(member.filename)
            if path == ROOT or self.exists(path):
                continue
            self._members[path] = member.filename
            mtime = time.mktime(member.date_time + (0, 0, -1))
            if member.is_dir():
                self.add_dir(path, mtime=mtime)
            else:
                self.add_file(path, size=member.file_size, mtime=mtime)

    def read_bytes(self, path: str) -> bytes:
        """Return the content of the file member at ``path``."""
        key = _clean(path)
        return self._archive.read(self._members.get(key, key))

    def close(self) -> None:
        self._archive.close()

    def __enter__(self) -> 'ZipStorage':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"ZipStorage(archive={self._archive.filename!r}, entries={len(self)})"
