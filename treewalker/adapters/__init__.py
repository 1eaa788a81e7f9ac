"""Storages for specific tree structures.

Storages implement the Storage interface for different kinds of trees,
enabling the Walker to traverse any of them.
"""

import zipfile
from pathlib import Path
from typing import Union

from ..core.storage import Storage
from .archive import ZipStorage
from .filesystem import DirEntryInfo, FileSystemInfo, FileSystemStorage
from .memory import MemoryStorage


def create_storage(source: Union[str, Path], **kwargs) -> Storage:
    """Create a storage suited to ``source``.

    Args:
        source: A zip file or a directory
        **kwargs: Extra FileSystemStorage arguments (ignored for archives)

    Returns:
        ZipStorage for zip files, FileSystemStorage rooted at ``source``
        otherwise
    """
    source = Path(source)
    if source.is_file() and zipfile.is_zipfile(source):
        return ZipStorage(source)
    return FileSystemStorage(base=source, **kwargs)


__all__ = [
    "DirEntryInfo",
    "FileSystemInfo",
    "FileSystemStorage",
    "MemoryStorage",
    "ZipStorage",
    "create_storage",
]
