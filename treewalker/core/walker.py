"""Iterative pre-order tree walker.

The Walker drives a depth-first, pre-order traversal over any Storage,
visiting the directories of each level (and their subtrees) before the
files of that level. State lives in an explicit Stack, never in recursion.
"""

import logging
from typing import Iterable, List

from ..error_policies import FailFastPolicy
from .info import EntryInfo
from .stack import Stack
from .storage import Storage
from .types import MustWalkFunc, WalkFunc

logger = logging.getLogger(__name__)


def order_children(children: Iterable[EntryInfo]) -> List[EntryInfo]:
    """Put every directory before every non-directory.

    The sort is stable, so entries of the same kind keep the order the
    storage listed them in.
    """
    return sorted(children, key=lambda child: not child.is_dir())


class Walker:
    """Walks a Storage, directories before files, calling back per entry.

    A Walker holds nothing but its storage, so one instance can serve any
    number of traversals, including concurrent ones when the storage
    tolerates concurrent reads.

    Example:
        >>> walker = Walker(FileSystemStorage())
        >>> def show(path, info, error):
        ...     print(path)
        ...     return True
        >>> walker.walk("/etc", show)
    """

    def __init__(self, storage: Storage):
        """Bind the walker to a storage.

        Args:
            storage: Read-accessible hierarchical store to traverse
        """
        self.storage = storage

    def walk(self, root: str, fn: WalkFunc) -> None:
        """Walk the tree under ``root``, leaving error handling to ``fn``.

        ``fn`` is called with ``(path, info, error)``:

        - once per entry with the result of reading its metadata
          (``info`` is None when that failed, and ``error`` says why);
        - a second time for a directory whose children could not be
          listed, with the directory's ``info`` and the listing error.

        A falsy return from ``fn`` ends the whole traversal at once.
        Returning True after a listing error skips that directory's
        children and carries on with the rest of the tree.

        Nothing is raised by the walker itself; exceptions raised by
        ``fn`` propagate to the caller.

        Args:
            root: Path to start from; every reported path begins with it
            fn: Callback deciding whether to continue
        """
        pending: Stack[str] = Stack(empty="")
        pending.push(root)

        while not pending.is_empty():
            path = pending.pop()

            info, error = self._stat(path)
            if not fn(path, info, error):
                logger.debug("Walk of %r stopped by callback at %r", root, path)
                return

            if info is None or not info.is_dir():
                continue

            children, error = self._list(path)
            if error is not None:
                logger.debug("Cannot list %r: %s", path, error)
                if fn(path, info, error):
                    continue
                logger.debug("Walk of %r stopped by callback at %r", root, path)
                return

            # Reversed so that popping yields directories first
            for child in reversed(children):
                pending.push(self.storage.join(path, child.name()))

    def walk_or_fail(self, root: str, fn: MustWalkFunc) -> None:
        """Walk the tree under ``root``, raising on the first failure.

        Same traversal as ``walk``, but ``fn`` only ever sees successful
        entries as ``(path, info)``. A stat or list failure is raised from
        this call unchanged (the very exception the storage raised) and
        no further callbacks are made.

        Args:
            root: Path to start from
            fn: Callback deciding whether to continue

        Raises:
            Exception: The first storage error encountered
        """
        self.walk(root, FailFastPolicy().bind(fn))

    def _stat(self, path: str):
        """Read metadata, returning ``(info, None)`` or ``(None, error)``."""
        try:
            return self.storage.stat(path), None
        except Exception as e:
            return None, e

    def _list(self, path: str):
        """List children in visiting order, or return ``(None, error)``.

        Ordering asks each child whether it is a directory, which may hit
        the storage again, so a failure there counts as a list failure.
        """
        try:
            return order_children(self.storage.list_children(path)), None
        except Exception as e:
            return None, e

    def __repr__(self) -> str:
        return f"Walker(storage={self.storage!r})"
