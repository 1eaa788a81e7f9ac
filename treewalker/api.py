"""High-level API for treewalker.

This module provides simple, functional interfaces for common traversal
jobs. These functions wrap Walker and the error policies for ease of use
in simple cases.
"""

from typing import Any, Dict, List, Optional, Tuple

from .config import WalkConfig
from .core.info import EntryInfo
from .core.storage import Storage
from .core.types import MustWalkFunc
from .core.walker import Walker
from .error_policies import ContinueOnErrorsPolicy, ErrorPolicy
from .errors import ConfigurationError


def walk_tree(
    storage: Storage,
    root: str,
    fn: MustWalkFunc,
    config: Optional[WalkConfig] = None,
) -> ErrorPolicy:
    """Walk a tree, handling errors according to ``config``.

    This is the primary high-level function. ``fn`` sees only entries
    that could be read; failures are dealt with by the policy built from
    the configuration (fail-fast when no config is given).

    Args:
        storage: Storage to traverse
        root: Path to start from
        fn: Callback receiving ``(path, info)``; return False to stop
        config: Error handling configuration

    Returns:
        The error policy used, for inspecting recorded errors

    Raises:
        ConfigurationError: If the configuration is inconsistent

    Example:
        >>> storage = FileSystemStorage()
        >>> walk_tree(storage, "/home/user", lambda p, i: print(p) or True)
    """
    config = config or WalkConfig()
    config_errors = config.validate()
    if config_errors:
        raise ConfigurationError(
            f"Invalid configuration: {'; '.join(config_errors)}"
        )

    policy = config.create_policy()
    Walker(storage).walk(root, policy.bind(fn))
    return policy


def collect_paths(
    storage: Storage,
    root: str,
    config: Optional[WalkConfig] = None,
) -> List[str]:
    """List every readable path under ``root`` in traversal order.

    Example:
        >>> for path in collect_paths(FileSystemStorage(), "docs"):
        ...     print(path)
    """
    paths: List[str] = []

    def _collect(path: str, info: EntryInfo) -> bool:
        paths.append(path)
        return True

    walk_tree(storage, root, _collect, config)
    return paths


def count_entries(
    storage: Storage,
    root: str,
    config: Optional[WalkConfig] = None,
) -> Tuple[int, int]:
    """Count directories and files under ``root`` (root included).

    Returns:
        Tuple of (directory count, file count)
    """
    counts = [0, 0]

    def _count(path: str, info: EntryInfo) -> bool:
        counts[0 if info.is_dir() else 1] += 1
        return True

    walk_tree(storage, root, _count, config)
    return counts[0], counts[1]


def total_size(
    storage: Storage,
    root: str,
    config: Optional[WalkConfig] = None,
) -> int:
    """Sum the sizes of all non-directory entries under ``root``."""
    size = 0

    def _add(path: str, info: EntryInfo) -> bool:
        nonlocal size
        if not info.is_dir():
            size += info.size()
        return True

    walk_tree(storage, root, _add, config)
    return size


def get_walk_stats(
    storage: Storage,
    root: str,
    config: Optional[WalkConfig] = None,
) -> Dict[str, Any]:
    """Get statistics about a tree in a single pass.

    Returns:
        Dictionary with entry counts, total file size, deepest path depth
        and, for lenient configurations, the number of skipped paths

    Example:
        >>> stats = get_walk_stats(FileSystemStorage(), "/home/user")
        >>> print(f"{stats['files']} files, {stats['total_size']} bytes")
    """
    stats = {
        'total_entries': 0,
        'directories': 0,
        'files': 0,
        'total_size': 0,
        'max_depth': 0,
    }
    root_depth = _depth_of(storage, root)

    def _tally(path: str, info: EntryInfo) -> bool:
        stats['total_entries'] += 1
        if info.is_dir():
            stats['directories'] += 1
        else:
            stats['files'] += 1
            stats['total_size'] += info.size()
        stats['max_depth'] = max(stats['max_depth'], _depth_of(storage, path) - root_depth)
        return True

    policy = walk_tree(storage, root, _tally, config)

    if isinstance(policy, ContinueOnErrorsPolicy):
        stats['errors'] = len(policy.errors)
    else:
        stats['errors'] = 0

    return stats


# Helper functions

def _depth_of(storage: Storage, path: str) -> int:
    """Count how many joins separate ``path`` from the empty path.

    Uses the storage's own join rule to find its separator, so it works
    for both ``/`` and ``\\`` style storages.
    """
    separator = storage.join("a", "b")[1:-1] or "/"
    return len([part for part in path.split(separator) if part and part != "."])
