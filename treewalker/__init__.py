"""treewalker - Iterative directory-tree walking over any storage.

treewalker visits a hierarchical store depth-first, directories before
files, calling a function for every entry it meets. The store can be the
native filesystem, a zip archive, an in-memory tree, or anything else that
implements the Storage interface.

Two calling conventions:
━━━━━━━━━━━━━━━━━━━━━━━━
Errors handed to the callback:
    Walker(storage).walk(root, fn)          # fn(path, info, error) -> bool

Errors raised:
    Walker(storage).walk_or_fail(root, fn)  # fn(path, info) -> bool
━━━━━━━━━━━━━━━━━━━━━━━━
"""

__version__ = "0.1.0"

# Core components
from .core.info import BasicEntryInfo, EntryInfo
from .core.stack import Stack
from .core.storage import Storage
from .core.types import MustWalkFunc, WalkFunc
from .core.walker import Walker, order_children

# Storages
from .adapters import (
    DirEntryInfo,
    FileSystemInfo,
    FileSystemStorage,
    MemoryStorage,
    ZipStorage,
    create_storage,
)

# Error handling
from .errors import (
    ConfigurationError,
    ErrorThresholdExceeded,
    FailureKind,
    TreeWalkerError,
    classify_failure,
)
from .error_policies import (
    CollectErrorsPolicy,
    ContinueOnErrorsPolicy,
    ErrorPolicy,
    FailFastPolicy,
    PolicyCallback,
    ThresholdPolicy,
)

# Configuration
from .config import ErrorMode, WalkConfig

# High-level API
from .api import (
    collect_paths,
    count_entries,
    get_walk_stats,
    total_size,
    walk_tree,
)

__all__ = [
    '__version__',
    # Core
    'BasicEntryInfo',
    'EntryInfo',
    'MustWalkFunc',
    'Stack',
    'Storage',
    'WalkFunc',
    'Walker',
    'order_children',
    # Storages
    'DirEntryInfo',
    'FileSystemInfo',
    'FileSystemStorage',
    'MemoryStorage',
    'ZipStorage',
    'create_storage',
    # Errors
    'ConfigurationError',
    'ErrorThresholdExceeded',
    'FailureKind',
    'TreeWalkerError',
    'classify_failure',
    'CollectErrorsPolicy',
    'ContinueOnErrorsPolicy',
    'ErrorPolicy',
    'FailFastPolicy',
    'PolicyCallback',
    'ThresholdPolicy',
    # Config
    'ErrorMode',
    'WalkConfig',
    # API
    'collect_paths',
    'count_entries',
    'get_walk_stats',
    'total_size',
    'walk_tree',
]
