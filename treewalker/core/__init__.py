"""Core components of treewalker.

The stack, the entry and storage abstractions, and the walker itself.
These have no dependencies beyond the standard library and know nothing
about concrete storages.
"""

from .info import BasicEntryInfo, EntryInfo
from .stack import Stack
from .storage import Storage
from .types import MustWalkFunc, WalkFunc
from .walker import Walker, order_children

__all__ = [
    'BasicEntryInfo',
    'EntryInfo',
    'MustWalkFunc',
    'Stack',
    'Storage',
    'WalkFunc',
    'Walker',
    'order_children',
]
