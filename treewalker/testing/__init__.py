"""Testing utilities for treewalker consumers."""

from .fixtures import RecordingCallback, WalkRecord

__all__ = ['RecordingCallback', 'WalkRecord']
