"""Test fixtures for treewalker consumers.

These fixtures make it easy to assert exactly how a Walker called back:
which paths, in which order, with which metadata and errors.
"""

from dataclasses import dataclass
from typing import List, Optional

from ..core.info import EntryInfo
from ..errors import FailureKind, classify_failure


@dataclass(frozen=True)
class WalkRecord:
    """One callback invocation as seen by RecordingCallback."""
    path: str
    name: Optional[str]
    is_dir: Optional[bool]
    error: Optional[Exception]
    failure: Optional[FailureKind] = None


class RecordingCallback:
    """Walker callback that records every invocation.

    What it returns is configurable per kind of outcome, which makes it
    handy for exercising early termination and error recovery.

    Example:
        >>> recorder = RecordingCallback(continue_on_list_error=True)
        >>> Walker(storage).walk("a", recorder)
        >>> recorder.paths()
        ['a', 'a/b', 'a/b', 'a/d']
    """

    def __init__(self,
                 continue_on_stat_error: bool = False,
                 continue_on_list_error: bool = False,
                 stop_after: Optional[int] = None):
        """Initialize the recorder.

        Args:
            continue_on_stat_error: Return value for stat failures
            continue_on_list_error: Return value for list failures
            stop_after: Return False once this many calls were recorded
        """
        self.continue_on_stat_error = continue_on_stat_error
        self.continue_on_list_error = continue_on_list_error
        self.stop_after = stop_after
        self.results: List[WalkRecord] = []

    def __call__(self, path: str, info: Optional[EntryInfo], error: Optional[Exception]) -> bool:
        self.results.append(WalkRecord(
            path=path,
            name=info.name() if info is not None else None,
            is_dir=info.is_dir() if info is not None else None,
            error=error,
            failure=classify_failure(info) if error is not None else None,
        ))

        if self.stop_after is not None and len(self.results) >= self.stop_after:
            return False
        if error is None:
            return True
        if self.results[-1].failure is FailureKind.STAT:
            return self.continue_on_stat_error
        return self.continue_on_list_error

    def paths(self) -> List[str]:
        """Paths in the order they were reported (failures included)."""
        return [record.path for record in self.results]

    def visited(self) -> List[str]:
        """Paths reported without an error."""
        return [record.path for record in self.results if record.error is None]

    def errors(self) -> List[WalkRecord]:
        """Records that carried an error."""
        return [record for record in self.results if record.error is not None]
