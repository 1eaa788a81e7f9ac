"""Callback signatures shared by the walker and the error policies."""

from typing import Callable, Optional

from .info import EntryInfo

# fn(path, info, error) -> keep going?
WalkFunc = Callable[[str, Optional[EntryInfo], Optional[Exception]], bool]

# fn(path, info) -> keep going?
MustWalkFunc = Callable[[str, EntryInfo], bool]
