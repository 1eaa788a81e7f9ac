"""LIFO container used as explicit traversal state.

The walker keeps its pending paths here instead of on the interpreter's
call stack, so tree depth never turns into recursion depth.
"""

from typing import Generic, List, Optional, TypeVar

T = TypeVar("T")


class Stack(Generic[T]):
    """A generic last-in-first-out container.

    Popping or peeking an empty stack never raises; it returns the
    ``empty`` value given at construction instead (``None`` by default).

    Example:
        >>> s = Stack[str](empty="")
        >>> s.push("a")
        >>> s.pop()
        'a'
        >>> s.pop()
        ''
    """

    def __init__(self, empty: Optional[T] = None):
        """Create an empty stack.

        Args:
            empty: Value returned by ``pop``/``peek`` when there is nothing
                to return
        """
        self._entries: List[T] = []
        self._empty = empty

    def is_empty(self) -> bool:
        """Return True if there are no items in the stack."""
        return not self._entries

    def push(self, item: T) -> None:
        """Put an item on top of the stack."""
        self._entries.append(item)

    def peek(self) -> Optional[T]:
        """Return the top item without removing it, or the empty value."""
        if not self._entries:
            return self._empty
        return self._entries[-1]

    def pop(self) -> Optional[T]:
        """Remove and return the top item, or the empty value."""
        if not self._entries:
            return self._empty
        return self._entries.pop()

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"Stack(size={len(self._entries)}, empty={self._empty!r})"
