"""A growable array that also works as a stack and as a queue.

Slots are addressed by storage index.  The active items run from an
internal ``first`` index up to (not including) ``next``; pushing and
popping work at the end, shifting and unshifting at the front.  Growing
at the front moves every item up by a block of slots, so storage
indices change after :meth:`DynamicArray.unshift`.  Unset slots read
as 0.
"""

from __future__ import annotations

from typing import Any, Iterator, List

_STEP = 64


class DynamicArray:
    """Growable array of values with stack and queue operations."""

    def __init__(self) -> None:
        self._data: List[Any] = []
        self._first = 0
        self._next = 0

    def __len__(self) -> int:
        return self._next - self._first

    def __iter__(self) -> Iterator[Any]:
        return iter(self._data[self._first:self._next])

    def __repr__(self) -> str:
        return f"DynamicArray({list(self)!r})"

    def _resolve(self, index: int) -> int:
        return index + self._next if index < 0 else index

    def _ensure(self, index: int) -> None:
        if index >= len(self._data):
            self._data.extend([0] * (index + _STEP - len(self._data)))

    def put(self, index: int, value: Any) -> None:
        """Store ``value`` at storage ``index``; negative counts from the end."""
        i = self._resolve(index)
        if i < 0:
            raise IndexError(f"index {index} lies before the start of the array")
        self._ensure(i)
        self._data[i] = value
        if i >= self._next:
            self._next = i + 1

    def get(self, index: int) -> Any:
        """Value at storage ``index`` (negative counts from the end), or 0."""
        i = self._resolve(index)
        if 0 <= i < len(self._data):
            return self._data[i]
        return 0

    def push(self, value: Any) -> None:
        """Append ``value`` at the end."""
        self.put(self._next, value)

    def pop(self) -> Any:
        """Remove and return the last item."""
        if self._first >= self._next:
            raise IndexError("pop from empty array")
        self._next -= 1
        value = self._data[self._next]
        self._data[self._next] = 0
        return value

    def unshift(self, value: Any) -> None:
        """Insert ``value`` before the first item."""
        if self._first == 0:
            self._data[:0] = [0] * _STEP
            self._first += _STEP
            self._next += _STEP
        self._first -= 1
        self.put(self._first, value)

    def shift(self) -> Any:
        """Remove and return the first item."""
        if self._first >= self._next:
            raise IndexError("shift from empty array")
        value = self._data[self._first]
        self._data[self._first] = 0
        self._first += 1
        return value