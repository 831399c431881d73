"""A small list of entries looked up by string key, number or data.

Each entry carries an optional string key, a number and a data value.
New entries go to the front, so lookups find the most recently added
match first.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterator, List, Optional


@dataclass(eq=False)
class Entry:
    """One item of a :class:`KeyedList`."""

    key: Optional[str]
    num: int = 0
    data: Any = None


class KeyedList:
    """Entries searchable by key, number, data or key and number together."""

    def __init__(self) -> None:
        self._entries: List[Entry] = []

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Entry]:
        return iter(self._entries)

    def add(self, key: Optional[str], num: int = 0, data: Any = None) -> Entry:
        """Add a new entry at the front and return it; duplicates are allowed."""
        entry = Entry(key, num, data)
        self._entries.insert(0, entry)
        return entry

    def find_key(self, key: str) -> Optional[Entry]:
        """Newest entry whose key equals ``key``."""
        return next(
            (e for e in self._entries if e.key is not None and e.key == key), None
        )

    def find_num(self, num: int) -> Optional[Entry]:
        """Newest entry with number ``num``."""
        return next((e for e in self._entries if e.num == num), None)

    def find_data(self, data: Any) -> Optional[Entry]:
        """Newest entry holding ``data``."""
        return next((e for e in self._entries if e.data == data), None)

    def find(self, key: Optional[str], num: int) -> Optional[Entry]:
        """Newest entry matching both ``key`` and ``num``; None only matches None."""
        return next(
            (e for e in self._entries if e.num == num and e.key == key), None
        )

    def put(self, key: Optional[str], num: int, data: Any) -> Any:
        """Set the data of the ``key``/``num`` entry, adding it if missing.

        Returns the data that was replaced, or None for a new entry.
        """
        entry = self.find(key, num)
        if entry is None:
            self.add(key, num, data)
            return None
        old, entry.data = entry.data, data
        return old

    def remove(self, entry: Optional[Entry]) -> Optional[Entry]:
        """Unlink ``entry`` and return it; None if it is not in the list."""
        if entry is None:
            return None
        index = next(
            (i for i, candidate in enumerate(self._entries) if candidate is entry),
            None,
        )
        if index is None:
            return None
        return self._entries.pop(index)