"""Binary min-heap of integer keys with attached data."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Optional


@dataclass
class HeapEntry:
    """A key and the data stored with it."""

    key: int
    data: Any = None


class Heap:
    """Min-heap ordered by ``key``; negate keys to use it as a max-heap."""

    def __init__(self) -> None:
        self._elems: List[HeapEntry] = []

    def __len__(self) -> int:
        return len(self._elems)

    def clear(self) -> None:
        """Remove every entry."""
        self._elems.clear()

    def add(self, key: int, data: Any = None) -> None:
        """Insert ``data`` under ``key``."""
        elems = self._elems
        entry = HeapEntry(key, data)
        elems.append(entry)
        i = len(elems) - 1
        while i > 0:
            parent = (i - 1) // 2
            if not key < elems[parent].key:
                break
            elems[i] = elems[parent]
            i = parent
        elems[i] = entry

    def peek(self) -> Optional[HeapEntry]:
        """Return the entry with the smallest key without removing it."""
        return self._elems[0] if self._elems else None

    def pop(self) -> Optional[HeapEntry]:
        """Remove and return the entry with the smallest key, or ``None``."""
        elems = self._elems
        if not elems:
            return None
        top = elems[0]
        last = elems.pop()
        if not elems:
            return top
        size = len(elems)
        i = 0
        child = 1
        while child < size:
            right = child + 1
            if right < size and elems[child].key > elems[right].key:
                child = right
            if last.key <= elems[child].key:
                break
            elems[i] = elems[child]
            i = child
            child = 2 * i + 1
        elems[i] = last
        return top