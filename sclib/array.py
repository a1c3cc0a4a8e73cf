"""Growable array that doubles its capacity and can be capped by a limit."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Iterator, List, Optional

_INITIAL_CAPACITY = 8


class Array:
    """Ordered sequence with append, ordered and unordered deletion.

    Capacity starts at 8 slots and doubles whenever it is full. With a
    ``limit``, growing stops once the capacity exceeds half of it, and
    ``add`` raises :class:`OverflowError` when no slot is left.
    """

    def __init__(
        self, items: Optional[Iterable[Any]] = None, limit: Optional[int] = None
    ) -> None:
        if limit is not None and limit < 0:
            raise ValueError("limit must not be negative")
        self._items: List[Any] = []
        self._capacity = 0
        self.limit = limit
        for item in items or ():
            self.add(item)

    @property
    def capacity(self) -> int:
        """Number of slots available before the array has to grow."""
        return self._capacity

    def _grow(self) -> None:
        if self.limit is not None and self._capacity > self.limit // 2:
            raise OverflowError(
                f"array cannot grow beyond {self._capacity} items "
                f"(limit {self.limit})"
            )
        self._capacity = _INITIAL_CAPACITY if self._capacity == 0 else self._capacity * 2

    def add(self, item: Any) -> None:
        """Append ``item``, growing the capacity when it is full."""
        if len(self._items) == self._capacity:
            self._grow()
        self._items.append(item)

    def _check_index(self, index: int) -> int:
        size = len(self._items)
        if index < 0:
            index += size
        if not 0 <= index < size:
            raise IndexError("array index out of range")
        return index

    def delete(self, index: int) -> None:
        """Remove the item at ``index``, keeping the order of the rest."""
        del self._items[self._check_index(index)]

    def delete_unordered(self, index: int) -> None:
        """Remove the item at ``index`` by moving the last item into its place."""
        index = self._check_index(index)
        last = self._items.pop()
        if index < len(self._items):
            self._items[index] = last

    def delete_last(self) -> None:
        """Remove the last item."""
        if not self._items:
            raise IndexError("delete from an empty array")
        self._items.pop()

    def clear(self) -> None:
        """Remove every item; the capacity is kept."""
        self._items.clear()

    def sort(self, key: Optional[Callable[[Any], Any]] = None) -> None:
        """Sort the items in place."""
        self._items.sort(key=key)

    def last(self) -> Any:
        """Return the last item."""
        if not self._items:
            raise IndexError("last of an empty array")
        return self._items[-1]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __getitem__(self, index: Any) -> Any:
        return self._items[index]

    def __repr__(self) -> str:
        return f"Array({self._items!r})"