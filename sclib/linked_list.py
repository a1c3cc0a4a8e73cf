"""Circular doubly linked list of nodes that can move between lists."""

from __future__ import annotations

from typing import Any, Iterator, Optional


class ListNode:
    """A list element carrying ``value``.

    A node belongs to at most one list; adding it anywhere first unlinks it
    from where it was.
    """

    __slots__ = ("value", "_next", "_prev", "_is_root")

    def __init__(self, value: Any = None) -> None:
        self.value = value
        self._next: ListNode = self
        self._prev: ListNode = self
        self._is_root = False

    def _neighbour(self, node: "ListNode") -> Optional["ListNode"]:
        if node is self or node._is_root:
            return None
        return node

    @property
    def next(self) -> Optional["ListNode"]:
        """Following node, or ``None`` at the tail or when unlinked."""
        return self._neighbour(self._next)

    @property
    def prev(self) -> Optional["ListNode"]:
        """Preceding node, or ``None`` at the head or when unlinked."""
        return self._neighbour(self._prev)

    def _unlink(self) -> None:
        self._prev._next = self._next
        self._next._prev = self._prev
        self._next = self
        self._prev = self

    def _link_between(self, prev: "ListNode", nxt: "ListNode") -> None:
        prev._next = self
        self._prev = prev
        self._next = nxt
        nxt._prev = self

    def __repr__(self) -> str:
        return f"ListNode({self.value!r})"


class LinkedList:
    """Doubly linked list; iteration tolerates removing the current node."""

    def __init__(self) -> None:
        self._root = ListNode()
        self._root._is_root = True

    def clear(self) -> None:
        """Unlink every node."""
        for node in self:
            node._unlink()

    def is_empty(self) -> bool:
        """True when the list holds no nodes."""
        return self._root._next is self._root

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def head(self) -> Optional[ListNode]:
        """First node, or ``None`` if empty."""
        return None if self.is_empty() else self._root._next

    def tail(self) -> Optional[ListNode]:
        """Last node, or ``None`` if empty."""
        return None if self.is_empty() else self._root._prev

    def add_head(self, node: ListNode) -> None:
        """Insert ``node`` at the front."""
        node._unlink()
        node._link_between(self._root, self._root._next)

    def add_tail(self, node: ListNode) -> None:
        """Append ``node`` at the back."""
        node._unlink()
        node._link_between(self._root._prev, self._root)

    def pop_head(self) -> Optional[ListNode]:
        """Remove and return the first node, or ``None`` if empty."""
        node = self.head()
        if node is not None:
            node._unlink()
        return node

    def pop_tail(self) -> Optional[ListNode]:
        """Remove and return the last node, or ``None`` if empty."""
        node = self.tail()
        if node is not None:
            node._unlink()
        return node

    def add_after(self, prev: ListNode, node: ListNode) -> None:
        """Insert ``node`` directly after ``prev``."""
        node._unlink()
        node._link_between(prev, prev._next)

    def add_before(self, next_node: ListNode, node: ListNode) -> None:
        """Insert ``node`` directly before ``next_node``."""
        node._unlink()
        node._link_between(next_node._prev, next_node)

    def remove(self, node: ListNode) -> None:
        """Unlink ``node``; an unlinked node is left as it is."""
        node._unlink()

    def __iter__(self) -> Iterator[ListNode]:
        root = self._root
        node = root._next
        while node is not root:
            following = node._next
            yield node
            node = following

    def __reversed__(self) -> Iterator[ListNode]:
        root = self._root
        node = root._prev
        while node is not root:
            preceding = node._prev
            yield node
            node = preceding