"""Circular doubly linked list with insertion and deletion at both ends."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


class _Node:
    __slots__ = ("value", "prev", "next")

    def __init__(self, value: Any) -> None:
        self.value = value
        self.prev: _Node = self
        self.next: _Node = self


class CircularDoublyLinkedList:
    """Doubly linked list whose last node links back to the first.

    The head's ``prev`` is the tail and the tail's ``next`` is the head.
    """

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: _Node | None = None
        self._size = 0
        for value in values:
            self.insert_at_tail(value)

    def _link_before_head(self, value: Any) -> _Node:
        node = _Node(value)
        if self._head is None:
            self._head = node
        else:
            tail = self._head.prev
            node.next = self._head
            node.prev = tail
            tail.next = node
            self._head.prev = node
        self._size += 1
        return node

    def insert_at_head(self, value: Any) -> None:
        """Insert ``value`` so that it becomes the first element."""
        self._head = self._link_before_head(value)

    def insert_at_tail(self, value: Any) -> None:
        """Insert ``value`` so that it becomes the last element."""
        self._link_before_head(value)

    def _unlink(self, node: _Node) -> Any:
        if self._size == 1:
            self._head = None
        else:
            node.prev.next = node.next
            node.next.prev = node.prev
            if node is self._head:
                self._head = node.next
        self._size -= 1
        return node.value

    def delete_from_head(self) -> Any:
        """Remove and return the first element."""
        if self._head is None:
            raise IndexError("the list is empty")
        return self._unlink(self._head)

    def delete_from_tail(self) -> Any:
        """Remove and return the last element."""
        if self._head is None:
            raise IndexError("the list is empty")
        return self._unlink(self._head.prev)

    def get(self, index: int) -> Any:
        """Return the value ``index`` steps from the head, wrapping around."""
        if self._head is None:
            raise IndexError("the list is empty")
        if index < 0:
            raise IndexError(f"index {index} must not be negative")
        node = self._head
        for _ in range(index % self._size):
            node = node.next
        return node.value

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        for _ in range(self._size):
            assert node is not None
            yield node.value
            node = node.next

    def __str__(self) -> str:
        return " <-> ".join(str(value) for value in self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"