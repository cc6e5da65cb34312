"""Doubly linked list addressed by one-based positions."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


class _Node:
    __slots__ = ("value", "prev", "next")

    def __init__(self, value: Any) -> None:
        self.value = value
        self.prev: _Node | None = None
        self.next: _Node | None = None


class DoublyLinkedList:
    """Linear doubly linked list with insertion and deletion by position.

    Positions count from 1. Inserting into an empty list ignores the
    position; otherwise it must lie between 1 and ``len(self) + 1``.
    """

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0
        for value in values:
            self.insert(value, self._size + 1)

    def _node_at(self, position: int) -> _Node:
        node = self._head
        for _ in range(position - 1):
            assert node is not None
            node = node.next
        assert node is not None
        return node

    def insert(self, value: Any, position: int) -> None:
        """Insert ``value`` so that it ends up at ``position``."""
        node = _Node(value)
        if self._head is None:
            self._head = self._tail = node
            self._size = 1
            return
        if not 1 <= position <= self._size + 1:
            raise IndexError(
                f"position {position} is outside 1..{self._size + 1}"
            )
        if position == 1:
            node.next = self._head
            self._head.prev = node
            self._head = node
        elif position == self._size + 1:
            assert self._tail is not None
            node.prev = self._tail
            self._tail.next = node
            self._tail = node
        else:
            after = self._node_at(position)
            before = after.prev
            assert before is not None
            node.prev, node.next = before, after
            before.next = node
            after.prev = node
        self._size += 1

    def delete(self, position: int) -> Any:
        """Remove and return the value at ``position``."""
        if not 1 <= position <= self._size:
            raise IndexError(f"position {position} is outside 1..{self._size}")
        node = self._node_at(position)
        if node.prev is None:
            self._head = node.next
        else:
            node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        self._size -= 1
        return node.value

    def __contains__(self, value: Any) -> bool:
        return any(item == value for item in self)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __str__(self) -> str:
        return "".join(f"{value:f}\t" for value in self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"