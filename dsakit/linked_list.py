"""Singly linked list with insertion and deletion at either end or by index."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


class _Node:
    __slots__ = ("value", "next")

    def __init__(self, value: Any, next_node: _Node | None = None) -> None:
        self.value = value
        self.next = next_node


class LinkedList:
    """Singly linked list addressed by zero-based indices."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: _Node | None = None
        self._size = 0
        for value in values:
            self.append(value)

    def _node_at(self, index: int) -> _Node:
        node = self._head
        for _ in range(index):
            assert node is not None
            node = node.next
        assert node is not None
        return node

    def prepend(self, value: Any) -> None:
        """Insert ``value`` at the front."""
        self._head = _Node(value, self._head)
        self._size += 1

    def append(self, value: Any) -> None:
        """Insert ``value`` at the end."""
        node = _Node(value)
        if self._head is None:
            self._head = node
        else:
            self._node_at(self._size - 1).next = node
        self._size += 1

    def insert_at(self, position: int, value: Any) -> None:
        """Insert ``value`` so that it ends up at index ``position``."""
        if not 0 <= position <= self._size:
            raise IndexError(f"position {position} is outside 0..{self._size}")
        if position == 0:
            self.prepend(value)
            return
        before = self._node_at(position - 1)
        before.next = _Node(value, before.next)
        self._size += 1

    def pop_front(self) -> Any:
        """Remove and return the first value."""
        if self._head is None:
            raise IndexError("the list is empty")
        node = self._head
        self._head = node.next
        self._size -= 1
        return node.value

    def pop_back(self) -> Any:
        """Remove and return the last value."""
        if self._head is None:
            raise IndexError("the list is empty")
        return self.remove_at(self._size - 1)

    def remove_at(self, position: int) -> Any:
        """Remove and return the value at index ``position``."""
        if self._head is None:
            raise IndexError("the list is empty")
        if not 0 <= position < self._size:
            raise IndexError(
                f"position {position} is outside 0..{self._size - 1}"
            )
        if position == 0:
            return self.pop_front()
        before = self._node_at(position - 1)
        node = before.next
        assert node is not None
        before.next = node.next
        self._size -= 1
        return node.value

    def search(self, value: Any) -> int | None:
        """Return the index of the first occurrence of ``value``, or None."""
        for index, item in enumerate(self):
            if item == value:
                return index
        return None

    def sort(self) -> None:
        """Sort the values in place, ascending, keeping the nodes."""
        node = self._head
        for value in sorted(self):
            assert node is not None
            node.value = value
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __str__(self) -> str:
        if self._head is None:
            return "Empty link list"
        return "".join(f"{value}-> " for value in self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"