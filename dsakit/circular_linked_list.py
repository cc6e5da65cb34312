"""Singly linked circular list whose last node links back to the first."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


class _Node:
    __slots__ = ("value", "next")

    def __init__(self, value: Any) -> None:
        self.value = value
        self.next: _Node = self


class CircularLinkedList:
    """Circular singly linked list tracked through its last node."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._last: _Node | None = None
        self._size = 0
        self.extend(values)

    def extend(self, values: Iterable[Any]) -> None:
        """Append each of ``values`` at the end, keeping the ring closed."""
        for value in values:
            node = _Node(value)
            if self._last is not None:
                node.next = self._last.next
                self._last.next = node
            self._last = node
            self._size += 1

    def delete(self, value: Any) -> None:
        """Remove the first node holding ``value``."""
        if self._last is not None:
            follow = self._last
            node = self._last.next
            for _ in range(self._size):
                if node.value == value:
                    if self._size == 1:
                        self._last = None
                    else:
                        follow.next = node.next
                        if node is self._last:
                            self._last = follow
                    self._size -= 1
                    return
                follow, node = node, node.next
        raise ValueError(f"required node {value!r} not found")

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        if self._last is None:
            return
        node = self._last.next
        for _ in range(self._size):
            yield node.value
            node = node.next

    def __str__(self) -> str:
        if self._last is None:
            return "Circularly Linked List Empty"
        return " ".join(str(value) for value in self)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"