"""Stack whose capacity doubles when full and halves when mostly empty."""

from __future__ import annotations

from typing import Any


class DynamicStack:
    """Array-backed stack with a growing and shrinking capacity.

    Pushing onto a full stack doubles the capacity; after a pop, an even
    capacity is halved once at most half of it is in use.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._capacity = capacity
        self._items: list[Any] = []

    @property
    def capacity(self) -> int:
        """Number of elements the stack can hold before it grows."""
        return self._capacity

    def push(self, value: Any) -> int:
        """Push ``value`` and return the index of the new top."""
        if len(self._items) == self._capacity:
            self._capacity *= 2
        self._items.append(value)
        return len(self._items) - 1

    def pop(self) -> Any:
        """Remove and return the top element."""
        if not self._items:
            raise IndexError("stack is empty")
        value = self._items.pop()
        if self._capacity % 2 == 0 and len(self._items) <= self._capacity // 2:
            self._capacity //= 2
        return value

    def peek(self) -> Any:
        """Return the top element without removing it."""
        if not self._items:
            raise IndexError("stack is empty")
        return self._items[-1]

    def is_empty(self) -> bool:
        """Tell whether the stack holds no elements."""
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(items={self._items!r}, "
            f"capacity={self._capacity})"
        )