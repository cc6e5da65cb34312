"""Ascending priority queue: the smallest value is always removed first."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any


class AscendingPriorityQueue:
    """Queue that keeps insertion order but removes the smallest value first.

    Among equal smallest values the one nearest the front is removed.
    """

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._items: list[Any] = list(values)

    def insert(self, value: Any) -> None:
        """Add ``value`` at the rear."""
        self._items.append(value)

    def remove(self) -> Any:
        """Remove and return the smallest value."""
        if not self._items:
            raise IndexError("queue underflow: unable to remove")
        index = min(range(len(self._items)), key=self._items.__getitem__)
        return self._items.pop(index)

    def is_empty(self) -> bool:
        """Tell whether the queue holds no values."""
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __str__(self) -> str:
        if not self._items:
            return "Queue empty. No data to display"
        return " ".join(str(value) for value in self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"