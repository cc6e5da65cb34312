"""Searching algorithms over sorted sequences, matrices and text."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

NOT_FOUND = -1


def binary_search_recursive(items: Sequence[Any], target: Any) -> int:
    """Return the index of ``target`` in sorted ``items``, or -1 if absent."""

    def _search(lo: int, hi: int) -> int:
        if hi < lo:
            return NOT_FOUND
        mid = lo + (hi - lo) // 2
        if items[mid] == target:
            return mid
        if items[mid] > target:
            return _search(lo, mid - 1)
        return _search(mid + 1, hi)

    return _search(0, len(items) - 1)


def binary_search_iterative(items: Sequence[Any], target: Any) -> int:
    """Return the index of ``target`` in sorted ``items``, or -1 if absent."""
    lo, hi = 0, len(items) - 1
    while lo <= hi:
        mid = lo + (hi - lo) // 2
        if items[mid] == target:
            return mid
        if items[mid] > target:
            hi = mid - 1
        else:
            lo = mid + 1
    return NOT_FOUND


def exponential_search(items: Sequence[Any], target: Any) -> int:
    """Double a bound until it passes ``target``, then binary-search the range."""
    length = len(items)
    if length == 0:
        return NOT_FOUND
    upper = 1
    while upper < length and items[upper] < target:
        upper *= 2
    lower = upper // 2
    upper = min(upper, length - 1)

    def _search(lo: int, hi: int) -> int:
        if lo > hi:
            return NOT_FOUND
        mid = lo + (hi - lo) // 2
        if items[mid] == target:
            return mid
        if items[mid] > target:
            return _search(lo, mid - 1)
        return _search(mid + 1, hi)

    return _search(lower, upper)


def fibonacci_search(items: Sequence[Any], target: Any) -> int:
    """Search sorted ``items`` by splitting ranges at Fibonacci offsets."""
    n = len(items)
    if n == 0:
        return NOT_FOUND
    fib2, fib1 = 0, 1
    fib = fib2 + fib1
    while fib < n:
        fib2, fib1 = fib1, fib
        fib = fib2 + fib1

    offset = -1
    while fib > 1:
        i = min(offset + fib2, n - 1)
        if items[i] < target:
            fib, fib1 = fib1, fib2
            fib2 = fib - fib1
            offset = i
        elif items[i] > target:
            fib = fib2
            fib1 = fib1 - fib2
            fib2 = fib - fib1
        else:
            return i

    if fib1 and offset + 1 < n and items[offset + 1] == target:
        return offset + 1
    return NOT_FOUND


def boyer_moore_search(text: Sequence[Any], pattern: Sequence[Any]) -> list[int]:
    """Return every start position of ``pattern`` in ``text``.

    Uses the bad-character rule of the Boyer-Moore algorithm; works on
    strings as well as bytes.
    """
    n, m = len(text), len(pattern)
    if m == 0:
        raise ValueError("pattern must not be empty")
    last = {symbol: index for index, symbol in enumerate(pattern)}

    positions: list[int] = []
    shift = 0
    while shift <= n - m:
        j = m - 1
        while j >= 0 and pattern[j] == text[shift + j]:
            j -= 1
        if j < 0:
            positions.append(shift)
            if shift + m < n:
                shift += m - last.get(text[shift + m], -1)
            else:
                shift += 1
        else:
            shift += max(1, j - last.get(text[shift + j], -1))
    return positions


def find_duplicate(items: Sequence[int]) -> int:
    """Find the repeated value with Floyd's tortoise-and-hare cycle detection.

    Each value is treated as an index into ``items``; returns -1 when there
    are fewer than two items.
    """
    size = len(items)
    if size <= 1:
        return NOT_FOUND

    def _step(index: int) -> int:
        if not 0 <= index < size:
            raise ValueError(f"value {index} is not a valid index into the items")
        return items[index]

    tortoise = hare = _step(0)
    while True:
        tortoise = _step(tortoise)
        hare = _step(_step(hare))
        if tortoise == hare:
            break
    tortoise = _step(0)
    while tortoise != hare:
        tortoise = _step(tortoise)
        hare = _step(hare)
    return tortoise


def staircase_search(
    matrix: Sequence[Sequence[Any]], target: Any
) -> list[tuple[int, int]]:
    """Locate ``target`` in a matrix whose rows and columns are both sorted.

    Walks from the top-right corner and returns every (row, column) hit.
    """
    rows = len(matrix)
    if rows == 0:
        return []
    i, j = 0, len(matrix[0]) - 1
    hits: list[tuple[int, int]] = []
    while i < rows and j >= 0:
        value = matrix[i][j]
        if value == target:
            hits.append((i, j))
        if value > target:
            j -= 1
        else:
            i += 1
    return hits