"""Classic comparison and distribution sorting algorithms.

Every function accepts an iterable of values and returns a new sorted list
in ascending order; the input is never modified.
"""

from __future__ import annotations

import bisect
import random
from collections.abc import Iterable
from typing import Any

DEFAULT_BUCKET_COUNT = 5
DEFAULT_BUCKET_INTERVAL = 10
COMB_SHRINK_FACTOR = 1.3


def _require_non_negative(values: list[int], algorithm: str) -> None:
    negatives = [v for v in values if v < 0]
    if negatives:
        raise ValueError(
            f"{algorithm} only handles non-negative integers, got {negatives[0]}"
        )


def bead_sort(values: Iterable[int]) -> list[int]:
    """Sort non-negative integers by letting 'beads' fall down their posts."""
    items = list(values)
    if not items:
        return []
    _require_non_negative(items, "bead sort")
    rows = len(items)
    # Each post j holds one bead for every row whose value exceeds j.
    post_counts = [sum(1 for v in items if v > j) for j in range(max(items))]
    # After falling, the bottom `count` rows of each post hold a bead; a row's
    # value is the number of consecutive beads it carries from post 0 onward.
    result = []
    for row in range(rows):
        beads = 0
        for count in post_counts:
            if row < rows - count:
                break
            beads += 1
        result.append(beads)
    return result


def binary_insertion_sort(values: Iterable[Any]) -> list[Any]:
    """Insertion sort that finds each insertion point by binary search."""
    result: list[Any] = []
    for value in values:
        # Equal keys go after existing ones, keeping the sort stable.
        bisect.insort_right(result, value)
    return result


def _is_sorted(items: list[Any]) -> bool:
    return all(a <= b for a, b in zip(items, items[1:]))


def bogo_sort(values: Iterable[Any], rng: random.Random | None = None) -> list[Any]:
    """Shuffle repeatedly until the values happen to be in order."""
    items = list(values)
    generator = rng if rng is not None else random.Random()
    n = len(items)
    while not _is_sorted(items):
        for i in range(n):
            r = generator.randrange(n)
            items[i], items[r] = items[r], items[i]
    return items


def bubble_sort(values: Iterable[Any]) -> list[Any]:
    """Bubble sort that stops early once a pass makes no swaps."""
    items = list(values)
    n = len(items)
    for i in range(n - 1):
        swapped = False
        for j in range(n - 1 - i):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
                swapped = True
        if not swapped:
            break
    return items


def bubble_sort_until_sorted(values: Iterable[Any]) -> list[Any]:
    """Bubble sort that sweeps the whole list until a pass makes no swaps."""
    items = list(values)
    is_sorted = False
    while not is_sorted:
        is_sorted = True
        for i in range(len(items) - 1):
            if items[i] > items[i + 1]:
                items[i], items[i + 1] = items[i + 1], items[i]
                is_sorted = False
    return items


def bubble_sort_recursive(values: Iterable[Any]) -> list[Any]:
    """Bubble sort where each pass recurses on the unsorted prefix."""
    items = list(values)

    def _sort_prefix(size: int) -> None:
        if size <= 1:
            return
        swapped = False
        for i in range(size - 1):
            if items[i] > items[i + 1]:
                items[i], items[i + 1] = items[i + 1], items[i]
                swapped = True
        if swapped:
            _sort_prefix(size - 1)

    _sort_prefix(len(items))
    return items


def _bucket_index(value: int, interval: int) -> int:
    # Truncate toward zero, so small negatives share the first bucket.
    quotient = abs(value) // interval
    return quotient if value >= 0 else -quotient


def bucket_sort(
    values: Iterable[int],
    bucket_count: int = DEFAULT_BUCKET_COUNT,
    interval: int = DEFAULT_BUCKET_INTERVAL,
) -> list[int]:
    """Distribute integers into fixed-width buckets, sort each and concatenate.

    A value goes to bucket ``value / interval`` (truncated toward zero); a
    value whose bucket falls outside ``range(bucket_count)`` is rejected.
    """
    if bucket_count <= 0:
        raise ValueError("bucket_count must be positive")
    if interval <= 0:
        raise ValueError("interval must be positive")
    buckets: list[list[int]] = [[] for _ in range(bucket_count)]
    for value in values:
        index = _bucket_index(value, interval)
        if not 0 <= index < bucket_count:
            raise ValueError(
                f"value {value} falls outside the {bucket_count} buckets "
                f"of width {interval}"
            )
        buckets[index].insert(0, value)
    return [value for bucket in buckets for value in binary_insertion_sort(bucket)]


def cocktail_sort(values: Iterable[Any]) -> list[Any]:
    """Bidirectional bubble sort, alternating forward and backward passes."""
    items = list(values)
    start, end = 0, len(items) - 1
    changed = True
    while changed:
        changed = False
        for i in range(start, end):
            if items[i] > items[i + 1]:
                items[i], items[i + 1] = items[i + 1], items[i]
                changed = True
        end -= 1
        if not changed:
            break
        changed = False
        for i in range(end - 1, start - 1, -1):
            if items[i + 1] < items[i]:
                items[i], items[i + 1] = items[i + 1], items[i]
                changed = True
        start += 1
    return items


def comb_sort(values: Iterable[Any]) -> list[Any]:
    """Bubble sort over a gap that shrinks by a factor of 1.3 each pass."""
    items = list(values)
    size = len(items)
    gap = size
    swapped = True
    while gap > 1 or swapped:
        gap = max(1, int(gap / COMB_SHRINK_FACTOR))
        swapped = False
        for i in range(size - gap):
            if items[i] > items[i + gap]:
                items[i], items[i + gap] = items[i + gap], items[i]
                swapped = True
    return items


def counting_sort(values: Iterable[int]) -> list[int]:
    """Sort non-negative integers by tallying how often each one occurs."""
    items = list(values)
    if not items:
        return []
    _require_non_negative(items, "counting sort")
    counts = [0] * (max(items) + 1)
    for value in items:
        counts[value] += 1
    return [value for value, count in enumerate(counts) for _ in range(count)]


def cycle_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by rotating each cycle of misplaced items into position."""
    items = list(values)
    n = len(items)

    def _position(item: Any, cycle_start: int) -> int:
        smaller = sum(1 for other in items[cycle_start + 1 :] if other < item)
        pos = cycle_start + smaller
        while item == items[pos]:
            pos += 1
        return pos

    for cycle_start in range(n - 1):
        item = items[cycle_start]
        smaller = sum(1 for other in items[cycle_start + 1 :] if other < item)
        if smaller == 0:
            continue
        pos = _position(item, cycle_start)
        items[pos], item = item, items[pos]
        while pos != cycle_start:
            pos = cycle_start + sum(
                1 for other in items[cycle_start + 1 :] if other < item
            )
            while pos != cycle_start and item == items[pos]:
                pos += 1
            if item != items[pos]:
                items[pos], item = item, items[pos]
            elif pos == cycle_start:
                items[pos] = item
    return items


def gnome_sort(values: Iterable[Any]) -> list[Any]:
    """Step forward while in order, otherwise swap and step back."""
    items = list(values)
    pos = 1
    while pos < len(items):
        if items[pos] >= items[pos - 1]:
            pos += 1
        else:
            items[pos - 1], items[pos] = items[pos], items[pos - 1]
            pos = max(pos - 1, 1)
    return items