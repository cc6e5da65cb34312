"""Operations on plain arrays."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, NamedTuple


class Deletion(NamedTuple):
    """Outcome of deleting one element: what is left and what was removed."""

    remaining: list[Any]
    removed: Any


def delete_at(items: Sequence[Any], position: int) -> Deletion:
    """Remove the element at zero-based ``position``, shifting later ones left.

    The input is left unchanged; raises IndexError for a position outside
    the sequence.
    """
    if not 0 <= position < len(items):
        raise IndexError(
            f"position {position} is outside an array of {len(items)} elements"
        )
    remaining = list(items)
    removed = remaining.pop(position)
    return Deletion(remaining, removed)