"""Euler path existence test based on vertex degrees."""

from __future__ import annotations

from dsakit.graph import Graph


def degree(graph: Graph, vertex: int) -> int:
    """Return how many vertices ``vertex`` is joined to."""
    return sum(1 for w in range(graph.vertex_count) if graph.adjacent(vertex, w))


def has_euler_path(graph: Graph, start: int, end: int) -> bool:
    """Tell whether the degrees allow an Euler path from ``start`` to ``end``.

    For distinct ends both must have odd degree; for a circuit the single
    end must have even degree. Every other vertex must have even degree.
    """
    if start != end:
        if degree(graph, start) % 2 == 0 or degree(graph, end) % 2 == 0:
            return False
    elif degree(graph, start) % 2 != 0:
        return False
    return all(
        degree(graph, x) % 2 == 0
        for x in range(graph.vertex_count)
        if x not in (start, end)
    )