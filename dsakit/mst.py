"""Minimum spanning trees by Kruskal's and Prim's algorithms."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any, NamedTuple


class WeightedEdge(NamedTuple):
    """An undirected edge of a spanning tree."""

    source: int
    dest: int
    weight: Any


def _check_vertex(vertex: int, vertex_count: int) -> None:
    if not 0 <= vertex < vertex_count:
        raise ValueError(
            f"vertex {vertex} is not in a graph of {vertex_count} vertices"
        )


def kruskal(
    vertex_count: int, edges: Iterable[tuple[int, int, Any]]
) -> list[WeightedEdge]:
    """Pick the lightest edges that join separate trees, lightest first.

    Stops after ``vertex_count - 1`` edges; a disconnected graph yields a
    spanning forest.
    """
    if vertex_count < 0:
        raise ValueError("vertex_count must not be negative")
    edge_list = [WeightedEdge(*edge) for edge in edges]
    for edge in edge_list:
        _check_vertex(edge.source, vertex_count)
        _check_vertex(edge.dest, vertex_count)
    edge_list.sort(key=lambda edge: edge.weight)

    parent = list(range(vertex_count))
    rank = [0] * vertex_count

    def find(i: int) -> int:
        root = i
        while parent[root] != root:
            root = parent[root]
        while parent[i] != root:
            parent[i], i = root, parent[i]
        return root

    result: list[WeightedEdge] = []
    for edge in edge_list:
        if len(result) >= vertex_count - 1:
            break
        x, y = find(edge.source), find(edge.dest)
        if x == y:
            continue
        result.append(edge)
        if rank[x] < rank[y]:
            parent[x] = y
        elif rank[x] > rank[y]:
            parent[y] = x
        else:
            parent[y] = x
            rank[x] += 1
    return result


def prim(matrix: Sequence[Sequence[Any]]) -> list[WeightedEdge]:
    """Grow a tree from vertex 0 over an adjacency matrix (0 means no edge).

    Each step adds the lightest edge leaving the tree; raises ValueError
    when the graph is not connected.
    """
    n = len(matrix)
    if any(len(row) != n for row in matrix):
        raise ValueError("adjacency matrix must be square")
    if n == 0:
        return []
    selected = [False] * n
    selected[0] = True
    result: list[WeightedEdge] = []
    for _ in range(n - 1):
        best: WeightedEdge | None = None
        for i in range(n):
            if not selected[i]:
                continue
            for j in range(n):
                weight = matrix[i][j]
                if not selected[j] and weight and (
                    best is None or weight < best.weight
                ):
                    best = WeightedEdge(i, j, weight)
        if best is None:
            raise ValueError("graph is not connected")
        selected[best.dest] = True
        result.append(best)
    return result