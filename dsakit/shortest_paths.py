"""Single-source and all-pairs shortest paths over weighted directed edges.

Edges are ``(source, destination, weight)`` triples; an unreachable vertex
has distance ``math.inf``.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from typing import Any

INF = math.inf


class NegativeCycleError(ValueError):
    """The graph holds a cycle of negative total weight."""


def _check_vertex(vertex: int, vertex_count: int) -> None:
    if not 0 <= vertex < vertex_count:
        raise ValueError(
            f"vertex {vertex} is not in a graph of {vertex_count} vertices"
        )


def _edge_list(
    vertex_count: int, edges: Iterable[tuple[int, int, Any]]
) -> list[tuple[int, int, Any]]:
    if vertex_count < 0:
        raise ValueError("vertex_count must not be negative")
    result = []
    for src, dst, weight in edges:
        _check_vertex(src, vertex_count)
        _check_vertex(dst, vertex_count)
        result.append((src, dst, weight))
    return result


def _weight_matrix(
    vertex_count: int, edges: Iterable[tuple[int, int, Any]]
) -> list[list[Any]]:
    matrix: list[list[Any]] = [[INF] * vertex_count for _ in range(vertex_count)]
    for i in range(vertex_count):
        matrix[i][i] = 0
    # A later edge between the same pair replaces an earlier one.
    for src, dst, weight in _edge_list(vertex_count, edges):
        matrix[src][dst] = weight
    return matrix


def bellman_ford(
    vertex_count: int, edges: Iterable[tuple[int, int, Any]], source: int
) -> list[Any]:
    """Distances from ``source``; negative weights allowed.

    Raises NegativeCycleError when a negative cycle is reachable.
    """
    edge_list = _edge_list(vertex_count, edges)
    _check_vertex(source, vertex_count)
    dist: list[Any] = [INF] * vertex_count
    dist[source] = 0
    for _ in range(vertex_count):
        for u, v, w in edge_list:
            if dist[u] != INF and dist[u] + w < dist[v]:
                dist[v] = dist[u] + w
    for u, v, w in edge_list:
        if dist[u] != INF and dist[u] + w < dist[v]:
            raise NegativeCycleError(
                "graph contains negative weight cycle; shortest distance "
                "not guaranteed"
            )
    return dist


def dijkstra(
    vertex_count: int, edges: Iterable[tuple[int, int, Any]], source: int
) -> list[Any]:
    """Distances from ``source`` for non-negative edge weights."""
    weights = _weight_matrix(vertex_count, edges)
    _check_vertex(source, vertex_count)
    dist: list[Any] = [INF] * vertex_count
    dist[source] = 0
    done = [False] * vertex_count
    for _ in range(vertex_count - 1):
        candidates = [i for i in range(vertex_count) if not done[i] and dist[i] < INF]
        if not candidates:
            break
        u = min(candidates, key=dist.__getitem__)
        done[u] = True
        for v in range(vertex_count):
            weight = weights[u][v]
            if not done[v] and weight != INF and dist[u] + weight < dist[v]:
                dist[v] = dist[u] + weight
    return dist


def floyd_warshall(
    vertex_count: int, edges: Iterable[tuple[int, int, Any]]
) -> list[list[Any]]:
    """Matrix of shortest distances between every ordered pair of vertices."""
    dist = _weight_matrix(vertex_count, edges)
    for k in range(vertex_count):
        for i in range(vertex_count):
            through = dist[i][k]
            if through == INF:
                continue
            for j in range(vertex_count):
                if dist[k][j] != INF and through + dist[k][j] < dist[i][j]:
                    dist[i][j] = through + dist[k][j]
    return dist


def _cell(distance: Any) -> str:
    return "INF" if distance == INF else f"{distance}"


def format_distances(distances: Sequence[Any]) -> str:
    """Render a vertex/distance table, one vertex per line."""
    return "\nVertex  Distance\n" + "".join(
        f"{i}\t{_cell(d)}\n" for i, d in enumerate(distances)
    )


def format_distance_matrix(matrix: Sequence[Sequence[Any]]) -> str:
    """Render an all-pairs distance matrix, tab separated."""
    return "\nThe Distance matrix for Floyd - Warshall\n" + "".join(
        "".join(f"{_cell(d)}\t" for d in row) + "\n" for row in matrix
    )