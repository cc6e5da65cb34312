"""Path finding between two vertices of an undirected graph."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator

from dsakit.graph import Graph


def _check_vertex(graph: Graph, vertex: int) -> None:
    if not 0 <= vertex < graph.vertex_count:
        raise ValueError(
            f"vertex {vertex} is not in a graph of {graph.vertex_count} vertices"
        )


def _trace(parents: dict[int, int], source: int, dest: int) -> list[int]:
    path = [dest]
    while path[-1] != source:
        path.append(parents[path[-1]])
    path.reverse()
    return path


def find_path_bfs(graph: Graph, source: int, dest: int) -> list[int] | None:
    """Return a fewest-edge path from ``source`` to ``dest``, or None.

    Neighbours are explored in increasing vertex order. The source counts
    as visited before the search starts, so a vertex has no path to itself.
    """
    _check_vertex(graph, source)
    _check_vertex(graph, dest)
    parents = {source: source}
    queue = deque([source])
    while queue:
        v = queue.popleft()
        for w in range(graph.vertex_count):
            if graph.adjacent(v, w) and w not in parents:
                parents[w] = v
                if w == dest:
                    return _trace(parents, source, dest)
                queue.append(w)
    return None


def find_path_dfs(graph: Graph, source: int, dest: int) -> list[int] | None:
    """Return the first path from ``source`` to ``dest`` found depth first.

    Neighbours are tried in increasing vertex order. The source counts as
    visited before the search starts, so a vertex has no path to itself.
    """
    _check_vertex(graph, source)
    _check_vertex(graph, dest)
    parents = {source: source}
    stack: list[tuple[int, Iterator[int]]] = [
        (source, iter(range(graph.vertex_count)))
    ]
    while stack:
        v, candidates = stack[-1]
        for w in candidates:
            if graph.adjacent(v, w) and w not in parents:
                parents[w] = v
                if w == dest:
                    return _trace(parents, source, dest)
                stack.append((w, iter(range(graph.vertex_count))))
                break
        else:
            stack.pop()
    return None