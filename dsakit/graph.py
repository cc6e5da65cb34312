"""Undirected graphs as adjacency matrices and adjacency lists."""

from __future__ import annotations

from collections.abc import Iterable


def _check_vertex(vertex: int, vertex_count: int) -> None:
    if not 0 <= vertex < vertex_count:
        raise ValueError(
            f"vertex {vertex} is not in a graph of {vertex_count} vertices"
        )


class Graph:
    """Undirected graph stored as an adjacency matrix."""

    def __init__(self, vertex_count: int) -> None:
        if vertex_count < 0:
            raise ValueError("vertex_count must not be negative")
        self.vertex_count = vertex_count
        self.edge_count = 0
        self._edges = [[False] * vertex_count for _ in range(vertex_count)]

    def insert_edge(self, v: int, w: int) -> None:
        """Add the edge v-w unless it is already present."""
        _check_vertex(v, self.vertex_count)
        _check_vertex(w, self.vertex_count)
        if not self._edges[v][w]:
            self._edges[v][w] = True
            self._edges[w][v] = True
            self.edge_count += 1

    def remove_edge(self, v: int, w: int) -> None:
        """Remove the edge v-w if it is present."""
        _check_vertex(v, self.vertex_count)
        _check_vertex(w, self.vertex_count)
        if self._edges[v][w]:
            self._edges[v][w] = False
            self._edges[w][v] = False
            self.edge_count -= 1

    def adjacent(self, v: int, w: int) -> bool:
        """Tell whether v and w are joined by an edge."""
        _check_vertex(v, self.vertex_count)
        _check_vertex(w, self.vertex_count)
        return self._edges[v][w]

    def show(self) -> str:
        """Describe the graph: vertex and edge counts, then each edge once."""
        lines = [
            f"Number of vertices: {self.vertex_count}",
            f"Number of edges: {self.edge_count}",
        ]
        lines.extend(
            f"Edge {i} - {j}"
            for i in range(self.vertex_count)
            for j in range(i + 1, self.vertex_count)
            if self._edges[i][j]
        )
        return "\n".join(lines) + "\n"


def adjacency_matrix(
    vertex_count: int, edges: Iterable[tuple[int, int]]
) -> list[list[int]]:
    """Build a symmetric 0/1 adjacency matrix from undirected edges."""
    if vertex_count < 0:
        raise ValueError("vertex_count must not be negative")
    matrix = [[0] * vertex_count for _ in range(vertex_count)]
    for a, b in edges:
        _check_vertex(a, vertex_count)
        _check_vertex(b, vertex_count)
        matrix[a][b] = 1
        matrix[b][a] = 1
    return matrix


def format_adjacency_matrix(matrix: list[list[int]]) -> str:
    """Render each row as ``i: a b c ``, one row per line."""
    return "".join(
        f"{i}: " + "".join(f"{cell} " for cell in row) + "\n"
        for i, row in enumerate(matrix)
    )


def adjacency_list(
    vertex_count: int, edges: Iterable[tuple[int, int]]
) -> list[list[int]]:
    """Build neighbour lists, recording each undirected edge at both ends."""
    if vertex_count < 0:
        raise ValueError("vertex_count must not be negative")
    lists: list[list[int]] = [[] for _ in range(vertex_count)]
    for a, b in edges:
        _check_vertex(a, vertex_count)
        _check_vertex(b, vertex_count)
        lists[a].append(b)
        lists[b].append(a)
    return lists


def format_adjacency_list(lists: list[list[int]]) -> str:
    """Render each vertex as ``Vertex i:->n1->n2``, one per line."""
    return "".join(
        f"Vertex {i}:" + "".join(f"->{n}" for n in neighbours) + "\n"
        for i, neighbours in enumerate(lists)
    )