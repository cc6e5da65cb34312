import pytest

from dsakit.graph import Graph
from dsakit.paths import find_path_bfs, find_path_dfs


def _graph(vertex_count, edges):
    graph = Graph(vertex_count)
    for v, w in edges:
        graph.insert_edge(v, w)
    return graph


BFS_EDGES = [
    (0, 1), (0, 2), (0, 5), (1, 5), (2, 3), (3, 4), (3, 5), (3, 8),
    (4, 5), (4, 7), (4, 8), (5, 6), (7, 8), (7, 9), (8, 9),
]
DFS_EDGES = [
    (0, 1), (0, 4), (0, 5), (5, 4), (4, 2), (4, 3), (5, 3), (1, 2), (3, 2),
]


def _assert_valid_path(graph, path, source, dest):
    assert path[0] == source
    assert path[-1] == dest
    assert len(set(path)) == len(path)
    for a, b in zip(path, path[1:]):
        assert graph.adjacent(a, b)


def test_bfs_source_example():
    graph = _graph(10, BFS_EDGES)
    assert find_path_bfs(graph, 0, 6) == [0, 5, 6]


def test_dfs_source_example():
    graph = _graph(6, DFS_EDGES)
    assert find_path_dfs(graph, 0, 5) == [0, 1, 2, 3, 4, 5]


@pytest.mark.parametrize("finder", [find_path_bfs, find_path_dfs])
@pytest.mark.parametrize("dest", [1, 4, 6, 7, 9])
def test_paths_are_valid(finder, dest):
    graph = _graph(10, BFS_EDGES)
    path = finder(graph, 0, dest)
    _assert_valid_path(graph, path, 0, dest)


@pytest.mark.parametrize("dest", range(1, 10))
def test_bfs_is_never_longer_than_dfs(dest):
    graph = _graph(10, BFS_EDGES)
    assert len(find_path_bfs(graph, 0, dest)) <= len(find_path_dfs(graph, 0, dest))


@pytest.mark.parametrize("finder", [find_path_bfs, find_path_dfs])
def test_disconnected_vertices_have_no_path(finder):
    graph = _graph(4, [(0, 1), (2, 3)])
    assert finder(graph, 0, 3) is None


@pytest.mark.parametrize("finder", [find_path_bfs, find_path_dfs])
def test_vertex_has_no_path_to_itself(finder):
    graph = _graph(3, [(0, 1), (1, 2)])
    assert finder(graph, 1, 1) is None


@pytest.mark.parametrize("finder", [find_path_bfs, find_path_dfs])
def test_direct_edge_gives_two_vertex_path(finder):
    graph = _graph(3, [(0, 2)])
    assert finder(graph, 0, 2) == [0, 2]


@pytest.mark.parametrize("finder", [find_path_bfs, find_path_dfs])
@pytest.mark.parametrize("source, dest", [(-1, 0), (0, 3), (5, 1)])
def test_invalid_vertex_raises(finder, source, dest):
    graph = _graph(3, [(0, 1)])
    with pytest.raises(ValueError):
        finder(graph, source, dest)