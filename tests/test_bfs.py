import pytest

from graphkit.bfs import (
    bfs_distances,
    bfs_order,
    bfs_order_all,
    bfs_shortest_path,
    bfs_tree_edges,
    is_connected,
)
from graphkit.matrix import DirectedGraph, UndirectedGraph, VertexNotFoundError

DIRECTED_EDGES = [
    ("0", "1"), ("0", "3"), ("0", "4"), ("1", "2"), ("2", "5"), ("3", "4"),
    ("3", "6"), ("4", "5"), ("4", "7"), ("6", "4"), ("6", "7"), ("7", "5"),
    ("7", "8"),
]

CONNECTED_EDGES = [
    ("0", "1"), ("0", "3"), ("1", "2"), ("1", "4"), ("1", "5"), ("2", "3"),
    ("2", "5"), ("3", "6"), ("4", "7"), ("5", "6"), ("5", "7"), ("5", "8"),
    ("6", "9"), ("7", "8"), ("8", "9"),
]

DISCONNECTED_EDGES = [
    ("0", "1"), ("0", "3"), ("1", "2"),
    ("4", "5"), ("4", "7"), ("4", "8"), ("5", "6"), ("5", "8"), ("6", "9"),
    ("7", "8"), ("8", "9"),
    ("10", "11"), ("10", "13"), ("10", "14"), ("11", "12"), ("12", "13"),
    ("13", "14"),
]


def build(cls, count, edges):
    graph = cls()
    for i in range(count):
        graph.add_vertex(str(i))
    for u, v in edges:
        graph.add_edge(u, v)
    return graph


@pytest.fixture
def directed():
    return build(DirectedGraph, 9, DIRECTED_EDGES)


def test_bfs_order_from_zero(directed):
    assert bfs_order(directed, "0") == ["0", "1", "3", "4", "2", "6", "5", "7", "8"]


def test_bfs_order_chain_follows_chain():
    names = ["a", "b", "c", "d"]
    graph = DirectedGraph()
    for name in names:
        graph.add_vertex(name)
    for u, v in zip(names, names[1:]):
        graph.add_edge(u, v)
    assert bfs_order(graph, "a") == names


def test_bfs_order_only_reaches_reachable(directed):
    order = bfs_order(directed, "4")
    assert order[0] == "4"
    assert len(order) == len(set(order))
    distances = bfs_distances(directed, "4")
    assert set(order) == {name for name, d in distances.items() if d is not None}


def test_bfs_order_all_visits_each_vertex_once(directed):
    runs = bfs_order_all(directed, "4")
    assert runs[0][0] == "4"
    flat = [name for run in runs for name in run]
    assert sorted(flat) == sorted(directed.vertices())
    assert len(flat) == len(directed)


def test_bfs_distances_respect_edges(directed):
    distances = bfs_distances(directed, "0")
    assert distances["0"] == 0
    for u, v in DIRECTED_EDGES:
        if distances[u] is not None:
            assert distances[v] is not None
            assert distances[v] <= distances[u] + 1


def test_bfs_shortest_path(directed):
    path = bfs_shortest_path(directed, "0", "8")
    assert path[0] == "0" and path[-1] == "8"
    assert len(path) - 1 == bfs_distances(directed, "0")["8"] == 3
    for u, v in zip(path, path[1:]):
        assert directed.has_edge(u, v)


def test_bfs_shortest_path_to_self(directed):
    assert bfs_shortest_path(directed, "5", "5") == ["5"]


def test_no_path(directed):
    assert bfs_shortest_path(directed, "8", "0") is None
    assert bfs_distances(directed, "8")["0"] is None


def test_bfs_tree_edges_form_a_forest(directed):
    edges = bfs_tree_edges(directed, "0")
    runs = bfs_order_all(directed, "0")
    assert len(edges) == len(directed) - len(runs)
    children = [v for _, v in edges]
    assert len(children) == len(set(children))
    for u, v in edges:
        assert directed.has_edge(u, v)


def test_tree_edges_match_distances(directed):
    distances = bfs_distances(directed, "0")
    for u, v in bfs_tree_edges(directed, "0"):
        assert distances[v] == distances[u] + 1


def test_is_connected():
    assert is_connected(build(UndirectedGraph, 10, CONNECTED_EDGES)) is True
    assert is_connected(build(UndirectedGraph, 15, DISCONNECTED_EDGES)) is False


def test_disconnected_runs_are_components():
    graph = build(UndirectedGraph, 15, DISCONNECTED_EDGES)
    runs = bfs_order_all(graph, "0")
    assert len(runs) == 3
    assert [run[0] for run in runs] == ["0", "4", "10"]


def test_unknown_vertex_raises(directed):
    with pytest.raises(VertexNotFoundError):
        bfs_order(directed, "99")
    with pytest.raises(VertexNotFoundError):
        bfs_shortest_path(directed, "0", "99")