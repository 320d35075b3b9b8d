import pytest

from graphkit.matrix import DirectedGraph, UndirectedGraph
from graphkit.topological import CycleError, topological_order

DAG_EDGES = [
    ("0", "1"), ("0", "5"), ("1", "4"), ("1", "5"), ("2", "1"), ("2", "3"),
    ("3", "1"), ("3", "4"), ("4", "5"), ("6", "4"), ("6", "5"),
]
CYCLIC_EDGES = [("0", "1"), ("0", "2"), ("1", "3"), ("2", "4"), ("3", "0"), ("3", "4")]


def build(count, edges, cls=DirectedGraph):
    graph = cls()
    for i in range(count):
        graph.add_vertex(str(i))
    for source, destination in edges:
        graph.add_edge(source, destination)
    return graph


def test_worked_example_order():
    graph = build(7, DAG_EDGES)
    assert topological_order(graph) == ["0", "2", "6", "3", "1", "4", "5"]


def test_order_respects_every_edge():
    graph = build(7, DAG_EDGES)
    order = topological_order(graph)
    position = {name: i for i, name in enumerate(order)}
    assert sorted(order) == sorted(graph.vertices())
    for source, destination in DAG_EDGES:
        assert position[source] < position[destination]


def test_graph_left_unchanged():
    graph = build(7, DAG_EDGES)
    before = graph.matrix()
    topological_order(graph)
    assert graph.matrix() == before
    assert graph.edge_count() == len(DAG_EDGES)


def test_isolated_vertices_keep_insertion_order():
    graph = DirectedGraph()
    for name in ["x", "y", "z"]:
        graph.add_vertex(name)
    assert topological_order(graph) == ["x", "y", "z"]


def test_empty_graph():
    assert topological_order(DirectedGraph()) == []


def test_cycle_raises():
    graph = build(5, CYCLIC_EDGES)
    with pytest.raises(CycleError, match="contains cycle"):
        topological_order(graph)


def test_undirected_edge_counts_as_cycle():
    graph = build(2, [("0", "1")], cls=UndirectedGraph)
    with pytest.raises(CycleError):
        topological_order(graph)