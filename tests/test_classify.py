import pytest

from graphkit.classify import ClassifiedEdge, EdgeKind, classify_edges, is_cyclic
from graphkit.components import count_components
from graphkit.matrix import DirectedGraph, UndirectedGraph


def _build(cls, count, edges):
    graph = cls()
    for i in range(count):
        graph.add_vertex(str(i))
    for u, v in edges:
        graph.add_edge(u, v)
    return graph


DIRECTED_EXAMPLE = [
    ("0", "1"), ("0", "2"), ("0", "3"), ("1", "2"), ("3", "2"),
    ("4", "1"), ("4", "5"), ("4", "6"), ("4", "7"), ("5", "6"),
    ("6", "3"), ("6", "9"), ("7", "8"), ("8", "4"), ("8", "5"),
    ("8", "9"), ("9", "5"), ("10", "11"), ("10", "14"), ("11", "8"),
    ("11", "12"), ("11", "14"), ("11", "15"), ("12", "15"), ("13", "10"),
    ("14", "13"), ("14", "15"),
]

UNDIRECTED_EXAMPLE = [
    ("0", "1"), ("0", "2"), ("0", "3"), ("2", "3"),
    ("4", "5"), ("4", "6"), ("4", "7"), ("4", "8"), ("5", "7"),
    ("6", "8"), ("6", "9"),
    ("10", "11"), ("10", "12"), ("10", "13"), ("11", "12"),
    ("11", "13"), ("11", "14"), ("13", "14"),
]


def test_directed_back_edge():
    graph = _build(DirectedGraph, 3, [("0", "1"), ("1", "2"), ("2", "0")])
    assert classify_edges(graph) == [
        ClassifiedEdge("0", "1", EdgeKind.TREE),
        ClassifiedEdge("1", "2", EdgeKind.TREE),
        ClassifiedEdge("2", "0", EdgeKind.BACK),
    ]


def test_directed_forward_edge():
    graph = _build(DirectedGraph, 3, [("0", "1"), ("1", "2"), ("0", "2")])
    assert [e.kind for e in classify_edges(graph)] == [
        EdgeKind.TREE, EdgeKind.TREE, EdgeKind.FORWARD,
    ]


def test_directed_cross_edge():
    graph = _build(DirectedGraph, 3, [("0", "1"), ("2", "1")])
    assert classify_edges(graph)[-1] == ClassifiedEdge("2", "1", EdgeKind.CROSS)


def test_directed_every_edge_classified_once():
    graph = _build(DirectedGraph, 16, DIRECTED_EXAMPLE)
    result = classify_edges(graph)
    assert sorted((e.source, e.destination) for e in result) == sorted(DIRECTED_EXAMPLE)


def test_directed_tree_edges_form_forest():
    graph = _build(DirectedGraph, 16, DIRECTED_EXAMPLE)
    targets = [e.destination for e in classify_edges(graph) if e.kind is EdgeKind.TREE]
    assert len(targets) == len(set(targets))
    assert "0" not in targets


def test_undirected_only_tree_and_back():
    graph = _build(UndirectedGraph, 15, UNDIRECTED_EXAMPLE)
    kinds = {e.kind for e in classify_edges(graph)}
    assert kinds <= {EdgeKind.TREE, EdgeKind.BACK}


def test_undirected_counts():
    graph = _build(UndirectedGraph, 15, UNDIRECTED_EXAMPLE)
    result = classify_edges(graph)
    tree = [e for e in result if e.kind is EdgeKind.TREE]
    back = [e for e in result if e.kind is EdgeKind.BACK]
    assert len(tree) == len(graph) - count_components(graph)
    assert len(back) == graph.edge_count() - len(tree)


def test_undirected_each_edge_reported_once():
    graph = _build(UndirectedGraph, 15, UNDIRECTED_EXAMPLE)
    seen = [frozenset((e.source, e.destination)) for e in classify_edges(graph)]
    assert len(seen) == len(set(seen)) == graph.edge_count()


@pytest.mark.parametrize(
    "cls,count,edges,expected",
    [
        (DirectedGraph, 4, [("0", "1"), ("0", "2"), ("0", "3"), ("1", "2"), ("3", "2")], False),
        (DirectedGraph, 4, [("0", "1"), ("0", "2"), ("1", "2"), ("2", "3"), ("3", "0")], True),
        (UndirectedGraph, 6, [("0", "1"), ("1", "3"), ("2", "3"), ("3", "4"), ("4", "5")], False),
        (UndirectedGraph, 6, [("0", "1"), ("0", "2"), ("1", "3"), ("2", "3"), ("3", "4"), ("4", "5")], True),
    ],
)
def test_is_cyclic_source_examples(cls, count, edges, expected):
    assert is_cyclic(_build(cls, count, edges)) is expected


def test_empty_graph():
    graph = DirectedGraph()
    assert classify_edges(graph) == []
    assert is_cyclic(graph) is False