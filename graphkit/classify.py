"""Classification of graph edges by depth-first search."""

from __future__ import annotations

import enum
from collections.abc import Iterator
from dataclasses import dataclass
from itertools import count

from graphkit.matrix import AdjacencyMatrixGraph


class EdgeKind(enum.Enum):
    """The kind of an edge with respect to a depth-first search forest."""

    TREE = "Tree"
    BACK = "Back"
    FORWARD = "Forward"
    CROSS = "Cross"


@dataclass(frozen=True)
class ClassifiedEdge:
    """An edge between two named vertices and its kind."""

    source: str
    destination: str
    kind: EdgeKind


class _State(enum.Enum):
    INITIAL = 0
    VISITED = 1
    FINISHED = 2


def _directed(graph: AdjacencyMatrixGraph) -> Iterator[tuple[int, int, EdgeKind]]:
    size = len(graph)
    state = [_State.INITIAL] * size
    discovery = [0] * size
    clock = count(1)
    for root in range(size):
        if state[root] is not _State.INITIAL:
            continue
        state[root] = _State.VISITED
        discovery[root] = next(clock)
        stack = [(root, iter(graph.successors(root)))]
        while stack:
            vertex, neighbours = stack[-1]
            for neighbour in neighbours:
                if state[neighbour] is _State.INITIAL:
                    yield vertex, neighbour, EdgeKind.TREE
                    state[neighbour] = _State.VISITED
                    discovery[neighbour] = next(clock)
                    stack.append((neighbour, iter(graph.successors(neighbour))))
                    break
                if state[neighbour] is _State.VISITED:
                    yield vertex, neighbour, EdgeKind.BACK
                elif discovery[vertex] < discovery[neighbour]:
                    yield vertex, neighbour, EdgeKind.FORWARD
                else:
                    yield vertex, neighbour, EdgeKind.CROSS
            else:
                stack.pop()
                state[vertex] = _State.FINISHED
                next(clock)


def _undirected(graph: AdjacencyMatrixGraph) -> Iterator[tuple[int, int, EdgeKind]]:
    size = len(graph)
    state = [_State.INITIAL] * size
    predecessor: list[int | None] = [None] * size
    for root in range(size):
        if state[root] is not _State.INITIAL:
            continue
        state[root] = _State.VISITED
        stack = [(root, iter(graph.successors(root)))]
        while stack:
            vertex, neighbours = stack[-1]
            for neighbour in neighbours:
                if neighbour == predecessor[vertex]:
                    continue
                if state[neighbour] is _State.INITIAL:
                    predecessor[neighbour] = vertex
                    yield vertex, neighbour, EdgeKind.TREE
                    state[neighbour] = _State.VISITED
                    stack.append((neighbour, iter(graph.successors(neighbour))))
                    break
                if state[neighbour] is _State.VISITED:
                    yield vertex, neighbour, EdgeKind.BACK
            else:
                stack.pop()
                state[vertex] = _State.FINISHED


def classify_edges(graph: AdjacencyMatrixGraph) -> list[ClassifiedEdge]:
    """Classify the edges met by a depth-first search over every vertex.

    Roots are tried by ascending index and neighbours are examined by
    ascending index; edges are listed in the order the search meets them.
    In an undirected graph only tree and back edges occur, and each edge
    is reported once.
    """
    names = graph.vertices()
    search = _directed if graph.directed else _undirected
    return [
        ClassifiedEdge(names[u], names[v], kind) for u, v, kind in search(graph)
    ]


def is_cyclic(graph: AdjacencyMatrixGraph) -> bool:
    """Return True if a depth-first search meets a back edge."""
    search = _directed if graph.directed else _undirected
    return any(kind is EdgeKind.BACK for _, _, kind in search(graph))