"""Minimum spanning trees of undirected weighted graphs."""

from __future__ import annotations

import heapq
import math
from dataclasses import dataclass, field

from graphkit.matrix import AdjacencyMatrixGraph, GraphError


class DisconnectedGraphError(GraphError):
    """Raised when a graph is not connected and has no spanning tree."""


@dataclass(frozen=True)
class SpanningTree:
    """The edges of a spanning tree, in the order they were chosen, and their total weight."""

    edges: list[tuple[str, str]] = field(default_factory=list)
    weight: int = 0


_NOT_CONNECTED = "Graph is not connected, spanning tree is not possible."


def _find_root(father: list[int | None], vertex: int) -> int:
    while father[vertex] is not None:
        vertex = father[vertex]
    return vertex


def kruskal(graph: AdjacencyMatrixGraph) -> SpanningTree:
    """Build a minimum spanning tree by Kruskal's algorithm.

    Edges are taken by ascending weight; among equal weights, by ascending
    vertex indices.  Each chosen edge is reported as (lower, higher) index.
    """
    count = len(graph)
    adj = graph.matrix()
    names = graph.vertices()

    queue = [
        (adj[u][v], u, v)
        for u in range(count)
        for v in graph.successors(u)
        if v >= u
    ]
    heapq.heapify(queue)

    father: list[int | None] = [None] * count
    chosen: list[tuple[int, int]] = []
    while queue and len(chosen) < count - 1:
        _, u, v = heapq.heappop(queue)
        root_u = _find_root(father, u)
        root_v = _find_root(father, v)
        if root_u != root_v:
            chosen.append((u, v))
            father[root_v] = root_u

    if len(chosen) < count - 1:
        raise DisconnectedGraphError(_NOT_CONNECTED)

    return SpanningTree(
        edges=[(names[u], names[v]) for u, v in chosen],
        weight=sum(adj[u][v] for u, v in chosen),
    )


def prim(graph: AdjacencyMatrixGraph, root: str) -> SpanningTree:
    """Build a minimum spanning tree by Prim's algorithm, growing from root.

    Each chosen edge is reported as (predecessor, vertex).  Among temporary
    vertices with equal labels, the one with the lowest index is taken.
    """
    start = graph.index_of(root)
    count = len(graph)
    adj = graph.matrix()
    names = graph.vertices()

    permanent = [False] * count
    predecessor: list[int | None] = [None] * count
    length: list[float] = [math.inf] * count
    length[start] = 0

    chosen: list[tuple[int, int]] = []
    while True:
        current = None
        best = math.inf
        for vertex in range(count):
            if not permanent[vertex] and length[vertex] < best:
                best = length[vertex]
                current = vertex

        if current is None:
            if len(chosen) == count - 1:
                break
            raise DisconnectedGraphError(_NOT_CONNECTED)

        permanent[current] = True
        if current != start:
            chosen.append((predecessor[current], current))

        for vertex in graph.successors(current):
            if not permanent[vertex] and adj[current][vertex] < length[vertex]:
                predecessor[vertex] = current
                length[vertex] = adj[current][vertex]

    return SpanningTree(
        edges=[(names[u], names[v]) for u, v in chosen],
        weight=sum(adj[u][v] for u, v in chosen),
    )