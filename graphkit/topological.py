"""Topological ordering of directed acyclic graphs."""

from __future__ import annotations

from collections import deque

from graphkit.matrix import AdjacencyMatrixGraph, GraphError


class CycleError(GraphError):
    """Raised when a graph has a cycle and cannot be ordered."""


def topological_order(graph: AdjacencyMatrixGraph) -> list[str]:
    """Return the vertex names in topological order.

    Vertices with no remaining incoming edges are taken in first-in,
    first-out order, and successors are visited by ascending index.
    The graph itself is left unchanged.
    """
    count = len(graph)
    indegree = [0] * count
    for u in range(count):
        for v in graph.successors(u):
            indegree[v] += 1

    queue = deque(v for v in range(count) if indegree[v] == 0)
    names = graph.vertices()
    order: list[str] = []

    while queue:
        u = queue.popleft()
        order.append(names[u])
        for v in graph.successors(u):
            indegree[v] -= 1
            if indegree[v] == 0:
                queue.append(v)

    if len(order) < count:
        raise CycleError("Graph contains cycle. Topological order is not possible.")
    return order