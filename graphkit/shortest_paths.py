"""Shortest paths in directed weighted graphs stored as adjacency matrices."""

from __future__ import annotations

import math
from collections import deque
from dataclasses import dataclass

from graphkit.matrix import AdjacencyMatrixGraph, GraphError, VertexNotFoundError


class NegativeCycleError(GraphError):
    """Raised when a graph holds a cycle of negative total weight."""


_NEGATIVE_CYCLE = "There is negative cycle in graph."


def _lookup(names: tuple[str, ...], name: str) -> int:
    try:
        return names.index(name)
    except ValueError:
        raise VertexNotFoundError(f"Invalid Vertex: {name!r}") from None


def _finite(value: float) -> int | None:
    return None if math.isinf(value) else int(value)


@dataclass(frozen=True)
class ShortestPaths:
    """Shortest distances and paths from one source vertex.

    lengths and predecessors are indexed by vertex index; None marks an
    unreachable vertex or a vertex without predecessor.
    """

    source: str
    names: tuple[str, ...]
    lengths: tuple[int | None, ...]
    predecessors: tuple[int | None, ...]

    def distance(self, destination: str) -> int | None:
        """Return the length of a shortest path to destination, or None."""
        return self.lengths[_lookup(self.names, destination)]

    def path(self, destination: str) -> list[str] | None:
        """Return the vertex names on a shortest path to destination, or None."""
        index = _lookup(self.names, destination)
        if self.lengths[index] is None:
            return None
        start = _lookup(self.names, self.source)
        reversed_path = [index]
        while index != start:
            index = self.predecessors[index]
            reversed_path.append(index)
        return [self.names[i] for i in reversed(reversed_path)]


@dataclass(frozen=True)
class AllPairsShortestPaths:
    """The shortest path matrix and predecessor matrix of a graph.

    distances[i][j] is None where no path exists; predecessors[i][j] is the
    vertex before j on a shortest path from i.  The entry from a vertex to
    itself describes the shortest cycle through that vertex.
    """

    names: tuple[str, ...]
    distances: tuple[tuple[int | None, ...], ...]
    predecessors: tuple[tuple[int | None, ...], ...]

    def distance(self, source: str, destination: str) -> int | None:
        """Return the length of a shortest path, or None if there is none."""
        return self.distances[_lookup(self.names, source)][_lookup(self.names, destination)]

    def path(self, source: str, destination: str) -> list[str] | None:
        """Return the vertex names on a shortest path, or None if there is none."""
        s = _lookup(self.names, source)
        v = _lookup(self.names, destination)
        if self.distances[s][v] is None:
            return None
        reversed_path = [v]
        v = self.predecessors[s][v]
        while v != s:
            reversed_path.append(v)
            v = self.predecessors[s][v]
        reversed_path.append(s)
        return [self.names[i] for i in reversed(reversed_path)]


def _result(
    graph: AdjacencyMatrixGraph,
    source: str,
    lengths: list[float],
    predecessors: list[int | None],
) -> ShortestPaths:
    return ShortestPaths(
        source=source,
        names=tuple(graph.vertices()),
        lengths=tuple(_finite(value) for value in lengths),
        predecessors=tuple(predecessors),
    )


def dijkstra(graph: AdjacencyMatrixGraph, source: str) -> ShortestPaths:
    """Find shortest paths from source by Dijkstra's algorithm.

    Among temporary vertices with equal path lengths, the one with the
    lowest index is made permanent first.
    """
    start = graph.index_of(source)
    count = len(graph)
    adj = graph.matrix()
    permanent = [False] * count
    predecessor: list[int | None] = [None] * count
    length: list[float] = [math.inf] * count
    length[start] = 0

    while True:
        current = None
        best = math.inf
        for vertex in range(count):
            if not permanent[vertex] and length[vertex] < best:
                best = length[vertex]
                current = vertex
        if current is None:
            break
        permanent[current] = True
        for vertex in graph.successors(current):
            candidate = length[current] + adj[current][vertex]
            if not permanent[vertex] and candidate < length[vertex]:
                predecessor[vertex] = current
                length[vertex] = candidate

    return _result(graph, source, length, predecessor)


def bellman_ford(graph: AdjacencyMatrixGraph, source: str) -> ShortestPaths:
    """Find shortest paths from source by the queue-based Bellman-Ford algorithm.

    Negative edge weights are allowed; a negative cycle reachable from
    source raises NegativeCycleError.
    """
    start = graph.index_of(source)
    count = len(graph)
    adj = graph.matrix()
    predecessor: list[int | None] = [None] * count
    length: list[float] = [math.inf] * count
    length[start] = 0
    dequeued = [0] * count

    queue = deque([start])
    in_queue = [False] * count
    in_queue[start] = True

    while queue:
        current = queue.popleft()
        in_queue[current] = False
        dequeued[current] += 1
        if dequeued[current] > count:
            raise NegativeCycleError(_NEGATIVE_CYCLE)
        for vertex in graph.successors(current):
            candidate = length[current] + adj[current][vertex]
            if candidate < length[vertex]:
                predecessor[vertex] = current
                length[vertex] = candidate
                if not in_queue[vertex]:
                    queue.append(vertex)
                    in_queue[vertex] = True

    return _result(graph, source, length, predecessor)


def floyd_warshall(graph: AdjacencyMatrixGraph) -> AllPairsShortestPaths:
    """Compute all shortest paths by Floyd-Warshall (modified Warshall's) algorithm.

    Raises NegativeCycleError if any vertex lies on a negative cycle.
    """
    count = len(graph)
    adj = graph.matrix()
    dist: list[list[float]] = [
        [math.inf if value == 0 else value for value in row] for row in adj
    ]
    pred: list[list[int | None]] = [
        [None if value == 0 else i for value in row] for i, row in enumerate(adj)
    ]

    for k in range(count):
        row_k = dist[k]
        pred_k = pred[k]
        for i in range(count):
            row_i = dist[i]
            through = row_i[k]
            if math.isinf(through):
                continue
            for j in range(count):
                candidate = through + row_k[j]
                if candidate < row_i[j]:
                    row_i[j] = candidate
                    pred[i][j] = pred_k[j]

    if any(dist[i][i] < 0 for i in range(count)):
        raise NegativeCycleError(_NEGATIVE_CYCLE)

    return AllPairsShortestPaths(
        names=tuple(graph.vertices()),
        distances=tuple(tuple(_finite(value) for value in row) for row in dist),
        predecessors=tuple(tuple(row) for row in pred),
    )