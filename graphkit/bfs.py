"""Breadth-first search over graphs stored as adjacency matrices."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator

from graphkit.matrix import AdjacencyMatrixGraph


def _search(
    graph: AdjacencyMatrixGraph, start: int, seen: set[int]
) -> Iterator[tuple[int, int | None]]:
    """Yield (vertex, predecessor) pairs in the order vertices leave the queue.

    A vertex is marked as seen when it enters the queue; neighbours are
    examined by ascending index.  The start vertex has no predecessor.
    """
    seen.add(start)
    queue: deque[tuple[int, int | None]] = deque([(start, None)])
    while queue:
        vertex, parent = queue.popleft()
        yield vertex, parent
        for neighbour in graph.successors(vertex):
            if neighbour not in seen:
                seen.add(neighbour)
                queue.append((neighbour, vertex))


def _search_all(
    graph: AdjacencyMatrixGraph, start: str
) -> Iterator[list[tuple[int, int | None]]]:
    """Yield one run of the search per tree, beginning at start.

    After the first run, the remaining vertices are tried as roots by
    ascending index.
    """
    first = graph.index_of(start)
    seen: set[int] = set()
    yield list(_search(graph, first, seen))
    for vertex in range(len(graph)):
        if vertex not in seen:
            yield list(_search(graph, vertex, seen))


def bfs_order(graph: AdjacencyMatrixGraph, start: str) -> list[str]:
    """Return the names of the vertices reachable from start, in visiting order."""
    names = graph.vertices()
    return [names[v] for v, _ in _search(graph, graph.index_of(start), set())]


def bfs_order_all(graph: AdjacencyMatrixGraph, start: str) -> list[list[str]]:
    """Visit every vertex, returning the visiting order of each separate run.

    The first run starts at start; every later run starts at the unvisited
    vertex with the lowest index.
    """
    names = graph.vertices()
    return [[names[v] for v, _ in run] for run in _search_all(graph, start)]


def bfs_distances(graph: AdjacencyMatrixGraph, start: str) -> dict[str, int | None]:
    """Return the number of edges on a shortest path from start to each vertex.

    Vertices that cannot be reached map to None.
    """
    names = graph.vertices()
    distance: dict[int, int] = {}
    for vertex, parent in _search(graph, graph.index_of(start), set()):
        distance[vertex] = 0 if parent is None else distance[parent] + 1
    return {name: distance.get(index) for index, name in enumerate(names)}


def bfs_shortest_path(
    graph: AdjacencyMatrixGraph, source: str, destination: str
) -> list[str] | None:
    """Return the vertex names on a shortest path, or None if there is none."""
    names = graph.vertices()
    target = graph.index_of(destination)
    predecessor: dict[int, int | None] = {}
    for vertex, parent in _search(graph, graph.index_of(source), set()):
        predecessor[vertex] = parent
        if vertex == target:
            break
    if target not in predecessor:
        return None
    path: list[str] = []
    current: int | None = target
    while current is not None:
        path.append(names[current])
        current = predecessor[current]
    path.reverse()
    return path


def bfs_tree_edges(graph: AdjacencyMatrixGraph, start: str) -> list[tuple[str, str]]:
    """Return the tree edges of a search visiting every vertex, in discovery order."""
    names = graph.vertices()
    return [
        (names[parent], names[vertex])
        for run in _search_all(graph, start)
        for vertex, parent in run
        if parent is not None
    ]


def is_connected(graph: AdjacencyMatrixGraph) -> bool:
    """Return True if a search from the first vertex reaches every vertex."""
    if len(graph) == 0:
        return True
    seen: set[int] = set()
    for _ in _search(graph, 0, seen):
        pass
    return len(seen) == len(graph)