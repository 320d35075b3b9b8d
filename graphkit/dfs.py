"""Depth-first search over graphs stored as adjacency matrices."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from itertools import count

from graphkit.matrix import AdjacencyMatrixGraph


@dataclass(frozen=True)
class VisitTimes:
    """When a vertex was first reached and when its search was finished."""

    discovery: int
    finishing: int


def _stack_search(
    graph: AdjacencyMatrixGraph,
    start: int,
    visited: list[bool],
    predecessor: dict[int, int | None] | None = None,
) -> Iterator[int]:
    """Yield vertices in the order an explicit stack visits them.

    Unvisited neighbours are pushed by descending index so that the
    lowest index is popped first.  When predecessor is given, each push
    records the vertex that pushed it.
    """
    stack = [start]
    while stack:
        vertex = stack.pop()
        if not visited[vertex]:
            visited[vertex] = True
            yield vertex
        for neighbour in reversed(graph.successors(vertex)):
            if not visited[neighbour]:
                stack.append(neighbour)
                if predecessor is not None:
                    predecessor[neighbour] = vertex


def _stack_runs(
    graph: AdjacencyMatrixGraph,
    start: str,
    predecessor: dict[int, int | None] | None = None,
) -> Iterator[list[int]]:
    """Yield one stack search per tree: first from start, then from the
    lowest-indexed vertex not yet visited."""
    first = graph.index_of(start)
    visited = [False] * len(graph)
    yield list(_stack_search(graph, first, visited, predecessor))
    for vertex in range(len(graph)):
        if not visited[vertex]:
            yield list(_stack_search(graph, vertex, visited, predecessor))


def _recursive_visit(
    graph: AdjacencyMatrixGraph,
    start: int,
    visited: list[bool],
    clock: Iterator[int],
    times: dict[int, VisitTimes],
) -> list[int]:
    """Run a recursive-style search from start and return the discovery order.

    The recursion is kept on an explicit stack of neighbour iterators, so
    deep graphs do not hit the interpreter's recursion limit.
    """
    visited[start] = True
    order = [start]
    discovery = {start: next(clock)}
    stack = [(start, iter(graph.successors(start)))]
    while stack:
        vertex, neighbours = stack[-1]
        for neighbour in neighbours:
            if not visited[neighbour]:
                visited[neighbour] = True
                order.append(neighbour)
                discovery[neighbour] = next(clock)
                stack.append((neighbour, iter(graph.successors(neighbour))))
                break
        else:
            stack.pop()
            times[vertex] = VisitTimes(discovery[vertex], next(clock))
    return order


def dfs_order(graph: AdjacencyMatrixGraph, start: str) -> list[str]:
    """Return the names of the vertices reachable from start, in stack-search order."""
    names = graph.vertices()
    visited = [False] * len(graph)
    return [names[v] for v in _stack_search(graph, graph.index_of(start), visited)]


def dfs_order_all(graph: AdjacencyMatrixGraph, start: str) -> list[list[str]]:
    """Visit every vertex, returning the visiting order of each separate run.

    The first run starts at start; every later run starts at the unvisited
    vertex with the lowest index.
    """
    names = graph.vertices()
    return [[names[v] for v in run] for run in _stack_runs(graph, start)]


def recursive_dfs_order(graph: AdjacencyMatrixGraph, start: str) -> list[str]:
    """Return the vertices reachable from start in recursive-search order."""
    names = graph.vertices()
    visited = [False] * len(graph)
    order = _recursive_visit(graph, graph.index_of(start), visited, count(1), {})
    return [names[v] for v in order]


def dfs_times(graph: AdjacencyMatrixGraph, start: str) -> dict[str, VisitTimes]:
    """Return the discovery and finishing time of every vertex.

    The search starts at start and then restarts from each unvisited
    vertex by ascending index.  Times count up from 1 over all runs.
    """
    names = graph.vertices()
    visited = [False] * len(graph)
    clock = count(1)
    times: dict[int, VisitTimes] = {}
    _recursive_visit(graph, graph.index_of(start), visited, clock, times)
    for vertex in range(len(graph)):
        if not visited[vertex]:
            _recursive_visit(graph, vertex, visited, clock, times)
    return {names[v]: times[v] for v in range(len(graph))}


def _predecessor_indices(
    graph: AdjacencyMatrixGraph, start: str
) -> dict[int, int | None]:
    predecessor: dict[int, int | None] = {v: None for v in range(len(graph))}
    for _ in _stack_runs(graph, start, predecessor):
        pass
    return predecessor


def dfs_predecessors(graph: AdjacencyMatrixGraph, start: str) -> dict[str, str | None]:
    """Return each vertex's predecessor in a stack search visiting every vertex.

    Roots of the search map to None.
    """
    names = graph.vertices()
    return {
        names[v]: None if p is None else names[p]
        for v, p in _predecessor_indices(graph, start).items()
    }


def dfs_tree_edges(graph: AdjacencyMatrixGraph, start: str) -> list[tuple[str, str]]:
    """Return the (predecessor, vertex) tree edges, ordered by vertex index."""
    names = graph.vertices()
    return [
        (names[p], names[v])
        for v, p in _predecessor_indices(graph, start).items()
        if p is not None
    ]