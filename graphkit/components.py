"""Connected components of graphs stored as adjacency matrices."""

from __future__ import annotations

from collections import deque

from graphkit.matrix import AdjacencyMatrixGraph


def _label(graph: AdjacencyMatrixGraph, search) -> list[int]:
    count = len(graph)
    numbers = [0] * count
    component = 0
    for start in range(count):
        if numbers[start] == 0:
            component += 1
            search(graph, start, component, numbers)
    return numbers


def _bfs(graph: AdjacencyMatrixGraph, start: int, component: int, numbers: list[int]) -> None:
    waiting = {start}
    queue = deque([start])
    while queue:
        vertex = queue.popleft()
        numbers[vertex] = component
        for neighbour in graph.successors(vertex):
            if numbers[neighbour] == 0 and neighbour not in waiting:
                waiting.add(neighbour)
                queue.append(neighbour)


def _dfs(graph: AdjacencyMatrixGraph, start: int, component: int, numbers: list[int]) -> None:
    stack = [start]
    while stack:
        vertex = stack.pop()
        if numbers[vertex] == 0:
            numbers[vertex] = component
        for neighbour in reversed(graph.successors(vertex)):
            if numbers[neighbour] == 0:
                stack.append(neighbour)


def bfs_components(graph: AdjacencyMatrixGraph) -> list[int]:
    """Return each vertex's component number, found by breadth-first search.

    Numbers start at 1 and are handed out in order of the lowest vertex
    index in each component; the list is indexed by vertex index.
    """
    return _label(graph, _bfs)


def dfs_components(graph: AdjacencyMatrixGraph) -> list[int]:
    """Return each vertex's component number, found by depth-first search.

    Numbering follows the same rule as bfs_components.
    """
    return _label(graph, _dfs)


def count_components(graph: AdjacencyMatrixGraph) -> int:
    """Return the number of connected components in the graph."""
    return max(bfs_components(graph), default=0)