"""Reachability (path) matrices by Warshall's algorithm."""

from __future__ import annotations

from graphkit.matrix import AdjacencyMatrixGraph


def warshall_steps(graph: AdjacencyMatrixGraph) -> list[list[list[int]]]:
    """Return the matrices P0 .. Pn-1 produced by Warshall's algorithm.

    Pk[i][j] is 1 when j can be reached from i through intermediate
    vertices with index at most k, and 0 otherwise.
    """
    count = len(graph)
    reach = graph.matrix()
    steps: list[list[list[int]]] = []
    for k in range(count):
        row_k = reach[k]
        for i in range(count):
            row_i = reach[i]
            through_k = bool(row_i[k])
            for j in range(count):
                row_i[j] = int(bool(row_i[j]) or (through_k and bool(row_k[j])))
        steps.append([list(row) for row in reach])
    return steps


def warshall_path_matrix(graph: AdjacencyMatrixGraph) -> list[list[int]]:
    """Return the path matrix: 1 where a path of one or more edges exists."""
    steps = warshall_steps(graph)
    return steps[-1] if steps else []