"""Path matrices computed from the powers of the adjacency matrix."""

from __future__ import annotations

from graphkit.matrix import AdjacencyMatrixGraph


def _multiply(left: list[list[int]], right: list[list[int]]) -> list[list[int]]:
    columns = list(zip(*right))
    return [[sum(a * b for a, b in zip(row, col)) for col in columns] for row in left]


def power_sum_matrix(graph: AdjacencyMatrixGraph) -> list[list[int]]:
    """Return X = A + A^2 + ... + A^n for the adjacency matrix A of n vertices."""
    adj = graph.matrix()
    power = [list(row) for row in adj]
    total = [list(row) for row in adj]
    for _ in range(2, len(graph) + 1):
        power = _multiply(power, adj)
        total = [[x + p for x, p in zip(trow, prow)] for trow, prow in zip(total, power)]
    return total


def path_matrix(graph: AdjacencyMatrixGraph) -> list[list[int]]:
    """Return 1 where the power sum is non-zero and 0 elsewhere."""
    return [[0 if value == 0 else 1 for value in row] for row in power_sum_matrix(graph)]