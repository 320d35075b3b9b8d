"""Graphs on adjacency matrices and lists, with traversal, spanning tree and shortest path algorithms."""

__version__ = "0.1.0"