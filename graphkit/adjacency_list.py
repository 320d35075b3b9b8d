"""A directed graph over named vertices, stored as adjacency lists."""

from __future__ import annotations

from graphkit.matrix import (
    DuplicateEdgeError,
    EdgeNotFoundError,
    GraphError,
    InvalidEdgeError,
    VertexNotFoundError,
)


class DirectedGraphList:
    """A directed graph keeping, for each vertex, its outgoing edges in order.

    Vertices keep the order in which they were added; each vertex's edges
    keep the order in which they were inserted.
    """

    def __init__(self) -> None:
        self._adjacency: dict[str, list[str]] = {}

    def add_vertex(self, name: str) -> None:
        """Add a vertex; a name may be used only once."""
        if name in self._adjacency:
            raise GraphError(f"Vertex already present: {name!r}")
        self._adjacency[name] = []

    def add_edge(self, source: str, destination: str) -> None:
        """Insert an edge from source to destination."""
        if source == destination:
            raise InvalidEdgeError(
                "Invalid Edge : source and destination vertices are same"
            )
        if source not in self._adjacency:
            raise VertexNotFoundError(
                f"Source vertex not present, first insert vertex {source}"
            )
        if destination not in self._adjacency:
            raise VertexNotFoundError(
                f"Destination vertex not present, first insert vertex {destination}"
            )
        targets = self._adjacency[source]
        if destination in targets:
            raise DuplicateEdgeError(f"Edge already present: {source!r} -> {destination!r}")
        targets.append(destination)

    def remove_vertex(self, name: str) -> None:
        """Delete a vertex together with its incoming and outgoing edges."""
        if name not in self._adjacency:
            raise VertexNotFoundError(f"Vertex not found: {name!r}")
        for source, targets in self._adjacency.items():
            if source != name:
                self._adjacency[source] = [t for t in targets if t != name]
        del self._adjacency[name]

    def remove_edge(self, source: str, destination: str) -> None:
        """Delete the edge from source to destination."""
        targets = self._adjacency.get(source)
        if targets is None or destination not in targets:
            raise EdgeNotFoundError(f"Edge not found: {source!r} -> {destination!r}")
        targets.remove(destination)

    def has_edge(self, source: str, destination: str) -> bool:
        """Return True if there is an edge from source to destination."""
        return destination in self._adjacency.get(source, ())

    def outdegree(self, vertex: str) -> int:
        """Return the number of edges leaving vertex."""
        try:
            return len(self._adjacency[vertex])
        except KeyError:
            raise VertexNotFoundError(f"Invalid Vertex: {vertex!r}") from None

    def indegree(self, vertex: str) -> int:
        """Return the number of edges entering vertex."""
        if vertex not in self._adjacency:
            raise VertexNotFoundError(f"Invalid Vertex: {vertex!r}")
        return sum(targets.count(vertex) for targets in self._adjacency.values())

    def vertices(self) -> list[str]:
        """Return the vertex names in insertion order."""
        return list(self._adjacency)

    def edges(self) -> list[tuple[str, str]]:
        """Return every edge as a (source, destination) pair."""
        return [
            (source, target)
            for source, targets in self._adjacency.items()
            for target in targets
        ]

    def edge_count(self) -> int:
        """Return the number of edges in the graph."""
        return sum(len(targets) for targets in self._adjacency.values())

    def format(self) -> str:
        """Render each vertex followed by its outgoing edges, one per line."""
        lines: list[str] = []
        for source, targets in self._adjacency.items():
            lines.append(f"Vertex : {source}")
            lines.extend(f"Edge : {source} -> {target}" for target in targets)
        return "\n".join(lines)

    def __len__(self) -> int:
        return len(self._adjacency)

    def __contains__(self, name: object) -> bool:
        return name in self._adjacency