"""Graphs over named vertices, stored as adjacency matrices."""

from __future__ import annotations

DEFAULT_MAX_VERTICES = 30


class GraphError(Exception):
    """Base class for errors raised by graph operations."""


class VertexNotFoundError(GraphError):
    """Raised when a vertex name is not present in the graph."""


class InvalidEdgeError(GraphError):
    """Raised for an edge that cannot be stored, such as a self-loop."""


class DuplicateEdgeError(GraphError):
    """Raised when an edge that already exists is inserted again."""


class EdgeNotFoundError(GraphError):
    """Raised when an edge that does not exist is looked up or removed."""


class AdjacencyMatrixGraph:
    """A graph with named vertices and a square matrix of edge weights.

    A zero entry means "no edge"; any other value is the edge's weight.
    Vertices keep the order in which they were added, and that order
    gives each vertex its index.
    """

    directed = True

    def __init__(self, max_vertices: int = DEFAULT_MAX_VERTICES) -> None:
        if max_vertices < 1:
            raise ValueError("max_vertices must be at least 1")
        self.max_vertices = max_vertices
        self._names: list[str] = []
        self._adj: list[list[int]] = []
        self._edges = 0

    def add_vertex(self, name: str) -> int:
        """Append a vertex and return its index."""
        if len(self._names) >= self.max_vertices:
            raise GraphError(f"graph is full: at most {self.max_vertices} vertices")
        self._names.append(name)
        for row in self._adj:
            row.append(0)
        self._adj.append([0] * len(self._names))
        return len(self._names) - 1

    def index_of(self, name: str) -> int:
        """Return the index of the first vertex with this name."""
        try:
            return self._names.index(name)
        except ValueError:
            raise VertexNotFoundError(f"Invalid Vertex: {name!r}") from None

    def add_edge(self, source: str, destination: str, weight: int = 1) -> None:
        """Insert an edge from source to destination with the given weight."""
        u = self.index_of(source)
        v = self.index_of(destination)
        if u == v:
            raise InvalidEdgeError(f"Not a valid edge: {source!r} -> {destination!r}")
        if weight == 0:
            raise InvalidEdgeError("edge weight must be non-zero")
        if self._adj[u][v]:
            raise DuplicateEdgeError(f"Edge already present: {source!r} -> {destination!r}")
        self._adj[u][v] = weight
        if not self.directed:
            self._adj[v][u] = weight
        self._edges += 1

    def remove_edge(self, source: str, destination: str) -> None:
        """Delete the edge from source to destination."""
        u = self.index_of(source)
        v = self.index_of(destination)
        if not self._adj[u][v]:
            raise EdgeNotFoundError(f"Edge doesn't exist: {source!r} -> {destination!r}")
        self._adj[u][v] = 0
        if not self.directed:
            self._adj[v][u] = 0
        self._edges -= 1

    def has_edge(self, source: str, destination: str) -> bool:
        """Return True if there is an edge from source to destination."""
        return self._adj[self.index_of(source)][self.index_of(destination)] != 0

    def weight(self, source: str, destination: str) -> int:
        """Return the weight of the edge from source to destination."""
        value = self._adj[self.index_of(source)][self.index_of(destination)]
        if not value:
            raise EdgeNotFoundError(f"Edge doesn't exist: {source!r} -> {destination!r}")
        return value

    def successors(self, index: int) -> list[int]:
        """Return, in ascending order, the indices adjacent from vertex index."""
        return [j for j, value in enumerate(self._adj[index]) if value]

    def vertices(self) -> list[str]:
        """Return the vertex names in index order."""
        return list(self._names)

    def edge_count(self) -> int:
        """Return the number of edges in the graph."""
        return self._edges

    def matrix(self) -> list[list[int]]:
        """Return a copy of the adjacency matrix."""
        return [list(row) for row in self._adj]

    def format_matrix(self) -> str:
        """Render the adjacency matrix, one row per line."""
        return "\n".join(" ".join(str(value) for value in row) for row in self._adj)

    def __len__(self) -> int:
        return len(self._names)


class DirectedGraph(AdjacencyMatrixGraph):
    """A directed graph; unweighted edges are stored with weight 1."""

    directed = True

    def outdegree(self, vertex: str) -> int:
        """Return the number of edges leaving vertex."""
        u = self.index_of(vertex)
        return sum(1 for value in self._adj[u] if value)

    def indegree(self, vertex: str) -> int:
        """Return the number of edges entering vertex."""
        u = self.index_of(vertex)
        return sum(1 for row in self._adj if row[u])


class DirectedWeightedGraph(DirectedGraph):
    """A directed graph whose edges carry explicit weights."""

    def add_edge(self, source: str, destination: str, weight: int) -> None:
        """Insert a weighted edge from source to destination."""
        super().add_edge(source, destination, weight)


class UndirectedGraph(AdjacencyMatrixGraph):
    """An undirected graph; each edge is stored in both directions."""

    directed = False

    def degree(self, vertex: str) -> int:
        """Return the number of edges touching vertex."""
        u = self.index_of(vertex)
        return sum(1 for value in self._adj[u] if value)


class UndirectedWeightedGraph(UndirectedGraph):
    """An undirected graph whose edges carry explicit weights."""

    def add_edge(self, source: str, destination: str, weight: int) -> None:
        """Insert a weighted edge between source and destination."""
        super().add_edge(source, destination, weight)