# graphkit

A small graph library with no dependencies. It has graphs whose vertices
have names and whose edges are kept in an adjacency matrix (directed or
undirected, weighted or not). It also has a directed graph kept as
adjacency lists. The classic algorithms run on the matrix graphs.

## Installation

```
pip install graphkit
```

To run the test suite:

```
pip install "graphkit[test]"
pytest
```

## Matrix graphs

`graphkit.matrix` provides `DirectedGraph`, `DirectedWeightedGraph`,
`UndirectedGraph` and `UndirectedWeightedGraph`. All of them derive from
`AdjacencyMatrixGraph`.

```python
from graphkit.matrix import DirectedGraph

g = DirectedGraph(30)
for name in ("0", "1", "2", "3"):
    g.add_vertex(name)
g.add_edge("0", "3")
g.add_edge("1", "2")
g.add_edge("2", "3")
g.add_edge("3", "1")

g.has_edge("2", "3")   # True
g.outdegree("3")       # 1
g.indegree("3")        # 2
print(g.format_matrix())
```

How the matrix graphs behave:

- A graph holds at most `max_vertices` vertices. The default is 30. Adding a
  vertex beyond that limit raises `GraphError`.
- Vertices are indexed in the order they were added. `index_of` returns the
  first vertex with a given name.
- A matrix entry of zero means there is no edge. Any other entry is the
  edge's weight. Unweighted graphs store weight 1.
- Undirected graphs store each edge in both directions.

Other members are `remove_edge`, `weight`, `successors`, `vertices`,
`edge_count`, `matrix` and `len(g)`. `UndirectedGraph` and
`UndirectedWeightedGraph` have `degree` in place of `outdegree` and
`indegree`.

Errors:

| Exception | Raised for |
| --- | --- |
| `VertexNotFoundError` | an unknown vertex name |
| `InvalidEdgeError` | a self loop, or a weight of zero |
| `DuplicateEdgeError` | adding an edge that already exists |
| `EdgeNotFoundError` | removing or weighing an edge that is missing |

All of these derive from `GraphError`.

## Adjacency-list graph

`graphkit.adjacency_list.DirectedGraphList` is a directed graph. Each vertex
name maps to a list of its outgoing edges.

- Vertex names must be unique.
- It supports `remove_vertex`, which also drops every edge into and out of
  the vertex.
- Other members are `add_vertex`, `add_edge`, `remove_edge`, `has_edge`,
  `outdegree`, `indegree`, `vertices`, `edges`, `edge_count`, `format`,
  `len()` and `in`.

## Algorithms

These functions take a matrix graph:

| Module | Functions |
| --- | --- |
| `graphkit.bfs` | `bfs_order`, `bfs_order_all`, `bfs_distances`, `bfs_shortest_path`, `bfs_tree_edges`, `is_connected` |
| `graphkit.dfs` | `dfs_order`, `dfs_order_all`, `recursive_dfs_order`, `dfs_times` (returns `VisitTimes`), `dfs_predecessors`, `dfs_tree_edges` |
| `graphkit.components` | `bfs_components`, `dfs_components`, `count_components` |
| `graphkit.classify` | `classify_edges` (returns `ClassifiedEdge` items with an `EdgeKind`), `is_cyclic` |
| `graphkit.topological` | `topological_order` (raises `CycleError`) |
| `graphkit.closure` | `warshall_steps`, `warshall_path_matrix` |
| `graphkit.path_matrix` | `power_sum_matrix`, `path_matrix` |
| `graphkit.spanning_tree` | `kruskal`, `prim` (return `SpanningTree`; raise `DisconnectedGraphError`) |
| `graphkit.shortest_paths` | `dijkstra`, `bellman_ford` (return `ShortestPaths`), `floyd_warshall` (returns `AllPairsShortestPaths`); `bellman_ford` and `floyd_warshall` raise `NegativeCycleError` |

Wherever a choice is possible, neighbours and restart vertices are taken
by ascending index, so results are deterministic. When there is no path,
the result is `None`: `bfs_distances`, `bfs_shortest_path`, and the
`distance` and `path` methods all return `None` for an unreachable vertex.

```python
from graphkit.matrix import DirectedWeightedGraph
from graphkit.shortest_paths import dijkstra

g = DirectedWeightedGraph(30)
for name in "abc":
    g.add_vertex(name)
g.add_edge("a", "b", 4)
g.add_edge("b", "c", 1)
g.add_edge("a", "c", 7)

paths = dijkstra(g, "a")
paths.distance("c")   # 5
paths.path("c")       # ['a', 'b', 'c']
```

## What it does not do

graphkit is a library only:

- It has no command-line tool.
- It does not read or write graphs from files.
- The adjacency-list graph has no algorithms of its own.