# wgraph

A small library for undirected graphs with labelled vertices and
non-negative integer edge weights. It finds shortest paths with
Dijkstra's algorithm.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Usage

```python
from wgraph.graph import Graph, GraphError

g = Graph()
for label in ("1", "2", "3", "4", "5", "6"):
    g.add_vertex(label)

g.add_edge("1", "2", 7)
g.add_edge("1", "3", 9)
g.add_edge("1", "6", 14)
g.add_edge("2", "3", 10)
g.add_edge("2", "4", 15)
g.add_edge("3", "4", 11)
g.add_edge("3", "6", 2)
g.add_edge("4", "5", 6)
g.add_edge("5", "6", 9)

distance, path = g.shortest_path("1", "5")
print(distance)  # 20
print(path)      # ['1', '3', '6', '5']

print("3" in g, len(g))  # True 6
print(g.describe())
```

### The `Graph` class

- `add_vertex(label)` adds a vertex.
- `remove_vertex(label)` removes a vertex and every edge attached to it.
- `add_edge(label1, label2, weight)` joins two distinct existing vertices.
  Edges are undirected, so the edge is visible from both ends.
- `remove_edge(label1, label2)` removes the edge between two vertices.
- `shortest_path(start, end)` returns a tuple `(distance, path)`, where
  `path` is the list of labels from `start` to `end`. When `start` and `end`
  are the same vertex the result is `(0, [start])`.
- `describe()` returns a text listing of every vertex and its edges, one
  line per vertex followed by one indented line per edge.
- `label in graph` tells whether a vertex exists; `len(graph)` gives the
  number of vertices.

### Errors

`GraphError` (a subclass of `RuntimeError`) is raised when:

- a vertex is added whose label already exists,
- an operation names a vertex that does not exist,
- an edge would join a vertex to itself,
- an edge is added that already exists, or removed when it does not,
- no path connects the two vertices given to `shortest_path`.

`add_edge` raises `ValueError` for a negative weight.

## Demo

The package includes a command that builds two example graphs, prints
their structure and reports shortest paths between a few pairs:

```
wgraph-demo
```

The same can be run with `python -m wgraph.demo`. The function behind it,
`wgraph.demo.run_example(vertices, edges, path_tests, out, err)`, builds a
graph from the given vertices and `(source, target, weight)` edges, writes
the report to `out` (standard output by default) and any path errors to
`err` (standard error by default), and returns the graph it built.

The demo takes no options; its example graphs are fixed.