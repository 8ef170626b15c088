"""Command that builds two example graphs and prints shortest paths."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import TextIO

from wgraph.graph import Graph

GRAPH_ONE_VERTICES = ["1", "2", "3", "4", "5", "6"]
GRAPH_ONE_EDGES = [
    ("1", "2", 7),
    ("1", "3", 9),
    ("1", "6", 14),
    ("2", "3", 10),
    ("2", "4", 15),
    ("3", "4", 11),
    ("3", "6", 2),
    ("4", "5", 6),
    ("5", "6", 9),
]
GRAPH_ONE_TESTS = [("1", "5")]

GRAPH_TWO_VERTICES = ["BSN", "LIB", "ENB", "MSC", "CAS", "SUB", "SUN"]
GRAPH_TWO_EDGES = [
    ("BSN", "LIB", 871),
    ("BSN", "CAS", 1672),
    ("BSN", "MSC", 2355),
    ("SUN", "SUB", 1265),
    ("LIB", "MSC", 1615),
    ("LIB", "SUN", 1847),
    ("ENB", "SUN", 2885),
    ("ENB", "CAS", 454),
    ("ENB", "LIB", 1078),
]
GRAPH_TWO_TESTS = [("ENB", "SUN"), ("LIB", "CAS")]


def run_example(
    vertices: Iterable[str],
    edges: Iterable[tuple[str, str, int]],
    path_tests: Iterable[tuple[str, str]],
    out: TextIO | None = None,
    err: TextIO | None = None,
) -> Graph:
    """Build a graph, print it and report the shortest path for each pair."""
    out = sys.stdout if out is None else out
    err = sys.stderr if err is None else err

    graph = Graph()
    print("Creating graph...", file=out)
    for label in vertices:
        graph.add_vertex(label)
    for source, target, weight in edges:
        graph.add_edge(source, target, weight)

    print("Graph structure:", file=out)
    out.write(graph.describe())
    print(file=out)

    for start, end in path_tests:
        try:
            distance, path = graph.shortest_path(start, end)
        except Exception as exc:  # report and carry on with the next pair
            print(f"Error: {exc}", file=err)
            continue
        print(f"Shortest path from {start} to {end}:", file=out)
        print(f"Distance: {distance}", file=out)
        print(f"Path: {' -> '.join(path)}", file=out)
        print(file=out)
    return graph


def main(argv: list[str] | None = None) -> int:
    """Run both example graphs."""
    print("========== Testing Graph 1 ==========")
    run_example(GRAPH_ONE_VERTICES, GRAPH_ONE_EDGES, GRAPH_ONE_TESTS)
    print("========== Testing Graph 2 ==========")
    run_example(GRAPH_TWO_VERTICES, GRAPH_TWO_EDGES, GRAPH_TWO_TESTS)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())