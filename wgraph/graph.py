"""Undirected weighted graph with labelled vertices and Dijkstra shortest paths."""

from __future__ import annotations

import heapq
import itertools


class GraphError(RuntimeError):
    """Raised when a graph operation cannot be carried out."""


class Graph:
    """An undirected graph whose edges carry non-negative integer weights."""

    def __init__(self) -> None:
        self._adjacency: dict[str, dict[str, int]] = {}

    def __contains__(self, label: object) -> bool:
        return label in self._adjacency

    def __len__(self) -> int:
        return len(self._adjacency)

    def _require(self, label: str, role: str = "Vertex") -> dict[str, int]:
        try:
            return self._adjacency[label]
        except KeyError:
            raise GraphError(f"{role} with label '{label}' not found") from None

    def add_vertex(self, label: str) -> None:
        """Add a vertex; the label must not be taken yet."""
        if label in self._adjacency:
            raise GraphError(f"Vertex with label '{label}' already exists")
        self._adjacency[label] = {}

    def remove_vertex(self, label: str) -> None:
        """Remove a vertex and every edge touching it."""
        self._require(label)
        for neighbours in self._adjacency.values():
            neighbours.pop(label, None)
        del self._adjacency[label]

    def add_edge(self, label1: str, label2: str, weight: int) -> None:
        """Join two distinct existing vertices with an edge of the given weight."""
        first = self._require(label1)
        second = self._require(label2)
        if label1 == label2:
            raise GraphError("Cannot add edge from a vertex to itself")
        if weight < 0:
            raise ValueError("Edge weight must not be negative")
        if label2 in first:
            raise GraphError(f"Edge between '{label1}' and '{label2}' already exists")
        first[label2] = weight
        second[label1] = weight

    def remove_edge(self, label1: str, label2: str) -> None:
        """Remove the edge between two vertices."""
        first = self._require(label1)
        second = self._require(label2)
        if label2 not in first:
            raise GraphError(f"Edge between '{label1}' and '{label2}' not found")
        del first[label2]
        del second[label1]

    def shortest_path(self, start: str, end: str) -> tuple[int, list[str]]:
        """Return the total weight and the vertex labels of a shortest path."""
        self._require(start, "Start vertex")
        self._require(end, "End vertex")
        if start == end:
            return 0, [start]

        distance: dict[str, int] = {start: 0}
        previous: dict[str, str] = {}
        visited: set[str] = set()
        counter = itertools.count()
        queue: list[tuple[int, int, str]] = [(0, next(counter), start)]

        while queue:
            dist, _, current = heapq.heappop(queue)
            if current == end:
                break
            if current in visited:
                continue
            visited.add(current)
            for neighbour, weight in self._adjacency[current].items():
                if neighbour in visited:
                    continue
                candidate = dist + weight
                if candidate < distance.get(neighbour, candidate + 1):
                    distance[neighbour] = candidate
                    previous[neighbour] = current
                    heapq.heappush(queue, (candidate, next(counter), neighbour))

        if end not in distance:
            raise GraphError(f"No path exists from '{start}' to '{end}'")

        path = [end]
        while path[-1] in previous:
            path.append(previous[path[-1]])
        path.reverse()
        return distance[end], path

    def describe(self) -> str:
        """Return a readable listing of every vertex and its edges."""
        lines: list[str] = []
        for label, neighbours in self._adjacency.items():
            lines.append(f"Vertex {label} is connected to:")
            lines.extend(
                f"  {neighbour} with weight {weight}"
                for neighbour, weight in neighbours.items()
            )
        return "".join(line + "\n" for line in lines)