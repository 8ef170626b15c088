"""Undirected weighted graphs with Dijkstra shortest paths, and a demo command."""

__version__ = "0.1.0"
__all__ = ["graph", "demo"]