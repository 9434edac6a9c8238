"""Bulk-synchronous BFS, shortest paths and connected components over CSR graphs."""

__version__ = "0.1.0"

__all__ = ["bsp", "cli", "dense", "direction", "graph", "pull", "sparse"]