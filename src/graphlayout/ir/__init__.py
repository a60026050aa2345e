"""Intermediate representation: the adjacency-list Graph."""

from graphlayout.ir.graph import Graph

__all__ = [
    "Graph",
]
