"""Graph model shared by every layout engine.

Vertices are dense integer indices ``0..n-1`` and edges live in an adjacency
list, ``adjacency[i]`` being the ordered successors of ``i``. Engines never
mutate a Graph; phases that add vertices work on their own copy of the lists.
"""

from __future__ import annotations

import operator
from collections.abc import Sequence

import networkx as nx
import numpy as np

from graphlayout.errors import ShapeMismatch


class Graph:
    """A directed graph stored as an adjacency list.

    Duplicate edges and self-loops are disallowed by convention but not
    rejected; successor indices outside ``0..n-1`` are.
    """

    def __init__(self, adjacency: Sequence[Sequence[int]], labels: Sequence[str] | None = None) -> None:
        n = len(adjacency)
        adj: list[list[int]] = []
        for i, succs in enumerate(adjacency):
            row = [_vertex_index(i, j) for j in succs]
            for j in row:
                if j < 0 or j >= n:
                    raise ShapeMismatch(f"vertex {i} has successor {j} outside 0..{n - 1}")
            adj.append(row)
        self.adjacency = adj
        self.labels: list[str] | None = None
        if labels is not None:
            if len(labels) != n:
                raise ShapeMismatch(f"got {len(labels)} labels for {n} vertices")
            self.labels = [str(label) for label in labels]

    @classmethod
    def from_adjacency_matrix(cls, matrix: object, labels: Sequence[str] | None = None) -> Graph:
        """Build a Graph from a square matrix; any non-zero off-diagonal entry is an edge."""
        arr = np.asarray(matrix)
        if arr.ndim != 2 or arr.shape[0] != arr.shape[1]:
            raise ShapeMismatch(f"adjacency matrix must be square, got shape {arr.shape}")
        n = arr.shape[0]
        adjacency = [[j for j in range(n) if j != i and arr[i, j] != 0] for i in range(n)]
        return cls(adjacency, labels)

    @classmethod
    def from_digraph(cls, digraph: nx.DiGraph) -> Graph:
        """Build a Graph from a networkx DiGraph, keeping node names as labels."""
        nodes = list(digraph.nodes)
        index = {node: i for i, node in enumerate(nodes)}
        adjacency = [[index[succ] for succ in digraph.successors(node)] for node in nodes]
        return cls(adjacency, [str(node) for node in nodes])

    def to_digraph(self) -> nx.DiGraph:
        g: nx.DiGraph = nx.DiGraph()
        g.add_nodes_from(range(self.vertex_count()))
        for i, succs in enumerate(self.adjacency):
            for j in succs:
                g.add_edge(i, j)
        return g

    def vertex_count(self) -> int:
        return len(self.adjacency)

    def edge_count(self) -> int:
        return sum(len(succs) for succs in self.adjacency)

    def predecessors(self) -> list[list[int]]:
        """Reverse adjacency: ``predecessors()[j]`` lists every ``i`` with an edge ``i -> j``."""
        preds: list[list[int]] = [[] for _ in self.adjacency]
        for i, succs in enumerate(self.adjacency):
            for j in succs:
                preds[j].append(i)
        return preds

    def in_degrees(self) -> list[int]:
        deg = [0] * len(self.adjacency)
        for succs in self.adjacency:
            for j in succs:
                deg[j] += 1
        return deg

    def adjacency_matrix(self, symmetric: bool = False) -> np.ndarray:
        """Directed 0/1 matrix: entry (i, j) is 1 when there is an edge ``i -> j``.

        With ``symmetric=True`` an edge sets both (i, j) and (j, i).
        """
        n = self.vertex_count()
        mat = np.zeros((n, n), dtype=bool)
        for i, succs in enumerate(self.adjacency):
            for j in succs:
                if i != j:
                    mat[i, j] = True
                    if symmetric:
                        mat[j, i] = True
        return mat

    def __repr__(self) -> str:
        return f"Graph(vertices={self.vertex_count()}, edges={self.edge_count()})"


def _vertex_index(i: int, j: object) -> int:
    # bool is an int subclass but never a vertex
    if isinstance(j, bool):
        raise ShapeMismatch(f"vertex {i} has non-integer successor {j!r}")
    try:
        return operator.index(j)
    except TypeError:
        raise ShapeMismatch(f"vertex {i} has non-integer successor {j!r}") from None
