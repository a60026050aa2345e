"""Tests for the integer-program ordering and linear-program coordinates."""

from __future__ import annotations

from itertools import permutations, product

import pytest

from graphlayout.ir.graph import Graph
from graphlayout.layout.optimal import EDGE_WEIGHTS, assign_x_optimal, order_layers_optimal
from graphlayout.layout.sugiyama import (
    assign_layers,
    count_crossings,
    expand_long_edges,
    initial_ordering,
    minimise_crossings,
    order_layers,
)
from graphlayout.solvers import create_solver

# ─── Helpers ──────────────────────────────────────────────────────────────────


def brute_force_min_crossings(adj: list[list[int]], ordering: list[list[int]]) -> int:
    best = None
    for combo in product(*(permutations(layer_verts) for layer_verts in ordering)):
        crossings = count_crossings(adj, [list(p) for p in combo])
        if best is None or crossings < best:
            best = crossings
    return best


def expanded(adjacency: list[list[int]]) -> tuple[list[list[int]], list[int]]:
    g = Graph(adjacency)
    return expand_long_edges(g.adjacency, assign_layers(g))


SMALL_GRAPHS = [
    # two layers, three crossings in index order
    [[5], [4], [3], [], [], []],
    # K3,3
    [[3, 4, 5], [3, 4, 5], [3, 4, 5], [], [], []],
    # two layers with mixed fan-out
    [[4, 5], [3], [3, 5], [], [], []],
    # three layers
    [[4, 5], [3], [3, 5], [6, 7], [7], [6], [], []],
    # long edges become dummy vertices
    [[1, 4], [2], [3], [], [2]],
    [[3, 1], [4], [4], [5], [], []],
]


# ─── Vertex Ordering (ILP) ────────────────────────────────────────────────────


class TestOptimalOrdering:
    @pytest.mark.parametrize("adjacency", SMALL_GRAPHS)
    def test_matches_brute_force(self, adjacency):
        adj, layers = expanded(adjacency)
        ordering = order_layers(adj, layers, "optimal")
        assert count_crossings(adj, ordering) == brute_force_min_crossings(adj, initial_ordering(layers))

    @pytest.mark.parametrize("adjacency", SMALL_GRAPHS)
    def test_never_worse_than_barycentric(self, adjacency):
        adj, layers = expanded(adjacency)
        optimal = order_layers(adj, layers, "optimal")
        heuristic = minimise_crossings(adj, initial_ordering(layers))
        assert count_crossings(adj, optimal) <= count_crossings(adj, heuristic)

    @pytest.mark.parametrize("adjacency", SMALL_GRAPHS)
    def test_orderings_are_permutations(self, adjacency):
        adj, layers = expanded(adjacency)
        start = initial_ordering(layers)
        ordering = order_layers_optimal(adj, start)
        assert [sorted(layer_verts) for layer_verts in ordering] == start

    def test_no_crossable_pairs_keeps_initial(self):
        adj, layers = expanded([[1, 2, 3], [3], [3], []])
        start = initial_ordering(layers)
        assert order_layers_optimal(adj, start) == start

    def test_explicit_solver(self):
        adj, layers = expanded([[5], [4], [3], [], [], []])
        solver = create_solver("SCIP", problem="vertex ordering")
        ordering = order_layers_optimal(adj, initial_ordering(layers), solver)
        assert count_crossings(adj, ordering) == 0


# ─── Coordinate Assignment (LP) ───────────────────────────────────────────────


class TestOptimalCoordinates:
    def test_edge_weights(self):
        assert EDGE_WEIGHTS == (1.0, 2.0, 8.0)

    def test_chain_is_vertical(self):
        xs = assign_x_optimal([[1], [2], []], [[0], [1], [2]], [1.0, 1.0, 1.0], xsep=3.0, num_original=3)
        assert xs[0] == pytest.approx(xs[1], abs=1e-6)
        assert xs[1] == pytest.approx(xs[2], abs=1e-6)

    def test_spacing_invariant(self):
        adj, layers = expanded([[1, 2, 3], [3], [3], []])
        ordering = order_layers(adj, layers, "barycentric")
        widths = [2.0, 4.0, 6.0, 1.0, 0.0]
        xs = assign_x_optimal(adj, ordering, widths, xsep=3.0, num_original=4)
        for layer_verts in ordering:
            for a, b in zip(layer_verts, layer_verts[1:]):
                assert xs[b] - xs[a] >= (widths[a] + widths[b]) / 2 + 3.0 - 1e-6

    def test_non_negative(self):
        adj, layers = expanded([[1, 2, 3], [3], [3], []])
        ordering = order_layers(adj, layers, "barycentric")
        xs = assign_x_optimal(adj, ordering, [1.0] * 5, xsep=1.0, num_original=4)
        assert min(xs) >= -1e-9

    def test_dummy_chain_is_straight(self):
        """The edge between two dummies carries the heaviest weight, so it stays vertical."""
        adj, layers = expanded([[1, 3], [2], [3], []])
        assert len(adj) == 6
        ordering = order_layers(adj, layers, "barycentric")
        xs = assign_x_optimal(adj, ordering, [1.0, 1.0, 1.0, 1.0, 0.0, 0.0], xsep=2.0, num_original=4)
        assert xs[4] == pytest.approx(xs[5], abs=1e-6)

    def test_empty(self):
        assert assign_x_optimal([], [], [], xsep=1.0, num_original=0) == []
