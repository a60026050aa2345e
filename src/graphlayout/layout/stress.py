"""Stress-majorization layout.

Target distances are graph-theoretic shortest-path lengths on the undirected
graph. Positions are improved one vertex at a time (a Gauss-Seidel sweep of
the majorization update) which never increases

    stress(X) = sum_{i<j} w_ij (|x_i - x_j| - d_ij)^2

with ``w_ij = d_ij ** weight_exponent``. Pairs in different components have
no target distance and carry zero weight.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

import networkx as nx
import numpy as np

from graphlayout.errors import DegenerateInput, ShapeMismatch
from graphlayout.ir.graph import Graph
from graphlayout.layout.types import Positions

logger = logging.getLogger(__name__)


def shortest_path_distances(graph: Graph) -> np.ndarray:
    """All-pairs BFS distances on the undirected graph; ``inf`` where unreachable."""
    n = graph.vertex_count()
    dist = np.full((n, n), np.inf)
    undirected = graph.to_digraph().to_undirected()
    for src, lengths in nx.all_pairs_shortest_path_length(undirected):
        for tgt, length in lengths.items():
            dist[src, tgt] = float(length)
    return dist


def stress_weights(distances: np.ndarray, weight_exponent: float = -2.0) -> np.ndarray:
    """Weights ``d ** weight_exponent`` for reachable distinct pairs, 0 elsewhere."""
    usable = np.isfinite(distances) & (distances > 0)
    weights = np.zeros_like(distances)
    weights[usable] = distances[usable] ** weight_exponent
    return weights


def stress(positions: np.ndarray, distances: np.ndarray, weights: np.ndarray) -> float:
    """Weighted stress of an (n, 2) position array, counting each pair once."""
    diff = positions[:, np.newaxis, :] - positions[np.newaxis, :, :]
    actual = np.linalg.norm(diff, axis=2)
    target = np.where(weights > 0, distances, 0.0)
    terms = weights * (actual - target) ** 2
    return float(np.triu(terms, k=1).sum())


def layout_stress(
    graph: Graph,
    max_iter: int = 400,
    tol: float = 1e-5,
    weight_exponent: float = -2.0,
    initial: Positions | Sequence[tuple[float, float]] | None = None,
    seed: int | np.random.Generator | None = None,
) -> Positions:
    """Lay out ``graph`` by majorizing its stress function.

    Args:
        graph: The graph to lay out. Edge direction is ignored.
        max_iter: Cap on the number of full sweeps.
        tol: Stop once a sweep lowers stress by less than this fraction.
        weight_exponent: Exponent applied to target distances to form weights.
        initial: Starting coordinates, one per vertex. Random when omitted.
        seed: Seed or Generator for the random start.

    Returns:
        Positions centred on the origin, not rescaled.

    Raises:
        ShapeMismatch: If ``initial`` does not have one point per vertex.
        DegenerateInput: If ``initial`` holds non-finite values or ``max_iter`` is negative.
    """
    if max_iter < 0:
        raise DegenerateInput(f"max_iter must be non-negative, got {max_iter}")

    n = graph.vertex_count()
    pos = _initial_positions(n, initial, seed)
    if n == 0:
        return Positions(x=[], y=[])
    if n == 1:
        return Positions(x=[0.0], y=[0.0])

    distances = shortest_path_distances(graph)
    weights = stress_weights(distances, weight_exponent)
    targets = np.where(weights > 0, distances, 0.0)

    current = stress(pos, distances, weights)
    sweeps = 0
    for sweeps in range(1, max_iter + 1):
        if current == 0.0:
            break
        _majorization_sweep(pos, targets, weights)
        updated = stress(pos, distances, weights)
        improvement = (current - updated) / current
        current = updated
        if improvement < tol:
            break

    logger.debug("stress layout: n=%d sweeps=%d stress=%.6g", n, sweeps, current)

    pos -= pos.mean(axis=0)
    return Positions.from_array(pos)


def _majorization_sweep(pos: np.ndarray, targets: np.ndarray, weights: np.ndarray) -> None:
    """Move each vertex in turn to the minimizer of its majorizing function."""
    for i in range(pos.shape[0]):
        w = weights[i]
        total = w.sum()
        if total == 0.0:
            continue
        diff = pos[i] - pos
        dist = np.linalg.norm(diff, axis=1)
        apart = dist > 0.0
        pull = np.zeros_like(pos)
        pull[apart] = (targets[i, apart] / dist[apart])[:, np.newaxis] * diff[apart]
        pos[i] = (w[:, np.newaxis] * (pos + pull)).sum(axis=0) / total


def _initial_positions(
    n: int,
    initial: Positions | Sequence[tuple[float, float]] | None,
    seed: int | np.random.Generator | None,
) -> np.ndarray:
    if initial is None:
        rng = np.random.default_rng(seed)
        return 2.0 * rng.random((n, 2)) - 1.0

    arr = initial.as_array() if isinstance(initial, Positions) else np.asarray(initial, dtype=float).reshape(-1, 2)
    if arr.shape[0] != n:
        raise ShapeMismatch(f"got {arr.shape[0]} initial positions for {n} vertices")
    if not np.all(np.isfinite(arr)):
        raise DegenerateInput("initial positions must be finite")
    return arr.astype(float).copy()
