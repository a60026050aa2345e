"""Force-directed ("spring") layout.

Uses the spring/repulsion model of Fruchterman and Reingold (1991). For a
pair of vertices at distance d, with K the optimal inter-vertex distance:

  edge i -> j:        F(d) = d / K - K^2 / d^2  (force on i)
  otherwise:          F(d) = d / K

and the force on a vertex is the sum of F(d) times the offset to each other
vertex. Forces are applied all at once at the end of each iteration, clamped
per axis by a temperature that cools as ``init_temp / iteration``.
"""

from __future__ import annotations

import logging

import numpy as np

from graphlayout.errors import DegenerateInput
from graphlayout.ir.graph import Graph
from graphlayout.layout.types import Positions

logger = logging.getLogger(__name__)


def layout_spring(
    graph: Graph,
    C: float = 2.0,
    max_iter: int = 100,
    init_temp: float = 2.0,
    seed: int | np.random.Generator | None = None,
) -> Positions:
    """Lay out ``graph`` with a Fruchterman-Reingold simulation.

    Args:
        graph: The graph to lay out. Edges are directed: for an edge ``i -> j`` only ``i``
            feels the spring term; ``j`` feels the plain ``d / K`` term.
        C: Constant scaling the optimal distance ``K = C * sqrt(4 / n)``.
        max_iter: Number of force iterations; there is no early stop.
        init_temp: Initial temperature, the per-axis step limit of iteration 1.
        seed: Seed or Generator for the random initial placement on ``[-1, 1]^2``.

    Returns:
        Positions centred on the origin with each axis scaled so its largest
        absolute coordinate is 1 (an axis whose values all coincide stays at 0).

    Raises:
        DegenerateInput: If ``max_iter`` is negative or a parameter is not finite.
    """
    if max_iter < 0:
        raise DegenerateInput(f"max_iter must be non-negative, got {max_iter}")
    if not np.isfinite(C) or not np.isfinite(init_temp):
        raise DegenerateInput("C and init_temp must be finite")

    n = graph.vertex_count()
    if n == 0:
        return Positions(x=[], y=[])
    if n == 1:
        return Positions(x=[0.0], y=[0.0])

    rng = np.random.default_rng(seed)
    locs_x = 2.0 * rng.random(n) - 1.0
    locs_y = 2.0 * rng.random(n) - 1.0

    adjacent = graph.adjacency_matrix()
    K = C * np.sqrt(4.0 / n)

    for iteration in range(1, max_iter + 1):
        force_x, force_y = _forces(locs_x, locs_y, adjacent, K)
        temp = init_temp / iteration
        locs_x += np.clip(force_x, -temp, temp)
        locs_y += np.clip(force_y, -temp, temp)

    logger.debug("spring layout: n=%d K=%.4g iterations=%d", n, K, max_iter)

    return Positions(x=_normalize_axis(locs_x).tolist(), y=_normalize_axis(locs_y).tolist())


def _forces(locs_x: np.ndarray, locs_y: np.ndarray, adjacent: np.ndarray, K: float) -> tuple[np.ndarray, np.ndarray]:
    # d_x[i, j] is the offset from i to j
    d_x = locs_x[np.newaxis, :] - locs_x[:, np.newaxis]
    d_y = locs_y[np.newaxis, :] - locs_y[:, np.newaxis]
    d = np.hypot(d_x, d_y)

    separated = d > 0.0
    safe_d = np.where(separated, d, 1.0)
    F = np.where(adjacent, safe_d / K - K**2 / safe_d**2, safe_d / K)
    F = np.where(separated, F, 0.0)

    return (F * d_x).sum(axis=1), (F * d_y).sum(axis=1)


def _normalize_axis(values: np.ndarray) -> np.ndarray:
    """Centre on the mean, then scale to a maximum absolute value of 1."""
    if np.ptp(values) == 0.0:
        return np.zeros_like(values)
    centred = values - values.mean()
    return centred / np.abs(centred).max()
