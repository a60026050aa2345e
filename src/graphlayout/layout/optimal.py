"""Optimization-based phases of the layered layout.

Both phases build a model through the LinearSolver protocol, so any backend
registered in ``graphlayout.solvers`` can be used.

Vertex ordering follows the integer program of
  M. Junger, E. K. Lee, P. Mutzel, and T. Odenthal. A polyhedral approach
  to the multi-layer crossing minimization problem. GD '97, LNCS 1353.

Horizontal coordinates follow the linear program of
  E. R. Gansner et al. A technique for drawing directed graphs.
  IEEE Trans. Software Engineering 19(3), 1993.
"""

from __future__ import annotations

import logging
from collections.abc import Hashable, Sequence
from itertools import combinations

from graphlayout.solvers import LinearSolver, create_solver

logger = logging.getLogger(__name__)

# Misalignment weights by number of dummy endpoints (0, 1 or 2).
EDGE_WEIGHTS: tuple[float, float, float] = (1.0, 2.0, 8.0)


# ─── Vertex Ordering (ILP) ───────────────────────────────────────────────────


def order_layers_optimal(
    adj: Sequence[Sequence[int]],
    ordering: list[list[int]],
    solver: LinearSolver | None = None,
) -> list[list[int]]:
    """Return per-layer permutations with the minimum number of crossings.

    ``ordering`` gives the vertices of each layer (its order breaks ties);
    every edge of ``adj`` must run from a layer to the next one.
    """
    layer_of: dict[int, int] = {}
    for idx, layer_verts in enumerate(ordering):
        for v in layer_verts:
            layer_of[v] = idx

    edges_by_layer: list[list[tuple[int, int]]] = [[] for _ in ordering]
    for i, succs in enumerate(adj):
        for j in succs:
            edges_by_layer[layer_of[i]].append((i, j))

    crossing_pairs: list[tuple[int, int, int, int, int]] = []
    for idx, edges in enumerate(edges_by_layer):
        for (i, j), (k, l) in combinations(edges, 2):
            # Edges sharing an endpoint never cross.
            if i == k or j == l:
                continue
            crossing_pairs.append((idx, i, j, k, l))

    if not crossing_pairs:
        logger.debug("no edge pair can cross; keeping initial ordering")
        return [list(layer_verts) for layer_verts in ordering]

    if solver is None:
        solver = create_solver("SCIP", problem="vertex ordering")

    # precedes[(i, j)] is 1 when i sits left of j in its layer.
    precedes: dict[tuple[int, int], Hashable] = {}
    for layer_verts in ordering:
        for i in layer_verts:
            for j in layer_verts:
                if i != j:
                    precedes[(i, j)] = solver.add_bool_var(f"x_{i}_{j}")
        for i, j in combinations(layer_verts, 2):
            solver.add_constraint([(1.0, precedes[(i, j)]), (1.0, precedes[(j, i)])], 1.0, 1.0)
        for i, j, k in combinations(layer_verts, 3):
            solver.add_constraint(
                [(1.0, precedes[(i, j)]), (1.0, precedes[(j, k)]), (-1.0, precedes[(i, k)])],
                0.0,
                1.0,
            )

    crossings: list[Hashable] = []
    for idx, i, j, k, l in crossing_pairs:
        c = solver.add_bool_var(f"c_{idx}_{i}_{j}_{k}_{l}")
        crossings.append(c)
        # The edges cross iff the endpoint orders disagree between the layers.
        solver.add_constraint([(1.0, c), (-1.0, precedes[(j, l)]), (1.0, precedes[(i, k)])], 0.0)
        solver.add_constraint([(1.0, c), (1.0, precedes[(j, l)]), (-1.0, precedes[(i, k)])], 0.0)

    solver.minimize([(1.0, c) for c in crossings])
    solver.solve()

    new_ordering: list[list[int]] = []
    for layer_verts in ordering:
        # The more vertices v precedes, the further left it goes.
        scores = {
            v: sum(1 for u in layer_verts if u != v and round(solver.value(precedes[(v, u)])) == 1)
            for v in layer_verts
        }
        new_ordering.append(sorted(layer_verts, key=lambda v, s=scores: -s[v]))
    return new_ordering


# ─── Coordinate Assignment (LP) ──────────────────────────────────────────────


def assign_x_optimal(
    adj: Sequence[Sequence[int]],
    ordering: list[list[int]],
    widths: Sequence[float],
    xsep: float,
    num_original: int,
    solver: LinearSolver | None = None,
) -> list[float]:
    """Horizontal coordinates that keep the ordering and straighten edges.

    Consecutive vertices ``a, b`` of a layer satisfy
    ``x[b] - x[a] >= (widths[a] + widths[b]) / 2 + xsep``; the objective is the
    weighted sum of ``|x[i] - x[j]|`` over all edges, weighted by how many of
    the two endpoints are dummy vertices.
    """
    n = len(adj)
    if n == 0:
        return []
    if solver is None:
        solver = create_solver("GLOP", problem="coordinate assignment")

    xs = [solver.add_continuous_var(f"x_{v}", lb=0.0) for v in range(n)]

    for layer_verts in ordering:
        for a, b in zip(layer_verts, layer_verts[1:]):
            gap = (widths[a] + widths[b]) / 2.0 + xsep
            solver.add_constraint([(1.0, xs[b]), (-1.0, xs[a])], gap)

    objective: list[tuple[float, Hashable]] = []
    for i, succs in enumerate(adj):
        for j in succs:
            t = solver.add_continuous_var(f"absdiff_{i}_{j}", lb=0.0)
            solver.add_constraint([(1.0, t), (-1.0, xs[i]), (1.0, xs[j])], 0.0)
            solver.add_constraint([(1.0, t), (1.0, xs[i]), (-1.0, xs[j])], 0.0)
            dummies = int(i >= num_original) + int(j >= num_original)
            objective.append((EDGE_WEIGHTS[dummies], t))

    solver.minimize(objective)
    solver.solve()
    return [solver.value(x) for x in xs]
