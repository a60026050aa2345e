"""Sugiyama-style layered graph layout engine.

Phases:
  1. Layer assignment (longest path; cyclic input is rejected)
  2. Dummy vertex insertion
  3. Crossing minimization (barycenter heuristic or integer program)
  4. Coordinate assignment (linear program or packed)

See Chapter 13 of the Handbook of Graph Drawing and Visualization and
K. Sugiyama, S. Tagawa, and M. Toda, Methods for visual understanding of
hierarchical system structures, IEEE Trans. SMC 11(2), 1981.
"""

from __future__ import annotations

import logging
import math
from collections import deque
from collections.abc import Sequence
from dataclasses import dataclass

from graphlayout.config import HierarchicalConfig
from graphlayout.errors import CyclicGraphError, DegenerateInput, ShapeMismatch
from graphlayout.ir.graph import Graph
from graphlayout.layout.optimal import assign_x_optimal, order_layers_optimal
from graphlayout.layout.types import HierarchicalLayout
from graphlayout.solvers import LinearSolver, create_solver
from graphlayout.types import CoordStrategy, OrderingStrategy, parse_enum

logger = logging.getLogger(__name__)

BARYCENTER_SWEEPS: int = 5
DEFAULT_WIDTH: float = 1.0
DEFAULT_HEIGHT: float = 1.0


# ─── Layer Assignment ────────────────────────────────────────────────────────


class LayerAssignment:
    def __init__(self, layers: list[int], layer_count: int) -> None:
        self.layers = layers
        self.layer_count = layer_count

    @classmethod
    def assign(cls, graph: Graph) -> LayerAssignment:
        """Longest-path layering, sources on layer 1.

        Vertices are released from a work queue once all of their
        predecessors are layered, so a cycle leaves vertices behind instead
        of looping forever.
        """
        n = graph.vertex_count()
        in_deg = graph.in_degrees()
        layers: list[int] = [1] * n

        queue: deque[int] = deque(v for v in range(n) if in_deg[v] == 0)
        processed = 0
        while queue:
            parent = queue.popleft()
            processed += 1
            for child in graph.adjacency[parent]:
                layers[child] = max(layers[child], layers[parent] + 1)
                in_deg[child] -= 1
                if in_deg[child] == 0:
                    queue.append(child)

        if processed < n:
            raise CyclicGraphError([v for v in range(n) if in_deg[v] > 0])

        layer_count = max(layers) if layers else 0
        return cls(layers=layers, layer_count=layer_count)


def assign_layers(graph: Graph) -> list[int]:
    return LayerAssignment.assign(graph).layers


# ─── Dummy Vertex Insertion ──────────────────────────────────────────────────


@dataclass
class AugmentedGraph:
    adjacency: list[list[int]]
    layers: list[int]
    layer_count: int
    num_original: int

    def vertex_count(self) -> int:
        return len(self.adjacency)


def expand_long_edges(adjacency: Sequence[Sequence[int]], layers: Sequence[int]) -> tuple[list[list[int]], list[int]]:
    """Split every edge spanning more than one layer into a chain of dummy vertices.

    Dummies are appended after the existing vertices. The ``while`` loop runs
    over the growing list, so each new dummy is itself checked and split
    further when its single edge is still too long.
    """
    adj = [list(succs) for succs in adjacency]
    new_layers = list(layers)

    i = 0
    while i < len(adj):
        for k, j in enumerate(adj[i]):
            if new_layers[j] - new_layers[i] > 1:
                dummy = len(adj)
                adj[i][k] = dummy
                adj.append([j])
                new_layers.append(new_layers[i] + 1)
        i += 1

    return adj, new_layers


def insert_dummy_nodes(graph: Graph, la: LayerAssignment) -> AugmentedGraph:
    adj, layers = expand_long_edges(graph.adjacency, la.layers)
    return AugmentedGraph(
        adjacency=adj,
        layers=layers,
        layer_count=la.layer_count,
        num_original=graph.vertex_count(),
    )


# ─── Crossing Minimization ───────────────────────────────────────────────────


def initial_ordering(layers: Sequence[int]) -> list[list[int]]:
    """Vertices of each layer in index order; entry ``L - 1`` holds layer ``L``."""
    layer_count = max(layers) if layers else 0
    ordering: list[list[int]] = [[] for _ in range(layer_count)]
    for v, layer in enumerate(layers):
        ordering[layer - 1].append(v)
    return ordering


def minimise_crossings(
    adj: Sequence[Sequence[int]],
    ordering: list[list[int]],
    sweeps: int = BARYCENTER_SWEEPS,
) -> list[list[int]]:
    """Minimise edge crossings using the barycenter heuristic.

    Each sweep reorders layers top-down by the mean position of predecessors,
    then bottom-up by the mean position of successors. The sweep count is the
    only stopping rule.
    """
    ordering = [list(layer_verts) for layer_verts in ordering]
    preds = Graph(adj).predecessors()

    for _sweep in range(sweeps):
        for layer_idx in range(1, len(ordering)):
            prev = {v: float(p) for p, v in enumerate(ordering[layer_idx - 1])}
            ordering[layer_idx] = _sort_by_barycenter(ordering[layer_idx], preds, prev)

        for layer_idx in range(len(ordering) - 2, -1, -1):
            nxt = {v: float(p) for p, v in enumerate(ordering[layer_idx + 1])}
            ordering[layer_idx] = _sort_by_barycenter(ordering[layer_idx], adj, nxt)

    return ordering


def _sort_by_barycenter(
    layer_verts: list[int],
    neighbors: Sequence[Sequence[int]],
    neighbor_pos: dict[int, float],
) -> list[int]:
    barys: dict[int, float] = {}
    for p, v in enumerate(layer_verts):
        positions = [neighbor_pos[nb] for nb in neighbors[v] if nb in neighbor_pos]
        # No neighbours in the reference layer: hold the current slot.
        barys[v] = sum(positions) / len(positions) if positions else float(p)
    return sorted(layer_verts, key=lambda v: barys[v])


def count_crossings(adj: Sequence[Sequence[int]], ordering: list[list[int]]) -> int:
    """Number of edge-pair intersections between consecutive layers."""
    total = 0
    for l_idx in range(len(ordering) - 1):
        tgt_pos: dict[int, int] = {v: p for p, v in enumerate(ordering[l_idx + 1])}
        edges: list[tuple[int, int]] = []
        for sp, src in enumerate(ordering[l_idx]):
            for nb in adj[src]:
                if nb in tgt_pos:
                    edges.append((sp, tgt_pos[nb]))
        for a in range(len(edges)):
            for b in range(a + 1, len(edges)):
                ea, eb = edges[a], edges[b]
                if (ea[0] < eb[0] and ea[1] > eb[1]) or (ea[0] > eb[0] and ea[1] < eb[1]):
                    total += 1
    return total


def order_layers(
    adj: Sequence[Sequence[int]],
    layers: Sequence[int],
    strategy: OrderingStrategy | str = OrderingStrategy.Barycentric,
    solver: LinearSolver | None = None,
) -> list[list[int]]:
    """Per-layer vertex ordering of an expanded graph using ``strategy``."""
    strategy = parse_enum(OrderingStrategy, strategy)
    ordering = initial_ordering(layers)
    if strategy is OrderingStrategy.Optimal:
        return order_layers_optimal(adj, ordering, solver)
    return minimise_crossings(adj, ordering)


# ─── Coordinate Assignment ───────────────────────────────────────────────────


def assign_x_packed(ordering: list[list[int]], widths: Sequence[float], xsep: float) -> list[float]:
    """Place each layer left to right at minimum spacing, centred on the widest layer."""
    n = sum(len(layer_verts) for layer_verts in ordering)
    xs: list[float] = [0.0] * n

    layer_spans: list[float] = []
    for layer_verts in ordering:
        x = 0.0
        prev: int | None = None
        for v in layer_verts:
            if prev is None:
                x = widths[v] / 2.0
            else:
                x += (widths[prev] + widths[v]) / 2.0 + xsep
            xs[v] = x
            prev = v
        layer_spans.append(x + widths[prev] / 2.0 if prev is not None else 0.0)

    widest = max(layer_spans, default=0.0)
    for layer_verts, span in zip(ordering, layer_spans):
        offset = (widest - span) / 2.0
        for v in layer_verts:
            xs[v] += offset
    return xs


def assign_x(
    adj: Sequence[Sequence[int]],
    ordering: list[list[int]],
    widths: Sequence[float],
    xsep: float,
    num_original: int,
    strategy: CoordStrategy | str = CoordStrategy.Optimal,
    solver: LinearSolver | None = None,
) -> list[float]:
    strategy = parse_enum(CoordStrategy, strategy)
    if strategy is CoordStrategy.Optimal:
        return assign_x_optimal(adj, ordering, widths, xsep, num_original, solver)
    return assign_x_packed(ordering, widths, xsep)


def assign_y(layers: Sequence[int], ysep: float) -> list[float]:
    return [(layer - 1) * ysep for layer in layers]


# ─── SugiyamaLayout Engine ───────────────────────────────────────────────────


class SugiyamaLayout:
    """Sugiyama layered layout engine."""

    def __init__(self, config: HierarchicalConfig | None = None) -> None:
        self.config = config or HierarchicalConfig()

    def layout(
        self,
        graph: Graph,
        widths: Sequence[float] | None = None,
        heights: Sequence[float] | None = None,
        labels: Sequence[str] | None = None,
    ) -> HierarchicalLayout:
        """Lay out an acyclic graph in layers.

        Args:
            graph: A directed acyclic graph.
            widths: Width of each original vertex (default 1).
            heights: Height of each original vertex (default 1).
            labels: One label per original vertex; defaults to the graph's labels.

        Returns:
            The expanded graph with positions for every vertex, dummy vertices
            included, together with its layers and per-layer ordering.

        Raises:
            CyclicGraphError: If the graph has a cycle.
            ShapeMismatch: If widths, heights or labels do not match the vertex count.
            DegenerateInput: If a width or height is negative or not finite.
            SolverError: If an optimization phase fails.
        """
        cfg = self.config
        ordering_strategy = parse_enum(OrderingStrategy, cfg.ordering)
        coord_strategy = parse_enum(CoordStrategy, cfg.coord)

        n = graph.vertex_count()
        base_widths = _sizes("widths", widths, n, DEFAULT_WIDTH)
        base_heights = _sizes("heights", heights, n, DEFAULT_HEIGHT)
        if labels is None:
            labels = graph.labels
        elif len(labels) != n:
            raise ShapeMismatch(f"got {len(labels)} labels for {n} vertices")

        la = LayerAssignment.assign(graph)
        aug = insert_dummy_nodes(graph, la)
        num_dummies = aug.vertex_count() - n
        logger.info("layered %d vertices into %d layers, %d dummy vertices", n, la.layer_count, num_dummies)

        all_widths = base_widths + [0.0] * num_dummies
        all_heights = base_heights + [0.0] * num_dummies

        mip_solver = None
        if ordering_strategy is OrderingStrategy.Optimal:
            mip_solver = create_solver(cfg.mip_backend, cfg.time_limit, problem="vertex ordering")
        ordering = order_layers(aug.adjacency, aug.layers, ordering_strategy, mip_solver)
        crossings = count_crossings(aug.adjacency, ordering)
        logger.info("%s ordering: %d crossings", ordering_strategy.value, crossings)

        lp_solver = None
        if coord_strategy is CoordStrategy.Optimal:
            lp_solver = create_solver(cfg.lp_backend, cfg.time_limit, problem="coordinate assignment")
        xs = assign_x(aug.adjacency, ordering, all_widths, cfg.xsep, n, coord_strategy, lp_solver)
        ys = assign_y(aug.layers, cfg.ysep)

        return HierarchicalLayout(
            x=xs,
            y=ys,
            adjacency=aug.adjacency,
            layers=aug.layers,
            ordering=ordering,
            num_original=n,
            labels=list(labels) + [""] * num_dummies if labels is not None else [],
            widths=all_widths,
            heights=all_heights,
            crossings=crossings,
        )


def _sizes(name: str, values: Sequence[float] | None, n: int, default: float) -> list[float]:
    if values is None:
        return [default] * n
    if len(values) != n:
        raise ShapeMismatch(f"got {len(values)} {name} for {n} vertices")
    try:
        sizes = [float(v) for v in values]
    except (TypeError, ValueError) as e:
        raise DegenerateInput(f"{name} must be numbers: {e}") from e
    for v in sizes:
        if not math.isfinite(v) or v < 0:
            raise DegenerateInput(f"{name} must be finite and non-negative, got {v}")
    return sizes
