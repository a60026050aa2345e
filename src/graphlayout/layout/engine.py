"""Layout engine convenience functions."""

from __future__ import annotations

from collections.abc import Sequence

from graphlayout.config import HierarchicalConfig, SpringConfig, StressConfig
from graphlayout.ir.graph import Graph
from graphlayout.layout.spring import layout_spring
from graphlayout.layout.stress import layout_stress
from graphlayout.layout.sugiyama import SugiyamaLayout
from graphlayout.layout.types import HierarchicalLayout, Positions


def spring_layout(graph: Graph, config: SpringConfig | None = None) -> Positions:
    """Run the force-directed engine with ``config`` (defaults when omitted)."""
    cfg = config or SpringConfig()
    return layout_spring(graph, C=cfg.C, max_iter=cfg.max_iter, init_temp=cfg.init_temp, seed=cfg.seed)


def stress_layout(graph: Graph, config: StressConfig | None = None) -> Positions:
    """Run the stress-majorization engine with ``config`` (defaults when omitted)."""
    cfg = config or StressConfig()
    return layout_stress(
        graph,
        max_iter=cfg.max_iter,
        tol=cfg.tol,
        weight_exponent=cfg.weight_exponent,
        seed=cfg.seed,
    )


def hierarchical_layout(
    graph: Graph,
    config: HierarchicalConfig | None = None,
    widths: Sequence[float] | None = None,
    heights: Sequence[float] | None = None,
    labels: Sequence[str] | None = None,
) -> HierarchicalLayout:
    """Run the layered (Sugiyama) pipeline."""
    engine = SugiyamaLayout(config)
    return engine.layout(graph, widths=widths, heights=heights, labels=labels)
