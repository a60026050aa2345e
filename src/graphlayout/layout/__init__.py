"""Layout engines and their public API."""

from __future__ import annotations

from graphlayout.layout.engine import hierarchical_layout, spring_layout, stress_layout
from graphlayout.layout.optimal import EDGE_WEIGHTS, assign_x_optimal, order_layers_optimal
from graphlayout.layout.spring import layout_spring
from graphlayout.layout.stress import layout_stress, shortest_path_distances, stress, stress_weights
from graphlayout.layout.sugiyama import (
    BARYCENTER_SWEEPS,
    AugmentedGraph,
    LayerAssignment,
    SugiyamaLayout,
    assign_layers,
    assign_x,
    assign_x_packed,
    assign_y,
    count_crossings,
    expand_long_edges,
    initial_ordering,
    insert_dummy_nodes,
    minimise_crossings,
    order_layers,
)
from graphlayout.layout.types import HierarchicalLayout, Positions

__all__ = [
    "BARYCENTER_SWEEPS",
    "EDGE_WEIGHTS",
    "AugmentedGraph",
    "HierarchicalLayout",
    "LayerAssignment",
    "Positions",
    "SugiyamaLayout",
    "assign_layers",
    "assign_x",
    "assign_x_optimal",
    "assign_x_packed",
    "assign_y",
    "count_crossings",
    "expand_long_edges",
    "hierarchical_layout",
    "initial_ordering",
    "insert_dummy_nodes",
    "layout_spring",
    "layout_stress",
    "minimise_crossings",
    "order_layers",
    "order_layers_optimal",
    "shortest_path_distances",
    "spring_layout",
    "stress",
    "stress_layout",
    "stress_weights",
]
