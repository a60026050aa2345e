"""graphlayout: spring, stress-majorization and layered layouts for directed graphs."""

import json

from graphlayout.config import HierarchicalConfig, SpringConfig, StressConfig
from graphlayout.errors import CyclicGraphError, DegenerateInput, LayoutError, ShapeMismatch, SolverError
from graphlayout.ir.graph import Graph
from graphlayout.layout import (
    HierarchicalLayout,
    Positions,
    SugiyamaLayout,
    hierarchical_layout,
    layout_spring,
    layout_stress,
    spring_layout,
    stress_layout,
)
from graphlayout.serialize import hierarchical_to_dict, parse_graph_json, positions_to_dict
from graphlayout.types import Algorithm, CoordStrategy, OrderingStrategy, parse_enum

__all__ = [
    "Algorithm",
    "CoordStrategy",
    "CyclicGraphError",
    "DegenerateInput",
    "Graph",
    "HierarchicalConfig",
    "HierarchicalLayout",
    "LayoutError",
    "OrderingStrategy",
    "Positions",
    "ShapeMismatch",
    "SolverError",
    "SpringConfig",
    "StressConfig",
    "SugiyamaLayout",
    "hierarchical_layout",
    "layout_json",
    "layout_spring",
    "layout_stress",
    "spring_layout",
    "stress_layout",
]


def layout_json(
    src: str,
    algorithm: str | None = None,
    seed: int | None = None,
    ordering: str = "optimal",
    coord: str = "optimal",
    xsep: float = 3.0,
    ysep: float = 20.0,
) -> str:
    """Lay out a graph given in the JSON wire format and return JSON positions.

    Args:
        src: JSON source, an adjacency list or an object with ``adjacency``.
        algorithm: 'spring', 'stress' or 'hierarchical'; spring when omitted.
        seed: Seed for the random initial placement (spring, stress).
        ordering: Hierarchical vertex ordering, 'optimal' or 'barycentric'.
        coord: Hierarchical coordinate assignment, 'optimal' or 'packed'.
        xsep: Minimum horizontal gap between vertices (hierarchical).
        ysep: Vertical distance between layers (hierarchical).

    Returns:
        A JSON object with ``x`` and ``y`` lists; hierarchical results also
        carry the expanded adjacency, layers and ordering.

    Raises:
        ValueError: If the input cannot be parsed or an option is unknown.
        LayoutError: If the layout itself fails.
    """
    parsed = parse_graph_json(src)
    algo = parse_enum(Algorithm, algorithm) if algorithm else Algorithm.default()

    if algo is Algorithm.Spring:
        payload = positions_to_dict(spring_layout(parsed.graph, SpringConfig(seed=seed)))
    elif algo is Algorithm.Stress:
        payload = positions_to_dict(stress_layout(parsed.graph, StressConfig(seed=seed)))
    else:
        config = HierarchicalConfig(
            ordering=parse_enum(OrderingStrategy, ordering),
            coord=parse_enum(CoordStrategy, coord),
            xsep=xsep,
            ysep=ysep,
        )
        result = hierarchical_layout(parsed.graph, config, widths=parsed.widths, heights=parsed.heights)
        payload = hierarchical_to_dict(result)

    return json.dumps(payload)
