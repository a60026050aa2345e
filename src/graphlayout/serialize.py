"""JSON wire format for graphs and layout results.

Input is either a bare adjacency list ``[[1, 2], [2], []]`` or an object::

    {"adjacency": [[1, 2], [2], []], "labels": [...], "widths": [...], "heights": [...]}

where every key but ``adjacency`` is optional.
"""

from __future__ import annotations

import json
from dataclasses import dataclass

from graphlayout.errors import ShapeMismatch
from graphlayout.ir.graph import Graph
from graphlayout.layout.types import HierarchicalLayout, Positions


@dataclass
class GraphInput:
    graph: Graph
    widths: list[float] | None = None
    heights: list[float] | None = None


def parse_graph_json(text: str) -> GraphInput:
    """Parse the JSON wire format. Raises ValueError on malformed input."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValueError(f"invalid JSON: {e}") from e

    if isinstance(data, list):
        data = {"adjacency": data}
    if not isinstance(data, dict) or "adjacency" not in data:
        raise ValueError("expected an adjacency list or an object with an 'adjacency' key")

    adjacency = data["adjacency"]
    if not isinstance(adjacency, list) or not all(isinstance(row, list) for row in adjacency):
        raise ShapeMismatch("'adjacency' must be a list of lists of vertex indices")

    for key in ("labels", "widths", "heights"):
        if data.get(key) is not None and not isinstance(data[key], list):
            raise ValueError(f"'{key}' must be a list, got {type(data[key]).__name__}")
    for key in ("widths", "heights"):
        for value in data.get(key) or []:
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ValueError(f"'{key}' entries must be numbers, got {value!r}")

    graph = Graph(adjacency, labels=data.get("labels"))
    return GraphInput(graph=graph, widths=data.get("widths"), heights=data.get("heights"))


def positions_to_dict(positions: Positions) -> dict:
    return {"x": list(positions.x), "y": list(positions.y)}


def hierarchical_to_dict(result: HierarchicalLayout) -> dict:
    return {
        "x": list(result.x),
        "y": list(result.y),
        "adjacency": [list(succs) for succs in result.adjacency],
        "layers": list(result.layers),
        "ordering": [list(layer_verts) for layer_verts in result.ordering],
        "num_original": result.num_original,
        "labels": list(result.labels),
        "crossings": result.crossings,
    }
