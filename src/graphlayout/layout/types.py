"""Layout result types shared across layout engines and renderers."""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np


@dataclass
class Positions:
    """Per-vertex coordinates, aligned to vertex index."""

    x: list[float]
    y: list[float]

    def __len__(self) -> int:
        return len(self.x)

    def points(self) -> list[tuple[float, float]]:
        return list(zip(self.x, self.y))

    def as_array(self) -> np.ndarray:
        """Return an (n, 2) float array."""
        return np.column_stack([np.asarray(self.x, dtype=float), np.asarray(self.y, dtype=float)]).reshape(-1, 2)

    @classmethod
    def from_array(cls, arr: np.ndarray) -> Positions:
        return cls(x=[float(v) for v in arr[:, 0]], y=[float(v) for v in arr[:, 1]])


@dataclass
class HierarchicalLayout:
    """Self-contained output of the layered pipeline — everything renderers need.

    Vertices ``0..num_original-1`` are the caller's; the rest are dummy
    vertices that carry long edges through intermediate layers.
    """

    x: list[float]
    y: list[float]
    adjacency: list[list[int]]
    layers: list[int]
    ordering: list[list[int]]
    num_original: int
    labels: list[str] = field(default_factory=list)
    widths: list[float] = field(default_factory=list)
    heights: list[float] = field(default_factory=list)
    crossings: int = 0

    @property
    def num_layers(self) -> int:
        return len(self.ordering)

    @property
    def positions(self) -> Positions:
        return Positions(x=list(self.x), y=list(self.y))

    def is_dummy(self, vertex: int) -> bool:
        return vertex >= self.num_original

    def dummy_vertices(self) -> list[int]:
        return list(range(self.num_original, len(self.adjacency)))
