"""Centralized configuration for graphlayout engines."""

from __future__ import annotations

from dataclasses import dataclass, field

from graphlayout.types import CoordStrategy, OrderingStrategy


@dataclass
class SpringConfig:
    """Parameters of the Fruchterman-Reingold simulation."""

    C: float = 2.0
    max_iter: int = 100
    init_temp: float = 2.0
    seed: int | None = None


@dataclass
class StressConfig:
    """Parameters of the stress-majorization solver."""

    max_iter: int = 400
    tol: float = 1e-5
    weight_exponent: float = -2.0
    seed: int | None = None


@dataclass
class HierarchicalConfig:
    """Parameters of the layered pipeline."""

    ordering: OrderingStrategy = field(default_factory=OrderingStrategy.default)
    coord: CoordStrategy = field(default_factory=CoordStrategy.default)
    xsep: float = 3.0
    ysep: float = 20.0
    mip_backend: str = "SCIP"
    lp_backend: str = "GLOP"
    time_limit: float | None = None
