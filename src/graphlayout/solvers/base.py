"""Base solver protocol."""

from __future__ import annotations

import math
from collections.abc import Hashable, Sequence
from typing import Protocol

# A linear expression is a list of (coefficient, variable) pairs.
Terms = Sequence[tuple[float, Hashable]]


class LinearSolver(Protocol):
    """Protocol that all optimization backends must implement.

    Variables are opaque handles returned by the ``add_*_var`` methods. A
    solver instance holds exactly one model and is solved once.
    """

    def add_bool_var(self, name: str) -> Hashable:
        """Add a 0/1 integer variable."""
        ...

    def add_continuous_var(self, name: str, lb: float = 0.0, ub: float = math.inf) -> Hashable:
        """Add a real-valued variable bounded by ``[lb, ub]``."""
        ...

    def add_constraint(self, terms: Terms, lb: float = -math.inf, ub: float = math.inf) -> None:
        """Add ``lb <= sum(coef * var) <= ub``."""
        ...

    def minimize(self, terms: Terms) -> None:
        """Set the objective to minimize ``sum(coef * var)``."""
        ...

    def solve(self) -> None:
        """Solve to optimality or raise SolverError."""
        ...

    def value(self, var: Hashable) -> float:
        """Value of ``var`` in the optimal solution."""
        ...
