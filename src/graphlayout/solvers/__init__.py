"""Solver registry — map a backend name to a LinearSolver implementation."""

from __future__ import annotations

from graphlayout.solvers.base import LinearSolver, Terms
from graphlayout.solvers.ortools_backend import OrToolsSolver

# MPSolver ids that handle integer variables, and those limited to pure LPs.
MIP_BACKENDS = ("SCIP", "CBC")
LP_BACKENDS = ("GLOP", "PDLP", "CLP")

_BACKENDS = {name: OrToolsSolver for name in MIP_BACKENDS + LP_BACKENDS}


def create_solver(backend: str, time_limit: float | None = None, problem: str = "") -> LinearSolver:
    """Instantiate the solver registered under ``backend`` (case-insensitive)."""
    key = backend.upper()
    solver_cls = _BACKENDS.get(key)
    if solver_cls is None:
        choices = ", ".join(sorted(_BACKENDS))
        raise ValueError(f"Unknown solver backend '{backend}'; use one of: {choices}")
    return solver_cls(key, time_limit=time_limit, problem=problem)


__all__ = [
    "LP_BACKENDS",
    "MIP_BACKENDS",
    "LinearSolver",
    "OrToolsSolver",
    "Terms",
    "create_solver",
]
