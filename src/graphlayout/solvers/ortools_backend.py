"""LinearSolver backed by Google OR-Tools' MPSolver wrapper (pywraplp)."""

from __future__ import annotations

import logging
import math
from collections.abc import Hashable

from ortools.linear_solver import pywraplp

from graphlayout.errors import SolverError
from graphlayout.solvers.base import Terms

logger = logging.getLogger(__name__)

_STATUS_NAMES: dict[int, str] = {
    pywraplp.Solver.OPTIMAL: "OPTIMAL",
    pywraplp.Solver.FEASIBLE: "FEASIBLE",
    pywraplp.Solver.INFEASIBLE: "INFEASIBLE",
    pywraplp.Solver.UNBOUNDED: "UNBOUNDED",
    pywraplp.Solver.ABNORMAL: "ABNORMAL",
    pywraplp.Solver.MODEL_INVALID: "MODEL_INVALID",
    pywraplp.Solver.NOT_SOLVED: "NOT_SOLVED",
}


class OrToolsSolver:
    """One MPSolver model; ``backend`` is an MPSolver id such as SCIP, CBC or GLOP."""

    def __init__(self, backend: str = "SCIP", time_limit: float | None = None, problem: str = "") -> None:
        solver = pywraplp.Solver.CreateSolver(backend)
        if solver is None:
            raise SolverError("UNAVAILABLE", f"{problem or 'model'} (OR-Tools backend {backend!r})")
        if time_limit is not None:
            solver.SetTimeLimit(int(time_limit * 1000))
        self.backend = backend
        self.problem = problem
        self._solver = solver
        self._inf = solver.infinity()

    def _bound(self, value: float) -> float:
        if math.isinf(value):
            return self._inf if value > 0 else -self._inf
        return value

    def add_bool_var(self, name: str) -> Hashable:
        return self._solver.BoolVar(name)

    def add_continuous_var(self, name: str, lb: float = 0.0, ub: float = math.inf) -> Hashable:
        return self._solver.NumVar(self._bound(lb), self._bound(ub), name)

    def add_constraint(self, terms: Terms, lb: float = -math.inf, ub: float = math.inf) -> None:
        ct = self._solver.Constraint(self._bound(lb), self._bound(ub))
        for coef, var in terms:
            ct.SetCoefficient(var, ct.GetCoefficient(var) + coef)

    def minimize(self, terms: Terms) -> None:
        objective = self._solver.Objective()
        objective.Clear()
        for coef, var in terms:
            objective.SetCoefficient(var, objective.GetCoefficient(var) + coef)
        objective.SetMinimization()

    def solve(self) -> None:
        logger.debug(
            "solving %s with %s: %d variables, %d constraints",
            self.problem or "model",
            self.backend,
            self._solver.NumVariables(),
            self._solver.NumConstraints(),
        )
        status = self._solver.Solve()
        name = _STATUS_NAMES.get(status, str(status))
        logger.debug("%s status: %s", self.backend, name)
        if status != pywraplp.Solver.OPTIMAL:
            raise SolverError(name, self.problem)

    def value(self, var: Hashable) -> float:
        return var.solution_value()
