"""Exceptions raised by the layout engines.

Every error derives from LayoutError, which is a ValueError so callers that
already guard layout calls with ``except ValueError`` keep working.
"""

from __future__ import annotations


class LayoutError(ValueError):
    """Base class for all layout failures."""


class ShapeMismatch(LayoutError):
    """Input arrays disagree with the vertex count (or a matrix is not square)."""


class CyclicGraphError(LayoutError):
    """Hierarchical layout was asked to layer a graph that contains a cycle."""

    def __init__(self, vertices: list[int]) -> None:
        self.vertices = vertices
        preview = ", ".join(str(v) for v in vertices[:10])
        if len(vertices) > 10:
            preview += ", ..."
        super().__init__(
            f"graph contains a cycle; {len(vertices)} vertices could not be layered: [{preview}]"
        )


class SolverError(LayoutError):
    """The optimization backend did not return an optimal solution."""

    def __init__(self, status: str, problem: str = "") -> None:
        self.status = status
        self.problem = problem
        where = f" while solving {problem}" if problem else ""
        super().__init__(f"solver returned status {status}{where}")


class DegenerateInput(LayoutError):
    """Numeric input that cannot produce finite coordinates."""
