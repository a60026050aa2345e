"""Tests for the full layered pipeline — SugiyamaLayout and hierarchical_layout."""

from __future__ import annotations

import pytest

import graphlayout.layout.sugiyama as sugiyama
from graphlayout.config import HierarchicalConfig
from graphlayout.errors import CyclicGraphError, DegenerateInput, ShapeMismatch, SolverError
from graphlayout.ir.graph import Graph
from graphlayout.layout.engine import hierarchical_layout
from graphlayout.layout.sugiyama import SugiyamaLayout, count_crossings
from graphlayout.types import CoordStrategy, OrderingStrategy

# ─── Helpers ──────────────────────────────────────────────────────────────────


def fruit_graph() -> Graph:
    return Graph([[1, 2, 3], [3], [3], []], labels=["Apple", "Banana", "Carrot", "Durian"])


def assert_spacing(result, xsep: float) -> None:
    for layer_verts in result.ordering:
        for a, b in zip(layer_verts, layer_verts[1:]):
            gap = (result.widths[a] + result.widths[b]) / 2 + xsep
            assert result.x[b] - result.x[a] >= gap - 1e-6


class FailingSolver:
    """LinearSolver stand-in whose solve always fails."""

    def __init__(self, *args, **kwargs):
        self._count = 0

    def add_bool_var(self, name):
        self._count += 1
        return self._count

    def add_continuous_var(self, name, lb=0.0, ub=float("inf")):
        self._count += 1
        return self._count

    def add_constraint(self, terms, lb=-float("inf"), ub=float("inf")):
        pass

    def minimize(self, terms):
        pass

    def solve(self):
        raise SolverError("INFEASIBLE", "stub")

    def value(self, var):
        raise AssertionError("value() must not be read after a failed solve")


# ─── Pipeline Tests ───────────────────────────────────────────────────────────


class TestSugiyamaLayout:
    def test_scenario_defaults(self):
        result = SugiyamaLayout().layout(fruit_graph())
        assert result.num_original == 4
        assert len(result.x) == len(result.y) == 5
        assert result.layers == [1, 2, 2, 3, 2]
        assert result.num_layers == 3
        assert result.dummy_vertices() == [4]
        assert result.is_dummy(4) and not result.is_dummy(3)
        assert result.crossings == 0

    def test_y_from_layers(self):
        result = SugiyamaLayout(HierarchicalConfig(ysep=10.0)).layout(fruit_graph())
        assert result.y == [0.0, 10.0, 10.0, 20.0, 10.0]

    def test_labels_padded_for_dummies(self):
        result = SugiyamaLayout().layout(fruit_graph())
        assert result.labels == ["Apple", "Banana", "Carrot", "Durian", ""]

    def test_explicit_labels_override(self):
        result = SugiyamaLayout().layout(fruit_graph(), labels=["a", "b", "c", "d"])
        assert result.labels == ["a", "b", "c", "d", ""]

    def test_no_labels(self):
        result = SugiyamaLayout().layout(Graph([[1], []]))
        assert result.labels == []

    def test_dummy_sizes_are_zero(self):
        result = SugiyamaLayout().layout(fruit_graph(), widths=[3, 3, 3, 3], heights=[2, 2, 2, 2])
        assert result.widths == [3.0, 3.0, 3.0, 3.0, 0.0]
        assert result.heights == [2.0, 2.0, 2.0, 2.0, 0.0]

    @pytest.mark.parametrize(
        "ordering,coord",
        [
            (OrderingStrategy.Optimal, CoordStrategy.Optimal),
            (OrderingStrategy.Barycentric, CoordStrategy.Optimal),
            (OrderingStrategy.Optimal, CoordStrategy.Packed),
            (OrderingStrategy.Barycentric, CoordStrategy.Packed),
        ],
    )
    def test_spacing_and_permutation(self, ordering, coord):
        g = Graph([[4, 5], [3], [3, 5], [6, 7], [7], [6, 7], [], []])
        config = HierarchicalConfig(ordering=ordering, coord=coord, xsep=2.0)
        result = SugiyamaLayout(config).layout(g, widths=[1, 2, 3, 1, 2, 3, 1, 2])
        assert_spacing(result, 2.0)
        for idx, layer_verts in enumerate(result.ordering):
            expected = [v for v, layer in enumerate(result.layers) if layer == idx + 1]
            assert sorted(layer_verts) == expected
        for i, succs in enumerate(result.adjacency):
            for j in succs:
                assert result.layers[j] == result.layers[i] + 1
        assert result.crossings == count_crossings(result.adjacency, result.ordering)

    def test_config_defaults(self):
        config = HierarchicalConfig()
        assert config.ordering is OrderingStrategy.default() is OrderingStrategy.Optimal
        assert config.coord is CoordStrategy.default() is CoordStrategy.Optimal

    def test_strategy_names_accepted(self):
        config = HierarchicalConfig(ordering="barycentric", coord="packed")
        result = SugiyamaLayout(config).layout(fruit_graph())
        assert len(result.x) == 5

    def test_input_graph_untouched(self):
        g = fruit_graph()
        SugiyamaLayout().layout(g)
        assert g.adjacency == [[1, 2, 3], [3], [3], []]

    def test_empty_graph(self):
        result = SugiyamaLayout().layout(Graph([]))
        assert result.x == [] and result.y == []
        assert result.ordering == []

    def test_engine_wrapper(self):
        config = HierarchicalConfig(ordering=OrderingStrategy.Barycentric, coord=CoordStrategy.Packed)
        direct = SugiyamaLayout(config).layout(fruit_graph())
        assert hierarchical_layout(fruit_graph(), config) == direct


# ─── Error Tests ──────────────────────────────────────────────────────────────


class TestErrors:
    def test_cycle_fails_before_ordering(self, monkeypatch):
        def no_solver(*args, **kwargs):
            raise AssertionError("solver must not be created for cyclic input")

        monkeypatch.setattr(sugiyama, "create_solver", no_solver)
        with pytest.raises(CyclicGraphError):
            SugiyamaLayout().layout(Graph([[1], [2], [0]]))

    def test_label_count_mismatch(self):
        with pytest.raises(ShapeMismatch):
            SugiyamaLayout().layout(fruit_graph(), labels=["a", "b"])

    def test_width_count_mismatch(self):
        with pytest.raises(ShapeMismatch):
            SugiyamaLayout().layout(fruit_graph(), widths=[1.0, 1.0])

    def test_height_count_mismatch(self):
        with pytest.raises(ShapeMismatch):
            SugiyamaLayout().layout(fruit_graph(), heights=[1.0] * 5)

    def test_negative_width(self):
        with pytest.raises(DegenerateInput):
            SugiyamaLayout().layout(fruit_graph(), widths=[1.0, -1.0, 1.0, 1.0])

    def test_infinite_height(self):
        with pytest.raises(DegenerateInput):
            SugiyamaLayout().layout(fruit_graph(), heights=[1.0, float("inf"), 1.0, 1.0])

    def test_solver_failure_propagates(self, monkeypatch):
        monkeypatch.setattr(sugiyama, "create_solver", FailingSolver)
        with pytest.raises(SolverError) as exc:
            SugiyamaLayout().layout(fruit_graph())
        assert exc.value.status == "INFEASIBLE"

    def test_unknown_backend(self):
        with pytest.raises(ValueError):
            SugiyamaLayout(HierarchicalConfig(lp_backend="nope")).layout(fruit_graph())
