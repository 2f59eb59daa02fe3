"""Public API surface exposed from the package root."""

import pytest

import relnet
from relnet import (
    FlowInvariantError,
    InvalidEdgeWeight,
    InvalidGraph,
    RelnetError,
    UnknownVertex,
    build_graph,
    max_flow,
    min_cut,
    path_safety,
    safest_paths,
)


def test_all_exports_resolve():
    for name in relnet.__all__:
        assert hasattr(relnet, name), name


def test_version():
    assert relnet.__version__ == "0.1.0"


def test_error_hierarchy():
    assert issubclass(InvalidEdgeWeight, InvalidGraph)
    assert issubclass(InvalidGraph, ValueError)
    assert issubclass(UnknownVertex, KeyError)
    assert issubclass(FlowInvariantError, AssertionError)
    for exc in (InvalidGraph, InvalidEdgeWeight, UnknownVertex, FlowInvariantError):
        assert issubclass(exc, RelnetError)
    assert str(UnknownVertex("Z")) == "Vertex 'Z' is not in the graph."


def test_end_to_end(scenario_graph):
    paths = safest_paths(scenario_graph, "KTM")
    assert paths.path("BS") == ("KTM", "JB", "BS")
    assert paths.path_safety("BS") == pytest.approx(0.72)

    flow = max_flow(scenario_graph, "KTM", "BS")
    cut = min_cut(flow)
    assert flow.value == cut.total_capacity == 22


def test_unreachable_and_trivial_cases():
    g = build_graph(
        ["S", "A", "X"],
        reliability_edges=[("S", "A", 0.5), ("X", "S", 0.5)],
        capacity_edges=[("S", "A", 4), ("X", "S", 4)],
    )
    assert path_safety(g, "S", "X") is None
    assert path_safety(g, "S", "S") == 1.0
    assert max_flow(g, "S", "S").value == 0

    flow = max_flow(g, "S", "X")
    assert flow.value == 0
    assert "X" in flow.min_cut().sink_side
