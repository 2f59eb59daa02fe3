"""Cross-check both solvers against NetworkX on seeded random graphs."""

import math
import random

import networkx as nx
import pytest
from pytest import approx

from relnet.algorithms.max_flow import max_flow
from relnet.algorithms.safest_path import path_probability, safest_paths
from relnet.graph.site_graph import build_graph


def _random_graph(seed: int, n: int = 8, density: float = 0.35):
    rng = random.Random(seed)
    names = [f"N{i}" for i in range(n)]
    reliability = []
    capacity = []
    for u in names:
        for v in names:
            if u == v:
                continue
            if rng.random() < density:
                reliability.append((u, v, round(rng.uniform(0.05, 1.0), 3)))
            if rng.random() < density:
                capacity.append((u, v, rng.randint(0, 20)))
    return build_graph(names, reliability, capacity), reliability, capacity


@pytest.mark.parametrize("seed", range(12))
def test_max_flow_matches_networkx(seed):
    graph, _reliability, capacity = _random_graph(seed)
    oracle = nx.DiGraph()
    oracle.add_nodes_from(graph.names)
    oracle.add_weighted_edges_from(capacity, weight="capacity")

    for sink in graph.names[1:]:
        result = max_flow(graph, "N0", sink)
        assert result.value == nx.maximum_flow_value(oracle, "N0", sink)
        cut = result.min_cut()
        assert cut.total_capacity == result.value
        assert sink in cut.sink_side


@pytest.mark.parametrize("seed", range(12))
def test_safest_paths_match_networkx_dijkstra(seed):
    graph, reliability, _capacity = _random_graph(seed)
    oracle = nx.DiGraph()
    oracle.add_nodes_from(graph.names)
    oracle.add_weighted_edges_from(reliability, weight="probability")

    lengths = nx.single_source_dijkstra_path_length(
        oracle, "N0", weight=lambda u, v, d: -math.log(d["probability"])
    )
    result = safest_paths(graph, "N0")
    for target in graph.names:
        if target not in lengths:
            assert result[target] is None
            continue
        assert result.path_safety(target) == approx(math.exp(-lengths[target]))
        # Whatever path is reported on ties, it must achieve the optimal value.
        path = result.path(target)
        assert path[0] == "N0" and path[-1] == target
        assert len(set(path)) == len(path)
        assert path_probability(graph, path) == approx(result.path_safety(target))
