"""relnet: reliability and throughput analysis over fixed site networks.

relnet answers two questions on one directed topology:

    safest_paths() - paths maximizing the product of edge probabilities
    max_flow()     - maximum integer flow between a source and a sink
    min_cut()      - the minimum edge cut proving that flow value

Example:
    from relnet import build_graph, max_flow, safest_paths

    g = build_graph(
        ["KTM", "JA", "PH"],
        reliability_edges=[("KTM", "JA", 0.90), ("JA", "PH", 0.95)],
        capacity_edges=[("KTM", "JA", 10), ("JA", "PH", 8)],
    )
    safest_paths(g, "KTM").path_safety("PH")  # 0.855
    result = max_flow(g, "KTM", "PH")
    result.value, result.min_cut().cut_edges  # 8, (("JA", "PH", 8),)
"""

from __future__ import annotations

from relnet import logging
from relnet._version import __version__
from relnet.algorithms import (
    AugmentingPath,
    MaxFlowResult,
    MinCut,
    ResidualGraph,
    SafestPath,
    SafestPaths,
    max_flow,
    min_cut,
    path_log_cost,
    path_probability,
    path_safety,
    reconstruct_path,
    safest_path_tree,
    safest_paths,
)
from relnet.config import SOLVER_CONFIG, SolverConfig
from relnet.errors import (
    FlowInvariantError,
    InvalidEdgeWeight,
    InvalidGraph,
    RelnetError,
    UnknownVertex,
)
from relnet.graph import SiteGraph, build_graph
from relnet.graph.convert import from_networkx, to_networkx
from relnet.io import graph_from_dict, load_graph_yaml

__all__ = [
    # Version
    "__version__",
    # Model
    "SiteGraph",
    "build_graph",
    # Safest paths
    "SafestPath",
    "SafestPaths",
    "safest_paths",
    "safest_path_tree",
    "path_safety",
    "path_probability",
    "path_log_cost",
    "reconstruct_path",
    # Max flow
    "AugmentingPath",
    "MaxFlowResult",
    "MinCut",
    "ResidualGraph",
    "max_flow",
    "min_cut",
    # Errors
    "RelnetError",
    "InvalidGraph",
    "InvalidEdgeWeight",
    "UnknownVertex",
    "FlowInvariantError",
    # Configuration and I/O
    "SolverConfig",
    "SOLVER_CONFIG",
    "graph_from_dict",
    "load_graph_yaml",
    "from_networkx",
    "to_networkx",
    # Utilities
    "logging",
]
