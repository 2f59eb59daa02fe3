"""Graph algorithms: safest paths and maximum flow."""

from relnet.algorithms.max_flow import MaxFlowResult, max_flow, min_cut
from relnet.algorithms.paths import reconstruct_path
from relnet.algorithms.residual import ResidualGraph
from relnet.algorithms.safest_path import (
    SafestPaths,
    path_log_cost,
    path_probability,
    path_safety,
    safest_path_tree,
    safest_paths,
)
from relnet.algorithms.types import AugmentingPath, MinCut, ResidualUpdate, SafestPath

__all__ = [
    "AugmentingPath",
    "MaxFlowResult",
    "MinCut",
    "ResidualGraph",
    "ResidualUpdate",
    "SafestPath",
    "SafestPaths",
    "max_flow",
    "min_cut",
    "path_log_cost",
    "path_probability",
    "path_safety",
    "reconstruct_path",
    "safest_path_tree",
    "safest_paths",
]
