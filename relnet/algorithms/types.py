"""Result records for the safest-path and max-flow solvers.

All records are frozen and reference vertices by name.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Tuple

from relnet.algorithms.base import Cost, VertexId

Path = Tuple[VertexId, ...]

# (source, target, capacity)
CutEdge = Tuple[VertexId, VertexId, int]


@dataclass(frozen=True)
class SafestPath:
    """Most reliable path from a run's source to one target.

    Attributes:
        target: Destination vertex.
        probability: Product of edge probabilities along ``path``.
        log_cost: Sum of ``-ln(p)`` along ``path``.
        path: Vertices from source to target; a single vertex when the target
            is the source.
    """

    target: VertexId
    probability: float
    log_cost: Cost
    path: Path

    @property
    def hops(self) -> int:
        return len(self.path) - 1

    def to_dict(self) -> Dict[str, Any]:
        return {
            "target": self.target,
            "probability": self.probability,
            "log_cost": self.log_cost,
            "path": list(self.path),
        }


@dataclass(frozen=True)
class ResidualUpdate:
    """Residual capacities of one hop right after an augmentation.

    Attributes:
        source: Tail of the hop.
        target: Head of the hop.
        forward: Remaining residual capacity ``source -> target``.
        backward: Residual capacity of the back edge ``target -> source``.
    """

    source: VertexId
    target: VertexId
    forward: int
    backward: int


@dataclass(frozen=True)
class AugmentingPath:
    """One augmentation of the max-flow loop.

    Attributes:
        path: Vertices from source to sink.
        flow: Bottleneck amount pushed along ``path``.
        updates: Per-hop residual state after the push; empty when residual
            recording is disabled.
    """

    path: Path
    flow: int
    updates: Tuple[ResidualUpdate, ...] = field(default=())

    def to_dict(self) -> Dict[str, Any]:
        return {
            "path": list(self.path),
            "flow": self.flow,
            "updates": [
                {
                    "source": u.source,
                    "target": u.target,
                    "forward": u.forward,
                    "backward": u.backward,
                }
                for u in self.updates
            ],
        }


@dataclass(frozen=True)
class MinCut:
    """Source/sink partition proving a max-flow value.

    Attributes:
        source_side: Vertices reachable from the source in the final residual graph.
        sink_side: All remaining vertices.
        cut_edges: Original capacity edges from ``source_side`` to ``sink_side``.
        total_capacity: Sum of ``cut_edges`` capacities.
    """

    source_side: FrozenSet[VertexId]
    sink_side: FrozenSet[VertexId]
    cut_edges: Tuple[CutEdge, ...]
    total_capacity: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "source_side": sorted(self.source_side),
            "sink_side": sorted(self.sink_side),
            "cut_edges": [list(e) for e in self.cut_edges],
            "total_capacity": self.total_capacity,
        }
