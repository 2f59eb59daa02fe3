"""Maximum-flow computation via shortest augmenting paths (Edmonds-Karp).

Each iteration runs a breadth-first search from the source over arcs with
positive residual capacity, recording predecessors and the bottleneck seen
along each discovery path. BFS finds an augmenting path with the fewest arcs,
which bounds the number of augmentations by ``O(V * E)``. The bottleneck is
pushed along the path and added to the flow value; the loop stops once the
sink is unreachable.

The minimum cut is read off the final residual graph: vertices still
reachable from the source form the source side, and the original capacity
edges leaving that side form the cut. Their capacities sum to the flow value.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple, Union

from relnet.algorithms.base import VertexId
from relnet.algorithms.paths import reconstruct_path
from relnet.algorithms.residual import ResidualGraph
from relnet.algorithms.types import AugmentingPath, MinCut, ResidualUpdate
from relnet.config import SOLVER_CONFIG, SolverConfig
from relnet.errors import FlowInvariantError
from relnet.graph.site_graph import SiteGraph
from relnet.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class MaxFlowResult:
    """Outcome of one max-flow run.

    Attributes:
        source: Source vertex name.
        sink: Sink vertex name.
        value: Maximum flow value.
        trace: Augmenting paths in the order they were applied.
        residual: Final residual graph of the run.
    """

    source: VertexId
    sink: VertexId
    value: int
    trace: Tuple[AugmentingPath, ...]
    residual: ResidualGraph = field(repr=False, compare=False)

    def min_cut(self, config: Optional[SolverConfig] = None) -> MinCut:
        """Derive the minimum cut from this run's residual graph."""
        return min_cut(self, config=config)

    def edge_flows(self) -> Dict[Tuple[VertexId, VertexId], int]:
        """Return the flow assigned to every capacity edge, keyed by names."""
        names = self.residual.graph.names
        return {
            (names[u], names[v]): f for (u, v), f in self.residual.edge_flows().items()
        }

    def to_dict(self) -> Dict[str, Any]:
        return {
            "source": self.source,
            "sink": self.sink,
            "value": self.value,
            "trace": [step.to_dict() for step in self.trace],
        }


def _bfs_augmenting_path(
    residual: ResidualGraph,
    source: int,
    sink: int,
) -> Tuple[Optional[int], Dict[int, int]]:
    """Breadth-first search for a shortest augmenting path.

    Returns:
        A tuple of (bottleneck, pred). ``bottleneck`` is None when the sink
        was not reached.
    """
    pred: Dict[int, int] = {}
    bottleneck: Dict[int, int] = {}
    visited = {source}
    queue = deque([source])
    while queue:
        node = queue.popleft()
        for neighbor, r in residual.positive_out(node):
            if neighbor in visited:
                continue
            visited.add(neighbor)
            pred[neighbor] = node
            bottleneck[neighbor] = r if node == source else min(bottleneck[node], r)
            if neighbor == sink:
                return bottleneck[neighbor], pred
            queue.append(neighbor)
    return None, pred


def max_flow(
    graph: SiteGraph,
    source: VertexId,
    sink: VertexId,
    *,
    config: Optional[SolverConfig] = None,
) -> MaxFlowResult:
    """Compute the maximum flow from ``source`` to ``sink`` on the capacity layer.

    A fresh residual graph is created per call and returned with the result,
    so independent runs never share state.

    Args:
        graph: The site graph.
        source: Source vertex name.
        sink: Sink vertex name.
        config: Solver configuration; defaults to ``SOLVER_CONFIG``.

    Returns:
        MaxFlowResult: Flow value, augmenting-path trace and final residual graph.

    Raises:
        UnknownVertex: If ``source`` or ``sink`` is not in the graph.
        FlowInvariantError: If ``config.max_augmentations`` is exceeded.

    Examples:
        >>> g = build_graph(["A", "B", "C"], capacity_edges=[("A", "B", 10), ("B", "C", 5)])
        >>> max_flow(g, "A", "C").value
        5
    """
    cfg = config or SOLVER_CONFIG
    src = graph.index_of(source)
    dst = graph.index_of(sink)

    residual = ResidualGraph(graph, src, dst)
    trace: List[AugmentingPath] = []
    value = 0

    # Degenerate case (s == t): no flow can leave and arrive at the same
    # vertex, so the maximum is 0 and nothing is searched.
    while src != dst:
        pushed, pred = _bfs_augmenting_path(residual, src, dst)
        if pushed is None:
            break
        if cfg.augmentations_exceeded(len(trace) + 1):
            raise FlowInvariantError(
                f"Exceeded {cfg.max_augmentations} augmentations for "
                f"{source} -> {sink}."
            )

        path = reconstruct_path(pred, dst, src)
        updates: List[ResidualUpdate] = []
        for u, v in zip(path, path[1:]):
            residual.push(u, v, pushed)
            if cfg.record_residual_updates:
                updates.append(
                    ResidualUpdate(
                        source=graph.names[u],
                        target=graph.names[v],
                        forward=residual.residual_capacity(u, v),
                        backward=residual.residual_capacity(v, u),
                    )
                )
        value += pushed

        step = AugmentingPath(
            path=tuple(graph.names[i] for i in path),
            flow=pushed,
            updates=tuple(updates),
        )
        trace.append(step)
        logger.debug(
            "Augmentation %d: %s pushed %d (total %d)",
            len(trace),
            " -> ".join(step.path),
            pushed,
            value,
        )

    logger.info(
        "Max flow %s -> %s: %d after %d augmentation(s)",
        source,
        sink,
        value,
        len(trace),
    )
    return MaxFlowResult(
        source=source,
        sink=sink,
        value=value,
        trace=tuple(trace),
        residual=residual,
    )


def min_cut(
    flow: Union[MaxFlowResult, ResidualGraph],
    source: Optional[VertexId] = None,
    *,
    config: Optional[SolverConfig] = None,
) -> MinCut:
    """Derive a minimum cut from the terminal residual graph of a max-flow run.

    The source side is every vertex reachable from the source over arcs with
    strictly positive residual capacity; the sink side is the rest. Cut edges
    are the original capacity edges crossing from the source side to the sink
    side. The residual graph is only read, so repeated calls return identical
    partitions.

    Args:
        flow: A `MaxFlowResult`, or the `ResidualGraph` it holds.
        source: Optional source name; must match the run's source.
        config: Solver configuration; defaults to ``SOLVER_CONFIG``.

    Returns:
        MinCut: Partition, cut edges sorted by vertex index, and their total capacity.

    Raises:
        TypeError: If ``flow`` is neither a result nor a residual graph.
        ValueError: If ``source`` differs from the run's source.
        FlowInvariantError: If verification is enabled and the cut capacity
            differs from the flow value, or the sink is still reachable.
    """
    cfg = config or SOLVER_CONFIG
    if isinstance(flow, MaxFlowResult):
        residual = flow.residual
        expected = flow.value
    elif isinstance(flow, ResidualGraph):
        residual = flow
        expected = residual.flow_value()
    else:
        raise TypeError(
            f"min_cut expects a MaxFlowResult or ResidualGraph, got {type(flow).__name__}."
        )

    graph = residual.graph
    names = graph.names
    if source is not None and graph.index_of(source) != residual.source:
        raise ValueError(
            f"Residual graph was built for source '{names[residual.source]}', "
            f"not '{source}'."
        )

    cut_edges = []
    if residual.source == residual.sink:
        # Trivial partition: the source alone, nothing crosses.
        reached = {residual.source}
    else:
        reached = residual.reachable_from(residual.source)
        for u in sorted(reached):
            for v, capacity in sorted(graph.capacity_out(u)):
                if v not in reached:
                    cut_edges.append((names[u], names[v], capacity))
    total = sum(c for _u, _v, c in cut_edges)

    if cfg.verify_min_cut:
        if residual.source != residual.sink and residual.sink in reached:
            raise FlowInvariantError(
                f"Sink '{names[residual.sink]}' is still reachable; the flow is not maximal."
            )
        if total != expected:
            raise FlowInvariantError(
                f"Min-cut capacity {total} does not match max-flow value {expected}."
            )

    logger.debug(
        "Min cut: %d source-side vertices, %d cut edge(s), capacity %d",
        len(reached),
        len(cut_edges),
        total,
    )
    return MinCut(
        source_side=frozenset(names[i] for i in reached),
        sink_side=frozenset(n for i, n in enumerate(names) if i not in reached),
        cut_edges=tuple(cut_edges),
        total_capacity=total,
    )
