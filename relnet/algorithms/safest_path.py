"""Safest-path search over the reliability layer.

A path's safety is the product of its edge probabilities. Each probability
``p`` is mapped to ``-ln(p)``; since ``ln`` is strictly increasing and every
``p`` lies in ``(0, 1]``, the safest path is the shortest path under these
non-negative weights, and Dijkstra's label-setting search applies unchanged.
Safety is recovered as ``exp(-distance)``.

Notes:
    Ties in tentative distance are broken by heap order, which is
    implementation-defined. The optimal safety value is unique; the reported
    path is not when several paths share it.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from heapq import heappop, heappush
from typing import Any, Dict, Iterator, List, Optional, Sequence, Set, Tuple

from relnet.algorithms.base import (
    Cost,
    VertexId,
    restore_probability,
    transform_weight,
)
from relnet.algorithms.paths import reconstruct_path
from relnet.algorithms.types import Path, SafestPath
from relnet.graph.site_graph import SiteGraph
from relnet.logging import get_logger

logger = get_logger(__name__)


def safest_path_tree(
    graph: SiteGraph,
    source: VertexId,
) -> Tuple[Dict[int, Cost], Dict[int, int]]:
    """Run Dijkstra from ``source`` over ``-ln(p)`` edge weights.

    Args:
        graph: The site graph.
        source: Name of the source vertex.

    Returns:
        A tuple of (distances, predecessors), both keyed by vertex index:
          - distances: log-space cost of the safest path to each reached
            vertex. Unreached vertices have no entry.
          - predecessors: immediate predecessor of each reached vertex other
            than the source.

    Raises:
        UnknownVertex: If ``source`` is not in the graph.
    """
    src = graph.index_of(source)

    dist: Dict[int, Cost] = {src: 0.0}
    pred: Dict[int, int] = {}
    finalized: Set[int] = set()
    min_pq: List[Tuple[Cost, int]] = [(0.0, src)]

    while min_pq:
        current_cost, node = heappop(min_pq)
        if node in finalized:
            continue
        finalized.add(node)

        for neighbor, probability in graph.reliability_out(node):
            if neighbor in finalized:
                continue
            new_cost = current_cost + transform_weight(probability)
            if neighbor not in dist or new_cost < dist[neighbor]:
                dist[neighbor] = new_cost
                pred[neighbor] = node
                heappush(min_pq, (new_cost, neighbor))

    return dist, pred


class SafestPaths(Mapping):
    """Safest paths from one source to every vertex of a graph.

    Maps each vertex name to a `SafestPath`, or to ``None`` when the vertex
    is unreachable from the source.
    """

    def __init__(
        self,
        graph: SiteGraph,
        source: VertexId,
        distances: Dict[int, Cost],
        predecessors: Dict[int, int],
    ) -> None:
        self.graph = graph
        self.source = source
        self._src = graph.index_of(source)
        self._dist = distances
        self._pred = predecessors

    def __repr__(self) -> str:
        return (
            f"SafestPaths(source={self.source!r}, "
            f"reachable={len(self._dist)}/{self.graph.vertex_count})"
        )

    def __getitem__(self, target: VertexId) -> Optional[SafestPath]:
        idx = self.graph.index_of(target)
        if idx not in self._dist:
            return None
        return SafestPath(
            target=target,
            probability=self._probability(idx),
            log_cost=self._dist[idx],
            path=self._path(idx),
        )

    def __iter__(self) -> Iterator[VertexId]:
        return iter(self.graph.names)

    def __len__(self) -> int:
        return self.graph.vertex_count

    def _probability(self, idx: int) -> float:
        if idx == self._src:
            return 1.0
        return restore_probability(self._dist[idx])

    def _path(self, idx: int) -> Path:
        indices = reconstruct_path(self._pred, idx, self._src)
        return tuple(self.graph.names[i] for i in indices)

    def is_reachable(self, target: VertexId) -> bool:
        return self.graph.index_of(target) in self._dist

    def log_distance(self, target: VertexId) -> Cost:
        """Return the log-space distance to ``target``; ``math.inf`` if unreachable."""
        return self._dist.get(self.graph.index_of(target), math.inf)

    def path_safety(self, target: VertexId) -> Optional[float]:
        """Return the safety of the best path to ``target``, or None if unreachable."""
        idx = self.graph.index_of(target)
        if idx not in self._dist:
            return None
        return self._probability(idx)

    def path(self, target: VertexId) -> Optional[Path]:
        """Return the safest path to ``target``, or None if unreachable."""
        idx = self.graph.index_of(target)
        if idx not in self._dist:
            return None
        return self._path(idx)

    def reachable(self) -> Dict[VertexId, SafestPath]:
        """Return entries for reachable vertices only."""
        return {
            name: entry for name, entry in self.items() if entry is not None
        }

    def to_dict(self) -> Dict[str, Any]:
        return {
            "source": self.source,
            "paths": {
                name: (entry.to_dict() if entry is not None else None)
                for name, entry in self.items()
            },
        }


def safest_paths(graph: SiteGraph, source: VertexId) -> SafestPaths:
    """Compute the safest path from ``source`` to every vertex.

    Args:
        graph: The site graph.
        source: Name of the source vertex.

    Returns:
        SafestPaths: Mapping of every vertex name to its `SafestPath`, or to
        ``None`` when unreachable.

    Raises:
        UnknownVertex: If ``source`` is not in the graph.

    Examples:
        >>> g = build_graph(["A", "B", "C"], [("A", "B", 0.9), ("B", "C", 0.5)])
        >>> result = safest_paths(g, "A")
        >>> result.path("C")
        ('A', 'B', 'C')
        >>> round(result.path_safety("C"), 2)
        0.45
    """
    dist, pred = safest_path_tree(graph, source)
    result = SafestPaths(graph, source, dist, pred)
    logger.info(
        "Safest paths from %s: %d of %d vertices reachable",
        source,
        len(dist),
        graph.vertex_count,
    )
    return result


def path_safety(graph: SiteGraph, source: VertexId, target: VertexId) -> Optional[float]:
    """Return the safety of the safest ``source -> target`` path.

    Returns:
        Probability in ``(0, 1]``; exactly ``1.0`` when ``source == target``;
        None when ``target`` is unreachable.

    Raises:
        UnknownVertex: If either vertex is not in the graph.
    """
    graph.index_of(target)
    if source == target:
        graph.index_of(source)
        return 1.0
    return safest_paths(graph, source).path_safety(target)


def _path_edges(graph: SiteGraph, path: Sequence[VertexId]) -> Iterator[float]:
    indices = [graph.index_of(name) for name in path]
    for u, v in zip(indices, indices[1:]):
        p = graph.probability(u, v)
        if p is None:
            raise ValueError(
                f"No reliability edge '{graph.names[u]}' -> '{graph.names[v]}'."
            )
        yield p


def path_probability(graph: SiteGraph, path: Sequence[VertexId]) -> float:
    """Return the product of edge probabilities along an explicit path."""
    return math.prod(_path_edges(graph, path))


def path_log_cost(graph: SiteGraph, path: Sequence[VertexId]) -> Cost:
    """Return the sum of ``-ln(p)`` along an explicit path."""
    return math.fsum(transform_weight(p) for p in _path_edges(graph, path))
