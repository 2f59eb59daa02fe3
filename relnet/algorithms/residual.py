"""Residual graph owned by a single max-flow run.

The residual graph starts as a copy of the capacity layer and is mutated only
through `ResidualGraph.push`. Pushing ``f`` units along ``u -> v`` lowers
``residual[u][v]`` by ``f`` and raises ``residual[v][u]`` by ``f``, creating
the back edge when the capacity layer has no ``v -> u`` edge, so later
augmentations can cancel flow.
"""

from __future__ import annotations

from collections import deque
from typing import Dict, Iterator, Optional, Set, Tuple

from relnet.errors import FlowInvariantError
from relnet.graph.site_graph import SiteGraph


class ResidualGraph:
    """Mutable residual capacities for one source/sink pair.

    Attributes:
        graph: The immutable graph whose capacity layer seeded this state.
        source: Index of the run's source vertex.
        sink: Index of the run's sink vertex.
    """

    def __init__(self, graph: SiteGraph, source: int, sink: int) -> None:
        self.graph = graph
        self.source = source
        self.sink = sink
        self._residual: Dict[int, Dict[int, int]] = {
            u: dict(graph.capacity_out(u)) for u in range(graph.vertex_count)
        }

    def __repr__(self) -> str:
        return (
            f"ResidualGraph(source={self.graph.names[self.source]!r}, "
            f"sink={self.graph.names[self.sink]!r})"
        )

    def residual_capacity(self, u: int, v: int) -> int:
        """Return the residual capacity of ``u -> v`` (0 when there is no entry)."""
        return self._residual[u].get(v, 0)

    def positive_out(self, u: int) -> Iterator[Tuple[int, int]]:
        """Yield ``(v, residual)`` for arcs leaving ``u`` with residual > 0."""
        for v, r in self._residual[u].items():
            if r > 0:
                yield v, r

    def push(self, u: int, v: int, amount: int) -> None:
        """Push ``amount`` units of flow along ``u -> v``.

        Raises:
            ValueError: If ``amount`` is not positive.
            FlowInvariantError: If ``amount`` exceeds the residual capacity.
        """
        if amount <= 0:
            raise ValueError(f"Flow amount must be positive, got {amount}.")
        available = self.residual_capacity(u, v)
        if amount > available:
            raise FlowInvariantError(
                f"Cannot push {amount} along {self.graph.names[u]} -> "
                f"{self.graph.names[v]}: residual capacity is {available}."
            )
        self._residual[u][v] = available - amount
        self._residual[v][u] = self._residual[v].get(u, 0) + amount

    def net_flow(self, u: int, v: int) -> int:
        """Return net flow ``u -> v`` implied by the residual deltas.

        Equals ``cap[u][v] - residual[u][v]``; negative when the net flow runs
        ``v -> u``.
        """
        capacity = self.graph.capacity(u, v) or 0
        return capacity - self.residual_capacity(u, v)

    def edge_flows(self) -> Dict[Tuple[int, int], int]:
        """Return a flow assignment over the original capacity edges.

        Flow on ``u -> v`` is ``max(0, net_flow(u, v))``. Opposing flows on an
        antiparallel pair cancel, so each value stays within the edge's
        capacity and conservation holds at every vertex except source and sink.
        """
        flows: Dict[Tuple[int, int], int] = {}
        for u in range(self.graph.vertex_count):
            for v, _capacity in self.graph.capacity_out(u):
                flows[(u, v)] = max(0, self.net_flow(u, v))
        return flows

    def flow_value(self) -> int:
        """Return the net flow leaving the source."""
        if self.source == self.sink:
            return 0
        return sum(self.net_flow(self.source, v) for v in self._residual[self.source])

    def reachable_from(self, start: Optional[int] = None) -> Set[int]:
        """Return vertices reachable over arcs with strictly positive residual.

        Args:
            start: Start vertex index; defaults to the run's source.
        """
        if start is None:
            start = self.source
        reached = {start}
        queue = deque([start])
        while queue:
            u = queue.popleft()
            for v, _r in self.positive_out(u):
                if v not in reached:
                    reached.add(v)
                    queue.append(v)
        return reached

    def to_dict(self) -> Dict[str, Dict[str, int]]:
        """Return residual capacities keyed by vertex names."""
        names = self.graph.names
        return {
            names[u]: {names[v]: r for v, r in arcs.items()}
            for u, arcs in self._residual.items()
        }
