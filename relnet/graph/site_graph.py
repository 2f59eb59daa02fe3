"""Site graph: a fixed vertex set carrying a reliability and a capacity layer.

`SiteGraph` wraps two frozen ``networkx.DiGraph`` instances keyed by vertex
index. The reliability layer stores a ``probability`` attribute in ``(0, 1]``
per edge; the capacity layer stores a non-negative integer ``capacity``. An
absent edge is simply absent from the layer, so a zero-capacity edge stays
distinguishable from "no edge".

Graphs are created through `build_graph`, which validates every input and
either returns a complete graph or raises.
"""

from __future__ import annotations

import numbers
from typing import Any, Dict, Iterable, Iterator, List, Optional, Sequence, Tuple

import networkx as nx

from relnet.errors import InvalidEdgeWeight, InvalidGraph, UnknownVertex
from relnet.logging import get_logger

logger = get_logger(__name__)

VertexIndex = int
ReliabilityEdge = Tuple[str, str, float]
CapacityEdge = Tuple[str, str, int]


class SiteGraph:
    """Immutable directed graph over a fixed, named vertex set.

    Vertices are addressed by index internally and by name at the API
    boundary. Both layers are frozen after construction; any attempt to
    mutate them through networkx raises ``networkx.NetworkXError``.

    Attributes:
        names: Vertex names in index order.
    """

    def __init__(
        self,
        names: Sequence[str],
        reliability: nx.DiGraph,
        capacity: nx.DiGraph,
    ) -> None:
        self.names: Tuple[str, ...] = tuple(names)
        self._index: Dict[str, VertexIndex] = {n: i for i, n in enumerate(self.names)}
        self._reliability = nx.freeze(reliability)
        self._capacity = nx.freeze(capacity)

    def __repr__(self) -> str:
        return (
            f"SiteGraph(vertices={self.vertex_count}, "
            f"reliability_edges={self._reliability.number_of_edges()}, "
            f"capacity_edges={self._capacity.number_of_edges()})"
        )

    def __len__(self) -> int:
        return len(self.names)

    def __contains__(self, name: object) -> bool:
        return name in self._index

    #
    # Vertex lookup
    #
    @property
    def vertex_count(self) -> int:
        return len(self.names)

    def index_of(self, name: str) -> VertexIndex:
        """Translate a vertex name to its index.

        Raises:
            UnknownVertex: If the name is not part of the vertex set.
        """
        try:
            return self._index[name]
        except (KeyError, TypeError):
            raise UnknownVertex(name) from None

    def name_of(self, index: VertexIndex) -> str:
        """Translate a vertex index to its name.

        Raises:
            UnknownVertex: If the index is not an integer in range.
        """
        if (
            isinstance(index, bool)
            or not isinstance(index, int)
            or not 0 <= index < len(self.names)
        ):
            raise UnknownVertex(index)
        return self.names[index]

    #
    # Layer access
    #
    @property
    def reliability(self) -> nx.DiGraph:
        """Frozen reliability layer keyed by vertex index."""
        return self._reliability

    @property
    def capacity_graph(self) -> nx.DiGraph:
        """Frozen capacity layer keyed by vertex index."""
        return self._capacity

    def reliability_out(self, u: VertexIndex) -> Iterator[Tuple[VertexIndex, float]]:
        """Yield ``(v, probability)`` for every reliability edge leaving ``u``."""
        for v, attr in self._reliability._adj[u].items():  # type: ignore[attr-defined]
            yield v, attr["probability"]

    def capacity_out(self, u: VertexIndex) -> Iterator[Tuple[VertexIndex, int]]:
        """Yield ``(v, capacity)`` for every capacity edge leaving ``u``."""
        for v, attr in self._capacity._adj[u].items():  # type: ignore[attr-defined]
            yield v, attr["capacity"]

    def probability(self, u: VertexIndex, v: VertexIndex) -> Optional[float]:
        """Return the probability of edge ``u -> v``, or None if there is no edge."""
        attr = self._reliability._adj[u].get(v)  # type: ignore[attr-defined]
        return None if attr is None else attr["probability"]

    def capacity(self, u: VertexIndex, v: VertexIndex) -> Optional[int]:
        """Return the capacity of edge ``u -> v``, or None if there is no edge."""
        attr = self._capacity._adj[u].get(v)  # type: ignore[attr-defined]
        return None if attr is None else attr["capacity"]

    def reliability_edges(self) -> List[ReliabilityEdge]:
        """Return all reliability edges as ``(source, target, probability)`` by name."""
        return [
            (self.names[u], self.names[v], p)
            for u, v, p in self._reliability.edges(data="probability")
        ]

    def capacity_edges(self) -> List[CapacityEdge]:
        """Return all capacity edges as ``(source, target, capacity)`` by name."""
        return [
            (self.names[u], self.names[v], c)
            for u, v, c in self._capacity.edges(data="capacity")
        ]

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-friendly description accepted by `relnet.io.graph_from_dict`."""
        return {
            "sites": list(self.names),
            "reliability": [
                {"source": u, "target": v, "probability": p}
                for u, v, p in self.reliability_edges()
            ],
            "capacity": [
                {"source": u, "target": v, "capacity": c}
                for u, v, c in self.capacity_edges()
            ],
        }


def _validate_probability(u: str, v: str, weight: Any) -> float:
    if isinstance(weight, bool) or not isinstance(weight, numbers.Real):
        raise InvalidEdgeWeight("reliability", u, v, weight)
    p = float(weight)
    # NaN fails both comparisons
    if not (0.0 < p <= 1.0):
        raise InvalidEdgeWeight("reliability", u, v, weight)
    return p


def _validate_capacity(u: str, v: str, weight: Any) -> int:
    if isinstance(weight, bool) or not isinstance(weight, numbers.Real):
        raise InvalidEdgeWeight("capacity", u, v, weight)
    if isinstance(weight, numbers.Integral):
        c = int(weight)
    else:
        as_float = float(weight)
        if not as_float.is_integer():
            raise InvalidEdgeWeight("capacity", u, v, weight)
        c = int(as_float)
    if c < 0:
        raise InvalidEdgeWeight("capacity", u, v, weight)
    return c


def _add_layer_edges(
    layer: nx.DiGraph,
    index: Dict[str, VertexIndex],
    edges: Iterable[Tuple[str, str, Any]],
    layer_name: str,
    attr_name: str,
    validate,
) -> None:
    for edge in edges:
        try:
            u, v, weight = edge
        except (TypeError, ValueError):
            raise InvalidGraph(
                f"Each {layer_name} edge must be a (source, target, weight) triple, "
                f"got {edge!r}."
            ) from None
        if u not in index:
            raise UnknownVertex(u)
        if v not in index:
            raise UnknownVertex(v)
        if u == v and layer_name == "capacity":
            # The capacity diagonal is zero; an explicit zero entry is dropped.
            if validate(u, v, weight) != 0:
                raise InvalidEdgeWeight(layer_name, u, v, weight)
            continue
        ui, vi = index[u], index[v]
        if layer.has_edge(ui, vi):
            raise InvalidGraph(
                f"Duplicate {layer_name} edge '{u}' -> '{v}'."
            )
        layer.add_edge(ui, vi, **{attr_name: validate(u, v, weight)})


def build_graph(
    vertex_names: Sequence[str],
    reliability_edges: Iterable[Tuple[str, str, Any]] = (),
    capacity_edges: Iterable[Tuple[str, str, Any]] = (),
) -> SiteGraph:
    """Validate inputs and construct a `SiteGraph`.

    Args:
        vertex_names: Unique, non-empty vertex names; their order fixes the
            vertex indices.
        reliability_edges: ``(source, target, probability)`` triples with
            probability in ``(0, 1]``.
        capacity_edges: ``(source, target, capacity)`` triples with a
            non-negative integer capacity. Zero is a legal capacity.

    Returns:
        SiteGraph: The validated, immutable graph.

    Raises:
        InvalidEdgeWeight: A probability outside ``(0, 1]`` or a negative or
            fractional capacity, or a nonzero capacity self-loop.
        UnknownVertex: An edge references an undeclared vertex name.
        InvalidGraph: Duplicate names, duplicate edges, or malformed edge
            entries.
    """
    names = list(vertex_names)
    index: Dict[str, VertexIndex] = {}
    for i, name in enumerate(names):
        if not isinstance(name, str) or not name:
            raise InvalidGraph(f"Vertex names must be non-empty strings, got {name!r}.")
        if name in index:
            raise InvalidGraph(f"Duplicate vertex name '{name}'.")
        index[name] = i

    reliability = nx.DiGraph()
    reliability.add_nodes_from(range(len(names)))
    capacity = nx.DiGraph()
    capacity.add_nodes_from(range(len(names)))

    _add_layer_edges(
        reliability,
        index,
        reliability_edges,
        "reliability",
        "probability",
        _validate_probability,
    )
    _add_layer_edges(
        capacity, index, capacity_edges, "capacity", "capacity", _validate_capacity
    )

    graph = SiteGraph(names, reliability, capacity)
    logger.info(
        "Built site graph: %d vertices, %d reliability edges, %d capacity edges",
        graph.vertex_count,
        reliability.number_of_edges(),
        capacity.number_of_edges(),
    )
    return graph
