"""Conversion utilities between SiteGraph and NetworkX graphs.

The NetworkX side is a name-keyed ``DiGraph`` whose edges carry the
``probability`` attribute, the ``capacity`` attribute, or both, depending on
which layers contain the edge.
"""

from typing import Any, List, Tuple

import networkx as nx

from relnet.graph.site_graph import SiteGraph, build_graph


def to_networkx(graph: SiteGraph) -> nx.DiGraph:
    """Merge both layers of a SiteGraph into one name-keyed NetworkX DiGraph.

    Args:
        graph: The SiteGraph to convert.

    Returns:
        A new, mutable ``nx.DiGraph`` with one node per site. An edge present
        in only one layer carries only that layer's attribute.
    """
    nx_graph = nx.DiGraph()
    nx_graph.add_nodes_from(graph.names)
    for u, v, p in graph.reliability_edges():
        nx_graph.add_edge(u, v, probability=p)
    for u, v, c in graph.capacity_edges():
        nx_graph.add_edge(u, v, capacity=c)
    return nx_graph


def from_networkx(
    nx_graph: nx.DiGraph,
    probability_attr: str = "probability",
    capacity_attr: str = "capacity",
) -> SiteGraph:
    """Build a SiteGraph from a NetworkX DiGraph.

    Node labels are converted with ``str()`` and keep the graph's node order.
    Each edge contributes a reliability edge when it has ``probability_attr``
    and a capacity edge when it has ``capacity_attr``; all values go through
    the usual `build_graph` validation.

    Args:
        nx_graph: Source graph. Must be directed.
        probability_attr: Edge attribute holding the traversal probability.
        capacity_attr: Edge attribute holding the integer capacity.

    Returns:
        SiteGraph: The validated graph.

    Raises:
        TypeError: If ``nx_graph`` is undirected or a multigraph.
    """
    if not nx_graph.is_directed() or nx_graph.is_multigraph():
        raise TypeError("from_networkx expects a simple directed graph (nx.DiGraph).")

    names = [str(n) for n in nx_graph.nodes]
    reliability: List[Tuple[str, str, Any]] = []
    capacity: List[Tuple[str, str, Any]] = []
    for u, v, data in nx_graph.edges(data=True):
        if probability_attr in data:
            reliability.append((str(u), str(v), data[probability_attr]))
        if capacity_attr in data:
            capacity.append((str(u), str(v), data[capacity_attr]))
    return build_graph(names, reliability, capacity)
