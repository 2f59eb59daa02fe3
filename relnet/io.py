"""Load site graphs from YAML documents or plain mappings.

Expected shape::

    sites: [KTM, JA, JB]
    reliability:
      - {source: KTM, target: JA, probability: 0.9}
    capacity:
      - {source: KTM, target: JA, capacity: 10}

Both edge sections are optional. `SiteGraph.to_dict()` emits the same shape.
"""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Tuple

import yaml

from relnet.errors import InvalidGraph
from relnet.graph.site_graph import SiteGraph, build_graph

_RECOGNIZED_KEYS = {"sites", "reliability", "capacity"}


def _edge_triples(section: Any, section_name: str, weight_key: str) -> List[Tuple[Any, Any, Any]]:
    if section is None:
        return []
    if not isinstance(section, list):
        raise InvalidGraph(f"'{section_name}' must be a list of edge mappings.")
    triples = []
    for entry in section:
        if not isinstance(entry, dict):
            raise InvalidGraph(
                f"Each '{section_name}' entry must be a mapping, got {entry!r}."
            )
        missing = {"source", "target", weight_key} - set(entry)
        if missing:
            raise InvalidGraph(
                f"'{section_name}' entry {entry!r} is missing "
                f"{', '.join(sorted(missing))}."
            )
        extra = set(entry) - {"source", "target", weight_key}
        if extra:
            raise InvalidGraph(
                f"Unrecognized key(s) {', '.join(sorted(extra))} in '{section_name}' entry."
            )
        triples.append((entry["source"], entry["target"], entry[weight_key]))
    return triples


def graph_from_dict(data: Mapping[str, Any]) -> SiteGraph:
    """Build a SiteGraph from a mapping with ``sites``, ``reliability`` and ``capacity``.

    Raises:
        InvalidGraph: If the mapping has the wrong shape.
        InvalidEdgeWeight: If an edge weight is out of range.
        UnknownVertex: If an edge references an undeclared site.
    """
    if not isinstance(data, Mapping):
        raise InvalidGraph("Graph description must be a mapping at top-level.")
    extra = set(data) - _RECOGNIZED_KEYS
    if extra:
        raise InvalidGraph(
            f"Unrecognized top-level key(s): {', '.join(sorted(map(str, extra)))}. "
            f"Allowed keys are {sorted(_RECOGNIZED_KEYS)}"
        )
    sites = data.get("sites")
    if not isinstance(sites, list):
        raise InvalidGraph("'sites' must be a list of site names.")

    return build_graph(
        sites,
        _edge_triples(data.get("reliability"), "reliability", "probability"),
        _edge_triples(data.get("capacity"), "capacity", "capacity"),
    )


def load_graph_yaml(yaml_str: str) -> SiteGraph:
    """Parse a YAML document and build a SiteGraph from it."""
    data = yaml.safe_load(yaml_str)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise InvalidGraph("The provided YAML must map to a dictionary at top-level.")
    return graph_from_dict(data)


def dump_graph_yaml(graph: SiteGraph) -> str:
    """Serialize a SiteGraph to YAML in the shape `load_graph_yaml` accepts."""
    data: Dict[str, Any] = graph.to_dict()
    return yaml.safe_dump(data, sort_keys=False)
