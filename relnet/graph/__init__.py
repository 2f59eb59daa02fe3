"""Graph model and helpers.

This package provides the immutable `SiteGraph`, its validating constructor
`build_graph`, and conversion helpers to and from NetworkX (`convert`).
"""

from relnet.graph.site_graph import SiteGraph, build_graph

__all__ = ["SiteGraph", "build_graph"]
