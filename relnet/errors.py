"""Exception types raised by relnet.

Builtin bases are kept so callers catching ``ValueError`` or ``KeyError``
keep working.
"""

from __future__ import annotations


class RelnetError(Exception):
    """Base class for all relnet errors."""


class InvalidGraph(RelnetError, ValueError):
    """Graph description is malformed (duplicate names or edges, bad shape)."""


class InvalidEdgeWeight(InvalidGraph):
    """Edge weight outside its domain.

    Raised for a reliability probability outside ``(0, 1]`` or a capacity
    that is not a non-negative integer.
    """

    def __init__(self, layer: str, source: str, target: str, weight: object) -> None:
        self.layer = layer
        self.source = source
        self.target = target
        self.weight = weight
        if layer == "reliability":
            expected = "a probability in (0, 1]"
        else:
            expected = "a non-negative integer"
        super().__init__(
            f"Invalid {layer} weight {weight!r} on edge '{source}' -> '{target}': "
            f"expected {expected}."
        )


class UnknownVertex(RelnetError, KeyError):
    """Vertex name is not part of the graph's vertex set."""

    def __init__(self, name: object) -> None:
        self.name = name
        super().__init__(name)

    def __str__(self) -> str:
        return f"Vertex '{self.name}' is not in the graph."


class FlowInvariantError(RelnetError, AssertionError):
    """A max-flow run violated one of its invariants."""
