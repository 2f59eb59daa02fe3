"""Shared aliases and the reliability weight transform."""

from __future__ import annotations

import math

# Vertex names at the API boundary; solvers work on integer indices internally
VertexId = str

# Additive path cost in log space: -ln(probability)
Cost = float


def transform_weight(probability: float) -> Cost:
    """Map a probability in ``(0, 1]`` to the additive cost ``-ln(p)``.

    ``ln`` is strictly increasing, so maximizing a product of probabilities
    equals minimizing the sum of transformed weights, and every transformed
    weight is non-negative.
    """
    return -math.log(probability)


def restore_probability(cost: Cost) -> float:
    """Inverse of `transform_weight`: ``exp(-cost)``."""
    return math.exp(-cost)
