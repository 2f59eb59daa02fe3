"""Path reconstruction from predecessor maps."""

from __future__ import annotations

from typing import Dict, Hashable, Optional, Tuple, TypeVar

N = TypeVar("N", bound=Hashable)


def reconstruct_path(
    predecessors: Dict[N, N],
    target: N,
    source: Optional[N] = None,
) -> Tuple[N, ...]:
    """Walk a predecessor map back from ``target`` and return the path.

    Args:
        predecessors: Mapping of vertex to its immediate predecessor. The
            search source has no entry.
        target: Last vertex of the path.
        source: Expected first vertex. When omitted, the walk stops at the
            first vertex without a predecessor.

    Returns:
        Tuple of vertices from source to target. A target equal to the source
        yields a one-element path.

    Raises:
        ValueError: If the walk does not reach ``source`` or revisits a vertex.
    """
    path = [target]
    seen = {target}
    node = target
    while node != source:
        if node not in predecessors:
            if source is None:
                break
            raise ValueError(f"No predecessor chain from {target!r} back to {source!r}.")
        node = predecessors[node]
        if node in seen:
            raise ValueError(f"Predecessor map contains a cycle through {node!r}.")
        seen.add(node)
        path.append(node)
    path.reverse()
    return tuple(path)
