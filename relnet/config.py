"""Configuration classes for relnet solvers."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class SolverConfig:
    """Runtime switches for the safest-path and max-flow solvers."""

    # Check that the min-cut capacity equals the max-flow value
    verify_min_cut: bool = True

    # Keep per-hop residual updates in the augmenting-path trace
    record_residual_updates: bool = True

    # Upper bound on augmentations per max-flow run; None means unbounded
    max_augmentations: Optional[int] = None

    def augmentations_exceeded(self, count: int) -> bool:
        """Return True when ``count`` augmentations is over the configured limit."""
        return self.max_augmentations is not None and count > self.max_augmentations


# Global configuration instance
SOLVER_CONFIG = SolverConfig()
