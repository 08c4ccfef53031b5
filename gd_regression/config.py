from __future__ import annotations

"""
Hyperparameters for the gradient descent trainers.
"""

from dataclasses import dataclass

from .constants import (
    DEFAULT_BATCH_SIZE,
    DEFAULT_DECISION_BOUNDARY,
    DEFAULT_ITERATIONS,
    DEFAULT_LEARNING_RATE,
)


@dataclass(frozen=True)
class Hyperparameters:
    """
    Training options. The trainer copies ``learning_rate`` into its own
    ``learning_rate_`` attribute and adapts that copy, so instances never change.

    ``decision_boundary`` is only read by the binary logistic trainer.
    """

    learning_rate: float = DEFAULT_LEARNING_RATE
    iterations: int = DEFAULT_ITERATIONS
    batch_size: int = DEFAULT_BATCH_SIZE
    decision_boundary: float = DEFAULT_DECISION_BOUNDARY

    def __post_init__(self):
        if not self.learning_rate > 0:
            raise ValueError(f"learning_rate must be positive, got {self.learning_rate}")
        if self.iterations < 1:
            raise ValueError(f"iterations must be at least 1, got {self.iterations}")
        if self.batch_size < 1:
            raise ValueError(f"batch_size must be at least 1, got {self.batch_size}")
        if not 0.0 <= self.decision_boundary <= 1.0:
            raise ValueError(
                f"decision_boundary must lie in [0, 1], got {self.decision_boundary}"
            )
