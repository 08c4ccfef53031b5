from __future__ import annotations

"""
Column standardization with statistics frozen from the training features.
"""

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class StandardizationStats:
    """Per-column mean and variance (zero variances already replaced by 1)."""

    mean: np.ndarray
    variance: np.ndarray

    @property
    def n_features(self) -> int:
        return int(self.mean.shape[0])


def add_bias(features: np.ndarray) -> np.ndarray:
    """Prepend a column of ones so the first weight row acts as the intercept."""
    return np.hstack([np.ones((features.shape[0], 1)), features])


def _as_matrix(raw, n_features: int = 1) -> np.ndarray:
    X = np.asarray(raw, dtype=float)
    if X.ndim == 1:
        # one column of values, or a single row for multi-feature models
        X = X.reshape(-1, 1) if n_features == 1 else X.reshape(1, -1)
    if X.ndim != 2:
        raise ValueError(f"Expected a 2-D feature matrix, got shape {X.shape}")
    return X


def standardize(raw) -> tuple[np.ndarray, StandardizationStats]:
    """
    Compute stats from ``raw`` and return the standardized, bias-augmented
    matrix along with them. Call this once, on training data only.
    """
    X = _as_matrix(raw)
    mean = X.mean(axis=0)
    variance = X.var(axis=0)
    variance[variance == 0] = 1.0
    stats = StandardizationStats(mean=mean, variance=variance)
    return apply_stats(X, stats), stats


def apply_stats(raw, stats: StandardizationStats) -> np.ndarray:
    """
    Standardize ``raw`` with previously computed stats and add the bias column.
    A 1-D input is a single observation unless the model has one feature.
    """
    X = _as_matrix(raw, stats.n_features)
    if X.shape[1] != stats.n_features:
        raise ValueError(
            f"Feature matrix has {X.shape[1]} columns but the model was trained "
            f"on {stats.n_features}"
        )
    return add_bias((X - stats.mean) / np.sqrt(stats.variance))
