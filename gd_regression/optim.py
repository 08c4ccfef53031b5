from __future__ import annotations

"""
Building blocks of the optimizer: link functions, a single gradient step,
the bold-driver learning-rate rule and mini-batch partitioning.
"""

from typing import Callable, Sequence

import numpy as np

from .constants import RATE_DECAY, RATE_GROWTH, SIGMOID_CLIP

Activation = Callable[[np.ndarray], np.ndarray]


def identity(z: np.ndarray) -> np.ndarray:
    return z


def sigmoid(z: np.ndarray) -> np.ndarray:
    z = np.clip(z, -SIGMOID_CLIP, SIGMOID_CLIP)
    return 1.0 / (1.0 + np.exp(-z))


def softmax(z: np.ndarray) -> np.ndarray:
    """Row-wise softmax, shifted by the row max to keep exp() bounded."""
    shifted = z - z.max(axis=1, keepdims=True)
    exp = np.exp(shifted)
    return exp / exp.sum(axis=1, keepdims=True)


def check_shapes(features: np.ndarray, labels: np.ndarray, weights: np.ndarray):
    """Raise ValueError unless features @ weights lines up with labels."""
    if features.shape[0] != labels.shape[0]:
        raise ValueError(
            f"Row mismatch: features {features.shape} vs labels {labels.shape}"
        )
    if features.shape[1] != weights.shape[0]:
        raise ValueError(
            f"Column mismatch: features {features.shape} vs weights {weights.shape}"
        )
    if labels.shape[1] != weights.shape[1]:
        raise ValueError(
            f"Output mismatch: labels {labels.shape} vs weights {weights.shape}"
        )


def gradient_step(
    features: np.ndarray,
    labels: np.ndarray,
    weights: np.ndarray,
    rate: float,
    activation: Activation = identity,
) -> np.ndarray:
    """
    One gradient descent update; returns a new weight matrix.

    With identity, sigmoid or softmax as the activation the gradient of the
    matching canonical loss (squared error or cross-entropy) is always
    ``X^T (activation(XW) - Y) / n``, so one function serves every model.
    """
    check_shapes(features, labels, weights)
    guesses = activation(features @ weights)
    gradient = features.T @ (guesses - labels) / features.shape[0]
    return weights - rate * gradient


def update_learning_rate(rate: float, history: Sequence[float]) -> float:
    """
    Bold driver: halve the rate if the last epoch got worse, grow it by 5%
    otherwise. Needs two history entries; runs after every epoch.
    """
    if len(history) < 2:
        return rate
    if history[-1] > history[-2]:
        return rate * RATE_DECAY
    return rate * RATE_GROWTH


def batch_slices(n_rows: int, batch_size: int) -> list[slice]:
    """
    Contiguous mini-batches of exactly ``batch_size`` rows. The trailing
    ``n_rows % batch_size`` rows are not covered.
    """
    n_batches = n_rows // batch_size
    return [slice(j * batch_size, (j + 1) * batch_size) for j in range(n_batches)]
