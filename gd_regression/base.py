from __future__ import annotations

"""
Shared training loop for the gradient descent regressors. Subclasses pick the
link function, the recorded loss and how scores turn into predictions.
"""

import logging
from abc import ABC, abstractmethod

import numpy as np

from .config import Hyperparameters
from .optim import batch_slices, gradient_step, identity, update_learning_rate
from .standardize import apply_stats, standardize

logger = logging.getLogger(__name__)


class GradientDescentRegression(ABC):
    """
    Mini-batch gradient descent over standardized, bias-augmented features.

    The training data is standardized once at construction; the resulting
    ``stats_`` are reused for every later ``predict``/``test`` call. Weights
    start at zero and are replaced after every mini-batch.
    """

    activation = staticmethod(identity)
    log_every = 100

    def __init__(self, features, labels, params: Hyperparameters | None = None):
        self.params = params or Hyperparameters()
        self.features_, self.stats_ = standardize(features)
        self.labels_ = self._label_matrix(labels)

        n_rows = self.features_.shape[0]
        if self.labels_.shape[0] != n_rows:
            raise ValueError(
                f"Got {n_rows} feature rows but {self.labels_.shape[0]} label rows"
            )
        if self.params.batch_size > n_rows:
            raise ValueError(
                f"batch_size {self.params.batch_size} exceeds the {n_rows} training rows"
            )

        self.weights_ = np.zeros((self.features_.shape[1], self.labels_.shape[1]))
        self.learning_rate_ = self.params.learning_rate
        self.history_: list[float] = []
        self.n_iter_: int = 0
        self.batches_per_epoch_ = len(batch_slices(n_rows, self.params.batch_size))

    @staticmethod
    def _label_matrix(labels) -> np.ndarray:
        y = np.asarray(labels, dtype=float)
        if y.ndim == 1:
            y = y.reshape(-1, 1)
        if y.ndim != 2:
            raise ValueError(f"Expected a 2-D label matrix, got shape {y.shape}")
        return y

    @property
    def intercept_(self) -> np.ndarray:
        return self.weights_[0]

    @property
    def coef_(self) -> np.ndarray:
        return self.weights_[1:]

    @abstractmethod
    def loss(self, labels: np.ndarray, guesses: np.ndarray) -> float:
        """Scalar loss of ``guesses`` against ``labels``."""

    def _scores(self, features: np.ndarray) -> np.ndarray:
        return self.activation(features @ self.weights_)

    def record_metric(self) -> float:
        """Append the loss over the full training set to ``history_``."""
        value = self.loss(self.labels_, self._scores(self.features_))
        self.history_.append(value)
        return value

    def train(self):
        """Run ``iterations`` epochs of mini-batch gradient descent."""
        batches = batch_slices(self.features_.shape[0], self.params.batch_size)

        for epoch in range(1, self.params.iterations + 1):
            for rows in batches:
                self.weights_ = gradient_step(
                    self.features_[rows],
                    self.labels_[rows],
                    self.weights_,
                    self.learning_rate_,
                    self.activation,
                )
            metric = self.record_metric()
            self.learning_rate_ = update_learning_rate(self.learning_rate_, self.history_)
            self.n_iter_ = epoch

            if epoch % self.log_every == 0:
                logger.debug(
                    "[GD] epoch=%d, loss=%.6f, lr=%.6f", epoch, metric, self.learning_rate_
                )

        logger.info(
            "%s trained for %d epochs (%d batches each): loss=%.6f, lr=%.6f",
            type(self).__name__,
            self.n_iter_,
            len(batches),
            self.history_[-1],
            self.learning_rate_,
        )
        return self

    def process_features(self, raw) -> np.ndarray:
        """Standardize new observations with the training stats."""
        return apply_stats(raw, self.stats_)

    def _check_test_labels(self, features: np.ndarray, labels: np.ndarray):
        if features.shape[0] != labels.shape[0]:
            raise ValueError(
                f"Got {features.shape[0]} test rows but {labels.shape[0]} test labels"
            )

    @abstractmethod
    def predict(self, observations) -> np.ndarray:
        """Predictions for raw observations."""

    @abstractmethod
    def test(self, test_features, test_labels) -> float:
        """Score on held-out data."""
