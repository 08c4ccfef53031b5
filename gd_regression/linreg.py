from __future__ import annotations

"""
Least-squares linear regression trained with mini-batch gradient descent.
"""

import numpy as np

from .base import GradientDescentRegression
from .metrics import mean_squared_error, r_squared


class LinearRegressionGD(GradientDescentRegression):
    """Identity link; records the training-set MSE after every epoch."""

    def loss(self, labels: np.ndarray, guesses: np.ndarray) -> float:
        return mean_squared_error(labels, guesses)

    def predict(self, observations) -> np.ndarray:
        return self.process_features(observations) @ self.weights_

    def test(self, test_features, test_labels) -> float:
        """R² of the predictions on held-out data."""
        predictions = self.predict(test_features)
        labels = self._label_matrix(test_labels)
        self._check_test_labels(predictions, labels)
        return r_squared(labels, predictions)
