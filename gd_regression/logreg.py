from __future__ import annotations

"""
Binary logistic regression trained with mini-batch gradient descent.
"""

import numpy as np

from .base import GradientDescentRegression
from .metrics import accuracy_percent, binary_cross_entropy
from .optim import sigmoid


class LogisticRegressionGD(GradientDescentRegression):
    """
    Sigmoid link over 0/1 labels. Predictions are thresholded at the
    ``decision_boundary`` hyperparameter.
    """

    activation = staticmethod(sigmoid)

    def loss(self, labels: np.ndarray, guesses: np.ndarray) -> float:
        return binary_cross_entropy(labels, guesses)

    def predict_proba(self, observations) -> np.ndarray:
        """Return P(y=1) for each row, shape (n, 1)."""
        return self._scores(self.process_features(observations))

    def predict(self, observations) -> np.ndarray:
        probs = self.predict_proba(observations)
        return (probs >= self.params.decision_boundary).astype(int)

    def test(self, test_features, test_labels) -> float:
        """Percentage of test rows whose predicted label matches."""
        predictions = self.predict(test_features)
        labels = self._label_matrix(test_labels)
        self._check_test_labels(predictions, labels)
        return accuracy_percent(labels.astype(int), predictions)
