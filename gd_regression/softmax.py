from __future__ import annotations

"""
Multinomial (softmax) regression over one-hot labels.
"""

import numpy as np

from .base import GradientDescentRegression
from .metrics import accuracy_percent, categorical_cross_entropy
from .optim import softmax


class MultinomialRegressionGD(GradientDescentRegression):
    """
    Softmax link with one weight column per class. ``predict`` returns class
    indices, ``test`` compares them with the arg-max of one-hot labels.
    """

    activation = staticmethod(softmax)

    def loss(self, labels: np.ndarray, guesses: np.ndarray) -> float:
        return categorical_cross_entropy(labels, guesses)

    @property
    def n_classes(self) -> int:
        return self.weights_.shape[1]

    def predict_proba(self, observations) -> np.ndarray:
        return self._scores(self.process_features(observations))

    def predict(self, observations) -> np.ndarray:
        return self.predict_proba(observations).argmax(axis=1)

    def test(self, test_features, test_labels) -> float:
        predictions = self.predict(test_features)
        labels = np.asarray(test_labels)
        # accept class indices as well as one-hot rows
        if labels.ndim == 2 and labels.shape[1] > 1:
            if labels.shape[1] != self.n_classes:
                raise ValueError(
                    f"Test labels have {labels.shape[1]} columns but the model "
                    f"has {self.n_classes} classes"
                )
            classes = labels.argmax(axis=1)
        else:
            classes = labels.ravel()
        if classes.shape[0] != predictions.shape[0]:
            raise ValueError(
                f"Got {predictions.shape[0]} test rows but {classes.shape[0]} test labels"
            )
        return accuracy_percent(classes.astype(int), predictions)
