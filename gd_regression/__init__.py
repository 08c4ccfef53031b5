"""
Gradient descent regression trainers: linear, binary logistic and multinomial
softmax models sharing one standardization and mini-batch optimization core.

The package also carries a small CSV loader and the metric helpers used by
main.py.
"""

from .config import Hyperparameters
from .data_prep import boolean_converter, load_csv
from .linreg import LinearRegressionGD
from .logreg import LogisticRegressionGD
from .metrics import accuracy_percent, r_squared, summarize_coefficients
from .optim import batch_slices, gradient_step, update_learning_rate
from .softmax import MultinomialRegressionGD
from .standardize import StandardizationStats, apply_stats, standardize

__all__ = [
    "Hyperparameters",
    "LinearRegressionGD",
    "LogisticRegressionGD",
    "MultinomialRegressionGD",
    "StandardizationStats",
    "accuracy_percent",
    "apply_stats",
    "batch_slices",
    "boolean_converter",
    "gradient_step",
    "load_csv",
    "r_squared",
    "standardize",
    "summarize_coefficients",
    "update_learning_rate",
]
