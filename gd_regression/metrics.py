from __future__ import annotations

"""
Loss functions recorded during training, test-time scores, and summaries
printed by the CLI.
"""

import numpy as np
import pandas as pd
from sklearn import metrics

from .constants import LOG_EPSILON


def mean_squared_error(labels: np.ndarray, guesses: np.ndarray) -> float:
    return float(np.mean((guesses - labels) ** 2))


def binary_cross_entropy(labels: np.ndarray, probs: np.ndarray) -> float:
    loss = labels * np.log(probs + LOG_EPSILON) + (1 - labels) * np.log(
        1 - probs + LOG_EPSILON
    )
    return float(-np.mean(loss))


def categorical_cross_entropy(labels: np.ndarray, probs: np.ndarray) -> float:
    """Mean over rows of -sum_k y_k log(p_k); labels are one-hot."""
    per_row = np.sum(labels * np.log(probs + LOG_EPSILON), axis=1)
    return float(-np.mean(per_row))


def r_squared(labels, predictions) -> float:
    """
    Coefficient of determination ``1 - SS_res / SS_tot``. Negative when the
    model does worse than predicting the label mean.
    """
    return float(metrics.r2_score(np.asarray(labels), np.asarray(predictions)))


def accuracy_percent(labels, predictions) -> float:
    """Share of matching rows, as a percentage."""
    y_true = np.asarray(labels).ravel()
    y_pred = np.asarray(predictions).ravel()
    return float(metrics.accuracy_score(y_true, y_pred) * 100.0)


def compute_classification_metrics(
    y_true: np.ndarray | pd.Series, probs: np.ndarray, threshold: float = 0.5
):
    """Standard binary metrics given P(y=1) and a decision threshold."""
    y_true = np.asarray(y_true).ravel()
    probs = np.asarray(probs).ravel()
    preds = (probs >= threshold).astype(int)
    precision, recall, f1, _ = metrics.precision_recall_fscore_support(
        y_true, preds, average="binary", zero_division=0
    )
    try:
        roc_auc = metrics.roc_auc_score(y_true, probs)
    except ValueError:
        roc_auc = float("nan")

    return {
        "accuracy": metrics.accuracy_score(y_true, preds),
        "precision": precision,
        "recall": recall,
        "f1": f1,
        "roc_auc": roc_auc,
        "confusion_matrix": metrics.confusion_matrix(y_true, preds, labels=[0, 1]),
    }


def summarize_coefficients(
    coef: np.ndarray, feature_names: list[str], top_k: int = 5
) -> dict[str, pd.Series]:
    coef_series = pd.Series(np.asarray(coef).ravel(), index=feature_names)
    coef_sorted = coef_series.sort_values()
    return {
        "positive": coef_sorted.tail(top_k)[::-1],
        "negative": coef_sorted.head(top_k),
    }
