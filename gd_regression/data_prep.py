from __future__ import annotations

"""
CSV loading for the trainers: column selection, value converters, optional
one-hot labels and a train/test split.
"""

from pathlib import Path
from typing import Callable, Mapping, Sequence

import numpy as np
import pandas as pd
from sklearn.model_selection import train_test_split
from sklearn.utils import shuffle as shuffle_rows


def boolean_converter(true_value: str = "TRUE") -> Callable[[str], int]:
    """Map a raw cell to 1 when it equals ``true_value`` and 0 otherwise."""

    def convert(value: str) -> int:
        return 1 if str(value).strip() == true_value else 0

    return convert


def load_csv(
    csv_path: Path,
    data_columns: Sequence[str],
    label_columns: Sequence[str],
    test_size: int | float | None = None,
    shuffle: bool = False,
    converters: Mapping[str, Callable] | None = None,
    one_hot_labels: bool = False,
    random_state: int | None = 42,
):
    """
    Read ``csv_path`` and return ``(features, labels, test_features, test_labels)``.

    ``test_size`` is a row count (int) or a fraction (float). Without it every
    row is used for training and the test arrays are empty.
    """
    df = pd.read_csv(csv_path, converters=dict(converters or {}))

    missing = [c for c in [*data_columns, *label_columns] if c not in df.columns]
    if missing:
        raise ValueError(f"Columns not found in {csv_path}: {missing}")

    features = df[list(data_columns)].astype(float)
    if one_hot_labels:
        if len(label_columns) != 1:
            raise ValueError("one_hot_labels needs exactly one label column")
        # encode before splitting so both partitions share one class order
        labels = pd.get_dummies(df[label_columns[0]], dtype=float)
    else:
        labels = df[list(label_columns)].astype(float)

    if not test_size:
        if shuffle:
            features, labels = shuffle_rows(features, labels, random_state=random_state)
        return (
            features.to_numpy(),
            labels.to_numpy(),
            np.empty((0, features.shape[1])),
            np.empty((0, labels.shape[1])),
        )

    X_train, X_test, y_train, y_test = train_test_split(
        features,
        labels,
        test_size=test_size,
        shuffle=shuffle,
        random_state=random_state if shuffle else None,
    )
    return X_train.to_numpy(), y_train.to_numpy(), X_test.to_numpy(), y_test.to_numpy()
