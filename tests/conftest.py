"""Shared synthetic datasets."""
import numpy as np
import pytest


@pytest.fixture
def rng():
    return np.random.default_rng(0)


@pytest.fixture
def linear_data(rng):
    """label = 2*x1 + 3*x2 + 1, noise free; 200 train rows and 50 test rows."""
    X = rng.uniform(-5, 5, size=(250, 2))
    y = (2 * X[:, 0] + 3 * X[:, 1] + 1).reshape(-1, 1)
    return X[:200], y[:200], X[200:], y[200:]


@pytest.fixture
def separable_data(rng):
    """Two well separated Gaussian blobs, labels 0/1, rows shuffled."""
    neg = rng.normal(loc=-3.0, scale=0.5, size=(100, 2))
    pos = rng.normal(loc=3.0, scale=0.5, size=(100, 2))
    X = np.vstack([neg, pos])
    y = np.concatenate([np.zeros(100), np.ones(100)]).reshape(-1, 1)
    order = rng.permutation(len(X))
    X, y = X[order], y[order]
    return X[:160], y[:160], X[160:], y[160:]


@pytest.fixture
def cluster_data(rng):
    """Three separable clusters with one-hot labels."""
    centers = np.array([[0.0, 0.0], [6.0, 6.0], [-6.0, 6.0]])
    classes = np.repeat(np.arange(3), 100)
    X = centers[classes] + rng.normal(scale=0.7, size=(300, 2))
    one_hot = np.eye(3)[classes]
    order = rng.permutation(len(X))
    X, one_hot = X[order], one_hot[order]
    return X[:240], one_hot[:240], X[240:], one_hot[240:]
