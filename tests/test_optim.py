"""Tests for the gradient step, learning-rate control and batching."""
import numpy as np
import pytest

from gd_regression.optim import (
    batch_slices,
    gradient_step,
    identity,
    sigmoid,
    softmax,
    update_learning_rate,
)


class TestGradientStep:
    def test_linear_step_matches_closed_form(self):
        X = np.array([[1.0, 1.0], [1.0, 2.0], [1.0, 3.0]])
        y = np.array([[2.0], [4.0], [6.0]])
        w = np.zeros((2, 1))

        new_w = gradient_step(X, y, w, rate=0.1)

        expected = w - 0.1 * (X.T @ (X @ w - y) / 3)
        np.testing.assert_allclose(new_w, expected)

    def test_returns_new_array(self):
        X = np.ones((2, 2))
        y = np.ones((2, 1))
        w = np.zeros((2, 1))

        new_w = gradient_step(X, y, w, rate=0.5)

        assert new_w is not w
        np.testing.assert_array_equal(w, np.zeros((2, 1)))

    def test_logistic_gradient_form(self):
        X = np.array([[1.0, -1.0], [1.0, 1.0]])
        y = np.array([[0.0], [1.0]])
        w = np.array([[0.0], [0.5]])

        new_w = gradient_step(X, y, w, rate=1.0, activation=sigmoid)

        expected = w - X.T @ (sigmoid(X @ w) - y) / 2
        np.testing.assert_allclose(new_w, expected)

    def test_slice_only_uses_its_rows(self):
        X = np.array([[1.0, 1.0], [1.0, 2.0], [1.0, 50.0]])
        y = np.array([[1.0], [2.0], [-100.0]])
        w = np.zeros((2, 1))

        sliced = gradient_step(X[:2], y[:2], w, 0.1)

        expected = w - 0.1 * (X[:2].T @ (X[:2] @ w - y[:2]) / 2)
        np.testing.assert_allclose(sliced, expected)
        assert not np.allclose(sliced, gradient_step(X, y, w, 0.1))

    @pytest.mark.parametrize(
        "x_shape, y_shape, w_shape",
        [((3, 2), (4, 1), (2, 1)), ((3, 2), (3, 1), (3, 1)), ((3, 2), (3, 2), (2, 1))],
    )
    def test_shape_mismatch_raises(self, x_shape, y_shape, w_shape):
        with pytest.raises(ValueError, match="mismatch"):
            gradient_step(np.ones(x_shape), np.ones(y_shape), np.zeros(w_shape), 0.1)


class TestActivations:
    def test_identity(self):
        z = np.array([[1.0, -2.0]])
        assert identity(z) is z

    def test_sigmoid_saturates_without_overflow(self):
        with np.errstate(over="raise"):
            out = sigmoid(np.array([[-1e4], [0.0], [1e4]]))
        np.testing.assert_allclose(out.ravel(), [0.0, 0.5, 1.0], atol=1e-12)

    def test_softmax_rows_sum_to_one(self):
        out = softmax(np.array([[1.0, 2.0, 3.0], [1000.0, 1000.0, 1000.0]]))
        np.testing.assert_allclose(out.sum(axis=1), [1.0, 1.0])
        np.testing.assert_allclose(out[1], [1 / 3] * 3)
        assert out[0].argmax() == 2


class TestLearningRate:
    def test_halves_when_loss_increases(self):
        assert update_learning_rate(0.2, [10.0, 12.0]) == pytest.approx(0.1)

    def test_grows_when_loss_decreases(self):
        assert update_learning_rate(0.2, [12.0, 10.0]) == pytest.approx(0.21)

    def test_equal_loss_counts_as_improvement(self):
        assert update_learning_rate(0.2, [5.0, 5.0]) == pytest.approx(0.21)

    @pytest.mark.parametrize("history", [[], [3.0]])
    def test_short_history_keeps_rate(self, history):
        assert update_learning_rate(0.3, history) == 0.3

    def test_keeps_adapting_after_second_epoch(self):
        assert update_learning_rate(1.0, [9.0, 8.0, 7.0, 7.5]) == pytest.approx(0.5)
        assert update_learning_rate(1.0, [9.0, 8.0, 7.0, 6.0]) == pytest.approx(1.05)


class TestBatchSlices:
    def test_remainder_rows_dropped(self):
        slices = batch_slices(95, 10)
        assert len(slices) == 9
        assert slices[0] == slice(0, 10)
        assert slices[-1] == slice(80, 90)

    def test_exact_division(self):
        assert len(batch_slices(100, 10)) == 10

    def test_full_batch(self):
        assert batch_slices(7, 7) == [slice(0, 7)]
