import sys
import os

# Add parent directory to sys.path
sys.path.append(os.path.abspath(".."))

import numpy as np
import matplotlib.pyplot as plt
from sklearn.datasets import make_blobs, make_classification, make_regression
from sklearn.metrics import ConfusionMatrixDisplay, confusion_matrix
from sklearn.model_selection import train_test_split

from gd_regression import (
    Hyperparameters,
    LinearRegressionGD,
    LogisticRegressionGD,
    MultinomialRegressionGD,
)

# Configuration
TEST_SIZE = 0.2
RANDOM_STATE = 42
PARAMS = Hyperparameters(learning_rate=0.1, iterations=200, batch_size=10)


def plot_history(model, title, ylabel, filename):
    plt.figure(figsize=(8, 5))
    plt.plot(np.arange(1, len(model.history_) + 1), model.history_, lw=2)
    plt.xlabel("Epoch")
    plt.ylabel(ylabel)
    plt.yscale("log")
    plt.title(title)
    plt.grid(True)
    plt.tight_layout()
    plt.savefig(filename)
    plt.close()


def run_linear():
    print("Generating plots for linear regression...")
    X, y = make_regression(
        n_samples=500, n_features=3, noise=10.0, random_state=RANDOM_STATE
    )
    X_train, X_test, y_train, y_test = train_test_split(
        X, y, test_size=TEST_SIZE, random_state=RANDOM_STATE
    )

    model = LinearRegressionGD(X_train, y_train, PARAMS).train()
    r2 = model.test(X_test, y_test)
    plot_history(model, "Linear regression: training MSE", "MSE", "linear_mse.png")

    preds = model.predict(X_test).ravel()
    plt.figure(figsize=(6, 6))
    plt.scatter(y_test, preds, s=12, alpha=0.7)
    lims = [min(y_test.min(), preds.min()), max(y_test.max(), preds.max())]
    plt.plot(lims, lims, color="navy", lw=2, linestyle="--")
    plt.xlabel("Actual")
    plt.ylabel("Predicted")
    plt.title(f"Linear regression (R² = {r2:.3f})")
    plt.tight_layout()
    plt.savefig("linear_predictions.png")
    plt.close()


def run_logistic():
    print("Generating plots for logistic regression...")
    X, y = make_classification(
        n_samples=500, n_features=4, n_informative=3, n_redundant=0, random_state=RANDOM_STATE
    )
    X_train, X_test, y_train, y_test = train_test_split(
        X, y, test_size=TEST_SIZE, random_state=RANDOM_STATE
    )

    model = LogisticRegressionGD(X_train, y_train, PARAMS).train()
    accuracy = model.test(X_test, y_test)
    plot_history(
        model, f"Logistic regression (accuracy {accuracy:.1f}%)", "Cross-entropy", "logistic_loss.png"
    )

    cm = confusion_matrix(y_test, model.predict(X_test).ravel())
    disp = ConfusionMatrixDisplay(confusion_matrix=cm)
    plt.figure(figsize=(6, 5))
    disp.plot(cmap="Blues", values_format="d")
    plt.title("Confusion Matrix: logistic regression")
    plt.tight_layout()
    plt.savefig("logistic_confusion_matrix.png")
    plt.close()


def run_multinomial():
    print("Generating plots for multinomial regression...")
    X, y = make_blobs(n_samples=600, centers=3, n_features=2, random_state=RANDOM_STATE)
    one_hot = np.eye(3)[y]
    X_train, X_test, y_train, y_test = train_test_split(
        X, one_hot, test_size=TEST_SIZE, random_state=RANDOM_STATE
    )

    model = MultinomialRegressionGD(X_train, y_train, PARAMS).train()
    accuracy = model.test(X_test, y_test)
    plot_history(
        model, f"Multinomial regression (accuracy {accuracy:.1f}%)", "Cross-entropy", "multinomial_loss.png"
    )

    xx, yy = np.meshgrid(
        np.linspace(X[:, 0].min() - 1, X[:, 0].max() + 1, 200),
        np.linspace(X[:, 1].min() - 1, X[:, 1].max() + 1, 200),
    )
    regions = model.predict(np.c_[xx.ravel(), yy.ravel()]).reshape(xx.shape)

    plt.figure(figsize=(7, 6))
    plt.contourf(xx, yy, regions, alpha=0.25, cmap="viridis")
    plt.scatter(X_test[:, 0], X_test[:, 1], c=y_test.argmax(axis=1), s=14, cmap="viridis")
    plt.title("Multinomial regression decision regions")
    plt.tight_layout()
    plt.savefig("multinomial_regions.png")
    plt.close()


if __name__ == "__main__":
    run_linear()
    run_logistic()
    run_multinomial()
    print("All plots generated successfully.")
