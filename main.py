from __future__ import annotations

"""
CLI entrypoint: load a CSV, train one of the gradient descent regressors and
print its test score. Pick the model via --model: linear (R²), logistic or
multinomial (accuracy %).
"""

import argparse
import logging
from pathlib import Path

from sklearn.linear_model import LinearRegression, LogisticRegression
from sklearn.pipeline import make_pipeline
from sklearn.preprocessing import StandardScaler

from gd_regression import (
    Hyperparameters,
    LinearRegressionGD,
    LogisticRegressionGD,
    MultinomialRegressionGD,
    boolean_converter,
    load_csv,
    summarize_coefficients,
)
from gd_regression.constants import (
    DEFAULT_BATCH_SIZE,
    DEFAULT_DECISION_BOUNDARY,
    DEFAULT_ITERATIONS,
    DEFAULT_LEARNING_RATE,
)
from gd_regression.metrics import compute_classification_metrics

MODELS = {
    "linear": LinearRegressionGD,
    "logistic": LogisticRegressionGD,
    "multinomial": MultinomialRegressionGD,
}


def _split_names(value: str) -> list[str]:
    return [name.strip() for name in value.split(",") if name.strip()]


def _test_size(value: str) -> int | float:
    """Whole numbers are row counts, anything else a fraction."""
    return float(value) if "." in value else int(value)


def build_arg_parser():
    """CLI parser with knobs for data selection, split and hyperparameters."""
    parser = argparse.ArgumentParser(
        description="Train a gradient descent regressor on a CSV file."
    )
    parser.add_argument("--csv-path", type=Path, required=True)
    parser.add_argument("--model", choices=sorted(MODELS), default="linear")
    parser.add_argument(
        "--features", type=_split_names, required=True, help="Comma-separated feature columns."
    )
    parser.add_argument(
        "--labels", type=_split_names, required=True, help="Comma-separated label columns."
    )
    parser.add_argument(
        "--true-value",
        default=None,
        help="Convert the label column to 1 where it equals this string, 0 otherwise.",
    )
    parser.add_argument(
        "--test-size",
        type=_test_size,
        default=0.2,
        help="Test rows (integer) or fraction (float).",
    )
    parser.add_argument("--shuffle", action="store_true", help="Shuffle rows before splitting.")
    parser.add_argument("--lr", type=float, default=DEFAULT_LEARNING_RATE, help="Initial learning rate.")
    parser.add_argument("--iterations", type=int, default=DEFAULT_ITERATIONS, help="Training epochs.")
    parser.add_argument("--batch-size", type=int, default=DEFAULT_BATCH_SIZE)
    parser.add_argument(
        "--decision-boundary",
        type=float,
        default=DEFAULT_DECISION_BOUNDARY,
        help="Probability threshold for the logistic model.",
    )
    parser.add_argument("--random-state", type=int, default=42, help="Seed for shuffling.")
    parser.add_argument(
        "--compare-sklearn",
        action="store_true",
        help="Also fit a scikit-learn reference pipeline on the same split.",
    )
    parser.add_argument("--verbose", action="store_true", help="Log training progress.")
    return parser


def sklearn_reference_score(model_name: str, X_train, y_train, X_test, y_test) -> float:
    """Score a StandardScaler + scikit-learn estimator on the same data."""
    if model_name == "linear":
        pipeline = make_pipeline(StandardScaler(), LinearRegression())
        pipeline.fit(X_train, y_train)
        return float(pipeline.score(X_test, y_test))

    y_train_cls = y_train.argmax(axis=1) if y_train.shape[1] > 1 else y_train.ravel()
    y_test_cls = y_test.argmax(axis=1) if y_test.shape[1] > 1 else y_test.ravel()
    pipeline = make_pipeline(StandardScaler(), LogisticRegression(max_iter=5000))
    pipeline.fit(X_train, y_train_cls.astype(int))
    return float(pipeline.score(X_test, y_test_cls.astype(int)) * 100.0)


def print_summary(model, feature_names: list[str]):
    print(f"Epochs: {model.n_iter_}, batches per epoch: {model.batches_per_epoch_}")
    print(f"Final loss: {model.history_[-1]:.6f}, final learning rate: {model.learning_rate_:.6f}")
    if model.weights_.shape[1] == 1:
        top = summarize_coefficients(model.coef_, feature_names)
        print("\nTop positive weights (standardized space):")
        print(top["positive"])
        print("\nTop negative weights (standardized space):")
        print(top["negative"])
        print(f"\nIntercept: {float(model.intercept_[0]):.4f}")


def run(args: argparse.Namespace) -> float:
    """Load, train, score; returns the test score."""
    converters = None
    if args.true_value is not None:
        converters = {name: boolean_converter(args.true_value) for name in args.labels}

    features, labels, test_features, test_labels = load_csv(
        args.csv_path,
        data_columns=args.features,
        label_columns=args.labels,
        test_size=args.test_size,
        shuffle=args.shuffle,
        converters=converters,
        one_hot_labels=args.model == "multinomial",
        random_state=args.random_state,
    )
    print(f"Train size: {len(features)}, Test size: {len(test_features)}")

    params = Hyperparameters(
        learning_rate=args.lr,
        iterations=args.iterations,
        batch_size=args.batch_size,
        decision_boundary=args.decision_boundary,
    )
    model = MODELS[args.model](features, labels, params)
    model.train()

    score = model.test(test_features, test_labels)
    label = "R²" if args.model == "linear" else "Accuracy %"
    print(f"[gd {args.model}] {label}: {score:.4f}")
    print_summary(model, args.features)

    if args.model == "logistic":
        m = compute_classification_metrics(
            test_labels, model.predict_proba(test_features), threshold=params.decision_boundary
        )
        print(
            f"    Prec {m['precision']:.3f} | Rec {m['recall']:.3f} | "
            f"F1 {m['f1']:.3f} | ROC-AUC {m['roc_auc']:.3f}"
        )
        print(f"    Confusion matrix [[TN, FP], [FN, TP]]: {m['confusion_matrix'].tolist()}")

    if args.compare_sklearn:
        reference = sklearn_reference_score(
            args.model, features, labels, test_features, test_labels
        )
        print(f"[sklearn {args.model}] {label}: {reference:.4f}")

    return score


def main(args: argparse.Namespace | None = None):
    args = args or build_arg_parser().parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return run(args)


if __name__ == "__main__":
    main()
