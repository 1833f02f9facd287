"""Evaluate the keyword classifier against a labelled complaint dataset."""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

import matplotlib

matplotlib.use("Agg", force=True)
import matplotlib.pyplot as plt
import pandas as pd
from sklearn.metrics import accuracy_score, classification_report, confusion_matrix

if __package__ is None or __package__ == "":
    _SCRIPT_PARENT = Path(__file__).resolve().parents[1]
    _SCRIPT_PARENT_STR = str(_SCRIPT_PARENT)
    if _SCRIPT_PARENT_STR not in sys.path:
        sys.path.insert(0, _SCRIPT_PARENT_STR)

from scripts.bootstrap import bootstrap_project, resolve_path

_PROJECT_ROOT = bootstrap_project()

from src.core.entities import CATEGORIES  # noqa: E402
from src.infrastructure.nlp.category_rules import KeywordCategoryClassifier  # noqa: E402
from src.infrastructure.nlp.keyword_table import KeywordTable  # noqa: E402
from src.utils.config import load_config  # noqa: E402
from src.utils.logger import configure_logging, logger  # noqa: E402


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Evaluate the keyword complaint classifier")
    parser.add_argument("--config", type=Path, default=Path("configs/config.yaml"))
    parser.add_argument("--dataset", type=Path, default=None, help="CSV with title, description, category")
    parser.add_argument(
        "--confusion-matrix",
        type=Path,
        default=Path("reports/figures/confusion_matrix.png"),
        help="Destination PNG for the confusion matrix",
    )
    return parser.parse_args()


def predict_categories(data: pd.DataFrame, classifier: KeywordCategoryClassifier) -> list[str]:
    texts = (data["title"].fillna("").astype(str) + " " + data["description"].fillna("").astype(str)).tolist()
    return [classifier.classify_category(text)[0] for text in texts]


def evaluate(data: pd.DataFrame, classifier: KeywordCategoryClassifier) -> dict:
    required_columns = {"title", "description", "category"}
    missing = required_columns - set(data.columns)
    if missing:
        raise ValueError("Dataset is missing required columns: " + ", ".join(sorted(missing)))

    labels = data["category"].astype(str).str.strip().str.lower().tolist()
    predictions = predict_categories(data, classifier)
    present = [category for category in CATEGORIES if category in set(labels) | set(predictions)]
    return {
        "labels": labels,
        "predictions": predictions,
        "categories": present,
        "accuracy": float(accuracy_score(labels, predictions)),
        "report": classification_report(labels, predictions, labels=present, zero_division=0),
        "confusion_matrix": confusion_matrix(labels, predictions, labels=present),
    }


def plot_confusion_matrix(cm, labels, output_path: Path) -> None:
    fig, ax = plt.subplots(figsize=(8, 6))
    im = ax.imshow(cm, interpolation="nearest", cmap=plt.cm.Blues)
    ax.figure.colorbar(im, ax=ax)
    ax.set(
        xticks=range(len(labels)),
        yticks=range(len(labels)),
        xticklabels=labels,
        yticklabels=labels,
        ylabel="Actual",
        xlabel="Predicted",
        title="Category confusion matrix",
    )

    plt.setp(ax.get_xticklabels(), rotation=45, ha="right", rotation_mode="anchor")

    thresh = cm.max() / 2.0 if cm.size else 0
    for i in range(cm.shape[0]):
        for j in range(cm.shape[1]):
            ax.text(j, i, format(cm[i, j], "d"), ha="center", va="center", color="white" if cm[i, j] > thresh else "black")

    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig.tight_layout()
    fig.savefig(output_path)
    plt.close(fig)


def main() -> None:
    args = parse_args()
    config = load_config(resolve_path(args.config))
    configure_logging(config.get("logging", {}).get("level", "INFO"))

    dataset = args.dataset or Path(config.get("paths", {}).get("labelled_data", "data/labelled_complaints.csv"))
    dataset_path = resolve_path(dataset)
    logger.info("Loading labelled complaints from {}", dataset_path)
    data = pd.read_csv(dataset_path)

    classifier = KeywordCategoryClassifier(KeywordTable.from_config(config.get("keywords")))
    results = evaluate(data, classifier)
    logger.info("Accuracy: {:.2%}", results["accuracy"])
    logger.info("Evaluation report:\n{}", results["report"])

    plot_confusion_matrix(
        results["confusion_matrix"],
        results["categories"],
        resolve_path(args.confusion_matrix),
    )


if __name__ == "__main__":
    main()
