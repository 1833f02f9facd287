"""Classify and route a CSV of complaints using the configured departments."""
from __future__ import annotations

import argparse
import sys
from datetime import datetime
from pathlib import Path
from typing import Any, Optional

import pandas as pd

if __package__ is None or __package__ == "":
    _SCRIPT_PARENT = Path(__file__).resolve().parents[1]
    _SCRIPT_PARENT_STR = str(_SCRIPT_PARENT)
    if _SCRIPT_PARENT_STR not in sys.path:
        sys.path.insert(0, _SCRIPT_PARENT_STR)

from scripts.bootstrap import bootstrap_project, resolve_path

_PROJECT_ROOT = bootstrap_project()

from src.core.entities import CATEGORIES, PRIORITIES  # noqa: E402
from src.interface.factory import EngineComponents, build_components  # noqa: E402
from src.utils.config import load_config  # noqa: E402
from src.utils.logger import configure_logging, logger  # noqa: E402

REQUIRED_COLUMNS = {"title", "description"}


def _clean_text(value: Any) -> str:
    if value is None or pd.isna(value):
        return ""
    return str(value)


def _choice(value: Any, allowed: tuple[str, ...], column: str, index: Any) -> Optional[str]:
    text = _clean_text(value).strip().lower()
    if not text:
        return None
    if text not in allowed:
        logger.warning("Row {}: ignoring unknown {} '{}'", index, column, text)
        return None
    return text


def _created_at(value: Any) -> Optional[datetime]:
    if value is None or pd.isna(value):
        return None
    parsed = pd.to_datetime(value, errors="coerce", utc=True)
    if pd.isna(parsed):
        return None
    return parsed.to_pydatetime()


def route_dataframe(
    data: pd.DataFrame,
    components: EngineComponents,
    now: datetime | None = None,
) -> pd.DataFrame:
    missing = REQUIRED_COLUMNS - set(data.columns)
    if missing:
        raise ValueError("Dataset is missing required columns: " + ", ".join(sorted(missing)))

    logger.info("Routing {} complaints", len(data))
    rows: list[dict[str, Any]] = []
    for index, row in data.iterrows():
        title = _clean_text(row["title"])
        description = _clean_text(row["description"])
        decision = components.route_use_case.execute(
            title,
            description,
            components.departments,
            category=_choice(row.get("category"), CATEGORIES, "category", index),
            priority=_choice(row.get("priority"), PRIORITIES, "priority", index),
            created_at=_created_at(row.get("created_at")),
        )
        deadline = decision.sla_deadline
        sla_status = (
            components.sla_calculator.get_status(deadline, now) if deadline is not None else None
        )
        rows.append(
            {
                "title": title,
                "description": description,
                "category": decision.category,
                "priority": decision.priority,
                "ai_category": decision.classification.category,
                "confidence": decision.classification.confidence,
                "keywords": ";".join(decision.classification.keywords),
                "department_id": decision.department_id,
                "department_name": decision.department_name,
                "sla_deadline": deadline.isoformat() if deadline is not None else None,
                "sla_status": sla_status,
                "sentiment": components.sentiment_use_case.execute(title, description),
            }
        )
    return pd.DataFrame(rows)


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Classify complaints and route them to departments")
    parser.add_argument("--config", type=Path, default=Path("configs/config.yaml"))
    parser.add_argument("--input", type=Path, default=None, help="CSV with title and description")
    parser.add_argument("--output", type=Path, default=None, help="Destination CSV")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    config = load_config(resolve_path(args.config))
    configure_logging(config.get("logging", {}).get("level", "INFO"))
    paths = config.get("paths", {})

    input_path = resolve_path(args.input or Path(paths.get("complaints_data", "data/complaints.csv")))
    output_path = resolve_path(
        args.output or Path(paths.get("routed_output", "data/routed_complaints.csv"))
    )
    if not input_path.exists():
        raise FileNotFoundError(f"Dataset not found: {input_path}")

    components = build_components(config)
    routed = route_dataframe(pd.read_csv(input_path), components)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    routed.to_csv(output_path, index=False)
    logger.info("Saved {} routed complaints to {}", len(routed), output_path)


if __name__ == "__main__":
    main()
