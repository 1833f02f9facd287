"""YAML configuration loading for scripts and services."""
from __future__ import annotations

from pathlib import Path
from typing import Any, Sequence, TypedDict

import yaml

from src.core.entities import CATEGORIES, Department

MIN_SLA_HOURS = 1
MAX_SLA_HOURS = 720


class PathsConfig(TypedDict, total=False):
    complaints_data: str
    labelled_data: str
    routed_output: str
    metrics_output: str
    figures_dir: str


class LoggingConfig(TypedDict, total=False):
    level: str


class SLAConfig(TypedDict, total=False):
    warning_hours: float


class DepartmentEntry(TypedDict, total=False):
    id: str
    name: str
    categories: list[str]
    sla_hours: float


class KeywordsConfig(TypedDict, total=False):
    categories: dict[str, list[str]]
    urgent: list[str]
    high: list[str]
    low: list[str]
    category_priorities: dict[str, str]
    negative: list[str]
    positive: list[str]


class AppConfig(TypedDict, total=False):
    paths: PathsConfig
    logging: LoggingConfig
    sla: SLAConfig
    departments: list[DepartmentEntry]
    keywords: KeywordsConfig


def load_config(path: Path) -> AppConfig:
    with Path(path).open("r", encoding="utf-8") as file:
        return yaml.safe_load(file) or {}


def parse_departments(entries: Sequence[DepartmentEntry | dict[str, Any]] | None) -> list[Department]:
    """Validate department entries and build routing descriptors in config order."""

    departments: list[Department] = []
    seen_ids: set[str] = set()
    for entry in entries or []:
        department_id = str(entry.get("id") or "").strip()
        if not department_id:
            raise ValueError("Each department must define a non-empty 'id'.")
        if department_id in seen_ids:
            raise ValueError(f"Duplicate department id '{department_id}'.")

        categories = [str(category).strip().lower() for category in entry.get("categories") or []]
        unknown = [category for category in categories if category not in CATEGORIES]
        if unknown:
            raise ValueError(
                f"Department '{department_id}' lists unknown categories: {', '.join(unknown)}."
            )

        sla_hours = entry.get("sla_hours")
        if sla_hours is None:
            raise ValueError(f"Department '{department_id}' must define 'sla_hours'.")
        sla_hours_value = float(sla_hours)
        if not MIN_SLA_HOURS <= sla_hours_value <= MAX_SLA_HOURS:
            raise ValueError(
                f"Invalid SLA for department '{department_id}': {sla_hours_value} hours is outside "
                f"{MIN_SLA_HOURS}-{MAX_SLA_HOURS}."
            )

        seen_ids.add(department_id)
        departments.append(
            Department(
                id=department_id,
                categories=tuple(categories),
                sla_hours=sla_hours_value,
                name=str(entry.get("name") or department_id),
            )
        )
    return departments


__all__ = [
    "AppConfig",
    "MAX_SLA_HOURS",
    "MIN_SLA_HOURS",
    "load_config",
    "parse_departments",
]
