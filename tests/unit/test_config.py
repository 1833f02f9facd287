"""Unit tests for configuration parsing."""
from __future__ import annotations

from pathlib import Path

import pytest

from src.core.entities import Department
from src.utils.config import load_config, parse_departments

ROOT = Path(__file__).resolve().parents[2]


def test_parse_departments_keeps_order_and_normalises() -> None:
    departments = parse_departments(
        [
            {"id": "water", "name": "Water", "categories": ["Water", "sanitation"], "sla_hours": 24},
            {"id": "general", "categories": ["other"], "sla_hours": 72},
        ]
    )

    assert departments == [
        Department(id="water", categories=("water", "sanitation"), sla_hours=24.0, name="Water"),
        Department(id="general", categories=("other",), sla_hours=72.0, name="general"),
    ]


@pytest.mark.parametrize(
    "entry",
    [
        {"categories": ["water"], "sla_hours": 24},
        {"id": "x", "categories": ["plumbing"], "sla_hours": 24},
        {"id": "x", "categories": ["water"]},
        {"id": "x", "categories": ["water"], "sla_hours": 0},
        {"id": "x", "categories": ["water"], "sla_hours": 721},
    ],
)
def test_parse_departments_rejects_invalid_entries(entry: dict) -> None:
    with pytest.raises(ValueError):
        parse_departments([entry])


def test_parse_departments_rejects_duplicate_ids() -> None:
    entry = {"id": "x", "categories": ["water"], "sla_hours": 24}
    with pytest.raises(ValueError):
        parse_departments([entry, entry])


def test_parse_departments_accepts_missing_section() -> None:
    assert parse_departments(None) == []


def test_shipped_config_is_valid() -> None:
    config = load_config(ROOT / "configs" / "config.yaml")

    departments = parse_departments(config["departments"])
    assert [department.sla_hours for department in departments] == [24, 12, 8, 48, 4, 72]
    assert config["sla"]["warning_hours"] == 4
