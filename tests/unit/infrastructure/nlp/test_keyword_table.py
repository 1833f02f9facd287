"""Tests for keyword table construction."""
from __future__ import annotations

import pytest

from src.core.entities import CATEGORIES
from src.infrastructure.nlp.keyword_table import DEFAULT_KEYWORD_TABLE, KeywordTable


def test_default_table_keeps_category_order_and_empty_other() -> None:
    assert list(DEFAULT_KEYWORD_TABLE.categories) == list(CATEGORIES)
    assert DEFAULT_KEYWORD_TABLE.categories["other"] == ()
    assert DEFAULT_KEYWORD_TABLE.scored_categories()[0] == "water"
    assert "other" not in DEFAULT_KEYWORD_TABLE.scored_categories()


def test_default_table_is_read_only() -> None:
    with pytest.raises(TypeError):
        DEFAULT_KEYWORD_TABLE.categories["water"] = ("x",)  # type: ignore[index]


def test_from_config_normalises_and_overrides() -> None:
    table = KeywordTable.from_config(
        {
            "categories": {"water": ["Spring Leak!", "spring leak", "Tap"]},
            "low": ["Whenever"],
            "category_priorities": {"maintenance": "normal"},
        }
    )

    assert table.categories["water"] == ("spring leak", "tap")
    assert table.categories["electrical"] == DEFAULT_KEYWORD_TABLE.categories["electrical"]
    assert table.low == ("whenever",)
    assert table.urgent == DEFAULT_KEYWORD_TABLE.urgent
    assert table.category_priorities["maintenance"] == "normal"


def test_from_config_without_overrides_returns_defaults() -> None:
    assert KeywordTable.from_config(None) == DEFAULT_KEYWORD_TABLE
    assert KeywordTable.from_config({}) == DEFAULT_KEYWORD_TABLE


@pytest.mark.parametrize(
    "config",
    [
        {"categories": {"plumbing": ["pipe"]}},
        {"categories": {"other": ["misc"]}},
        {"categories": {"water": "pipe"}},
        {"category_priorities": {"water": "critical"}},
        {"urgent": "fire"},
    ],
)
def test_from_config_rejects_invalid_overrides(config: dict) -> None:
    with pytest.raises(ValueError):
        KeywordTable.from_config(config)
