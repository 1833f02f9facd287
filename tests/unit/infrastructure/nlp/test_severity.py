"""Tests for keyword priority scoring."""
from __future__ import annotations

import pytest

from src.infrastructure.nlp.severity import KeywordPriorityScorer


@pytest.mark.parametrize(
    ("text", "category", "expected"),
    [
        ("Sparks near the socket, urgent", "maintenance", "urgent"),
        ("not urgent, fix when possible", "maintenance", "urgent"),
        ("The door has been broken for a week", "maintenance", "high"),
        ("Minor paint scratch", "electrical", "low"),
        ("The light is flickering", "electrical", "high"),
        ("Pothole on the road", "infrastructure", "normal"),
        ("Paint peeling", "maintenance", "low"),
        ("", "other", "normal"),
        ("", "unknown", "normal"),
    ],
)
def test_determine_priority_precedence(text: str, category: str, expected: str) -> None:
    scorer = KeywordPriorityScorer()

    assert scorer.determine_priority(text, category) == expected


def test_urgent_keyword_overrides_low_keywords() -> None:
    scorer = KeywordPriorityScorer()

    assert scorer.determine_priority("small fire in the bin", "sanitation") == "urgent"
