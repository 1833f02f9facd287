"""Tests for the complaint classification use case."""
from __future__ import annotations

from src.core.entities import ClassificationResult, Department
from src.use_cases.classify_complaint import ClassifyComplaintUseCase

WATER_DEPARTMENT = Department(id="d1", categories=("water",), sla_hours=24)


def test_urgent_water_complaint_is_routed_to_water_department() -> None:
    use_case = ClassifyComplaintUseCase()

    result = use_case.execute(
        "No water in building A",
        "There has been no water supply for 3 days, very urgent issue",
        [WATER_DEPARTMENT],
    )

    assert result.category == "water"
    assert result.priority == "urgent"
    assert result.confidence == 1.0
    assert result.suggested_department_id == "d1"
    assert result.keywords == ["water", "supply", "no water", "building", "urgent", "days"]


def test_empty_complaint_uses_defaults() -> None:
    use_case = ClassifyComplaintUseCase()

    result = use_case.execute("", "", [])

    assert result == ClassificationResult(
        category="other",
        confidence=0.3,
        priority="normal",
        keywords=[],
        suggested_department_id=None,
    )


def test_first_matching_department_in_list_order_is_suggested() -> None:
    use_case = ClassifyComplaintUseCase()
    departments = [
        Department(id="it", categories=("internet",), sla_hours=8),
        Department(id="power-a", categories=("electrical",), sla_hours=12),
        Department(id="power-b", categories=("electrical", "security"), sla_hours=4),
    ]

    result = use_case.execute("Blackout", "Total power outage on floor 2", departments)

    assert result.category == "electrical"
    assert result.suggested_department_id == "power-a"


def test_no_matching_department_leaves_suggestion_empty() -> None:
    use_case = ClassifyComplaintUseCase()

    result = use_case.execute("Wifi down", "The router keeps dropping", [WATER_DEPARTMENT])

    assert result.category == "internet"
    assert result.suggested_department_id is None


def test_classification_is_deterministic() -> None:
    use_case = ClassifyComplaintUseCase()
    args = ("Garbage smell", "Trash has not been collected, awful smell near the toilet", [WATER_DEPARTMENT])

    first = use_case.execute(*args)
    second = use_case.execute(*args)

    assert first == second
    assert repr(first) == repr(second)
    assert 0.0 <= first.confidence <= 1.0


def test_use_case_accepts_custom_collaborators() -> None:
    class FixedClassifier:
        def classify_category(self, text: str) -> tuple[str, float]:
            return "security", 0.9

        def extract_keywords(self, text: str) -> list[str]:
            return ["guard"]

    class RecordingScorer:
        def __init__(self) -> None:
            self.calls: list[tuple[str, str]] = []

        def determine_priority(self, text: str, category: str) -> str:
            self.calls.append((text, category))
            return "high"

    scorer = RecordingScorer()
    use_case = ClassifyComplaintUseCase(classifier=FixedClassifier(), priority_scorer=scorer)

    result = use_case.execute("Gate", "left open", [])

    assert scorer.calls == [("Gate left open", "security")]
    assert result.priority == "high"
    assert result.keywords == ["guard"]
