"""Tests for routing complaints to department queues."""
from __future__ import annotations

from datetime import datetime, timedelta, timezone

from src.core.entities import Department
from src.infrastructure.sla.calculator import SLACalculator
from src.use_cases.route_complaint import RouteComplaintUseCase

NOW = datetime(2024, 5, 6, 8, 30, tzinfo=timezone.utc)
DEPARTMENTS = [
    Department(id="water", categories=("water", "sanitation"), sla_hours=24, name="Water & Sanitation"),
    Department(id="power", categories=("electrical",), sla_hours=12, name="Electrical & Power"),
]


def _use_case() -> RouteComplaintUseCase:
    return RouteComplaintUseCase(sla_calculator=SLACalculator(now_provider=lambda: NOW))


def test_routes_to_category_department_and_stamps_deadline() -> None:
    decision = _use_case().execute("Leak", "Burst pipe in the basement", DEPARTMENTS)

    assert decision.category == "water"
    assert decision.department_id == "water"
    assert decision.department_name == "Water & Sanitation"
    assert decision.sla_deadline == NOW + timedelta(hours=24)
    assert decision.classification.suggested_department_id == "water"


def test_user_confirmed_category_and_priority_take_precedence() -> None:
    decision = _use_case().execute(
        "Leak",
        "Burst pipe in the basement",
        DEPARTMENTS,
        category="electrical",
        priority="low",
    )

    assert decision.category == "electrical"
    assert decision.priority == "low"
    assert decision.classification.category == "water"
    assert decision.department_id == "power"
    assert decision.sla_deadline == NOW + timedelta(hours=12)


def test_explicit_creation_time_is_used_for_deadline() -> None:
    created_at = datetime(2024, 1, 1, 0, 0, tzinfo=timezone.utc)

    decision = _use_case().execute("Sparks", "Socket sparks", DEPARTMENTS, created_at=created_at)

    assert decision.sla_deadline == created_at + timedelta(hours=12)


def test_unhandled_category_falls_back_to_first_department() -> None:
    decision = _use_case().execute("Wifi", "Router offline", DEPARTMENTS)

    assert decision.category == "internet"
    assert decision.classification.suggested_department_id is None
    assert decision.department_id == "water"


def test_without_departments_no_deadline_is_set() -> None:
    decision = _use_case().execute("", "", [])

    assert decision.department_id is None
    assert decision.department_name is None
    assert decision.sla_deadline is None
    assert decision.category == "other"
    assert decision.priority == "normal"
