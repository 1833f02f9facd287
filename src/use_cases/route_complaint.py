"""Use case for routing a submitted complaint to a department queue."""
from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from src.core.entities import ClassificationResult, Department, RoutingDecision
from src.infrastructure.sla.calculator import SLACalculator
from src.use_cases.classify_complaint import ClassifyComplaintUseCase
from src.utils.logger import logger


class ComplaintClassifier(Protocol):
    def execute(
        self,
        title: str,
        description: str,
        departments: Sequence[Department] = (),
    ) -> ClassificationResult:
        ...


class DeadlineCalculator(Protocol):
    def now(self) -> datetime:
        ...

    def calculate_deadline(self, created_at: datetime, sla_hours: float) -> datetime:
        ...


class RouteComplaintUseCase:
    """Resolve final category, priority, department and SLA deadline.

    User-confirmed category and priority win over the automatic suggestion. The
    department is the first one handling the final category, then the suggested
    department, then the first configured department.
    """

    def __init__(
        self,
        classifier: ComplaintClassifier | None = None,
        sla_calculator: DeadlineCalculator | None = None,
    ) -> None:
        self._classifier = classifier or ClassifyComplaintUseCase()
        self._sla_calculator = sla_calculator or SLACalculator()

    def execute(
        self,
        title: str,
        description: str,
        departments: Sequence[Department] = (),
        category: Optional[str] = None,
        priority: Optional[str] = None,
        created_at: Optional[datetime] = None,
    ) -> RoutingDecision:
        classification = self._classifier.execute(title, description, departments)
        final_category = category or classification.category
        final_priority = priority or classification.priority

        department = self._select_department(
            final_category, classification.suggested_department_id, departments
        )

        deadline: datetime | None = None
        if department is not None:
            submitted_at = created_at or self._sla_calculator.now()
            deadline = self._sla_calculator.calculate_deadline(submitted_at, department.sla_hours)

        decision = RoutingDecision(
            category=final_category,
            priority=final_priority,
            classification=classification,
            department_id=department.id if department else None,
            department_name=department.name if department else None,
            sla_deadline=deadline,
        )
        logger.info(
            "Routed '{}' complaint ({}) to department {} with deadline {}",
            final_category,
            final_priority,
            decision.department_id,
            deadline,
        )
        return decision

    @staticmethod
    def _select_department(
        category: str,
        suggested_id: Optional[str],
        departments: Sequence[Department],
    ) -> Optional[Department]:
        for department in departments:
            if department.handles(category):
                return department
        for department in departments:
            if department.id == suggested_id:
                return department
        if departments:
            logger.warning("No department handles '{}'; using {}", category, departments[0].id)
            return departments[0]
        return None


__all__ = ["RouteComplaintUseCase"]
