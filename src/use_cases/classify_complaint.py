"""Use case for classifying a complaint and suggesting a department."""
from __future__ import annotations

from typing import Optional, Protocol, Sequence

from src.core.entities import ClassificationResult, Department
from src.infrastructure.nlp.category_rules import KeywordCategoryClassifier
from src.infrastructure.nlp.severity import KeywordPriorityScorer
from src.utils.logger import logger


class CategoryClassifier(Protocol):
    def classify_category(self, text: str) -> tuple[str, float]:
        ...

    def extract_keywords(self, text: str) -> list[str]:
        ...


class PriorityScorer(Protocol):
    def determine_priority(self, text: str, category: str) -> str:
        ...


class ClassifyComplaintUseCase:
    """Run category, priority and keyword analysis over title plus description."""

    def __init__(
        self,
        classifier: CategoryClassifier | None = None,
        priority_scorer: PriorityScorer | None = None,
    ) -> None:
        self._classifier = classifier or KeywordCategoryClassifier()
        self._priority_scorer = priority_scorer or KeywordPriorityScorer()

    def execute(
        self,
        title: str,
        description: str,
        departments: Sequence[Department] = (),
    ) -> ClassificationResult:
        full_text = f"{title or ''} {description or ''}"
        category, confidence = self._classifier.classify_category(full_text)
        priority = self._priority_scorer.determine_priority(full_text, category)
        keywords = self._classifier.extract_keywords(full_text)
        suggested = self._suggest_department(category, departments)

        result = ClassificationResult(
            category=category,
            confidence=confidence,
            priority=priority,
            keywords=keywords,
            suggested_department_id=suggested,
        )
        logger.debug("Classified complaint: {}", result)
        return result

    @staticmethod
    def _suggest_department(category: str, departments: Sequence[Department]) -> Optional[str]:
        for department in departments:
            if department.handles(category):
                return department.id
        return None


__all__ = ["ClassifyComplaintUseCase"]
