"""Core entities for the complaint classification and SLA routing domain."""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

CATEGORIES: tuple[str, ...] = (
    "water",
    "electrical",
    "internet",
    "infrastructure",
    "sanitation",
    "security",
    "maintenance",
    "other",
)
FALLBACK_CATEGORY = "other"

PRIORITIES: tuple[str, ...] = ("urgent", "high", "normal", "low")
DEFAULT_PRIORITY = "normal"

SENTIMENTS: tuple[str, ...] = ("negative", "neutral", "positive")

SLA_OK = "ok"
SLA_WARNING = "warning"
SLA_BREACHED = "breached"

OPEN_STATUSES: tuple[str, ...] = ("pending", "in_progress")
CLOSED_STATUSES: tuple[str, ...] = ("resolved", "closed")


@dataclass(frozen=True)
class Department:
    """Department routing descriptor supplied by the caller."""

    id: str
    categories: tuple[str, ...]
    sla_hours: float
    name: str = ""

    def handles(self, category: str) -> bool:
        return category in self.categories


@dataclass(frozen=True)
class ClassificationResult:
    """Outcome of classifying a single complaint."""

    category: str
    confidence: float
    priority: str
    keywords: list[str] = field(default_factory=list)
    suggested_department_id: Optional[str] = None


@dataclass(frozen=True)
class RoutingDecision:
    """Final routing of a submitted complaint to a department queue."""

    category: str
    priority: str
    classification: ClassificationResult
    department_id: Optional[str] = None
    department_name: Optional[str] = None
    sla_deadline: Optional[datetime] = None


@dataclass(frozen=True)
class ComplaintRecord:
    """Snapshot of a stored complaint, as fed back for analytics."""

    category: str
    created_at: datetime
    priority: Optional[str] = None
    status: Optional[str] = None
    sla_deadline: Optional[datetime] = None
    resolved_at: Optional[datetime] = None


@dataclass(frozen=True)
class PatternInsight:
    """Aggregate view of one category over a set of complaints."""

    category: str
    frequency: int
    trend: str
    peak_days: list[str]
    recommendation: str


__all__ = [
    "CATEGORIES",
    "CLOSED_STATUSES",
    "ClassificationResult",
    "ComplaintRecord",
    "DEFAULT_PRIORITY",
    "Department",
    "FALLBACK_CATEGORY",
    "OPEN_STATUSES",
    "PRIORITIES",
    "PatternInsight",
    "RoutingDecision",
    "SENTIMENTS",
    "SLA_BREACHED",
    "SLA_OK",
    "SLA_WARNING",
]
