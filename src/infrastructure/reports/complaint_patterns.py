"""Pattern insights, queue metrics and report artefacts over historical complaints."""
from __future__ import annotations

import json
from dataclasses import asdict
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Iterable, Mapping, Optional, Sequence

import matplotlib

matplotlib.use("Agg", force=True)
import matplotlib.pyplot as plt
import pandas as pd
from matplotlib.figure import Figure

from src.core.entities import (
    CATEGORIES,
    CLOSED_STATUSES,
    OPEN_STATUSES,
    PRIORITIES,
    ComplaintRecord,
    PatternInsight,
)
from src.infrastructure.sla.calculator import SLACalculator
from src.utils.logger import logger
from src.utils.text_cleaning import round_half_up

WEEKDAYS: tuple[str, ...] = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)
PEAK_DAY_COUNT = 2


def _optional_timestamp(value: Any) -> Optional[datetime]:
    if value is None or pd.isna(value):
        return None
    return pd.Timestamp(value).to_pydatetime()


def _as_utc(value: datetime) -> datetime:
    # Naive timestamps are read as UTC.
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _optional_text(value: Any) -> Optional[str]:
    if value is None or pd.isna(value):
        return None
    text = str(value).strip().lower()
    return text or None


class ComplaintCSVLoader:
    """Load complaint snapshots exported as CSV files."""

    _timestamp_columns = ("created_at", "sla_deadline", "resolved_at")

    def __init__(self, csv_path: Path) -> None:
        self._csv_path = Path(csv_path)

    def load(self) -> list[ComplaintRecord]:
        if not self._csv_path.exists():
            raise FileNotFoundError(f"Dataset not found: {self._csv_path}")

        data = pd.read_csv(self._csv_path)
        required_columns = {"category", "created_at"}
        missing = required_columns - set(data.columns)
        if missing:
            raise ValueError(
                "Dataset is missing required columns: " + ", ".join(sorted(missing))
            )

        for column in self._timestamp_columns:
            if column in data.columns:
                data[column] = pd.to_datetime(data[column], errors="coerce", utc=True)

        invalid = data["created_at"].isna() | data["category"].isna()
        if invalid.any():
            logger.warning("Skipping {} rows without category or creation date", int(invalid.sum()))
            data = data.loc[~invalid]

        records = [
            ComplaintRecord(
                category=str(row["category"]).strip().lower(),
                created_at=row["created_at"].to_pydatetime(),
                priority=_optional_text(row.get("priority")),
                status=_optional_text(row.get("status")),
                sla_deadline=_optional_timestamp(row.get("sla_deadline")),
                resolved_at=_optional_timestamp(row.get("resolved_at")),
            )
            for row in data.to_dict(orient="records")
        ]
        logger.info("Loaded {} complaints from {}", len(records), self._csv_path)
        return records


class ComplaintPatternAnalyzer:
    """Compute category insights, SLA metrics and illustrative figures."""

    def __init__(self, sla_calculator: SLACalculator | None = None) -> None:
        self._sla_calculator = sla_calculator or SLACalculator()

    def analyze_patterns(self, complaints: Sequence[ComplaintRecord]) -> list[PatternInsight]:
        """Summarise share of volume and peak weekdays per category.

        ``trend`` is a threshold on the category's share of this snapshot, not a
        comparison between periods. Peak-day ties keep the order in which the
        weekdays first appear in ``complaints``.
        """

        if not complaints:
            return []

        frame = self._to_frame(complaints)
        total = len(frame)
        counts = frame.groupby("category", sort=False).size()
        by_day = frame.dropna(subset=["weekday"]).groupby(["category", "weekday"], sort=False).size()

        insights: list[PatternInsight] = []
        for category, count in counts.items():
            frequency = int(round_half_up(count / total * 100))
            peak_days: list[str] = []
            if category in by_day.index.get_level_values("category"):
                day_counts = by_day.xs(category, level="category")
                ranked = day_counts.sort_values(ascending=False, kind="stable")
                peak_days = [str(day) for day in ranked.index[:PEAK_DAY_COUNT]]

            insights.append(
                PatternInsight(
                    category=str(category),
                    frequency=frequency,
                    trend=self._trend(frequency),
                    peak_days=peak_days,
                    recommendation=self._recommendation(str(category), frequency),
                )
            )

        insights.sort(key=lambda insight: insight.frequency, reverse=True)
        logger.debug("Computed {} pattern insights over {} complaints", len(insights), total)
        return insights

    def compute_metrics(
        self,
        complaints: Sequence[ComplaintRecord],
        now: datetime | None = None,
    ) -> Mapping[str, Any]:
        total = len(complaints)
        statuses = [complaint.status for complaint in complaints]

        resolution_hours = [
            (_as_utc(complaint.resolved_at) - _as_utc(complaint.created_at)).total_seconds() / 3600
            for complaint in complaints
            if complaint.resolved_at is not None
        ]
        avg_resolution = (
            round(sum(resolution_hours) / len(resolution_hours), 2) if resolution_hours else 0.0
        )

        category_breakdown = {category: 0 for category in CATEGORIES}
        priority_breakdown = {priority: 0 for priority in PRIORITIES}
        if complaints:
            frame = self._to_frame(complaints)
            for category, count in frame["category"].value_counts(sort=False).items():
                category_breakdown[str(category)] = int(count)
            for priority, count in frame["priority"].dropna().value_counts(sort=False).items():
                priority_breakdown[str(priority)] = int(count)

        return {
            "total_complaints": total,
            "resolved_complaints": sum(status in CLOSED_STATUSES for status in statuses),
            "pending_complaints": sum(status in OPEN_STATUSES for status in statuses),
            "avg_resolution_hours": avg_resolution,
            "sla_breaches": sum(self._is_breach(complaint, now) for complaint in complaints),
            "category_breakdown": category_breakdown,
            "priority_breakdown": priority_breakdown,
        }

    def build_figures(self, complaints: Sequence[ComplaintRecord]) -> Mapping[str, Figure]:
        figures: dict[str, Figure] = {}
        if not complaints:
            return figures

        frame = self._to_frame(complaints)
        counts = frame["category"].value_counts().sort_values(ascending=False)
        fig_counts, ax_counts = plt.subplots(figsize=(8, 4))
        counts.plot(kind="bar", ax=ax_counts, color="#1f77b4")
        ax_counts.set_title("Complaints by category")
        ax_counts.set_xlabel("Category")
        ax_counts.set_ylabel("Complaints")
        fig_counts.tight_layout()
        figures["category_distribution"] = fig_counts

        weekdays = frame["weekday"].dropna().value_counts().reindex(WEEKDAYS, fill_value=0)
        fig_days, ax_days = plt.subplots(figsize=(8, 4))
        weekdays.plot(kind="bar", ax=ax_days, color="#ff7f0e")
        ax_days.set_title("Complaints by weekday")
        ax_days.set_xlabel("Weekday")
        ax_days.set_ylabel("Complaints")
        fig_days.tight_layout()
        figures["weekday_volume"] = fig_days

        return figures

    def _is_breach(self, complaint: ComplaintRecord, now: datetime | None) -> bool:
        if complaint.sla_deadline is None:
            return False
        if complaint.resolved_at is not None:
            return self._sla_calculator.is_breached(complaint.sla_deadline, complaint.resolved_at)
        if complaint.status in CLOSED_STATUSES:
            return False
        return self._sla_calculator.is_breached(complaint.sla_deadline, now)

    @staticmethod
    def _to_frame(complaints: Iterable[ComplaintRecord]) -> pd.DataFrame:
        rows = []
        for complaint in complaints:
            row = asdict(complaint)
            for column in ("created_at", "resolved_at"):
                if row[column] is not None:
                    row[column] = _as_utc(row[column])
            created_at = complaint.created_at
            row["weekday"] = WEEKDAYS[created_at.weekday()] if created_at is not None else None
            rows.append(row)
        return pd.DataFrame(rows, columns=[*ComplaintRecord.__dataclass_fields__, "weekday"])

    @staticmethod
    def _trend(frequency: int) -> str:
        if frequency > 20:
            return "increasing"
        if frequency > 10:
            return "stable"
        return "decreasing"

    @staticmethod
    def _recommendation(category: str, frequency: int) -> str:
        if frequency > 30:
            return f"High volume of {category} complaints. Consider preventive maintenance schedule."
        if frequency > 15:
            return f"Moderate {category} issues. Review infrastructure condition."
        return f"{category} complaints are within normal range."


class FileSystemReportRepository:
    """Persist metrics and figures to the local filesystem."""

    def __init__(self, metrics_path: Path, figures_dir: Path) -> None:
        self._metrics_path = Path(metrics_path)
        self._figures_dir = Path(figures_dir)

    def save_metrics(self, metrics: Mapping[str, Any]) -> Path:
        self._ensure_parent_exists(self._metrics_path)
        serialisable = json.dumps(metrics, ensure_ascii=False, indent=2, default=str)
        self._metrics_path.write_text(serialisable, encoding="utf-8")
        return self._metrics_path

    def save_figures(self, figures: Mapping[str, Figure]) -> Mapping[str, Path]:
        if not self._figures_dir.exists():
            raise FileNotFoundError(
                f"Expected figures directory to exist: {self._figures_dir}"
            )
        saved_paths: dict[str, Path] = {}
        for name, figure in figures.items():
            destination = self._figures_dir / f"{name}.png"
            figure.savefig(destination, dpi=150, bbox_inches="tight")
            plt.close(figure)
            saved_paths[name] = destination
        return saved_paths

    def _ensure_parent_exists(self, path: Path) -> None:
        parent = path.parent
        if not parent.exists():
            raise FileNotFoundError(f"Expected directory to exist: {parent}")


__all__ = [
    "ComplaintCSVLoader",
    "ComplaintPatternAnalyzer",
    "FileSystemReportRepository",
    "PEAK_DAY_COUNT",
    "WEEKDAYS",
]
