"""Use case orchestrating the complaint pattern report."""
from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import datetime
from pathlib import Path
from typing import Any, Mapping, Protocol, Sequence

from matplotlib.figure import Figure

from src.core.entities import ComplaintRecord, PatternInsight
from src.utils.logger import logger


class ComplaintLoader(Protocol):
    def load(self) -> list[ComplaintRecord]:
        ...


class PatternAnalyzer(Protocol):
    def analyze_patterns(self, complaints: Sequence[ComplaintRecord]) -> list[PatternInsight]:
        ...

    def compute_metrics(
        self, complaints: Sequence[ComplaintRecord], now: datetime | None = None
    ) -> Mapping[str, Any]:
        ...

    def build_figures(self, complaints: Sequence[ComplaintRecord]) -> Mapping[str, Figure]:
        ...


class ReportRepository(Protocol):
    def save_metrics(self, metrics: Mapping[str, Any]) -> Path:
        ...

    def save_figures(self, figures: Mapping[str, Figure]) -> Mapping[str, Path]:
        ...


@dataclass(frozen=True)
class GeneratedReports:
    metrics_path: Path
    figure_paths: Mapping[str, Path]
    insights: list[PatternInsight]


class GeneratePatternReportUseCase:
    """Load complaints, analyse them and persist the resulting artefacts."""

    def __init__(
        self,
        loader: ComplaintLoader,
        analyzer: PatternAnalyzer,
        repository: ReportRepository,
    ) -> None:
        self._loader = loader
        self._analyzer = analyzer
        self._repository = repository

    def execute(self, now: datetime | None = None) -> GeneratedReports:
        complaints = self._loader.load()
        logger.info("Generating pattern report for {} complaints", len(complaints))

        insights = self._analyzer.analyze_patterns(complaints)
        metrics = dict(self._analyzer.compute_metrics(complaints, now=now))
        metrics["insights"] = [asdict(insight) for insight in insights]

        metrics_path = self._repository.save_metrics(metrics)
        figure_paths = self._repository.save_figures(self._analyzer.build_figures(complaints))
        return GeneratedReports(
            metrics_path=metrics_path,
            figure_paths=figure_paths,
            insights=insights,
        )


__all__ = ["GeneratePatternReportUseCase", "GeneratedReports"]
