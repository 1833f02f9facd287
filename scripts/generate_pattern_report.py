"""Command-line entry point to generate complaint pattern insights and metrics."""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

if __package__ is None or __package__ == "":
    _SCRIPT_PARENT = Path(__file__).resolve().parents[1]
    _SCRIPT_PARENT_STR = str(_SCRIPT_PARENT)
    if _SCRIPT_PARENT_STR not in sys.path:
        sys.path.insert(0, _SCRIPT_PARENT_STR)

from scripts.bootstrap import bootstrap_project, resolve_path

_PROJECT_ROOT = bootstrap_project()

from src.infrastructure.reports import (  # noqa: E402
    ComplaintCSVLoader,
    ComplaintPatternAnalyzer,
    FileSystemReportRepository,
)
from src.infrastructure.sla.calculator import DEFAULT_WARNING_HOURS, SLACalculator  # noqa: E402
from src.use_cases.generate_pattern_report import (  # noqa: E402
    GeneratedReports,
    GeneratePatternReportUseCase,
)
from src.utils.config import load_config  # noqa: E402
from src.utils.logger import configure_logging, logger  # noqa: E402


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Generate pattern insights, SLA metrics and figures for stored complaints"
    )
    parser.add_argument("--config", type=Path, default=Path("configs/config.yaml"))
    parser.add_argument("--dataset", type=Path, default=None, help="Complaint CSV to analyse")
    parser.add_argument("--metrics-path", type=Path, default=None, help="Destination JSON file")
    parser.add_argument("--figures-dir", type=Path, default=None, help="Directory for PNG figures")
    return parser.parse_args()


def generate_report(
    config: dict,
    dataset: Path | None = None,
    metrics_path: Path | None = None,
    figures_dir: Path | None = None,
) -> GeneratedReports:
    paths = config.get("paths", {})
    dataset_path = resolve_path(dataset or Path(paths.get("complaints_data", "data/complaints.csv")))
    metrics_file = resolve_path(
        metrics_path or Path(paths.get("metrics_output", "reports/metrics/complaint_patterns.json"))
    )
    figures_path = resolve_path(figures_dir or Path(paths.get("figures_dir", "reports/figures")))
    metrics_file.parent.mkdir(parents=True, exist_ok=True)
    figures_path.mkdir(parents=True, exist_ok=True)

    warning_hours = config.get("sla", {}).get("warning_hours", DEFAULT_WARNING_HOURS)
    use_case = GeneratePatternReportUseCase(
        loader=ComplaintCSVLoader(dataset_path),
        analyzer=ComplaintPatternAnalyzer(SLACalculator(warning_hours=float(warning_hours))),
        repository=FileSystemReportRepository(metrics_path=metrics_file, figures_dir=figures_path),
    )
    return use_case.execute()


def main() -> None:
    args = parse_args()
    config = load_config(resolve_path(args.config))
    configure_logging(config.get("logging", {}).get("level", "INFO"))

    reports = generate_report(config, args.dataset, args.metrics_path, args.figures_dir)
    logger.info("Metrics saved to {}", reports.metrics_path)
    for name, path in reports.figure_paths.items():
        logger.info("Figure '{}' saved to {}", name, path)
    for insight in reports.insights:
        logger.info("{}: {}% ({}) - {}", insight.category, insight.frequency, insight.trend, insight.recommendation)


if __name__ == "__main__":
    main()
