"""Infrastructure helpers for generating complaint reports."""

from .complaint_patterns import (
    ComplaintCSVLoader,
    ComplaintPatternAnalyzer,
    FileSystemReportRepository,
)

__all__ = [
    "ComplaintCSVLoader",
    "ComplaintPatternAnalyzer",
    "FileSystemReportRepository",
]
