"""Wire engine components from an application config mapping."""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Callable

from src.core.entities import Department
from src.infrastructure.nlp.category_rules import KeywordCategoryClassifier
from src.infrastructure.nlp.keyword_table import KeywordTable
from src.infrastructure.nlp.sentiment_analysis import LexiconSentimentAnalyzer
from src.infrastructure.nlp.severity import KeywordPriorityScorer
from src.infrastructure.sla.calculator import DEFAULT_WARNING_HOURS, SLACalculator
from src.use_cases.analyze_sentiment import AnalyzeSentimentUseCase
from src.use_cases.classify_complaint import ClassifyComplaintUseCase
from src.use_cases.route_complaint import RouteComplaintUseCase
from src.utils.config import AppConfig, parse_departments
from src.utils.logger import logger


@dataclass(frozen=True)
class EngineComponents:
    departments: list[Department]
    keyword_table: KeywordTable
    classifier: KeywordCategoryClassifier
    classify_use_case: ClassifyComplaintUseCase
    route_use_case: RouteComplaintUseCase
    sentiment_use_case: AnalyzeSentimentUseCase
    sla_calculator: SLACalculator


def build_components(
    config: AppConfig,
    now_provider: Callable[[], datetime] | None = None,
) -> EngineComponents:
    keyword_table = KeywordTable.from_config(config.get("keywords"))
    departments = parse_departments(config.get("departments"))
    warning_hours = (config.get("sla") or {}).get("warning_hours", DEFAULT_WARNING_HOURS)
    sla_calculator = SLACalculator(warning_hours=float(warning_hours), now_provider=now_provider)

    classifier = KeywordCategoryClassifier(keyword_table)
    classify_use_case = ClassifyComplaintUseCase(
        classifier=classifier,
        priority_scorer=KeywordPriorityScorer(keyword_table),
    )
    logger.info(
        "Engine configured with {} departments and a {}h SLA warning window",
        len(departments),
        warning_hours,
    )
    return EngineComponents(
        departments=departments,
        keyword_table=keyword_table,
        classifier=classifier,
        classify_use_case=classify_use_case,
        route_use_case=RouteComplaintUseCase(classify_use_case, sla_calculator),
        sentiment_use_case=AnalyzeSentimentUseCase(LexiconSentimentAnalyzer(keyword_table)),
        sla_calculator=sla_calculator,
    )


__all__ = ["EngineComponents", "build_components"]
