"""Keyword-based category scoring and keyword extraction for complaints."""
from __future__ import annotations

from dataclasses import dataclass, field

from src.core.entities import FALLBACK_CATEGORY
from src.infrastructure.nlp.keyword_table import DEFAULT_KEYWORD_TABLE, KeywordTable
from src.utils.logger import logger
from src.utils.text_cleaning import preprocess_text, round_half_up

FALLBACK_CONFIDENCE = 0.3
MAX_KEYWORDS = 10
# Confidence only reaches 1.0 once the top category holds over 80% of the signal.
_CONFIDENCE_SHARE = 0.8


def _keyword_weight(keyword: str) -> int:
    return 2 if " " in keyword else 1


@dataclass(frozen=True)
class KeywordCategoryClassifier:
    """Assign a complaint category from literal keyword containment."""

    table: KeywordTable = field(default=DEFAULT_KEYWORD_TABLE)

    def score_categories(self, text: str) -> dict[str, int]:
        processed = preprocess_text(text)
        scores: dict[str, int] = {}
        for category in self.table.scored_categories():
            scores[category] = sum(
                _keyword_weight(keyword)
                for keyword in self.table.categories[category]
                if keyword in processed
            )
        return scores

    def classify_category(self, text: str) -> tuple[str, float]:
        scores = self.score_categories(text)
        total = sum(scores.values())
        if total == 0:
            logger.debug("No category keywords matched; falling back to '{}'", FALLBACK_CATEGORY)
            return FALLBACK_CATEGORY, FALLBACK_CONFIDENCE

        top_category = FALLBACK_CATEGORY
        top_score = 0
        for category, score in scores.items():
            if score > top_score:
                top_category, top_score = category, score

        confidence = min(top_score / max(total * _CONFIDENCE_SHARE, 1), 1)
        confidence = round_half_up(confidence, 2)
        logger.debug(
            "Category scores {} -> '{}' (confidence {})", scores, top_category, confidence
        )
        return top_category, confidence

    def extract_keywords(self, text: str) -> list[str]:
        processed = preprocess_text(text)
        candidates: list[str] = []
        for category in self.table.categories:
            candidates.extend(self.table.categories[category])
        candidates.extend(self.table.urgent)
        candidates.extend(self.table.high)

        found: list[str] = []
        for keyword in candidates:
            if keyword in processed and keyword not in found:
                found.append(keyword)
        return found[:MAX_KEYWORDS]


__all__ = ["FALLBACK_CONFIDENCE", "KeywordCategoryClassifier", "MAX_KEYWORDS"]
