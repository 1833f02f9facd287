"""Heuristic priority scoring for complaints."""
from __future__ import annotations

from src.core.entities import DEFAULT_PRIORITY
from src.infrastructure.nlp.keyword_table import DEFAULT_KEYWORD_TABLE, KeywordTable
from src.utils.logger import logger
from src.utils.text_cleaning import preprocess_text


class KeywordPriorityScorer:
    """Assign priority labels based on keyword presence, then category defaults."""

    def __init__(self, table: KeywordTable | None = None) -> None:
        self._table = table or DEFAULT_KEYWORD_TABLE
        self._ladder: tuple[tuple[str, tuple[str, ...]], ...] = (
            ("urgent", self._table.urgent),
            ("high", self._table.high),
            ("low", self._table.low),
        )

    def determine_priority(self, text: str, category: str) -> str:
        lowered = preprocess_text(text)
        for priority, keywords in self._ladder:
            if any(keyword in lowered for keyword in keywords):
                logger.debug("Priority keyword matched; assigning '{}'", priority)
                return priority

        priority = self._table.category_priorities.get(category, DEFAULT_PRIORITY)
        logger.debug("No priority keywords; default for '{}' is '{}'", category, priority)
        return priority


__all__ = ["KeywordPriorityScorer"]
