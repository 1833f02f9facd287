"""Use case for labelling the tone of a submitted complaint."""
from __future__ import annotations

from typing import Protocol, Sequence

from src.core.entities import SENTIMENTS
from src.infrastructure.nlp.sentiment_analysis import LexiconSentimentAnalyzer
from src.utils.logger import logger


class SentimentScorer(Protocol):
    def analyze(self, text: str) -> str:
        ...


class AnalyzeSentimentUseCase:
    """Label a complaint ``negative``, ``neutral`` or ``positive``.

    The label is informational and never changes category, priority or routing.
    Title and description are joined the same way the classifier joins them.
    """

    def __init__(self, scorer: SentimentScorer | None = None) -> None:
        self._scorer = scorer or LexiconSentimentAnalyzer()

    def execute(self, title: str, description: str = "") -> str:
        text = f"{title or ''} {description or ''}".strip()
        sentiment = self._scorer.analyze(text)
        if sentiment not in SENTIMENTS:
            raise ValueError(f"Unknown sentiment label '{sentiment}'")
        logger.debug("Complaint sentiment: {}", sentiment)
        return sentiment

    def execute_many(self, texts: Sequence[str]) -> list[str]:
        return [self.execute(text) for text in texts]


__all__ = ["AnalyzeSentimentUseCase"]
