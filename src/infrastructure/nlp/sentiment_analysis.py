"""Lexicon-based sentiment bucketing for complaint texts."""
from __future__ import annotations

from src.infrastructure.nlp.keyword_table import DEFAULT_KEYWORD_TABLE, KeywordTable
from src.utils.logger import logger
from src.utils.text_cleaning import tokenize


class LexiconSentimentAnalyzer:
    """Score whole tokens against negative/positive word lists.

    The result is a coarse three-bucket label meant for display; it never feeds
    into routing or priority.
    """

    def __init__(self, table: KeywordTable | None = None) -> None:
        table = table or DEFAULT_KEYWORD_TABLE
        self._negative_words = table.negative_words
        self._positive_words = table.positive_words

    def score(self, text: str) -> int:
        total = 0
        for token in tokenize(text):
            if token in self._negative_words:
                total -= 1
            if token in self._positive_words:
                total += 1
        return total

    def analyze(self, text: str) -> str:
        score = self.score(text)
        if score < -1:
            label = "negative"
        elif score > 0:
            label = "positive"
        else:
            label = "neutral"
        logger.debug("Sentiment score {} -> {}", score, label)
        return label


__all__ = ["LexiconSentimentAnalyzer"]
