"""Tests for the lexicon sentiment analyzer."""
from __future__ import annotations

import pytest

from src.infrastructure.nlp.sentiment_analysis import LexiconSentimentAnalyzer
from src.use_cases.analyze_sentiment import AnalyzeSentimentUseCase


def test_sentiment_buckets() -> None:
    analyzer = LexiconSentimentAnalyzer()

    assert analyzer.analyze("This is terrible and horrible service") == "negative"
    assert analyzer.analyze("terrible") == "neutral"
    assert analyzer.analyze("Thank you, great work") == "positive"
    assert analyzer.analyze("") == "neutral"


def test_sentiment_requires_exact_tokens() -> None:
    analyzer = LexiconSentimentAnalyzer()

    assert analyzer.score("thanks, goodness") == 0


def test_use_case_labels_title_and_description_together() -> None:
    use_case = AnalyzeSentimentUseCase()

    assert use_case.execute("Awful service", "the crew was useless") == "negative"
    assert use_case.execute("Awful service", "") == "neutral"
    assert use_case.execute("Resolved quickly") == "positive"
    assert use_case.execute(None, None) == "neutral"


def test_use_case_labels_batches_in_order() -> None:
    use_case = AnalyzeSentimentUseCase(LexiconSentimentAnalyzer())

    assert use_case.execute_many(["awful, useless and pathetic", "resolved quickly", ""]) == [
        "negative",
        "positive",
        "neutral",
    ]


def test_use_case_rejects_unknown_labels() -> None:
    class ShoutingScorer:
        def analyze(self, text: str) -> str:
            return "furious"

    with pytest.raises(ValueError):
        AnalyzeSentimentUseCase(ShoutingScorer()).execute("water leak")
