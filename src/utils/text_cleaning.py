"""Utility functions for complaint text preprocessing."""
from __future__ import annotations

import math
import re

from src.utils.logger import logger

_DISALLOWED_PATTERN = re.compile(r"[^a-z0-9\s-]")
_MULTISPACE_PATTERN = re.compile(r"\s+")


def preprocess_text(text: str | None) -> str:
    """Lowercase, drop everything outside ``[a-z0-9\\s-]`` and collapse whitespace.

    Every keyword scan in the engine runs over text produced by this function, and
    keyword tables are normalised with it too, so substring matches stay consistent.
    """
    if not isinstance(text, str):
        return ""
    text = text.lower()
    text = _DISALLOWED_PATTERN.sub(" ", text)
    text = _MULTISPACE_PATTERN.sub(" ", text).strip()
    return text


def tokenize(text: str | None) -> list[str]:
    """Split preprocessed text into whitespace-delimited tokens."""
    processed = preprocess_text(text)
    if not processed:
        return []
    tokens = processed.split(" ")
    logger.debug("Tokenized text into {} tokens", len(tokens))
    return tokens


def round_half_up(value: float, digits: int = 0) -> float:
    """Round like a calculator does: halves always go up."""
    factor = 10**digits
    return math.floor(value * factor + 0.5) / factor


__all__ = ["preprocess_text", "round_half_up", "tokenize"]
