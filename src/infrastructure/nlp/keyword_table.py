"""Static keyword dictionaries driving complaint classification."""
from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Iterable, Mapping

from src.core.entities import CATEGORIES, FALLBACK_CATEGORY, PRIORITIES
from src.utils.text_cleaning import preprocess_text

_CATEGORY_KEYWORDS: dict[str, tuple[str, ...]] = {
    "water": (
        "water", "pipe", "leak", "flood", "drain", "sewage", "tap", "supply",
        "plumbing", "overflow", "blockage", "contamination", "dirty water",
        "no water", "water cut", "burst pipe", "moisture", "damp",
    ),
    "electrical": (
        "electricity", "electric", "power", "light", "bulb", "wiring", "socket",
        "switch", "fuse", "transformer", "outage", "blackout", "short circuit",
        "voltage", "generator", "meter", "sparks", "shock", "no power",
    ),
    "internet": (
        "internet", "wifi", "network", "connection", "broadband", "router",
        "signal", "slow internet", "disconnected", "bandwidth", "cable",
        "fiber", "lan", "modem", "connectivity", "online", "offline",
    ),
    "infrastructure": (
        "road", "pothole", "bridge", "building", "wall", "ceiling", "floor",
        "crack", "construction", "pavement", "sidewalk", "parking", "gate",
        "fence", "roof", "structure", "foundation", "elevator", "lift",
    ),
    "sanitation": (
        "garbage", "waste", "trash", "dustbin", "cleaning", "hygiene", "toilet",
        "bathroom", "restroom", "smell", "odor", "pest", "rat", "cockroach",
        "mosquito", "dirty", "filth", "sweep", "litter",
    ),
    "security": (
        "security", "theft", "robbery", "vandalism", "cctv", "camera", "guard",
        "safety", "danger", "threat", "suspicious", "break-in", "trespassing",
        "harassment", "violence", "crime", "police", "emergency",
    ),
    "maintenance": (
        "maintenance", "repair", "broken", "damaged", "worn", "old", "replace",
        "fix", "service", "equipment", "machine", "appliance", "furniture",
        "door", "window", "lock", "hinge", "paint", "renovation",
    ),
    "other": (),
}

_URGENT_KEYWORDS: tuple[str, ...] = (
    "urgent", "emergency", "critical", "immediately", "asap", "dangerous",
    "hazardous", "life-threatening", "fire", "flood", "explosion", "gas leak",
    "electric shock", "accident", "injury", "blood", "collapse", "fallen",
)

_HIGH_KEYWORDS: tuple[str, ...] = (
    "broken", "not working", "completely", "totally", "severe", "major",
    "serious", "significant", "important", "affecting many", "multiple",
    "days", "week", "unbearable", "intolerable", "health risk",
)

_LOW_KEYWORDS: tuple[str, ...] = (
    "minor", "small", "slight", "little", "cosmetic", "aesthetic", "suggestion",
    "improvement", "enhancement", "when possible", "not urgent", "low priority",
)

_CATEGORY_PRIORITIES: dict[str, str] = {
    "electrical": "high",
    "water": "high",
    "security": "high",
    "infrastructure": "normal",
    "internet": "normal",
    "sanitation": "normal",
    "maintenance": "low",
}

_NEGATIVE_WORDS: tuple[str, ...] = (
    "terrible", "horrible", "awful", "disgusting", "unacceptable", "worst",
    "pathetic", "useless", "incompetent", "negligent", "frustrated", "angry",
)

_POSITIVE_WORDS: tuple[str, ...] = (
    "good", "great", "excellent", "satisfied", "happy", "resolved", "fixed",
    "improved", "better", "appreciate", "thank",
)

_PRIORITY_LIST_KEYS = ("urgent", "high", "low")
_LEXICON_KEYS = ("negative", "positive")


def _normalize_keywords(keywords: Iterable[str]) -> tuple[str, ...]:
    normalized: list[str] = []
    for keyword in keywords:
        cleaned = preprocess_text(str(keyword))
        if cleaned and cleaned not in normalized:
            normalized.append(cleaned)
    return tuple(normalized)


def _as_keyword_list(value: Any, key: str) -> Iterable[str]:
    if isinstance(value, str) or not isinstance(value, Iterable):
        raise ValueError(f"Keyword override '{key}' must be a list of strings.")
    return value


@dataclass(frozen=True)
class KeywordTable:
    """Immutable keyword configuration consumed by the classifier components.

    ``categories`` is keyed in the fixed category declaration order; that order
    decides score ties and the order in which keywords are extracted.
    """

    categories: Mapping[str, tuple[str, ...]]
    urgent: tuple[str, ...]
    high: tuple[str, ...]
    low: tuple[str, ...]
    category_priorities: Mapping[str, str]
    negative_words: frozenset[str]
    positive_words: frozenset[str]

    def __post_init__(self) -> None:
        ordered = {category: tuple(self.categories.get(category, ())) for category in CATEGORIES}
        ordered[FALLBACK_CATEGORY] = ()
        object.__setattr__(self, "categories", MappingProxyType(ordered))
        object.__setattr__(
            self, "category_priorities", MappingProxyType(dict(self.category_priorities))
        )

    def scored_categories(self) -> list[str]:
        return [category for category in self.categories if category != FALLBACK_CATEGORY]

    @classmethod
    def default(cls) -> "KeywordTable":
        return cls(
            categories=_CATEGORY_KEYWORDS,
            urgent=_URGENT_KEYWORDS,
            high=_HIGH_KEYWORDS,
            low=_LOW_KEYWORDS,
            category_priorities=_CATEGORY_PRIORITIES,
            negative_words=frozenset(_NEGATIVE_WORDS),
            positive_words=frozenset(_POSITIVE_WORDS),
        )

    @classmethod
    def from_config(cls, config: Mapping[str, Any] | None) -> "KeywordTable":
        """Build a table from a ``keywords`` config section.

        Every key is optional and replaces the matching default list wholesale:
        ``categories`` (category -> keywords), ``urgent``, ``high``, ``low``,
        ``category_priorities`` (category -> priority), ``negative`` and ``positive``.
        """

        base = cls.default()
        if not config:
            return base

        categories = dict(base.categories)
        for category, keywords in (config.get("categories") or {}).items():
            if category not in CATEGORIES:
                raise ValueError(f"Unknown complaint category '{category}' in keyword overrides.")
            if category == FALLBACK_CATEGORY:
                raise ValueError(f"Category '{FALLBACK_CATEGORY}' cannot define keywords.")
            categories[category] = _normalize_keywords(
                _as_keyword_list(keywords, f"categories.{category}")
            )

        priority_lists = {
            key: (
                _normalize_keywords(_as_keyword_list(config[key], key))
                if config.get(key) is not None
                else getattr(base, key)
            )
            for key in _PRIORITY_LIST_KEYS
        }

        category_priorities = dict(base.category_priorities)
        for category, priority in (config.get("category_priorities") or {}).items():
            if category not in CATEGORIES:
                raise ValueError(f"Unknown complaint category '{category}' in priority defaults.")
            if priority not in PRIORITIES:
                raise ValueError(f"Unknown priority '{priority}' for category '{category}'.")
            category_priorities[category] = priority

        lexicons = {
            key: (
                frozenset(_normalize_keywords(_as_keyword_list(config[key], key)))
                if config.get(key) is not None
                else getattr(base, f"{key}_words")
            )
            for key in _LEXICON_KEYS
        }

        return cls(
            categories=categories,
            urgent=priority_lists["urgent"],
            high=priority_lists["high"],
            low=priority_lists["low"],
            category_priorities=category_priorities,
            negative_words=lexicons["negative"],
            positive_words=lexicons["positive"],
        )


DEFAULT_KEYWORD_TABLE = KeywordTable.default()

__all__ = ["DEFAULT_KEYWORD_TABLE", "KeywordTable"]
