"""
src/journalcore/extraction/taxonomy.py

Symptom taxonomy: the fixed, ordered catalogue the extractor walks.

Each entry names a symptom, the keyword phrases that signal it and how its
value is derived (presence, 0-10 score, or category). Category order is an
explicit sequence of (category, keywords) pairs; the first declared category
that matches wins.

The default taxonomy is built and validated once at import time. A malformed
table raises ``TaxonomyError`` before any transcript is processed.
"""
from __future__ import annotations

import enum
from dataclasses import dataclass, field

__all__ = [
    "ExtractionMode",
    "SymptomPattern",
    "Taxonomy",
    "TaxonomyError",
    "build_taxonomy",
    "SYMPTOM_PATTERNS",
    "ACTIVITY_KEYWORDS",
    "TRIGGER_KEYWORDS",
    "DEFAULT_TAXONOMY",
]


class TaxonomyError(ValueError):
    """Raised when a taxonomy table is malformed."""


class ExtractionMode(str, enum.Enum):
    BOOLEAN = "boolean"
    NUMERIC = "numeric"
    CATEGORICAL = "categorical"


Categories = tuple[tuple[str, tuple[str, ...]], ...]


@dataclass(frozen=True)
class SymptomPattern:
    name: str
    keywords: tuple[str, ...]
    mode: ExtractionMode
    categories: Categories = ()

    @property
    def primary_keyword(self) -> str:
        return self.keywords[0]


@dataclass(frozen=True)
class Taxonomy:
    symptoms: tuple[SymptomPattern, ...]
    activities: tuple[str, ...] = field(default=())
    triggers: tuple[str, ...] = field(default=())

    def names(self) -> tuple[str, ...]:
        return tuple(p.name for p in self.symptoms)


# ═══════════════════════════════════════════════════════════════
# Default catalogue
# ═══════════════════════════════════════════════════════════════

SYMPTOM_PATTERNS: tuple[SymptomPattern, ...] = (
    SymptomPattern(
        name="hand_grip",
        keywords=("grip", "hand"),
        mode=ExtractionMode.CATEGORICAL,
        categories=(
            ("bad", ("bad", "terrible", "poor", "weak", "awful", "horrible")),
            ("moderate", ("moderate", "okay", "fair", "so-so", "medium")),
            ("good", ("good", "strong", "great", "fine", "normal")),
        ),
    ),
    SymptomPattern(
        name="pain_level",
        keywords=("pain", "hurt", "ache", "sore"),
        mode=ExtractionMode.NUMERIC,
    ),
    SymptomPattern(
        name="energy",
        keywords=("energy", "tired", "exhausted", "fatigue", "drained", "energetic"),
        mode=ExtractionMode.CATEGORICAL,
        categories=(
            ("low", ("tired", "exhausted", "fatigue", "drained", "low energy", "no energy")),
            ("moderate", ("moderate energy", "okay energy", "some energy")),
            ("high", ("energetic", "high energy", "good energy", "lots of energy", "rested")),
        ),
    ),
    SymptomPattern(
        name="raynauds_event",
        keywords=("raynaud", "fingers turned white", "fingers went white", "fingers turned blue", "white fingers"),
        mode=ExtractionMode.BOOLEAN,
    ),
    SymptomPattern(
        name="brain_fog",
        keywords=("brain fog", "foggy", "can't concentrate", "cannot concentrate"),
        mode=ExtractionMode.BOOLEAN,
    ),
    SymptomPattern(
        name="headache",
        keywords=("headache", "migraine"),
        mode=ExtractionMode.BOOLEAN,
    ),
    SymptomPattern(
        name="tingling",
        keywords=("tingling", "pins and needles", "numbness"),
        mode=ExtractionMode.BOOLEAN,
    ),
    SymptomPattern(
        name="neck_stiffness",
        keywords=("stiff neck", "neck stiffness", "neck is stiff"),
        mode=ExtractionMode.BOOLEAN,
    ),
    SymptomPattern(
        name="nausea",
        keywords=("nausea", "nauseous", "queasy"),
        mode=ExtractionMode.BOOLEAN,
    ),
    SymptomPattern(
        name="stiffness_level",
        keywords=("stiffness", "stiff"),
        mode=ExtractionMode.NUMERIC,
    ),
    SymptomPattern(
        name="sleep_quality",
        keywords=("sleep", "slept"),
        mode=ExtractionMode.CATEGORICAL,
        categories=(
            ("bad", ("badly", "poorly", "terrible", "restless", "barely")),
            ("moderate", ("okay", "alright", "on and off")),
            ("good", ("well", "soundly", "great", "good")),
        ),
    ),
    SymptomPattern(
        name="mood",
        keywords=("mood", "anxious", "depressed", "irritable", "happy", "cheerful"),
        mode=ExtractionMode.CATEGORICAL,
        categories=(
            ("bad", ("anxious", "depressed", "irritable", "low mood", "bad mood")),
            ("moderate", ("neutral", "okay mood", "so-so")),
            ("good", ("happy", "cheerful", "good mood", "great mood")),
        ),
    ),
)

# "walking" and "walk" both listed; a transcript containing "walking" yields both.
ACTIVITY_KEYWORDS: tuple[str, ...] = (
    "walking",
    "walk",
    "exercise",
    "yoga",
    "swimming",
    "stretching",
    "working",
    "typing",
    "cooking",
    "cleaning",
    "gardening",
    "driving",
    "shopping",
    "resting",
)

TRIGGER_KEYWORDS: tuple[str, ...] = (
    "cold",
    "stress",
    "heat",
    "weather",
    "rainy",
    "lack of sleep",
    "screen time",
    "caffeine",
    "alcohol",
    "dehydration",
    "overexertion",
)


# ═══════════════════════════════════════════════════════════════
# Validation
# ═══════════════════════════════════════════════════════════════

def _check_keywords(owner: str, keywords: tuple[str, ...]) -> None:
    if not keywords:
        raise TaxonomyError(f"{owner}: keyword list must not be empty")
    for kw in keywords:
        if not isinstance(kw, str) or not kw.strip():
            raise TaxonomyError(f"{owner}: blank keyword {kw!r}")


def _check_pattern(pattern: SymptomPattern) -> None:
    _check_keywords(f"symptom {pattern.name!r}", pattern.keywords)

    if pattern.mode is ExtractionMode.CATEGORICAL:
        if not pattern.categories:
            raise TaxonomyError(f"symptom {pattern.name!r}: categorical entry needs at least one category")
        seen: set[str] = set()
        for category, keywords in pattern.categories:
            if category in seen:
                raise TaxonomyError(f"symptom {pattern.name!r}: duplicate category {category!r}")
            seen.add(category)
            _check_keywords(f"symptom {pattern.name!r} category {category!r}", keywords)
    elif pattern.categories:
        raise TaxonomyError(f"symptom {pattern.name!r}: only categorical entries carry categories")


def _check_flat_list(owner: str, keywords: tuple[str, ...]) -> None:
    for kw in keywords:
        if not isinstance(kw, str) or not kw.strip():
            raise TaxonomyError(f"{owner}: blank keyword {kw!r}")
    if len(set(keywords)) != len(keywords):
        raise TaxonomyError(f"{owner}: duplicate keywords")


def build_taxonomy(
    symptoms: tuple[SymptomPattern, ...] | list[SymptomPattern],
    activities: tuple[str, ...] | list[str] = (),
    triggers: tuple[str, ...] | list[str] = (),
) -> Taxonomy:
    """Validate and freeze a taxonomy table.

    Raises ``TaxonomyError`` on the first problem found; never called per
    request.
    """
    names: set[str] = set()
    for pattern in symptoms:
        if pattern.name in names:
            raise TaxonomyError(f"duplicate symptom name {pattern.name!r}")
        names.add(pattern.name)
        _check_pattern(pattern)

    activities = tuple(activities)
    triggers = tuple(triggers)
    _check_flat_list("activities", activities)
    _check_flat_list("triggers", triggers)

    return Taxonomy(symptoms=tuple(symptoms), activities=activities, triggers=triggers)


DEFAULT_TAXONOMY: Taxonomy = build_taxonomy(SYMPTOM_PATTERNS, ACTIVITY_KEYWORDS, TRIGGER_KEYWORDS)
