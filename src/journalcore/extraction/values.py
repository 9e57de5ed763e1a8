"""
src/journalcore/extraction/values.py

Typed symptom values.

Every extracted symptom carries exactly one of:
    Presence   boolean entry matched (always True; absence omits the key)
    Score      numeric entry, integer 0..10
    Category   categorical entry, the resolved category name

``normalized_severity`` folds any of them onto the 1..10 severity scale used
by stored check-ins.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Union

__all__ = [
    "Presence",
    "Score",
    "Category",
    "SymptomValue",
    "plain_value",
    "normalized_severity",
    "CATEGORY_SEVERITY",
]


@dataclass(frozen=True)
class Presence:
    value: bool = True


@dataclass(frozen=True)
class Score:
    value: int


@dataclass(frozen=True)
class Category:
    value: str


SymptomValue = Union[Presence, Score, Category]


def plain_value(value: SymptomValue) -> bool | int | str:
    """JSON-ready representation: bool, int or category name."""
    return value.value


# Category name -> severity on the 1..10 scale (1 = best, 10 = worst)
CATEGORY_SEVERITY: dict[str, int] = {
    # low severity
    "good": 1,
    "great": 1,
    "excellent": 1,
    "strong": 1,
    "fine": 2,
    "normal": 2,
    "high": 2,
    "rested": 2,
    # medium
    "light": 4,
    "moderate": 5,
    "okay": 5,
    "fair": 5,
    "medium": 5,
    # high severity
    "poor": 8,
    "weak": 8,
    "tired": 8,
    "low": 9,
    "exhausted": 9,
    "bad": 10,
    "terrible": 10,
    "awful": 10,
}

PRESENCE_SEVERITY = 7
DEFAULT_SEVERITY = 5
MIN_SEVERITY = 1
MAX_SEVERITY = 10


def normalized_severity(value: SymptomValue) -> int:
    if isinstance(value, Presence):
        return PRESENCE_SEVERITY if value.value else MIN_SEVERITY
    if isinstance(value, Score):
        return min(MAX_SEVERITY, max(MIN_SEVERITY, value.value))
    if isinstance(value, Category):
        return CATEGORY_SEVERITY.get(value.value.lower(), DEFAULT_SEVERITY)
    raise TypeError(f"unsupported symptom value: {value!r}")
