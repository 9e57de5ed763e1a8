"""
src/journalcore/extraction/extractors.py

Per-entry value extractors.

    extract_numeric   integer 0..10 near the primary keyword (windowed)
    resolve_category  first declared category whose keywords appear
    resolve_boolean   presence of any keyword
    scan              canonical keywords found, in list order

None of these raise on string input; "no confident value" is ``None``.
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Iterable

from journalcore.extraction.matcher import contains, find_first
from journalcore.extraction.taxonomy import Categories

_log = logging.getLogger("journalcore.extraction.extractors")

__all__ = [
    "NumericWindow",
    "SCORE_MIN",
    "SCORE_MAX",
    "extract_numeric",
    "resolve_category",
    "resolve_boolean",
    "scan",
]

SCORE_MIN = 0
SCORE_MAX = 10

# Tried in order: "7 out of 10" / "5/10", then a bare integer with an optional
# hedge word. The first pattern that matches decides; its value must be 0..10.
_OUT_OF_TEN = re.compile(r"(\d+)\s*(?:out of 10|/10)", re.I)
_HEDGED_INTEGER = re.compile(
    r"(?:(?:level|around|about|roughly)\s+)?(\d+)(?:\s*(?:out of 10|/10))?",
    re.I,
)
NUMERIC_PATTERNS: tuple[re.Pattern, ...] = (_OUT_OF_TEN, _HEDGED_INTEGER)


@dataclass(frozen=True)
class NumericWindow:
    """Characters searched before the keyword and after its end."""

    before: int = 30
    after: int = 40

    def bounds(self, start: int, keyword_len: int, text_len: int) -> tuple[int, int]:
        lo = max(0, start - self.before)
        hi = min(text_len, start + keyword_len + self.after)
        return lo, hi


DEFAULT_WINDOW = NumericWindow()


def extract_numeric(
    transcript: str,
    first_keyword: str,
    window: NumericWindow = DEFAULT_WINDOW,
) -> int | None:
    if not transcript or not first_keyword:
        return None

    # Window on the lowered text so indices line up with find_first.
    low = transcript.lower()
    idx = find_first(low, first_keyword)
    if idx < 0:
        return None

    lo, hi = window.bounds(idx, len(first_keyword.lower()), len(low))
    segment = low[lo:hi]

    for pattern in NUMERIC_PATTERNS:
        m = pattern.search(segment)
        if m is None:
            continue
        value = int(m.group(1), 10)
        if SCORE_MIN <= value <= SCORE_MAX:
            return value
        _log.debug("numeric value %d near %r out of range", value, first_keyword)
        return None

    return None


def resolve_category(transcript: str, categories: Categories) -> str | None:
    for category, keywords in categories:
        if contains(transcript, keywords):
            return category
    return None


def resolve_boolean(transcript: str, keywords: Iterable[str]) -> bool | None:
    return True if contains(transcript, keywords) else None


def scan(transcript: str, keywords: Iterable[str]) -> tuple[str, ...]:
    if not transcript:
        return ()
    low = transcript.lower()
    return tuple(kw for kw in keywords if kw and kw.lower() in low)
