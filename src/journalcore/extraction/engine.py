"""
src/journalcore/extraction/engine.py

Transcript -> structured symptom extraction.

Single pass over one transcript:
  1) each taxonomy entry in order: skip unless a keyword matches, then
     dispatch on mode (numeric / categorical / boolean); failures are omitted
  2) scan activity keywords
  3) scan trigger keywords
  4) notes = trimmed transcript

Output: ExtractionResult { symptoms, activities, triggers, notes }

The extractor holds only the frozen taxonomy and window, so a single instance
is shared across threads and requests.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping

from journalcore.extraction.extractors import (
    DEFAULT_WINDOW,
    NumericWindow,
    extract_numeric,
    resolve_boolean,
    resolve_category,
    scan,
)
from journalcore.extraction.matcher import contains
from journalcore.extraction.taxonomy import (
    DEFAULT_TAXONOMY,
    ExtractionMode,
    SymptomPattern,
    Taxonomy,
)
from journalcore.extraction.values import (
    Category,
    Presence,
    Score,
    SymptomValue,
    normalized_severity,
    plain_value,
)

_log = logging.getLogger("journalcore.extraction.engine")

__all__ = ["ExtractionResult", "SymptomExtractor", "extract"]


@dataclass(frozen=True)
class ExtractionResult:
    symptoms: Mapping[str, SymptomValue] = field(default_factory=lambda: MappingProxyType({}))
    activities: tuple[str, ...] = ()
    triggers: tuple[str, ...] = ()
    notes: str = ""

    def severities(self) -> dict[str, int]:
        """Symptom name -> severity on the stored 1..10 scale."""
        return {name: normalized_severity(v) for name, v in self.symptoms.items()}

    def as_dict(self) -> dict[str, Any]:
        return {
            "symptoms": {name: plain_value(v) for name, v in self.symptoms.items()},
            "activities": list(self.activities),
            "triggers": list(self.triggers),
            "notes": self.notes,
        }


class SymptomExtractor:
    def __init__(self, taxonomy: Taxonomy = DEFAULT_TAXONOMY, window: NumericWindow = DEFAULT_WINDOW) -> None:
        self.taxonomy = taxonomy
        self.window = window

    def _value_for(self, transcript: str, pattern: SymptomPattern) -> SymptomValue | None:
        if pattern.mode is ExtractionMode.NUMERIC:
            number = extract_numeric(transcript, pattern.primary_keyword, self.window)
            return Score(number) if number is not None else None

        if pattern.mode is ExtractionMode.CATEGORICAL:
            category = resolve_category(transcript, pattern.categories)
            return Category(category) if category is not None else None

        return Presence(True) if resolve_boolean(transcript, pattern.keywords) else None

    def extract(self, transcript: str | None) -> ExtractionResult:
        text = transcript or ""

        symptoms: dict[str, SymptomValue] = {}
        for pattern in self.taxonomy.symptoms:
            if not contains(text, pattern.keywords):
                continue
            value = self._value_for(text, pattern)
            if value is not None:
                symptoms[pattern.name] = value

        result = ExtractionResult(
            symptoms=MappingProxyType(symptoms),
            activities=scan(text, self.taxonomy.activities),
            triggers=scan(text, self.taxonomy.triggers),
            notes=text.strip(),
        )

        _log.debug(
            "extraction complete chars=%d symptoms=%d activities=%d triggers=%d",
            len(text),
            len(result.symptoms),
            len(result.activities),
            len(result.triggers),
        )
        return result


_default_extractor = SymptomExtractor()


def extract(transcript: str | None) -> ExtractionResult:
    return _default_extractor.extract(transcript)
