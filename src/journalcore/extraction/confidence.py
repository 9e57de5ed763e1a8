"""
src/journalcore/extraction/confidence.py

Extraction confidence score (0-100).

    symptoms    15 points each, capped at 60
    activities  10 points each, capped at 20
    triggers    10 points each, capped at 20
    total       capped at 100, floored at 0

Each component is capped before summation and the total is clamped again, so
callers that change weights still get a value in [0, 100].
"""
from __future__ import annotations

from dataclasses import dataclass

from journalcore.extraction.engine import ExtractionResult

__all__ = ["ConfidenceWeights", "DEFAULT_WEIGHTS", "score"]

MAX_CONFIDENCE = 100


@dataclass(frozen=True)
class ConfidenceWeights:
    per_symptom: int = 15
    symptom_cap: int = 60
    per_activity: int = 10
    activity_cap: int = 20
    per_trigger: int = 10
    trigger_cap: int = 20


DEFAULT_WEIGHTS = ConfidenceWeights()


def score(result: ExtractionResult, weights: ConfidenceWeights = DEFAULT_WEIGHTS) -> int:
    symptom_score = min(len(result.symptoms) * weights.per_symptom, weights.symptom_cap)
    activity_score = min(len(result.activities) * weights.per_activity, weights.activity_cap)
    trigger_score = min(len(result.triggers) * weights.per_trigger, weights.trigger_cap)

    total = min(symptom_score + activity_score + trigger_score, MAX_CONFIDENCE)
    return max(total, 0)
