"""
tests/test_taxonomy.py

Taxonomy construction must fail fast on malformed tables; the default table
must be well formed and immutable.
"""
from __future__ import annotations

import dataclasses

import pytest

from journalcore.extraction.taxonomy import (
    ACTIVITY_KEYWORDS,
    DEFAULT_TAXONOMY,
    TRIGGER_KEYWORDS,
    ExtractionMode,
    SymptomPattern,
    TaxonomyError,
    build_taxonomy,
)


def _bool(name: str, *keywords: str) -> SymptomPattern:
    return SymptomPattern(name=name, keywords=keywords, mode=ExtractionMode.BOOLEAN)


def test_default_taxonomy_contains_core_entries():
    names = DEFAULT_TAXONOMY.names()
    for expected in ("hand_grip", "pain_level", "energy", "raynauds_event"):
        assert expected in names
    assert len(set(names)) == len(names)


def test_default_taxonomy_modes():
    by_name = {p.name: p for p in DEFAULT_TAXONOMY.symptoms}
    assert by_name["pain_level"].mode is ExtractionMode.NUMERIC
    assert by_name["pain_level"].primary_keyword == "pain"
    assert by_name["raynauds_event"].mode is ExtractionMode.BOOLEAN
    grip = by_name["hand_grip"]
    assert grip.mode is ExtractionMode.CATEGORICAL
    assert [c for c, _ in grip.categories] == ["bad", "moderate", "good"]


def test_default_flat_lists():
    assert DEFAULT_TAXONOMY.activities == ACTIVITY_KEYWORDS
    assert DEFAULT_TAXONOMY.triggers == TRIGGER_KEYWORDS
    assert ACTIVITY_KEYWORDS.index("walking") < ACTIVITY_KEYWORDS.index("walk")


def test_no_trigger_hides_inside_a_symptom_keyword():
    symptom_keywords = []
    for p in DEFAULT_TAXONOMY.symptoms:
        symptom_keywords.extend(p.keywords)
        for _, kws in p.categories:
            symptom_keywords.extend(kws)

    clashes = [
        (trigger, kw)
        for trigger in TRIGGER_KEYWORDS
        for kw in symptom_keywords
        if trigger.lower() in kw.lower()
    ]
    assert clashes == [], f"trigger keywords fire on symptom phrases: {clashes}"


def test_taxonomy_is_frozen():
    with pytest.raises(dataclasses.FrozenInstanceError):
        DEFAULT_TAXONOMY.symptoms = ()  # type: ignore[misc]
    with pytest.raises(dataclasses.FrozenInstanceError):
        DEFAULT_TAXONOMY.symptoms[0].name = "other"  # type: ignore[misc]


def test_empty_keywords_rejected():
    with pytest.raises(TaxonomyError, match="must not be empty"):
        build_taxonomy([_bool("cough")])


def test_blank_keyword_rejected():
    with pytest.raises(TaxonomyError, match="blank keyword"):
        build_taxonomy([_bool("cough", "cough", "  ")])


def test_duplicate_symptom_name_rejected():
    with pytest.raises(TaxonomyError, match="duplicate symptom name"):
        build_taxonomy([_bool("cough", "cough"), _bool("cough", "hack")])


def test_categorical_without_categories_rejected():
    pattern = SymptomPattern(name="mood", keywords=("mood",), mode=ExtractionMode.CATEGORICAL)
    with pytest.raises(TaxonomyError, match="at least one category"):
        build_taxonomy([pattern])


def test_category_with_empty_keywords_rejected():
    pattern = SymptomPattern(
        name="mood",
        keywords=("mood",),
        mode=ExtractionMode.CATEGORICAL,
        categories=(("bad", ("sad",)), ("good", ())),
    )
    with pytest.raises(TaxonomyError, match="category 'good'"):
        build_taxonomy([pattern])


def test_duplicate_category_rejected():
    pattern = SymptomPattern(
        name="mood",
        keywords=("mood",),
        mode=ExtractionMode.CATEGORICAL,
        categories=(("bad", ("sad",)), ("bad", ("low",))),
    )
    with pytest.raises(TaxonomyError, match="duplicate category"):
        build_taxonomy([pattern])


def test_non_categorical_with_categories_rejected():
    pattern = SymptomPattern(
        name="pain",
        keywords=("pain",),
        mode=ExtractionMode.NUMERIC,
        categories=(("bad", ("bad",)),),
    )
    with pytest.raises(TaxonomyError, match="only categorical"):
        build_taxonomy([pattern])


def test_duplicate_activity_rejected():
    with pytest.raises(TaxonomyError, match="activities"):
        build_taxonomy([_bool("cough", "cough")], activities=["yoga", "yoga"])


def test_blank_trigger_rejected():
    with pytest.raises(TaxonomyError, match="triggers"):
        build_taxonomy([_bool("cough", "cough")], triggers=["cold", ""])


def test_taxonomy_error_is_value_error():
    assert issubclass(TaxonomyError, ValueError)
