from __future__ import annotations

from functools import lru_cache

from journalcore.config import get_settings
from journalcore.extraction.extractors import NumericWindow
from journalcore.extraction.engine import SymptomExtractor
from journalcore.extraction.taxonomy import DEFAULT_TAXONOMY


@lru_cache
def get_extractor() -> SymptomExtractor:
    """Process-wide extractor built from settings; safe to share across requests."""
    settings = get_settings()
    window = NumericWindow(
        before=settings.NUMERIC_WINDOW_BEFORE,
        after=settings.NUMERIC_WINDOW_AFTER,
    )
    return SymptomExtractor(taxonomy=DEFAULT_TAXONOMY, window=window)
