from journalcore.extraction.confidence import ConfidenceWeights, score
from journalcore.extraction.engine import ExtractionResult, SymptomExtractor, extract
from journalcore.extraction.taxonomy import DEFAULT_TAXONOMY, TaxonomyError

__all__ = [
    "ConfidenceWeights",
    "DEFAULT_TAXONOMY",
    "ExtractionResult",
    "SymptomExtractor",
    "TaxonomyError",
    "extract",
    "score",
]
