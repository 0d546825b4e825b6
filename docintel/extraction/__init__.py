from docintel.extraction.base import BaseFieldExtractor
from docintel.extraction.extractor import FieldExtractor
from docintel.extraction.factory import ExtractionFactory
from docintel.extraction.models import (
    NOT_SPECIFIED,
    ExtractionFailure,
    FailureKind,
    FieldExtraction,
    ScoredExtraction,
)
from docintel.extraction.scoring import ConfidenceScorer

__all__ = [
    "NOT_SPECIFIED",
    "BaseFieldExtractor",
    "ConfidenceScorer",
    "ExtractionFactory",
    "ExtractionFailure",
    "FailureKind",
    "FieldExtraction",
    "FieldExtractor",
    "ScoredExtraction",
]
