from docintel.processor.models import BatchOutcome, BatchProgress, RawDocument
from docintel.processor.processor import BatchProcessor
from docintel.processor.service import DocumentIntelligenceService, build_service

__all__ = [
    "BatchOutcome",
    "BatchProcessor",
    "BatchProgress",
    "DocumentIntelligenceService",
    "RawDocument",
    "build_service",
]
