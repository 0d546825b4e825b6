from abc import ABC, abstractmethod
from dataclasses import dataclass

from docintel.extraction.models import FieldExtraction, ScoredExtraction
from docintel.ocr.models import ExtractionResult
from docintel.processor.models import RawDocument


@dataclass(slots=True)
class DocumentContext:
    document: RawDocument
    extraction: ExtractionResult | None = None
    field_extraction: FieldExtraction | None = None
    confidence: int = 0
    result: ScoredExtraction | None = None


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: DocumentContext) -> DocumentContext:
        raise NotImplementedError
