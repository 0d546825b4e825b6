from docintel.ocr.base import BaseOcrEngine
from docintel.ocr.factory import OcrEngineFactory
from docintel.ocr.models import DocumentType, ExtractionResult
from docintel.ocr.text_extractor import TextExtractor

__all__ = [
    "BaseOcrEngine",
    "DocumentType",
    "ExtractionResult",
    "OcrEngineFactory",
    "TextExtractor",
]
