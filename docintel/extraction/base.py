from abc import ABC, abstractmethod

from docintel.extraction.models import FieldExtraction
from docintel.health import ConnectionCheck
from docintel.ocr.models import DocumentType


class BaseFieldExtractor(ABC):
    """Contract for all structured field extraction adapters."""

    @abstractmethod
    def extract_fields(self, text: str, document_type: DocumentType) -> FieldExtraction:
        """Derive the document type's field mapping from recognized text.

        Args:
            text: Text produced by the OCR step.
            document_type: Selects the instruction and field template.

        Returns:
            FieldExtraction with template-shaped fields and model metadata on
            success, or empty fields and a failure on any runtime problem.
            Runtime failures are never raised.
        """

    @abstractmethod
    def check_connection(self) -> ConnectionCheck:
        """Probe the backing model service."""
