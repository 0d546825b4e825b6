from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


class DocumentType(str, Enum):
    """Fixed set of document classifications; selects the field template."""

    TRANSFER_DEED = "transfer_deed"
    SURVEY_PLAN = "survey_plan"
    TITLE_CERTIFICATE = "title_certificate"
    GENERIC = "generic"


@dataclass(frozen=True)
class RecognizedText:
    """Raw engine output before classification."""

    text: str
    confidence: float = 0.0


@dataclass(frozen=True)
class ExtractionResult:
    """Output of the text extraction step for one document."""

    document_id: str
    file_name: str
    text: str
    document_type: DocumentType
    language: str
    ocr_success: bool
    ocr_error: str | None = None
    ocr_confidence: float = 0.0
    extracted_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
