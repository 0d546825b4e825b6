from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from docintel.ocr.models import DocumentType, ExtractionResult

NOT_SPECIFIED = "Not specified"


class FailureKind(str, Enum):
    """Per-document failure taxonomy. Failures are recorded, never raised."""

    OCR_FAILURE = "ocr_failure"
    INSUFFICIENT_TEXT = "insufficient_text"
    SERVICE_UNAVAILABLE = "service_unavailable"
    MALFORMED_RESPONSE = "malformed_response"
    REQUEST_REJECTED = "request_rejected"
    UNEXPECTED_ERROR = "unexpected_error"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class ExtractionFailure:
    kind: FailureKind
    message: str

    @property
    def retryable(self) -> bool:
        """Whether resubmitting the same document could plausibly succeed."""
        return self.kind is FailureKind.SERVICE_UNAVAILABLE


@dataclass(frozen=True)
class ExtractionMetadata:
    """Model/service bookkeeping for one completion call."""

    model: str
    tokens_used: int = 0
    processed_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


@dataclass(frozen=True)
class FieldExtraction:
    """Output of the structured extraction adapter, before scoring."""

    fields: dict[str, str] = field(default_factory=dict)
    metadata: ExtractionMetadata | None = None
    failure: ExtractionFailure | None = None

    @property
    def success(self) -> bool:
        return self.failure is None

    @classmethod
    def failed(cls, kind: FailureKind, message: str) -> "FieldExtraction":
        return cls(failure=ExtractionFailure(kind=kind, message=message))


@dataclass(frozen=True)
class ScoredExtraction:
    """Final per-document outcome: OCR result, fields, confidence and any failure."""

    extraction: ExtractionResult
    fields: dict[str, str] = field(default_factory=dict)
    confidence: int = 0
    metadata: ExtractionMetadata | None = None
    failure: ExtractionFailure | None = None

    def __post_init__(self) -> None:
        if not 0 <= self.confidence <= 100:
            raise ValueError(f"confidence must be within 0..100, got {self.confidence}")
        if self.failure is not None and (self.confidence or self.fields):
            raise ValueError("a failed extraction must carry confidence 0 and no fields")

    @property
    def document_id(self) -> str:
        return self.extraction.document_id

    @property
    def file_name(self) -> str:
        return self.extraction.file_name

    @property
    def document_type(self) -> DocumentType:
        return self.extraction.document_type

    @property
    def success(self) -> bool:
        return self.failure is None

    @classmethod
    def failed(
        cls,
        extraction: ExtractionResult,
        kind: FailureKind,
        message: str,
    ) -> "ScoredExtraction":
        return cls(
            extraction=extraction,
            failure=ExtractionFailure(kind=kind, message=message),
        )
