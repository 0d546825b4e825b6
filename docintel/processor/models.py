import base64
import binascii
import re
from dataclasses import dataclass, field

from docintel.extraction.models import ScoredExtraction
from docintel.fusion.models import FusedRecord
from docintel.processor.exceptions import InvalidDocumentError

DEFAULT_MEDIA_TYPE = "application/octet-stream"

_DATA_URL_RE = re.compile(r"^data:(?P<media_type>[^;,]*)(?:;[^;,]*)*;base64,", re.IGNORECASE)


@dataclass(frozen=True)
class RawDocument:
    """A submitted document. Owned by the batch call that receives it."""

    document_id: str
    file_name: str
    content: bytes = field(repr=False)
    media_type: str

    @property
    def size_bytes(self) -> int:
        return len(self.content)

    @classmethod
    def from_base64(
        cls,
        *,
        document_id: str,
        file_name: str,
        data: str,
        media_type: str | None = None,
    ) -> "RawDocument":
        """Build a document from base64 text, with or without a ``data:`` URL prefix.

        Raises:
            InvalidDocumentError: if the payload is not valid base64.
        """
        payload = data.strip()
        match = _DATA_URL_RE.match(payload)
        if match:
            payload = payload[match.end():]
            media_type = media_type or match.group("media_type") or None
        try:
            content = base64.b64decode(payload, validate=True)
        except (binascii.Error, ValueError) as exc:
            raise InvalidDocumentError(f"Document {file_name} is not valid base64: {exc}") from exc
        return cls(
            document_id=document_id,
            file_name=file_name,
            content=content,
            media_type=media_type or DEFAULT_MEDIA_TYPE,
        )


@dataclass(frozen=True)
class BatchProgress:
    """Emitted before each document is processed. ``index`` is 1-based."""

    index: int
    total: int
    file_name: str


@dataclass(frozen=True)
class BatchOutcome:
    """Per-document results in submission order plus the fused record."""

    results: list[ScoredExtraction]
    fused: FusedRecord
