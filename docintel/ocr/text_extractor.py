import base64

from docintel.health import ConnectionCheck
from docintel.logging.logger import Log
from docintel.ocr.base import BaseOcrEngine
from docintel.ocr.classifier import DEFAULT_LANGUAGE, classify_document, detect_language
from docintel.ocr.exceptions import OcrError
from docintel.ocr.models import DocumentType, ExtractionResult

PDF_MEDIA_TYPE = "application/pdf"
NO_TEXT_DETECTED = "No text detected in the document"

# 1x1 white PNG used as a connectivity probe.
_PROBE_IMAGE = base64.b64decode(
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mP8/5+hHgAHggJ/PchI7wAAAABJRU5ErkJggg=="
)


class TextExtractor:
    """Turns a raw document payload into text, a document type and a language.

    PDFs are routed to the PDF engine, everything else to the image engine.
    Engine failures are returned as data (``ocr_success=False``) and never
    raised, so a batch can carry on past a bad scan.
    """

    def __init__(self, *, image_engine: BaseOcrEngine, pdf_engine: BaseOcrEngine) -> None:
        self._image_engine = image_engine
        self._pdf_engine = pdf_engine

    def extract_text(
        self,
        content: bytes,
        media_type: str,
        *,
        document_id: str = "",
        file_name: str = "",
    ) -> ExtractionResult:
        engine = self._engine_for(media_type)
        Log.info(f"Extracting text from {file_name or document_id} with {engine.name}")
        try:
            recognized = engine.recognize(content)
        except OcrError as exc:
            Log.error(f"OCR failed for {file_name or document_id}: {exc}")
            return self._failed(document_id, file_name, str(exc))

        if not recognized.text.strip():
            Log.warning(f"No text found in {file_name or document_id}")
            return self._failed(document_id, file_name, NO_TEXT_DETECTED)

        result = ExtractionResult(
            document_id=document_id,
            file_name=file_name,
            text=recognized.text,
            document_type=classify_document(recognized.text),
            language=detect_language(recognized.text),
            ocr_success=True,
            ocr_confidence=recognized.confidence,
        )
        Log.info(
            f"Extracted {len(result.text)} chars from {file_name or document_id} "
            f"(type={result.document_type.value}, language={result.language})"
        )
        return result

    def check_connection(self) -> ConnectionCheck:
        """Probe the image engine with a blank image."""
        service = self._image_engine.name
        try:
            self._image_engine.recognize(_PROBE_IMAGE)
        except OcrError as exc:
            return ConnectionCheck(
                service=service,
                success=False,
                message=f"{service} connection failed",
                error=str(exc),
            )
        return ConnectionCheck(service=service, success=True, message=f"{service} connection successful")

    def _engine_for(self, media_type: str) -> BaseOcrEngine:
        if media_type.lower().split(";")[0].strip() == PDF_MEDIA_TYPE:
            return self._pdf_engine
        return self._image_engine

    @staticmethod
    def _failed(document_id: str, file_name: str, error: str) -> ExtractionResult:
        return ExtractionResult(
            document_id=document_id,
            file_name=file_name,
            text="",
            document_type=DocumentType.GENERIC,
            language=DEFAULT_LANGUAGE,
            ocr_success=False,
            ocr_error=error,
        )
