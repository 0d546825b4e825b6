import pymupdf

from docintel.ocr.base import BaseOcrEngine
from docintel.ocr.exceptions import OcrError
from docintel.ocr.models import RecognizedText


class PyMuPdfAdapter(BaseOcrEngine):
    """Reads the embedded text layer of a PDF using PyMuPDF."""

    name = "pymupdf"

    def recognize(self, content: bytes) -> RecognizedText:
        try:
            with pymupdf.open(stream=content, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                pages = [page.get_text() for page in doc]
        except Exception as exc:
            raise OcrError(f"pymupdf extraction failed: {exc}") from exc
        text = "\n".join(pages).strip()
        return RecognizedText(text=text, confidence=1.0 if text else 0.0)
