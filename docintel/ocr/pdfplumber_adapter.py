import io

import pdfplumber

from docintel.ocr.base import BaseOcrEngine
from docintel.ocr.exceptions import OcrError
from docintel.ocr.models import RecognizedText


class PdfPlumberAdapter(BaseOcrEngine):
    """Reads the embedded text layer of a PDF using pdfplumber."""

    name = "pdfplumber"

    def recognize(self, content: bytes) -> RecognizedText:
        try:
            with pdfplumber.open(io.BytesIO(content)) as pdf:
                pages = [page.extract_text() or "" for page in pdf.pages]
        except Exception as exc:
            raise OcrError(f"pdfplumber extraction failed: {exc}") from exc
        text = "\n".join(pages).strip()
        return RecognizedText(text=text, confidence=1.0 if text else 0.0)
