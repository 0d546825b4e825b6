class OcrError(Exception):
    """Raised when an OCR or PDF text engine fails to read a document."""
