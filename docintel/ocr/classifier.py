"""Keyword classification and script-based language detection.

Both heuristics run over OCR output. Classification is a first-match-wins
chain; the order of ``_RULES`` is significant and must not be rearranged,
since a deed that mentions a survey plan would otherwise change type.
"""

import re
from collections.abc import Callable

from docintel.ocr.models import DocumentType

DEFAULT_LANGUAGE = "en"

_LANGUAGE_PATTERNS: list[tuple[str, re.Pattern[str]]] = [
    ("si", re.compile("[\u0D80-\u0DFF]")),  # Sinhala
    ("ta", re.compile("[\u0B80-\u0BFF]")),  # Tamil
]

_RULES: list[tuple[DocumentType, Callable[[str], bool]]] = [
    (
        DocumentType.TRANSFER_DEED,
        lambda t: "DEED OF TRANSFER" in t or "TRANSFER DEED" in t,
    ),
    (
        DocumentType.SURVEY_PLAN,
        lambda t: "PLAN" in t and "SURVEY" in t,
    ),
    (
        DocumentType.TITLE_CERTIFICATE,
        lambda t: "TITLE" in t and ("DEED" in t or "CERTIFICATE" in t),
    ),
]


def classify_document(text: str) -> DocumentType:
    """Return the first document type whose keyword rule matches *text*."""
    upper = text.upper()
    for document_type, matches in _RULES:
        if matches(upper):
            return document_type
    return DocumentType.GENERIC


def detect_language(text: str) -> str:
    """Tag the text by the first regional script found, else the default."""
    for language, pattern in _LANGUAGE_PATTERNS:
        if pattern.search(text):
            return language
    return DEFAULT_LANGUAGE
