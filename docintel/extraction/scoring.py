"""Completeness-based confidence scoring.

The score measures how many template fields were filled, not whether the
values are correct. A document whose every field is confidently wrong
scores 100.
"""

from collections.abc import Mapping
from decimal import ROUND_HALF_UP, Decimal

from docintel.extraction.templates import get_template
from docintel.extraction.validator import is_filled
from docintel.ocr.models import DocumentType


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    return int(Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


class ConfidenceScorer:
    """Scores one extraction as the filled share of its template, 0..100."""

    def score(self, fields: Mapping[str, str], document_type: DocumentType) -> int:
        names = get_template(document_type).field_names
        total = len(names)
        if total == 0:
            return 0
        filled = sum(1 for name in names if is_filled(fields.get(name)))
        return round_half_up(100 * filled / total)
