from collections.abc import Sequence

from docintel.extraction.models import NOT_SPECIFIED, ScoredExtraction
from docintel.extraction.scoring import round_half_up
from docintel.extraction.templates import get_template
from docintel.extraction.validator import is_filled
from docintel.fusion.models import FusedRecord
from docintel.logging.logger import Log
from docintel.ocr.models import DocumentType


class FusionEngine:
    """Merges a batch of scored extractions into one record.

    The highest-confidence success seeds the record; gaps are then filled
    from every success in batch order. Ties and back-fill both follow batch
    order, so the same input always yields the same record.
    """

    def fuse(self, results: Sequence[ScoredExtraction]) -> FusedRecord:
        successes = [result for result in results if result.success]
        average = self._average_confidence(results)

        primary = self._select_primary(successes)
        if primary is None:
            Log.warning(f"No successful extractions among {len(results)} documents")
            return FusedRecord(
                fields=dict.fromkeys(get_template(DocumentType.GENERIC).field_names, NOT_SPECIFIED),
                primary_source=None,
                average_confidence=average,
                source_documents=len(results),
            )

        fields = dict(primary.fields)
        provenance = {
            name: primary.document_id for name, value in fields.items() if is_filled(value)
        }

        for result in successes:
            for name, value in result.fields.items():
                if is_filled(fields.get(name)) or not is_filled(value):
                    continue
                fields[name] = value
                provenance[name] = result.document_id

        Log.info(
            f"Fused {len(successes)}/{len(results)} documents, primary={primary.document_id}, "
            f"average confidence {average}"
        )
        return FusedRecord(
            fields=fields,
            provenance=provenance,
            primary_source=primary.document_id,
            average_confidence=average,
            source_documents=len(results),
        )

    @staticmethod
    def _select_primary(successes: Sequence[ScoredExtraction]) -> ScoredExtraction | None:
        primary: ScoredExtraction | None = None
        for result in successes:
            if primary is None or result.confidence > primary.confidence:
                primary = result
        return primary

    @staticmethod
    def _average_confidence(results: Sequence[ScoredExtraction]) -> int:
        if not results:
            return 0
        return round_half_up(sum(result.confidence for result in results) / len(results))
