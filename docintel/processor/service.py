import threading
from collections.abc import Callable, Sequence

from docintel.config.settings import Settings
from docintel.extraction.factory import ExtractionFactory
from docintel.extraction.scoring import ConfidenceScorer
from docintel.fusion.engine import FusionEngine
from docintel.health import ConnectionCheck
from docintel.ocr.factory import OcrEngineFactory
from docintel.processor.models import BatchOutcome, RawDocument
from docintel.processor.processor import BatchProcessor, ProgressCallback
from docintel.processor.steps import (
    BuildResultStep,
    ExtractFieldsStep,
    ExtractTextStep,
    ScoreStep,
)


class DocumentIntelligenceService:
    """Caller-facing entry point: process a batch, then fuse it.

    Holds no per-batch state; one instance may serve concurrent batches.
    Persisting the outcome is the caller's job.
    """

    def __init__(
        self,
        processor: BatchProcessor,
        fusion_engine: FusionEngine,
        health_checks: Sequence[Callable[[], ConnectionCheck]] = (),
    ) -> None:
        self._processor = processor
        self._fusion_engine = fusion_engine
        self._health_checks = list(health_checks)

    def process_and_fuse(
        self,
        documents: Sequence[RawDocument],
        *,
        progress: ProgressCallback | None = None,
        cancel_event: threading.Event | None = None,
    ) -> BatchOutcome:
        results = self._processor.process_batch(
            documents,
            progress=progress,
            cancel_event=cancel_event,
        )
        return BatchOutcome(results=results, fused=self._fusion_engine.fuse(results))

    def check_connections(self) -> list[ConnectionCheck]:
        return [check() for check in self._health_checks]


def build_service(settings: Settings) -> DocumentIntelligenceService:
    """Build the service with all adapters configured from settings."""
    text_extractor = OcrEngineFactory.create(settings)
    field_extractor = ExtractionFactory.create(settings)
    processor = BatchProcessor(
        [
            ExtractTextStep(text_extractor),
            ExtractFieldsStep(field_extractor),
            ScoreStep(ConfidenceScorer()),
            BuildResultStep(),
        ],
        pacing_seconds=settings.batch_pacing_seconds,
    )
    return DocumentIntelligenceService(
        processor=processor,
        fusion_engine=FusionEngine(),
        health_checks=[text_extractor.check_connection, field_extractor.check_connection],
    )
