import threading
import time
from collections.abc import Callable, Sequence

from docintel.extraction.models import FailureKind, ScoredExtraction
from docintel.logging.logger import Log
from docintel.ocr.classifier import DEFAULT_LANGUAGE
from docintel.ocr.models import DocumentType, ExtractionResult
from docintel.processor.exceptions import ProcessorError
from docintel.processor.models import BatchProgress, RawDocument
from docintel.processor.pipeline import DocumentContext, PipelineStep

ProgressCallback = Callable[[BatchProgress], None]

DEFAULT_PACING_SECONDS = 2.0


class BatchProcessor:
    """Runs each document of a batch through the pipeline, strictly in order.

    Documents are processed one at a time with a fixed pause between them;
    both external services bill and rate-limit per call. A failure on one
    document is recorded in its result and never aborts the batch, so the
    output always holds exactly one result per input, in input order.
    """

    def __init__(
        self,
        steps: Sequence[PipelineStep],
        *,
        pacing_seconds: float = DEFAULT_PACING_SECONDS,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._steps = list(steps)
        self._pacing_seconds = pacing_seconds
        self._sleep = sleep

    def process_batch(
        self,
        documents: Sequence[RawDocument],
        *,
        progress: ProgressCallback | None = None,
        cancel_event: threading.Event | None = None,
    ) -> list[ScoredExtraction]:
        """Process *documents* in order and return one result per document.

        ``cancel_event`` is checked between documents only; a document that
        has started always finishes. Documents left unprocessed after
        cancellation are reported as cancelled failures.
        A progress callback that raises is logged and otherwise ignored.
        """
        total = len(documents)
        Log.info(f"Processing {total} documents in batch")
        results: list[ScoredExtraction] = []

        for index, document in enumerate(documents):
            if self._is_cancelled(cancel_event):
                Log.warning(f"Batch cancelled after {index}/{total} documents")
                results.extend(self._cancelled(remaining) for remaining in documents[index:])
                break

            if progress is not None:
                update = BatchProgress(index=index + 1, total=total, file_name=document.file_name)
                self._report(progress, update)
            Log.info(f"Processing document {index + 1}/{total}: {document.file_name}")
            results.append(self._process_document(document))

            if index < total - 1 and not self._is_cancelled(cancel_event):
                Log.debug(f"Waiting {self._pacing_seconds}s to respect API rate limits")
                self._sleep(self._pacing_seconds)

        successful = sum(1 for result in results if result.success)
        Log.info(f"Batch processing complete: {successful}/{total} successful")
        return results

    def _process_document(self, document: RawDocument) -> ScoredExtraction:
        context = DocumentContext(document=document)
        try:
            for step in self._steps:
                context = step.run(context)
            if context.result is None:
                raise ProcessorError(f"Pipeline produced no result for {document.file_name}")
        except Exception as exc:
            Log.exception(f"Unexpected error processing {document.file_name}: {exc}")
            message = f"{type(exc).__name__}: {exc}"
            return ScoredExtraction.failed(
                context.extraction or _unprocessed(document, message),
                FailureKind.UNEXPECTED_ERROR,
                message,
            )
        return context.result

    @staticmethod
    def _report(progress: ProgressCallback, update: BatchProgress) -> None:
        try:
            progress(update)
        except Exception as exc:
            Log.exception(f"Progress callback failed for {update.file_name}: {exc}")

    @staticmethod
    def _cancelled(document: RawDocument) -> ScoredExtraction:
        message = "Batch cancelled before this document was processed"
        return ScoredExtraction.failed(
            _unprocessed(document, message),
            FailureKind.CANCELLED,
            message,
        )

    @staticmethod
    def _is_cancelled(cancel_event: threading.Event | None) -> bool:
        return cancel_event is not None and cancel_event.is_set()


def _unprocessed(document: RawDocument, error: str) -> ExtractionResult:
    return ExtractionResult(
        document_id=document.document_id,
        file_name=document.file_name,
        text="",
        document_type=DocumentType.GENERIC,
        language=DEFAULT_LANGUAGE,
        ocr_success=False,
        ocr_error=error,
    )
