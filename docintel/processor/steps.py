from docintel.extraction.base import BaseFieldExtractor
from docintel.extraction.models import FailureKind, ScoredExtraction
from docintel.extraction.scoring import ConfidenceScorer
from docintel.logging.logger import Log
from docintel.ocr.text_extractor import TextExtractor
from docintel.processor.pipeline import DocumentContext, PipelineStep


class ExtractTextStep(PipelineStep):
    def __init__(self, text_extractor: TextExtractor) -> None:
        self._text_extractor = text_extractor

    def run(self, context: DocumentContext) -> DocumentContext:
        document = context.document
        context.extraction = self._text_extractor.extract_text(
            document.content,
            document.media_type,
            document_id=document.document_id,
            file_name=document.file_name,
        )
        return context


class ExtractFieldsStep(PipelineStep):
    def __init__(self, field_extractor: BaseFieldExtractor) -> None:
        self._field_extractor = field_extractor

    def run(self, context: DocumentContext) -> DocumentContext:
        if context.extraction is None:
            raise ValueError("DocumentContext.extraction must be set before field extraction")
        if not context.extraction.ocr_success:
            Log.debug(f"Skipping field extraction for {context.document.file_name}: OCR failed")
            return context
        context.field_extraction = self._field_extractor.extract_fields(
            context.extraction.text,
            context.extraction.document_type,
        )
        return context


class ScoreStep(PipelineStep):
    def __init__(self, scorer: ConfidenceScorer) -> None:
        self._scorer = scorer

    def run(self, context: DocumentContext) -> DocumentContext:
        if context.extraction is None:
            raise ValueError("DocumentContext.extraction must be set before scoring")
        field_extraction = context.field_extraction
        if field_extraction is None or not field_extraction.success:
            context.confidence = 0
            return context
        context.confidence = self._scorer.score(
            field_extraction.fields,
            context.extraction.document_type,
        )
        Log.info(f"Scored {context.document.file_name}: confidence {context.confidence}")
        return context


class BuildResultStep(PipelineStep):
    def run(self, context: DocumentContext) -> DocumentContext:
        extraction = context.extraction
        if extraction is None:
            raise ValueError("DocumentContext.extraction must be set before building a result")

        if not extraction.ocr_success:
            context.result = ScoredExtraction.failed(
                extraction,
                FailureKind.OCR_FAILURE,
                extraction.ocr_error or "OCR failed",
            )
            return context

        field_extraction = context.field_extraction
        if field_extraction is None:
            raise ValueError("DocumentContext.field_extraction must be set after successful OCR")
        if field_extraction.failure is not None:
            context.result = ScoredExtraction.failed(
                extraction,
                field_extraction.failure.kind,
                field_extraction.failure.message,
            )
            return context

        context.result = ScoredExtraction(
            extraction=extraction,
            fields=field_extraction.fields,
            confidence=context.confidence,
            metadata=field_extraction.metadata,
        )
        return context
