import pytest

from docintel.extraction.models import ExtractionFailure, FailureKind, ScoredExtraction
from docintel.ocr.models import DocumentType, ExtractionResult


def _extraction() -> ExtractionResult:
    return ExtractionResult(
        document_id="d1",
        file_name="d1.png",
        text="text",
        document_type=DocumentType.SURVEY_PLAN,
        language="en",
        ocr_success=True,
    )


class TestScoredExtraction:
    def test_exposes_document_identity(self) -> None:
        result = ScoredExtraction(extraction=_extraction(), fields={"a": "b"}, confidence=50)
        assert result.document_id == "d1"
        assert result.file_name == "d1.png"
        assert result.document_type is DocumentType.SURVEY_PLAN
        assert result.success

    def test_failed_has_zero_confidence_and_no_fields(self) -> None:
        result = ScoredExtraction.failed(_extraction(), FailureKind.MALFORMED_RESPONSE, "bad json")
        assert not result.success
        assert result.confidence == 0
        assert result.fields == {}
        assert result.failure == ExtractionFailure(FailureKind.MALFORMED_RESPONSE, "bad json")

    @pytest.mark.parametrize("confidence", [-1, 101])
    def test_rejects_out_of_range_confidence(self, confidence: int) -> None:
        with pytest.raises(ValueError, match="0..100"):
            ScoredExtraction(extraction=_extraction(), confidence=confidence)

    def test_rejects_failure_with_confidence(self) -> None:
        with pytest.raises(ValueError, match="failed extraction"):
            ScoredExtraction(
                extraction=_extraction(),
                confidence=10,
                failure=ExtractionFailure(FailureKind.OCR_FAILURE, "x"),
            )


class TestFailureKind:
    def test_only_service_unavailable_is_retryable(self) -> None:
        retryable = [kind for kind in FailureKind if ExtractionFailure(kind, "").retryable]
        assert retryable == [FailureKind.SERVICE_UNAVAILABLE]
