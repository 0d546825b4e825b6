import pytest

from docintel.ocr.classifier import classify_document, detect_language
from docintel.ocr.models import DocumentType


class TestClassifyDocument:
    @pytest.mark.parametrize(
        "text",
        ["This DEED OF TRANSFER is made", "transfer deed no. 1234", "Deed Of Transfer"],
    )
    def test_transfer_deed_variants(self, text: str) -> None:
        assert classify_document(text) is DocumentType.TRANSFER_DEED

    def test_survey_plan_needs_both_words(self) -> None:
        assert classify_document("Survey plan no. 2231 by licensed surveyor") is DocumentType.SURVEY_PLAN
        assert classify_document("Floor plan of the house") is DocumentType.GENERIC

    def test_title_with_certificate(self) -> None:
        assert classify_document("Certificate of Title No. 77") is DocumentType.TITLE_CERTIFICATE

    def test_title_with_deed(self) -> None:
        assert classify_document("Title deed for lot 4") is DocumentType.TITLE_CERTIFICATE

    def test_transfer_wins_over_survey_plan(self) -> None:
        text = "DEED OF TRANSFER referring to survey plan no. 88"
        assert classify_document(text) is DocumentType.TRANSFER_DEED

    def test_survey_plan_wins_over_title(self) -> None:
        text = "Survey plan attached to the title certificate"
        assert classify_document(text) is DocumentType.SURVEY_PLAN

    def test_unmatched_is_generic(self) -> None:
        assert classify_document("Valuation report for the premises") is DocumentType.GENERIC

    def test_empty_text_is_generic(self) -> None:
        assert classify_document("") is DocumentType.GENERIC


class TestDetectLanguage:
    def test_sinhala(self) -> None:
        assert detect_language("Deed ඔප්පුව") == "si"

    def test_tamil(self) -> None:
        assert detect_language("உறுதி") == "ta"

    def test_sinhala_checked_before_tamil(self) -> None:
        assert detect_language("உ ඔ") == "si"

    def test_default_is_english(self) -> None:
        assert detect_language("Plain English deed") == "en"
