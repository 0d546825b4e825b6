from docintel.extraction.models import NOT_SPECIFIED
from docintel.extraction.scoring import ConfidenceScorer, round_half_up
from docintel.extraction.templates import get_template
from docintel.ocr.models import DocumentType


def _fields(document_type: DocumentType, filled: int) -> dict[str, str]:
    names = get_template(document_type).field_names
    return {name: ("value" if i < filled else NOT_SPECIFIED) for i, name in enumerate(names)}


class TestConfidenceScorer:
    def test_all_filled_is_100(self) -> None:
        fields = _fields(DocumentType.SURVEY_PLAN, 7)
        assert ConfidenceScorer().score(fields, DocumentType.SURVEY_PLAN) == 100

    def test_nothing_filled_is_0(self) -> None:
        fields = _fields(DocumentType.SURVEY_PLAN, 0)
        assert ConfidenceScorer().score(fields, DocumentType.SURVEY_PLAN) == 0

    def test_partial_is_rounded(self) -> None:
        fields = _fields(DocumentType.TRANSFER_DEED, 2)
        # 2 of 9 -> 22.2
        assert ConfidenceScorer().score(fields, DocumentType.TRANSFER_DEED) == 22

    def test_empty_string_is_not_filled(self) -> None:
        fields = _fields(DocumentType.SURVEY_PLAN, 7)
        fields["plan_number"] = ""
        # 6 of 7 -> 85.7
        assert ConfidenceScorer().score(fields, DocumentType.SURVEY_PLAN) == 86

    def test_missing_keys_count_as_unfilled(self) -> None:
        assert ConfidenceScorer().score({"plan_number": "1"}, DocumentType.SURVEY_PLAN) == 14

    def test_generic_extra_keys_do_not_change_denominator(self) -> None:
        fields = _fields(DocumentType.GENERIC, 7)
        fields["valuer"] = "K. Silva"
        assert ConfidenceScorer().score(fields, DocumentType.GENERIC) == 100

    def test_score_is_within_bounds(self) -> None:
        scorer = ConfidenceScorer()
        for document_type in DocumentType:
            for filled in range(len(get_template(document_type).field_names) + 1):
                score = scorer.score(_fields(document_type, filled), document_type)
                assert 0 <= score <= 100


class TestRoundHalfUp:
    def test_rounds_halves_up(self) -> None:
        assert round_half_up(12.5) == 13
        assert round_half_up(2.5) == 3

    def test_rounds_to_nearest(self) -> None:
        assert round_half_up(42.4) == 42
        assert round_half_up(42.6) == 43
