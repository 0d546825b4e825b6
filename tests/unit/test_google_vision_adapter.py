from unittest.mock import MagicMock, patch

import pytest
from google.api_core import exceptions as google_exceptions

from docintel.ocr.exceptions import OcrError
from docintel.ocr.google_vision_adapter import GoogleVisionAdapter


def _make_response(
    description: str | None = "DEED OF TRANSFER",
    has_vertices: bool = True,
    error_message: str = "",
) -> MagicMock:
    response = MagicMock()
    response.error.message = error_message
    if description is None:
        response.text_annotations = []
    else:
        annotation = MagicMock()
        annotation.description = description
        annotation.bounding_poly.vertices = [MagicMock()] if has_vertices else []
        response.text_annotations = [annotation]
    return response


class TestRecognize:
    def test_returns_first_annotation_text(self) -> None:
        client = MagicMock()
        client.document_text_detection.return_value = _make_response("Full text")
        result = GoogleVisionAdapter(client=client).recognize(b"img")
        assert result.text == "Full text"
        assert result.confidence == 0.9

    def test_lower_confidence_without_bounding_poly(self) -> None:
        client = MagicMock()
        client.document_text_detection.return_value = _make_response(has_vertices=False)
        result = GoogleVisionAdapter(client=client).recognize(b"img")
        assert result.confidence == 0.7

    def test_no_annotations_returns_empty_text(self) -> None:
        client = MagicMock()
        client.document_text_detection.return_value = _make_response(description=None)
        result = GoogleVisionAdapter(client=client).recognize(b"img")
        assert result.text == ""
        assert result.confidence == 0.0

    def test_response_error_raises(self) -> None:
        client = MagicMock()
        client.document_text_detection.return_value = _make_response(error_message="Bad image data")
        with pytest.raises(OcrError, match="Bad image data"):
            GoogleVisionAdapter(client=client).recognize(b"img")

    def test_api_error_raises(self) -> None:
        client = MagicMock()
        client.document_text_detection.side_effect = google_exceptions.ResourceExhausted("quota")
        with pytest.raises(OcrError, match="request failed"):
            GoogleVisionAdapter(client=client).recognize(b"img")


class TestClientCreation:
    def test_uses_service_account_file(self) -> None:
        with patch("docintel.ocr.google_vision_adapter.vision.ImageAnnotatorClient") as mock_cls:
            mock_cls.from_service_account_file.return_value.document_text_detection.return_value = (
                _make_response()
            )
            adapter = GoogleVisionAdapter(service_account_path="/keys/sa.json", project_id="proj")
            adapter.recognize(b"img")
        mock_cls.from_service_account_file.assert_called_once_with(
            "/keys/sa.json",
            client_options={"quota_project_id": "proj"},
        )

    def test_client_is_created_once(self) -> None:
        with patch("docintel.ocr.google_vision_adapter.vision.ImageAnnotatorClient") as mock_cls:
            mock_cls.return_value.document_text_detection.return_value = _make_response()
            adapter = GoogleVisionAdapter()
            adapter.recognize(b"a")
            adapter.recognize(b"b")
        mock_cls.assert_called_once_with(client_options=None)

    def test_missing_credentials_raise_ocr_error(self) -> None:
        with patch(
            "docintel.ocr.google_vision_adapter.vision.ImageAnnotatorClient",
            side_effect=OSError("no such file"),
        ):
            with pytest.raises(OcrError, match="could not be created"):
                GoogleVisionAdapter().recognize(b"img")
