from typing import Any

from google.api_core import exceptions as google_exceptions
from google.auth import exceptions as auth_exceptions
from google.cloud import vision

from docintel.logging.logger import Log
from docintel.ocr.base import BaseOcrEngine
from docintel.ocr.exceptions import OcrError
from docintel.ocr.models import RecognizedText

_CONFIDENCE_WITH_LAYOUT = 0.9
_CONFIDENCE_WITHOUT_LAYOUT = 0.7


class GoogleVisionAdapter(BaseOcrEngine):
    """Document text detection through Google Cloud Vision.

    The client is created on first use so that missing credentials surface
    as an OcrError on the document being processed, not at wiring time.
    """

    name = "google_vision"

    def __init__(
        self,
        *,
        service_account_path: str = "",
        project_id: str = "",
        client: Any = None,
    ) -> None:
        self._service_account_path = service_account_path
        self._project_id = project_id
        self._client = client

    def recognize(self, content: bytes) -> RecognizedText:
        client = self._get_client()
        try:
            response = client.document_text_detection(image=vision.Image(content=content))
        except google_exceptions.GoogleAPIError as exc:
            raise OcrError(f"Google Vision request failed: {exc}") from exc

        if response.error.message:
            raise OcrError(f"Google Vision error: {response.error.message}")

        annotations = response.text_annotations
        if not annotations:
            Log.debug("Google Vision returned no text annotations")
            return RecognizedText(text="", confidence=0.0)

        first = annotations[0]
        confidence = (
            _CONFIDENCE_WITH_LAYOUT
            if first.bounding_poly.vertices
            else _CONFIDENCE_WITHOUT_LAYOUT
        )
        return RecognizedText(text=first.description, confidence=confidence)

    def _get_client(self) -> Any:
        if self._client is not None:
            return self._client
        client_options = {"quota_project_id": self._project_id} if self._project_id else None
        try:
            if self._service_account_path:
                self._client = vision.ImageAnnotatorClient.from_service_account_file(
                    self._service_account_path,
                    client_options=client_options,
                )
            else:
                self._client = vision.ImageAnnotatorClient(client_options=client_options)
        except (auth_exceptions.GoogleAuthError, OSError, ValueError) as exc:
            raise OcrError(f"Google Vision client could not be created: {exc}") from exc
        return self._client
