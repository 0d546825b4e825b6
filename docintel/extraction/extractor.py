"""LLM-driven structured field extraction."""

import json
import re
from pathlib import Path
from typing import Any

from docintel.extraction.base import BaseFieldExtractor
from docintel.extraction.client_base import BaseExtractionClient, CompletionResponse
from docintel.extraction.exceptions import (
    MalformedResponseError,
    RequestRejectedError,
    ServiceUnavailableError,
)
from docintel.extraction.models import (
    NOT_SPECIFIED,
    ExtractionMetadata,
    FailureKind,
    FieldExtraction,
)
from docintel.extraction.prompt_loader import load_prompt_template, load_system_prompt
from docintel.extraction.templates import FieldTemplate, get_template
from docintel.extraction.validator import build_fields, is_filled
from docintel.health import ConnectionCheck
from docintel.logging.logger import Log
from docintel.ocr.models import DocumentType

DEFAULT_MIN_TEXT_LENGTH = 10
MIN_TEMPERATURE = 0.0
MAX_TEMPERATURE = 0.2
INSUFFICIENT_TEXT_MESSAGE = "Insufficient text content for data extraction"

_FENCE_RE = re.compile(r"```(?:json)?", re.IGNORECASE)
_PROBE_PROMPT = 'Respond with exactly this JSON: {"test": "success", "status": "connected"}'


class FieldExtractor(BaseFieldExtractor):
    """Extracts property fields from OCR text using an AI provider."""

    def __init__(
        self,
        *,
        client: BaseExtractionClient,
        model: str,
        temperature: float = 0.1,
        max_tokens: int = 1000,
        min_text_length: int = DEFAULT_MIN_TEXT_LENGTH,
        prompt_dir: Path | None = None,
    ) -> None:
        self._client = client
        self._model = model
        self._temperature = max(MIN_TEMPERATURE, min(MAX_TEMPERATURE, temperature))
        if self._temperature != temperature:
            Log.warning(
                f"Extraction temperature {temperature} is outside "
                f"{MIN_TEMPERATURE}..{MAX_TEMPERATURE}; using {self._temperature}"
            )
        self._max_tokens = max_tokens
        self._min_text_length = min_text_length
        self._system_prompt = load_system_prompt(
            prompt_dir / "system_prompt.txt" if prompt_dir else None
        )
        self._prompt_templates = {
            document_type: load_prompt_template(
                document_type,
                prompt_dir / f"{document_type.value}.txt" if prompt_dir else None,
            )
            for document_type in DocumentType
        }

    def extract_fields(self, text: str, document_type: DocumentType) -> FieldExtraction:
        if len(text.strip()) < self._min_text_length:
            Log.warning(
                f"Insufficient text for extraction: {len(text.strip())} chars "
                f"(minimum {self._min_text_length})"
            )
            return FieldExtraction.failed(FailureKind.INSUFFICIENT_TEXT, INSUFFICIENT_TEXT_MESSAGE)

        template = get_template(document_type)
        prompt = self._build_prompt(text, document_type)
        Log.debug(f"Extraction prompt for {document_type.value}:\n{prompt}")

        try:
            response = self._call_ai(prompt, template)
            Log.debug(f"AI raw response:\n{response.content}")
            parsed = parse_response(response.content)
        except ServiceUnavailableError as exc:
            Log.error(f"Extraction service unavailable: {exc}")
            return FieldExtraction.failed(FailureKind.SERVICE_UNAVAILABLE, str(exc))
        except MalformedResponseError as exc:
            Log.error(f"Malformed extraction response: {exc}")
            return FieldExtraction.failed(FailureKind.MALFORMED_RESPONSE, str(exc))
        except RequestRejectedError as exc:
            Log.error(f"Extraction request rejected: {exc}")
            return FieldExtraction.failed(FailureKind.REQUEST_REJECTED, str(exc))

        fields = build_fields(parsed, template)
        filled = sum(1 for name in template.field_names if is_filled(fields[name]))
        Log.info(
            f"Extraction complete for {document_type.value}: "
            f"{filled}/{len(template.field_names)} fields, {response.total_tokens} tokens"
        )
        return FieldExtraction(
            fields=fields,
            metadata=ExtractionMetadata(model=response.model, tokens_used=response.total_tokens),
        )

    def check_connection(self) -> ConnectionCheck:
        service = f"llm:{self._model}"
        try:
            response = self._client.create_chat_completion(
                model=self._model,
                temperature=0.0,
                max_tokens=50,
                system_prompt=self._system_prompt,
                user_prompt=_PROBE_PROMPT,
                json_schema=None,
            )
            parse_response(response.content)
        except (ServiceUnavailableError, MalformedResponseError, RequestRejectedError) as exc:
            return ConnectionCheck(
                service=service,
                success=False,
                message="AI provider connection failed",
                error=str(exc),
            )
        return ConnectionCheck(service=service, success=True, message="AI provider connection successful")

    def _build_prompt(self, text: str, document_type: DocumentType) -> str:
        return self._prompt_templates[document_type].format(
            document_text=text,
            not_specified=NOT_SPECIFIED,
        )

    def _call_ai(self, prompt: str, template: FieldTemplate) -> CompletionResponse:
        return self._client.create_chat_completion(
            model=self._model,
            temperature=self._temperature,
            max_tokens=self._max_tokens,
            system_prompt=self._system_prompt,
            user_prompt=prompt,
            json_schema=template.json_schema(),
        )


def parse_response(raw: str) -> dict[str, Any]:
    """Parse a model response as a JSON object.

    A response that does not parse as-is gets one normalization pass
    (code fences removed, surrounding prose trimmed to the outermost braces)
    before it is rejected.

    Raises:
        MalformedResponseError: if neither attempt yields a JSON object.
    """
    try:
        parsed = json.loads(raw)
    except json.JSONDecodeError:
        Log.debug("AI response is not bare JSON, stripping wrappers and retrying")
        try:
            parsed = json.loads(_strip_wrappers(raw))
        except json.JSONDecodeError as exc:
            raise MalformedResponseError(f"AI response is not valid JSON: {exc}") from exc

    if not isinstance(parsed, dict):
        raise MalformedResponseError("JSON response must be an object")
    return parsed


def _strip_wrappers(raw: str) -> str:
    cleaned = _FENCE_RE.sub("", raw).strip()
    start = cleaned.find("{")
    end = cleaned.rfind("}")
    if start != -1 and end > start:
        cleaned = cleaned[start : end + 1]
    return cleaned
