import httpx
import openai

from docintel.extraction.client_base import BaseExtractionClient, CompletionResponse
from docintel.extraction.exceptions import (
    MalformedResponseError,
    RequestRejectedError,
    ServiceUnavailableError,
)

# Status errors a later resubmission can get past: quota, auth, provider outage.
_UNAVAILABLE_STATUS_ERRORS = (
    openai.RateLimitError,
    openai.AuthenticationError,
    openai.PermissionDeniedError,
    openai.InternalServerError,
)


class OpenAIClientAdapter(BaseExtractionClient):
    """Extraction client built on the OpenAI-compatible chat API.

    Retries with backoff on rate limits and transient errors are left to the
    SDK (``max_retries``); whatever still fails is surfaced as
    ServiceUnavailableError. Requests the provider refuses outright (400,
    404, 422) raise RequestRejectedError.
    """

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
        max_retries: int = 2,
    ) -> None:
        self._client = openai.OpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
            max_retries=max_retries,
        )

    def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        max_tokens: int,
        system_prompt: str,
        user_prompt: str,
        json_schema: dict[str, object] | None,
    ) -> CompletionResponse:
        if json_schema is None:
            response_format: dict[str, object] = {"type": "json_object"}
        else:
            response_format = {
                "type": "json_schema",
                "json_schema": {
                    "name": "property_fields",
                    "strict": True,
                    "schema": json_schema,
                },
            }
        try:
            response = self._client.chat.completions.create(
                model=model,
                temperature=temperature,
                max_tokens=max_tokens,
                response_format=response_format,  # type: ignore[arg-type]
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_prompt},
                ],
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise ServiceUnavailableError(f"AI provider network error: {exc}") from exc
        except _UNAVAILABLE_STATUS_ERRORS as exc:
            raise ServiceUnavailableError(f"AI provider API error: {exc}") from exc
        except openai.APIResponseValidationError as exc:
            raise MalformedResponseError(f"AI provider returned an unexpected payload: {exc}") from exc
        except openai.APIError as exc:
            raise RequestRejectedError(f"AI provider rejected the request: {exc}") from exc

        if not response.choices:
            raise MalformedResponseError("AI returned no choices")
        content = response.choices[0].message.content
        if content is None:
            raise MalformedResponseError("AI returned empty response")
        total_tokens = response.usage.total_tokens if response.usage is not None else 0
        return CompletionResponse(
            content=content,
            model=response.model or model,
            total_tokens=total_tokens,
        )
