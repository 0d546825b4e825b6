from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class CompletionResponse:
    """Provider response as plain text plus usage bookkeeping."""

    content: str
    model: str
    total_tokens: int = 0


class BaseExtractionClient(ABC):
    """Contract for provider-specific LLM completion clients."""

    @abstractmethod
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
        """Return the provider response.

        A ``json_schema`` of None requests free-form JSON object output.

        Raises:
            ServiceUnavailableError: on network, quota or auth failures.
            MalformedResponseError: if the provider returns no content.
        """
