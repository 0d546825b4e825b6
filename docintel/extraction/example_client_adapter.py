"""Example extraction client adapter.

Use this module as a reference when implementing new provider adapters.
Implement BaseExtractionClient and register the provider in ExtractionFactory.
"""

import json

from docintel.extraction.client_base import BaseExtractionClient, CompletionResponse
from docintel.extraction.models import NOT_SPECIFIED


class ExampleClientAdapter(BaseExtractionClient):
    """Example adapter that answers every requested field with the sentinel.

    No network calls. Useful for local development and dry runs of the
    pipeline without provider credentials.
    """

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
        _ = temperature, max_tokens, system_prompt, user_prompt
        properties = (json_schema or {}).get("properties", {})
        names = list(properties) if isinstance(properties, dict) else []
        return CompletionResponse(
            content=json.dumps({name: NOT_SPECIFIED for name in names}),
            model=model,
            total_tokens=0,
        )
