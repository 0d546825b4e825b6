from typing import ClassVar

from docintel.config.settings import Settings
from docintel.extraction.base import BaseFieldExtractor
from docintel.extraction.example_client_adapter import ExampleClientAdapter
from docintel.extraction.extractor import FieldExtractor
from docintel.extraction.openai_client_adapter import OpenAIClientAdapter


class ExtractionFactory:
    """Creates the configured field extractor."""

    OPENAI_COMPATIBLE_BASE_URLS: ClassVar[dict[str, str]] = {
        "openrouter": "https://openrouter.ai/api/v1",
        "groq": "https://api.groq.com/openai/v1",
        "together": "https://api.together.xyz/v1",
        "deepseek": "https://api.deepseek.com/v1",
        "ollama": "http://localhost:11434/v1",
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseFieldExtractor:
        """Create a configured field extractor from application settings."""
        provider = settings.extraction_provider.lower()
        if provider == "example":
            return FieldExtractor(
                client=ExampleClientAdapter(),
                model="example",
                temperature=0.0,
                min_text_length=settings.extraction_min_text_length,
            )
        client = OpenAIClientAdapter(
            api_key=settings.extraction_api_key,
            timeout_seconds=settings.extraction_timeout_seconds,
            base_url=cls._resolve_base_url(provider, settings),
            max_retries=settings.extraction_max_retries,
        )
        return FieldExtractor(
            client=client,
            model=settings.extraction_model_name,
            temperature=settings.extraction_temperature,
            max_tokens=settings.extraction_max_tokens,
            min_text_length=settings.extraction_min_text_length,
        )

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        configured = settings.extraction_base_url.strip() or None
        if provider == "openai":
            return configured
        if provider == "openai_compatible":
            if configured is None:
                raise ValueError(
                    "extraction_base_url is required for extraction_provider=openai_compatible"
                )
            return configured
        default_base_url = cls.OPENAI_COMPATIBLE_BASE_URLS.get(provider)
        if default_base_url is not None:
            return configured or default_base_url
        supported = [
            "example",
            "openai",
            "openai_compatible",
            *sorted(cls.OPENAI_COMPATIBLE_BASE_URLS),
        ]
        raise ValueError(
            f"Unknown extraction provider '{provider}'. Choose from: {supported}"
        )
