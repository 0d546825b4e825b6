from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    ocr_image_engine: str = "google_vision"
    ocr_pdf_engine: str = "pdfplumber"
    google_service_account_path: str = ""
    google_cloud_project_id: str = ""
    tesseract_languages: str = "eng+sin+tam"

    extraction_provider: str = "openai"
    extraction_api_key: str = ""
    extraction_model_name: str = "gpt-4o-mini"
    extraction_base_url: str = ""
    extraction_timeout_seconds: int = 30
    extraction_max_retries: int = 2
    extraction_temperature: float = Field(default=0.1, ge=0.0, le=0.2)
    extraction_max_tokens: int = 1000
    extraction_min_text_length: int = 10

    batch_pacing_seconds: float = 2.0
