from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    pdf_engine: str = "pdfplumber"
    pdf_relaxed_max_pages: int = Field(default=50, gt=0)
    pdf_limited_max_pages: int = Field(default=5, gt=0)

    ai_provider: str = "gemini"
    ai_api_key: str = ""
    ai_model_name: str = "gemini-2.0-flash"
    ai_base_url: str = ""
    ai_timeout_seconds: int = Field(default=120, gt=0)
    ai_temperature: float = Field(default=0.4, ge=0.0, le=2.0)

    min_validation_confidence: float = Field(default=0.6, ge=0.0, le=1.0)
    min_content_length: int = Field(default=100, ge=0)
    classification_excerpt_chars: int = Field(default=2000, gt=0)

    max_upload_size_bytes: int = Field(default=10 * 1024 * 1024, gt=0)
