from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    pdf_engine: str = "pdfplumber"

    vision_provider: str = "openai"
    vision_api_key: str = ""
    vision_model_name: str = "gpt-4o-mini"
    vision_base_url: str = ""
    vision_timeout_seconds: int = 30
    vision_temperature: float = 0.0
