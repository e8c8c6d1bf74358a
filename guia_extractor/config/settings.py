from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    host: str = "0.0.0.0"
    port: int = 8000
    cors_allowed_origins: str = "*"

    pdf_engine: str = "pdfplumber"

    text_prompt_path: str = ""
    image_prompt_path: str = ""

    gateway_provider: str = "gemini"

    gemini_api_key: str = ""
    gemini_model_name: str = "gemini-2.5-flash-preview-09-2025"
    gemini_temperature: float = 0.1
    gemini_timeout_seconds: int = 60

    openai_api_key: str = ""
    openai_model_name: str = "gpt-4o-mini"
    openai_timeout_seconds: int = 60
    openai_temperature: float = 0.0
