"""Typed settings configuration - single source of truth."""

from functools import lru_cache

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Remote chat-completion endpoint (OpenAI-compatible)
    hf_api_token: SecretStr | None = None
    hf_model_id: str = "meta-llama/Llama-3.2-1B-Instruct"
    hf_base_url: str = "https://router.huggingface.co/v1"

    # Remote call budget
    remote_timeout_seconds: float = Field(default=30.0, gt=0)
    remote_max_tokens: int = Field(default=512, ge=1)

    # Uploads
    max_upload_bytes: int = Field(default=10 * 1024 * 1024, ge=1)

    # UI
    ui_origins: list[str] = ["http://localhost:8501", "http://localhost:5173"]

    # Logging
    log_level: str = "INFO"

    @property
    def remote_configured(self) -> bool:
        """True when a non-empty API token is present."""
        return bool(self.hf_api_token and self.hf_api_token.get_secret_value())


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
