"""
Application configuration and settings.
Centralized configuration management using Pydantic Settings.
"""
from functools import lru_cache
from pathlib import Path
from typing import List, Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        extra="ignore",
        case_sensitive=False,
        env_file=[".env", ".env.local"],  # .env.local overrides .env
    )

    # Application settings
    app_name: str = "gpt5-gateway"
    environment: Literal["development", "production", "test"] = "development"
    host: str = "0.0.0.0"
    port: int = Field(default=3000, ge=1, le=65535)

    # OpenAI settings
    openai_api_key: str = Field(min_length=20)

    # CORS settings
    cors_origin: str = "*"

    # Rate limiting
    rate_limit_window_ms: int = Field(default=60_000, gt=0)
    rate_limit_max: int = Field(default=60, gt=0)

    # Request body limit (1mb)
    max_body_bytes: int = Field(default=1_048_576, gt=0)

    # Static prompt resources (context.json, guardrail.json)
    data_dir: Path = Path("data")

    # Logging settings
    log_level: str = "INFO"
    enable_request_logging: bool = True

    @property
    def cors_origins(self) -> List[str]:
        """Allowed CORS origins; ``*`` allows any origin."""
        if self.cors_origin.strip() == "*":
            return ["*"]
        return [origin.strip() for origin in self.cors_origin.split(",") if origin.strip()]

    @property
    def rate_limit_window_seconds(self) -> float:
        return self.rate_limit_window_ms / 1000.0


@lru_cache()
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
