"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    anthropic_api_key: str = ""
    tuqang_env: str = "development"
    tuqang_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Advice model
    advice_model: str = "claude-haiku-4-5-20251001"
    advice_max_tokens: int = 512

    # Absolute tolerance for length comparisons
    validation_epsilon: float = Field(0.1, gt=0)

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
