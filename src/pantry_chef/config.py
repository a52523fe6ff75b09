"""Application configuration."""

import os
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class ConfigurationError(RuntimeError):
    """Raised when required settings are missing at startup."""


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    vision_provider: Literal["azure", "openai"] = "azure"
    vision_endpoint: str | None = None
    vision_key: str | None = None
    vision_api_version: str = "2024-02-01"
    vision_language: str = "en"
    vision_gender_neutral_caption: bool = False
    openai_api_key: str | None = None
    openai_model: str = "gpt-5.2"
    openai_reasoning_effort: str | None = None
    openai_store: bool = False
    function_key: str | None = None
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def validate_vision_settings(settings: Settings) -> None:
    """Fail fast when the selected provider is missing credentials."""
    if settings.vision_provider == "openai":
        if not settings.openai_api_key:
            raise ConfigurationError(
                "OPENAI_API_KEY environment variable is not set. "
                "Configure it in your .env file or application settings."
            )
        return
    if not settings.vision_endpoint or not settings.vision_key:
        raise ConfigurationError(
            "VISION_ENDPOINT or VISION_KEY environment variables are not set. "
            "Configure them in your .env file or application settings."
        )
