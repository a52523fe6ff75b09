"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from pantry_chef.adapters.azure_vision_client import HttpxAzureVisionClient
from pantry_chef.adapters.openai_vision_client import OpenAIVisionClient
from pantry_chef.config import Settings, validate_vision_settings
from pantry_chef.services.mapper import PantryMapper
from pantry_chef.services.vision import VisionClient, VisionService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    vision_service: VisionService
    mapper: PantryMapper
    close_resources: Callable[[], Awaitable[None]]


def build_vision_client(settings: Settings) -> VisionClient:
    """Create the vision client for the configured provider."""
    validate_vision_settings(settings)
    if settings.vision_provider == "openai":
        return OpenAIVisionClient.create(
            api_key=settings.openai_api_key or "",
            model=settings.openai_model,
            reasoning_effort=settings.openai_reasoning_effort,
            store=settings.openai_store,
        )
    return HttpxAzureVisionClient.create(
        endpoint=settings.vision_endpoint or "",
        api_key=settings.vision_key or "",
        api_version=settings.vision_api_version,
        language=settings.vision_language,
        gender_neutral_caption=settings.vision_gender_neutral_caption,
    )


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    vision_client = build_vision_client(resolved_settings)

    async def close_resources() -> None:
        await vision_client.close()

    return AppContainer(
        settings=resolved_settings,
        vision_service=VisionService(client=vision_client),
        mapper=PantryMapper(),
        close_resources=close_resources,
    )
