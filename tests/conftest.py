"""Shared test fixtures."""

from dataclasses import dataclass, field

import pytest

from pantry_chef.config import Settings
from pantry_chef.containers import AppContainer
from pantry_chef.domain.vision import AnalysisResult, DetectedObject, Detection
from pantry_chef.services.mapper import PantryMapper
from pantry_chef.services.vision import VisionClient, VisionService


def detection(label: str, confidence: float) -> Detection:
    return Detection(label=label, confidence=confidence)


def detected_object(*tags: tuple[str, float]) -> DetectedObject:
    return DetectedObject(tags=[detection(label, conf) for label, conf in tags])


def analysis(
    caption: str | None = None,
    objects: list[DetectedObject] | None = None,
    tags: list[tuple[str, float]] | None = None,
) -> AnalysisResult:
    return AnalysisResult.model_validate(
        {
            "caption": {"text": caption} if caption is not None else None,
            "objects": objects,
            "tags": (
                [{"label": label, "confidence": conf} for label, conf in tags]
                if tags is not None
                else None
            ),
        }
    )


@dataclass
class FakeVisionClient(VisionClient):
    """Fake vision client returning a fixed payload."""

    payload: dict[str, object] = field(
        default_factory=lambda: {
            "caption": {"text": "a carton of milk on a shelf", "confidence": 0.81},
            "objects": [
                {"tags": [{"label": "milk carton", "confidence": 0.74}]},
            ],
            "tags": [
                {"label": "indoor", "confidence": 0.95},
                {"label": "Milk", "confidence": 0.88},
            ],
        }
    )
    error: Exception | None = None
    received: list[bytes] = field(default_factory=list)
    closed: bool = False

    async def analyze(self, image_bytes: bytes) -> dict[str, object]:
        self.received.append(image_bytes)
        if self.error is not None:
            raise self.error
        return self.payload

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def settings() -> Settings:
    return Settings(
        vision_provider="azure",
        vision_endpoint="https://pantry.cognitiveservices.azure.com",
        vision_key="vision-key",
    )


@pytest.fixture
def vision_client() -> FakeVisionClient:
    return FakeVisionClient()


@pytest.fixture
def container(settings: Settings, vision_client: FakeVisionClient) -> AppContainer:
    async def close_resources() -> None:
        await vision_client.close()

    return AppContainer(
        settings=settings,
        vision_service=VisionService(client=vision_client),
        mapper=PantryMapper(),
        close_resources=close_resources,
    )
