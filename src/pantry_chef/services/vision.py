"""Image analysis service backed by an external vision provider."""

import base64
from dataclasses import dataclass
from typing import Protocol

from pantry_chef.domain.vision import AnalysisResult

VISUAL_FEATURES: tuple[str, ...] = ("caption", "objects", "tags")


class VisionClient(Protocol):
    """Interface for image analysis providers."""

    async def analyze(self, image_bytes: bytes) -> dict[str, object]:
        """Return caption, objects and tags for the image."""

    async def close(self) -> None:
        """Release provider resources."""


@dataclass
class VisionService:
    """Service that runs image analysis and validates results."""

    client: VisionClient

    async def analyze(self, image_bytes: bytes) -> AnalysisResult:
        """Analyze an image via the configured client."""
        raw = await self.client.analyze(image_bytes)
        return AnalysisResult.model_validate(raw)


def to_data_url(image_bytes: bytes) -> str:
    """Convert bytes to a base64 data URL for image input."""
    mime_type = detect_mime_type(image_bytes)
    encoded = base64.b64encode(image_bytes).decode("utf-8")
    return f"data:{mime_type};base64,{encoded}"


def detect_mime_type(image_bytes: bytes) -> str:
    """Infer a basic image MIME type from file signatures."""
    if image_bytes.startswith(b"\xff\xd8\xff"):
        return "image/jpeg"
    if image_bytes.startswith(b"\x89PNG\r\n\x1a\n"):
        return "image/png"
    if image_bytes[:4] == b"RIFF" and image_bytes[8:12] == b"WEBP":
        return "image/webp"
    if image_bytes[:6] in {b"GIF87a", b"GIF89a"}:
        return "image/gif"
    if image_bytes.startswith(b"BM"):
        return "image/bmp"
    return "image/jpeg"
