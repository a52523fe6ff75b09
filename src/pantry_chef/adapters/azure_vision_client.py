"""Azure AI Vision Image Analysis REST client."""

from dataclasses import dataclass

import httpx

from pantry_chef.services.vision import VISUAL_FEATURES, VisionClient

ANALYZE_PATH = "/computervision/imageanalysis:analyze"
DEFAULT_API_VERSION = "2024-02-01"


@dataclass
class HttpxAzureVisionClient(VisionClient):
    """HTTPX-backed Azure AI Vision client."""

    endpoint: str
    api_key: str
    http_client: httpx.AsyncClient
    api_version: str = DEFAULT_API_VERSION
    language: str = "en"
    gender_neutral_caption: bool = False

    @classmethod
    def create(  # noqa: PLR0913
        cls,
        endpoint: str,
        api_key: str,
        api_version: str = DEFAULT_API_VERSION,
        language: str = "en",
        gender_neutral_caption: bool = False,
    ) -> "HttpxAzureVisionClient":
        """Create an Azure vision client with a managed httpx session."""
        return cls(
            endpoint=endpoint,
            api_key=api_key,
            http_client=httpx.AsyncClient(),
            api_version=api_version,
            language=language,
            gender_neutral_caption=gender_neutral_caption,
        )

    async def analyze(self, image_bytes: bytes) -> dict[str, object]:
        """Analyze image bytes and return the normalized payload."""
        url = f"{self.endpoint.rstrip('/')}{ANALYZE_PATH}"
        response = await self.http_client.post(
            url,
            params={
                "api-version": self.api_version,
                "features": ",".join(VISUAL_FEATURES),
                "language": self.language,
                "gender-neutral-caption": str(self.gender_neutral_caption).lower(),
            },
            headers={
                "Ocp-Apim-Subscription-Key": self.api_key,
                "Content-Type": "application/octet-stream",
            },
            content=image_bytes,
            timeout=30,
        )
        response.raise_for_status()
        return normalize_analysis(response.json())

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()


def normalize_analysis(data: dict[str, object]) -> dict[str, object]:
    """Convert an Azure analyze response to the internal payload shape."""
    caption = None
    caption_result = data.get("captionResult")
    if isinstance(caption_result, dict):
        caption = {
            "text": caption_result.get("text", ""),
            "confidence": caption_result.get("confidence"),
        }

    objects = None
    objects_result = data.get("objectsResult")
    if isinstance(objects_result, dict):
        objects = [
            {
                "tags": _normalize_tags(value.get("tags", [])),
                "bounding_box": _normalize_box(value.get("boundingBox")),
            }
            for value in objects_result.get("values", [])
        ]

    tags = None
    tags_result = data.get("tagsResult")
    if isinstance(tags_result, dict):
        tags = _normalize_tags(tags_result.get("values", []))

    return {"caption": caption, "objects": objects, "tags": tags}


def _normalize_tags(values: list[dict[str, object]]) -> list[dict[str, object]]:
    return [
        {"label": value.get("name", ""), "confidence": value.get("confidence", 0.0)}
        for value in values
    ]


def _normalize_box(box: dict[str, int] | None) -> dict[str, int] | None:
    if not box:
        return None
    return {
        "x": box.get("x", 0),
        "y": box.get("y", 0),
        "width": box.get("w", 0),
        "height": box.get("h", 0),
    }
