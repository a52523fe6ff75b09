"""OpenAI Responses API client for image analysis."""

import json
from dataclasses import dataclass

from openai import AsyncOpenAI

from pantry_chef.services.vision import VisionClient, to_data_url

_CONFIDENCE_SCHEMA: dict[str, object] = {
    "type": "number",
    "minimum": 0.0,
    "maximum": 1.0,
}

_DETECTION_SCHEMA: dict[str, object] = {
    "type": "object",
    "properties": {
        "label": {"type": "string"},
        "confidence": _CONFIDENCE_SCHEMA,
    },
    "required": ["label", "confidence"],
    "additionalProperties": False,
}

ANALYSIS_SCHEMA: dict[str, object] = {
    "type": "object",
    "properties": {
        "caption": {
            "anyOf": [
                {
                    "type": "object",
                    "properties": {
                        "text": {"type": "string"},
                        "confidence": _CONFIDENCE_SCHEMA,
                    },
                    "required": ["text", "confidence"],
                    "additionalProperties": False,
                },
                {"type": "null"},
            ]
        },
        "objects": {
            "type": "array",
            "items": {
                "type": "object",
                "properties": {
                    "tags": {"type": "array", "items": _DETECTION_SCHEMA},
                },
                "required": ["tags"],
                "additionalProperties": False,
            },
        },
        "tags": {"type": "array", "items": _DETECTION_SCHEMA},
    },
    "required": ["caption", "objects", "tags"],
    "additionalProperties": False,
}

ANALYSIS_PROMPT = (
    "Analyze this photo of a grocery or pantry item. "
    "Return a one-sentence caption, the distinct objects you can see "
    "(each with ranked lowercase labels, most specific first) and general "
    "lowercase tags for the whole image. Every label has a confidence (0-1)."
)


@dataclass
class OpenAIVisionClient(VisionClient):
    """Vision client backed by OpenAI Responses API."""

    client: AsyncOpenAI
    model: str
    reasoning_effort: str | None = None
    store: bool = False

    @classmethod
    def create(
        cls,
        api_key: str,
        model: str,
        reasoning_effort: str | None = None,
        store: bool = False,
    ) -> "OpenAIVisionClient":
        """Create an OpenAI vision client."""
        return cls(
            client=AsyncOpenAI(api_key=api_key),
            model=model,
            reasoning_effort=reasoning_effort,
            store=store,
        )

    async def analyze(self, image_bytes: bytes) -> dict[str, object]:
        """Call OpenAI Responses API with structured outputs."""
        request_payload: dict[str, object] = {
            "model": self.model,
            "input": [
                {
                    "role": "user",
                    "content": [
                        {"type": "input_text", "text": ANALYSIS_PROMPT},
                        {"type": "input_image", "image_url": to_data_url(image_bytes)},
                    ],
                }
            ],
            "text": {
                "format": {
                    "type": "json_schema",
                    "name": "image_analysis",
                    "strict": True,
                    "schema": ANALYSIS_SCHEMA,
                }
            },
            "store": self.store,
        }
        if self.reasoning_effort:
            request_payload["reasoning"] = {"effort": self.reasoning_effort}

        response = await self.client.responses.create(**request_payload)
        output_text = response.output_text
        if not output_text:
            raise RuntimeError("OpenAI returned an empty response")
        return json.loads(output_text)

    async def close(self) -> None:
        """Close the underlying OpenAI client."""
        await self.client.close()
