"""Tests for vision service."""

import asyncio

import pytest
from pydantic import ValidationError

from pantry_chef.services.vision import VisionService, detect_mime_type, to_data_url
from tests.conftest import FakeVisionClient


def test_vision_service_returns_analysis_result() -> None:
    client = FakeVisionClient()
    service = VisionService(client=client)

    result = asyncio.run(service.analyze(b"image-bytes"))

    assert result.caption is not None
    assert result.caption.text == "a carton of milk on a shelf"
    assert result.objects
    assert result.objects[0].tags[0].label == "milk carton"
    assert client.received == [b"image-bytes"]


def test_vision_service_accepts_missing_sections() -> None:
    service = VisionService(client=FakeVisionClient(payload={}))

    result = asyncio.run(service.analyze(b"image-bytes"))

    assert result.caption is None
    assert result.objects is None
    assert result.tags is None


def test_vision_service_rejects_out_of_range_confidence() -> None:
    payload = {"tags": [{"label": "milk", "confidence": 1.5}]}
    service = VisionService(client=FakeVisionClient(payload=payload))

    with pytest.raises(ValidationError):
        asyncio.run(service.analyze(b"image-bytes"))


def test_to_data_url_uses_png_header() -> None:
    data = b"\x89PNG\r\n\x1a\n" + b"rest"
    url = to_data_url(data)

    assert url.startswith("data:image/png;base64,")


def test_to_data_url_defaults_to_jpeg() -> None:
    data = b"unknown"
    url = to_data_url(data)

    assert url.startswith("data:image/jpeg;base64,")


def test_detect_mime_type_webp_and_gif() -> None:
    assert detect_mime_type(b"RIFF\x00\x00\x00\x00WEBPVP8 ") == "image/webp"
    assert detect_mime_type(b"GIF89a....") == "image/gif"
