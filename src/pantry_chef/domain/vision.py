"""Models for image analysis results returned by the vision provider."""

from pydantic import BaseModel, Field


class Detection(BaseModel):
    """Single labelled detection with a confidence score."""

    label: str
    confidence: float = Field(ge=0.0, le=1.0)


class BoundingBox(BaseModel):
    """Pixel-space region of a detected object."""

    x: int
    y: int
    width: int = Field(ge=0)
    height: int = Field(ge=0)


class DetectedObject(BaseModel):
    """Object detected within a region of the image.

    Tags are ordered by the detector's own ranking, most salient first.
    """

    tags: list[Detection] = Field(default_factory=list)
    bounding_box: BoundingBox | None = None


class Caption(BaseModel):
    """Natural-language description of the whole image."""

    text: str
    confidence: float | None = Field(default=None, ge=0.0, le=1.0)


class AnalysisResult(BaseModel):
    """Caption, objects and tags produced for a single image."""

    caption: Caption | None = None
    objects: list[DetectedObject] | None = None
    tags: list[Detection] | None = None
