"""Pydantic models for API responses."""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from pantry_chef.domain.pantry import PantryRecord


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PantryAiData(_CamelModel):
    """Pantry item payload."""

    item_name: str
    description: str | None = None
    category: str = "Other"
    estimated_expiry: str | None = None
    nutritional_info: dict[str, object] = Field(default_factory=dict)
    confidence: float = 0.0

    @classmethod
    def from_record(cls, record: PantryRecord) -> "PantryAiData":
        """Build the payload from a pantry record."""
        return cls(
            item_name=record.item_name,
            description=record.description,
            category=record.category,
            estimated_expiry=record.estimated_expiry,
            nutritional_info=dict(record.nutritional_info),
            confidence=record.confidence,
        )


class PantryAiResponse(_CamelModel):
    """Success/error envelope returned by the pantry image endpoint."""

    success: bool
    data: PantryAiData | None = None
    error: str | None = None
