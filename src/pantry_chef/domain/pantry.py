"""Pantry domain models."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

UNKNOWN_ITEM_NAME = "Unknown Item"
DEFAULT_CATEGORY = "Other"


def _empty_mapping() -> Mapping[str, object]:
    return MappingProxyType({})


@dataclass(frozen=True)
class PantryRecord:
    """Single pantry item inferred from an image analysis."""

    item_name: str = UNKNOWN_ITEM_NAME
    description: str | None = None
    category: str = DEFAULT_CATEGORY
    # Reserved until expiry and nutrition inference exist.
    estimated_expiry: str | None = None
    nutritional_info: Mapping[str, object] = field(
        default_factory=_empty_mapping, hash=False
    )
    confidence: float = 0.0
