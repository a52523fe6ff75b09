"""Map raw image analysis results to pantry records."""

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType

from pantry_chef.domain.pantry import DEFAULT_CATEGORY, UNKNOWN_ITEM_NAME, PantryRecord
from pantry_chef.domain.vision import AnalysisResult, DetectedObject, Detection

_logger = logging.getLogger(__name__)

CATEGORY_TABLE: Mapping[str, str] = MappingProxyType(
    {
        "fruit": "Produce",
        "vegetable": "Produce",
        "apple": "Produce",
        "banana": "Produce",
        "orange": "Produce",
        "milk": "Dairy",
        "cheese": "Dairy",
        "yogurt": "Dairy",
        "beef": "Meat",
        "chicken": "Meat",
        "pork": "Meat",
        "fish": "Meat",
        "bread": "Bakery",
        "cereal": "Pantry",
        "pasta": "Pantry",
        "soda": "Pantry",
        "juice": "Pantry",
        "soft drink": "Pantry",
        "water": "Pantry",
    }
)


def select_top_object(objects: Sequence[DetectedObject]) -> Detection | None:
    """Return the leading tag of the object whose leading tag is most confident.

    Objects without tags are skipped. On equal confidence the earlier object
    wins.
    """
    leading_tags = [obj.tags[0] for obj in objects if obj.tags]
    if not leading_tags:
        return None
    return max(leading_tags, key=lambda tag: tag.confidence)


def select_top_tag(tags: Sequence[Detection]) -> Detection | None:
    """Return the most confident tag, preferring the earlier one on ties."""
    if not tags:
        return None
    return max(tags, key=lambda tag: tag.confidence)


def capitalize_first_letter(label: str) -> str:
    """Upper-case the first character only."""
    if not label:
        return label
    first = label[0].upper()
    if len(first) != 1:
        first = label[0]
    return first + label[1:]


def infer_category(
    tags: Sequence[Detection] | None,
    table: Mapping[str, str] = CATEGORY_TABLE,
) -> str:
    """Return the category of the first tag found in the table."""
    for tag in tags or ():
        category = table.get(tag.label.lower())
        if category is not None:
            _logger.info("Mapped category from tag '%s': %s", tag.label, category)
            return category
    return DEFAULT_CATEGORY


@dataclass(frozen=True)
class PantryMapper:
    """Builds pantry records from analysis results."""

    category_table: Mapping[str, str] = field(default_factory=lambda: CATEGORY_TABLE)

    def map(self, result: AnalysisResult) -> PantryRecord:
        """Map an analysis result to a pantry record."""
        description = None
        if result.caption is not None and result.caption.text:
            description = result.caption.text
            _logger.info("Mapped description: %s", description)

        item_name = UNKNOWN_ITEM_NAME
        confidence = 0.0
        # Any detected object shadows tags, even when no object carries a tag.
        if result.objects:
            chosen = select_top_object(result.objects)
            source = "object"
        else:
            chosen = select_top_tag(result.tags or [])
            source = "tag"
        if chosen is not None:
            item_name = capitalize_first_letter(chosen.label)
            confidence = chosen.confidence
            _logger.info("Mapped item name from %s: %s", source, item_name)

        return PantryRecord(
            item_name=item_name,
            description=description,
            category=infer_category(result.tags, self.category_table),
            estimated_expiry=None,
            confidence=confidence,
        )


def map_analysis_to_record(result: AnalysisResult) -> PantryRecord:
    """Map using the default category table."""
    return PantryMapper().map(result)
