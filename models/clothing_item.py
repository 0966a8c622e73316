"""Clothing item data model and helpers."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Optional, Tuple

from models.taxonomy import normalise_tags, slot_for_category


def _ensure_list(value: Any) -> list:
    """Coerce a scalar or iterable into a list."""

    if value is None:
        return []
    if isinstance(value, (list, tuple, set, frozenset)):
        return list(value)
    return [value]


@dataclass(frozen=True)
class ClothingItem:
    """A single catalog entry owned by one user.

    The record is read-only for the outfit engine. Categories outside the
    taxonomy are tolerated here and simply never fill a slot.
    """

    item_id: str
    user_id: str
    category: str
    primary_color: str
    fit: str
    fabric: str
    occasion_tags: Tuple[str, ...] = field(default_factory=tuple)
    secondary_color: Optional[str] = None
    created_at: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "occasion_tags", tuple(normalise_tags(_ensure_list(self.occasion_tags))))

    @property
    def slot(self) -> Optional[str]:
        return slot_for_category(self.category)

    def has_occasion(self, occasion: str) -> bool:
        """Case-insensitive exact match against the item's occasion tags."""

        wanted = occasion.lower()
        return any(tag.lower() == wanted for tag in self.occasion_tags)

    def to_dict(self) -> Dict[str, Any]:
        payload = asdict(self)
        payload["occasion_tags"] = list(self.occasion_tags)
        return payload


def from_raw_metadata(metadata: Dict[str, Any]) -> ClothingItem:
    """Factory to build a :class:`ClothingItem` from a loose payload."""

    required_fields = ["item_id", "user_id", "category", "primary_color", "fit", "fabric", "occasion_tags"]
    missing = [name for name in required_fields if not metadata.get(name)]
    if missing:
        raise ValueError(f"Missing required fields for ClothingItem: {missing}")

    return ClothingItem(
        item_id=str(metadata["item_id"]),
        user_id=str(metadata["user_id"]),
        category=str(metadata["category"]),
        primary_color=str(metadata["primary_color"]),
        fit=str(metadata["fit"]),
        fabric=str(metadata["fabric"]),
        occasion_tags=tuple(_ensure_list(metadata.get("occasion_tags"))),
        secondary_color=metadata.get("secondary_color") or None,
        created_at=metadata.get("created_at"),
    )


__all__ = ["ClothingItem", "from_raw_metadata"]
