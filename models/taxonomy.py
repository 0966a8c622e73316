"""Canonical taxonomy definitions for clothing items and outfits.

This module centralises the fixed enums used across the outfit engine:
categories, the slots they fill, occasions, fits and fabrics. The
category to slot mapping is an immutable lookup table so that adding a
category is a one-line data change.
"""

from types import MappingProxyType
from typing import Iterable, List, Mapping, Optional

SLOT_TOP = "top"
SLOT_BOTTOM = "bottom"
SLOT_FOOTWEAR = "footwear"
SLOT_LAYER = "layer"

SLOTS = (SLOT_TOP, SLOT_BOTTOM, SLOT_FOOTWEAR, SLOT_LAYER)
REQUIRED_SLOTS = (SLOT_TOP, SLOT_BOTTOM, SLOT_FOOTWEAR)

CATEGORY_SLOTS: Mapping[str, str] = MappingProxyType(
    {
        "shirt": SLOT_TOP,
        "tshirt": SLOT_TOP,
        "trousers": SLOT_BOTTOM,
        "jeans": SLOT_BOTTOM,
        "sneakers": SLOT_FOOTWEAR,
        "formal_shoes": SLOT_FOOTWEAR,
        "boots": SLOT_FOOTWEAR,
        "blazer": SLOT_LAYER,
    }
)

CATEGORIES = tuple(CATEGORY_SLOTS)
OCCASIONS = ("formal", "work", "casual", "college", "party", "travel")
FITS = ("slim", "regular", "oversized")
FABRICS = ("cotton", "denim", "wool", "leather", "synthetic")

FORMAL_OCCASIONS = frozenset({"formal", "work"})
BOLD_OCCASIONS = frozenset({"casual", "party"})
RELAXED_OCCASIONS = frozenset({"casual", "college", "party"})
SNEAKER_OCCASIONS = frozenset({"casual", "college"})


def slot_for_category(category: str) -> Optional[str]:
    """Return the slot a category fills, or ``None`` for unmapped categories."""

    return CATEGORY_SLOTS.get(category)


def normalise_tags(values: Iterable[str]) -> List[str]:
    """Drop empty and duplicate occasion tags, keeping first-seen order.

    Tags are kept verbatim. Occasion matching downstream is an exact,
    case-insensitive comparison, so surrounding whitespace is significant.
    """

    normalised = []
    seen = set()
    for value in values:
        tag = str(value)
        if tag and tag not in seen:
            normalised.append(tag)
            seen.add(tag)
    return normalised


__all__ = [
    "SLOT_TOP",
    "SLOT_BOTTOM",
    "SLOT_FOOTWEAR",
    "SLOT_LAYER",
    "SLOTS",
    "REQUIRED_SLOTS",
    "CATEGORY_SLOTS",
    "CATEGORIES",
    "OCCASIONS",
    "FITS",
    "FABRICS",
    "FORMAL_OCCASIONS",
    "BOLD_OCCASIONS",
    "RELAXED_OCCASIONS",
    "SNEAKER_OCCASIONS",
    "slot_for_category",
    "normalise_tags",
]
