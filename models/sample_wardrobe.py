"""Sample wardrobe used for local demos and evaluation runs."""
from __future__ import annotations

from typing import Any, Dict, List

from models.clothing_item import ClothingItem, from_raw_metadata

SAMPLE_ITEMS: List[Dict[str, Any]] = [
    # tops
    {"item_id": "shirt-white", "category": "shirt", "primary_color": "#FFFFFF", "fit": "slim",
     "fabric": "cotton", "occasion_tags": ["formal", "work"]},
    {"item_id": "shirt-sky", "category": "shirt", "primary_color": "#87CEEB", "fit": "regular",
     "fabric": "cotton", "occasion_tags": ["casual", "work"]},
    {"item_id": "tee-black", "category": "tshirt", "primary_color": "#000000", "fit": "regular",
     "fabric": "cotton", "occasion_tags": ["casual", "college"]},
    {"item_id": "tee-white", "category": "tshirt", "primary_color": "#FFFFFF", "fit": "oversized",
     "fabric": "cotton", "occasion_tags": ["casual", "college", "party"]},
    # bottoms
    {"item_id": "trousers-charcoal", "category": "trousers", "primary_color": "#2C3E50", "fit": "slim",
     "fabric": "wool", "occasion_tags": ["formal", "work"]},
    {"item_id": "jeans-indigo", "category": "jeans", "primary_color": "#1E3A5F", "fit": "regular",
     "fabric": "denim", "occasion_tags": ["casual", "college"]},
    {"item_id": "trousers-khaki", "category": "trousers", "primary_color": "#8B7355", "fit": "regular",
     "fabric": "cotton", "occasion_tags": ["casual", "work"]},
    # footwear
    {"item_id": "oxfords-black", "category": "formal_shoes", "primary_color": "#000000", "fit": "regular",
     "fabric": "leather", "occasion_tags": ["formal", "work"]},
    {"item_id": "sneakers-white", "category": "sneakers", "primary_color": "#FFFFFF", "fit": "regular",
     "fabric": "synthetic", "occasion_tags": ["casual", "college", "party"]},
    {"item_id": "boots-brown", "category": "boots", "primary_color": "#654321", "fit": "regular",
     "fabric": "leather", "occasion_tags": ["casual", "party"]},
    # layers
    {"item_id": "blazer-navy", "category": "blazer", "primary_color": "#2C3E50", "fit": "slim",
     "fabric": "wool", "occasion_tags": ["formal", "work", "party"]},
]


def build_sample_wardrobe(user_id: str = "demo") -> List[ClothingItem]:
    """Return the sample catalog owned by ``user_id``."""

    return [from_raw_metadata({**item, "user_id": user_id}) for item in SAMPLE_ITEMS]


__all__ = ["SAMPLE_ITEMS", "build_sample_wardrobe"]
