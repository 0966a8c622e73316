"""Evaluation scenarios exercising occasions over the sample wardrobe."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List

from models.sample_wardrobe import SAMPLE_ITEMS


@dataclass
class EvaluationScenario:
    name: str
    description: str
    occasion: str
    wardrobe_items: List[Dict[str, Any]]
    expectations: Dict[str, object]
    max_outfits: int = 10


def _wardrobe_fixtures() -> List[Dict[str, Any]]:
    return [dict(item) for item in SAMPLE_ITEMS]


SCENARIOS: List[EvaluationScenario] = [
    EvaluationScenario(
        name="formal_dinner",
        description="Only a shirt, wool trousers and oxfords qualify; the blazer is layered on.",
        occasion="formal",
        wardrobe_items=_wardrobe_fixtures(),
        expectations={
            "min_outfits": 1,
            "max_outfits": 1,
            "requires_layer": True,
            "formal_rules": True,
            "min_color_score": 0.75,
        },
    ),
    EvaluationScenario(
        name="office_day",
        description="Work outfits keep untagged sneakers out and attach the blazer.",
        occasion="work",
        wardrobe_items=_wardrobe_fixtures(),
        expectations={
            "min_outfits": 4,
            "max_outfits": 4,
            "requires_layer": True,
            "work_sneakers_tagged": True,
        },
    ),
    EvaluationScenario(
        name="weekend_casual",
        description="Full cross-product of casual items, no layering.",
        occasion="casual",
        wardrobe_items=_wardrobe_fixtures(),
        expectations={"min_outfits": 10, "max_outfits": 10, "forbids_layer": True},
    ),
    EvaluationScenario(
        name="weekend_casual_top3",
        description="Truncation keeps only the best three.",
        occasion="Casual",
        wardrobe_items=_wardrobe_fixtures(),
        max_outfits=3,
        expectations={"min_outfits": 3, "max_outfits": 3, "forbids_layer": True},
    ),
    EvaluationScenario(
        name="party_without_bottoms",
        description="No bottoms are tagged for parties, so nothing can be assembled.",
        occasion="party",
        wardrobe_items=_wardrobe_fixtures(),
        expectations={"min_outfits": 0, "max_outfits": 0},
    ),
    EvaluationScenario(
        name="travel_untagged",
        description="Nothing in the sample wardrobe is tagged for travel.",
        occasion="travel",
        wardrobe_items=_wardrobe_fixtures(),
        expectations={"min_outfits": 0, "max_outfits": 0},
    ),
]


__all__ = ["EvaluationScenario", "SCENARIOS"]
