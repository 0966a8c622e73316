"""Deterministic outfit enumeration and ranking with transparent diagnostics."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional

from logic.color_scoring import calculate_color_compatibility
from logic.footwear_advisor import get_shoe_recommendation
from logic.outfit_scoring import (
    calculate_fabric_compatibility,
    calculate_fit_compatibility,
    combine_scores,
)
from models.clothing_item import ClothingItem
from models.outfit import OutfitCombination
from models.taxonomy import FORMAL_OCCASIONS, REQUIRED_SLOTS, SLOT_BOTTOM, SLOT_FOOTWEAR, SLOT_LAYER, SLOT_TOP, SLOTS

logger = logging.getLogger(__name__)

DEFAULT_MAX_OUTFITS = 10


@dataclass(frozen=True)
class OutfitGenerationResult:
    outfits: List[OutfitCombination]
    diagnostics: Dict[str, object]


def categorize_items(items: Iterable[ClothingItem]) -> Dict[str, List[ClothingItem]]:
    """Partition items into slots, keeping catalog order and dropping unmapped categories."""

    grouped: Dict[str, List[ClothingItem]] = {slot: [] for slot in SLOTS}
    for item in items:
        slot = item.slot
        if slot is None:
            logger.debug("Ignoring item %s with unmapped category %s", item.item_id, item.category)
            continue
        grouped[slot].append(item)
    return grouped


def is_item_suitable_for_occasion(item: ClothingItem, occasion: str) -> bool:
    return item.has_occasion(occasion)


def meets_occasion_requirements(
    top: ClothingItem, bottom: ClothingItem, footwear: ClothingItem, occasion: str
) -> bool:
    """Hard gate applied before scoring a top/bottom/footwear triple."""

    occasion_key = occasion.lower()
    if occasion_key == "formal":
        if footwear.category != "formal_shoes":
            return False
        if top.category == "tshirt":
            return False
        if bottom.category == "jeans":
            return False
    if occasion_key == "work":
        # sneakers only pass when the pair itself is tagged for work
        if footwear.category == "sneakers" and "work" not in footwear.occasion_tags:
            return False
    return True


def _select_layer(layers: List[ClothingItem], occasion: str) -> Optional[ClothingItem]:
    if occasion.lower() not in FORMAL_OCCASIONS:
        return None
    return next((layer for layer in layers if is_item_suitable_for_occasion(layer, occasion)), None)


def score_combination(
    top: ClothingItem,
    bottom: ClothingItem,
    footwear: ClothingItem,
    occasion: str,
    layer: Optional[ClothingItem] = None,
) -> OutfitCombination:
    """Score one triple and package it as an :class:`OutfitCombination`."""

    color_result = calculate_color_compatibility(
        top.primary_color, bottom.primary_color, footwear.primary_color, occasion
    )
    fit_score = calculate_fit_compatibility(top, bottom)
    fabric_score = calculate_fabric_compatibility(top, bottom, occasion)
    return OutfitCombination(
        top=top,
        bottom=bottom,
        footwear=footwear,
        layer=layer,
        compatibility_score=combine_scores(color_result.score, fit_score, fabric_score),
        color_score=color_result.score,
        fit_score=fit_score,
        fabric_score=fabric_score,
        explanation=color_result.explanation,
        shoe_recommendation=get_shoe_recommendation(top.primary_color, bottom.primary_color, occasion),
    )


def build_outfits(
    items: Iterable[ClothingItem], occasion: str, max_outfits: int = DEFAULT_MAX_OUTFITS
) -> OutfitGenerationResult:
    """Enumerate, gate, score and rank outfits for an occasion."""

    grouped = categorize_items(items)
    eligible = {
        slot: [item for item in grouped[slot] if is_item_suitable_for_occasion(item, occasion)]
        for slot in REQUIRED_SLOTS
    }
    diagnostics: Dict[str, object] = {
        "occasion": occasion,
        "eligible_counts": {slot: len(values) for slot, values in eligible.items()},
        "combinations_considered": 0,
        "combinations_rejected": 0,
        "combinations_scored": 0,
    }

    if not all(eligible[slot] for slot in REQUIRED_SLOTS):
        logger.info("Insufficient eligible items for occasion=%s: %s", occasion, diagnostics["eligible_counts"])
        diagnostics["reason"] = "missing_required_slots"
        return OutfitGenerationResult(outfits=[], diagnostics=diagnostics)

    layer = _select_layer(grouped[SLOT_LAYER], occasion)
    outfits: List[OutfitCombination] = []
    for top in eligible[SLOT_TOP]:
        for bottom in eligible[SLOT_BOTTOM]:
            for footwear in eligible[SLOT_FOOTWEAR]:
                diagnostics["combinations_considered"] += 1
                if not meets_occasion_requirements(top, bottom, footwear, occasion):
                    diagnostics["combinations_rejected"] += 1
                    continue
                outfits.append(score_combination(top, bottom, footwear, occasion, layer=layer))
    diagnostics["combinations_scored"] = len(outfits)

    # sorted() is stable, so ties keep enumeration order
    ranked = sorted(outfits, key=lambda outfit: outfit.compatibility_score, reverse=True)
    selected = ranked[: max(0, max_outfits)]
    diagnostics["returned"] = len(selected)
    diagnostics["best_score"] = selected[0].compatibility_score if selected else None
    diagnostics["layer_id"] = layer.item_id if layer else None
    logger.info(
        "Generated %s outfits for occasion=%s (scored=%s, rejected=%s)",
        len(selected),
        occasion,
        diagnostics["combinations_scored"],
        diagnostics["combinations_rejected"],
    )
    return OutfitGenerationResult(outfits=selected, diagnostics=diagnostics)


def generate_outfits(
    items: Iterable[ClothingItem], occasion: str, max_outfits: int = DEFAULT_MAX_OUTFITS
) -> List[OutfitCombination]:
    """Return up to ``max_outfits`` outfits ranked by compatibility score."""

    return build_outfits(items, occasion, max_outfits).outfits


__all__ = [
    "DEFAULT_MAX_OUTFITS",
    "OutfitGenerationResult",
    "build_outfits",
    "categorize_items",
    "generate_outfits",
    "is_item_suitable_for_occasion",
    "meets_occasion_requirements",
    "score_combination",
]
