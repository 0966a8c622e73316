"""Deterministic fit, fabric and combined scoring for candidate outfits."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Tuple

from models.clothing_item import ClothingItem
from models.color_model import hex_to_hsv
from models.outfit import OutfitCombination
from models.taxonomy import OCCASIONS, SNEAKER_OCCASIONS

WEIGHTS = {
    "color": 0.5,
    "fit": 1.0,
    "fabric": 1.0,
}

DEFAULT_FIT_SCORE = 0.15
DEFAULT_FABRIC_SCORE = 0.15

_FORMAL_FABRICS = frozenset({"cotton", "wool"})


@dataclass(frozen=True)
class PairRule:
    """First-match rule over a (top, bottom, occasion) pair."""

    name: str
    applies: Callable[[ClothingItem, ClothingItem, str], bool]
    score: float


FIT_RULES: Tuple[PairRule, ...] = (
    PairRule("matching_fit", lambda top, bottom, _: top.fit == bottom.fit, 0.3),
    PairRule("slim_over_regular", lambda top, bottom, _: top.fit == "slim" and bottom.fit == "regular", 0.25),
    PairRule("regular_over_slim", lambda top, bottom, _: top.fit == "regular" and bottom.fit == "slim", 0.2),
    PairRule("oversized", lambda top, bottom, _: "oversized" in (top.fit, bottom.fit), 0.1),
)

FABRIC_RULES: Tuple[PairRule, ...] = (
    PairRule(
        "formal_natural_fibres",
        lambda top, bottom, occasion: occasion == "formal"
        and top.fabric in _FORMAL_FABRICS
        and bottom.fabric in _FORMAL_FABRICS,
        0.25,
    ),
    PairRule(
        "casual_denim",
        lambda top, bottom, occasion: occasion in SNEAKER_OCCASIONS and bottom.fabric == "denim",
        0.2,
    ),
    PairRule("cotton_over_wool", lambda top, bottom, _: top.fabric == "cotton" and bottom.fabric == "wool", 0.2),
)


def _first_match(rules: Tuple[PairRule, ...], top: ClothingItem, bottom: ClothingItem, occasion: str, default: float) -> float:
    for rule in rules:
        if rule.applies(top, bottom, occasion):
            return rule.score
    return default


def calculate_fit_compatibility(top: ClothingItem, bottom: ClothingItem) -> float:
    return _first_match(FIT_RULES, top, bottom, "", DEFAULT_FIT_SCORE)


def calculate_fabric_compatibility(top: ClothingItem, bottom: ClothingItem, occasion: str) -> float:
    """Fabric pairing score; the occasion is compared case-insensitively."""

    return _first_match(FABRIC_RULES, top, bottom, occasion.lower(), DEFAULT_FABRIC_SCORE)


def combine_scores(color_score: float, fit_score: float, fabric_score: float) -> float:
    """Weighted total of the sub scores.

    The sum is intentionally left unclamped and can exceed 1.0.
    """

    return color_score * WEIGHTS["color"] + fit_score * WEIGHTS["fit"] + fabric_score * WEIGHTS["fabric"]


def extract_outfit_features(outfit: OutfitCombination, occasion: str | None = None) -> Dict[str, float]:
    """Flatten an outfit into numeric features for offline analysis."""

    features: Dict[str, float] = {}
    for prefix, item in (("top", outfit.top), ("bottom", outfit.bottom), ("shoe", outfit.footwear)):
        hsv = hex_to_hsv(item.primary_color)
        features[f"{prefix}_hue"] = float(hsv.h)
        features[f"{prefix}_saturation"] = hsv.s
        features[f"{prefix}_value"] = hsv.v
    features["fit_match"] = 1.0 if outfit.top.fit == outfit.bottom.fit else 0.0
    features["has_layer"] = 1.0 if outfit.layer else 0.0
    wanted = (occasion or "").lower()
    for name in OCCASIONS:
        features[f"occasion_{name}"] = 1.0 if wanted == name else 0.0
    return features


__all__ = [
    "WEIGHTS",
    "FIT_RULES",
    "FABRIC_RULES",
    "PairRule",
    "calculate_fit_compatibility",
    "calculate_fabric_compatibility",
    "combine_scores",
    "extract_outfit_features",
]
