"""Textual footwear advice, independent of the numeric outfit score."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, FrozenSet, Tuple

from models.color_model import HSV, hex_to_hsv, is_neutral
from models.taxonomy import FORMAL_OCCASIONS, SNEAKER_OCCASIONS

DEFAULT_ADVICE = "Versatile neutral footwear"


@dataclass(frozen=True)
class FootwearRule:
    occasions: FrozenSet[str]
    applies: Callable[[HSV, HSV], bool]
    advice: str


def _always(_top: HSV, _bottom: HSV) -> bool:
    return True


FOOTWEAR_RULES: Tuple[FootwearRule, ...] = (
    FootwearRule(FORMAL_OCCASIONS, lambda top, bottom: bottom.v < 30, "Black leather shoes for formal elegance"),
    FootwearRule(
        FORMAL_OCCASIONS,
        lambda top, bottom: 20 <= bottom.h <= 40,
        "Brown leather shoes complement earth tones",
    ),
    FootwearRule(FORMAL_OCCASIONS, _always, "Dark leather shoes maintain professionalism"),
    FootwearRule(
        SNEAKER_OCCASIONS,
        lambda top, bottom: is_neutral(top) and is_neutral(bottom),
        "White sneakers add a fresh touch",
    ),
    FootwearRule(
        SNEAKER_OCCASIONS,
        lambda top, bottom: top.s > 60 or bottom.s > 60,
        "Neutral sneakers balance bold colors",
    ),
    FootwearRule(SNEAKER_OCCASIONS, _always, "Casual sneakers complete the look"),
    FootwearRule(
        frozenset({"party"}),
        lambda top, bottom: top.v < 40 and bottom.v < 40,
        "Bold sneakers or boots add personality",
    ),
    FootwearRule(frozenset({"party"}), _always, "Statement footwear to stand out"),
)


def get_shoe_recommendation(top_color: str, bottom_color: str, occasion: str) -> str:
    """Return the first matching footwear advice for the occasion."""

    top = hex_to_hsv(top_color)
    bottom = hex_to_hsv(bottom_color)
    for rule in FOOTWEAR_RULES:
        if occasion in rule.occasions and rule.applies(top, bottom):
            return rule.advice
    return DEFAULT_ADVICE


__all__ = ["DEFAULT_ADVICE", "FOOTWEAR_RULES", "FootwearRule", "get_shoe_recommendation"]
