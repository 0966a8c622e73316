"""Rule-based color compatibility scoring for a top, bottom and footwear."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, List, Tuple

from models.color_model import (
    HSV,
    are_analogous,
    are_complementary,
    calculate_contrast,
    hex_to_hsv,
    hue_difference,
    is_neutral,
)
from models.taxonomy import BOLD_OCCASIONS, FORMAL_OCCASIONS, RELAXED_OCCASIONS

logger = logging.getLogger(__name__)

BASE_SCORE = 0.5
FALLBACK_EXPLANATION = "Standard color combination"


@dataclass(frozen=True)
class ColorContext:
    """Derived HSV values and flags shared by every color rule."""

    top: HSV
    bottom: HSV
    shoe: HSV
    occasion: str

    @property
    def top_neutral(self) -> bool:
        return is_neutral(self.top)

    @property
    def bottom_neutral(self) -> bool:
        return is_neutral(self.bottom)

    @property
    def shoe_neutral(self) -> bool:
        return is_neutral(self.shoe)

    @property
    def all_neutral(self) -> bool:
        return self.top_neutral and self.bottom_neutral and self.shoe_neutral

    @property
    def contrast(self) -> float:
        return calculate_contrast(self.top, self.bottom)

    @property
    def complementary(self) -> bool:
        return are_complementary(self.top, self.bottom)


@dataclass(frozen=True)
class ColorRule:
    name: str
    applies: Callable[[ColorContext], bool]
    delta: float
    rationale: str


@dataclass(frozen=True)
class ColorCompatibilityResult:
    score: float
    explanation: str
    rules: Tuple[str, ...] = ()


def _clamp(value: float) -> float:
    return max(0.0, min(1.0, value))


COLOR_RULES: Tuple[ColorRule, ...] = (
    ColorRule(
        "all_neutral",
        lambda c: c.all_neutral,
        0.30,
        "All neutral colors create a sophisticated look",
    ),
    ColorRule(
        "neutral_footwear_balance",
        lambda c: not c.all_neutral and (c.top_neutral or c.bottom_neutral) and c.shoe_neutral,
        0.20,
        "Neutral shoes balance the outfit",
    ),
    ColorRule(
        "dark_over_light",
        lambda c: c.top.v < 40 and c.bottom.v > 60,
        0.15,
        "Dark top with light bottom creates visual balance",
    ),
    ColorRule(
        "light_over_dark",
        lambda c: c.top.v > 60 and c.bottom.v < 40,
        0.10,
        "Light top with dark bottom is a classic combination",
    ),
    ColorRule(
        "complementary_bold_occasion",
        lambda c: c.complementary and c.occasion in BOLD_OCCASIONS,
        0.10,
        "Complementary colors add visual interest",
    ),
    ColorRule(
        "complementary_muted_occasion",
        lambda c: c.complementary and c.occasion not in BOLD_OCCASIONS,
        -0.10,
        "Complementary colors may be too bold for this occasion",
    ),
    ColorRule(
        "analogous",
        lambda c: are_analogous(c.top, c.bottom) and not c.top_neutral and not c.bottom_neutral,
        0.15,
        "Analogous colors create harmony",
    ),
    ColorRule(
        "low_contrast_formal",
        lambda c: c.occasion in FORMAL_OCCASIONS and c.contrast < 0.3,
        0.15,
        "Low contrast is appropriate for formal settings",
    ),
    ColorRule(
        "high_contrast_formal",
        lambda c: c.occasion in FORMAL_OCCASIONS and c.contrast > 0.6,
        -0.10,
        "High contrast may be too casual for this occasion",
    ),
    ColorRule(
        "mid_contrast_relaxed",
        lambda c: c.occasion in RELAXED_OCCASIONS and 0.4 < c.contrast < 0.7,
        0.10,
        "Good contrast adds visual appeal",
    ),
    ColorRule(
        "bold_top_neutral_shoe",
        lambda c: c.top.s > 60 and c.top.v > 50 and c.shoe_neutral,
        0.10,
        "Neutral footwear balances the bold top",
    ),
    ColorRule(
        "all_bold",
        lambda c: c.top.s > 60 and c.bottom.s > 60 and c.shoe.s > 60,
        -0.20,
        "Too many bold colors can be overwhelming",
    ),
    ColorRule(
        "monochromatic",
        lambda c: hue_difference(c.top, c.bottom) < 30
        and abs(c.top.v - c.bottom.v) > 20
        and not c.top_neutral,
        0.15,
        "Monochromatic palette creates cohesion",
    ),
)


def calculate_color_compatibility(
    top_color: str, bottom_color: str, shoe_color: str, occasion: str
) -> ColorCompatibilityResult:
    """Score three hex colors for an occasion.

    Rules run in table order and stack; the total is clamped to [0, 1].
    Occasion matching is case-sensitive, so unknown labels only miss the
    occasion-specific rules.
    """

    context = ColorContext(
        top=hex_to_hsv(top_color),
        bottom=hex_to_hsv(bottom_color),
        shoe=hex_to_hsv(shoe_color),
        occasion=occasion,
    )
    score = BASE_SCORE
    reasons: List[str] = []
    triggered: List[str] = []
    for rule in COLOR_RULES:
        if rule.applies(context):
            score += rule.delta
            reasons.append(rule.rationale)
            triggered.append(rule.name)

    logger.debug(
        "color compatibility top=%s bottom=%s shoe=%s occasion=%s rules=%s",
        top_color,
        bottom_color,
        shoe_color,
        occasion,
        triggered,
    )
    return ColorCompatibilityResult(
        score=_clamp(score),
        explanation=". ".join(reasons) or FALLBACK_EXPLANATION,
        rules=tuple(triggered),
    )


__all__ = [
    "BASE_SCORE",
    "FALLBACK_EXPLANATION",
    "COLOR_RULES",
    "ColorContext",
    "ColorRule",
    "ColorCompatibilityResult",
    "calculate_color_compatibility",
]
