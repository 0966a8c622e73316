"""Generated outfit records."""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from models.clothing_item import ClothingItem


@dataclass(frozen=True)
class OutfitCombination:
    """One ranked outfit.

    ``compatibility_score`` is the weighted color, fit and fabric total and is
    not re-clamped, so it may exceed 1.0. ``color_score`` is always in [0, 1].
    """

    top: ClothingItem
    bottom: ClothingItem
    footwear: ClothingItem
    compatibility_score: float
    color_score: float
    explanation: str
    shoe_recommendation: str
    layer: Optional[ClothingItem] = None
    fit_score: float = 0.0
    fabric_score: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "top": self.top.to_dict(),
            "bottom": self.bottom.to_dict(),
            "footwear": self.footwear.to_dict(),
            "layer": self.layer.to_dict() if self.layer else None,
            "compatibility_score": self.compatibility_score,
            "color_score": self.color_score,
            "fit_score": self.fit_score,
            "fabric_score": self.fabric_score,
            "explanation": self.explanation,
            "shoe_recommendation": self.shoe_recommendation,
        }
