"""Tests for footwear advice."""

from pathlib import Path
import sys

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from logic.footwear_advisor import DEFAULT_ADVICE, get_shoe_recommendation


@pytest.mark.parametrize("occasion", ["formal", "work"])
def test_formal_advice_follows_bottom_color(occasion: str) -> None:
    assert get_shoe_recommendation("#FFFFFF", "#000000", occasion) == "Black leather shoes for formal elegance"
    assert get_shoe_recommendation("#FFFFFF", "#8B7355", occasion) == "Brown leather shoes complement earth tones"
    assert get_shoe_recommendation("#FFFFFF", "#FFFFFF", occasion) == "Dark leather shoes maintain professionalism"


@pytest.mark.parametrize("occasion", ["casual", "college"])
def test_casual_advice(occasion: str) -> None:
    assert get_shoe_recommendation("#FFFFFF", "#000000", occasion) == "White sneakers add a fresh touch"
    assert get_shoe_recommendation("#FF0000", "#000000", occasion) == "Neutral sneakers balance bold colors"
    assert get_shoe_recommendation("#87CEEB", "#8B5A55", occasion) == "Casual sneakers complete the look"


def test_party_advice() -> None:
    assert get_shoe_recommendation("#000000", "#1E3A5F", "party") == "Bold sneakers or boots add personality"
    assert get_shoe_recommendation("#FFFFFF", "#1E3A5F", "party") == "Statement footwear to stand out"


@pytest.mark.parametrize("occasion", ["travel", "Formal", "", "gala"])
def test_other_occasions_fall_back(occasion: str) -> None:
    assert get_shoe_recommendation("#000000", "#000000", occasion) == DEFAULT_ADVICE
