"""Hex, RGB and HSV conversions plus color harmony predicates."""
from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass

logger = logging.getLogger(__name__)

_HEX_PATTERN = re.compile(r"#?([0-9a-f]{2})([0-9a-f]{2})([0-9a-f]{2})", re.IGNORECASE)


@dataclass(frozen=True)
class RGB:
    """8-bit RGB channels."""

    r: int
    g: int
    b: int


@dataclass(frozen=True)
class HSV:
    """Hue in degrees [0, 360), saturation and value as percentages."""

    h: int
    s: float
    v: float


BLACK = RGB(0, 0, 0)


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def hex_to_rgb(hex_color: str) -> RGB:
    """Parse ``#RRGGBB`` (or ``RRGGBB``) into RGB.

    Malformed input degrades to black instead of raising.
    """

    match = _HEX_PATTERN.fullmatch(hex_color) if isinstance(hex_color, str) else None
    if not match:
        logger.debug("Unparseable color %r, defaulting to black", hex_color)
        return BLACK
    return RGB(*(int(part, 16) for part in match.groups()))


def rgb_to_hsv(rgb: RGB) -> HSV:
    """Convert RGB to HSV with the hue rounded to whole degrees."""

    r, g, b = rgb.r / 255, rgb.g / 255, rgb.b / 255
    high = max(r, g, b)
    low = min(r, g, b)
    diff = high - low

    if diff == 0:
        hue = 0.0
    elif high == r:
        hue = (g - b) / diff
    elif high == g:
        hue = (b - r) / diff + 2
    else:
        hue = (r - g) / diff + 4

    degrees = _round_half_up(hue * 60)
    if degrees < 0:
        degrees += 360
    saturation = 0.0 if high == 0 else diff / high * 100
    return HSV(h=degrees % 360, s=saturation, v=high * 100)


def hex_to_hsv(hex_color: str) -> HSV:
    return rgb_to_hsv(hex_to_rgb(hex_color))


def hsv_to_rgb(hsv: HSV) -> RGB:
    """Reference inverse of :func:`rgb_to_hsv`, rounded to 8-bit channels."""

    s, v = hsv.s / 100, hsv.v / 100
    chroma = v * s
    sector = (hsv.h % 360) / 60
    x = chroma * (1 - abs(sector % 2 - 1))
    if sector < 1:
        r, g, b = chroma, x, 0.0
    elif sector < 2:
        r, g, b = x, chroma, 0.0
    elif sector < 3:
        r, g, b = 0.0, chroma, x
    elif sector < 4:
        r, g, b = 0.0, x, chroma
    elif sector < 5:
        r, g, b = x, 0.0, chroma
    else:
        r, g, b = chroma, 0.0, x
    m = v - chroma
    return RGB(*(_round_half_up((channel + m) * 255) for channel in (r, g, b)))


def rgb_to_hex(rgb: RGB) -> str:
    return f"#{rgb.r:02X}{rgb.g:02X}{rgb.b:02X}"


def is_neutral(hsv: HSV) -> bool:
    """Return True for greys, navy and beige/tan tones."""

    if hsv.s < 20:
        return True
    # navy
    if 210 <= hsv.h <= 240 and hsv.s < 60:
        return True
    # beige / tan
    if 30 <= hsv.h <= 50 and hsv.s < 40:
        return True
    return False


def hue_difference(hsv1: HSV, hsv2: HSV) -> int:
    """Absolute hue difference without wrap-around."""

    return abs(hsv1.h - hsv2.h)


def are_complementary(hsv1: HSV, hsv2: HSV) -> bool:
    """Return True for opposite hues.

    The near-identical branch (``>= 330`` or ``<= 30``) is part of the
    predicate as historically scored; changing it shifts every ranking.
    """

    diff = hue_difference(hsv1, hsv2)
    return 150 <= diff <= 210 or diff >= 330 or diff <= 30


def are_analogous(hsv1: HSV, hsv2: HSV) -> bool:
    return hue_difference(hsv1, hsv2) <= 60


def calculate_contrast(hsv1: HSV, hsv2: HSV) -> float:
    """Combined value and saturation distance normalised to [0, 1]."""

    return (abs(hsv1.v - hsv2.v) + abs(hsv1.s - hsv2.s)) / 200


__all__ = [
    "RGB",
    "HSV",
    "BLACK",
    "hex_to_rgb",
    "rgb_to_hsv",
    "hex_to_hsv",
    "hsv_to_rgb",
    "rgb_to_hex",
    "is_neutral",
    "hue_difference",
    "are_complementary",
    "are_analogous",
    "calculate_contrast",
]
