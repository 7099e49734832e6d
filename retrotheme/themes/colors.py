"""Color decomposition, warmth scoring and pluggable adjusters."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable

from retrotheme.errors import InvalidColorFormat

_HEX6_RE = re.compile(r"^[0-9a-fA-F]{6}$")

WarmthAdjuster = Callable[[str, float], str]
BrightnessAdjuster = Callable[[str, float], str]


@dataclass(frozen=True, slots=True)
class Rgb:
    """8-bit RGB channels."""

    r: int
    g: int
    b: int


def extract_rgb(color: str) -> Rgb:
    """Split a ``#rrggbb`` literal into its red, green and blue channels."""
    if not isinstance(color, str):
        raise InvalidColorFormat(color)
    digits = color[1:] if color.startswith("#") else color
    if not _HEX6_RE.match(digits):
        raise InvalidColorFormat(color)
    return Rgb(
        r=int(digits[0:2], 16),
        g=int(digits[2:4], 16),
        b=int(digits[4:6], 16),
    )


def color_warmth(color: str) -> float:
    """Heuristic warmth score: red and yellow weigh against blue."""
    rgb = extract_rgb(color)
    return (rgb.r + rgb.g * 0.8) / (rgb.r + rgb.g + rgb.b + 1)


def adjust_color_warmth(color: str, factor: float) -> str:
    """Reference warmth adjustment. Returns the color unchanged."""
    return color


def adjust_brightness(color: str, amount: float) -> str:
    """Reference brightness adjustment. Returns the color unchanged."""
    return color


@dataclass(frozen=True, slots=True)
class ColorAdjusters:
    """The pair of pure color functions used when deriving scales."""

    warmth: WarmthAdjuster = adjust_color_warmth
    brightness: BrightnessAdjuster = adjust_brightness
