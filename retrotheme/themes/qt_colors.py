"""QColor-backed perceptual adjusters."""

from __future__ import annotations

from PySide6.QtGui import QColor

from retrotheme.errors import InvalidColorFormat
from retrotheme.themes.colors import ColorAdjusters

# QColor.lighter/darker take a percentage where 100 is the identity.
_NEUTRAL_WARMTH = 0.5
_WARMTH_SPAN = 100


def _to_qcolor(color: str) -> QColor:
    qcolor = QColor(color) if isinstance(color, str) else QColor()
    if not qcolor.isValid():
        raise InvalidColorFormat(color)
    return qcolor


def qt_adjust_color_warmth(color: str, factor: float) -> str:
    """Lighten for factors above 0.5, darken below it."""
    qcolor = _to_qcolor(color)
    percent = int(round(100 + (factor - _NEUTRAL_WARMTH) * _WARMTH_SPAN * 2))
    if percent == 100:
        return qcolor.name()
    if percent > 100:
        return qcolor.lighter(percent).name()
    return qcolor.darker(int(round(10_000 / max(percent, 1)))).name()


def qt_adjust_brightness(color: str, amount: float) -> str:
    """Lighten by ``amount`` percent, or darken when negative."""
    qcolor = _to_qcolor(color)
    if amount == 0:
        return qcolor.name()
    if amount > 0:
        return qcolor.lighter(int(round(100 + amount))).name()
    return qcolor.darker(int(round(100 - amount))).name()


def qt_adjusters() -> ColorAdjusters:
    return ColorAdjusters(warmth=qt_adjust_color_warmth, brightness=qt_adjust_brightness)
