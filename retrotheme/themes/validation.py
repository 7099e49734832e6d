"""Retro business rules.

Only two rules are hard failures: a base theme must be present, and a color
override must carry the neutral, primary and secondary palettes. The warmth,
font and shadow checks are advisories. They are logged and collected in the
returned report but never abort an operation.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from typing import Any, Iterator

from retrotheme.errors import InvalidBaseTheme, InvalidColorFormat, MissingRequiredPalette
from retrotheme.themes.colors import color_warmth
from retrotheme.themes.constants import REQUIRED_PALETTES, WARMTH_THRESHOLD
from retrotheme.themes.models import Advisory, ValidationReport

logger = logging.getLogger("retrotheme.validation")

_MONOSPACE_MARKERS = ("monospace", "Courier")
_BLACK_SHADOW_RE = re.compile(
    r"rgba?\(\s*0\s*,\s*0\s*,\s*0\s*[,)]|#0{3}(?:0{3})?(?![0-9a-fA-F])|\bblack\b",
    re.IGNORECASE,
)


def validate_overrides(
    base_theme: object,
    overrides: Mapping[str, Any],
    *,
    log_advisories: bool = True,
) -> ValidationReport:
    """Check an override tree against the retro rules.

    Raises InvalidBaseTheme or MissingRequiredPalette on hard failures.
    Advisories are logged unless ``log_advisories`` is False.
    """
    if base_theme is None:
        raise InvalidBaseTheme()

    advisories: list[Advisory] = []
    color = overrides.get("color")
    if color is not None:
        _check_required_palettes(color)
        advisories.extend(_check_color_warmth(color))
    advisories.extend(_check_typography(overrides.get("typography")))
    advisories.extend(_check_shadows(overrides.get("shadow")))

    if log_advisories:
        for advisory in advisories:
            logger.warning("%s: %s", advisory.path, advisory.message)
    return ValidationReport(advisories=tuple(advisories))


def _check_required_palettes(color: Any) -> None:
    if isinstance(color, Mapping) and isinstance(color.get("palette"), Mapping):
        palettes, prefix = color["palette"], "color.palette"
    else:
        palettes, prefix = color, "color"
    for name in REQUIRED_PALETTES:
        if not isinstance(palettes, Mapping) or not palettes.get(name):
            raise MissingRequiredPalette(name, path=f"{prefix}.{name}")


def _check_color_warmth(color: Mapping[str, Any]) -> Iterator[Advisory]:
    for path, value in _iter_leaves(color, "color"):
        if not isinstance(value, str) or not value.startswith("#"):
            continue
        try:
            warmth = color_warmth(value)
        except InvalidColorFormat:
            yield Advisory(
                code="unreadable-color",
                path=path,
                message=f"Color {value} could not be read for a warmth check",
            )
            continue
        if warmth < WARMTH_THRESHOLD:
            yield Advisory(
                code="cool-color",
                path=path,
                message=f"Color {value} may not be warm enough for a retro theme",
            )


def _check_typography(typography: Any) -> Iterator[Advisory]:
    if not isinstance(typography, Mapping):
        return
    font_family = typography.get("fontFamily")
    base = font_family.get("base") if isinstance(font_family, Mapping) else None
    if isinstance(base, str) and base and not any(marker in base for marker in _MONOSPACE_MARKERS):
        yield Advisory(
            code="non-monospace-font",
            path="typography.fontFamily.base",
            message="Retro themes typically use monospace fonts like Courier New",
        )


def _check_shadows(shadow: Any) -> Iterator[Advisory]:
    if not isinstance(shadow, Mapping):
        return
    semantic = shadow.get("semantic")
    if not isinstance(semantic, Mapping):
        return
    for size, value in semantic.items():
        if isinstance(value, str) and _BLACK_SHADOW_RE.search(value):
            yield Advisory(
                code="black-shadow",
                path=f"shadow.semantic.{size}",
                message=f"Retro shadow {size} uses pure black; consider warm brown tones",
            )


def _iter_leaves(tree: Any, prefix: str) -> Iterator[tuple[str, Any]]:
    if isinstance(tree, Mapping):
        for key, value in tree.items():
            yield from _iter_leaves(value, f"{prefix}.{key}")
    else:
        yield prefix, tree
