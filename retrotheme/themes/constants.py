"""Retro theme constants."""

from __future__ import annotations

THEME_STYLE = "retro"
THEME_SCHEMA_VERSION = "1.0"
CORE_THEME_VERSION = "1.0.0"

DEFAULT_NEUTRAL = "#f5f5f4"
DEFAULT_PRIMARY = "#d35400"
DEFAULT_SECONDARY = "#8b5e3c"
DEFAULT_FONT_FAMILY = "Courier New, monospace"

REQUIRED_PALETTES: tuple[str, ...] = (
    "neutral",
    "primary",
    "secondary",
)

WARMTH_THRESHOLD = 0.3

# Step 500 is the base color itself and has no factor.
NEUTRAL_SCALE_FACTORS: tuple[tuple[int, float | None], ...] = (
    (50, 0.95),
    (100, 0.9),
    (200, 0.8),
    (300, 0.7),
    (400, 0.6),
    (500, None),
    (600, 0.4),
    (700, 0.3),
    (800, 0.2),
    (900, 0.1),
)

PRIMARY_DARKEN = -20
SECONDARY_DARKEN = -15

# role -> (RetroColorConfig field, default)
TEXT_ROLES: tuple[tuple[str, str, str], ...] = (
    ("primary", "text_primary", "#3c1f0f"),
    ("secondary", "text_secondary", "#8b5e3c"),
    ("muted", "text_muted", "#d9b899"),
    ("inverse", "text_inverse", "#ffffff"),
    ("disabled", "text_disabled", "#a16207"),
)

BACKGROUND_ROLES: tuple[tuple[str, str, str], ...] = (
    ("surface", "surface", "#fff4e6"),
    ("elevated", "elevated", "#fdebd0"),
    ("muted", "muted", "#fbe3c4"),
    ("inverse", "inverse", "#3c1f0f"),
)

BORDER_ROLES: tuple[tuple[str, str, str], ...] = (
    ("default", "border_default", "#e0c4a1"),
    ("subtle", "border_subtle", "#f5f5f4"),
    ("strong", "border_strong", "#d9b899"),
)

# name -> (geometry, alpha)
SHADOW_SPECS: tuple[tuple[str, str, float], ...] = (
    ("sm", "0 1px 2px", 0.25),
    ("md", "0 4px 6px", 0.35),
    ("lg", "0 10px 15px", 0.35),
    ("focus", "0 0 0 2px", 0.5),
)
