"""Retro theme framework exports."""

from retrotheme.themes.base import CoreTheme, CoreThemeBuilder
from retrotheme.themes.builder import RetroThemeBuilder
from retrotheme.themes.colors import ColorAdjusters, Rgb, extract_rgb
from retrotheme.themes.entity import RetroTheme
from retrotheme.themes.models import (
    Advisory,
    OverridesUpdated,
    RetroColorConfig,
    RetroPreset,
    RetroThemeConfig,
    RetroTypographyConfig,
    ThemeCreated,
    ValidationReport,
)

__all__ = [
    "Advisory",
    "ColorAdjusters",
    "CoreTheme",
    "CoreThemeBuilder",
    "OverridesUpdated",
    "RetroColorConfig",
    "RetroPreset",
    "RetroTheme",
    "RetroThemeBuilder",
    "RetroThemeConfig",
    "RetroTypographyConfig",
    "Rgb",
    "ThemeCreated",
    "ValidationReport",
    "extract_rgb",
]
