"""Built-in retro preset configurations."""

from __future__ import annotations

import copy

from retrotheme.errors import UnknownPreset
from retrotheme.themes.models import (
    RetroColorConfig,
    RetroPreset,
    RetroThemeConfig,
    RetroTypographyConfig,
)


def _preset(
    *,
    neutral: str,
    primary: str,
    secondary: str,
    text_primary: str,
    text_secondary: str,
    surface: str,
    elevated: str,
    font_family: str,
) -> RetroThemeConfig:
    return RetroThemeConfig(
        base_colors={
            "palette": {"primary": {500: primary}},
            "text": {"primary": text_primary},
            "background": {"surface": surface},
        },
        retro_colors=RetroColorConfig(
            neutral=neutral,
            primary=primary,
            secondary=secondary,
            text_primary=text_primary,
            text_secondary=text_secondary,
            surface=surface,
            elevated=elevated,
        ),
        retro_typography=RetroTypographyConfig(font_family=font_family),
    )


PRESETS: dict[RetroPreset, RetroThemeConfig] = {
    RetroPreset.CLASSIC: _preset(
        neutral="#f5f5f4",
        primary="#d35400",
        secondary="#8b5e3c",
        text_primary="#3c1f0f",
        text_secondary="#8b5e3c",
        surface="#fff4e6",
        elevated="#fdebd0",
        font_family="Courier New, monospace",
    ),
    RetroPreset.VINTAGE: _preset(
        neutral="#f3f2f1",
        primary="#b84300",
        secondary="#6b4a2f",
        text_primary="#2d1b0f",
        text_secondary="#6b4a2f",
        surface="#fef3e7",
        elevated="#fce5cd",
        font_family="Times New Roman, serif",
    ),
    RetroPreset.NEON: _preset(
        neutral="#1a1a1a",
        primary="#ff0080",
        secondary="#00ffff",
        text_primary="#ffffff",
        text_secondary="#cccccc",
        surface="#0a0a0a",
        elevated="#1a1a1a",
        font_family="Courier New, monospace",
    ),
}


def resolve_preset(name: RetroPreset | str) -> RetroPreset:
    """Turn a preset name into a RetroPreset, raising UnknownPreset if absent."""
    try:
        return RetroPreset(name)
    except ValueError:
        raise UnknownPreset(name) from None


def preset_config(name: RetroPreset | str) -> RetroThemeConfig:
    return copy.deepcopy(PRESETS[resolve_preset(name)])
