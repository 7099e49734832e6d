"""Retro theme builder service."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Callable

from retrotheme.themes.base import BaseThemeBuilder
from retrotheme.themes.colors import ColorAdjusters, extract_rgb
from retrotheme.themes.constants import (
    BACKGROUND_ROLES,
    BORDER_ROLES,
    DEFAULT_FONT_FAMILY,
    DEFAULT_NEUTRAL,
    DEFAULT_PRIMARY,
    DEFAULT_SECONDARY,
    NEUTRAL_SCALE_FACTORS,
    PRIMARY_DARKEN,
    SECONDARY_DARKEN,
    SHADOW_SPECS,
    TEXT_ROLES,
    THEME_SCHEMA_VERSION,
    THEME_STYLE,
)
from retrotheme.themes.entity import RetroTheme
from retrotheme.themes.models import RetroColorConfig, RetroPreset, RetroThemeConfig
from retrotheme.themes.presets import preset_config

logger = logging.getLogger("retrotheme.builder")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class RetroThemeBuilder:
    """Turns a retro configuration or preset into a validated RetroTheme."""

    def __init__(
        self,
        base_builder: BaseThemeBuilder,
        *,
        adjusters: ColorAdjusters | None = None,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._base_builder = base_builder
        self._adjusters = adjusters or ColorAdjusters()
        self._clock = clock or _utcnow

    @property
    def base_builder(self) -> BaseThemeBuilder:
        return self._base_builder

    @property
    def adjusters(self) -> ColorAdjusters:
        return self._adjusters

    def build_from_config(self, config: RetroThemeConfig) -> RetroTheme:
        base_theme = self._base_builder.build_theme(
            color=config.base_colors,
            spacing=config.spacing,
            typography=config.typography,
        )
        overrides = self.generate_overrides(config)
        theme = RetroTheme.create(
            base_theme,
            overrides,
            {
                "style": THEME_STYLE,
                "version": THEME_SCHEMA_VERSION,
                "generatedAt": self._clock().isoformat(),
                "config": config,
            },
        )
        logger.info("built retro theme %s overrides=%s", theme.id, ",".join(overrides))
        return theme

    def build_from_preset(self, preset: RetroPreset | str) -> RetroTheme:
        return self.build_from_config(preset_config(preset))

    def generate_overrides(self, config: RetroThemeConfig) -> dict[str, Any]:
        """Derive the retro override tree for ``config``."""
        overrides: dict[str, Any] = {}
        colors = config.retro_colors

        if colors is not None:
            overrides["color"] = {
                "palette": self._palette(colors),
                "text": _roles(colors, TEXT_ROLES),
                "background": _roles(colors, BACKGROUND_ROLES),
                "border": _border_roles(colors),
            }

        if config.retro_typography is not None:
            family = config.retro_typography.font_family
            overrides["typography"] = {
                "fontFamily": {"base": family if family is not None else DEFAULT_FONT_FAMILY},
            }

        primary = colors.primary if colors is not None and colors.primary is not None else DEFAULT_PRIMARY
        overrides["shadow"] = {"semantic": _shadows(primary)}
        return overrides

    def _palette(self, colors: RetroColorConfig) -> dict[str, dict[int, str]]:
        return {
            "neutral": self._neutral_scale(_or_default(colors.neutral, DEFAULT_NEUTRAL)),
            "primary": self._two_step_scale(_or_default(colors.primary, DEFAULT_PRIMARY), PRIMARY_DARKEN),
            "secondary": self._two_step_scale(_or_default(colors.secondary, DEFAULT_SECONDARY), SECONDARY_DARKEN),
        }

    def _neutral_scale(self, base_color: str) -> dict[int, str]:
        warmth = self._adjusters.warmth
        return {
            step: base_color if factor is None else warmth(base_color, factor)
            for step, factor in NEUTRAL_SCALE_FACTORS
        }

    def _two_step_scale(self, base_color: str, darken: int) -> dict[int, str]:
        return {
            500: base_color,
            600: self._adjusters.brightness(base_color, darken),
        }


def _or_default(value: str | None, default: str) -> str:
    return value if value is not None else default


def _roles(colors: RetroColorConfig, roles: tuple[tuple[str, str, str], ...]) -> dict[str, str]:
    return {role: _or_default(getattr(colors, attr), default) for role, attr, default in roles}


def _border_roles(colors: RetroColorConfig) -> dict[str, str]:
    borders = _roles(colors, BORDER_ROLES)
    if colors.border_focus is not None:
        borders["focus"] = colors.border_focus
    else:
        borders["focus"] = _or_default(colors.primary, DEFAULT_PRIMARY)
    return borders


def _shadows(primary: str) -> dict[str, str]:
    rgb = extract_rgb(primary)
    return {
        name: f"{geometry} rgba({rgb.r}, {rgb.g}, {rgb.b}, {alpha})"
        for name, geometry, alpha in SHADOW_SPECS
    }
