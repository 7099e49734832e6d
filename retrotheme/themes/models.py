"""Retro theme models."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field, fields
from datetime import datetime
from enum import Enum
from typing import Any, Mapping


class RetroPreset(str, Enum):
    """Built-in retro presets."""

    CLASSIC = "classic"
    VINTAGE = "vintage"
    NEON = "neon"


@dataclass(frozen=True, slots=True)
class RetroColorConfig:
    """Retro color seeds. Unset roles fall back to warm defaults."""

    neutral: str | None = None
    primary: str | None = None
    secondary: str | None = None
    text_primary: str | None = None
    text_secondary: str | None = None
    text_muted: str | None = None
    text_inverse: str | None = None
    text_disabled: str | None = None
    surface: str | None = None
    elevated: str | None = None
    muted: str | None = None
    inverse: str | None = None
    border_default: str | None = None
    border_subtle: str | None = None
    border_strong: str | None = None
    border_focus: str | None = None


@dataclass(frozen=True, slots=True)
class RetroTypographyConfig:
    """Retro typography seeds."""

    font_family: str | None = None


@dataclass(frozen=True, slots=True)
class RetroThemeConfig:
    """Declarative input for building a retro theme."""

    base_colors: Mapping[str, Any] | None = None
    spacing: Mapping[str, Any] | None = None
    typography: Mapping[str, Any] | None = None
    retro_colors: RetroColorConfig | None = None
    retro_typography: RetroTypographyConfig | None = None

    def to_dict(self) -> dict[str, Any]:
        """Render as plain data, omitting unset fields."""
        data: dict[str, Any] = {}
        for name in ("base_colors", "spacing", "typography"):
            value = getattr(self, name)
            if value is not None:
                data[name] = copy.deepcopy(dict(value))
        if self.retro_colors is not None:
            data["retro_colors"] = _set_fields(self.retro_colors)
        if self.retro_typography is not None:
            data["retro_typography"] = _set_fields(self.retro_typography)
        return data


def _set_fields(instance: object) -> dict[str, Any]:
    return {
        item.name: getattr(instance, item.name)
        for item in fields(instance)
        if getattr(instance, item.name) is not None
    }


@dataclass(frozen=True, slots=True)
class Advisory:
    """A non-fatal finding from a soft retro style check."""

    code: str
    path: str
    message: str


@dataclass(frozen=True, slots=True)
class ValidationReport:
    """Outcome of a validation pass that did not raise."""

    advisories: tuple[Advisory, ...] = ()

    @property
    def is_clean(self) -> bool:
        return not self.advisories

    def codes(self) -> list[str]:
        return [advisory.code for advisory in self.advisories]


@dataclass(frozen=True, slots=True)
class ThemeCreated:
    """Emitted once when a retro theme entity is created."""

    theme_id: str
    base_theme_version: str
    override_categories: tuple[str, ...]
    occurred_at: datetime
    event_type: str = field(default="RetroThemeCreated", init=False)


@dataclass(frozen=True, slots=True)
class OverridesUpdated:
    """Emitted after a successful override replacement."""

    theme_id: str
    updated_categories: tuple[str, ...]
    occurred_at: datetime
    event_type: str = field(default="RetroThemeOverridesUpdated", init=False)


DomainEvent = ThemeCreated | OverridesUpdated
