"""Base theme contract and the default core theme builder."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Any, Mapping, Protocol

from retrotheme.themes.constants import CORE_THEME_VERSION
from retrotheme.themes.merge import deep_merge

# Neutral starting point that retro overrides are layered on.
CORE_TOKENS: dict[str, Any] = {
    "color": {
        "palette": {
            "neutral": {
                50: "#fafafa",
                100: "#f4f4f5",
                200: "#e4e4e7",
                300: "#d4d4d8",
                400: "#a1a1aa",
                500: "#71717a",
                600: "#52525b",
                700: "#3f3f46",
                800: "#27272a",
                900: "#18181b",
            },
            "primary": {500: "#3b82f6", 600: "#2563eb"},
            "secondary": {500: "#8b5cf6", 600: "#7c3aed"},
        },
        "text": {
            "primary": "#18181b",
            "secondary": "#52525b",
            "muted": "#a1a1aa",
            "inverse": "#ffffff",
            "disabled": "#d4d4d8",
        },
        "background": {
            "surface": "#ffffff",
            "elevated": "#fafafa",
            "muted": "#f4f4f5",
            "inverse": "#18181b",
        },
        "border": {
            "default": "#e4e4e7",
            "subtle": "#f4f4f5",
            "strong": "#a1a1aa",
            "focus": "#3b82f6",
        },
    },
    "spacing": {
        "xs": "4px",
        "sm": "8px",
        "md": "16px",
        "lg": "24px",
        "xl": "32px",
    },
    "typography": {
        "fontFamily": {
            "base": '"Inter", "Segoe UI", sans-serif',
            "mono": '"JetBrains Mono", monospace',
        },
        "fontSize": {"sm": "12px", "base": "14px", "lg": "18px"},
    },
    "shadow": {
        "semantic": {
            "sm": "0 1px 2px rgba(0, 0, 0, 0.05)",
            "md": "0 4px 6px rgba(0, 0, 0, 0.1)",
            "lg": "0 10px 15px rgba(0, 0, 0, 0.1)",
            "focus": "0 0 0 2px rgba(59, 130, 246, 0.5)",
        },
    },
}


class BaseTheme(Protocol):
    """What the retro layer needs from a base theme."""

    @property
    def version(self) -> str: ...

    def to_tokens(self) -> dict[str, Any]: ...


class BaseThemeBuilder(Protocol):
    def build_theme(
        self,
        *,
        color: Mapping[str, Any] | None = None,
        spacing: Mapping[str, Any] | None = None,
        typography: Mapping[str, Any] | None = None,
    ) -> BaseTheme: ...


@dataclass(frozen=True, slots=True)
class CoreTheme:
    """An immutable base theme."""

    version: str
    tokens: Mapping[str, Any] = field(default_factory=dict)

    def to_tokens(self) -> dict[str, Any]:
        return copy.deepcopy(dict(self.tokens))


class CoreThemeBuilder:
    """Builds base themes by seeding the core token tree."""

    def __init__(self, tokens: Mapping[str, Any] | None = None, version: str = CORE_THEME_VERSION) -> None:
        self._tokens = copy.deepcopy(dict(tokens if tokens is not None else CORE_TOKENS))
        self._version = version

    def build_theme(
        self,
        *,
        color: Mapping[str, Any] | None = None,
        spacing: Mapping[str, Any] | None = None,
        typography: Mapping[str, Any] | None = None,
    ) -> CoreTheme:
        seeds = {
            name: value
            for name, value in (("color", color), ("spacing", spacing), ("typography", typography))
            if value is not None
        }
        return CoreTheme(version=self._version, tokens=deep_merge(self._tokens, seeds))
