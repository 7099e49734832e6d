"""Error codes and error handling utilities for RetroTheme."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any


class ErrorCode(Enum):
    """Standardized error codes for RetroTheme operations."""

    # Theme errors
    INVALID_BASE_THEME = auto()
    MISSING_REQUIRED_PALETTE = auto()
    INVALID_COLOR_FORMAT = auto()
    UNKNOWN_PRESET = auto()

    # Configuration errors
    CONFIG_INVALID = auto()
    CONFIG_MISSING = auto()


ERROR_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.INVALID_BASE_THEME: "RetroTheme must have a valid base theme.",
    ErrorCode.MISSING_REQUIRED_PALETTE: "Retro color overrides must define neutral, primary and secondary palettes.",
    ErrorCode.INVALID_COLOR_FORMAT: "Colors must be written as six-digit hex values such as #d35400.",
    ErrorCode.UNKNOWN_PRESET: "Choose one of the built-in presets: classic, vintage or neon.",

    ErrorCode.CONFIG_INVALID: "The theme configuration file is invalid. Fix the reported field and retry.",
    ErrorCode.CONFIG_MISSING: "Theme configuration file not found. Check the path.",
}


@dataclass
class RetroThemeError(Exception):
    """Base exception for RetroTheme with error code and context."""

    code: ErrorCode
    message: str = ""
    path: str | None = None
    details: dict[str, Any] = field(default_factory=dict)
    suggestion: str = ""

    def __post_init__(self) -> None:
        if not self.message:
            self.message = ERROR_MESSAGES.get(self.code, "An unexpected error occurred.")
        if not self.suggestion and self.code in ERROR_MESSAGES:
            self.suggestion = ERROR_MESSAGES[self.code]

    def __str__(self) -> str:
        parts = [self.message]
        if self.path:
            parts.append(f"\nAt: {self.path}")
        if self.details:
            details_str = " | ".join(f"{k}={v}" for k, v in self.details.items())
            parts.append(f"\nDetails: {details_str}")
        return "".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging or CLI display."""
        return {
            "code": self.code.name,
            "message": self.message,
            "path": self.path,
            "details": self.details,
            "suggestion": self.suggestion,
        }


class InvalidBaseTheme(RetroThemeError):
    """Raised when a retro theme is created without a base theme."""

    def __init__(self) -> None:
        super().__init__(ErrorCode.INVALID_BASE_THEME)


class MissingRequiredPalette(RetroThemeError):
    """Raised when color overrides lack a required sub-palette."""

    def __init__(self, palette: str, path: str | None = None) -> None:
        super().__init__(
            ErrorCode.MISSING_REQUIRED_PALETTE,
            message=f"Retro theme must define {palette} color palette",
            path=path,
            details={"palette": palette},
        )
        self.palette = palette


class InvalidColorFormat(RetroThemeError):
    """Raised when a color literal cannot be split into RGB channels."""

    def __init__(self, color: object) -> None:
        super().__init__(
            ErrorCode.INVALID_COLOR_FORMAT,
            message=f"Cannot decompose color {color!r} into RGB channels",
            details={"color": color},
        )
        self.color = color


class UnknownPreset(RetroThemeError):
    """Raised when a preset name is not in the built-in table."""

    def __init__(self, name: object) -> None:
        super().__init__(
            ErrorCode.UNKNOWN_PRESET,
            message=f"Unknown retro preset: {name!r}",
            details={"preset": name},
        )
        self.name = name


class ThemeConfigError(RetroThemeError):
    """Raised when a theme configuration file fails validation."""

    def __init__(
        self,
        message: str,
        *,
        path: str | None = None,
        code: ErrorCode = ErrorCode.CONFIG_INVALID,
    ) -> None:
        super().__init__(code, message=message, path=path)


def format_error_for_user(error: RetroThemeError | Exception) -> str:
    """Format an error for display to the user with actionable suggestions."""
    if isinstance(error, RetroThemeError):
        parts = [error.message]
        if error.path:
            parts.append(f"\nAt: {error.path}")
        if error.suggestion and error.suggestion != error.message:
            parts.append(f"\n\n{error.suggestion}")
        return "".join(parts)
    return f"{type(error).__name__}: {error}"
