"""Theme configuration file parsing and validation."""

from __future__ import annotations

import re
from dataclasses import fields
from pathlib import Path
from typing import Any, Mapping

import yaml

from retrotheme.errors import ErrorCode, ThemeConfigError
from retrotheme.themes.models import RetroColorConfig, RetroThemeConfig, RetroTypographyConfig

_HEX_COLOR_RE = re.compile(r"^#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")
_FUNC_COLOR_RE = re.compile(r"^(?:rgb|rgba|hsl|hsla)\([^)]+\)$", re.IGNORECASE)
_HEX6_COLOR_RE = re.compile(r"^#[0-9a-fA-F]{6}$")

_MAX_CONFIG_BYTES = 64 * 1024
_MAX_FONT_VALUE_LEN = 256
_MAX_COLOR_VALUE_LEN = 64

_TOP_LEVEL_KEYS = {"base_colors", "spacing", "typography", "retro_colors", "retro_typography"}
_BASE_COLOR_KEYS = {"palette", "text", "background", "border"}
_RETRO_COLOR_KEYS = {item.name for item in fields(RetroColorConfig)}
_RETRO_TYPOGRAPHY_KEYS = {item.name for item in fields(RetroTypographyConfig)}

# Seeds that get split into RGB channels or scaled.
_PALETTE_SEED_KEYS = {"neutral", "primary", "secondary"}


def load_theme_config(path: Path) -> RetroThemeConfig:
    """Load and validate a single YAML or JSON theme configuration file."""
    if not path.exists():
        raise ThemeConfigError(
            f"Theme configuration not found: {path}",
            path=str(path),
            code=ErrorCode.CONFIG_MISSING,
        )
    if not path.is_file():
        raise ThemeConfigError(f"Theme configuration is not a file: {path}", path=str(path))

    content = _read_text_limited(path, max_bytes=_MAX_CONFIG_BYTES)
    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as exc:
        raise ThemeConfigError(f"Invalid YAML in {path}: {exc}", path=str(path)) from exc
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ThemeConfigError(f"Expected a mapping at the top of {path}", path=str(path))
    return parse_theme_config(data, source=str(path))


def parse_theme_config(data: Mapping[str, Any], *, source: str = "<config>") -> RetroThemeConfig:
    """Build a RetroThemeConfig from plain data, rejecting anything unexpected."""
    _reject_unknown_keys(data, allowed=_TOP_LEVEL_KEYS, context=source)

    base_colors = _optional_mapping(data, "base_colors", source)
    if base_colors is not None:
        _reject_unknown_keys(base_colors, allowed=_BASE_COLOR_KEYS, context=f"{source}: base_colors")

    retro_colors = None
    raw_colors = _optional_mapping(data, "retro_colors", source)
    if raw_colors is not None:
        _reject_unknown_keys(raw_colors, allowed=_RETRO_COLOR_KEYS, context=f"{source}: retro_colors")
        retro_colors = RetroColorConfig(
            **{
                key: _color_value(value, f"retro_colors.{key}", source)
                for key, value in raw_colors.items()
                if value is not None
            }
        )

    retro_typography = None
    raw_typography = _optional_mapping(data, "retro_typography", source)
    if raw_typography is not None:
        _reject_unknown_keys(
            raw_typography,
            allowed=_RETRO_TYPOGRAPHY_KEYS,
            context=f"{source}: retro_typography",
        )
        family = raw_typography.get("font_family")
        if family is not None:
            family = _font_value(family, source)
        retro_typography = RetroTypographyConfig(font_family=family)

    return RetroThemeConfig(
        base_colors=base_colors,
        spacing=_optional_mapping(data, "spacing", source),
        typography=_optional_mapping(data, "typography", source),
        retro_colors=retro_colors,
        retro_typography=retro_typography,
    )


def dump_tokens(tree: Mapping[str, Any]) -> str:
    """Render a token tree as block-style YAML, keeping key order."""
    return yaml.safe_dump(_plain(tree), default_flow_style=False, sort_keys=False, allow_unicode=True)


def _plain(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {key: _plain(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(item) for item in value]
    if hasattr(value, "to_dict"):
        return _plain(value.to_dict())
    if isinstance(value, (str, int, float, bool)) or value is None:
        return value
    return str(value)


def _optional_mapping(data: Mapping[str, Any], key: str, source: str) -> dict[str, Any] | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, Mapping):
        raise ThemeConfigError(f"{source}: field {key!r} must be a mapping", path=source)
    return dict(value)


def _color_value(value: object, field_name: str, source: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ThemeConfigError(f"{source}: color {field_name!r} must be a non-empty string", path=source)
    cleaned = value.strip()
    if len(cleaned) > _MAX_COLOR_VALUE_LEN:
        raise ThemeConfigError(f"{source}: color {field_name!r} value is too long", path=source)
    if not _is_valid_color(cleaned):
        raise ThemeConfigError(f"{source}: color {field_name!r} has invalid color {cleaned!r}", path=source)
    if field_name.rsplit(".", 1)[-1] in _PALETTE_SEED_KEYS and not _HEX6_COLOR_RE.match(cleaned):
        raise ThemeConfigError(
            f"{source}: color {field_name!r} must be a six-digit hex color, got {cleaned!r}",
            path=source,
        )
    return cleaned


def _font_value(value: object, source: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ThemeConfigError(f"{source}: font_family must be a non-empty string", path=source)
    cleaned = value.strip()
    if len(cleaned) > _MAX_FONT_VALUE_LEN:
        raise ThemeConfigError(f"{source}: font_family value is too long", path=source)
    if any(ch in cleaned for ch in ("\n", "\r", "\t")):
        raise ThemeConfigError(f"{source}: font_family must be a single line string", path=source)
    return cleaned


def _is_valid_color(value: str) -> bool:
    if _HEX_COLOR_RE.match(value):
        return True
    if _FUNC_COLOR_RE.match(value):
        return True
    return False


def _reject_unknown_keys(
    data: Mapping[str, object],
    *,
    allowed: set[str],
    context: str,
) -> None:
    unknown = sorted(str(key) for key in data.keys() if key not in allowed)
    if unknown:
        joined = ", ".join(unknown)
        raise ThemeConfigError(f"{context}: unsupported keys found: {joined}", path=context)


def _read_text_limited(path: Path, *, max_bytes: int) -> str:
    try:
        size = path.stat().st_size
    except OSError as exc:
        raise ThemeConfigError(f"Unable to stat {path}: {exc}", path=str(path)) from exc
    if size > max_bytes:
        raise ThemeConfigError(f"{path}: file exceeds max size ({max_bytes} bytes)", path=str(path))
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ThemeConfigError(f"Unable to read {path}: {exc}", path=str(path)) from exc
