"""Tests for retro business rules and advisories."""

from __future__ import annotations

import logging

import pytest

from retrotheme.errors import InvalidBaseTheme, MissingRequiredPalette
from retrotheme.themes.base import CoreThemeBuilder
from retrotheme.themes.validation import validate_overrides


@pytest.fixture
def base_theme():
    return CoreThemeBuilder().build_theme()


def _warm_color_overrides() -> dict[str, object]:
    return {
        "color": {
            "palette": {
                "neutral": {500: "#f5f5f4"},
                "primary": {500: "#d35400"},
                "secondary": {500: "#8b5e3c"},
            },
        },
    }


def test_missing_base_theme_is_fatal() -> None:
    with pytest.raises(InvalidBaseTheme):
        validate_overrides(None, {})


def test_empty_overrides_are_clean(base_theme) -> None:
    report = validate_overrides(base_theme, {})
    assert report.is_clean
    assert report.advisories == ()


def test_warm_palette_passes_without_advisories(base_theme) -> None:
    report = validate_overrides(base_theme, _warm_color_overrides())
    assert report.codes() == []


@pytest.mark.parametrize("missing", ["neutral", "primary", "secondary"])
def test_each_required_palette_is_enforced(base_theme, missing: str) -> None:
    overrides = _warm_color_overrides()
    del overrides["color"]["palette"][missing]

    with pytest.raises(MissingRequiredPalette) as info:
        validate_overrides(base_theme, overrides)
    assert info.value.palette == missing
    assert info.value.path == f"color.palette.{missing}"


def test_palettes_may_sit_directly_under_color(base_theme) -> None:
    overrides = {"color": {"neutral": {500: "#f5f5f4"}, "primary": {500: "#d35400"}}}
    with pytest.raises(MissingRequiredPalette) as info:
        validate_overrides(base_theme, overrides)
    assert info.value.palette == "secondary"

    overrides["color"]["secondary"] = {500: "#8b5e3c"}
    assert validate_overrides(base_theme, overrides).is_clean


def test_color_category_without_palettes_is_rejected(base_theme) -> None:
    with pytest.raises(MissingRequiredPalette) as info:
        validate_overrides(base_theme, {"color": {"text": {"primary": "#3c1f0f"}}})
    assert info.value.palette == "neutral"


def test_cool_colors_produce_advisories_not_errors(base_theme) -> None:
    overrides = _warm_color_overrides()
    overrides["color"]["palette"]["secondary"] = {500: "#0000ff"}
    overrides["color"]["border"] = {"focus": "#0a0aff"}

    report = validate_overrides(base_theme, overrides)

    assert report.codes() == ["cool-color", "cool-color"]
    assert [item.path for item in report.advisories] == [
        "color.palette.secondary.500",
        "color.border.focus",
    ]


def test_unreadable_hex_color_is_an_advisory(base_theme) -> None:
    overrides = _warm_color_overrides()
    overrides["color"]["text"] = {"inverse": "#fff"}

    report = validate_overrides(base_theme, overrides)
    assert report.codes() == ["unreadable-color"]


def test_non_hex_colors_are_skipped_by_warmth_check(base_theme) -> None:
    overrides = _warm_color_overrides()
    overrides["color"]["text"] = {"muted": "rgba(0, 0, 255, 0.5)"}
    assert validate_overrides(base_theme, overrides).is_clean


@pytest.mark.parametrize(
    ("family", "expected"),
    [
        ("Courier New, monospace", []),
        ("IBM Plex Mono, monospace", []),
        ("Courier", []),
        ("Times New Roman, serif", ["non-monospace-font"]),
    ],
)
def test_typography_advisory(base_theme, family: str, expected: list[str]) -> None:
    report = validate_overrides(base_theme, {"typography": {"fontFamily": {"base": family}}})
    assert report.codes() == expected


@pytest.mark.parametrize(
    ("shadow", "flagged"),
    [
        ("0 1px 2px rgba(0,0,0,0.2)", True),
        ("0 1px 2px rgba(0, 0, 0, 0.2)", True),
        ("0 1px 2px #000", True),
        ("0 1px 2px #000000", True),
        ("0 1px 2px black", True),
        ("0 1px 2px #000080", False),
        ("0 1px 2px rgba(211, 84, 0, 0.25)", False),
    ],
)
def test_shadow_black_advisory(base_theme, shadow: str, flagged: bool) -> None:
    report = validate_overrides(base_theme, {"shadow": {"semantic": {"sm": shadow}}})
    assert report.codes() == (["black-shadow"] if flagged else [])


def test_advisories_are_logged(base_theme, caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="retrotheme.validation"):
        validate_overrides(base_theme, {"shadow": {"semantic": {"md": "0 4px 6px #000"}}})
    assert "shadow.semantic.md" in caplog.text


def test_advisory_logging_can_be_skipped(base_theme, caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="retrotheme.validation"):
        report = validate_overrides(
            base_theme,
            {"shadow": {"semantic": {"md": "0 4px 6px #000"}}},
            log_advisories=False,
        )
    assert report.codes() == ["black-shadow"]
    assert caplog.text == ""
