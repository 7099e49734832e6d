"""Tests for service wiring, logging setup and the command line entry point."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest
import yaml

from retrotheme import app as app_module
from retrotheme.__main__ import main
from retrotheme.app import configure_logger, create_services
from retrotheme.config.settings import ThemeSettings
from retrotheme.themes.base import CoreTheme
from retrotheme.themes.colors import ColorAdjusters
from retrotheme.themes.qt_colors import qt_adjust_brightness


@pytest.fixture
def settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> ThemeSettings:
    monkeypatch.setenv("APPDATA", str(tmp_path / "appdata"))
    settings = ThemeSettings(tmp_path / "retrotheme.ini")
    monkeypatch.setattr(app_module, "ThemeSettings", lambda: settings)
    return settings


@pytest.fixture(autouse=True)
def restore_package_logger():
    logger = logging.getLogger("retrotheme")
    handlers, propagate, level = list(logger.handlers), logger.propagate, logger.level
    yield
    for handler in logger.handlers:
        if handler not in handlers:
            handler.close()
    logger.handlers = handlers
    logger.propagate = propagate
    logger.setLevel(level)


class StubBaseBuilder:
    def build_theme(self, *, color=None, spacing=None, typography=None) -> CoreTheme:
        return CoreTheme(version="0.0.1", tokens={"spacing": {"md": "10px"}})


def test_create_services_uses_identity_adjusters_by_default(settings: ThemeSettings) -> None:
    services = create_services(settings)
    assert services.settings is settings
    assert services.builder.adjusters == ColorAdjusters()


def test_create_services_selects_qt_adjusters(settings: ThemeSettings) -> None:
    settings.color_adjustment = "qt"
    services = create_services(settings)
    assert services.builder.adjusters.brightness is qt_adjust_brightness


def test_create_services_accepts_base_builder(settings: ThemeSettings) -> None:
    services = create_services(settings, base_builder=StubBaseBuilder())
    theme = services.builder.build_from_preset("classic")
    assert theme.get_tokens()["spacing"] == {"md": "10px"}


def test_create_services_returns_fresh_instances(settings: ThemeSettings) -> None:
    assert create_services(settings).builder is not create_services(settings).builder


def test_configure_logger_writes_rotating_file(settings: ThemeSettings) -> None:
    logger = configure_logger(settings)
    assert configure_logger(settings) is logger
    assert len(logger.handlers) == 1

    logging.getLogger("retrotheme.builder").info("hello retro")
    logger.handlers[0].flush()

    log_file = settings.app_data_dir / "logs" / "retrotheme.log"
    assert "hello retro" in log_file.read_text(encoding="utf-8")


def test_cli_prints_preset_tokens(settings: ThemeSettings, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["vintage"]) == 0
    tokens = yaml.safe_load(capsys.readouterr().out)
    assert tokens["color"]["palette"]["primary"][500] == "#b84300"
    assert "spacing" in tokens


def test_cli_uses_default_preset_from_settings(settings: ThemeSettings, capsys: pytest.CaptureFixture[str]) -> None:
    settings.default_preset = "neon"
    assert main(["--overrides-only"]) == 0
    overrides = yaml.safe_load(capsys.readouterr().out)
    assert overrides["color"]["palette"]["secondary"][500] == "#00ffff"
    assert "spacing" not in overrides


def test_cli_builds_from_config_file(
    settings: ThemeSettings,
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    config_path = tmp_path / "mine.yaml"
    config_path.write_text("retro_colors:\n  primary: '#2e7d32'\n", encoding="utf-8")

    assert main(["--config", str(config_path), "--overrides-only"]) == 0
    overrides = yaml.safe_load(capsys.readouterr().out)
    assert overrides["color"]["border"]["focus"] == "#2e7d32"
    assert overrides["shadow"]["semantic"]["sm"] == "0 1px 2px rgba(46, 125, 50, 0.25)"


def test_cli_reports_errors(settings: ThemeSettings, capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["synthwave"]) == 1
    assert "synthwave" in capsys.readouterr().err
