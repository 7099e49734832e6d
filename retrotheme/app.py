"""Service wiring and logging setup."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from logging.handlers import RotatingFileHandler

from retrotheme.config.settings import ThemeSettings
from retrotheme.themes.base import BaseThemeBuilder, CoreThemeBuilder
from retrotheme.themes.builder import RetroThemeBuilder
from retrotheme.themes.colors import ColorAdjusters


@dataclass(frozen=True, slots=True)
class ThemeServices:
    """Everything a caller needs to build retro themes."""

    settings: ThemeSettings
    builder: RetroThemeBuilder


def configure_logger(settings: ThemeSettings) -> logging.Logger:
    logger = logging.getLogger("retrotheme")
    if logger.handlers:
        return logger

    logger.setLevel(logging.INFO)
    log_dir = settings.app_data_dir / "logs"
    log_dir.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        log_dir / "retrotheme.log",
        maxBytes=512_000,
        backupCount=3,
        encoding="utf-8",
    )
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
    return logger


def create_services(
    settings: ThemeSettings | None = None,
    base_builder: BaseThemeBuilder | None = None,
) -> ThemeServices:
    """Wire a fresh builder. Call again to start over with new instances."""
    settings = settings or ThemeSettings()
    if settings.color_adjustment == "qt":
        from retrotheme.themes.qt_colors import qt_adjusters
        adjusters = qt_adjusters()
    else:
        adjusters = ColorAdjusters()
    builder = RetroThemeBuilder(base_builder or CoreThemeBuilder(), adjusters=adjusters)
    return ThemeServices(settings=settings, builder=builder)
