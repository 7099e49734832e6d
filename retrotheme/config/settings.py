"""Persistent settings via QSettings."""

from __future__ import annotations

from pathlib import Path

from PySide6.QtCore import QSettings

_PRESET_NAMES = {"classic", "vintage", "neon"}
_ADJUSTMENT_MODES = {"identity", "qt"}


class ThemeSettings:
    """Wraps QSettings for retro theme configuration.

    Pass ``path`` to keep settings in an INI file instead of the platform store.
    """

    def __init__(self, path: Path | None = None) -> None:
        if path is None:
            self._qs = QSettings("RetroTheme", "RetroTheme")
        else:
            self._qs = QSettings(str(path), QSettings.Format.IniFormat)

    # -- presets --

    @property
    def default_preset(self) -> str:
        raw = self._qs.value("theme/default_preset", "classic", type=str)
        value = (raw or "").strip().lower()
        if value in _PRESET_NAMES:
            return value
        return "classic"

    @default_preset.setter
    def default_preset(self, value: str) -> None:
        cleaned = (value or "").strip().lower()
        if cleaned not in _PRESET_NAMES:
            cleaned = "classic"
        self._qs.setValue("theme/default_preset", cleaned)

    # -- color adjustment --

    @property
    def color_adjustment(self) -> str:
        raw = self._qs.value("theme/color_adjustment", "identity", type=str)
        mode = (raw or "").strip().lower()
        if mode in _ADJUSTMENT_MODES:
            return mode
        return "identity"

    @color_adjustment.setter
    def color_adjustment(self, value: str) -> None:
        mode = (value or "").strip().lower()
        if mode not in _ADJUSTMENT_MODES:
            mode = "identity"
        self._qs.setValue("theme/color_adjustment", mode)

    def sync(self) -> None:
        self._qs.sync()

    # -- helpers --

    @property
    def app_data_dir(self) -> Path:
        path = self._app_data_dir()
        path.mkdir(parents=True, exist_ok=True)
        return path

    @property
    def configs_dir(self) -> Path:
        path = self.app_data_dir / "configs"
        path.mkdir(parents=True, exist_ok=True)
        return path

    @staticmethod
    def _app_data_dir() -> Path:
        import os
        base = Path(os.environ.get("APPDATA", Path.home() / ".config"))
        return base / "retrotheme"
