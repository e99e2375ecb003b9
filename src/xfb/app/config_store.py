"""User settings loading from the ini-style ``xfb.conf``.

Only three keys matter during startup:

- ``Language``   (str, default ``"en"``)
- ``FullScreen`` (bool, default ``False``)
- ``DarkMode``   (bool, default ``False``)

Design principles:
- Read-only: nothing is written back here (preference editing belongs to the
  main window's settings dialog).
- Graceful fallback: a missing, corrupt or malformed file produces defaults
  instead of raising. A malformed value only resets its own key.
- Unknown keys are ignored but left intact on disk.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
from pathlib import Path
from typing import Any

from PyQt6.QtCore import QSettings

from ..constants import DEFAULT_LANGUAGE

__all__ = ["SettingsRecord", "SettingsStore", "parse_bool"]

_logger = logging.getLogger(__name__)

_TRUE = {"true", "1", "yes", "on"}
_FALSE = {"false", "0", "no", "off"}


@dataclass(frozen=True)
class SettingsRecord:
    """Typed startup preferences.

    Attributes
    ----------
    language: Two-letter UI language code.
    full_screen: Show the main window full-screen instead of windowed.
    dark_mode: Use the dark palette and stylesheet.
    """

    language: str = DEFAULT_LANGUAGE
    full_screen: bool = False
    dark_mode: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {
            "Language": self.language,
            "FullScreen": self.full_screen,
            "DarkMode": self.dark_mode,
        }


def parse_bool(raw: Any, default: bool) -> bool:
    """Interpret an ini value as a bool, returning ``default`` when malformed."""
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, str):
        lowered = raw.strip().lower()
        if lowered in _TRUE:
            return True
        if lowered in _FALSE:
            return False
    return default


class SettingsStore:
    def load(self, config_file: str | Path) -> SettingsRecord:
        path = Path(config_file)
        defaults = SettingsRecord()
        if not path.is_file():
            _logger.warning("Settings file %s not found; using defaults", path)
            return defaults

        settings = QSettings(str(path), QSettings.Format.IniFormat)
        if settings.status() != QSettings.Status.NoError:
            _logger.warning("Settings file %s is unreadable (%s); using defaults", path, settings.status())
            return defaults

        language = settings.value("Language", defaults.language)
        if not isinstance(language, str) or not language.strip():
            _logger.warning("Ignoring malformed Language value %r", language)
            language = defaults.language
        record = SettingsRecord(
            language=language.strip(),
            full_screen=parse_bool(settings.value("FullScreen", defaults.full_screen), defaults.full_screen),
            dark_mode=parse_bool(settings.value("DarkMode", defaults.dark_mode), defaults.dark_mode),
        )
        _logger.debug(
            "Settings loaded - Language: %s FullScreen: %s DarkMode: %s",
            record.language,
            record.full_screen,
            record.dark_mode,
        )
        return record
