"""Startup theme application (palette + global stylesheet).

Provides:
 - ``select_theme``: pure mapping from the ``DarkMode`` flag to a built-in
   :class:`ThemeDefinition` (no Qt involved, testable headless)
 - ``ThemeApplier``: applies the selected palette and stylesheet to the
   running application

The palette is always applied in full. The stylesheet is optional; when it
cannot be read the application keeps palette-only theming.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
from pathlib import Path
from typing import Any, Mapping

from .palettes import STYLESHEETS, Variant, palette_for

__all__ = [
    "ThemeDefinition",
    "ThemeResolution",
    "ThemeApplier",
    "select_theme",
    "build_qpalette",
]

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ThemeDefinition:
    variant: Variant
    palette: Mapping[str, str]
    stylesheet: str


@dataclass(frozen=True)
class ThemeResolution:
    """What was applied at startup.

    Attributes
    ----------
    definition: Selected built-in theme.
    stylesheet_path: Resolved stylesheet location.
    stylesheet_loaded: False when the application fell back to palette-only theming.
    """

    definition: ThemeDefinition
    stylesheet_path: Path
    stylesheet_loaded: bool

    @property
    def variant(self) -> Variant:
        return self.definition.variant

    @property
    def palette(self) -> Mapping[str, str]:
        return self.definition.palette


def select_theme(dark_mode: bool) -> ThemeDefinition:
    variant: Variant = "dark" if dark_mode else "light"
    return ThemeDefinition(variant, palette_for(variant), STYLESHEETS[variant])


def build_qpalette(table: Mapping[str, str]) -> Any:
    """Convert a role -> hex table into a ``QPalette``."""
    from PyQt6.QtGui import QColor, QPalette

    palette = QPalette()
    for role_name, color in table.items():
        palette.setColor(QPalette.ColorRole[role_name], QColor(color))
    return palette


class ThemeApplier:
    def __init__(self, app: Any, stylesheet_dir: str | Path) -> None:
        self._app = app
        self._stylesheet_dir = Path(stylesheet_dir)

    def apply(self, dark_mode: bool) -> ThemeResolution:
        definition = select_theme(dark_mode)
        self._app.setPalette(build_qpalette(definition.palette))
        _logger.debug("Set %s palette", definition.variant)

        path = self._stylesheet_dir / definition.stylesheet
        try:
            # QSS is plain ASCII; latin-1 never fails to decode
            with path.open("r", encoding="latin-1") as fh:
                stylesheet = fh.read()
        except OSError as exc:
            _logger.warning("Could not open main stylesheet file %s: %s", path, exc)
            return ThemeResolution(definition, path, stylesheet_loaded=False)

        self._app.setStyleSheet(stylesheet)
        _logger.debug("Applied main global stylesheet: %s", path)
        return ThemeResolution(definition, path, stylesheet_loaded=True)
