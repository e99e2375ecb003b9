"""Built-in palette tables.

Two fixed role -> color tables, one per theme variant. Dark is inspired by
Catppuccin Mocha, light by Catppuccin Latte. Order matches the order roles are
applied in.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Literal, Mapping

Variant = Literal["dark", "light"]

__all__ = [
    "Variant",
    "PALETTE_ROLES",
    "DARK_PALETTE",
    "LIGHT_PALETTE",
    "STYLESHEETS",
    "palette_for",
]

PALETTE_ROLES: tuple[str, ...] = (
    "Window",
    "WindowText",
    "Base",
    "AlternateBase",
    "Text",
    "Button",
    "ButtonText",
    "BrightText",
    "Highlight",
    "HighlightedText",
)

DARK_PALETTE: Mapping[str, str] = MappingProxyType(
    {
        "Window": "#1e1e2e",
        "WindowText": "#cdd6f4",
        "Base": "#181825",
        "AlternateBase": "#1e1e2e",
        "Text": "#cdd6f4",
        "Button": "#313244",
        "ButtonText": "#cdd6f4",
        "BrightText": "#ff0000",
        "Highlight": "#89b4fa",
        "HighlightedText": "#1e1e2e",
    }
)

LIGHT_PALETTE: Mapping[str, str] = MappingProxyType(
    {
        "Window": "#eff1f5",
        "WindowText": "#4c4f69",
        "Base": "#ffffff",
        "AlternateBase": "#eff1f5",
        "Text": "#4c4f69",
        "Button": "#e6e9ef",
        "ButtonText": "#4c4f69",
        "BrightText": "#ff0000",
        "Highlight": "#1e66f5",
        "HighlightedText": "#ffffff",
    }
)

STYLESHEETS: Mapping[str, str] = MappingProxyType(
    {
        "dark": "darkstylesheet.qss",
        "light": "stylesheet.qss",
    }
)


def palette_for(variant: Variant) -> Mapping[str, str]:
    return DARK_PALETTE if variant == "dark" else LIGHT_PALETTE
