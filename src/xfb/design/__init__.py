"""Design package: built-in palettes and startup theme application."""

from .palettes import (  # noqa: F401
    DARK_PALETTE,
    LIGHT_PALETTE,
    PALETTE_ROLES,
    STYLESHEETS,
    palette_for,
)
from .theme_manager import (  # noqa: F401
    ThemeApplier,
    ThemeDefinition,
    ThemeResolution,
    build_qpalette,
    select_theme,
)
