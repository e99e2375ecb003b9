"""Global constants for the XFB startup sequence."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Final

APP_NAME: Final = "XFB"
ORGANIZATION_NAME: Final = "Netpack - Online Solutions"
BASE_STYLE: Final = "Fusion"

CONFIG_FILENAME: Final = "xfb.conf"
DEFAULT_LANGUAGE: Final = "en"

# Bundled assets ship as package data next to this module unless overridden
# (e.g. by a frozen build that unpacks resources elsewhere).
RESOURCE_DIR: Final = Path(
    os.environ.get("XFB_RESOURCE_DIR", Path(__file__).resolve().parent / "resources")
)
TRANSLATIONS_SUBDIR: Final = "translations"
SPLASH_IMAGE: Final = "images/splash.png"
WINDOW_ICON: Final = "icons/48x48.png"
MACOS_BUNDLE_ICON: Final = "../Resources/XFB.icns"

# Pacing pauses (seconds) so transient splash messages stay readable
LOCALE_WARNING_PAUSE: Final = 1.5
READY_PAUSE: Final = 0.3

# Must be exported before the QApplication is created
QT_ENVIRONMENT: Final = {
    "QT_MULTIMEDIA_PREFERRED_PLUGINS": "gstreamer",
    "QT_ACCESSIBILITY": "1",
}
