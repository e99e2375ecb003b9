"""Internationalization helpers for the startup sequence.

Translations are compiled Qt ``.qm`` catalogs shipped under
``resources/translations``. The built-in language is English; every other
supported language maps to exactly one catalog file.

User-visible bootstrap strings go through :func:`tr` so they pick up the
installed translator once the locale stage has run.
"""

from __future__ import annotations

from typing import Dict

from ..constants import DEFAULT_LANGUAGE

__all__ = [
    "DEFAULT_LANGUAGE",
    "LANGUAGE_RESOURCES",
    "LANGUAGE_NAMES",
    "tr",
    "LocaleResolution",
    "LocaleResolver",
]

LANGUAGE_RESOURCES: Dict[str, str] = {
    "pt": "portugues.qm",
    "fr": "frances.qm",
}

LANGUAGE_NAMES: Dict[str, str] = {
    "en": "English",
    "pt": "Portuguese",
    "fr": "French",
}

_CONTEXT = "Bootstrap"


def tr(text: str) -> str:
    """Translate ``text`` through the installed Qt translators."""
    from PyQt6.QtCore import QCoreApplication

    return QCoreApplication.translate(_CONTEXT, text)


from .locale import LocaleResolution, LocaleResolver  # noqa: E402
