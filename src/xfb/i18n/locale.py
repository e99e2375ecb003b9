"""Language preference -> installed Qt translator.

The resolver never fails hard: an unknown code or a catalog that does not load
leaves the application on the built-in English strings and flags a warning so
the caller can tell the user about the fallback.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
from pathlib import Path
from typing import Any, Callable, Optional

from . import DEFAULT_LANGUAGE, LANGUAGE_NAMES, LANGUAGE_RESOURCES

__all__ = ["LocaleResolution", "LocaleResolver"]

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LocaleResolution:
    """Outcome of resolving the ``Language`` preference.

    Attributes
    ----------
    requested: Code read from settings.
    language: Effective UI language after fallback.
    installed: Whether a translator was installed.
    warning: Whether the requested language could not be honoured.
    resource: Catalog path that was attempted (None for the built-in language).
    """

    requested: str
    language: str
    installed: bool
    warning: bool
    resource: Optional[Path] = None


def _default_translator_factory() -> Any:
    from PyQt6.QtCore import QTranslator

    return QTranslator()


class LocaleResolver:
    """Loads and installs the translation catalog for a language code.

    ``app`` must provide ``installTranslator``. The translator object is kept on
    the resolver because Qt does not take ownership of it.
    """

    def __init__(
        self,
        app: Any,
        translations_dir: str | Path,
        translator_factory: Callable[[], Any] = _default_translator_factory,
    ) -> None:
        self._app = app
        self._translations_dir = Path(translations_dir)
        self._translator_factory = translator_factory
        self.translator: Any = None

    @staticmethod
    def loading_message(language_code: str) -> str:
        name = LANGUAGE_NAMES.get(language_code, LANGUAGE_NAMES[DEFAULT_LANGUAGE])
        return f"Loading {name} GUI..."

    def resource_for(self, language_code: str) -> Optional[Path]:
        file_name = LANGUAGE_RESOURCES.get(language_code)
        if file_name is None:
            return None
        return self._translations_dir / file_name

    def resolve(self, language_code: str) -> LocaleResolution:
        if language_code == DEFAULT_LANGUAGE:
            _logger.debug("Using default English GUI")
            return LocaleResolution(language_code, DEFAULT_LANGUAGE, installed=False, warning=False)

        resource = self.resource_for(language_code)
        if resource is None:
            _logger.warning("No translation available for language: %s", language_code)
            return LocaleResolution(language_code, DEFAULT_LANGUAGE, installed=False, warning=True)

        translator = self._translator_factory()
        if not translator.load(str(resource)):
            _logger.warning("Failed to load translator file for language %s: %s", language_code, resource)
            return LocaleResolution(
                language_code, DEFAULT_LANGUAGE, installed=False, warning=True, resource=resource
            )

        self._app.installTranslator(translator)
        self.translator = translator
        _logger.debug("Installed translator for language: %s", language_code)
        return LocaleResolution(
            language_code, language_code, installed=True, warning=False, resource=resource
        )
