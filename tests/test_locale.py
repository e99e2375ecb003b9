"""Tests for language resolution and translator installation."""

from pathlib import Path

from xfb.i18n import LANGUAGE_RESOURCES, tr
from xfb.i18n.locale import LocaleResolver


class FakeApp:
    def __init__(self):
        self.installed = []

    def installTranslator(self, translator):
        self.installed.append(translator)


class FakeTranslator:
    def __init__(self, loads: bool):
        self.loads = loads
        self.loaded_from = None

    def load(self, path):
        self.loaded_from = path
        return self.loads


def test_default_language_needs_no_asset(tmp_path: Path):
    app = FakeApp()
    created = []
    resolver = LocaleResolver(app, tmp_path, translator_factory=lambda: created.append(1))
    result = resolver.resolve("en")
    assert result.installed is False
    assert result.warning is False
    assert result.language == "en"
    assert created == [] and app.installed == []


def test_supported_language_installs_translator(tmp_path: Path):
    app = FakeApp()
    translator = FakeTranslator(loads=True)
    resolver = LocaleResolver(app, tmp_path, translator_factory=lambda: translator)
    result = resolver.resolve("pt")
    assert result.installed is True
    assert result.warning is False
    assert result.language == "pt"
    assert translator.loaded_from == str(tmp_path / LANGUAGE_RESOURCES["pt"])
    assert app.installed == [translator]
    assert resolver.translator is translator


def test_failed_load_falls_back_with_warning(tmp_path: Path):
    app = FakeApp()
    resolver = LocaleResolver(app, tmp_path, translator_factory=lambda: FakeTranslator(loads=False))
    result = resolver.resolve("fr")
    assert result.installed is False
    assert result.warning is True
    assert result.language == "en"
    assert result.requested == "fr"
    assert result.resource == tmp_path / "frances.qm"
    assert app.installed == []


def test_unknown_code_takes_same_fallback_path(tmp_path: Path):
    app = FakeApp()
    resolver = LocaleResolver(app, tmp_path, translator_factory=lambda: FakeTranslator(loads=True))
    result = resolver.resolve("xx")
    assert result.installed is False
    assert result.warning is True
    assert result.language == "en"
    assert result.resource is None
    assert app.installed == []


def test_missing_catalog_with_real_translator(qapp, tmp_path: Path):
    result = LocaleResolver(qapp, tmp_path).resolve("pt")
    assert result.installed is False
    assert result.warning is True


def test_loading_messages():
    assert LocaleResolver.loading_message("pt") == "Loading Portuguese GUI..."
    assert LocaleResolver.loading_message("fr") == "Loading French GUI..."
    assert LocaleResolver.loading_message("en") == "Loading English GUI..."
    assert LocaleResolver.loading_message("xx") == "Loading English GUI..."


def test_tr_without_catalog_returns_source(qapp):
    assert tr("Loading settings...") == "Loading settings..."
