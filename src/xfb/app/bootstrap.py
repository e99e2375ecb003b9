"""Application bootstrap for the XFB player.

Responsibilities:
 - Qt environment flags and QApplication creation
 - Application identity (names drive ``QStandardPaths``), window icon, base style
 - Splash screen progress reporting
 - Per-user config provisioning, settings loading, locale and theme application
 - Main window construction and display, splash hand-off

Stages run strictly in order through a small driver loop. Each stage returns a
:class:`~xfb.app.outcome.StageOutcome`:

 - success advances
 - degraded advances and records a :class:`BootstrapWarning`
 - fatal hides the splash, shows a modal error and ends with exit code 1;
   nothing after the failing stage runs, in particular no window is built

The products of the run are gathered into an immutable :class:`BootstrapResult`
which is handed to the main window factory instead of being published through
globals.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
import logging
import os
import sys
import time
from pathlib import Path
from typing import Any, Callable, List, MutableMapping, Optional, Sequence

from PyQt6.QtGui import QIcon
from PyQt6.QtWidgets import QApplication, QMessageBox

from ..constants import (
    APP_NAME,
    BASE_STYLE,
    CONFIG_FILENAME,
    LOCALE_WARNING_PAUSE,
    MACOS_BUNDLE_ICON,
    ORGANIZATION_NAME,
    QT_ENVIRONMENT,
    READY_PAUSE,
    RESOURCE_DIR,
    SPLASH_IMAGE,
    TRANSLATIONS_SUBDIR,
    WINDOW_ICON,
)
from ..design.theme_manager import ThemeApplier, ThemeResolution
from ..i18n import tr
from ..i18n.locale import LocaleResolution, LocaleResolver
from ..services.logging_service import LoggingService
from .config_store import SettingsRecord, SettingsStore
from .outcome import DegradedReason, StageOutcome
from .provisioning import ConfigProvisioner, ConfigurationFile, resolve_config_dir
from .splash import WARNING_COLOR, ProgressReporter
from .timing import StageTimer

__all__ = [
    "BootstrapState",
    "BootstrapPaths",
    "BootstrapWarning",
    "BootstrapResult",
    "BootstrapReport",
    "BootstrapOrchestrator",
    "EXIT_FATAL",
]

_logger = logging.getLogger(__name__)

EXIT_FATAL = 1


class BootstrapState(Enum):
    INIT = "init"
    ENV_SETUP = "env_setup"
    APP_IDENTITY = "app_identity"
    STYLE_BASE = "style_base"
    SPLASH_SHOWN = "splash_shown"
    CONFIG_READY = "config_ready"
    SETTINGS_LOADED = "settings_loaded"
    LOCALE_RESOLVED = "locale_resolved"
    THEME_APPLIED = "theme_applied"
    WINDOW_CONSTRUCTED = "window_constructed"
    WINDOW_SHOWN = "window_shown"
    SPLASH_FINISHED = "splash_finished"
    EVENT_LOOP = "event_loop"


_STAGE_LABELS = {
    BootstrapState.CONFIG_READY: "Configuration Error",
}


@dataclass(frozen=True)
class BootstrapPaths:
    """Locations of bundled assets and the per-user config directory.

    ``config_dir`` of None means "ask the platform" at the config stage.
    """

    resource_dir: Path = RESOURCE_DIR
    config_dir: Optional[str] = None
    config_file_name: str = CONFIG_FILENAME

    @property
    def bundled_default(self) -> Path:
        return self.resource_dir / self.config_file_name

    @property
    def translations_dir(self) -> Path:
        return self.resource_dir / TRANSLATIONS_SUBDIR

    @property
    def stylesheet_dir(self) -> Path:
        return self.resource_dir

    @property
    def splash_image(self) -> Path:
        return self.resource_dir / SPLASH_IMAGE

    @property
    def window_icon(self) -> Path:
        return self.resource_dir / WINDOW_ICON


@dataclass(frozen=True)
class BootstrapWarning:
    state: BootstrapState
    reason: DegradedReason
    detail: str = ""


@dataclass(frozen=True)
class BootstrapResult:
    """Everything the interactive session needs from startup."""

    config_file: ConfigurationFile
    settings: SettingsRecord
    locale: LocaleResolution
    theme: ThemeResolution
    warnings: tuple[BootstrapWarning, ...] = ()


@dataclass
class BootstrapReport:
    """Summary returned by :meth:`BootstrapOrchestrator.bootstrap`.

    Attributes
    ----------
    state: Last state successfully reached.
    exit_code: 0 when ready for the event loop, 1 after a fatal stage.
    result: Bootstrap result (None if startup aborted before the window stage).
    window: Constructed main window, if any.
    failed_stage: State whose stage failed fatally.
    failure: The fatal outcome.
    warnings: Degraded outcomes recorded along the way.
    timings: Stage name -> seconds.
    """

    state: BootstrapState
    exit_code: int = 0
    result: Optional[BootstrapResult] = None
    window: Any = None
    failed_stage: Optional[BootstrapState] = None
    failure: Optional[StageOutcome] = None
    warnings: List[BootstrapWarning] = field(default_factory=list)
    timings: dict[str, float] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.exit_code == 0


def _default_window_factory(result: BootstrapResult) -> Any:
    from ..main_window import PlayerWindow  # local import; main_window imports this module

    return PlayerWindow(result)


def _show_critical(title: str, message: str, details: str) -> None:  # pragma: no cover - modal UI
    box = QMessageBox(QMessageBox.Icon.Critical, title, message)
    if details:
        box.setDetailedText(details)
    box.exec()


class BootstrapOrchestrator:
    """Drives the startup stages and owns fatal / degraded decisions.

    Collaborators are injectable so each transition can be exercised in tests:
    ``delay`` replaces the pacing sleeps, ``error_presenter`` the modal error
    dialog, ``window_factory`` the main window, ``translator_factory`` the Qt
    translator and ``config_dir_resolver`` the platform location lookup.
    """

    def __init__(
        self,
        *,
        paths: Optional[BootstrapPaths] = None,
        argv: Optional[Sequence[str]] = None,
        window_factory: Callable[[BootstrapResult], Any] = _default_window_factory,
        delay: Callable[[float], None] = time.sleep,
        error_presenter: Callable[[str, str, str], None] = _show_critical,
        translator_factory: Optional[Callable[[], Any]] = None,
        config_dir_resolver: Callable[[], Optional[str]] = resolve_config_dir,
        logging_service: Optional[LoggingService] = None,
        env: Optional[MutableMapping[str, str]] = None,
    ) -> None:
        self.paths = paths or BootstrapPaths()
        self._argv = list(argv) if argv is not None else sys.argv[:1]
        self._window_factory = window_factory
        self._delay = delay
        self._error_presenter = error_presenter
        self._translator_factory = translator_factory
        self._config_dir_resolver = config_dir_resolver
        self._logging_service = logging_service
        self._env = os.environ if env is None else env

        self.state = BootstrapState.INIT
        self.timer = StageTimer()
        self.warnings: List[BootstrapWarning] = []
        self.app: Any = None
        self.reporter: Optional[ProgressReporter] = None
        self.locale_resolver: Optional[LocaleResolver] = None
        self.config_file: Optional[ConfigurationFile] = None
        self.settings: Optional[SettingsRecord] = None
        self.locale: Optional[LocaleResolution] = None
        self.theme: Optional[ThemeResolution] = None
        self.result: Optional[BootstrapResult] = None
        self.window: Any = None

    # ------------------------------------------------------------------
    # Driver
    # ------------------------------------------------------------------
    def stages(self) -> list[tuple[BootstrapState, Callable[[], StageOutcome]]]:
        return [
            (BootstrapState.ENV_SETUP, self._setup_environment),
            (BootstrapState.APP_IDENTITY, self._set_identity),
            (BootstrapState.STYLE_BASE, self._set_base_style),
            (BootstrapState.SPLASH_SHOWN, self._show_splash),
            (BootstrapState.CONFIG_READY, self._provision_config),
            (BootstrapState.SETTINGS_LOADED, self._load_settings),
            (BootstrapState.LOCALE_RESOLVED, self._resolve_locale),
            (BootstrapState.THEME_APPLIED, self._apply_theme),
            (BootstrapState.WINDOW_CONSTRUCTED, self._construct_window),
            (BootstrapState.WINDOW_SHOWN, self._show_window),
            (BootstrapState.SPLASH_FINISHED, self._finish_splash),
        ]

    def bootstrap(self) -> BootstrapReport:
        """Run every stage up to (not including) the event loop."""
        for state, stage in self.stages():
            with self.timer.measure(state.value):
                outcome = stage()
            if outcome.is_fatal:
                return self._abort(state, outcome)
            if outcome.is_degraded:
                detail = outcome.message()
                warning = BootstrapWarning(state, outcome.reason, detail)
                _logger.warning("Stage %s degraded: %s", state.value, detail or outcome.reason.value)
                self.warnings.append(warning)
            self.state = state
        self._export_timings()
        return self._report()

    def run(self) -> int:
        """Bootstrap and enter the Qt event loop. Returns the process exit code."""
        report = self.bootstrap()
        if not report.ok:
            return report.exit_code
        self.state = BootstrapState.EVENT_LOOP
        return self.app.exec()

    def _abort(self, state: BootstrapState, outcome: StageOutcome) -> BootstrapReport:
        _logger.critical("Startup aborted at %s: %s", state.value, outcome.reason.value)
        if self.reporter is not None:
            self.reporter.hide()
        details = self._logging_service.error_details() if self._logging_service else ""
        title = tr(_STAGE_LABELS.get(state, "Startup Error"))
        self._error_presenter(title, outcome.message(tr), details)
        self._export_timings()
        report = self._report()
        report.exit_code = EXIT_FATAL
        report.failed_stage = state
        report.failure = outcome
        return report

    def _report(self) -> BootstrapReport:
        return BootstrapReport(
            state=self.state,
            result=self.result,
            window=self.window,
            warnings=list(self.warnings),
            timings={t.name: t.duration for t in self.timer.timings},
        )

    def _export_timings(self) -> None:
        path = self._env.get("XFB_STARTUP_TIMING_JSON")
        if path:
            self.timer.export(path)

    def _progress(self, message: str, color: Any = None) -> None:
        self.reporter.update(tr(message), color=color)

    # ------------------------------------------------------------------
    # Stages
    # ------------------------------------------------------------------
    def _setup_environment(self) -> StageOutcome:
        # Read by Qt when the application object is created; later changes are ignored.
        for key, value in QT_ENVIRONMENT.items():
            self._env[key] = value
        existing = QApplication.instance()
        if existing is not None:
            _logger.debug("Reusing existing QApplication; Qt environment flags may not apply")
            self.app = existing
        else:
            QApplication.setDesktopSettingsAware(False)
            self.app = QApplication(self._argv)
        return StageOutcome.success(self.app)

    def _set_identity(self) -> StageOutcome:
        self.app.setApplicationName(APP_NAME)
        self.app.setOrganizationName(ORGANIZATION_NAME)
        icon_path = Path(MACOS_BUNDLE_ICON) if sys.platform == "darwin" else self.paths.window_icon
        if icon_path.exists():
            self.app.setWindowIcon(QIcon(str(icon_path)))
        else:
            _logger.debug("Window icon not found: %s", icon_path)
        return StageOutcome.success()

    def _set_base_style(self) -> StageOutcome:
        self.app.setStyle(BASE_STYLE)
        return StageOutcome.success()

    def _show_splash(self) -> StageOutcome:
        self.reporter = ProgressReporter(self.paths.splash_image)
        self.reporter.show()
        self._progress("Initializing...")
        return StageOutcome.success(self.reporter)

    def _provision_config(self) -> StageOutcome:
        config_dir = self.paths.config_dir or self._config_dir_resolver()
        outcome = ConfigProvisioner().ensure(
            config_dir,
            self.paths.config_file_name,
            self.paths.bundled_default,
            on_copy=lambda: self._progress("Setting up default configuration..."),
        )
        if not outcome.is_fatal:
            self.config_file = outcome.value
        return outcome

    def _load_settings(self) -> StageOutcome:
        self._progress("Loading settings...")
        self.settings = SettingsStore().load(self.config_file.path)
        return StageOutcome.success(self.settings)

    def _resolve_locale(self) -> StageOutcome:
        language = self.settings.language
        self._progress(LocaleResolver.loading_message(language))
        kwargs = {}
        if self._translator_factory is not None:
            kwargs["translator_factory"] = self._translator_factory
        self.locale_resolver = LocaleResolver(self.app, self.paths.translations_dir, **kwargs)
        self.locale = self.locale_resolver.resolve(language)
        if not self.locale.warning:
            return StageOutcome.success(self.locale)
        self._progress("Failed to load translation!", color=WARNING_COLOR)
        self._delay(LOCALE_WARNING_PAUSE)
        return StageOutcome.degraded(
            DegradedReason.LOCALE_UNAVAILABLE,
            self.locale,
            f"Translation for '{language}' unavailable; using English",
        )

    def _apply_theme(self) -> StageOutcome:
        self._progress("Applying theme...")
        self.theme = ThemeApplier(self.app, self.paths.stylesheet_dir).apply(self.settings.dark_mode)
        if self.theme.stylesheet_loaded:
            return StageOutcome.success(self.theme)
        return StageOutcome.degraded(
            DegradedReason.STYLESHEET_MISSING,
            self.theme,
            f"Stylesheet {self.theme.stylesheet_path.name} missing; palette only",
        )

    def _construct_window(self) -> StageOutcome:
        self._progress("Loading main window...")
        self.result = BootstrapResult(
            config_file=self.config_file,
            settings=self.settings,
            locale=self.locale,
            theme=self.theme,
            warnings=tuple(self.warnings),
        )
        self.window = self._window_factory(self.result)
        return StageOutcome.success(self.window)

    def _show_window(self) -> StageOutcome:
        self._progress(f"{APP_NAME} is Ready!")
        self._delay(READY_PAUSE)
        if self.settings.full_screen:
            self.window.showFullScreen()
        else:
            self.window.show()
        return StageOutcome.success(self.window)

    def _finish_splash(self) -> StageOutcome:
        self.reporter.finish(self.window)
        return StageOutcome.success()
