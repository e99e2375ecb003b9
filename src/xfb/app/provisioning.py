"""Per-user configuration provisioning.

On first run the bundled default ``xfb.conf`` is copied into the platform's
writable configuration directory. Later runs find the file in place and leave
it untouched so user edits survive upgrades and restarts.

Location resolution uses ``QStandardPaths`` which depends on the application
and organization names; they must be set before calling
:func:`resolve_config_dir`.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
import os
import shutil
import stat
from pathlib import Path
from typing import Callable, Mapping, Optional

from .outcome import DegradedReason, FatalReason, StageOutcome

__all__ = [
    "ConfigurationFile",
    "ConfigProvisioner",
    "resolve_config_dir",
    "CONFIG_FILE_MODE",
]

_logger = logging.getLogger(__name__)

# rw-r--r--
CONFIG_FILE_MODE = stat.S_IRUSR | stat.S_IWUSR | stat.S_IRGRP | stat.S_IROTH


@dataclass(frozen=True)
class ConfigurationFile:
    path: Path
    created: bool = False


def resolve_config_dir(env: Optional[Mapping[str, str]] = None) -> Optional[str]:
    """Return the writable config directory, or None if the platform has none.

    ``XFB_CONFIG_DIR`` overrides the platform location (portable installs, tests).
    """
    if env is None:
        env = os.environ
    override = env.get("XFB_CONFIG_DIR")
    if override:
        return override
    from PyQt6.QtCore import QStandardPaths

    location = QStandardPaths.writableLocation(QStandardPaths.StandardLocation.AppConfigLocation)
    return location or None


class ConfigProvisioner:
    """Ensures the per-user configuration file exists."""

    def ensure(
        self,
        config_dir: str | Path | None,
        config_file_name: str,
        bundled_default: str | Path,
        on_copy: Optional[Callable[[], None]] = None,
    ) -> StageOutcome:
        """Provision ``config_dir / config_file_name``.

        ``on_copy`` is called right before a first-run copy starts, so callers
        can report progress without probing the filesystem themselves.
        """
        if not config_dir:
            _logger.error("Could not determine writable config location")
            return StageOutcome.fatal(
                FatalReason.LOCATION_UNAVAILABLE,
                "Cannot find writable location for configuration.",
            )
        directory = Path(config_dir)
        try:
            if not directory.is_dir():
                _logger.info("Creating configuration directory: %s", directory)
                directory.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            _logger.error("Failed to create configuration directory %s: %s", directory, exc)
            return StageOutcome.fatal(
                FatalReason.DIRECTORY_CREATE_FAILED,
                "Could not create configuration directory:\n%1",
                directory,
            )

        target = directory / config_file_name
        try:
            target_exists = target.exists()
        except OSError as exc:
            _logger.error("Cannot access configuration file %s: %s", target, exc)
            return StageOutcome.fatal(
                FatalReason.DEFAULT_COPY_FAILED,
                "Could not access configuration file:\n%1",
                target,
            )
        if target_exists:
            _logger.debug("Using existing configuration file: %s", target)
            return StageOutcome.success(ConfigurationFile(target, created=False))

        if on_copy is not None:
            on_copy()
        source = Path(bundled_default)
        # Copy next to the target and rename, so an interrupted copy never
        # leaves a truncated file that later runs would treat as user settings.
        tmp = target.with_suffix(target.suffix + ".tmp")
        try:
            shutil.copyfile(source, tmp)
            os.replace(tmp, target)
        except OSError as exc:
            _logger.error("Failed to copy default configuration from %s to %s: %s", source, target, exc)
            _logger.error("Bundled default exists? %s", os.path.exists(source))
            _logger.error("Check write permissions for %s", directory)
            try:
                tmp.unlink(missing_ok=True)
            except OSError as cleanup_exc:
                _logger.warning("Could not remove partial copy %s: %s", tmp, cleanup_exc)
            return StageOutcome.fatal(
                FatalReason.DEFAULT_COPY_FAILED,
                "Could not copy default configuration file.",
            )
        _logger.info("Copied default configuration to: %s", target)

        provisioned = ConfigurationFile(target, created=True)
        try:
            os.chmod(target, CONFIG_FILE_MODE)
        except OSError as exc:
            _logger.warning("Could not set permissions on %s: %s", target, exc)
            return StageOutcome.degraded(
                DegradedReason.PERMISSIONS_NOT_SET,
                provisioned,
                "Permissions unchanged on %1",
                target,
            )
        return StageOutcome.success(provisioned)
