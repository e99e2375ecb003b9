"""Application layer: startup bootstrap and its components.

Public exports include the orchestrator, its result/report values and the
individual stage components (config provisioning, settings store, splash).
"""

from .bootstrap import (  # noqa: F401
    BootstrapOrchestrator,
    BootstrapPaths,
    BootstrapReport,
    BootstrapResult,
    BootstrapState,
    BootstrapWarning,
    EXIT_FATAL,
)
from .config_store import SettingsRecord, SettingsStore  # noqa: F401
from .outcome import DegradedReason, FatalReason, OutcomeKind, StageOutcome  # noqa: F401
from .provisioning import ConfigProvisioner, ConfigurationFile, resolve_config_dir  # noqa: F401
from .splash import ProgressReporter  # noqa: F401
from .timing import StageTimer  # noqa: F401

__all__ = [
    "BootstrapOrchestrator",
    "BootstrapPaths",
    "BootstrapReport",
    "BootstrapResult",
    "BootstrapState",
    "BootstrapWarning",
    "EXIT_FATAL",
    # Components
    "ConfigProvisioner",
    "ConfigurationFile",
    "resolve_config_dir",
    "SettingsRecord",
    "SettingsStore",
    "ProgressReporter",
    "StageTimer",
    # Outcomes
    "StageOutcome",
    "OutcomeKind",
    "FatalReason",
    "DegradedReason",
]
