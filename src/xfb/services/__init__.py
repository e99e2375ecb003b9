"""Cross-cutting services used during startup."""

from .logging_service import LoggingService, LogEntry, configure_logging  # noqa: F401
