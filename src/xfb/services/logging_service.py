"""Logging service for the startup sequence.

Provides:
 - ``configure_logging``: stream handler on the root logger at ``XFB_LOG_LEVEL``
 - ``LoggingService``: in-process handler capturing recent records into a
   ring buffer so the fatal startup dialog can show what went wrong

Design goals:
 - No Qt dependency (headless testability)
 - Capacity-bound ring buffer with O(1) append
 - Filtering by level name or logger name substring
"""

from __future__ import annotations

import logging
import os
from collections import deque
from dataclasses import dataclass
from typing import Deque, List, Mapping, Optional

__all__ = [
    "LogEntry",
    "LoggingService",
    "configure_logging",
    "LOG_FORMAT",
]

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


@dataclass(frozen=True)
class LogEntry:
    level: str
    name: str
    message: str
    created: float


class _RingBufferHandler(logging.Handler):
    def __init__(self, svc: "LoggingService") -> None:
        super().__init__()
        self._svc = svc

    def emit(self, record: logging.LogRecord) -> None:  # noqa: D401
        self._svc._ingest_record(record)


class LoggingService:
    def __init__(self, capacity: int = 500) -> None:
        self._capacity = capacity
        self._entries: Deque[LogEntry] = deque(maxlen=capacity)
        self._handler = _RingBufferHandler(self)
        self._handler.setLevel(logging.DEBUG)
        self._attached = False

    # Lifecycle --------------------------------------------------------
    def attach_root(self) -> None:
        if self._attached:
            return
        root = logging.getLogger()
        root.addHandler(self._handler)
        if root.level > logging.DEBUG:
            root.setLevel(logging.DEBUG)
        self._attached = True

    def detach_root(self) -> None:
        if not self._attached:
            return
        logging.getLogger().removeHandler(self._handler)
        self._attached = False

    def _ingest_record(self, record: logging.LogRecord) -> None:
        self._entries.append(
            LogEntry(
                level=record.levelname,
                name=record.name,
                message=record.getMessage(),
                created=record.created,
            )
        )

    # Query ------------------------------------------------------------
    def recent(self, limit: Optional[int] = None) -> List[LogEntry]:
        data = list(self._entries)
        return data[-limit:] if limit is not None else data

    def filter(
        self, *, level: str | None = None, name_contains: str | None = None
    ) -> List[LogEntry]:
        out: List[LogEntry] = []
        for e in self.recent():
            if level and e.level != level:
                continue
            if name_contains and name_contains not in e.name:
                continue
            out.append(e)
        return out

    def error_details(self, limit: int = 10) -> str:
        """Recent ERROR/CRITICAL messages joined for display in a dialog."""
        errors = [e for e in self.recent() if e.level in ("ERROR", "CRITICAL")]
        return "\n".join(e.message for e in errors[-limit:])

    def clear(self) -> None:
        self._entries.clear()


def configure_logging(env: Optional[Mapping[str, str]] = None) -> int:
    """Install a console handler at the level named by ``XFB_LOG_LEVEL``.

    Unknown level names fall back to INFO. Returns the numeric level used.
    """
    if env is None:
        env = os.environ
    name = env.get("XFB_LOG_LEVEL", "INFO").strip().upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        level = logging.INFO
    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root = logging.getLogger()
    root.addHandler(handler)
    root.setLevel(min(root.level or logging.WARNING, level))
    return level
