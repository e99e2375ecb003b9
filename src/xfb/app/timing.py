"""Bootstrap stage timing.

Records how long each bootstrap stage took so slow startups (network mounted
home directories, huge stylesheets, slow translator loads) can be diagnosed.
The orchestrator wraps every stage in :meth:`StageTimer.measure`; when
``XFB_STARTUP_TIMING_JSON`` is set the collected timings are exported there.
"""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass
import json
import logging
from pathlib import Path
from time import perf_counter
from typing import Iterator, List

__all__ = ["StageTiming", "StageTimer"]

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StageTiming:
    name: str
    start: float
    end: float

    @property
    def duration(self) -> float:  # seconds
        return self.end - self.start


class StageTimer:
    """Collects one timing record per executed stage.

    Usage:
        timer = StageTimer()
        with timer.measure("config_ready"):
            provision()
    """

    def __init__(self) -> None:
        self._started_at = perf_counter()
        self._timings: List[StageTiming] = []
        self._active: str | None = None

    @contextmanager
    def measure(self, name: str) -> Iterator[None]:
        if self._active is not None:
            raise RuntimeError(f"Stage '{name}' started while '{self._active}' still active")
        self._active = name
        start = perf_counter()
        try:
            yield
        finally:
            # Recorded even when the stage raised
            self._timings.append(StageTiming(name, start, perf_counter()))
            self._active = None

    @property
    def timings(self) -> List[StageTiming]:
        return list(self._timings)

    @property
    def names(self) -> List[str]:
        return [t.name for t in self._timings]

    @property
    def total_duration(self) -> float:
        if not self._timings:
            return 0.0
        return self._timings[-1].end - self._started_at

    def as_dict(self) -> dict:
        return {
            "total_duration": self.total_duration,
            "stages": [
                {"name": t.name, "duration": t.duration} for t in self._timings
            ],
        }

    def export(self, path: str | Path) -> bool:
        """Write timings as JSON. Export problems are logged, never raised."""
        try:
            with open(path, "w", encoding="utf-8") as fh:
                json.dump(self.as_dict(), fh, indent=2, sort_keys=True)
        except OSError as exc:
            _logger.warning("Could not export startup timings to %s: %s", path, exc)
            return False
        return True

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"StageTimer(stages={len(self._timings)}, total={self.total_duration:.4f}s)"
