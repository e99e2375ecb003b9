"""Stage outcome values exchanged between bootstrap components.

Every fallible bootstrap operation reports one of three outcomes instead of
raising:

 - ``SUCCESS``  -> advance with ``value``
 - ``FATAL``    -> abort startup; ``reason`` is a :class:`FatalReason`
 - ``DEGRADED`` -> advance with ``value`` as the documented fallback and record
   ``reason`` (a :class:`DegradedReason`) as a warning

The orchestrator is the only consumer that turns outcomes into control flow.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional, Union

__all__ = [
    "OutcomeKind",
    "FatalReason",
    "DegradedReason",
    "StageOutcome",
]


class OutcomeKind(Enum):
    SUCCESS = "success"
    FATAL = "fatal"
    DEGRADED = "degraded"


class FatalReason(Enum):
    LOCATION_UNAVAILABLE = "location_unavailable"
    DIRECTORY_CREATE_FAILED = "directory_create_failed"
    DEFAULT_COPY_FAILED = "default_copy_failed"


class DegradedReason(Enum):
    LOCALE_UNAVAILABLE = "locale_unavailable"
    STYLESHEET_MISSING = "stylesheet_missing"
    PERMISSIONS_NOT_SET = "permissions_not_set"


@dataclass(frozen=True)
class StageOutcome:
    """Result of a single bootstrap stage.

    Attributes
    ----------
    kind: Success, fatal or degraded.
    value: Stage product (or fallback value when degraded). None when fatal.
    reason: Fatal or degraded reason; None on success.
    detail: Human readable description template. ``%1``, ``%2``... are
        placeholders for ``args`` so the template can be translated as is.
    args: Values substituted into ``detail`` by :meth:`message`.
    """

    kind: OutcomeKind
    value: Any = None
    reason: Optional[Union[FatalReason, DegradedReason]] = None
    detail: str = ""
    args: tuple[str, ...] = ()

    @classmethod
    def success(cls, value: Any = None) -> "StageOutcome":
        return cls(OutcomeKind.SUCCESS, value=value)

    @classmethod
    def fatal(cls, reason: FatalReason, detail: str = "", *args: Any) -> "StageOutcome":
        return cls(OutcomeKind.FATAL, reason=reason, detail=detail, args=tuple(str(a) for a in args))

    @classmethod
    def degraded(
        cls, reason: DegradedReason, fallback: Any, detail: str = "", *args: Any
    ) -> "StageOutcome":
        return cls(
            OutcomeKind.DEGRADED,
            value=fallback,
            reason=reason,
            detail=detail,
            args=tuple(str(a) for a in args),
        )

    def message(self, translate: Optional[Callable[[str], str]] = None) -> str:
        """Render ``detail`` with ``args``, translating the template first."""
        text = translate(self.detail) if translate is not None and self.detail else self.detail
        # Highest index first so %1 never eats the prefix of %10
        for index in range(len(self.args), 0, -1):
            text = text.replace(f"%{index}", self.args[index - 1])
        return text

    @property
    def is_success(self) -> bool:
        return self.kind is OutcomeKind.SUCCESS

    @property
    def is_fatal(self) -> bool:
        return self.kind is OutcomeKind.FATAL

    @property
    def is_degraded(self) -> bool:
        return self.kind is OutcomeKind.DEGRADED
