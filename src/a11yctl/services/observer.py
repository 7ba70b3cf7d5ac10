"""Skip notifications: how tolerated failures are made observable.

The pipeline never logs or prints when it drops an input. It builds a
:class:`SkipEvent` and hands it to whatever :class:`SkipReporter` the
caller injected.

INVARIANT: Reporter failures are logged, never raised.
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path
from typing import Protocol

import structlog

logger = logging.getLogger(__name__)


class SkipStage(StrEnum):
    LOAD = "load"
    SELECT = "select"


class SkipReason(StrEnum):
    READ_ERROR = "read_error"
    INVALID_JSON = "invalid_json"
    NOT_AN_OBJECT = "not_an_object"
    MISSING_FIELDS = "missing_fields"
    MISSING_SITE_ID = "missing_site_id"
    INVALID_STARTED_AT = "invalid_started_at"


@dataclass(frozen=True)
class SkipEvent:
    """One dropped input: a file rejected by the loader or a run dropped by selection."""

    stage: SkipStage
    reason: SkipReason
    path: Path | None = None
    run_id: str | None = None
    detail: str = ""

    def describe(self) -> str:
        target = str(self.path) if self.path else (self.run_id or "audit run")
        text = f"Skipped {target}: {self.reason}"
        return f"{text} ({self.detail})" if self.detail else text


class SkipReporter(Protocol):
    def report(self, event: SkipEvent) -> None: ...


class NullSkipReporter:
    """Discards every event."""

    def report(self, event: SkipEvent) -> None:
        return None


@dataclass
class CollectingSkipReporter:
    """Keeps every event and per-stage counts, optionally forwarding each one."""

    forward_to: SkipReporter | None = None
    events: list[SkipEvent] = field(default_factory=list)
    by_stage: Counter[str] = field(default_factory=Counter)

    def report(self, event: SkipEvent) -> None:
        self.events.append(event)
        self.by_stage[event.stage] += 1
        if self.forward_to is not None:
            notify(self.forward_to, event)

    def count(self, stage: SkipStage) -> int:
        return self.by_stage[stage]


class LoggingSkipReporter:
    """Emits one structlog warning per skipped input."""

    def __init__(self, logger_name: str = "a11yctl.skips") -> None:
        self._log = structlog.get_logger(logger_name)

    def report(self, event: SkipEvent) -> None:
        self._log.warning(
            "audit.skipped",
            stage=str(event.stage),
            reason=str(event.reason),
            path=str(event.path) if event.path else None,
            run_id=event.run_id,
            detail=event.detail or None,
        )


def notify(reporter: SkipReporter | None, event: SkipEvent) -> None:
    """Deliver *event* to *reporter*, swallowing and logging reporter failures."""
    if reporter is None:
        return
    try:
        reporter.report(event)
    except Exception:
        logger.debug("Skip reporter %r failed", reporter, exc_info=True)
