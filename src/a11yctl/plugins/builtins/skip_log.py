"""Built-in plugin: log every skipped audit file or run as a structured warning."""

from __future__ import annotations

from typing import TYPE_CHECKING

from a11yctl.plugins.hookspecs import hookimpl
from a11yctl.services.observer import LoggingSkipReporter

if TYPE_CHECKING:
    from a11yctl.services.observer import SkipEvent


class SkipLogPlugin:
    def __init__(self) -> None:
        self._reporter = LoggingSkipReporter()

    @hookimpl
    def audit_skipped(self, event: SkipEvent) -> None:
        self._reporter.report(event)
