"""Hook specifications: events a plugin can observe during an analysis."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pluggy

if TYPE_CHECKING:
    from a11yctl.services.observer import SkipEvent

PROJECT_NAME = "a11yctl"

hookspec = pluggy.HookspecMarker(PROJECT_NAME)
hookimpl = pluggy.HookimplMarker(PROJECT_NAME)


class A11yHookSpec:
    @hookspec
    def audit_skipped(self, event: SkipEvent) -> None:
        """Called for every audit file or run dropped by the pipeline."""

    @hookspec
    def post_analysis(
        self,
        mode: str,
        total_violations: int | float,
        site_count: int,
        files_written: list[str],
    ) -> None:
        """Called after an analysis run has written its reports."""
