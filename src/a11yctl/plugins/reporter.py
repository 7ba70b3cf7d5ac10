"""Skip reporter that fans events out to plugins via the ``audit_skipped`` hook."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from a11yctl.plugins.manager import PluginManager
    from a11yctl.services.observer import SkipEvent


class HookSkipReporter:
    """Forwards each :class:`SkipEvent` to every plugin implementing ``audit_skipped``."""

    def __init__(self, plugins: PluginManager) -> None:
        self._plugins = plugins

    def report(self, event: SkipEvent) -> None:
        self._plugins.hook.audit_skipped(event=event)
