"""AppContext: the object every subcommand receives via ``@click.pass_obj``.

It owns the resolved settings, sets up logging once per invocation, builds
the plugin manager on demand, and turns a ServiceResult into output and an
exit code.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from a11yctl.config.logging import configure_logging
from a11yctl.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from a11yctl.config.settings import A11ySettings
    from a11yctl.plugins.manager import PluginManager
    from a11yctl.services.result import ServiceResult


def _log_file_for(settings: A11ySettings) -> Path | None:
    if not settings.log_file:
        return None
    from a11yctl.services._helpers import now_compact

    return settings.resolve_path("log") / f"a11yctl-{now_compact()}.txt"


class AppContext:
    def __init__(self, settings: A11ySettings) -> None:
        self.settings = settings
        self._plugins: PluginManager | None = None
        self._output = OutputSettings(
            json_output=settings.json_output,
            quiet=settings.quiet,
            verbose=settings.verbose,
        )
        configure_logging(
            verbose=settings.verbose,
            log_json=settings.log_json,
            log_file=_log_file_for(settings),
        )

    @property
    def plugins(self) -> PluginManager:
        """Built-in plus entry-point plugins, loaded on first access."""
        if self._plugins is None:
            from a11yctl.plugins.builtins.skip_log import SkipLogPlugin
            from a11yctl.plugins.manager import PluginManager

            manager = PluginManager()
            manager.register_plugin(SkipLogPlugin(), name="skip-log")
            manager.load_entry_point_plugins()
            self._plugins = manager
        return self._plugins

    def emit(self, result: ServiceResult) -> None:
        """Print *result*; a failed result goes to stderr and exits 1.

        Human-mode warnings are echoed to stderr after the payload. In JSON
        mode they are part of the payload.
        """
        text = format_result(result, settings=self._output)
        if not result.ok:
            click.echo(text, err=True)
            click.get_current_context().exit(1)

        click.echo(text)
        if not self._output.json_output:
            for warning in result.warnings:
                click.echo(f"WARNING: {warning}", err=True)
