"""Extension layer: plugin system via pluggy.

Discovery: entry_points (pip-installed) via pluggy setuptools entrypoints.
INVARIANT: Plugin failures are warnings, never errors.
"""

from a11yctl.plugins.hookspecs import hookimpl
from a11yctl.plugins.manager import PluginManager
from a11yctl.plugins.reporter import HookSkipReporter

__all__ = ["HookSkipReporter", "PluginManager", "hookimpl"]
