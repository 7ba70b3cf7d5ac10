"""Plugin manager for a11yctl hooks.

Third-party plugins are pip-installed packages exposing an entry point in
the ``a11yctl.plugins`` group. Built-ins are registered by the CLI before
entry points are loaded.
"""

from __future__ import annotations

import inspect
import logging

import pluggy

from a11yctl.plugins.hookspecs import PROJECT_NAME, A11yHookSpec

ENTRY_POINT_GROUP = "a11yctl.plugins"

logger = logging.getLogger(__name__)


class PluginManager(pluggy.PluginManager):
    """pluggy manager pre-loaded with the a11yctl hook specifications."""

    def __init__(self) -> None:
        super().__init__(PROJECT_NAME)
        self.add_hookspecs(A11yHookSpec)
        self.entry_points_loaded = False

    def register_plugin(self, plugin: object, name: str | None = None) -> str | None:
        name = name or type(plugin).__name__
        registered = self.register(plugin, name=name)
        logger.debug("Registered plugin: %s", name)
        return registered

    def load_entry_point_plugins(self) -> list[str]:
        """Load installed plugins and return the names of everything registered."""
        count = self.load_setuptools_entrypoints(ENTRY_POINT_GROUP)
        logger.debug("Loaded %d entry-point plugin(s)", count)
        self._instantiate_class_plugins()
        self.entry_points_loaded = True
        return self.plugin_names()

    def plugin_names(self) -> list[str]:
        return [name for name, _plugin in self.list_name_plugin()]

    def _instantiate_class_plugins(self) -> None:
        # An entry point may name a class; its hookimpls need an instance.
        for name, plugin in self.list_name_plugin():
            if not inspect.isclass(plugin):
                continue
            self.unregister(plugin)
            try:
                instance = plugin()
            except Exception:
                logger.warning("Cannot instantiate plugin %s", name, exc_info=True)
                continue
            self.register(instance, name=name)
