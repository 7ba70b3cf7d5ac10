"""Common constructor and helpers for command-facing services."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from a11yctl.config.settings import A11ySettings
    from a11yctl.plugins.manager import PluginManager

logger = logging.getLogger(__name__)


class BaseService:
    """Holds the settings and an optional plugin manager.

    Services take paths from arguments first and config second, and
    resolve either against the project root via :meth:`_path`.
    """

    def __init__(self, settings: A11ySettings, plugins: PluginManager | None = None) -> None:
        self._settings = settings
        self._plugins = plugins

    def _path(self, path: Path | str) -> Path:
        return self._settings.resolve_path(path)

    def _notify_plugins(self, hook_name: str, warnings: list[str], **payload: Any) -> None:
        """Call *hook_name* on every plugin; a raising plugin adds a warning."""
        if self._plugins is None:
            return
        hook = getattr(self._plugins.hook, hook_name)
        try:
            hook(**payload)
        except Exception:
            logger.debug("Plugin hook %s failed", hook_name, exc_info=True)
            warnings.append(f"Plugin hook {hook_name} failed")
