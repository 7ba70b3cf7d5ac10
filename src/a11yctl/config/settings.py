"""Unified settings: CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs:  CLI flags passed by Click
  2. Env vars:     ``A11YCTL_*`` prefix, ``__`` for nested keys
  3. TOML file:    ``a11yctl.toml`` discovered via walk-up
  4. Code defaults: baked into the section models

Relative paths in any section resolve against :attr:`A11ySettings.project_root`
(the directory holding ``a11yctl.toml``, or CWD when there is none).
"""

from __future__ import annotations

import tomllib
from contextvars import ContextVar
from pathlib import Path
from typing import Any

import click
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from a11yctl.config.discovery import find_config
from a11yctl.config.models import AnalysisConfig, CopyCsvConfig, OutputConfig

# TOML document for the settings object currently being built by from_cli().
_pending_toml: ContextVar[dict[str, Any] | None] = ContextVar("_pending_toml", default=None)


def read_toml(path: Path) -> dict[str, Any]:
    """Parse *path*; a syntax error becomes a ClickException naming the file."""
    try:
        with path.open("rb") as fh:
            return tomllib.load(fh)
    except tomllib.TOMLDecodeError as exc:
        msg = f"Invalid TOML in {path}: {exc}"
        raise click.ClickException(msg) from exc


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Feeds an already-parsed ``a11yctl.toml`` document to pydantic-settings."""

    def __init__(self, settings_cls: type[BaseSettings], document: dict[str, Any]) -> None:
        super().__init__(settings_cls)
        self._document = document

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        return self._document.get(field_name), field_name, field_name in self._document

    def __call__(self) -> dict[str, Any]:
        return dict(self._document)


def _locate(config_path: str | None, project_root: Path | None) -> Path | None:
    if config_path:
        explicit = Path(config_path)
        return explicit if explicit.is_file() else None
    return find_config(project_root)


class A11ySettings(BaseSettings):
    """Resolved configuration for one CLI invocation.

    Attributes:
        project_root: Base directory for relative paths.
        config_path: The TOML file in use, or None.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "A11YCTL_",
        "env_nested_delimiter": "__",
    }

    project_root: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False
    log_file: bool = False
    no_interact: bool = False

    analysis: AnalysisConfig = Field(default_factory=AnalysisConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    copy_csv: CopyCsvConfig = Field(default_factory=CopyCsvConfig)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        document = _pending_toml.get() or {}
        return (init_settings, env_settings, TomlSettingsSource(settings_cls, document))

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        project_root: Path | None = None,
        **cli_flags: Any,
    ) -> A11ySettings:
        """Build settings for a CLI run.

        The config file is *config_path* when given, else the walk-up
        result from *project_root* (or CWD). Without an explicit
        *project_root*, the config file's directory becomes the root.
        """
        toml_path = _locate(config_path, project_root)
        if project_root is None:
            project_root = toml_path.parent if toml_path else Path.cwd()

        token = _pending_toml.set(read_toml(toml_path) if toml_path else {})
        try:
            return cls(project_root=project_root, config_path=toml_path, **cli_flags)
        finally:
            _pending_toml.reset(token)

    def resolve_path(self, path: Path | str) -> Path:
        """Resolve *path* against :attr:`project_root` unless it is absolute."""
        candidate = Path(path).expanduser()
        if candidate.is_absolute():
            return candidate
        return (self.project_root / candidate).resolve()
