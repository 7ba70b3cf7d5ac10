"""Root CLI group for a11yctl with global flags and command registration."""

from __future__ import annotations

from typing import Any

import click

from a11yctl import __version__
from a11yctl.commands import register_commands
from a11yctl.commands._context import AppContext
from a11yctl.config.settings import A11ySettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="a11yctl")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug logging.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("--log-file", is_flag=True, help="Also write logs to log/a11yctl-<timestamp>.txt.")
@click.option("--no-interact", is_flag=True, help="Never prompt; pick defaults instead.")
@click.option("-c", "--config", "config_path", default=None, help="Config file to use.")
@click.pass_context
def cli(ctx: click.Context, config_path: str | None, **flags: Any) -> None:
    """a11yctl: accessibility audit analysis CLI.

    Produces analysis artefacts only; it makes no compliance claims.
    """
    ctx.obj = AppContext(A11ySettings.from_cli(config_path=config_path, **flags))
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
