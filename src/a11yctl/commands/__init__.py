"""CLI command groups, imported lazily by :func:`register_commands`."""

from __future__ import annotations

import click


def register_commands(cli: click.Group) -> None:
    from a11yctl.commands.analysis import analysis

    cli.add_command(analysis)
