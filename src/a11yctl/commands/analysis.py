"""Command group: aggregated analysis over audit runs (run, copy-latest-csv)."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from a11yctl.commands._base import A11yGroup
from a11yctl.domain.types import AnalysisMode, OutputFormat

if TYPE_CHECKING:
    from a11yctl.commands._context import AppContext

_ANALYSIS_EXAMPLES = """\
  a11yctl analysis run --standard standards/EN301549-v3.2.1.json
  a11yctl analysis run --audits audits --mode all --format json --format csv
  a11yctl analysis copy-latest-csv --pick 1"""


@click.group(cls=A11yGroup, examples=_ANALYSIS_EXAMPLES)
@click.pass_obj
def analysis(app: AppContext) -> None:
    """Aggregate audit runs into compliance reports."""


@analysis.command(
    examples="""\
  a11yctl analysis run
  a11yctl analysis run --audits ./audits --standard ./EN301549-v3.2.1.json
  a11yctl analysis run --mode all --out ./reports --format csv
  a11yctl --json analysis run | jq .data.total_violations"""
)
@click.option(
    "--audits",
    "audits_path",
    type=click.Path(file_okay=False),
    default=None,
    help="Directory tree of audit-run JSON files.",
)
@click.option(
    "--standard",
    "standard_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Reference standard JSON file.",
)
@click.option(
    "--mode",
    type=click.Choice([m.value for m in AnalysisMode], case_sensitive=False),
    default=None,
    help="latest: newest run per site. all: every run.",
)
@click.option(
    "--out",
    "output_dir",
    type=click.Path(file_okay=False),
    default=None,
    help="Output directory for report files.",
)
@click.option(
    "--format",
    "formats",
    type=click.Choice([f.value for f in OutputFormat], case_sensitive=False),
    multiple=True,
    help="Report format to write (repeatable).",
)
@click.pass_obj
def run(
    app: AppContext,
    audits_path: str | None,
    standard_path: str | None,
    mode: str | None,
    output_dir: str | None,
    formats: tuple[str, ...],
) -> None:
    """Aggregate violations by WCAG principle, guideline, and criterion."""
    from a11yctl.plugins.reporter import HookSkipReporter
    from a11yctl.services.analysis import AnalysisService

    result = AnalysisService(app.settings, app.plugins).run(
        audits_path=audits_path,
        standard_path=standard_path,
        mode=mode,
        output_dir=output_dir,
        formats=list(formats) or None,
        reporter=HookSkipReporter(app.plugins),
    )
    app.emit(result)


def _prompt_for_index(count: int) -> int:
    while True:
        choice = click.prompt("Choose a file by number", type=int)
        if 1 <= choice <= count:
            return choice
        click.echo(f"Please enter a number between 1 and {count}.")


@analysis.command(
    "copy-latest-csv",
    examples="""\
  a11yctl analysis copy-latest-csv
  a11yctl analysis copy-latest-csv --pick 2
  a11yctl --no-interact analysis copy-latest-csv --dest-name cyprus.csv"""
)
@click.option(
    "--source-dir",
    type=click.Path(file_okay=False),
    default=None,
    help="Directory holding generated CSV reports.",
)
@click.option(
    "--dest-dir",
    type=click.Path(file_okay=False),
    default=None,
    help="Spreadsheet workspace directory.",
)
@click.option("--dest-name", default=None, help="File name for the copied CSV.")
@click.option("--pick", type=int, default=None, help="1-based index of the CSV to copy.")
@click.pass_obj
def copy_latest_csv(
    app: AppContext,
    source_dir: str | None,
    dest_dir: str | None,
    dest_name: str | None,
    pick: int | None,
) -> None:
    """Copy a generated CSV report into the spreadsheet workspace.

    Lists the CSV files in the source directory and asks which one to
    copy. With --no-interact the last file by name is copied.
    """
    from a11yctl.services.workspace import CsvCopyService

    service = CsvCopyService(app.settings)
    listing = service.list_candidates(source_dir)
    if not listing.ok:
        app.emit(listing)
        return

    items = listing.data["items"]
    if pick is None:
        if app.settings.no_interact:
            pick = len(items)
        else:
            if not app.settings.json_output:
                app.emit(listing)
            pick = _prompt_for_index(len(items))

    if not 1 <= pick <= len(items):
        from a11yctl.services.result import ServiceResult

        app.emit(
            ServiceResult.failure(
                "copy_csv",
                "INVALID_SELECTION",
                f"Selection {pick} is out of range (1-{len(items)})",
            )
        )
        return

    selected = Path(items[pick - 1]["path"])
    app.emit(service.copy(selected, dest_dir=dest_dir, dest_name=dest_name))
