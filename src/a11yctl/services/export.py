"""Report export: flat WCAG CSV and persisted JSON/CSV report files."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Mapping
from datetime import datetime
from pathlib import Path
from typing import Any

from a11yctl.domain.report import AnalysisReport
from a11yctl.domain.standard import Standard
from a11yctl.domain.types import AnalysisMode, OutputFormat
from a11yctl.domain.wcag_tree import WcagTree
from a11yctl.infrastructure.filesystem import write_text_file
from a11yctl.services._helpers import date_compact

logger = logging.getLogger(__name__)

CSV_HEADER = "principle,guidelineId,criterionId,occurrences"


def _tree_rows(tree: WcagTree | Mapping[str, Any] | None) -> list[tuple[Any, Any, Any, Any]]:
    if tree is None:
        return []
    if isinstance(tree, WcagTree):
        return tree.rows()
    principles = tree.get("tree") or {}
    return [
        (principle, guideline_id, criterion_id, occurrences)
        for principle, principle_data in principles.items()
        for guideline_id, guideline_data in (principle_data.get("guidelines") or {}).items()
        for criterion_id, occurrences in (guideline_data.get("criteria") or {}).items()
    ]


def to_csv_wcag_flat(tree: WcagTree | Mapping[str, Any] | None) -> str:
    """Flatten a violations tree to ``principle,guidelineId,criterionId,occurrences``.

    Rows follow insertion order at every level (principles, then
    guidelines, then criteria), never numeric or lexicographic order.
    A missing or empty tree yields just the header. The output always
    ends with exactly one newline.

    Accepts a :class:`WcagTree` or its serialised ``{totalViolations, tree}`` form.
    """
    lines = [CSV_HEADER]
    lines.extend(",".join(str(cell) for cell in row) for row in _tree_rows(tree))
    return "\n".join(lines) + "\n"


def build_persisted_payload(
    report: AnalysisReport,
    *,
    standard: Standard,
    mode: AnalysisMode,
    audits_path: Path,
) -> dict[str, Any]:
    """Assemble the JSON document written next to the CSV."""
    payload = report.to_dict()
    return {
        "generatedAt": payload["generatedAt"],
        "standard": {
            "standardId": standard.standard_id,
            "wcagVersion": standard.wcag_version,
        },
        "mode": str(mode),
        "source": {"auditsPath": str(audits_path)},
        "aggregations": payload["aggregations"],
        "sites": payload["sites"],
    }


def write_report(
    report: AnalysisReport,
    *,
    standard: Standard,
    mode: AnalysisMode,
    audits_path: Path,
    output_dir: Path,
    filename_prefix: str,
    formats: Iterable[OutputFormat | str],
    now: datetime | None = None,
) -> list[Path]:
    """Write the requested report formats and return the written paths.

    Files are named ``<prefix>-YYYYMMDD.<ext>``; a second run on the same
    day overwrites the first.
    """
    wanted = {OutputFormat(f) for f in formats}
    stem = f"{filename_prefix}-{date_compact(now)}"
    written: list[Path] = []

    if OutputFormat.JSON in wanted:
        payload = build_persisted_payload(
            report, standard=standard, mode=mode, audits_path=audits_path
        )
        path = output_dir / f"{stem}.json"
        write_text_file(path, json.dumps(payload, indent=2, ensure_ascii=False))
        written.append(path)

    if OutputFormat.CSV in wanted:
        path = output_dir / f"{stem}.csv"
        write_text_file(path, to_csv_wcag_flat(report.wcag_tree))
        written.append(path)

    for path in written:
        logger.debug("Wrote report file %s", path)
    return written
