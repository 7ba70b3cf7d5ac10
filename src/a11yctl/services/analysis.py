"""Aggregated analysis: the orchestrator over many audit runs.

Two modes:

- ``latest``: drain the loader, keep the newest run per site, then fold
  each survivor.
- ``all``: fold every admitted run as the loader yields it, with no
  deduplication across runs of the same site.

Every folded run feeds both the merged findings (reduced into the WCAG
tree once folding ends) and the per-site accumulator (updated as it goes).
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from datetime import datetime
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from a11yctl.domain.audit_run import AuditRun, findings_of
from a11yctl.domain.errors import A11yError, AuditRootError, StandardError
from a11yctl.domain.findings import MergedFindings
from a11yctl.domain.report import AnalysisReport, SkipCounts
from a11yctl.domain.standard import Standard
from a11yctl.domain.types import AnalysisMode, OutputFormat
from a11yctl.services._helpers import now_iso
from a11yctl.services.aggregations import violations_by_wcag_tree
from a11yctl.services.base import BaseService
from a11yctl.services.export import write_report
from a11yctl.services.loader import iter_audit_runs
from a11yctl.services.observer import (
    CollectingSkipReporter,
    LoggingSkipReporter,
    SkipReporter,
    SkipStage,
)
from a11yctl.services.result import ServiceResult
from a11yctl.services.selection import load_latest_audit_runs_by_site
from a11yctl.services.sites import SiteViolationAccumulator


def _coerce_standard(standard: Standard | Mapping[str, Any] | None) -> Standard:
    if isinstance(standard, Standard):
        return standard
    if standard is None:
        msg = "A reference standard is required"
        raise StandardError(msg)
    try:
        return Standard.model_validate(standard)
    except ValidationError as exc:
        msg = f"Invalid reference standard: {exc.error_count()} validation error(s)"
        raise StandardError(msg) from exc


def fold_audit_run(
    record: AuditRun,
    merged: MergedFindings,
    sites: SiteViolationAccumulator,
) -> None:
    """Add one admitted run to the merged findings and the site totals."""
    findings = findings_of(record)
    if findings is not None:
        merged.extend(findings)
    sites.add(record)


def run_aggregated_analysis(
    root_dir: Path | str | None,
    standard: Standard | Mapping[str, Any] | None,
    mode: AnalysisMode | str = AnalysisMode.LATEST,
    *,
    reporter: SkipReporter | None = None,
    now: datetime | None = None,
) -> AnalysisReport:
    """Run the ingestion and aggregation pipeline over *root_dir*.

    Args:
        root_dir: Directory tree holding audit-run JSON files.
        standard: Reference standard (model or raw mapping).
        mode: ``latest`` or ``all``.
        reporter: Receives a :class:`SkipEvent` for every dropped file or run.
        now: Override for ``generatedAt``.

    Raises:
        AuditRootError: *root_dir* is missing or unreadable.
        StandardError: *standard* is missing or malformed.
        ValueError: *mode* is not a known analysis mode.
    """
    resolved_standard = _coerce_standard(standard)
    resolved_mode = AnalysisMode(mode)
    generated_at = now_iso(now)

    skips = CollectingSkipReporter(forward_to=reporter)
    merged = MergedFindings()
    sites = SiteViolationAccumulator()

    runs: Iterable[AuditRun]
    if resolved_mode is AnalysisMode.LATEST:
        runs = load_latest_audit_runs_by_site(root_dir, reporter=skips)
    else:
        runs = iter_audit_runs(root_dir, reporter=skips)

    for record in runs:
        fold_audit_run(record, merged, sites)

    return AnalysisReport(
        generated_at=generated_at,
        aggregations={"violationsByWcagTree": violations_by_wcag_tree(merged, resolved_standard)},
        sites=sites.summaries(),
        skipped=SkipCounts(
            files=skips.count(SkipStage.LOAD),
            runs=skips.count(SkipStage.SELECT),
        ),
    )


def _principle_totals(tree: dict[str, Any]) -> dict[str, Any]:
    return {name: node.get("total", 0) for name, node in (tree.get("tree") or {}).items()}


class AnalysisService(BaseService):
    """Run an aggregated analysis and persist its report files."""

    def run(
        self,
        *,
        audits_path: Path | str | None = None,
        standard_path: Path | str | None = None,
        mode: AnalysisMode | str | None = None,
        output_dir: Path | str | None = None,
        formats: Iterable[OutputFormat | str] | None = None,
        reporter: SkipReporter | None = None,
    ) -> ServiceResult:
        """Load the standard, aggregate the audit tree, and write reports.

        Unset arguments fall back to the ``[analysis]`` and ``[output]``
        config sections.
        """
        op = "analysis_run"
        analysis_cfg = self._settings.analysis
        output_cfg = self._settings.output

        audits = self._path(audits_path or analysis_cfg.audits_path)
        standard_ref = standard_path or analysis_cfg.standard
        out_dir = self._path(output_dir or output_cfg.directory)
        wanted_formats = list(formats or output_cfg.formats)

        try:
            resolved_mode = AnalysisMode(mode or analysis_cfg.mode)
        except ValueError:
            return ServiceResult.failure(op, "INVALID_MODE", f"Unknown analysis mode: {mode!r}")

        from a11yctl.infrastructure.standards import load_standard

        try:
            standard = load_standard(self._path(standard_ref) if standard_ref else None)
            report = run_aggregated_analysis(
                audits,
                standard,
                resolved_mode,
                reporter=reporter or LoggingSkipReporter(),
            )
        except AuditRootError as exc:
            return ServiceResult.failure(op, "AUDITS_NOT_FOUND", str(exc), audits_path=str(audits))
        except StandardError as exc:
            return ServiceResult.failure(op, "INVALID_STANDARD", str(exc))
        except (A11yError, OSError) as exc:
            return ServiceResult.failure(op, "ANALYSIS_FAILED", str(exc))

        try:
            written = write_report(
                report,
                standard=standard,
                mode=resolved_mode,
                audits_path=audits,
                output_dir=out_dir,
                filename_prefix=output_cfg.filename_prefix,
                formats=wanted_formats,
            )
        except OSError as exc:
            return ServiceResult.failure(op, "OUTPUT_FAILED", str(exc), output_dir=str(out_dir))

        warnings: list[str] = []
        if report.skipped.files:
            warnings.append(f"{report.skipped.files} audit file(s) skipped as invalid")
        if report.skipped.runs:
            warnings.append(
                f"{report.skipped.runs} audit run(s) dropped without a site id or start time"
            )

        tree = report.wcag_tree
        total = tree.get("totalViolations", 0)
        files_written = [str(p) for p in written]
        self._notify_plugins(
            "post_analysis",
            warnings,
            mode=str(resolved_mode),
            total_violations=total,
            site_count=len(report.sites),
            files_written=files_written,
        )

        return ServiceResult.success(
            op,
            {
                "generated_at": report.generated_at,
                "mode": str(resolved_mode),
                "standard_id": standard.standard_id,
                "audits_path": str(audits),
                "total_violations": total,
                "principles": _principle_totals(tree),
                "sites": [s.model_dump(by_alias=True) for s in report.sites],
                "files_written": files_written,
            },
            warnings=warnings,
            meta={"skipped": report.skipped.model_dump()},
        )
