"""Per-site raw occurrence totals, independent of the reference standard."""

from __future__ import annotations

from typing import Any

from a11yctl.domain.audit_run import AuditRun, findings_of, site_id_of
from a11yctl.domain.findings import Count, NormalisedFinding
from a11yctl.domain.report import SiteSummary, SiteViolations


def sum_occurrences(findings: Any) -> Count:
    """Sum ``occurrenceCount`` over a findings array; missing or non-numeric counts are 0."""
    if not isinstance(findings, list):
        return 0
    total: Count = 0
    for raw in findings:
        finding = NormalisedFinding.coerce(raw)
        if finding is not None:
            total += finding.accumulation_count
    return total


class SiteViolationAccumulator:
    """Running compliance/other totals per site across every folded run.

    Sites are reported in the order they were first folded.
    Runs without a resolvable site id are ignored.
    """

    def __init__(self) -> None:
        self._totals: dict[str, SiteViolations] = {}

    def add(self, record: AuditRun) -> None:
        site_id = site_id_of(record)
        if site_id is None:
            return
        findings = findings_of(record) or {}
        totals = self._totals.setdefault(site_id, SiteViolations())
        totals.compliance += sum_occurrences(findings.get("compliance"))
        totals.other += sum_occurrences(findings.get("other"))

    def __len__(self) -> int:
        return len(self._totals)

    def summaries(self) -> list[SiteSummary]:
        return [
            SiteSummary(site_id=site_id, violations=totals.model_copy())
            for site_id, totals in self._totals.items()
        ]
