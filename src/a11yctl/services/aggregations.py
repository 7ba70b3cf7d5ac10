"""Pure reducers folding compliance findings against a reference standard.

Both reducers read only ``compliance`` findings; ``other`` findings never
count. A finding whose criterion id is empty, unknown to the standard, or
mapped to something that is not a POUR principle is skipped silently.
Missing or falsy ``occurrenceCount`` counts as one occurrence.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any

from a11yctl.domain.findings import Count, MergedFindings, NormalisedFinding
from a11yctl.domain.standard import Standard
from a11yctl.domain.types import Principle
from a11yctl.domain.wcag_tree import WcagTree

FindingsInput = MergedFindings | Mapping[str, Any] | None


def _compliance_findings(findings: FindingsInput) -> list[Any]:
    if findings is None:
        return []
    if isinstance(findings, MergedFindings):
        return findings.compliance
    compliance = findings.get("compliance")
    return compliance if isinstance(compliance, list) else []


def _resolved(
    findings: FindingsInput, standard: Standard
) -> Iterator[tuple[str, str, Count]]:
    """Yield ``(principle, criterion_id, count)`` for each countable compliance finding."""
    for raw in _compliance_findings(findings):
        finding = NormalisedFinding.coerce(raw)
        if finding is None or finding.wcag_criterion_id is None:
            continue
        principle = standard.principle_for(finding.wcag_criterion_id)
        if principle is None:
            continue
        yield principle, finding.wcag_criterion_id, finding.aggregation_count


def violations_by_principle(findings: FindingsInput, standard: Standard) -> dict[str, Any]:
    """Count compliance violations per POUR principle.

    Returns ``{"totalViolations": n, "byPrinciple": {principle: n, ...}}``
    with all four principles always present, in POUR order.
    """
    by_principle: dict[str, Count] = {p.value: 0 for p in Principle}
    total: Count = 0
    for principle, _criterion_id, count in _resolved(findings, standard):
        by_principle[principle] += count
        total += count
    return {"totalViolations": total, "byPrinciple": by_principle}


def build_wcag_tree(findings: FindingsInput, standard: Standard) -> WcagTree:
    """Fold compliance findings into a principle → guideline → criterion tree."""
    tree = WcagTree()
    for principle, criterion_id, count in _resolved(findings, standard):
        tree.add(principle, criterion_id, count)
    return tree


def violations_by_wcag_tree(findings: FindingsInput, standard: Standard) -> dict[str, Any]:
    """Serialised form of :func:`build_wcag_tree` (``{totalViolations, tree}``)."""
    return build_wcag_tree(findings, standard).to_dict()
