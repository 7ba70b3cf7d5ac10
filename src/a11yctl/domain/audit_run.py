"""Accessors over admitted audit-run records.

Admitted records are kept as the parsed JSON objects and never mutated.
These helpers read the few fields the pipeline needs without assuming
any of the nested objects are present.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

AuditRun = dict[str, Any]

REQUIRED_FIELDS: tuple[str, ...] = ("schemaVersion", "auditRun", "results")


def missing_fields(record: Any) -> list[str]:
    """Return the required top-level fields that are absent or empty."""
    return [name for name in REQUIRED_FIELDS if not record.get(name)]


def _section(record: AuditRun, name: str) -> dict[str, Any]:
    value = record.get(name)
    return value if isinstance(value, dict) else {}


def site_id_of(record: AuditRun) -> str | None:
    """Site id from ``scope.siteId``, falling back to ``auditRun.siteId``."""
    site_id = _section(record, "scope").get("siteId") or _section(record, "auditRun").get("siteId")
    if not site_id:
        return None
    return str(site_id)


def run_id_of(record: AuditRun) -> str | None:
    run_id = _section(record, "auditRun").get("auditRunId")
    return str(run_id) if run_id else None


def _from_epoch_ms(value: int | float) -> datetime | None:
    try:
        return datetime.fromtimestamp(value / 1000, UTC)
    except (OverflowError, OSError, ValueError):
        return None


def parse_timestamp(value: Any) -> datetime | None:
    """Parse an ISO 8601 string or epoch milliseconds; naive strings are UTC.

    Returns None for missing, boolean, or unparseable values.
    """
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return _from_epoch_ms(value)
    if not isinstance(value, str) or not value:
        return None
    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


def started_at_of(record: AuditRun) -> datetime | None:
    return parse_timestamp(_section(record, "auditRun").get("startedAt"))


def findings_of(record: AuditRun) -> dict[str, Any] | None:
    """The ``results.normalisedFindings`` object, or None when absent."""
    findings = _section(record, "results").get("normalisedFindings")
    return findings if isinstance(findings, dict) else None
