"""Latest-run-per-site selection.

Drains the loader completely before answering: the newest run for a site
may be the last file visited. Peak memory is one record per distinct site.

Ties on ``startedAt`` keep the record seen first during the scan. Scan
order follows directory listing order, so ties are not deterministic
across filesystems.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime
from pathlib import Path

from a11yctl.domain.audit_run import AuditRun, run_id_of, site_id_of, started_at_of
from a11yctl.services.loader import iter_audit_runs
from a11yctl.services.observer import SkipEvent, SkipReason, SkipReporter, SkipStage, notify


def _drop(record: AuditRun, reason: SkipReason, reporter: SkipReporter | None) -> None:
    notify(
        reporter,
        SkipEvent(stage=SkipStage.SELECT, reason=reason, run_id=run_id_of(record)),
    )


def select_latest_per_site(
    records: Iterable[AuditRun],
    *,
    reporter: SkipReporter | None = None,
) -> list[AuditRun]:
    """Reduce *records* to the run with the greatest ``startedAt`` per site.

    Runs without a resolvable site id or a parseable ``startedAt`` are
    dropped and reported.
    """
    latest: dict[str, tuple[datetime, AuditRun]] = {}

    for record in records:
        site_id = site_id_of(record)
        if site_id is None:
            _drop(record, SkipReason.MISSING_SITE_ID, reporter)
            continue

        started_at = started_at_of(record)
        if started_at is None:
            _drop(record, SkipReason.INVALID_STARTED_AT, reporter)
            continue

        current = latest.get(site_id)
        if current is None or started_at > current[0]:
            latest[site_id] = (started_at, record)

    return [record for _started_at, record in latest.values()]


def load_latest_audit_runs_by_site(
    root_dir: Path | str | None,
    *,
    reporter: SkipReporter | None = None,
) -> list[AuditRun]:
    """Load every audit run under *root_dir* and keep the latest per site."""
    return select_latest_per_site(iter_audit_runs(root_dir, reporter=reporter), reporter=reporter)
