"""Lazy audit-run loading from a directory tree.

Every ``.json`` file under the root becomes exactly one
:class:`LoadOutcome`: either an admitted record or a skip with a reason.
Nothing raised while reading or parsing a single file escapes this
module. Only a missing or unreadable root is fatal.
"""

from __future__ import annotations

import json
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from a11yctl.domain.audit_run import AuditRun, missing_fields
from a11yctl.domain.errors import AuditRootError
from a11yctl.infrastructure.filesystem import is_audit_file, walk_files
from a11yctl.services.observer import SkipEvent, SkipReason, SkipReporter, SkipStage, notify


@dataclass(frozen=True)
class LoadOutcome:
    """Result of loading one candidate file."""

    path: Path
    record: AuditRun | None = None
    skip: SkipEvent | None = None

    @property
    def admitted(self) -> bool:
        return self.record is not None


def _skipped(path: Path, reason: SkipReason, detail: str = "") -> LoadOutcome:
    return LoadOutcome(
        path=path,
        skip=SkipEvent(stage=SkipStage.LOAD, reason=reason, path=path, detail=detail),
    )


def _reject_constant(name: str) -> Any:
    msg = f"{name} is not valid JSON"
    raise ValueError(msg)


def load_audit_file(path: Path) -> LoadOutcome:
    """Read, parse, and structurally validate a single audit-run file.

    A record is admitted only when ``schemaVersion``, ``auditRun`` and
    ``results`` are all present and non-empty.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        return _skipped(path, SkipReason.READ_ERROR, str(exc))

    try:
        data = json.loads(raw, parse_constant=_reject_constant)
    except json.JSONDecodeError as exc:
        return _skipped(path, SkipReason.INVALID_JSON, f"line {exc.lineno}: {exc.msg}")
    except ValueError as exc:
        return _skipped(path, SkipReason.INVALID_JSON, str(exc))
    except RecursionError:
        return _skipped(path, SkipReason.INVALID_JSON, "nesting too deep")

    if not isinstance(data, dict):
        return _skipped(path, SkipReason.NOT_AN_OBJECT, type(data).__name__)

    missing = missing_fields(data)
    if missing:
        return _skipped(path, SkipReason.MISSING_FIELDS, ", ".join(missing))

    return LoadOutcome(path=path, record=data)


def iter_load_outcomes(root_dir: Path | str | None) -> Iterator[LoadOutcome]:
    """Yield one outcome per ``.json`` file under *root_dir*, lazily.

    Raises:
        AuditRootError: *root_dir* is unset, missing, or unreadable.
    """
    if not root_dir:
        msg = "Audit-run loading requires a root directory"
        raise AuditRootError(msg)

    for path in walk_files(root_dir):
        if not is_audit_file(path):
            continue
        yield load_audit_file(path)


def iter_audit_runs(
    root_dir: Path | str | None,
    *,
    reporter: SkipReporter | None = None,
) -> Iterator[AuditRun]:
    """Yield admitted audit runs one at a time; skipped files go to *reporter*.

    The sequence is single-pass: consuming it fully visits the whole tree
    once, and only one parsed record is held at a time.
    """
    for outcome in iter_load_outcomes(root_dir):
        if outcome.skip is not None:
            notify(reporter, outcome.skip)
            continue
        assert outcome.record is not None
        yield outcome.record
