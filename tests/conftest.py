"""Shared pytest fixtures and test helpers for a11yctl tests."""

from __future__ import annotations

import json
import logging
from collections.abc import Generator
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from a11yctl.domain.standard import Standard

STANDARD_DATA: dict[str, Any] = {
    "standardId": "EN301549-v3.2.1",
    "wcagVersion": "2.1",
    "criteria": {
        "1.1.1": {"principle": "Perceivable", "title": "Non-text Content"},
        "1.3.1": {"principle": "Perceivable", "title": "Info and Relationships"},
        "1.4.3": {"principle": "Perceivable", "title": "Contrast (Minimum)"},
        "2.4.4": {"principle": "Operable", "title": "Link Purpose (In Context)"},
        "3.1.1": {"principle": "Understandable", "title": "Language of Page"},
        "4.1.2": {"principle": "Robust", "title": "Name, Role, Value"},
        "9.9.9": {"principle": "Aesthetic", "title": "Not a POUR principle"},
    },
}


@pytest.fixture(autouse=True)
def _restore_root_logging() -> Generator[None]:
    """Drop the handlers a CLI invocation installs on the root logger."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    yield
    for handler in root.handlers:
        if handler not in original_handlers:
            handler.close()
    root.handlers = original_handlers
    root.setLevel(original_level)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def standard() -> Standard:
    return Standard.model_validate(STANDARD_DATA)


@pytest.fixture
def standard_file(tmp_path: Path) -> Path:
    path = tmp_path / "standards" / "EN301549-v3.2.1.json"
    path.parent.mkdir(parents=True)
    path.write_text(json.dumps(STANDARD_DATA), encoding="utf-8")
    return path


@pytest.fixture
def audits_root(tmp_path: Path) -> Path:
    root = tmp_path / "audits"
    root.mkdir()
    return root


@pytest.fixture
def _isolated_project(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to a temp project root with no a11yctl.toml above it."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("A11YCTL_CONFIG", raising=False)


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


def finding(criterion_id: str | None, count: Any = None, **extra: Any) -> dict[str, Any]:
    """Build a normalised finding; *count* None leaves occurrenceCount out."""
    data: dict[str, Any] = dict(extra)
    if criterion_id is not None:
        data["wcagCriterionId"] = criterion_id
    if count is not None:
        data["occurrenceCount"] = count
    return data


def audit_run(
    site_id: str | None,
    started_at: str | None,
    *,
    run_id: str = "run-1",
    compliance: list[dict[str, Any]] | None = None,
    other: list[dict[str, Any]] | None = None,
) -> dict[str, Any]:
    """Build an audit-run record in the on-disk shape written by the executor."""
    run: dict[str, Any] = {"auditRunId": run_id}
    if started_at is not None:
        run["startedAt"] = started_at
    record: dict[str, Any] = {
        "schemaVersion": "1.0",
        "auditRun": run,
        "environment": {"tool": "axe-core"},
        "standard": {"standardId": "EN301549-v3.2.1", "wcagVersion": "2.1"},
        "scope": {"pages": []},
        "results": {
            "rawFindings": [],
            "normalisedFindings": {
                "compliance": compliance or [],
                "other": other or [],
            },
        },
    }
    if site_id is not None:
        record["scope"]["siteId"] = site_id
    return record


def write_json(path: Path, data: Any) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data), encoding="utf-8")
    return path
