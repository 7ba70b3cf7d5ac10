"""Tests for human, quiet, and JSON rendering of ServiceResult."""

from __future__ import annotations

import json

import pytest

from a11yctl.output.console import style_for_principle
from a11yctl.output.formatters import OutputSettings, format_result
from a11yctl.output.renderers import render_quiet, render_result
from a11yctl.services.result import ServiceResult


def _flat(text: str) -> str:
    return " ".join(text.split())


@pytest.fixture
def analysis_result() -> ServiceResult:
    return ServiceResult(
        ok=True,
        op="analysis_run",
        data={
            "generated_at": "2025-12-30T10:00:00.000Z",
            "mode": "latest",
            "standard_id": "EN301549-v3.2.1",
            "audits_path": "/data/audits",
            "total_violations": 8,
            "principles": {"Perceivable": 5, "Robust": 3},
            "sites": [{"siteId": "govcy", "violations": {"compliance": 8, "other": 2}}],
            "files_written": ["/out/a-20251230.json", "/out/a-20251230.csv"],
        },
        warnings=["1 audit file(s) skipped as invalid"],
        meta={"skipped": {"files": 1, "runs": 0}},
    )


class TestRenderResult:
    def test_analysis_summary(self, analysis_result: ServiceResult) -> None:
        out = _flat(render_result(analysis_result))
        assert out.startswith("OK analysis_run")
        assert "total_violations: 8" in out
        assert "Perceivable" in out
        assert "govcy" in out
        assert "written: /out/a-20251230.csv" in out
        assert "meta:" not in out

    def test_verbose_shows_meta(self, analysis_result: ServiceResult) -> None:
        assert "meta:" in render_result(analysis_result, verbose=True)

    def test_many_sites_collapse_to_count(self) -> None:
        sites = [{"siteId": f"s{i}", "violations": {}} for i in range(25)]
        result = ServiceResult(ok=True, op="analysis_run", data={"sites": sites})
        assert "sites: 25" in _flat(render_result(result))
        assert "s24" in render_result(result, verbose=True)

    def test_csv_list(self) -> None:
        result = ServiceResult(
            ok=True,
            op="list_csv",
            data={
                "items": [
                    {"index": 1, "name": "a-20251229.csv", "path": "/r/a-20251229.csv"},
                    {"index": 2, "name": "a-20251230.csv", "path": "/r/a-20251230.csv"},
                ],
                "count": 2,
            },
        )
        out = _flat(render_result(result))
        assert "a-20251230.csv" in out
        assert "2 files" in out

    def test_copy(self) -> None:
        result = ServiceResult(
            ok=True, op="copy_csv", data={"source": "/r/a.csv", "path": "/ws/agg.csv"}
        )
        out = _flat(render_result(result))
        assert "OK copy_csv" in out
        assert "path: /ws/agg.csv" in out

    def test_error(self) -> None:
        result = ServiceResult.failure(
            "analysis_run", "AUDITS_NOT_FOUND", "Cannot read audit directory", audits_path="/x"
        )
        out = _flat(render_result(result))
        assert "ERROR" in out
        assert "Cannot read audit directory" in out
        assert "audits_path" not in out
        assert "audits_path: /x" in _flat(render_result(result, verbose=True))

    def test_generic_fallback(self) -> None:
        result = ServiceResult(ok=True, op="other", data={"items": [1, 2]})
        assert "items: [1,2]" in _flat(render_result(result))


class TestRenderQuiet:
    def test_analysis_lists_files(self, analysis_result: ServiceResult) -> None:
        assert render_quiet(analysis_result) == "/out/a-20251230.json\n/out/a-20251230.csv"

    def test_copy_prints_destination(self) -> None:
        result = ServiceResult(ok=True, op="copy_csv", data={"path": "/ws/agg.csv"})
        assert render_quiet(result) == "/ws/agg.csv"

    def test_other_ops(self) -> None:
        assert render_quiet(ServiceResult(ok=True, op="list_csv")) == "OK: list_csv"

    def test_error(self) -> None:
        result = ServiceResult.failure("copy_csv", "NO_CSV_FILES", "No CSV files found")
        assert render_quiet(result).startswith("ERROR: copy_csv")


class TestFormatResult:
    def test_json_output(self, analysis_result: ServiceResult) -> None:
        out = format_result(analysis_result, settings=OutputSettings(json_output=True))
        parsed = json.loads(out)
        assert parsed["ok"] is True
        assert parsed["data"]["total_violations"] == 8
        assert parsed["warnings"] == ["1 audit file(s) skipped as invalid"]

    def test_quiet(self, analysis_result: ServiceResult) -> None:
        out = format_result(analysis_result, settings=OutputSettings(quiet=True))
        assert out.endswith(".csv")

    def test_default_is_human(self, analysis_result: ServiceResult) -> None:
        assert _flat(format_result(analysis_result)).startswith("OK analysis_run")


@pytest.mark.parametrize(
    ("principle", "expected"),
    [("Perceivable", "a11y.principle.Perceivable"), ("Aesthetic", "")],
)
def test_style_for_principle(principle: str, expected: str) -> None:
    assert style_for_principle(principle) == expected
