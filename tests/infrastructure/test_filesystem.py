"""Tests for directory traversal and file helpers."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from a11yctl.domain.errors import AuditRootError
from a11yctl.infrastructure.filesystem import (
    copy_file,
    is_audit_file,
    list_csv_files,
    walk_files,
    write_text_file,
)


class TestWalkFiles:
    def test_recurses_to_any_depth(self, tmp_path: Path) -> None:
        (tmp_path / "a" / "b" / "c").mkdir(parents=True)
        (tmp_path / "top.json").write_text("{}")
        (tmp_path / "a" / "mid.txt").write_text("")
        (tmp_path / "a" / "b" / "c" / "deep.json").write_text("{}")

        found = sorted(p.relative_to(tmp_path).as_posix() for p in walk_files(tmp_path))
        assert found == ["a/b/c/deep.json", "a/mid.txt", "top.json"]

    def test_yields_absolute_paths(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "audits").mkdir()
        (tmp_path / "audits" / "run.json").write_text("{}")
        monkeypatch.chdir(tmp_path)
        paths = list(walk_files("audits"))
        assert len(paths) == 1
        assert paths[0].is_absolute()

    def test_is_lazy(self, tmp_path: Path) -> None:
        (tmp_path / "one.json").write_text("{}")
        walker = walk_files(tmp_path)
        assert next(walker).name == "one.json"
        with pytest.raises(StopIteration):
            next(walker)

    def test_empty_directory(self, tmp_path: Path) -> None:
        assert list(walk_files(tmp_path)) == []

    def test_missing_root_is_fatal(self, tmp_path: Path) -> None:
        with pytest.raises(AuditRootError, match="Cannot read audit directory"):
            list(walk_files(tmp_path / "missing"))

    def test_file_as_root_is_fatal(self, tmp_path: Path) -> None:
        file_root = tmp_path / "file.json"
        file_root.write_text("{}")
        with pytest.raises(AuditRootError):
            list(walk_files(file_root))

    @pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unsupported")
    def test_symlinked_directories_not_followed(self, tmp_path: Path) -> None:
        real = tmp_path / "real"
        real.mkdir()
        (real / "run.json").write_text("{}")
        try:
            (real / "loop").symlink_to(real, target_is_directory=True)
        except OSError:
            pytest.skip("cannot create symlinks here")
        assert [p.name for p in walk_files(real)] == ["run.json"]


class TestHelpers:
    @pytest.mark.parametrize(
        ("name", "expected"),
        [("run.json", True), ("run.JSON", False), ("run.json.bak", False), ("json", False)],
    )
    def test_is_audit_file(self, name: str, expected: bool) -> None:
        assert is_audit_file(Path(name)) is expected

    def test_list_csv_files_sorted_case_insensitive_suffix(self, tmp_path: Path) -> None:
        for name in ("b.csv", "a.CSV", "c.json"):
            (tmp_path / name).write_text("")
        (tmp_path / "nested.csv").mkdir()
        assert [p.name for p in list_csv_files(tmp_path)] == ["a.CSV", "b.csv"]

    def test_write_and_copy_create_parents(self, tmp_path: Path) -> None:
        src = tmp_path / "out" / "deep" / "report.csv"
        write_text_file(src, "header\n")
        dest = copy_file(src, tmp_path / "excel" / "nested" / "copy.csv")
        assert dest.read_text(encoding="utf-8") == "header\n"
