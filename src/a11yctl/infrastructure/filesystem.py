"""Filesystem traversal and file I/O for audit-run discovery.

INVARIANT: Source files are read-only. Nothing under the audit root is
ever written, moved, or revisited by the analysis pipeline.
"""

from __future__ import annotations

import json
import os
import shutil
from collections.abc import Iterator
from pathlib import Path
from typing import Any

from a11yctl.domain.errors import AuditRootError

AUDIT_SUFFIX = ".json"


# ---------------------------------------------------------------------------
# Discovery
# ---------------------------------------------------------------------------


def walk_files(root: Path | str) -> Iterator[Path]:
    """Yield absolute paths of every regular file under *root*, recursively.

    The sequence is lazy and single-pass. Entries are visited in
    directory-listing order, which is filesystem-dependent and not sorted.
    Symlinks are neither followed nor yielded, so a tree cannot loop.

    Raises:
        AuditRootError: *root* is missing or cannot be listed. Raised on
            the first ``next()``, before anything is yielded.
    """
    resolved = Path(root).resolve()
    try:
        entries = os.scandir(resolved)
    except OSError as exc:
        msg = f"Cannot read audit directory {resolved}: {exc.strerror or exc}"
        raise AuditRootError(msg) from exc
    with entries:
        yield from _walk_entries(entries)


def _walk_entries(entries: Iterator[os.DirEntry[str]]) -> Iterator[Path]:
    for entry in entries:
        if entry.is_dir(follow_symlinks=False):
            with os.scandir(entry.path) as children:
                yield from _walk_entries(children)
        elif entry.is_file(follow_symlinks=False):
            yield Path(entry.path)


def is_audit_file(path: Path) -> bool:
    return path.name.endswith(AUDIT_SUFFIX)


def list_csv_files(directory: Path) -> list[Path]:
    """Return ``*.csv`` files directly inside *directory*, sorted by name."""
    return sorted(
        (p for p in directory.iterdir() if p.is_file() and p.name.lower().endswith(".csv")),
        key=lambda p: p.name,
    )


# ---------------------------------------------------------------------------
# File I/O
# ---------------------------------------------------------------------------


def read_json_file(path: Path) -> Any:
    """Parse a UTF-8 JSON file. Raises OSError/ValueError on failure."""
    return json.loads(path.read_text(encoding="utf-8"))


def write_text_file(path: Path, content: str) -> None:
    """Write *content* to *path*, creating parent directories as needed."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


def copy_file(src: Path, dest: Path) -> Path:
    """Copy *src* to *dest*, creating the destination directory."""
    dest.parent.mkdir(parents=True, exist_ok=True)
    shutil.copyfile(src, dest)
    return dest
