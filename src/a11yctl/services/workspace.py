"""Copy a generated CSV report into a spreadsheet workspace under a fixed name."""

from __future__ import annotations

from pathlib import Path

from a11yctl.infrastructure.filesystem import copy_file, list_csv_files
from a11yctl.services.base import BaseService
from a11yctl.services.result import ServiceResult


class CsvCopyService(BaseService):
    """List report CSVs and copy the chosen one to ``[copy_csv] dest_dir/dest_name``."""

    def source_dir(self, override: Path | str | None = None) -> Path:
        return self._path(override or self._settings.copy_csv.source_dir)

    def list_candidates(self, source_dir: Path | str | None = None) -> ServiceResult:
        """CSV files in the source directory, sorted by name and numbered from 1."""
        op = "list_csv"
        directory = self.source_dir(source_dir)
        if not directory.is_dir():
            return ServiceResult.failure(
                op, "NO_CSV_FILES", f"Source directory not found: {directory}"
            )
        files = list_csv_files(directory)
        if not files:
            return ServiceResult.failure(op, "NO_CSV_FILES", f"No CSV files found in {directory}")

        items = [{"index": i, "name": p.name, "path": str(p)} for i, p in enumerate(files, 1)]
        return ServiceResult.success(
            op, {"source_dir": str(directory), "items": items, "count": len(items)}
        )

    def copy(
        self,
        source: Path,
        *,
        dest_dir: Path | str | None = None,
        dest_name: str | None = None,
    ) -> ServiceResult:
        """Copy *source* to the destination, overwriting any previous copy."""
        op = "copy_csv"
        if not source.is_file():
            return ServiceResult.failure(op, "INVALID_SELECTION", f"Not a file: {source}")

        cfg = self._settings.copy_csv
        destination = self._path(dest_dir or cfg.dest_dir) / (dest_name or cfg.dest_name)
        try:
            copy_file(source, destination)
        except OSError as exc:
            return ServiceResult.failure(
                op, "OUTPUT_FAILED", str(exc), destination=str(destination)
            )
        return ServiceResult.success(op, {"source": str(source), "path": str(destination)})
