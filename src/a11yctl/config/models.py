"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, a11yctl.toml only contains
overrides. A typical project sets just ``[analysis] standard``.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field

from a11yctl.domain.types import AnalysisMode, OutputFormat


class AnalysisConfig(BaseModel):
    """[analysis] section."""

    model_config = {"frozen": True}

    audits_path: Path = Path("audits")
    standard: Path | None = None
    mode: AnalysisMode = AnalysisMode.LATEST


class OutputConfig(BaseModel):
    """[output] section."""

    model_config = {"frozen": True}

    directory: Path = Path("reports/aggregated_analysis")
    filename_prefix: str = "accessibility-analysis"
    formats: list[OutputFormat] = Field(default_factory=lambda: [OutputFormat.JSON])


class CopyCsvConfig(BaseModel):
    """[copy_csv] section."""

    model_config = {"frozen": True}

    source_dir: Path = Path("reports/aggregated_analysis")
    dest_dir: Path = Path("excel_analysis/aggregated_analysis")
    dest_name: str = "aggregated-analysis.csv"
