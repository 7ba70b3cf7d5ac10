"""Aggregated analysis report returned by the orchestrator."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class SiteViolations(BaseModel):
    compliance: int | float = 0
    other: int | float = 0


class SiteSummary(BaseModel):
    """Raw occurrence totals for one site across the runs folded for it."""

    model_config = {"populate_by_name": True}

    site_id: str = Field(alias="siteId")
    violations: SiteViolations = Field(default_factory=SiteViolations)


class SkipCounts(BaseModel):
    """How many inputs were dropped, by pipeline stage."""

    files: int = 0
    runs: int = 0


class AnalysisReport(BaseModel):
    """Result of one ``run_aggregated_analysis`` invocation.

    ``aggregations`` holds serialised reducer output keyed by reducer name
    (``violationsByWcagTree`` by default).
    """

    model_config = {"frozen": True, "populate_by_name": True}

    generated_at: str = Field(alias="generatedAt")
    aggregations: dict[str, Any] = Field(default_factory=dict)
    sites: list[SiteSummary] = Field(default_factory=list)
    skipped: SkipCounts = Field(default_factory=SkipCounts)

    @property
    def wcag_tree(self) -> dict[str, Any]:
        return self.aggregations.get("violationsByWcagTree") or {}

    def to_dict(self) -> dict[str, Any]:
        """Serialise using the camelCase keys of the persisted report."""
        return self.model_dump(by_alias=True, exclude={"skipped"})
