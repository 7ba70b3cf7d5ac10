"""Normalised findings and their per-consumer count defaults.

A finding is loosely typed on disk: every field is optional and
``occurrenceCount`` may be missing, zero, non-finite, or not a number at all.
The two consumers default it differently and must stay that way:

====================  ==========================================
consumer              missing / falsy / non-numeric count
====================  ==========================================
WCAG aggregations     ``1``
site accumulator      ``0``
====================  ==========================================
"""

from __future__ import annotations

import math
from typing import Any

from pydantic import BaseModel, Field, field_validator

Count = int | float

AGGREGATION_DEFAULT_COUNT = 1
ACCUMULATION_DEFAULT_COUNT = 0


class NormalisedFinding(BaseModel):
    """A compliance or advisory finding produced by the audit executor.

    Unknown keys (``impact``, ``pageId``, ``selectors``...) are kept as
    extras and ignored by the analysis pipeline.
    """

    model_config = {"frozen": True, "extra": "allow", "populate_by_name": True}

    wcag_criterion_id: str | None = Field(default=None, alias="wcagCriterionId")
    occurrence_count: Count | None = Field(default=None, alias="occurrenceCount")
    rule_id: str | None = Field(default=None, alias="ruleId")

    @field_validator("wcag_criterion_id", "rule_id", mode="before")
    @classmethod
    def _blank_to_none(cls, value: Any) -> str | None:
        if isinstance(value, str) and value:
            return value
        return None

    @field_validator("occurrence_count", mode="before")
    @classmethod
    def _numeric_or_none(cls, value: Any) -> Count | None:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return None
        if isinstance(value, float) and not math.isfinite(value):
            return None
        return value

    @classmethod
    def coerce(cls, raw: Any) -> NormalisedFinding | None:
        """Build a finding from a raw JSON value, or None if it is not an object."""
        if isinstance(raw, NormalisedFinding):
            return raw
        if not isinstance(raw, dict):
            return None
        return cls.model_validate(raw)

    @property
    def aggregation_count(self) -> Count:
        """Occurrences as counted by the WCAG aggregations."""
        return self.occurrence_count or AGGREGATION_DEFAULT_COUNT

    @property
    def accumulation_count(self) -> Count:
        """Occurrences as counted by the per-site accumulator."""
        return self.occurrence_count or ACCUMULATION_DEFAULT_COUNT

    @property
    def guideline_id(self) -> str | None:
        if self.wcag_criterion_id is None:
            return None
        return guideline_id_for(self.wcag_criterion_id)


def guideline_id_for(criterion_id: str) -> str:
    """Derive the guideline id from a criterion id.

    Examples:
        >>> guideline_id_for("1.4.3")
        '1.4'
        >>> guideline_id_for("4.1")
        '4.1'
    """
    return ".".join(criterion_id.split(".")[:2])


class MergedFindings(BaseModel):
    """Findings collected across every audit run folded into one analysis."""

    compliance: list[Any] = Field(default_factory=list)
    other: list[Any] = Field(default_factory=list)

    def extend(self, findings: dict[str, Any]) -> None:
        """Append the compliance/other arrays of one run's normalised findings."""
        compliance = findings.get("compliance")
        if isinstance(compliance, list):
            self.compliance.extend(compliance)
        other = findings.get("other")
        if isinstance(other, list):
            self.other.extend(other)
