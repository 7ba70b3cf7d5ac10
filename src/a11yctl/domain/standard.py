"""Reference accessibility standard: criterion id to POUR principle.

The analysis core only ever reads ``criteria[id].principle``; the rest of
each criterion entry (titles, levels, EN 301 549 clause numbers...) is
carried as extras.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from a11yctl.domain.types import PRINCIPLES


class Criterion(BaseModel):
    """One success criterion of the standard."""

    model_config = {"frozen": True, "extra": "allow"}

    principle: str


class Standard(BaseModel):
    """Read-only reference standard supplied to the aggregations."""

    model_config = {"frozen": True, "extra": "allow", "populate_by_name": True}

    standard_id: str | None = Field(default=None, alias="standardId")
    wcag_version: str | None = Field(default=None, alias="wcagVersion")
    criteria: dict[str, Criterion]

    def principle_for(self, criterion_id: str | None) -> str | None:
        """Resolve a criterion id to one of the four POUR principles.

        Returns None when the id is empty, the criterion is unknown, or
        the standard maps it to something other than a POUR principle.
        """
        if not criterion_id:
            return None
        criterion = self.criteria.get(criterion_id)
        if criterion is None or criterion.principle not in PRINCIPLES:
            return None
        return criterion.principle
