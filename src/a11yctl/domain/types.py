"""Classification enums for WCAG principles and analysis modes."""

from __future__ import annotations

from enum import StrEnum


class Principle(StrEnum):
    """The four POUR principles at the top of the WCAG hierarchy."""

    PERCEIVABLE = "Perceivable"
    OPERABLE = "Operable"
    UNDERSTANDABLE = "Understandable"
    ROBUST = "Robust"


PRINCIPLES: frozenset[str] = frozenset(p.value for p in Principle)


class AnalysisMode(StrEnum):
    """Which audit runs take part in an aggregated analysis."""

    LATEST = "latest"
    ALL = "all"


class OutputFormat(StrEnum):
    """Persisted report formats."""

    JSON = "json"
    CSV = "csv"
