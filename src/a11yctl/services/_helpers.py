"""Shared service-layer helper functions."""

from __future__ import annotations

from datetime import UTC, datetime


def now_iso(now: datetime | None = None) -> str:
    """UTC timestamp with millisecond precision and a ``Z`` suffix.

    Matches the ``startedAt`` format written by the audit executor,
    e.g. ``2025-12-30T10:00:00.000Z``.
    """
    moment = (now or datetime.now(UTC)).astimezone(UTC)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def date_compact(now: datetime | None = None) -> str:
    """UTC date as YYYYMMDD (report filename suffix)."""
    return (now or datetime.now(UTC)).astimezone(UTC).strftime("%Y%m%d")


def now_compact(now: datetime | None = None) -> str:
    """Local time as YYYYMMDDHHMMSS (log filename suffix)."""
    return (now or datetime.now()).strftime("%Y%m%d%H%M%S")
