"""Fatal error types. Any of these aborts an analysis run."""

from __future__ import annotations


class A11yError(Exception):
    """Base class for errors that abort an analysis run."""


class AuditRootError(A11yError):
    """The audit-run root directory is missing or cannot be listed."""


class StandardError(A11yError):
    """The reference standard is missing or malformed."""
