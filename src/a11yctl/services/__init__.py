"""Service layer: the audit-run ingestion and aggregation pipeline.

INVARIANT: command-facing services return ServiceResult; the pipeline
functions underneath raise only the fatal errors in
:mod:`a11yctl.domain.errors` and report everything else as skips.
"""
