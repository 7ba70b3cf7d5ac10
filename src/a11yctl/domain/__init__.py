"""Domain layer: audit-run records, findings, standards, and the WCAG tree.

This layer depends only on stdlib and pydantic.
It must never import from services, infrastructure, commands, or config.
"""
