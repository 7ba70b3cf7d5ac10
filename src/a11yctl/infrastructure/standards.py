"""Load the reference standard from a JSON document on disk."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import ValidationError

from a11yctl.domain.errors import StandardError
from a11yctl.domain.standard import Standard
from a11yctl.infrastructure.filesystem import read_json_file

logger = logging.getLogger(__name__)


def load_standard(path: Path | str | None) -> Standard:
    """Read and validate a standard such as ``EN301549-v3.2.1.json``.

    Raises:
        StandardError: the path is unset, unreadable, not JSON, or the
            document lacks a ``criteria`` object whose entries each carry
            a string ``principle``.
    """
    if path is None:
        msg = "No reference standard configured (use --standard or [analysis] standard)"
        raise StandardError(msg)

    source = Path(path)
    try:
        data = read_json_file(source)
    except FileNotFoundError as exc:
        msg = f"Standard not found: {source}"
        raise StandardError(msg) from exc
    except (OSError, ValueError) as exc:
        msg = f"Cannot read standard {source}: {exc}"
        raise StandardError(msg) from exc

    if not isinstance(data, dict):
        msg = f"Standard {source} must be a JSON object"
        raise StandardError(msg)

    try:
        standard = Standard.model_validate(data)
    except ValidationError as exc:
        msg = f"Invalid standard {source}: {exc.error_count()} validation error(s)"
        raise StandardError(msg) from exc

    logger.debug(
        "Loaded standard %s (%d criteria) from %s",
        standard.standard_id,
        len(standard.criteria),
        source,
    )
    return standard
