"""Locate the project's ``a11yctl.toml``.

``A11YCTL_CONFIG`` names a file directly. Otherwise the search starts in
the given directory (default: CWD) and climbs towards the filesystem root,
stopping at the first directory holding the file.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "a11yctl.toml"
CONFIG_ENV_VAR = "A11YCTL_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file for *start*, or None when there is none.

    A set but dangling ``A11YCTL_CONFIG`` yields None rather than falling
    back to the directory search.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        path = Path(override)
        return path if path.is_file() else None

    origin = (start or Path.cwd()).resolve()
    for directory in (origin, *origin.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
