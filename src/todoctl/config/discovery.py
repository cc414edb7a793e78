"""Locate todoctl.toml.

``TODOCTL_CONFIG`` wins when set; otherwise the search walks up from the
starting directory to the filesystem root.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "todoctl.toml"
CONFIG_ENV_VAR = "TODOCTL_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the nearest todoctl.toml at or above *start* (default: cwd).

    An env var pointing at a missing file yields None rather than falling
    back to the walk-up search.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        explicit = Path(env_path)
        return explicit if explicit.is_file() else None

    origin = (start or Path.cwd()).resolve()
    for directory in (origin, *origin.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
