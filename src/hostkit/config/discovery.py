"""Config file discovery.

Resolution order for hostkit.toml:
  1. ``--config`` path (must name an existing file)
  2. ``HOSTKIT_CONFIG`` env var (must name an existing file)
  3. Walk up from the working directory, the way git finds .git/
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "hostkit.toml"
CONFIG_ENV_VAR = "HOSTKIT_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Walk up from *start* (default: cwd) looking for hostkit.toml."""
    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def resolve_config_path(
    config_path: str | os.PathLike[str] | None = None,
    *,
    start: Path | None = None,
) -> Path | None:
    """Return the config file to load, or None to run on defaults.

    An explicit path or env var that does not name a file disables
    discovery rather than falling back to the walk-up.
    """
    explicit = config_path or os.environ.get(CONFIG_ENV_VAR)
    if explicit:
        p = Path(explicit)
        return p if p.is_file() else None
    return find_config(start)
