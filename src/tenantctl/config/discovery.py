"""Locate the ``tenantctl.toml`` in effect for an invocation.

Resolution order: the ``--config`` flag, then ``TENANTCTL_CONFIG``, then the
nearest ``tenantctl.toml`` at or above the start directory. The directory
holding the file becomes the root that relative store paths resolve against.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "tenantctl.toml"
CONFIG_ENV_VAR = "TENANTCTL_CONFIG"


def discover_config(
    *,
    explicit: str | Path | None = None,
    start: Path | None = None,
) -> Path | None:
    """Return the config file to load, or None when defaults apply.

    An explicit or env-var path is never combined with the walk-up: if it
    names a missing file, no config is used at all.
    """
    for override in (explicit, os.environ.get(CONFIG_ENV_VAR)):
        if override:
            path = Path(override).expanduser()
            return path if path.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def config_root(config_file: Path | None) -> Path:
    """Directory relative paths resolve against: the config's parent, else CWD."""
    return config_file.parent if config_file is not None else Path.cwd()
