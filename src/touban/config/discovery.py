"""Config file discovery.

Walk-up finder locates touban.toml, similar to how git finds .git/.
The TOUBAN_CONFIG env var overrides the walk-up.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "touban.toml"
CONFIG_ENV_VAR = "TOUBAN_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Walk up from *start* (default: cwd) looking for touban.toml.

    TOUBAN_CONFIG, when set, wins; a missing file there means no config.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        return p if p.is_file() else None

    current = (start or Path.cwd()).resolve()
    while True:
        candidate = current / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            return None
        current = parent
