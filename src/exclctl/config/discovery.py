"""Config file discovery.

Lookup order for exclctl.toml:
  1. ``EXCLCTL_CONFIG`` env var (exclusive when set)
  2. Walk-up from the working directory, similar to how git finds .git/
  3. The per-user file under ``$XDG_CONFIG_HOME/exclctl/`` (``~/.config``)
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "exclctl.toml"
CONFIG_ENV_VAR = "EXCLCTL_CONFIG"


def user_config_path() -> Path:
    """Per-user config location, honouring ``XDG_CONFIG_HOME``."""
    base = os.environ.get("XDG_CONFIG_HOME") or str(Path.home() / ".config")
    return Path(base) / "exclctl" / CONFIG_FILENAME


def _walk_up(start: Path) -> Path | None:
    current = start.resolve()
    while True:
        candidate = current / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
        if current.parent == current:
            return None
        current = current.parent


def find_config(start: Path | None = None) -> Path | None:
    """Locate exclctl.toml starting from *start* (default: cwd).

    Returns None when no file exists anywhere in the lookup order.
    An ``EXCLCTL_CONFIG`` pointing at a missing file also yields None.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path).expanduser()
        return p if p.is_file() else None

    found = _walk_up(start or Path.cwd())
    if found is not None:
        return found

    user_path = user_config_path()
    return user_path if user_path.is_file() else None

