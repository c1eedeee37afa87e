"""Where cuescan keeps its configuration file and logs.

Both locations are anchored at the project root (the nearest directory
holding ``pyproject.toml`` or ``.git``) so a checkout stays self-contained:

- config: ``<root>/config/config.toml``, or ``$CUESCAN_CONFIG``
- logs:   ``<root>/logs/cuescan.log``, or ``$CUESCAN_LOG_DIR/cuescan.log``
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Final

CONFIG_ENV_VAR: Final[str] = "CUESCAN_CONFIG"
LOG_DIR_ENV_VAR: Final[str] = "CUESCAN_LOG_DIR"
LOG_FILE_NAME: Final[str] = "cuescan.log"
_ROOT_MARKERS: Final[tuple[str, ...]] = ("pyproject.toml", ".git")


def find_project_root(start: Path | None = None) -> Path:
    """Walk up from ``start`` (default: this module) to the first root marker.

    Falls back to the current working directory for installed copies.
    """
    origin = (start or Path(__file__).resolve()).parent
    for candidate in (origin, *origin.parents):
        if any((candidate / marker).exists() for marker in _ROOT_MARKERS):
            return candidate
    return Path.cwd()


def env_override(env_var: str, env: Mapping[str, str] | None = None) -> Path | None:
    """Return the path named by ``env_var``, ignoring blank values."""
    raw = (env if env is not None else os.environ).get(env_var, "").strip()
    if not raw:
        return None
    return Path(raw).expanduser().resolve()


def default_config_path(env: Mapping[str, str] | None = None) -> Path:
    override = env_override(CONFIG_ENV_VAR, env)
    if override is not None:
        return override
    return (find_project_root() / "config" / "config.toml").resolve()


def default_log_dir(env: Mapping[str, str] | None = None) -> Path:
    override = env_override(LOG_DIR_ENV_VAR, env)
    if override is not None:
        return override
    return (find_project_root() / "logs").resolve()


def default_log_file(env: Mapping[str, str] | None = None) -> Path:
    return default_log_dir(env) / LOG_FILE_NAME


__all__ = [
    "CONFIG_ENV_VAR",
    "LOG_DIR_ENV_VAR",
    "default_config_path",
    "default_log_dir",
    "default_log_file",
    "env_override",
    "find_project_root",
]
