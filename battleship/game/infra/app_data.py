"""Battleship app-data paths."""

from __future__ import annotations

import os
from pathlib import Path


def resolve_app_data_root() -> Path:
    """Resolve app-data root directory for runtime state.

    `BATTLESHIP_APP_DATA_DIR` wins; a relative value is taken from the current
    working directory. Without it, state lives under the user's home.
    """
    configured = os.getenv("BATTLESHIP_APP_DATA_DIR", "").strip()
    if configured:
        candidate = Path(configured)
        if candidate.is_absolute():
            return candidate
        return Path.cwd() / candidate
    return Path.home() / ".battleship"


def resolve_logs_dir() -> Path:
    """Resolve logs directory under app-data root."""
    return resolve_app_data_root() / "logs"


def ensure_app_data_dirs() -> dict[str, Path]:
    """Create app-data directories and return resolved paths."""
    root = resolve_app_data_root()
    logs = resolve_logs_dir()
    root.mkdir(parents=True, exist_ok=True)
    logs.mkdir(parents=True, exist_ok=True)
    return {"root": root, "logs": logs}
