"""Application configuration and env loading."""

from __future__ import annotations

import os
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class GameConfig:
    """Immutable runtime game configuration."""

    computer_delay: float = 1.0
    seed: int | None = None
    reveal_computer_ships: bool = False


def load_game_config() -> GameConfig:
    """Load game configuration from env vars."""
    return GameConfig(
        computer_delay=max(0.0, _float("BATTLESHIP_COMPUTER_DELAY", 1.0)),
        seed=_optional_int("BATTLESHIP_SEED"),
        reveal_computer_ships=_flag("BATTLESHIP_REVEAL_COMPUTER", False),
    )


def load_env_file(path: str = ".env", *, override_existing: bool = True) -> None:
    """Load KEY=VALUE pairs from an env file into process environment.

    By default, values from the env file overwrite existing environment variables.
    """
    env_path = _resolve_env_path(path)
    if not env_path.exists():
        return

    for raw_line in env_path.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue

        key, value = (part.strip() for part in line.split("=", 1))
        if not key:
            continue
        if len(value) >= 2 and value[0] == value[-1] and value[0] in {"'", '"'}:
            value = value[1:-1]

        if override_existing or key not in os.environ:
            os.environ[key] = value


def load_default_env_files(
    *, override_existing: bool = True, paths: Sequence[str] | None = None
) -> None:
    """Load env files with optional local overrides.

    Later files win. Default order:
    1) appdata/config/.env.app
    2) appdata/config/.env.app.local
    3) .env.app
    4) .env.app.local
    """
    to_load = (
        tuple(paths)
        if paths is not None
        else (
            "appdata/config/.env.app",
            "appdata/config/.env.app.local",
            ".env.app",
            ".env.app.local",
        )
    )
    for path in to_load:
        load_env_file(path, override_existing=override_existing)


def _resolve_env_path(path: str) -> Path:
    """Resolve env path; relative paths are read from the current working directory."""
    candidate = Path(path)
    if candidate.is_absolute():
        return candidate
    return Path.cwd() / candidate


def _flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


def _optional_int(name: str) -> int | None:
    raw = os.getenv(name, "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        return None
