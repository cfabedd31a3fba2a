"""App-level logging policy over engine logging API."""

from __future__ import annotations

import logging
import os
from datetime import UTC, datetime
from pathlib import Path

from engine.api.logging import EngineLoggingConfig, JsonFormatter, configure_logging
from battleship.game.infra.app_data import resolve_logs_dir

__all__ = ["JsonFormatter", "build_logging_config", "setup_logging"]


def build_logging_config(*, console_level_name: str | None = None) -> EngineLoggingConfig:
    """Build logging config from env: level, console format and per-run log file.

    `BATTLESHIP_CONSOLE_LOG_LEVEL` overrides `console_level_name`; the file
    always receives everything at `level_name`.
    """
    level_name = os.getenv("BATTLESHIP_LOG_LEVEL", os.getenv("LOG_LEVEL", "INFO")).upper()
    console_format = os.getenv("LOG_FORMAT", "json").lower()
    console_level_name = os.getenv("BATTLESHIP_CONSOLE_LOG_LEVEL", "").strip() or console_level_name
    return EngineLoggingConfig(
        level_name=level_name,
        console_level_name=console_level_name.upper() if console_level_name else None,
        console_format=console_format,
        file_path=_resolve_run_log_file_path(),
        file_format="json",
    )


def setup_logging(*, console_level_name: str | None = None) -> None:
    """Configure application logging via engine logging API."""
    config = build_logging_config(console_level_name=console_level_name)
    configure_logging(config)
    logging.getLogger(__name__).info("logging_file=%s", config.file_path)


def _resolve_run_log_file_path() -> str:
    configured = os.getenv("BATTLESHIP_LOG_DIR", "").strip()
    base_dir = Path(configured) if configured else resolve_logs_dir()
    base_dir.mkdir(parents=True, exist_ok=True)
    stamp = datetime.now(UTC).strftime("%Y%m%dT%H%M%S")
    return str(base_dir / f"battleship_run_{stamp}.jsonl")
