"""Settings loader for ctxview."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass(frozen=True)
class Settings:
    config_path: Path
    workspace_override: Path | None
    agent_id: str | None
    log_level: str


def load_settings() -> Settings:
    load_dotenv(find_dotenv(usecwd=True))
    config_path = Path(
        os.environ.get("CTXVIEW_CONFIG", "~/.ctxview/config.json")
    ).expanduser()
    workspace_raw = os.environ.get("CTXVIEW_WORKSPACE") or None
    workspace_override = (
        Path(workspace_raw).expanduser().absolute() if workspace_raw else None
    )
    agent_id = os.environ.get("CTXVIEW_AGENT") or None
    log_level = _parse_log_level(
        os.environ.get("CTXVIEW_LOG_LEVEL", "WARNING"), "CTXVIEW_LOG_LEVEL"
    )

    return Settings(
        config_path=config_path,
        workspace_override=workspace_override,
        agent_id=agent_id,
        log_level=log_level,
    )


def _parse_log_level(value: str, name: str) -> str:
    normalized = value.strip().upper()
    if normalized not in _LOG_LEVELS:
        raise ValueError(f"Invalid log level for {name}: {value}")
    return normalized
