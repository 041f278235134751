"""Display helpers for context listings."""

from __future__ import annotations

import datetime as dt

KIB = 1024
MIB = 1024 * 1024

CONTEXT_FILE_DESCRIPTIONS: dict[str, str] = {
    "AGENTS.md": "Agent behavior and instructions",
    "SOUL.md": "Agent personality and identity",
    "USER.md": "Information about the user",
    "IDENTITY.md": "Agent identity configuration",
    "TOOLS.md": "Tool-specific notes and preferences",
    "MEMORY.md": "Long-term memory and notes",
    "HEARTBEAT.md": "Heartbeat task configuration",
    "BOOTSTRAP.md": "Initial setup instructions",
}


def format_file_size(size: int) -> str:
    if size < KIB:
        return f"{size} B"
    if size < MIB:
        return f"{size / KIB:.1f} KB"
    return f"{size / MIB:.1f} MB"


def format_timestamp(modified_at: float) -> str:
    return dt.datetime.fromtimestamp(modified_at / 1000).strftime("%Y-%m-%d %H:%M:%S")


def describe_context_file(name: str) -> str | None:
    return CONTEXT_FILE_DESCRIPTIONS.get(name)
