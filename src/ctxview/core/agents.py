"""Agent configuration and workspace resolution."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol

from ctxview.core.settings import Settings

logger = logging.getLogger(__name__)

DEFAULT_AGENT_ID = "main"


@dataclass(frozen=True)
class AgentConfig:
    id: str
    default: bool = False
    workspace: str | None = None


@dataclass(frozen=True)
class AgentsConfig:
    agents: list[AgentConfig] = field(default_factory=list)
    default_workspace: str | None = None


@dataclass(frozen=True)
class ResolvedWorkspace:
    agent_id: str
    root: Path | None


class WorkspaceResolver(Protocol):
    def resolve(self) -> ResolvedWorkspace: ...


def load_agents_config(path: Path) -> AgentsConfig:
    if not path.exists():
        return AgentsConfig()
    raw = json.loads(path.read_text(encoding="utf-8"))
    section = raw.get("agents") or {}
    defaults = section.get("defaults") or {}
    agents = []
    for agent in section.get("list", []):
        agents.append(
            AgentConfig(
                id=str(agent["id"]),
                default=bool(agent.get("default", False)),
                workspace=agent.get("workspace") or None,
            )
        )
    return AgentsConfig(
        agents=agents,
        default_workspace=defaults.get("workspace") or None,
    )


def resolve_default_agent_id(config: AgentsConfig) -> str:
    for agent in config.agents:
        if agent.default:
            return agent.id
    if config.agents:
        return config.agents[0].id
    return DEFAULT_AGENT_ID


def resolve_agent_workspace_dir(config: AgentsConfig, agent_id: str) -> Path | None:
    workspace = config.default_workspace
    for agent in config.agents:
        if agent.id == agent_id and agent.workspace:
            workspace = agent.workspace
            break
    if not workspace:
        return None
    return Path(workspace).expanduser().absolute()


class ConfigWorkspaceResolver:
    """Resolves the workspace root from the agents config file.

    The file is re-read on every call so edits take effect without a restart.
    ``CTXVIEW_WORKSPACE`` short-circuits the file entirely.
    """

    def __init__(self, settings: Settings) -> None:
        self._settings = settings

    def resolve(self) -> ResolvedWorkspace:
        config = load_agents_config(self._settings.config_path)
        agent_id = self._settings.agent_id or resolve_default_agent_id(config)
        if self._settings.workspace_override is not None:
            return ResolvedWorkspace(agent_id, self._settings.workspace_override)
        root = resolve_agent_workspace_dir(config, agent_id)
        logger.debug("Resolved workspace for agent %s: %s", agent_id, root)
        return ResolvedWorkspace(agent_id, root)


class StaticWorkspaceResolver:
    def __init__(self, root: Path | None, agent_id: str = DEFAULT_AGENT_ID) -> None:
        self._root = root
        self._agent_id = agent_id

    def resolve(self) -> ResolvedWorkspace:
        return ResolvedWorkspace(self._agent_id, self._root)
