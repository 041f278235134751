from __future__ import annotations

import json

import pytest

from ctxview.core.agents import (
    AgentConfig,
    AgentsConfig,
    ConfigWorkspaceResolver,
    load_agents_config,
    resolve_agent_workspace_dir,
    resolve_default_agent_id,
)
from ctxview.core.settings import load_settings


def _write_config(path, agents: dict) -> None:
    path.write_text(json.dumps({"agents": agents}), encoding="utf-8")


def test_missing_config_is_empty(tmp_path) -> None:
    config = load_agents_config(tmp_path / "nope.json")
    assert config == AgentsConfig()
    assert resolve_default_agent_id(config) == "main"
    assert resolve_agent_workspace_dir(config, "main") is None


def test_default_agent_resolution() -> None:
    assert resolve_default_agent_id(AgentsConfig(agents=[AgentConfig("a"), AgentConfig("b")])) == "a"
    assert (
        resolve_default_agent_id(
            AgentsConfig(agents=[AgentConfig("a"), AgentConfig("b", default=True)])
        )
        == "b"
    )


def test_workspace_falls_back_to_defaults(tmp_path) -> None:
    config = AgentsConfig(
        agents=[AgentConfig("main"), AgentConfig("ops", workspace=str(tmp_path / "ops"))],
        default_workspace=str(tmp_path / "shared"),
    )
    assert resolve_agent_workspace_dir(config, "main") == tmp_path / "shared"
    assert resolve_agent_workspace_dir(config, "ops") == tmp_path / "ops"


def test_config_resolver_rereads_file(tmp_path, settings) -> None:
    resolver = ConfigWorkspaceResolver(settings)
    assert resolver.resolve().root is None

    _write_config(
        settings.config_path,
        {"list": [{"id": "main", "default": True, "workspace": str(tmp_path / "ws")}]},
    )
    resolved = resolver.resolve()
    assert resolved.agent_id == "main"
    assert resolved.root == tmp_path / "ws"


def test_settings_from_environment(tmp_path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("CTXVIEW_CONFIG", str(tmp_path / "cfg.json"))
    monkeypatch.setenv("CTXVIEW_WORKSPACE", str(tmp_path / "override"))
    monkeypatch.setenv("CTXVIEW_AGENT", "ops")
    monkeypatch.setenv("CTXVIEW_LOG_LEVEL", "debug")

    settings = load_settings()

    assert settings.config_path == tmp_path / "cfg.json"
    assert settings.workspace_override == tmp_path / "override"
    assert settings.agent_id == "ops"
    assert settings.log_level == "DEBUG"
    resolved = ConfigWorkspaceResolver(settings).resolve()
    assert resolved.agent_id == "ops"
    assert resolved.root == tmp_path / "override"


def test_invalid_log_level(tmp_path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("CTXVIEW_LOG_LEVEL", "chatty")
    with pytest.raises(ValueError, match="CTXVIEW_LOG_LEVEL"):
        load_settings()
