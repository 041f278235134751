from __future__ import annotations

from pathlib import Path

import pytest

from ctxview.context.service import ContextService
from ctxview.core.agents import StaticWorkspaceResolver
from ctxview.core.settings import Settings
from ctxview.gateway.server import Gateway
from ctxview.main import build_gateway


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    root = tmp_path / "workspace"
    root.mkdir()
    return root


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(
        config_path=tmp_path / "config.json",
        workspace_override=None,
        agent_id=None,
        log_level="WARNING",
    )


@pytest.fixture
def service(workspace: Path) -> ContextService:
    return ContextService(StaticWorkspaceResolver(workspace))


@pytest.fixture
def gateway(settings: Settings, workspace: Path) -> Gateway:
    return build_gateway(settings, resolver=StaticWorkspaceResolver(workspace))
