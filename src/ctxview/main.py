"""Compose the workspace resolver, context service, and gateway."""

from __future__ import annotations

from ctxview.bus.broker import EventBus
from ctxview.context.service import ContextService
from ctxview.core.agents import ConfigWorkspaceResolver, WorkspaceResolver
from ctxview.core.settings import Settings
from ctxview.gateway.registry import MethodRegistry, register_context_methods
from ctxview.gateway.server import Gateway
from ctxview.gateway.transport import wire_gateway


def build_gateway(
    settings: Settings,
    resolver: WorkspaceResolver | None = None,
    bus: EventBus | None = None,
) -> Gateway:
    service = ContextService(resolver or ConfigWorkspaceResolver(settings))
    registry = MethodRegistry()
    register_context_methods(registry, service)
    gateway = Gateway(registry)
    if bus is not None:
        wire_gateway(bus, gateway)
    return gateway
