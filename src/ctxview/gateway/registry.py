"""Gateway method registry and specifications."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any

from ctxview.context.service import ContextService

MethodHandler = Callable[[dict[str, Any]], Awaitable[dict[str, Any]]]

PATH_PARAMS_SCHEMA: dict[str, object] = {
    "type": "object",
    "properties": {"path": {"type": "string"}},
}


@dataclass(frozen=True)
class MethodSpec:
    name: str
    description: str
    params_schema: dict[str, object]


class MethodRegistry:
    def __init__(self) -> None:
        self._specs: dict[str, MethodSpec] = {}
        self._handlers: dict[str, MethodHandler] = {}

    def register(self, spec: MethodSpec, handler: MethodHandler) -> None:
        if spec.name in self._specs:
            raise ValueError(f"Method already registered: {spec.name}")
        self._specs[spec.name] = spec
        self._handlers[spec.name] = handler

    def __contains__(self, name: object) -> bool:
        return name in self._specs

    def get(self, name: str) -> MethodSpec:
        if name not in self._specs:
            raise KeyError(f"Method not registered: {name}")
        return self._specs[name]

    def handler(self, name: str) -> MethodHandler:
        if name not in self._handlers:
            raise KeyError(f"Handler not registered: {name}")
        return self._handlers[name]

    def list_specs(self) -> list[MethodSpec]:
        return list(self._specs.values())


def register_context_methods(registry: MethodRegistry, service: ContextService) -> None:
    # Filesystem calls block, so they run in a worker thread.
    async def context_list(params: dict[str, Any]) -> dict[str, Any]:
        listing = await asyncio.to_thread(service.list_entries, params.get("path", ""))
        return listing.to_dict()

    async def context_read(params: dict[str, Any]) -> dict[str, Any]:
        content = await asyncio.to_thread(service.read_file, params.get("path"))
        return content.to_dict()

    registry.register(
        MethodSpec(
            name="context.list",
            description="List one directory level of the agent workspace",
            params_schema=PATH_PARAMS_SCHEMA,
        ),
        context_list,
    )
    registry.register(
        MethodSpec(
            name="context.read",
            description="Read a text file from the agent workspace",
            params_schema=PATH_PARAMS_SCHEMA,
        ),
        context_read,
    )
