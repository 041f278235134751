"""Carry gateway requests and responses over an event bus."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from ctxview.bus import topics
from ctxview.bus.broker import EventBus
from ctxview.bus.schemas import ErrorCode, GatewayRequest, GatewayResponse, build_request
from ctxview.gateway.server import Gateway, GatewayError, unwrap_response

logger = logging.getLogger(__name__)


def wire_gateway(bus: EventBus, gateway: Gateway) -> None:
    async def _on_request(message: object) -> None:
        if not isinstance(message, GatewayRequest):
            logger.warning("Ignoring non-request message: %r", message)
            return
        response = await gateway.dispatch(message)
        await bus.publish(topics.GATEWAY_RESPONSE, response)

    bus.subscribe(topics.GATEWAY_REQUEST, _on_request)


class BusGatewayClient:
    """Sends requests over the bus and matches responses by request id."""

    def __init__(self, bus: EventBus) -> None:
        self._bus = bus
        self._pending: dict[str, asyncio.Future[GatewayResponse]] = {}
        bus.subscribe(topics.GATEWAY_RESPONSE, self._on_response)

    async def call(
        self, method: str, params: dict[str, Any] | None = None
    ) -> GatewayResponse:
        if not self._bus.has_subscribers(topics.GATEWAY_REQUEST):
            raise GatewayError(
                ErrorCode.UNAVAILABLE, f"no gateway listening on {topics.GATEWAY_REQUEST}"
            )
        request = build_request(method, params)
        future: asyncio.Future[GatewayResponse] = (
            asyncio.get_running_loop().create_future()
        )
        self._pending[request.request_id] = future
        try:
            await self._bus.publish(topics.GATEWAY_REQUEST, request)
            return await future
        finally:
            self._pending.pop(request.request_id, None)

    async def request(
        self, method: str, params: dict[str, Any] | None = None
    ) -> dict[str, Any]:
        return unwrap_response(await self.call(method, params))

    def close(self) -> None:
        self._bus.unsubscribe(topics.GATEWAY_RESPONSE, self._on_response)
        for future in self._pending.values():
            future.cancel()
        self._pending.clear()

    async def _on_response(self, message: object) -> None:
        if not isinstance(message, GatewayResponse):
            return
        future = self._pending.get(message.request_id)
        if future is None or future.done():
            return
        future.set_result(message)
