"""Gateway request dispatch with validation and error shaping."""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from jsonschema import ValidationError

from ctxview.bus.schemas import (
    ErrorCode,
    ErrorShape,
    GatewayRequest,
    GatewayResponse,
    build_request,
    error_shape,
)
from ctxview.context.service import ContextError
from ctxview.gateway.registry import MethodRegistry
from ctxview.utils.jsonschema import describe_validation_error, validate_jsonschema
from ctxview.utils.time import elapsed_ms

logger = logging.getLogger(__name__)

Responder = Callable[[bool, dict[str, Any] | None, ErrorShape | None], None]


@dataclass(eq=False)
class GatewayError(Exception):
    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class Gateway:
    """Maps ``(method, params)`` onto a registered handler.

    Every outcome, including unexpected handler failures, comes back as a
    :class:`GatewayResponse`; nothing raises out of :meth:`dispatch`.
    """

    def __init__(self, registry: MethodRegistry) -> None:
        self._registry = registry

    @property
    def registry(self) -> MethodRegistry:
        return self._registry

    async def dispatch(self, request: GatewayRequest) -> GatewayResponse:
        start = time.perf_counter()
        if request.method not in self._registry:
            return self._failure(
                request, start, ErrorCode.INVALID_REQUEST, f"unknown method: {request.method}"
            )

        params = request.params if request.params is not None else {}
        if not isinstance(params, dict):
            return self._failure(
                request, start, ErrorCode.INVALID_REQUEST, "params must be an object"
            )

        spec = self._registry.get(request.method)
        try:
            validate_jsonschema(spec.params_schema, params)
        except ValidationError as exc:
            return self._failure(
                request, start, ErrorCode.INVALID_REQUEST, describe_validation_error(exc)
            )

        handler = self._registry.handler(spec.name)
        try:
            payload = await handler(params)
        except ContextError as exc:
            return self._failure(request, start, exc.code, exc.message)
        except Exception as exc:
            logger.exception("Gateway method %s failed", spec.name)
            return self._failure(
                request, start, ErrorCode.UNAVAILABLE, f"{spec.name} failed: {exc}"
            )

        response = GatewayResponse(
            request_id=request.request_id,
            ok=True,
            payload=payload,
            error=None,
            elapsed_ms=elapsed_ms(start),
        )
        logger.debug(
            "%s %s ok in %sms", request.request_id, spec.name, response.elapsed_ms
        )
        return response

    async def call(
        self, method: str, params: dict[str, Any] | None = None
    ) -> GatewayResponse:
        return await self.dispatch(build_request(method, params))

    async def request(
        self, method: str, params: dict[str, Any] | None = None
    ) -> dict[str, Any]:
        response = await self.call(method, params)
        return unwrap_response(response)

    async def handle(
        self, method: str, params: dict[str, Any] | None, respond: Responder
    ) -> None:
        response = await self.call(method, params)
        respond(response.ok, response.payload, response.error)

    def _failure(
        self, request: GatewayRequest, start: float, code: ErrorCode, message: str
    ) -> GatewayResponse:
        logger.warning(
            "%s %s failed: %s %s", request.request_id, request.method, code.value, message
        )
        return GatewayResponse(
            request_id=request.request_id,
            ok=False,
            payload=None,
            error=error_shape(code, message),
            elapsed_ms=elapsed_ms(start),
        )


def unwrap_response(response: GatewayResponse) -> dict[str, Any]:
    if response.ok:
        return response.payload or {}
    error = response.error or error_shape(ErrorCode.UNAVAILABLE, "unknown error")
    raise GatewayError(error.code, error.message)
