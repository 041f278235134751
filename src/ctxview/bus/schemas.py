"""Gateway message schemas."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    INVALID_REQUEST = "INVALID_REQUEST"
    UNAVAILABLE = "UNAVAILABLE"


@dataclass(frozen=True)
class ErrorShape:
    code: ErrorCode
    message: str

    def to_dict(self) -> dict[str, str]:
        return {"code": self.code.value, "message": self.message}


@dataclass(frozen=True)
class GatewayRequest:
    request_id: str
    method: str
    params: dict[str, Any] | None = field(default_factory=dict)


@dataclass(frozen=True)
class GatewayResponse:
    request_id: str
    ok: bool
    payload: dict[str, Any] | None
    error: ErrorShape | None
    elapsed_ms: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.request_id,
            "ok": self.ok,
            "payload": self.payload,
            "error": self.error.to_dict() if self.error else None,
        }


def error_shape(code: ErrorCode, message: str) -> ErrorShape:
    return ErrorShape(code=code, message=message)


def new_request_id() -> str:
    return f"req_{uuid.uuid4().hex}"


def build_request(method: str, params: dict[str, Any] | None = None) -> GatewayRequest:
    return GatewayRequest(
        request_id=new_request_id(),
        method=method,
        params=params if params is not None else {},
    )
