"""Bus topic names."""

from __future__ import annotations

GATEWAY_REQUEST = "gateway.request"
GATEWAY_RESPONSE = "gateway.response"
