"""Time helpers."""

from __future__ import annotations

import time


def now_ms() -> float:
    return time.time() * 1000


def elapsed_ms(start: float) -> int:
    return int((time.perf_counter() - start) * 1000)
