"""In-process event bus used as the gateway message channel."""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Awaitable, Callable
from typing import Protocol

logger = logging.getLogger(__name__)

Handler = Callable[[object], Awaitable[None]]


class EventBus(Protocol):
    def subscribe(self, topic: str, handler: Handler) -> None: ...

    def unsubscribe(self, topic: str, handler: Handler) -> None: ...

    def has_subscribers(self, topic: str) -> bool: ...

    async def publish(self, topic: str, message: object) -> None: ...


class InMemoryBus:
    """Delivers each message to the topic's handlers in subscription order."""

    def __init__(self) -> None:
        self._handlers: dict[str, list[Handler]] = defaultdict(list)

    def subscribe(self, topic: str, handler: Handler) -> None:
        self._handlers[topic].append(handler)

    def unsubscribe(self, topic: str, handler: Handler) -> None:
        handlers = self._handlers.get(topic)
        if handlers and handler in handlers:
            handlers.remove(handler)

    def has_subscribers(self, topic: str) -> bool:
        return bool(self._handlers.get(topic))

    async def publish(self, topic: str, message: object) -> None:
        handlers = list(self._handlers.get(topic, []))
        if not handlers:
            logger.debug("No subscribers for topic %s", topic)
        for handler in handlers:
            await handler(message)
