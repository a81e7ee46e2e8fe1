"""
Publish/subscribe channel abstraction for cross-view update signals.

A bus delivers (channel, payload) pairs to handlers. The payload is the raw
text that was broadcast; decoding it is left to the subscriber.
"""

from typing import Callable, Dict, List, Optional, Protocol

from ..logging import get_logger

logger = get_logger(__name__)

Handler = Callable[[Optional[str], Optional[str]], None]
Unsubscribe = Callable[[], None]


class NotificationBus(Protocol):
    def subscribe(self, channel: str, handler: Handler) -> Unsubscribe: ...


class InMemoryBus:
    """Same-process bus; publish() calls subscribed handlers synchronously."""

    def __init__(self):
        self._handlers: Dict[str, List[Handler]] = {}

    def subscribe(self, channel: str, handler: Handler) -> Unsubscribe:
        self._handlers.setdefault(channel, []).append(handler)
        logger.debug(f"Subscribed handler to {channel!r}")

        def unsubscribe() -> None:
            handlers = self._handlers.get(channel, [])
            if handler in handlers:
                handlers.remove(handler)
                logger.debug(f"Unsubscribed handler from {channel!r}")
            if not handlers:
                self._handlers.pop(channel, None)

        return unsubscribe

    def publish(self, channel: str, payload: Optional[str]) -> int:
        """
        Deliver a payload to every handler on the channel.

        Returns:
            Number of handlers called
        """
        handlers = list(self._handlers.get(channel, []))
        for handler in handlers:
            handler(channel, payload)
        return len(handlers)

    def subscriber_count(self, channel: str) -> int:
        return len(self._handlers.get(channel, []))
