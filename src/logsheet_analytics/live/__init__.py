"""Cross-view live updates."""

from .bus import Handler, InMemoryBus, NotificationBus, Unsubscribe
from .coordinator import CoordinatorState, LiveUpdateCoordinator, UPDATED_TITLE, parse_update_type

__all__ = [
    "Handler",
    "InMemoryBus",
    "NotificationBus",
    "Unsubscribe",
    "CoordinatorState",
    "LiveUpdateCoordinator",
    "UPDATED_TITLE",
    "parse_update_type",
]
