"""
Live-update coordinator.

Listens on the update channel and re-runs a load+recompute cycle when a
notification names a data kind the view depends on. The coordinator keeps
only the most recent result; each refresh is derived from its own fresh
snapshot, so a later refresh simply replaces an earlier one.
"""

import json
from enum import Enum
from typing import Callable, Generic, Optional, TypeVar

from ..config import Settings
from ..sources.notifications import Notification, Notifier
from ..logging import get_logger
from .bus import NotificationBus, Unsubscribe

logger = get_logger(__name__)

T = TypeVar("T")

UPDATED_TITLE = "Performance Data Updated"


class CoordinatorState(Enum):
    IDLE = "idle"
    REFRESHING = "refreshing"


def parse_update_type(payload: Optional[str]) -> Optional[str]:
    """
    Extract the "type" field from a notification payload.

    An absent payload is treated as an empty object. Anything that is not a
    JSON object, or has no string "type", yields None.
    """
    try:
        data = json.loads(payload or "{}")
    except (TypeError, ValueError):
        return None
    if not isinstance(data, dict):
        return None
    update_type = data.get("type")
    return update_type if isinstance(update_type, str) else None


class LiveUpdateCoordinator(Generic[T]):
    """
    Re-runs a refresh callable when relevant update notifications arrive.

    Usage:
        coordinator = LiveUpdateCoordinator(bus, loader.load, on_result=render)
        with coordinator:
            ...  # view is active; refreshes happen as notifications arrive
    """

    def __init__(
        self,
        bus: NotificationBus,
        refresh: Callable[[], T],
        on_result: Optional[Callable[[T], None]] = None,
        notifier: Optional[Notifier] = None,
        settings: Optional[Settings] = None,
    ):
        self._bus = bus
        self._refresh = refresh
        self._on_result = on_result
        self._notifier = notifier
        self._settings = settings or Settings()
        self._unsubscribe: Optional[Unsubscribe] = None
        self._in_flight = 0
        self.latest: Optional[T] = None
        self.refresh_count = 0

    @property
    def state(self) -> CoordinatorState:
        return CoordinatorState.REFRESHING if self._in_flight else CoordinatorState.IDLE

    @property
    def is_subscribed(self) -> bool:
        return self._unsubscribe is not None

    def start(self, initial_load: bool = True) -> "LiveUpdateCoordinator[T]":
        """Subscribe to the update channel, optionally running the initial load."""
        if self._unsubscribe is None:
            self._unsubscribe = self._bus.subscribe(self._settings.update_channel, self.handle)
            logger.debug(f"Listening for updates on {self._settings.update_channel!r}")
        if initial_load:
            self.refresh(announce=False)
        return self

    def stop(self) -> None:
        """Release the subscription; safe to call more than once."""
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
            logger.debug(f"Stopped listening on {self._settings.update_channel!r}")

    def __enter__(self) -> "LiveUpdateCoordinator[T]":
        return self.start()

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.stop()

    def handle(self, channel: Optional[str], payload: Optional[str]) -> bool:
        """
        Process one notification.

        Returns:
            True when the notification triggered a refresh
        """
        if not channel or channel != self._settings.update_channel:
            return False
        update_type = parse_update_type(payload)
        if update_type not in self._settings.refresh_types:
            logger.debug(f"Ignoring update notification of type {update_type!r}")
            return False
        logger.info(f"Refreshing after {update_type!r} update")
        return self.refresh(announce=True)

    def refresh(self, announce: bool = True) -> bool:
        """
        Run one load+recompute cycle and publish its result.

        Returns:
            True when the refresh produced a result
        """
        self._in_flight += 1
        try:
            result = self._refresh()
        except Exception as exc:
            logger.warning(f"Refresh failed: {exc}")
            return False
        finally:
            self._in_flight -= 1

        self.latest = result
        self.refresh_count += 1
        if self._on_result is not None:
            try:
                self._on_result(result)
            except Exception as exc:
                logger.warning(f"Delivering refreshed result failed: {exc}")
        if announce and self._notifier is not None:
            try:
                self._notifier(Notification(title=UPDATED_TITLE))
            except Exception as exc:
                logger.warning(f"Refresh notification failed: {exc}")
        return True
