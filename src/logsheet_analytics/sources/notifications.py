"""User-facing notifications raised by loaders and the live-update coordinator."""

from dataclasses import dataclass
from typing import Callable, Literal, Optional

from ..logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class Notification:
    title: str
    description: Optional[str] = None
    variant: Literal["default", "destructive"] = "default"


Notifier = Callable[[Notification], None]


class LoggingNotifier:
    """Notifier that writes notifications to the log."""

    def __init__(self, name: str = __name__):
        self._logger = get_logger(name)

    def __call__(self, notification: Notification) -> None:
        message = notification.title
        if notification.description:
            message = f"{message}: {notification.description}"
        if notification.variant == "destructive":
            self._logger.warning(message)
        else:
            self._logger.info(message)

