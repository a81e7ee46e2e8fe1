import os
from dataclasses import dataclass, field
from typing import Tuple

from .logging import get_logger

logger = get_logger(__name__)

ENV_PREFIX = "LOGSHEET_ANALYTICS_"


@dataclass(frozen=True)
class Settings:
    top_n: int = 10
    update_channel: str = "namsa:update"
    refresh_types: Tuple[str, ...] = field(default=("music", "profile"))
    unknown_company: str = "Unknown Company"
    unknown_artist: str = "Unknown Artist"

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from LOGSHEET_ANALYTICS_* variables, keeping defaults for bad values."""
        defaults = cls()
        top_n = defaults.top_n
        raw_top_n = os.getenv(f"{ENV_PREFIX}TOP_N")
        if raw_top_n:
            try:
                top_n = int(raw_top_n)
            except ValueError:
                logger.warning(f"Ignoring invalid {ENV_PREFIX}TOP_N={raw_top_n!r}")
            else:
                if top_n < 1:
                    logger.warning(f"Ignoring non-positive {ENV_PREFIX}TOP_N={raw_top_n!r}")
                    top_n = defaults.top_n

        channel = os.getenv(f"{ENV_PREFIX}UPDATE_CHANNEL", "").strip() or defaults.update_channel

        refresh_types = defaults.refresh_types
        raw_types = os.getenv(f"{ENV_PREFIX}REFRESH_TYPES")
        if raw_types is not None:
            parsed = tuple(part.strip() for part in raw_types.split(",") if part.strip())
            if parsed:
                refresh_types = parsed
            else:
                logger.warning(f"Ignoring empty {ENV_PREFIX}REFRESH_TYPES")

        return cls(top_n=top_n, update_channel=channel, refresh_types=refresh_types)
