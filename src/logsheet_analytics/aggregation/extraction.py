"""Selection extraction: flattens log sheets into normalized selection events."""

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional

from ..config import Settings
from ..records import LogSheet, TrackId
from ..logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class Selection:
    """One attributable selection event."""
    company: str
    track_id: TrackId
    track_label: str
    artist: str


def extract_selections(
    sheets: Iterable[LogSheet],
    settings: Optional[Settings] = None,
) -> Iterator[Selection]:
    """
    Yield one Selection per selection entry that carries a track id.

    Entries without an id are skipped silently. Duplicate entries within a
    sheet each yield their own event.

    Args:
        sheets: Log sheet snapshot
        settings: Supplies the labels used for missing company/artist

    Yields:
        Selection events in snapshot order
    """
    settings = settings or Settings()
    for sheet in sheets:
        company = sheet.company_label(settings.unknown_company)
        for entry in sheet.selected_music:
            if not entry.has_id():
                logger.debug(f"Skipping selection without track id in log sheet {sheet.id}")
                continue
            yield Selection(
                company=company,
                track_id=entry.id,
                track_label=entry.resolved_title(),
                artist=entry.resolved_artist(settings.unknown_artist),
            )
