"""Monthly bucketing of selection activity."""

from collections import Counter
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional, Tuple

from ..records import LogSheet, TrackId
from ..logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class TimeSeriesPoint:
    """Selection count for one calendar month ("YYYY-MM")."""
    month_key: str
    count: int

    def to_dict(self) -> Dict[str, Any]:
        return {"month_key": self.month_key, "count": self.count}


def bucket_by_month(increments: Iterable[Tuple[str, int]]) -> List[TimeSeriesPoint]:
    """Sum (month_key, increment) pairs and return them in chronological order."""
    buckets: Counter = Counter()
    for month_key, increment in increments:
        buckets[month_key] += increment
    return [TimeSeriesPoint(month_key=key, count=buckets[key]) for key in sorted(buckets)]


def _dated(sheets: Iterable[LogSheet]) -> Iterable[Tuple[str, LogSheet]]:
    for sheet in sheets:
        month_key = sheet.month_key()
        if month_key is None:
            logger.debug(f"Log sheet {sheet.id} has no usable creation date; left out of trends")
            continue
        yield month_key, sheet


def monthly_selections(sheets: Iterable[LogSheet]) -> List[TimeSeriesPoint]:
    """
    Total selection events per month across all log sheets.

    Each dated sheet contributes its count of selection entries that carry a
    track id, so a month whose sheets list nothing still shows up with 0.
    """
    return bucket_by_month(
        (month_key, sum(1 for entry in sheet.selected_music if entry.has_id()))
        for month_key, sheet in _dated(sheets)
    )


def monthly_track_selections(sheets: Iterable[LogSheet], track_id: Optional[TrackId]) -> List[TimeSeriesPoint]:
    """Selection events of one track per month; empty when no track is given."""
    if track_id is None:
        return []
    return bucket_by_month(
        (month_key, 1)
        for month_key, sheet in _dated(sheets)
        for entry in sheet.selected_music
        if entry.id == track_id
    )
