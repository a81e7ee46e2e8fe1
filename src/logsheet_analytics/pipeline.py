"""
End-to-end performance pipelines.

build_admin_performance and build_artist_performance are pure functions of
their snapshot. The loaders fetch a fresh snapshot through a provider,
falling back to empty collections, and run the matching pipeline; their
load() methods are what the live-update coordinator calls on refresh.
"""

from typing import Iterable, List, Optional

from .aggregation import (
    count_global,
    count_scoped,
    extract_selections,
    monthly_selections,
    monthly_track_selections,
    rank_entries,
)
from .config import Settings
from .records import LogSheet, Track, TrackId
from .search import default_track_id, filter_tracks
from .sources import Notifier, SnapshotProvider, fetch_or_empty
from .views import AdminPerformanceView, ArtistPerformanceView, ranked_panel, trend_series
from .logging import get_logger

logger = get_logger(__name__)


def build_admin_performance(
    sheets: Iterable[LogSheet],
    settings: Optional[Settings] = None,
) -> AdminPerformanceView:
    """
    Build the global performance view from a log sheet snapshot.

    Args:
        sheets: All log sheets
        settings: Ranking size and fallback labels

    Returns:
        AdminPerformanceView with top songs, artists, companies and monthly totals
    """
    settings = settings or Settings()
    sheets = list(sheets)
    counts = count_global(extract_selections(sheets, settings))

    view = AdminPerformanceView(
        songs=ranked_panel(rank_entries(counts.by_track.values(), settings.top_n)),
        artists=ranked_panel(rank_entries(counts.by_artist.values(), settings.top_n)),
        companies=ranked_panel(rank_entries(counts.by_company.values(), settings.top_n)),
        trend=trend_series(monthly_selections(sheets)),
        total_selections=counts.total_selections,
    )
    logger.debug(
        f"Admin performance: {len(sheets)} sheets, {view.total_selections} selections, "
        f"{len(counts.by_track)} tracks"
    )
    return view


def build_artist_performance(
    tracks: Iterable[Track],
    sheets: Iterable[LogSheet],
    selected_track_id: Optional[TrackId] = None,
    query: Optional[str] = None,
    settings: Optional[Settings] = None,
) -> ArtistPerformanceView:
    """
    Build the scoped performance view for one rights-holder.

    The selected track defaults to the first catalog track. A selection
    that is not in the catalog produces an empty breakdown and trend.

    Args:
        tracks: The caller's own catalog
        sheets: Log sheets visible to the caller
        selected_track_id: Track to break down by company
        query: Search text narrowing the listed tracks
        settings: Fallback labels

    Returns:
        ArtistPerformanceView for the selected track
    """
    settings = settings or Settings()
    tracks = list(tracks)
    sheets = list(sheets)
    performance = count_scoped(tracks, extract_selections(sheets, settings))

    if selected_track_id is None:
        selected_track_id = default_track_id(tracks)
    selected = performance.get(selected_track_id) if selected_track_id is not None else None

    if selected is None:
        companies = ranked_panel([])
        trend: List = []
    else:
        companies = ranked_panel(rank_entries(selected.company_entries(), limit=None))
        trend = trend_series(monthly_track_selections(sheets, selected_track_id))

    return ArtistPerformanceView(
        tracks=filter_tracks(tracks, query),
        selected_track_id=selected_track_id,
        selected_total=selected.total if selected is not None else 0,
        companies=companies,
        trend=trend,
        track_totals={track_id: entry.total for track_id, entry in performance.items()},
    )


class AdminPerformanceLoader:
    """Fetches every log sheet and builds the global view."""

    def __init__(
        self,
        provider: SnapshotProvider,
        notifier: Optional[Notifier] = None,
        settings: Optional[Settings] = None,
    ):
        self._provider = provider
        self._notifier = notifier
        self._settings = settings or Settings()

    def load(self) -> AdminPerformanceView:
        sheets = fetch_or_empty(self._provider.get_all_log_sheets, "log sheets", self._notifier)
        return build_admin_performance(sheets, self._settings)


class ArtistPerformanceLoader:
    """Fetches the caller's tracks and visible log sheets and builds the scoped view."""

    def __init__(
        self,
        provider: SnapshotProvider,
        notifier: Optional[Notifier] = None,
        settings: Optional[Settings] = None,
        selected_track_id: Optional[TrackId] = None,
        query: Optional[str] = None,
    ):
        self._provider = provider
        self._notifier = notifier
        self._settings = settings or Settings()
        self.selected_track_id = selected_track_id
        self.query = query

    def load(self) -> ArtistPerformanceView:
        tracks = fetch_or_empty(self._provider.get_my_tracks, "tracks", self._notifier)
        sheets = fetch_or_empty(self._provider.get_my_log_sheets, "log sheets", self._notifier)
        return build_artist_performance(
            tracks,
            sheets,
            selected_track_id=self.selected_track_id,
            query=self.query,
            settings=self._settings,
        )
