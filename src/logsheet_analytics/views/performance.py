"""View models for the administrator and artist performance pages."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..records import Track, TrackId
from .assembler import RankedPanel, SeriesPoint, ranked_panel


@dataclass(frozen=True)
class AdminPerformanceView:
    """Global view: top songs, artists and companies plus monthly totals."""
    songs: RankedPanel
    artists: RankedPanel
    companies: RankedPanel
    trend: List[SeriesPoint]
    total_selections: int = 0

    @classmethod
    def empty(cls) -> "AdminPerformanceView":
        return cls(songs=ranked_panel([]), artists=ranked_panel([]), companies=ranked_panel([]), trend=[])

    def to_dict(self) -> Dict[str, Any]:
        return {
            "total_selections": self.total_selections,
            "songs": self.songs.to_dict(),
            "artists": self.artists.to_dict(),
            "companies": self.companies.to_dict(),
            "trend": [point.to_dict() for point in self.trend],
        }


@dataclass(frozen=True)
class ArtistPerformanceView:
    """Scoped view: the caller's tracks and one selected track's breakdown."""
    tracks: List[Track]
    selected_track_id: Optional[TrackId]
    selected_total: int
    companies: RankedPanel
    trend: List[SeriesPoint]
    track_totals: Dict[TrackId, int] = field(default_factory=dict)

    @classmethod
    def empty(cls) -> "ArtistPerformanceView":
        return cls(tracks=[], selected_track_id=None, selected_total=0, companies=ranked_panel([]), trend=[])

    @property
    def selected_track(self) -> Optional[Track]:
        for track in self.tracks:
            if track.id == self.selected_track_id:
                return track
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "tracks": [track.to_dict() for track in self.tracks],
            "selected_track_id": self.selected_track_id,
            "selected_total": self.selected_total,
            "track_totals": [
                {"track_id": track_id, "total": total} for track_id, total in self.track_totals.items()
            ],
            "companies": self.companies.to_dict(),
            "trend": [point.to_dict() for point in self.trend],
        }
