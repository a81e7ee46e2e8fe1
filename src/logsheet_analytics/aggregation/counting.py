"""
Counting aggregation over extracted selection events.

Every function here builds fresh maps from its input; nothing is shared
between the global and scoped views or between successive runs.
"""

from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Dict, Hashable, Iterable, List, Mapping

from ..records import Track, TrackId
from .extraction import Selection


@dataclass(frozen=True)
class CountEntry:
    """A keyed count with its display label."""
    key: Hashable
    label: str
    count: int

    def to_dict(self) -> Dict[str, Any]:
        return {"key": self.key, "label": self.label, "count": self.count}


@dataclass(frozen=True)
class GlobalCounts:
    """Per-track, per-artist and per-company selection counts."""
    by_track: Dict[TrackId, CountEntry]
    by_artist: Dict[str, CountEntry]
    by_company: Dict[str, CountEntry]

    @property
    def total_selections(self) -> int:
        return sum(entry.count for entry in self.by_track.values())


@dataclass(frozen=True)
class TrackPerformance:
    """Selections of one catalog track, split by company."""
    track: Track
    total: int = 0
    companies: Dict[str, int] = field(default_factory=dict)

    def company_entries(self) -> List[CountEntry]:
        return [CountEntry(key=name, label=name, count=count) for name, count in self.companies.items()]


def _entries(counter: Mapping[Any, int], labels: Mapping[Any, str]) -> Dict[Any, CountEntry]:
    return {key: CountEntry(key=key, label=labels[key], count=count) for key, count in counter.items()}


def count_global(selections: Iterable[Selection]) -> GlobalCounts:
    """
    Fold selection events into track, artist and company counters.

    A track keeps the label of the first event seen for its id.

    Args:
        selections: Extracted selection events

    Returns:
        GlobalCounts built from scratch
    """
    tracks: Counter = Counter()
    track_labels: Dict[TrackId, str] = {}
    artists: Counter = Counter()
    companies: Counter = Counter()

    for selection in selections:
        tracks[selection.track_id] += 1
        track_labels.setdefault(selection.track_id, selection.track_label)
        artists[selection.artist] += 1
        companies[selection.company] += 1

    return GlobalCounts(
        by_track=_entries(tracks, track_labels),
        by_artist=_entries(artists, {name: name for name in artists}),
        by_company=_entries(companies, {name: name for name in companies}),
    )


def count_scoped(tracks: Iterable[Track], selections: Iterable[Selection]) -> Dict[TrackId, TrackPerformance]:
    """
    Count selections of the caller's own tracks, split by company.

    Every catalog track gets an entry, including those never selected.
    Events for track ids outside the catalog are ignored.

    Args:
        tracks: The caller's catalog
        selections: Extracted selection events

    Returns:
        Mapping of track id to TrackPerformance, in catalog order
    """
    catalog: Dict[TrackId, Track] = {}
    for track in tracks:
        catalog.setdefault(track.id, track)

    totals: Counter = Counter()
    by_company: Dict[TrackId, Counter] = {track_id: Counter() for track_id in catalog}

    for selection in selections:
        if selection.track_id not in catalog:
            continue
        totals[selection.track_id] += 1
        by_company[selection.track_id][selection.company] += 1

    return {
        track_id: TrackPerformance(
            track=track,
            total=totals[track_id],
            companies=dict(by_company[track_id]),
        )
        for track_id, track in catalog.items()
    }
