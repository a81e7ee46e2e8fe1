"""Catalog track search used by the artist view's track picker."""

from typing import Iterable, List, Optional

from .records import Track, TrackId


def filter_tracks(tracks: Iterable[Track], query: Optional[str]) -> List[Track]:
    """
    Return tracks whose title, artist or album name contains the query.

    Matching is case-insensitive. A blank query returns every track.
    """
    tracks = list(tracks)
    if query is None or not query.strip():
        return tracks
    needle = query.lower()
    return [
        track for track in tracks
        if any(needle in value.lower() for value in (track.title, track.artist, track.album_name) if value)
    ]


def default_track_id(tracks: Iterable[Track]) -> Optional[TrackId]:
    """The first catalog track's id, or None for an empty catalog."""
    for track in tracks:
        return track.id
    return None
