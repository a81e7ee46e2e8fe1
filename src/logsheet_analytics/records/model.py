"""
Record models for log sheets, selection entries and catalog tracks.

These are the typed counterparts of the JSON shapes returned by the
licensing API. Each carries explicit optional fields and the defaulting
rules used when labelling aggregates.
"""

from dataclasses import dataclass, asdict, field
from datetime import datetime
from typing import Any, Dict, List, Mapping, Optional, Tuple

from .coercion import TrackId, coerce_id, optional_text, parse_timestamp
from ..logging import get_logger

logger = get_logger(__name__)

UNKNOWN_COMPANY = "Unknown Company"
UNKNOWN_ARTIST = "Unknown Artist"


@dataclass(frozen=True)
class CompanyRef:
    """Company that filed a log sheet."""
    company_name: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CompanyRef":
        return cls(company_name=optional_text(data.get("companyName")))


@dataclass(frozen=True)
class UserRef:
    """Account that owns a track."""
    email: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "UserRef":
        return cls(email=optional_text(data.get("email")))


@dataclass(frozen=True)
class SelectionEntry:
    """
    One track listed in a log sheet's selection.

    Each occurrence is one selection event; repeated entries within the
    same sheet are counted separately.
    """
    id: Optional[TrackId] = None        # Missing ids exclude the entry from aggregates
    title: Optional[str] = None         # Defaults to "Track {id}"
    artist: Optional[str] = None        # Fallback attribution
    user: Optional[UserRef] = None      # Preferred attribution (contact email)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SelectionEntry":
        user = data.get("user")
        return cls(
            id=coerce_id(data.get("id")),
            title=optional_text(data.get("title")),
            artist=optional_text(data.get("artist")),
            user=UserRef.from_dict(user) if isinstance(user, Mapping) else None,
        )

    def has_id(self) -> bool:
        return self.id is not None

    def resolved_title(self) -> str:
        return self.title or f"Track {self.id}"

    def resolved_artist(self, unknown: str = UNKNOWN_ARTIST) -> str:
        """Attribution label: owner email, then artist field, then the unknown label."""
        if self.user is not None and self.user.email:
            return self.user.email
        return self.artist or unknown


@dataclass(frozen=True)
class LogSheet:
    """A company's record of the tracks it used on a given date."""
    id: Optional[TrackId] = None
    company: Optional[CompanyRef] = None
    created_date: Optional[datetime] = None
    selected_music: Tuple[SelectionEntry, ...] = field(default_factory=tuple)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "LogSheet":
        company = data.get("company")
        raw_music = data.get("selectedMusic") or []
        if not isinstance(raw_music, (list, tuple)):
            raw_music = []
        return cls(
            id=coerce_id(data.get("id")),
            company=CompanyRef.from_dict(company) if isinstance(company, Mapping) else None,
            created_date=parse_timestamp(data.get("createdDate")),
            selected_music=tuple(
                SelectionEntry.from_dict(entry) if isinstance(entry, Mapping) else SelectionEntry()
                for entry in raw_music
            ),
        )

    def company_label(self, unknown: str = UNKNOWN_COMPANY) -> str:
        if self.company is not None and self.company.company_name:
            return self.company.company_name
        return unknown

    def month_key(self) -> Optional[str]:
        """Calendar month of creation as "YYYY-MM", or None without a date."""
        if self.created_date is None:
            return None
        return f"{self.created_date.year:04d}-{self.created_date.month:02d}"


@dataclass(frozen=True)
class Track:
    """A catalog track owned by the viewing rights-holder."""
    id: TrackId
    title: Optional[str] = None
    artist: Optional[str] = None
    album_name: Optional[str] = None
    status: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Optional["Track"]:
        track_id = coerce_id(data.get("id"))
        if track_id is None:
            return None
        status = data.get("status")
        if isinstance(status, Mapping):
            status = status.get("statusName")
        return cls(
            id=track_id,
            title=optional_text(data.get("title")),
            artist=optional_text(data.get("artist")),
            album_name=optional_text(data.get("albumName")),
            status=optional_text(status),
        )

    def display_label(self) -> str:
        return f"{self.title or f'Track {self.id}'} - {self.artist or 'Unknown'}"

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class CatalogStats:
    """Upload counters for a rights-holder's catalog."""
    total_uploads: int = 0
    approved_music: int = 0
    pending_music: int = 0
    rejected_music: int = 0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CatalogStats":
        def count(key: str) -> int:
            value = data.get(key)
            if isinstance(value, bool):
                return 0
            try:
                return max(int(value or 0), 0)
            except (TypeError, ValueError):
                return 0

        return cls(
            total_uploads=count("totalUploads"),
            approved_music=count("approvedMusic"),
            pending_music=count("pendingMusic"),
            rejected_music=count("rejectedMusic"),
        )

    def to_dict(self) -> Dict[str, int]:
        return asdict(self)


def _mappings(raw: Any, kind: str) -> List[Mapping[str, Any]]:
    if not isinstance(raw, (list, tuple)):
        if raw is not None:
            logger.debug(f"Expected a list of {kind}, got {type(raw).__name__}")
        return []
    items = []
    for item in raw:
        if isinstance(item, Mapping):
            items.append(item)
        else:
            logger.debug(f"Skipping non-object {kind} entry: {item!r}")
    return items


def parse_log_sheets(raw: Any) -> List[LogSheet]:
    """Parse a JSON list of log sheets, skipping entries that are not objects or cannot be read."""
    sheets = []
    for item in _mappings(raw, "log sheet"):
        try:
            sheets.append(LogSheet.from_dict(item))
        except (TypeError, ValueError, AttributeError) as exc:
            logger.debug(f"Skipping unreadable log sheet {item.get('id')!r}: {exc}")
    return sheets


def parse_tracks(raw: Any) -> List[Track]:
    """Parse a JSON list of catalog tracks, skipping entries without an id."""
    tracks = []
    for item in _mappings(raw, "track"):
        try:
            track = Track.from_dict(item)
        except (TypeError, ValueError, AttributeError) as exc:
            logger.debug(f"Skipping unreadable track {item.get('id')!r}: {exc}")
            continue
        if track is not None:
            tracks.append(track)
    return tracks
