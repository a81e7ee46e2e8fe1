"""
Snapshot providers and the fetch-with-fallback boundary.

Providers raise SnapshotFetchError when data cannot be retrieved. Callers
go through fetch_or_empty, which turns any failure into an empty result
plus a non-fatal notification so the aggregation pipeline always receives
well-formed input.
"""

import json
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Protocol, TypeVar

from ..records import CatalogStats, LogSheet, Track, parse_log_sheets, parse_tracks
from ..logging import get_logger
from .notifications import Notification, Notifier

logger = get_logger(__name__)

T = TypeVar("T")


class SnapshotFetchError(Exception):
    """Raised when a snapshot provider cannot retrieve data."""


class SnapshotFormatError(SnapshotFetchError):
    """Raised when snapshot data is present but cannot be read."""


class SnapshotProvider(Protocol):
    def get_all_log_sheets(self) -> List[LogSheet]: ...

    def get_my_tracks(self) -> List[Track]: ...

    def get_my_log_sheets(self) -> List[LogSheet]: ...


def fetch_or_empty(
    fetch: Callable[[], List[T]],
    what: str,
    notifier: Optional[Notifier] = None,
) -> List[T]:
    """
    Run a provider call, substituting an empty list on failure.

    Args:
        fetch: Zero-argument provider call
        what: Human description used in the log and notification
        notifier: Receives a destructive notification on failure

    Returns:
        The fetched records, or [] when the call failed
    """
    try:
        result = fetch()
    except Exception as exc:
        logger.warning(f"Failed to load {what}: {exc}")
        if notifier is not None:
            notifier(Notification(title="Error", description=f"Failed to load {what}", variant="destructive"))
        return []
    if result is None:
        return []
    return list(result)


def load_catalog_stats(provider: Any, notifier: Optional[Notifier] = None) -> CatalogStats:
    """Fetch the caller's upload counters, defaulting every counter to 0 on failure."""
    get_stats = getattr(provider, "get_stats", None)
    if get_stats is None:
        return CatalogStats()
    try:
        stats = get_stats()
    except Exception as exc:
        logger.warning(f"Failed to load catalog stats: {exc}")
        if notifier is not None:
            notifier(Notification(title="Error", description="Failed to load catalog stats", variant="destructive"))
        return CatalogStats()
    return stats if isinstance(stats, CatalogStats) else CatalogStats()


class StaticSnapshotProvider:
    """In-memory provider over already-parsed records."""

    def __init__(
        self,
        log_sheets: Optional[List[LogSheet]] = None,
        my_tracks: Optional[List[Track]] = None,
        my_log_sheets: Optional[List[LogSheet]] = None,
        stats: Optional[CatalogStats] = None,
    ):
        self.log_sheets = list(log_sheets or [])
        self.my_tracks = list(my_tracks or [])
        self.my_log_sheets = list(my_log_sheets) if my_log_sheets is not None else list(self.log_sheets)
        self.stats = stats or CatalogStats()

    def get_all_log_sheets(self) -> List[LogSheet]:
        return list(self.log_sheets)

    def get_my_tracks(self) -> List[Track]:
        return list(self.my_tracks)

    def get_my_log_sheets(self) -> List[LogSheet]:
        return list(self.my_log_sheets)

    def get_stats(self) -> CatalogStats:
        return self.stats


class JsonSnapshotProvider:
    """
    Provider backed by a JSON snapshot document.

    The document is an object with optional "logSheets", "myTracks",
    "myLogSheets" and "stats" keys. "myLogSheets" falls back to
    "logSheets". The file is re-read on every call so a refresh sees
    the current contents.
    """

    def __init__(self, path: Path):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load_document(self) -> Dict[str, Any]:
        try:
            text = self._path.read_text(encoding="utf-8")
        except OSError as exc:
            raise SnapshotFetchError(f"Cannot read snapshot {self._path}: {exc}") from exc
        try:
            document = json.loads(text)
        except json.JSONDecodeError as exc:
            raise SnapshotFormatError(f"Snapshot {self._path} is not valid JSON: {exc}") from exc
        if not isinstance(document, dict):
            raise SnapshotFormatError(f"Snapshot {self._path} must contain a JSON object")
        return document

    def get_all_log_sheets(self) -> List[LogSheet]:
        return parse_log_sheets(self.load_document().get("logSheets"))

    def get_my_tracks(self) -> List[Track]:
        return parse_tracks(self.load_document().get("myTracks"))

    def get_my_log_sheets(self) -> List[LogSheet]:
        document = self.load_document()
        raw = document.get("myLogSheets")
        if raw is None:
            raw = document.get("logSheets")
        return parse_log_sheets(raw)

    def get_stats(self) -> CatalogStats:
        raw = self.load_document().get("stats")
        return CatalogStats.from_dict(raw) if isinstance(raw, dict) else CatalogStats()
