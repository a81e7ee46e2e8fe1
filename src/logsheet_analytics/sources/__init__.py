"""Snapshot retrieval and user notifications."""

from .notifications import LoggingNotifier, Notification, Notifier
from .provider import (
    JsonSnapshotProvider,
    SnapshotFetchError,
    SnapshotFormatError,
    SnapshotProvider,
    StaticSnapshotProvider,
    fetch_or_empty,
    load_catalog_stats,
)

__all__ = [
    "LoggingNotifier",
    "Notification",
    "Notifier",
    "JsonSnapshotProvider",
    "SnapshotFetchError",
    "SnapshotFormatError",
    "SnapshotProvider",
    "StaticSnapshotProvider",
    "fetch_or_empty",
    "load_catalog_stats",
]
