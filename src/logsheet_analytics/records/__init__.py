"""Typed records for log sheets, selections and catalog tracks."""

from .coercion import TrackId, coerce_id, parse_timestamp
from .model import (
    CatalogStats,
    CompanyRef,
    LogSheet,
    SelectionEntry,
    Track,
    UserRef,
    UNKNOWN_ARTIST,
    UNKNOWN_COMPANY,
    parse_log_sheets,
    parse_tracks,
)

__all__ = [
    "TrackId",
    "coerce_id",
    "parse_timestamp",
    "CatalogStats",
    "CompanyRef",
    "LogSheet",
    "SelectionEntry",
    "Track",
    "UserRef",
    "UNKNOWN_ARTIST",
    "UNKNOWN_COMPANY",
    "parse_log_sheets",
    "parse_tracks",
]
