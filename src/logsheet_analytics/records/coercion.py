"""Normalization of loosely-typed identifier and timestamp values."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Optional, Union

TrackId = Union[int, str]


def coerce_id(value: Any) -> Optional[TrackId]:
    """
    Normalize an identifier as delivered by the API.

    Ints are kept, digit-only strings become ints and other non-empty strings
    are kept stripped. Falsy values (None, "", 0, False) and anything else
    count as missing.

    Args:
        value: Raw identifier value

    Returns:
        Normalized identifier, or None when missing
    """
    if isinstance(value, bool) or not value:
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if value.is_integer() else None
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        if text.isascii() and text.isdigit():
            return int(text) or None
        return text
    return None


def parse_timestamp(value: Any) -> Optional[datetime]:
    """
    Parse a creation timestamp.

    Accepts datetime objects, ISO-8601 strings (a trailing "Z" is allowed)
    and epoch milliseconds. The calendar fields of the value are kept as
    given; no timezone conversion is applied.

    Returns:
        Parsed datetime, or None when the value cannot be interpreted
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, datetime):
        return value
    if isinstance(value, (int, float)):
        try:
            return datetime.fromtimestamp(value / 1000.0, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            return datetime.fromisoformat(text)
        except ValueError:
            return None
    return None


def optional_text(value: Any) -> Optional[str]:
    """Return a non-blank string value, or None."""
    if isinstance(value, str) and value.strip():
        return value
    return None
