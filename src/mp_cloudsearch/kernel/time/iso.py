"""Kernel time – UTC ISO-8601 rendering of date/time values."""
from __future__ import annotations

from datetime import UTC, date, datetime, time
from typing import Any

ISO_UTC_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


def is_temporal(value: Any) -> bool:
    """Return ``True`` for ``date`` and ``datetime`` instances."""
    return isinstance(value, date)


def as_utc(value: date) -> datetime:
    """Return *value* as an aware UTC ``datetime``.

    Naive datetimes are read as UTC; plain dates become midnight UTC.
    """
    if not isinstance(value, datetime):
        return datetime.combine(value, time.min, tzinfo=UTC)
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)


def to_utc_iso(value: Any) -> Any:
    """Render date/time values as ``YYYY-MM-DDTHH:MM:SSZ``; pass anything else through."""
    if not is_temporal(value):
        return value
    return as_utc(value).strftime(ISO_UTC_FORMAT)


__all__ = ["ISO_UTC_FORMAT", "as_utc", "is_temporal", "to_utc_iso"]
