"""
Centralized DateTime Utilities
==============================

Provides consistent datetime handling across the entire application.
All instants held by the coordinator are timezone-aware UTC datetimes.

Functions:
- utc_now(): Returns the current UTC datetime
- ensure_utc(): Normalize any datetime to aware UTC
- to_iso(): Convert datetime object to ISO 8601 string
- epoch_millis(): Milliseconds since the epoch, used in refresh handles
"""
from datetime import datetime, timezone as dt_timezone
from typing import Optional

def utc_now() -> datetime:
    """
    Get current UTC time as a timezone-aware datetime.
    """
    return datetime.now(dt_timezone.utc)

def ensure_utc(dt: Optional[datetime]) -> Optional[datetime]:
    """
    Normalize a datetime into a timezone-aware UTC datetime.

    - If dt is None -> None
    - If dt is naive -> assume it represents UTC
    - If dt is aware -> convert to UTC
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=dt_timezone.utc)
    return dt.astimezone(dt_timezone.utc)


def to_iso(dt: Optional[datetime]) -> Optional[str]:
    """
    Convert datetime to ISO 8601 string with a 'Z' suffix.

    Returns:
        ISO 8601 formatted string, or None if dt is None
    """
    if dt is None:
        return None
    dt = ensure_utc(dt)
    return dt.isoformat(timespec="milliseconds").replace("+00:00", "Z")

def epoch_millis(dt: Optional[datetime] = None) -> int:
    """Milliseconds since the Unix epoch for dt (default: now)"""
    dt = ensure_utc(dt) if dt is not None else utc_now()
    return int(dt.timestamp() * 1000)
