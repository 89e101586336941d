"""
Centralized DateTime Utilities
==============================

Provides consistent datetime handling across the User service.

Functions:
- utc_now(): Timezone-aware UTC datetime, used for every persisted timestamp
- ensure_utc(): Normalize naive/aware datetimes into UTC
- now(): Timezone-aware datetime in the configured LOCAL_TIMEZONE
- now_iso(): ISO 8601 string for now() (used by the status endpoint)
- to_iso(): Convert a datetime object to ISO 8601 string

Entity timestamps (created_at / updated_at) are always UTC; the local
timezone only affects human-facing strings.
"""
import logging
import zoneinfo
from datetime import datetime, timezone as dt_timezone
from typing import Optional

from ..core.config import get_settings

logger = logging.getLogger(__name__)


def _get_app_timezone() -> dt_timezone:
    """
    Get the application timezone from config.
    Returns timezone object (defaults to UTC if invalid).
    """
    settings = get_settings()
    tz_str = settings.local_timezone

    # Handle UTC explicitly
    if tz_str.upper() == "UTC":
        return dt_timezone.utc

    try:
        return zoneinfo.ZoneInfo(tz_str)
    except (zoneinfo.ZoneInfoNotFoundError, ValueError):
        logger.warning(f"Invalid timezone '{tz_str}', falling back to UTC")
        return dt_timezone.utc


def utc_now() -> datetime:
    """
    Get current UTC time as a timezone-aware datetime.

    Use this for all timestamps that will be persisted to MongoDB (BSON Date).
    """
    return datetime.now(dt_timezone.utc)


def ensure_utc(dt: Optional[datetime]) -> Optional[datetime]:
    """
    Normalize a datetime into a timezone-aware UTC datetime.

    - If dt is None -> None
    - If dt is naive -> assume it represents UTC (this matches MongoDB/PyMongo behavior)
    - If dt is aware -> convert to UTC
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=dt_timezone.utc)
    return dt.astimezone(dt_timezone.utc)


def now() -> datetime:
    """
    Get current datetime with application-configured timezone.

    Returns:
        timezone-aware datetime object
    """
    app_tz = _get_app_timezone()
    return datetime.now(app_tz)


def to_iso(dt: Optional[datetime]) -> Optional[str]:
    """
    Convert datetime object to ISO 8601 string.
    If datetime is naive, assumes UTC.

    Args:
        dt: datetime object (timezone-aware or naive)

    Returns:
        ISO 8601 formatted string, or None if dt is None
    """
    if dt is None:
        return None

    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=dt_timezone.utc)

    # Format with timezone offset, or 'Z' if UTC
    if dt.utcoffset() == dt_timezone.utc.utcoffset(None):
        return dt.replace(microsecond=0).isoformat().replace("+00:00", "Z")
    return dt.replace(microsecond=0).isoformat()


def now_iso() -> str:
    """
    Get current datetime as ISO 8601 string with application-configured timezone.

    Returns:
        ISO 8601 formatted string (e.g., "2025-12-24T10:30:00Z")
    """
    return to_iso(now())
