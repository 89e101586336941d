"""Utility modules for the User service."""

from .datetime_utils import utc_now, ensure_utc, now, now_iso, to_iso

__all__ = [
    "utc_now",
    "ensure_utc",
    "now",
    "now_iso",
    "to_iso",
]
