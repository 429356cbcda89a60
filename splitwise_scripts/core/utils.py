"""
Core Utilities.

Shared utility functions used across the scripts.
"""

from datetime import datetime, timezone


def utc_now() -> datetime:
    """
    Return current UTC time as timezone-naive datetime.

    All datetime values are timezone-naive and assumed to be UTC.

    Returns:
        Current UTC time with tzinfo stripped
    """
    return datetime.now(timezone.utc).replace(tzinfo=None)


def utc_today_iso() -> str:
    """Return today's UTC date as YYYY-MM-DD."""
    return utc_now().date().isoformat()
