"""
Date/time helpers for alert messages.

Timestamps are rendered in an explicit fixed-offset time zone handed to the
caller; the process-wide local time zone is never consulted or changed.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

MESSAGE_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


def fixed_offset(hours: int) -> timezone:
    """Return a fixed-offset time zone *hours* east of UTC.

    Raises:
        ValueError: if the offset is outside the ±23 hour range.
    """
    return timezone(timedelta(hours=hours))


UTC8 = fixed_offset(8)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def format_in_zone(moment: datetime, tz: timezone) -> str:
    """Format *moment* in *tz* with second precision.

    Naive datetimes are assumed to be UTC.

    Returns:
        ``YYYY-MM-DD HH:MM:SS`` for the wall-clock time in *tz*.
    """
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(tz).strftime(MESSAGE_TIME_FORMAT)
