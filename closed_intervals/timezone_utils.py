"""
Timezone utilities for datetime keyed step tables.

Datetime points are stored as timezone-aware UTC datetimes so that the
default ``<=`` order works across sources. Naive datetimes and plain dates
are taken to be in the table's timezone, UTC unless a table sets one.
"""

from datetime import date, datetime
import pytz


# Timezone for naive datetimes and dates - replaced by set_timezone
_local_timezone = pytz.UTC


def set_timezone(timezone_name: str):
    """
    Use ``timezone_name`` for naive datetimes and dates.

    Raises:
        pytz.UnknownTimeZoneError: the name is not in the tz database; the
            current timezone is left unchanged.
    """
    global _local_timezone
    _local_timezone = pytz.timezone(timezone_name)


def get_local_timezone():
    """The pytz timezone naive datetimes are read in."""
    return _local_timezone


def to_utc_datetime(value) -> datetime:
    """
    Convert a date or datetime to an aware UTC datetime.

    Args:
        value: A date (taken as local midnight), a naive datetime (taken as
            local time) or an aware datetime.

    Returns:
        A timezone-aware datetime in UTC.
    """
    if isinstance(value, date) and not isinstance(value, datetime):
        value = datetime.combine(value, datetime.min.time())
    if value.tzinfo is None:
        value = _local_timezone.localize(value)
    return value.astimezone(pytz.UTC)


def to_local_datetime(dt: datetime) -> datetime:
    """Show an aware UTC point in the table's timezone; naive input is returned as is."""
    return dt.astimezone(_local_timezone) if dt.tzinfo is not None else dt
