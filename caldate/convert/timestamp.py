"""Timestamp conversion utilities for calendar dates.

This module provides function-style access to converting between Date
and full timestamps. Truncation discards the time of day and any
timezone; expansion yields midnight of the date.

Functions:
    from_timestamp: Truncate a timestamp to its Date.
    to_timestamp: Expand a Date to a naive datetime at midnight.
    to_pydate: Convert a Date to datetime.date.

Examples:
    >>> import datetime
    >>> from caldate.convert import from_timestamp, to_timestamp

    >>> from_timestamp(datetime.datetime(2024, 1, 15, 18, 45, 3))
    Date(2024, 1, 15)

    >>> to_timestamp(from_timestamp(datetime.date(2024, 1, 15)))
    datetime.datetime(2024, 1, 15, 0, 0)
"""

from __future__ import annotations

import datetime

from caldate.core.date import Date, Timestamp


def from_timestamp(instant: Timestamp) -> Date:
    """Create a Date from the calendar date of a timestamp.

    Aware datetimes keep their wall-clock date; no conversion to UTC or
    local time takes place.

    Args:
        instant: A datetime.datetime, datetime.date, or any object with
            year, month and day attributes.

    Returns:
        The truncated Date.

    Raises:
        NullInputError: If instant is None.
        TypeError: If instant has no year/month/day.
        OutOfRangeError: If the date is outside the supported span.
    """
    return Date.from_timestamp(instant)


def to_timestamp(value: Date) -> datetime.datetime:
    """Return a naive datetime at midnight of the given Date."""
    return value.to_timestamp()


def to_pydate(value: Date) -> datetime.date:
    """Return the datetime.date equal to the given Date."""
    return value.to_pydate()


__all__ = [
    "from_timestamp",
    "to_timestamp",
    "to_pydate",
]
