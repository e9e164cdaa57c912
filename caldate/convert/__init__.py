"""Conversion utilities for calendar dates.

Functions:
    from_timestamp: Truncate a timestamp to its Date.
    to_timestamp: Expand a Date to a naive datetime at midnight.
    to_pydate: Convert a Date to datetime.date.
"""

from __future__ import annotations

from caldate.convert.timestamp import from_timestamp, to_pydate, to_timestamp

__all__: list[str] = [
    "from_timestamp",
    "to_timestamp",
    "to_pydate",
]
