"""Weekday enumeration.

This module provides the Weekday enum returned by Date.day_of_week.
"""

from __future__ import annotations

from enum import IntEnum


class Weekday(IntEnum):
    """Day of the week.

    Values follow Python's ``datetime.date.weekday()`` numbering, so
    Monday is 0 and Sunday is 6.

    Examples:
        >>> Weekday.MONDAY == 0
        True
        >>> Weekday.SATURDAY.is_weekend
        True
    """

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6

    @property
    def is_weekend(self) -> bool:
        """Return True for Saturday and Sunday."""
        return self >= Weekday.SATURDAY

    @property
    def iso_number(self) -> int:
        """Return the ISO 8601 weekday number (Monday=1, Sunday=7)."""
        return self.value + 1


__all__ = ["Weekday"]
