"""Caldate: a calendar date value type with range utilities.

Caldate provides an immutable calendar date restricted to year, month
and day, plus generic helpers for range membership and period overlap.

Core Types:
    Date: Calendar date (year, month, day) from 0001-01-01 to 9999-12-31
    Weekday: Day of the week (Monday=0 through Sunday=6)

Range Functions:
    in_closed_range: Membership in [low, high]
    in_half_open_range: Membership in [low, high)
    periods_overlap: Overlap test for half-open [start, end) periods
    earlier_of: The earlier of two values

Format Functions:
    parse_iso8601: Parse a strict ISO 8601 date string
    format_iso8601: Format a Date as an ISO 8601 string

Exceptions:
    CaldateError: Base exception
    OutOfRangeError: Value outside the supported calendar span
    InvalidFormatError: Unparseable or ambiguous date text
    NullInputError: Required input was None
    InvalidArgumentsError: Bounds violate a precondition

Example:
    >>> from caldate import Date, periods_overlap
    >>> d = Date.parse("2024-01-31")
    >>> d.add_months(1)
    Date(2024, 2, 29)
    >>> Date(2024, 3, 1) - d
    30
"""

from __future__ import annotations

from logging import NullHandler, getLogger

__version__ = "0.1.0"

# Core types
from caldate.core.date import Date
from caldate.units.weekday import Weekday

# Exceptions
from caldate.errors import (
    CaldateError,
    InvalidArgumentsError,
    InvalidFormatError,
    NullInputError,
    OutOfRangeError,
)

# Range and comparison functions
from caldate.arithmetic import (
    Period,
    clamp,
    compare,
    earlier_of,
    in_closed_range,
    in_half_open_range,
    later_of,
    periods_overlap,
)

# Format functions
from caldate.format import format_iso8601, parse_iso8601

getLogger(__name__).addHandler(NullHandler())

__all__: list[str] = [
    "__version__",
    # Core types
    "Date",
    "Weekday",
    # Exceptions
    "CaldateError",
    "OutOfRangeError",
    "InvalidFormatError",
    "NullInputError",
    "InvalidArgumentsError",
    # Range and comparison functions
    "Period",
    "compare",
    "earlier_of",
    "later_of",
    "clamp",
    "in_closed_range",
    "in_half_open_range",
    "periods_overlap",
    # Format functions
    "parse_iso8601",
    "format_iso8601",
]
