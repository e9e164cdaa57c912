"""ISO 8601 calendar date formatting and parsing.

This module provides functions for converting Date objects to and from
the ISO 8601 extended calendar date representation, YYYY-MM-DD. It is
the canonical text form of a Date: ``str(date)`` produces it and
``parse_iso8601`` reads it back.

Functions:
    parse_iso8601: Parse a strict YYYY-MM-DD string into a Date.
    format_iso8601: Format a Date as YYYY-MM-DD.

Examples:
    >>> from caldate import Date
    >>> from caldate.format import parse_iso8601, format_iso8601

    >>> parse_iso8601("2024-01-15")
    Date(2024, 1, 15)

    >>> format_iso8601(Date(2024, 1, 15))
    '2024-01-15'
"""

from __future__ import annotations

from caldate.core.date import Date
from caldate.errors import InvalidFormatError


def parse_iso8601(s: str) -> Date:
    """Parse a strict ISO 8601 calendar date.

    Surrounding whitespace is ignored; nothing else is. Use
    ``Date.parse`` for lenient parsing of other grammars.

    Raises:
        NullInputError: If s is None.
        InvalidFormatError: If the string is not YYYY-MM-DD or names a
            date that does not exist.

    Examples:
        >>> parse_iso8601(" 0001-01-01 ")
        Date(1, 1, 1)
    """
    if isinstance(s, str):
        s = s.strip()
        if not s:
            raise InvalidFormatError("empty string")
    return Date.from_iso_format(s)


def format_iso8601(value: Date) -> str:
    """Format a Date as an ISO 8601 string.

    Raises:
        TypeError: If value is not a Date.

    Examples:
        >>> format_iso8601(Date(987, 6, 5))
        '0987-06-05'
    """
    if not isinstance(value, Date):
        raise TypeError(f"expected Date, got {type(value).__name__}")
    return value.to_iso_format()


__all__ = ["parse_iso8601", "format_iso8601"]
