"""Flexible calendar date parsing.

This module parses date strings written in any of several common
grammars by detecting the format and extracting components.

Public API:
    parse_date: Parse a date string with automatic format detection.
    ParseResult: Parsed Date and the name of the format that matched.
    ParseOptions: Configuration for day/month order in numeric forms.
    DateOrder: Enum for day/month ordering (MDY, DMY).

Accepted formats:
    - "2024-01-15" (ISO 8601, canonical)
    - "20240115" (ISO 8601 basic)
    - "2024-01-15T14:30:00Z" (ISO 8601 date-time; the time is discarded)
    - "2024/1/15", "2024.01.15" (year first)
    - "Jan 15, 2024", "January 15 2024" (named month first)
    - "15 Jan 2024", "15 January, 2024" (day first, named month)
    - "01/15/2024", "15.01.2024", "1-15-2024" (numeric, day/month order
      resolved as described in parse_date)

Two-digit years are never accepted.

Examples:
    >>> from caldate.infer import parse_date
    >>> parse_date("Jan 15, 2024").value
    Date(2024, 1, 15)

    >>> from caldate.infer import ParseOptions, DateOrder
    >>> parse_date("01/02/2024", ParseOptions(date_order=DateOrder.DMY)).value
    Date(2024, 2, 1)
"""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger

from caldate.core.date import Date
from caldate.errors import InvalidFormatError, NullInputError, OutOfRangeError
from caldate.infer._formats import DateOrder, Readings
from caldate.infer._patterns import detect_format

log = getLogger(__name__)


@dataclass(frozen=True)
class ParseOptions:
    """Configuration for flexible date parsing.

    Attributes:
        date_order: Order used for numeric day/month-first forms such as
            "01/02/2024". None accepts such forms only when every valid
            reading names the same date.

    Examples:
        >>> opts = ParseOptions(date_order=DateOrder.DMY)
        >>> # Now "01/02/2024" is interpreted as February 1, 2024
    """

    date_order: DateOrder | None = None


@dataclass(frozen=True)
class ParseResult:
    """Result of flexible parsing.

    Attributes:
        value: The parsed Date.
        format_detected: Name of the format template that matched.

    Examples:
        >>> parse_date("2024-01-15").format_detected
        'iso_date'
    """

    value: Date
    format_detected: str


def parse_date(text: str, options: ParseOptions | None = None) -> ParseResult:
    """Parse a calendar date string with automatic format detection.

    Numeric day/month-first forms are resolved as follows:
        - With ``options.date_order`` set, that order is used.
        - Otherwise the text is accepted only if the MDY and DMY readings
          that form valid dates agree ("13/01/2024", "05/05/2024"), and
          rejected as ambiguous if they differ ("01/02/2024").

    Args:
        text: The string to parse. Surrounding whitespace is ignored.
        options: Parsing configuration. Defaults to ParseOptions().

    Returns:
        ParseResult with the parsed Date and the detected format name.

    Raises:
        NullInputError: If text is None.
        TypeError: If text is not a str.
        InvalidFormatError: If no format matches, the text is ambiguous,
            or the components name a date that does not exist.

    Examples:
        >>> parse_date("20240115").value
        Date(2024, 1, 15)

        >>> parse_date("13/01/2024").value
        Date(2024, 1, 13)

        >>> parse_date("01/02/2024")
        Traceback (most recent call last):
        ...
        InvalidFormatError: ambiguous date '01/02/2024': could be 2024-01-02 or 2024-02-01
    """
    if text is None:
        raise NullInputError("date string must not be None")
    if not isinstance(text, str):
        raise TypeError(f"expected str, got {type(text).__name__}")

    if options is None:
        options = ParseOptions()

    stripped = text.strip()
    if not stripped:
        raise InvalidFormatError("empty date string")

    match = detect_format(stripped)
    if match is None:
        raise InvalidFormatError(
            f"cannot determine date format for: {stripped!r}. "
            "Expected YYYY-MM-DD or another recognized calendar date format."
        )

    if match.is_ordered:
        components = match.readings[None]
    elif options.date_order is not None:
        components = match.readings[options.date_order]
    else:
        components = _resolve_unordered(stripped, match.readings)

    value = _build_date(stripped, components)
    log.debug("parsed %r as %s using %s", text, value, match.template.name)
    return ParseResult(value=value, format_detected=match.template.name)


def _build_date(text: str, components: tuple[int, int, int]) -> Date:
    try:
        return Date(*components)
    except OutOfRangeError as exc:
        raise InvalidFormatError(f"invalid date {text!r}: {exc}") from exc


def _resolve_unordered(text: str, readings: Readings) -> tuple[int, int, int]:
    """Pick the single valid reading of a numeric date, or fail."""
    valid: list[Date] = []
    for components in readings.values():
        try:
            candidate = Date(*components)
        except OutOfRangeError:
            continue
        if candidate not in valid:
            valid.append(candidate)

    if not valid:
        # Report what is wrong with the month-first reading
        return readings[DateOrder.MDY]

    if len(valid) > 1:
        log.debug("rejecting ambiguous date %r", text)
        raise InvalidFormatError(
            f"ambiguous date {text!r}: could be "
            + " or ".join(str(d) for d in sorted(valid))
        )

    chosen = valid[0]
    return (chosen.year, chosen.month, chosen.day)


__all__ = [
    "DateOrder",
    "ParseOptions",
    "ParseResult",
    "parse_date",
]
