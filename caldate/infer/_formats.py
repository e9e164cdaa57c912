"""Known format templates for calendar date inference.

Each template specifies:
- A regex pattern for matching
- An extractor turning a regex match into one or more readings

A reading is a (year, month, day) triple. Templates with a fixed
component order produce a single reading keyed by None; numeric
day/month-first forms produce one reading per DateOrder.

Extractors raise ValueError when a match is syntactically valid but
cannot be a date (unknown month name, time of day out of range).

Internal module - use parse_date() from caldate.infer instead.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Optional, Pattern, Tuple


class DateOrder(Enum):
    """Order of day and month in numeric forms such as "01/02/2024".

    Values:
        MDY: Month-Day-Year (US convention, January 2nd)
        DMY: Day-Month-Year (European convention, February 1st)
    """

    MDY = "MDY"
    DMY = "DMY"


YMD = Tuple[int, int, int]
Readings = Dict[Optional[DateOrder], YMD]


@dataclass(frozen=True)
class FormatTemplate:
    """A format template for matching date strings.

    Attributes:
        name: Human-readable name for the format.
        pattern: Compiled regex pattern for matching.
        extractor: Function to extract readings from a regex match.
    """

    name: str
    pattern: Pattern[str]
    extractor: Callable[[re.Match[str]], Readings]


# Month name mappings
MONTH_NAMES = {
    "january": 1,
    "february": 2,
    "march": 3,
    "april": 4,
    "may": 5,
    "june": 6,
    "july": 7,
    "august": 8,
    "september": 9,
    "october": 10,
    "november": 11,
    "december": 12,
    "jan": 1,
    "feb": 2,
    "mar": 3,
    "apr": 4,
    "jun": 6,
    "jul": 7,
    "aug": 8,
    "sep": 9,
    "sept": 9,
    "oct": 10,
    "nov": 11,
    "dec": 12,
}


def _month_to_int(month_str: str) -> int:
    """Convert month name to integer (1-12)."""
    month = MONTH_NAMES.get(month_str.lower())
    if month is None:
        raise ValueError(f"unknown month name: {month_str!r}")
    return month


# ISO 8601 extended date: YYYY-MM-DD
_ISO_DATE_PATTERN = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$", re.ASCII)

# ISO 8601 basic date: YYYYMMDD
_ISO_BASIC_DATE_PATTERN = re.compile(r"^(\d{4})(\d{2})(\d{2})$", re.ASCII)


def _extract_ymd_groups(match: re.Match[str]) -> Readings:
    """Extract from patterns whose first three groups are year, month, day."""
    return {None: (int(match.group(1)), int(match.group(2)), int(match.group(3)))}


# ISO 8601 date-time; the time and offset are checked, then dropped
_ISO_DATETIME_PATTERN = re.compile(
    r"^(\d{4})-(\d{2})-(\d{2})[Tt ](\d{2}):(\d{2})(?::(\d{2})(?:[.,](\d{1,9}))?)?"
    r"([Zz]|[+-](\d{2}):?(\d{2}))?$",
    re.ASCII,
)


def _extract_iso_datetime(match: re.Match[str]) -> Readings:
    """Extract the date from an ISO date-time, validating the time part."""
    hour = int(match.group(4))
    minute = int(match.group(5))
    second = int(match.group(6) or 0)
    if hour > 23 or minute > 59 or second > 59:
        raise ValueError(f"invalid time of day in {match.group(0)!r}")

    if match.group(9) is not None:
        if int(match.group(9)) > 23 or int(match.group(10)) > 59:
            raise ValueError(f"invalid UTC offset in {match.group(0)!r}")

    return _extract_ymd_groups(match)


# Year-first with slash, dot or dash: YYYY/M/D, YYYY.M.D, YYYY-M-D
_YEAR_FIRST_PATTERN = re.compile(r"^(\d{4})([/.-])(\d{1,2})\2(\d{1,2})$", re.ASCII)


def _extract_year_first(match: re.Match[str]) -> Readings:
    """Extract from a separated year-first date."""
    return {None: (int(match.group(1)), int(match.group(3)), int(match.group(4)))}


# Named month: Jan 15, 2024 or January 15 2024
_NAMED_MONTH_MDY_PATTERN = re.compile(
    r"^([A-Za-z]{3,9})\.?\s+(\d{1,2})(?:,\s*|\s+)(\d{4})$",
    re.ASCII,
)


def _extract_named_month_mdy(match: re.Match[str]) -> Readings:
    """Extract from named month format (Month Day, Year)."""
    return {None: (int(match.group(3)), _month_to_int(match.group(1)), int(match.group(2)))}


# Named month: 15 Jan 2024 or 15 January, 2024
_NAMED_MONTH_DMY_PATTERN = re.compile(
    r"^(\d{1,2})\s+([A-Za-z]{3,9})\.?,?\s+(\d{4})$",
    re.ASCII,
)


def _extract_named_month_dmy(match: re.Match[str]) -> Readings:
    """Extract from named month format (Day Month Year)."""
    return {None: (int(match.group(3)), _month_to_int(match.group(2)), int(match.group(1)))}


# Numeric day/month-first: 01/02/2024, 1-2-2024, 01.02.2024
_NUMERIC_DATE_PATTERN = re.compile(r"^(\d{1,2})([/.-])(\d{1,2})\2(\d{4})$", re.ASCII)


def _extract_numeric_date(match: re.Match[str]) -> Readings:
    """Extract both readings of a day/month-first date."""
    first, second, year = int(match.group(1)), int(match.group(3)), int(match.group(4))
    return {
        DateOrder.MDY: (year, first, second),
        DateOrder.DMY: (year, second, first),
    }


# Templates list - ordered by specificity (most specific first)
DATE_TEMPLATES = [
    FormatTemplate(
        name="iso_date",
        pattern=_ISO_DATE_PATTERN,
        extractor=_extract_ymd_groups,
    ),
    FormatTemplate(
        name="iso_basic_date",
        pattern=_ISO_BASIC_DATE_PATTERN,
        extractor=_extract_ymd_groups,
    ),
    FormatTemplate(
        name="iso_datetime",
        pattern=_ISO_DATETIME_PATTERN,
        extractor=_extract_iso_datetime,
    ),
    FormatTemplate(
        name="year_first_date",
        pattern=_YEAR_FIRST_PATTERN,
        extractor=_extract_year_first,
    ),
    FormatTemplate(
        name="named_month_mdy",
        pattern=_NAMED_MONTH_MDY_PATTERN,
        extractor=_extract_named_month_mdy,
    ),
    FormatTemplate(
        name="named_month_dmy",
        pattern=_NAMED_MONTH_DMY_PATTERN,
        extractor=_extract_named_month_dmy,
    ),
    FormatTemplate(
        name="numeric_date",
        pattern=_NUMERIC_DATE_PATTERN,
        extractor=_extract_numeric_date,
    ),
]


__all__ = [
    "DateOrder",
    "FormatTemplate",
    "Readings",
    "DATE_TEMPLATES",
    "MONTH_NAMES",
]
