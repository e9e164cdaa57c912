"""Date class representing a calendar date.

This module provides the Date class for representing calendar dates
in the proleptic Gregorian calendar between 0001-01-01 and 9999-12-31.
"""

from __future__ import annotations

import datetime
import re
from typing import TYPE_CHECKING, ClassVar, Protocol, Union

from caldate._internal.calendar import (
    days_before_month,
    days_in_month as _days_in_month,
    is_leap_year as _is_leap_year,
    ordinal_to_weekday,
    ordinal_to_ymd,
    ymd_to_ordinal,
)
from caldate._internal.constants import MAX_MONTH_OFFSET, MAX_YEAR, MIN_YEAR
from caldate._internal.validation import (
    require_int,
    validate_day,
    validate_month,
    validate_ordinal,
    validate_range,
    validate_year,
)
from caldate.errors import InvalidFormatError, NullInputError, OutOfRangeError
from caldate.units.weekday import Weekday

if TYPE_CHECKING:
    from caldate.infer import ParseOptions

_ISO_DATE_PATTERN = re.compile(r"(\d{4})-(\d{2})-(\d{2})", re.ASCII)


class Clock(Protocol):
    """Source of the current calendar date."""

    def __call__(self) -> datetime.date: ...


Timestamp = Union[datetime.date, datetime.datetime]


class Date:
    """A calendar date in the proleptic Gregorian calendar.

    Date represents a specific calendar day with year, month, and day
    components. The Gregorian rules are extended to dates before the
    calendar's adoption in 1582. Supported dates run from
    ``Date.MIN`` (0001-01-01) to ``Date.MAX`` (9999-12-31).

    A Date is immutable. Arithmetic returns new values, and there are no
    per-component setters: ``replace`` revalidates the whole triple so an
    invalid intermediate date (February 31) can never exist.

    Internal representation is a single ordinal day number
    (ordinal 1 = 0001-01-01).

    Attributes:
        year: The year (1-9999).
        month: The month (1-12).
        day: The day of the month (1-31).

    Examples:
        >>> d = Date(2024, 1, 15)
        >>> d.year, d.month, d.day
        (2024, 1, 15)

        >>> Date(2024, 2, 29)  # Valid leap year date
        Date(2024, 2, 29)

        >>> str(Date(2024, 1, 31).add_months(1))
        '2024-02-29'
    """

    __slots__ = ("_ordinal",)

    MIN: ClassVar[Date]
    MAX: ClassVar[Date]

    def __init__(self, year: int, month: int, day: int) -> None:
        """Create a Date from year, month, and day.

        Args:
            year: The year (1-9999).
            month: The month (1-12).
            day: The day of the month.

        Raises:
            OutOfRangeError: If any component is out of range.
            TypeError: If any component is not an int.

        Examples:
            >>> Date(2024, 1, 15)
            Date(2024, 1, 15)

            >>> Date(2023, 2, 29)  # Invalid: 2023 is not a leap year
            Traceback (most recent call last):
            ...
            OutOfRangeError: day must be between 1 and 28 for 2023-02, got 29
        """
        require_int("year", year)
        require_int("month", month)
        require_int("day", day)
        validate_year(year)
        validate_month(month)
        validate_day(year, month, day)

        object.__setattr__(self, "_ordinal", ymd_to_ordinal(year, month, day))

    @classmethod
    def _from_valid_ordinal(cls, ordinal: int) -> Date:
        """Build a Date from an ordinal already known to be in range."""
        obj = object.__new__(cls)
        object.__setattr__(obj, "_ordinal", ordinal)
        return obj

    @classmethod
    def today(cls, clock: Clock | None = None) -> Date:
        """Return the current date from the host clock.

        The clock is read on every call; the result is never cached.

        Args:
            clock: Optional zero-argument callable returning a
                ``datetime.date`` or ``datetime.datetime``. Defaults to
                the local system date.

        Returns:
            A Date representing the current day.
        """
        now = clock() if clock is not None else datetime.date.today()
        return cls.from_timestamp(now)

    @classmethod
    def current_year(cls, clock: Clock | None = None) -> int:
        """Return the year of ``Date.today(clock)``."""
        return cls.today(clock).year

    @classmethod
    def from_ordinal(cls, ordinal: int) -> Date:
        """Create a Date from an ordinal day number.

        Args:
            ordinal: The ordinal day number (1 = 0001-01-01).

        Raises:
            OutOfRangeError: If the ordinal is outside the supported span.

        Examples:
            >>> Date.from_ordinal(1)
            Date(1, 1, 1)
            >>> Date.from_ordinal(738900)
            Date(2024, 1, 15)
        """
        require_int("ordinal", ordinal)
        validate_ordinal(ordinal)
        return cls._from_valid_ordinal(ordinal)

    @classmethod
    def from_timestamp(cls, instant: Timestamp) -> Date:
        """Create a Date by truncating a timestamp to its calendar date.

        Any object with integer ``year``, ``month`` and ``day`` attributes
        is accepted; time-of-day fields and ``tzinfo`` are discarded
        without converting between timezones.

        Args:
            instant: A ``datetime.datetime``, ``datetime.date`` or
                compatible object.

        Raises:
            NullInputError: If instant is None.
            TypeError: If instant has no year/month/day components.
            OutOfRangeError: If the components are out of range.

        Examples:
            >>> import datetime
            >>> Date.from_timestamp(datetime.datetime(2024, 1, 15, 23, 59))
            Date(2024, 1, 15)
        """
        if instant is None:
            raise NullInputError("timestamp must not be None")
        try:
            year, month, day = instant.year, instant.month, instant.day
        except AttributeError:
            raise TypeError(
                f"expected a timestamp with year, month and day, got {type(instant).__name__}"
            ) from None
        return cls(year, month, day)

    @classmethod
    def from_iso_format(cls, s: str) -> Date:
        """Parse a date from the strict ISO 8601 format YYYY-MM-DD.

        Args:
            s: The ISO 8601 date string.

        Raises:
            NullInputError: If s is None.
            InvalidFormatError: If the string is not YYYY-MM-DD or names
                a date that does not exist.

        Examples:
            >>> Date.from_iso_format("2024-01-15")
            Date(2024, 1, 15)

            >>> Date.from_iso_format("2024-13-01")
            Traceback (most recent call last):
            ...
            InvalidFormatError: invalid date '2024-13-01': month must be between 1 and 12, got 13
        """
        if s is None:
            raise NullInputError("date string must not be None")
        if not isinstance(s, str):
            raise TypeError(f"expected str, got {type(s).__name__}")

        match = _ISO_DATE_PATTERN.fullmatch(s)
        if not match:
            raise InvalidFormatError(
                f"Invalid ISO 8601 date format: {s!r}. Expected YYYY-MM-DD"
            )

        try:
            return cls(int(match.group(1)), int(match.group(2)), int(match.group(3)))
        except OutOfRangeError as exc:
            raise InvalidFormatError(f"invalid date {s!r}: {exc}") from exc

    @classmethod
    def parse(cls, text: str, options: ParseOptions | None = None) -> Date:
        """Parse a date from any of the accepted calendar date grammars.

        ISO 8601 (``2024-01-15``) is the canonical form; see
        ``caldate.infer.parse_date`` for the full list. Numeric forms with
        more than one possible reading are rejected unless ``options``
        fixes the date order.

        Raises:
            NullInputError: If text is None.
            InvalidFormatError: If text is unrecognised, ambiguous, or
                names a date that does not exist.

        Examples:
            >>> Date.parse("2024-01-15")
            Date(2024, 1, 15)
            >>> Date.parse("Jan 15, 2024")
            Date(2024, 1, 15)
        """
        from caldate.infer import parse_date

        return parse_date(text, options).value

    @staticmethod
    def days_in_month(year: int, month: int) -> int:
        """Return the number of days in a month of a supported year.

        Raises:
            OutOfRangeError: If year is outside 1-9999 or month outside 1-12.

        Examples:
            >>> Date.days_in_month(2024, 2)
            29
            >>> Date.days_in_month(2023, 2)
            28
        """
        require_int("year", year)
        require_int("month", month)
        validate_year(year)
        validate_month(month)
        return _days_in_month(year, month)

    @staticmethod
    def is_leap_year(year: int) -> bool:
        """Return True if year is a Gregorian leap year.

        Raises:
            OutOfRangeError: If year is outside 1-9999.

        Examples:
            >>> Date.is_leap_year(2000), Date.is_leap_year(1900)
            (True, False)
        """
        require_int("year", year)
        validate_year(year)
        return _is_leap_year(year)

    @staticmethod
    def compare(a: Date, b: Date) -> int:
        """Return -1, 0 or 1 as a is earlier than, equal to or later than b."""
        return a.compare_to(b)

    @property
    def year(self) -> int:
        """Return the year component (1-9999)."""
        year, _, _ = ordinal_to_ymd(self._ordinal)
        return year

    @property
    def month(self) -> int:
        """Return the month component (1-12)."""
        _, month, _ = ordinal_to_ymd(self._ordinal)
        return month

    @property
    def day(self) -> int:
        """Return the day of the month (1-31)."""
        _, _, day = ordinal_to_ymd(self._ordinal)
        return day

    @property
    def day_of_week(self) -> Weekday:
        """Return the day of the week.

        Examples:
            >>> Date(2024, 1, 15).day_of_week
            <Weekday.MONDAY: 0>
            >>> Date(2024, 1, 21).day_of_week
            <Weekday.SUNDAY: 6>
        """
        return Weekday(ordinal_to_weekday(self._ordinal))

    @property
    def day_of_year(self) -> int:
        """Return the day of the year (1-366).

        Examples:
            >>> Date(2024, 12, 31).day_of_year  # Leap year
            366
            >>> Date(2023, 12, 31).day_of_year
            365
        """
        year, month, day = ordinal_to_ymd(self._ordinal)
        return days_before_month(year, month) + day

    @property
    def in_leap_year(self) -> bool:
        """Return True if this date falls in a leap year."""
        return _is_leap_year(self.year)

    def replace(
        self,
        year: int | None = None,
        month: int | None = None,
        day: int | None = None,
    ) -> Date:
        """Return a new Date with specified components replaced.

        The resulting triple is validated as a whole.

        Raises:
            OutOfRangeError: If the resulting date is invalid.

        Examples:
            >>> Date(2024, 1, 31).replace(month=3)
            Date(2024, 3, 31)

            >>> Date(2024, 1, 31).replace(month=2, day=29)
            Date(2024, 2, 29)
        """
        y, m, d = ordinal_to_ymd(self._ordinal)
        return Date(
            year if year is not None else y,
            month if month is not None else m,
            day if day is not None else d,
        )

    def add_days(self, days: int) -> Date:
        """Return a new Date offset by the given number of days.

        Args:
            days: Number of days to add (can be negative).

        Raises:
            OutOfRangeError: If the result is outside MIN..MAX.

        Examples:
            >>> Date(2024, 1, 15).add_days(-20)
            Date(2023, 12, 26)
        """
        require_int("days", days)
        ordinal = self._ordinal + days
        validate_ordinal(ordinal)
        return Date._from_valid_ordinal(ordinal)

    @validate_range(months=(-MAX_MONTH_OFFSET, MAX_MONTH_OFFSET))
    def add_months(self, months: int) -> Date:
        """Return a new Date offset by the given number of months.

        If the day does not exist in the target month, it is clamped to
        the last valid day of that month.

        Args:
            months: Number of months to add, between -120000 and 120000.

        Raises:
            OutOfRangeError: If months or the result is out of range.

        Examples:
            >>> Date(2024, 1, 31).add_months(1)  # Clamps to Feb 29
            Date(2024, 2, 29)

            >>> Date(2023, 1, 31).add_months(1)  # Clamps to Feb 28
            Date(2023, 2, 28)
        """
        require_int("months", months)
        year, month, day = ordinal_to_ymd(self._ordinal)

        new_year, month_index = divmod(year * 12 + (month - 1) + months, 12)
        new_month = month_index + 1
        self._check_result_year(new_year, months, "months")

        new_day = min(day, _days_in_month(new_year, new_month))
        return Date(new_year, new_month, new_day)

    def add_years(self, years: int) -> Date:
        """Return a new Date offset by the given number of years.

        February 29 moved to a non-leap year is clamped to February 28.

        Raises:
            OutOfRangeError: If the result is outside MIN..MAX.

        Examples:
            >>> Date(2024, 2, 29).add_years(1)
            Date(2025, 2, 28)
        """
        require_int("years", years)
        year, month, day = ordinal_to_ymd(self._ordinal)

        new_year = year + years
        self._check_result_year(new_year, years, "years")

        new_day = min(day, _days_in_month(new_year, month))
        return Date(new_year, month, new_day)

    def _check_result_year(self, new_year: int, amount: int, unit: str) -> None:
        if new_year < MIN_YEAR or new_year > MAX_YEAR:
            raise OutOfRangeError(
                f"date out of range: {self} {'+' if amount >= 0 else '-'} "
                f"{abs(amount)} {unit} falls in year {new_year}"
            )

    def next_day(self) -> Date:
        """Return the following day.

        Raises:
            OutOfRangeError: If this is Date.MAX.
        """
        return self.add_days(1)

    def previous_day(self) -> Date:
        """Return the preceding day.

        Raises:
            OutOfRangeError: If this is Date.MIN.
        """
        return self.add_days(-1)

    def compare_to(self, other: Date | None) -> int:
        """Return -1, 0 or 1 comparing this date to other.

        None orders before every date.

        Raises:
            TypeError: If other is neither a Date nor None.
        """
        if other is None:
            return 1
        if not isinstance(other, Date):
            raise TypeError(f"cannot compare Date with {type(other).__name__}")
        return (self._ordinal > other._ordinal) - (self._ordinal < other._ordinal)

    def to_ordinal(self) -> int:
        """Return the ordinal day number (1 = 0001-01-01).

        Examples:
            >>> Date(2024, 1, 15).to_ordinal()
            738900
        """
        return self._ordinal

    def to_iso_format(self) -> str:
        """Return the date as an ISO 8601 string (YYYY-MM-DD).

        Examples:
            >>> Date(1, 2, 3).to_iso_format()
            '0001-02-03'
        """
        year, month, day = ordinal_to_ymd(self._ordinal)
        return f"{year:04d}-{month:02d}-{day:02d}"

    def to_timestamp(self) -> datetime.datetime:
        """Return a naive ``datetime.datetime`` at midnight of this date."""
        year, month, day = ordinal_to_ymd(self._ordinal)
        return datetime.datetime(year, month, day)

    def to_pydate(self) -> datetime.date:
        """Return the equivalent ``datetime.date``."""
        return datetime.date.fromordinal(self._ordinal)

    def __add__(self, other: object) -> Date:
        """Add a whole number of days.

        Examples:
            >>> Date(2024, 1, 25) + 10
            Date(2024, 2, 4)
        """
        if not isinstance(other, int) or isinstance(other, bool):
            return NotImplemented
        return self.add_days(other)

    __radd__ = __add__

    def __sub__(self, other: object) -> Date | int:
        """Subtract a number of days or another Date.

        Subtracting an int returns a Date; subtracting a Date returns
        the signed number of days between them.

        Examples:
            >>> Date(2024, 1, 25) - 10
            Date(2024, 1, 15)

            >>> Date(2024, 3, 1) - Date(2024, 2, 1)
            29
        """
        if isinstance(other, Date):
            return self._ordinal - other._ordinal
        if not isinstance(other, int) or isinstance(other, bool):
            return NotImplemented
        return self.add_days(-other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._ordinal == other._ordinal

    def __ne__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._ordinal != other._ordinal

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._ordinal < other._ordinal

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._ordinal <= other._ordinal

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._ordinal > other._ordinal

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._ordinal >= other._ordinal

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"Date is immutable, cannot set {name!r}")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"Date is immutable, cannot delete {name!r}")

    def __reduce__(self) -> tuple[type[Date], tuple[int, int, int]]:
        return (Date, ordinal_to_ymd(self._ordinal))

    def __hash__(self) -> int:
        return hash(("Date", self._ordinal))

    def __repr__(self) -> str:
        """Return a string like 'Date(2024, 1, 15)'."""
        year, month, day = ordinal_to_ymd(self._ordinal)
        return f"Date({year}, {month}, {day})"

    def __str__(self) -> str:
        """Return the ISO 8601 representation."""
        return self.to_iso_format()


Date.MIN = Date(MIN_YEAR, 1, 1)
Date.MAX = Date(MAX_YEAR, 12, 31)


__all__ = ["Clock", "Date"]
