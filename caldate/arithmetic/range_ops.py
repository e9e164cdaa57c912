"""Range membership and period overlap helpers.

This module provides generic functions over any ordered type:
    - in_closed_range: Membership in [low, high]
    - in_half_open_range: Membership in [low, high)
    - periods_overlap: Whether two half-open periods share any point

Periods are half-open, [start, end), so adjacent periods such as a
booking ending on the 10th and the next starting on the 10th do not
overlap.
"""

from __future__ import annotations

from typing import Generic, NamedTuple, Tuple, TypeVar

from caldate.arithmetic.comparisons import SupportsLessThan
from caldate.errors import InvalidArgumentsError

T = TypeVar("T", bound=SupportsLessThan)


class Period(NamedTuple, Generic[T]):
    """A half-open span [start, end).

    Any two-item (start, end) tuple is accepted wherever a Period is.

    Examples:
        >>> from caldate import Date
        >>> p = Period(Date(2024, 1, 1), Date(2024, 1, 10))
        >>> p.start
        Date(2024, 1, 1)
    """

    start: T
    end: T


def in_closed_range(value: T, low: T, high: T) -> bool:
    """Return True if low <= value <= high.

    Raises:
        InvalidArgumentsError: If low is greater than high.

    Examples:
        >>> in_closed_range(10, 1, 10)
        True
        >>> in_closed_range(11, 1, 10)
        False
    """
    if high < low:
        raise InvalidArgumentsError(f"low must not be greater than high, got {low} > {high}")
    return not (value < low) and not (high < value)


def in_half_open_range(value: T, low: T, high: T) -> bool:
    """Return True if low <= value < high.

    Raises:
        InvalidArgumentsError: If low is not less than high.

    Examples:
        >>> in_half_open_range(1, 1, 10)
        True
        >>> in_half_open_range(10, 1, 10)
        False
    """
    if not (low < high):
        raise InvalidArgumentsError(
            f"low must be less than high, got low={low}, high={high}"
        )
    return not (value < low) and value < high


def periods_overlap(period: Tuple[T, T], other: Tuple[T, T]) -> bool:
    """Return True if two half-open periods share at least one point.

    Each period is a (start, end) pair denoting [start, end). Periods
    that only touch (one ends where the other starts) do not overlap.

    Args:
        period: The first (start, end) pair.
        other: The second (start, end) pair.

    Raises:
        InvalidArgumentsError: If either period does not have start < end.

    Examples:
        >>> from caldate import Date
        >>> jan_1_10 = (Date(2024, 1, 1), Date(2024, 1, 10))
        >>> periods_overlap(jan_1_10, (Date(2024, 1, 10), Date(2024, 1, 20)))
        False
        >>> periods_overlap(jan_1_10, (Date(2024, 1, 9), Date(2024, 1, 20)))
        True
    """
    start, end = period
    other_start, other_end = other

    if not (start < end):
        raise InvalidArgumentsError(
            f"period start must be before its end, got [{start}, {end})"
        )
    if not (other_start < other_end):
        raise InvalidArgumentsError(
            f"other start must be before its end, got [{other_start}, {other_end})"
        )

    return other_start < end and start < other_end


__all__ = [
    "Period",
    "in_closed_range",
    "in_half_open_range",
    "periods_overlap",
]
