"""Comparison helpers for ordered values.

These functions work on Date and on any other type with a consistent
``<`` operator (ints, strings, datetime objects). Only ``<`` is used,
so a type needs nothing more than ``__lt__`` for a total order.

Supported Operations:
    - compare: Return -1, 0, or 1
    - earlier_of: The earlier (smaller) of two values
    - later_of: The later (larger) of two values
    - clamp: Constrain a value to a closed range
"""

from __future__ import annotations

from typing import Any, Protocol, TypeVar

from caldate.errors import InvalidArgumentsError


class SupportsLessThan(Protocol):
    def __lt__(self, other: Any, /) -> bool: ...


T = TypeVar("T", bound=SupportsLessThan)


def compare(left: T, right: T) -> int:
    """Return -1, 0 or 1 as left is less than, equal to or greater than right.

    Examples:
        >>> from caldate import Date
        >>> compare(Date(2024, 1, 15), Date(2024, 1, 16))
        -1
        >>> compare(3, 3)
        0
    """
    if left < right:
        return -1
    if right < left:
        return 1
    return 0


def earlier_of(a: T, b: T) -> T:
    """Return the earlier of two values.

    Returns b only when b is strictly less than a, so ties return a.

    Examples:
        >>> from caldate import Date
        >>> earlier_of(Date(2024, 3, 1), Date(2024, 2, 1))
        Date(2024, 2, 1)
    """
    return b if b < a else a


def later_of(a: T, b: T) -> T:
    """Return the later of two values.

    Returns b only when b is strictly greater than a, so ties return a.
    """
    return b if a < b else a


def clamp(value: T, low: T, high: T) -> T:
    """Clamp a value to the closed range [low, high].

    Raises:
        InvalidArgumentsError: If low is greater than high.

    Examples:
        >>> from caldate import Date
        >>> clamp(Date(2024, 1, 5), Date(2024, 1, 10), Date(2024, 1, 20))
        Date(2024, 1, 10)
    """
    if high < low:
        raise InvalidArgumentsError(f"low must not be greater than high, got {low} > {high}")

    if value < low:
        return low
    if high < value:
        return high
    return value


__all__ = [
    "SupportsLessThan",
    "compare",
    "earlier_of",
    "later_of",
    "clamp",
]
