"""Validation utilities for Caldate.

This module provides validation decorators and utilities for
ensuring calendar values are within the supported ranges.

This module is not part of the public API.
"""

from __future__ import annotations

import functools
import inspect
from typing import Callable, ParamSpec, TypeVar

from caldate._internal.constants import MAX_ORDINAL, MAX_YEAR, MIN_ORDINAL, MIN_YEAR
from caldate.errors import OutOfRangeError

P = ParamSpec("P")
T = TypeVar("T")


def validate_range(
    **limits: tuple[int, int],
) -> Callable[[Callable[P, T]], Callable[P, T]]:
    """Decorator to validate that parameters are within specified ranges.

    This decorator validates named parameters against specified (min, max)
    ranges, raising OutOfRangeError if any value is out of range.

    Args:
        **limits: Mapping of parameter names to (min, max) tuples.
                  Both min and max are inclusive.

    Returns:
        A decorator function.

    Examples:
        >>> @validate_range(months=(-120000, 120000))
        ... def shift(months: int) -> None:
        ...     pass

        >>> shift(200000)  # Raises OutOfRangeError
        Traceback (most recent call last):
        ...
        OutOfRangeError: months must be between -120000 and 120000, got 200000
    """

    def decorator(func: Callable[P, T]) -> Callable[P, T]:
        sig = inspect.signature(func)

        @functools.wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            bound = sig.bind_partial(*args, **kwargs)

            for param_name, (min_val, max_val) in limits.items():
                value = bound.arguments.get(param_name)
                if value is not None and (value < min_val or value > max_val):
                    raise OutOfRangeError(
                        f"{param_name} must be between {min_val} and {max_val}, "
                        f"got {value}"
                    )

            return func(*args, **kwargs)

        return wrapper

    return decorator


def require_int(name: str, value: object) -> None:
    """Reject non-integer calendar components.

    bool is rejected even though it subclasses int.

    Raises:
        TypeError: If value is not an int.
    """
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be an int, got {type(value).__name__}")


def validate_year(year: int) -> None:
    """Validate that a year is within the supported range.

    Args:
        year: The year to validate.

    Raises:
        OutOfRangeError: If year is outside MIN_YEAR to MAX_YEAR.
    """
    if year < MIN_YEAR or year > MAX_YEAR:
        raise OutOfRangeError(
            f"year must be between {MIN_YEAR} and {MAX_YEAR}, got {year}"
        )


def validate_month(month: int) -> None:
    """Validate that a month is within 1-12.

    Raises:
        OutOfRangeError: If month is outside 1-12.
    """
    if month < 1 or month > 12:
        raise OutOfRangeError(f"month must be between 1 and 12, got {month}")


def validate_day(year: int, month: int, day: int) -> None:
    """Validate that a day is valid for the given year and month.

    Args:
        year: The year.
        month: The month (1-12).
        day: The day to validate.

    Raises:
        OutOfRangeError: If day is invalid for the month.
    """
    from caldate._internal.calendar import days_in_month

    max_day = days_in_month(year, month)
    if day < 1 or day > max_day:
        raise OutOfRangeError(
            f"day must be between 1 and {max_day} for {year:04d}-{month:02d}, got {day}"
        )


def validate_ordinal(ordinal: int) -> None:
    """Validate that an ordinal falls between 0001-01-01 and 9999-12-31.

    Raises:
        OutOfRangeError: If the ordinal is outside the supported span.
    """
    if ordinal < MIN_ORDINAL or ordinal > MAX_ORDINAL:
        raise OutOfRangeError(
            f"date out of range: ordinal must be between {MIN_ORDINAL} and "
            f"{MAX_ORDINAL}, got {ordinal}"
        )


__all__ = [
    "validate_range",
    "require_int",
    "validate_year",
    "validate_month",
    "validate_day",
    "validate_ordinal",
]
