"""Caldate exception hierarchy.

All Caldate-specific exceptions inherit from CaldateError.
"""

from __future__ import annotations


class CaldateError(Exception):
    """Base exception for all Caldate errors."""

    pass


class OutOfRangeError(CaldateError):
    """A value falls outside the supported calendar span.

    Raised when a date component or an arithmetic operand or result
    cannot be represented.

    Examples:
        - Year outside 1-9999
        - Month value outside 1-12
        - Day value outside valid range for month
        - Adding days past 9999-12-31
    """

    pass


class InvalidFormatError(CaldateError):
    """Failed to parse a string as a calendar date.

    Examples:
        - Text matching none of the accepted grammars
        - Numeric day/month forms with more than one reading
    """

    pass


class NullInputError(CaldateError):
    """A required input was None."""

    pass


class InvalidArgumentsError(CaldateError):
    """Caller-supplied bounds violate a precondition.

    Examples:
        - Range with low greater than high
        - Period whose start is not before its end
    """

    pass


__all__ = [
    "CaldateError",
    "OutOfRangeError",
    "InvalidFormatError",
    "NullInputError",
    "InvalidArgumentsError",
]
