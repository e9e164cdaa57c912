"""Internal utilities for Caldate.

This module contains private implementation details:
    - Calendar arithmetic (leap years, month lengths, ordinals)
    - Validation helpers and the @validate_range decorator
    - Constants and magic numbers

Note: This module is not part of the public API.
"""

from __future__ import annotations

from caldate._internal.validation import (
    require_int,
    validate_day,
    validate_month,
    validate_ordinal,
    validate_range,
    validate_year,
)

__all__: list[str] = [
    "require_int",
    "validate_day",
    "validate_month",
    "validate_ordinal",
    "validate_range",
    "validate_year",
]
