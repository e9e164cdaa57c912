"""Internal constants for Caldate.

These constants define the limits and lookup tables used throughout
the library. This module is not part of the public API.
"""

from __future__ import annotations

# Supported year span
MIN_YEAR: int = 1
MAX_YEAR: int = 9999

# Days in each month (non-leap year)
DAYS_IN_MONTH: tuple[int, ...] = (
    0,   # Placeholder for 1-indexed access
    31,  # January
    28,  # February (non-leap)
    31,  # March
    30,  # April
    31,  # May
    30,  # June
    31,  # July
    31,  # August
    30,  # September
    31,  # October
    30,  # November
    31,  # December
)

# Cumulative days before each month in a non-leap year
DAYS_BEFORE_MONTH: tuple[int, ...] = (0, 0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)

# Cycle lengths of the Gregorian calendar
DAYS_PER_400_YEARS: int = 146_097
DAYS_PER_100_YEARS: int = 36_524
DAYS_PER_4_YEARS: int = 1_461

# Ordinal day numbers (ordinal 1 = 0001-01-01)
MIN_ORDINAL: int = 1
MAX_ORDINAL: int = 3_652_059  # 9999-12-31

# Largest month offset accepted by month arithmetic
MAX_MONTH_OFFSET: int = 120_000


__all__ = [
    "MIN_YEAR",
    "MAX_YEAR",
    "DAYS_IN_MONTH",
    "DAYS_BEFORE_MONTH",
    "DAYS_PER_400_YEARS",
    "DAYS_PER_100_YEARS",
    "DAYS_PER_4_YEARS",
    "MIN_ORDINAL",
    "MAX_ORDINAL",
    "MAX_MONTH_OFFSET",
]
