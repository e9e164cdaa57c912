"""Generic comparison and range operations.

The functions in this module work on Date and on any other type with a
consistent ``<`` operator.

Comparison Operations (from caldate.arithmetic.comparisons):
    - compare: Return -1, 0, or 1 for comparison
    - earlier_of, later_of: Pick one of two values
    - clamp: Constrain value to a closed range

Range Operations (from caldate.arithmetic.range_ops):
    - in_closed_range: Membership in [low, high]
    - in_half_open_range: Membership in [low, high)
    - periods_overlap: Overlap test for half-open periods
    - Period: (start, end) named tuple
"""

from __future__ import annotations

from caldate.arithmetic.comparisons import (
    clamp,
    compare,
    earlier_of,
    later_of,
)
from caldate.arithmetic.range_ops import (
    Period,
    in_closed_range,
    in_half_open_range,
    periods_overlap,
)

__all__ = [
    # Comparison operations
    "compare",
    "earlier_of",
    "later_of",
    "clamp",
    # Range operations
    "Period",
    "in_closed_range",
    "in_half_open_range",
    "periods_overlap",
]
