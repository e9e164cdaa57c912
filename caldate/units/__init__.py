"""Calendar units and enumerations.

This module provides:
    - Weekday: Day of the week enum (Monday=0 through Sunday=6)
"""

from __future__ import annotations

from caldate.units.weekday import Weekday

__all__: list[str] = [
    "Weekday",
]
