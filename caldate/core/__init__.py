"""Core calendar types.

This module provides:
    - Date: Calendar date in the proleptic Gregorian calendar
    - Clock: Protocol for injectable sources of the current date
"""

from __future__ import annotations

from caldate.core.date import Clock, Date

__all__: list[str] = [
    "Clock",
    "Date",
]
