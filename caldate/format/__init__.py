"""Calendar date formatting and parsing.

Functions:
    parse_iso8601: Parse a strict ISO 8601 date string.
    format_iso8601: Format a Date as an ISO 8601 string.

Lenient multi-format parsing lives in caldate.infer.
"""

from __future__ import annotations

from caldate.format.iso8601 import format_iso8601, parse_iso8601

__all__: list[str] = [
    "parse_iso8601",
    "format_iso8601",
]
