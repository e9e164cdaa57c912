"""Format pattern detection for date inference.

This module examines input strings and identifies which format
template matches.

Internal module - use parse_date() from caldate.infer instead.
"""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger

from caldate.infer._formats import DATE_TEMPLATES, FormatTemplate, Readings

log = getLogger(__name__)


@dataclass(frozen=True)
class PatternMatch:
    """Result of a successful pattern match.

    Attributes:
        template: The format template that matched.
        readings: Candidate (year, month, day) triples by date order.
    """

    template: FormatTemplate
    readings: Readings

    @property
    def is_ordered(self) -> bool:
        """Return True if the match has a single, order-independent reading."""
        return None in self.readings


def detect_format(text: str) -> PatternMatch | None:
    """Find the first format template matching the given text.

    Templates are tried from most to least specific. A template whose
    regex matches but whose extractor rejects the values is skipped.

    Args:
        text: The stripped string to analyze.

    Returns:
        The PatternMatch, or None if no template accepts the text.
    """
    for template in DATE_TEMPLATES:
        match = template.pattern.match(text)
        if match is None:
            continue
        try:
            readings = template.extractor(match)
        except ValueError as exc:
            log.debug("format %s rejected %r: %s", template.name, text, exc)
            continue
        return PatternMatch(template=template, readings=readings)

    return None


__all__ = [
    "PatternMatch",
    "detect_format",
]
