"""
Classification of single lines into fragment markers.

A marker is a comment line of the form ``<prefix> DocSection: <identifier>``
(start) or ``<prefix> EndDocSection`` (end). Leading and trailing whitespace on
the line is insignificant, so markers may be indented arbitrarily.
"""

import re
from dataclasses import dataclass
from functools import cache

from ..app import config


@dataclass(frozen=True)
class LineKind:
    """Classification of a single line (base class)."""

    pass


@dataclass(frozen=True)
class StartMarker(LineKind):
    """
    Opens a fragment.

    Attributes:
        identifier: The trimmed, case-sensitive fragment name.
    """

    identifier: str


@dataclass(frozen=True)
class EndMarker(LineKind):
    """Closes the currently open fragment."""

    pass


@dataclass(frozen=True)
class Ordinary(LineKind):
    """Any line that is not a marker."""

    pass


END_MARKER = EndMarker()
ORDINARY = Ordinary()


@dataclass(frozen=True)
class _MarkerPatterns:
    start: re.Pattern[str]
    end: re.Pattern[str]


@cache
def _patterns_for(prefix: str) -> _MarkerPatterns:
    escaped = re.escape(prefix)
    return _MarkerPatterns(
        start=re.compile(
            rf"{escaped}\s*{re.escape(config.START_MARKER_TOKEN)}\s*(?P<identifier>.+)",
            re.DOTALL,
        ),
        end=re.compile(rf"{escaped}\s*{re.escape(config.END_MARKER_TOKEN)}"),
    )


def classify(line: str, prefix: str) -> LineKind:
    """
    Classify a line as a start marker, an end marker or an ordinary line.

    Args:
        line: A single line of source text, without its line terminator.
        prefix: The comment prefix of the file's language (e.g. ``//``).

    Returns:
        ``StartMarker`` carrying the identifier, ``END_MARKER`` or ``ORDINARY``.
    """
    stripped = line.strip()
    if not stripped.startswith(prefix):
        return ORDINARY

    patterns = _patterns_for(prefix)
    if start := patterns.start.fullmatch(stripped):
        return StartMarker(identifier=start["identifier"].strip())
    if patterns.end.fullmatch(stripped):
        return END_MARKER
    return ORDINARY


__all__ = [
    "END_MARKER",
    "ORDINARY",
    "EndMarker",
    "LineKind",
    "Ordinary",
    "StartMarker",
    "classify",
]
