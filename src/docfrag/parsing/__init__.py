"""
The parsing package recognizes fragment markers in source text and turns the
lines between them into normalized fragment content.
"""

from . import markers, normalizer, scanner
from .markers import EndMarker, LineKind, Ordinary, StartMarker, classify
from .normalizer import normalize
from .scanner import FragmentScanner, split_lines

__all__ = [
    "EndMarker",
    "FragmentScanner",
    "LineKind",
    "Ordinary",
    "StartMarker",
    "classify",
    "markers",
    "normalize",
    "normalizer",
    "scanner",
    "split_lines",
]
