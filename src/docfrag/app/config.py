"""
Configuration for docfrag.
"""

from typing import Final

# --- Marker Tokens ---
START_MARKER_TOKEN: Final[str] = "DocSection:"
END_MARKER_TOKEN: Final[str] = "EndDocSection"

# --- File Reading ---
DEFAULT_SOURCE_ENCODING: Final[str] = "utf-8-sig"
BYTE_ORDER_MARK: Final[str] = "\ufeff"

# --- Batch Scanning ---
DEFAULT_MAX_WORKERS: Final[int] = 1
MAX_WORKERS_LIMIT: Final[int] = 64

# --- Output Configuration ---
JSON_INDENT: Final[int] = 2
CONTENT_PREVIEW_LINES: Final[int] = 3

# --- Environment ---
ENV_PREFIX: Final[str] = "DOCFRAG_"
BEARTYPE_THIS_PACKAGE_ENV: Final[str] = f"{ENV_PREFIX}BEARTYPE_THIS_PACKAGE"
BEARTYPE_ALL_ENV: Final[str] = f"{ENV_PREFIX}BEARTYPE_ALL"

# --- SSoT Enforcement ---
__all__ = [
    "BEARTYPE_ALL_ENV",
    "BEARTYPE_THIS_PACKAGE_ENV",
    "BYTE_ORDER_MARK",
    "CONTENT_PREVIEW_LINES",
    "DEFAULT_MAX_WORKERS",
    "DEFAULT_SOURCE_ENCODING",
    "END_MARKER_TOKEN",
    "ENV_PREFIX",
    "JSON_INDENT",
    "MAX_WORKERS_LIMIT",
    "START_MARKER_TOKEN",
]
