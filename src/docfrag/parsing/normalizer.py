import os
from collections.abc import Sequence


def normalize(lines: Sequence[str]) -> str:
    """
    Join the lines of a closed fragment into its final content.

    Lines are joined with the platform line terminator and the result is
    trimmed as a whole, so only leading and trailing blank lines and the
    outer whitespace of the first and last lines are removed. Everything in
    between is kept verbatim.
    """
    return os.linesep.join(lines).strip()


__all__ = ["normalize"]
