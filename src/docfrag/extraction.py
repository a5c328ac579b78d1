"""
Entry points for extracting the code fragments of a single file.
"""

import logging

from returns.result import Failure, Result, Success

from .errors import FragmentError, InvalidInputError, raise_for_failure
from .languages import resolve
from .models import CodeFile
from .parsing import FragmentScanner, split_lines

logger = logging.getLogger(__name__)


def scan(file_path: str | None, content: str) -> Result[CodeFile, FragmentError]:
    """
    Extract every marked fragment from one file.

    The language is resolved from the path's extension. Files in an
    unrecognized language produce an empty ``CodeFile`` rather than an error.

    Args:
        file_path: Path of the file; must be non-empty.
        content: The complete text of the file.

    Returns:
        Success with the ``CodeFile``, or Failure with an ``InvalidInputError``
        for a missing path or a ``MalformedMarkersError`` for broken markers.
    """
    if not file_path:
        return Failure(
            InvalidInputError("File path must be a non-empty string", file_path=file_path)
        )

    language = resolve(file_path)
    if language is None:
        logger.debug("No registered language for %s, skipping", file_path)
        return Success(CodeFile(file_path=file_path))

    return (
        FragmentScanner(file_path, language)
        .scan(split_lines(content))
        .map(lambda fragments: CodeFile(file_path=file_path, code_fragments=fragments))
    )


def parse_content(file_path: str | None, content: str) -> CodeFile:
    """
    Exception-raising form of :func:`scan`.

    Raises:
        InvalidInputError: If ``file_path`` is missing or empty.
        MalformedMarkersError: If the markers in ``content`` are not well formed.
    """
    return raise_for_failure(scan(file_path, content))


__all__ = ["parse_content", "scan"]
