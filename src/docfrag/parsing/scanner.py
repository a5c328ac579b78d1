"""
Single-pass state machine that partitions a file's text into code fragments.

The scanner is either outside any fragment or inside exactly one. Lines are
classified by ``markers.classify`` and drive the transitions:

- outside, start marker: open a fragment unless its identifier was already used
- outside, end marker: unmatched end, fail
- inside, ordinary line: accumulate the line untouched
- inside, start marker: nested or intersecting fragment, fail
- inside, end marker: normalize the accumulated lines and emit the fragment

Reaching the end of input inside a fragment fails. Any failure discards the
whole file; no partial list of fragments is ever returned.
"""

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Final

from returns.result import Failure, Result, Success

from ..errors import MalformedMarkersError
from ..languages import LanguageSpec
from ..models import CodeFragment
from .markers import EndMarker, StartMarker, classify
from .normalizer import normalize

logger = logging.getLogger(__name__)

_LINE_BREAK: Final[re.Pattern[str]] = re.compile(r"\r\n|\r|\n")


@dataclass
class _OpenFragment:
    identifier: str
    start_line: int
    lines: list[str] = field(default_factory=list)


def split_lines(content: str) -> list[str]:
    """Split text on CRLF, CR or LF only; other control characters stay in the line."""
    return _LINE_BREAK.split(content) if content else []


class FragmentScanner:
    """Extracts the fragments of one file written in one language."""

    def __init__(self, file_path: str, language: LanguageSpec) -> None:
        self.file_path = file_path
        self.language = language

    def _fail(
        self, message: str, *, identifier: str | None = None, line_number: int | None = None
    ) -> Result[tuple[CodeFragment, ...], MalformedMarkersError]:
        logger.debug("Rejecting %s: %s", self.file_path, message)
        return Failure(
            MalformedMarkersError(
                message,
                file_path=self.file_path,
                identifier=identifier,
                line_number=line_number,
            )
        )

    def scan(
        self, lines: Iterable[str]
    ) -> Result[tuple[CodeFragment, ...], MalformedMarkersError]:
        """
        Run the state machine over ``lines``.

        Args:
            lines: The file's lines in order, without line terminators.

        Returns:
            Success with the fragments in start-marker order, or Failure with
            a ``MalformedMarkersError`` naming the offending line.
        """
        prefix = self.language.prefix.value
        fragments: list[CodeFragment] = []
        used: set[str] = set()
        current: _OpenFragment | None = None

        for line_number, line in enumerate(lines, start=1):
            kind = classify(line, prefix)

            if current is None:
                match kind:
                    case StartMarker(identifier) if identifier in used:
                        return self._fail(
                            f"Duplicate fragment identifier '{identifier}'",
                            identifier=identifier,
                            line_number=line_number,
                        )
                    case StartMarker(identifier):
                        current = _OpenFragment(identifier=identifier, start_line=line_number)
                    case EndMarker():
                        return self._fail(
                            "End marker without a matching start marker",
                            line_number=line_number,
                        )
                continue

            match kind:
                case StartMarker(identifier):
                    return self._fail(
                        f"Fragment '{identifier}' starts inside fragment "
                        f"'{current.identifier}' opened on line {current.start_line}",
                        identifier=identifier,
                        line_number=line_number,
                    )
                case EndMarker():
                    fragments.append(
                        CodeFragment(
                            identifier=current.identifier,
                            language=self.language.tag,
                            content=normalize(current.lines),
                        )
                    )
                    used.add(current.identifier)
                    current = None
                case _:
                    current.lines.append(line)

        if current is not None:
            return self._fail(
                f"Fragment '{current.identifier}' is not properly closed",
                identifier=current.identifier,
                line_number=current.start_line,
            )

        logger.debug("Extracted %d fragment(s) from %s", len(fragments), self.file_path)
        return Success(tuple(fragments))


__all__ = ["FragmentScanner", "split_lines"]
