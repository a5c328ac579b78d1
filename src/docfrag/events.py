"""Payload handed to the eventing collaborator after a run.

A run either initializes the whole fragment catalogue or updates it from a set
of changed files; the event records which, together with every fragment
extracted in the run. Consumers key fragments by ``identifier``.
"""

import enum
from collections.abc import Iterable

from pydantic import Field

from .models import CodeFile, CodeFragment, ImmutableModel


class FunctionMode(str, enum.Enum):
    """Kind of run that produced a set of fragments."""

    INITIALIZE = "initialize"
    UPDATE = "update"


class CodeFragmentEvent(ImmutableModel):
    code_fragments: tuple[CodeFragment, ...] = Field(default_factory=tuple)
    mode: FunctionMode

    @classmethod
    def from_code_files(
        cls, mode: FunctionMode, code_files: Iterable[CodeFile]
    ) -> "CodeFragmentEvent":
        """Flatten the fragments of ``code_files`` into one event, file by file."""
        return cls(
            mode=mode,
            code_fragments=tuple(
                fragment for code_file in code_files for fragment in code_file.code_fragments
            ),
        )


__all__ = ["CodeFragmentEvent", "FunctionMode"]
