"""Pydantic models for extracted fragments and the files they come from.

The JSON form uses camelCase field names (``filePath``, ``codeFragments``) so a
stored ``CodeFile`` keeps the shape downstream documentation tooling reads.
Both models are frozen; a ``CodeFile`` is only ever built from a fully
successful scan.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from .languages import LanguageTag


class ImmutableModel(BaseModel):
    """Base class for immutable, camelCase-serialized models."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class CodeFragment(ImmutableModel):
    """A named, language-tagged excerpt bounded by a start/end marker pair."""

    identifier: str = Field(..., min_length=1)
    language: LanguageTag
    content: str


class CodeFile(ImmutableModel):
    """All fragments of one file, in the order of their start markers."""

    file_path: str = Field(..., min_length=1)
    code_fragments: tuple[CodeFragment, ...] = Field(default_factory=tuple)

    @property
    def identifiers(self) -> tuple[str, ...]:
        return tuple(fragment.identifier for fragment in self.code_fragments)

    def get(self, identifier: str) -> CodeFragment | None:
        """Return the fragment named ``identifier``, if the file has one."""
        return next((f for f in self.code_fragments if f.identifier == identifier), None)


__all__ = ["CodeFile", "CodeFragment", "ImmutableModel"]
