"""
Static registry mapping source-file extensions to languages and comment prefixes.

Resolution is a pure table lookup on the path suffix. The registry is a closed
set: supporting a new language means adding a ``LanguageTag`` member and its
rows in ``_COMMENT_PREFIXES`` and ``_EXTENSIONS``.
"""

import enum
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import PurePosixPath
from types import MappingProxyType
from typing import Final


class LanguageTag(str, enum.Enum):
    """Enumeration of the source languages fragments can be extracted from."""

    CSHARP = "c#"
    JAVASCRIPT = "javascript"
    TYPESCRIPT = "typescript"
    JAVA_RX = "javarx"
    PHP = "php"
    PYTHON = "python"
    RUBY = "ruby"
    SWIFT = "swift"
    SHELL = "shell"


class CommentPrefix(str, enum.Enum):
    """Literal token that begins a single-line comment."""

    DOUBLE_SLASH = "//"
    HASH = "#"


@dataclass(frozen=True)
class LanguageSpec:
    """
    A resolved language together with its comment syntax.

    Attributes:
        tag: The language the file belongs to.
        prefix: The comment prefix marker lines start with.
    """

    tag: LanguageTag
    prefix: CommentPrefix


_COMMENT_PREFIXES: Final[Mapping[LanguageTag, CommentPrefix]] = MappingProxyType(
    {
        LanguageTag.CSHARP: CommentPrefix.DOUBLE_SLASH,
        LanguageTag.JAVASCRIPT: CommentPrefix.DOUBLE_SLASH,
        LanguageTag.TYPESCRIPT: CommentPrefix.DOUBLE_SLASH,
        LanguageTag.JAVA_RX: CommentPrefix.DOUBLE_SLASH,
        LanguageTag.PHP: CommentPrefix.DOUBLE_SLASH,
        LanguageTag.SWIFT: CommentPrefix.DOUBLE_SLASH,
        LanguageTag.PYTHON: CommentPrefix.HASH,
        LanguageTag.RUBY: CommentPrefix.HASH,
        LanguageTag.SHELL: CommentPrefix.HASH,
    }
)

_EXTENSIONS: Final[Mapping[str, LanguageTag]] = MappingProxyType(
    {
        ".cs": LanguageTag.CSHARP,
        ".js": LanguageTag.JAVASCRIPT,
        ".jsx": LanguageTag.JAVASCRIPT,
        ".mjs": LanguageTag.JAVASCRIPT,
        ".ts": LanguageTag.TYPESCRIPT,
        ".tsx": LanguageTag.TYPESCRIPT,
        ".java": LanguageTag.JAVA_RX,
        ".php": LanguageTag.PHP,
        ".swift": LanguageTag.SWIFT,
        ".py": LanguageTag.PYTHON,
        ".rb": LanguageTag.RUBY,
        ".sh": LanguageTag.SHELL,
    }
)


def comment_prefix(tag: LanguageTag) -> CommentPrefix:
    """Return the comment prefix used by ``tag``."""
    return _COMMENT_PREFIXES[tag]


def resolve(file_path: str) -> LanguageSpec | None:
    """
    Resolve the language of a file from its extension.

    Args:
        file_path: Path of the file, in any form; only the suffix is inspected.

    Returns:
        The language and its comment prefix, or None when the extension is
        absent or not registered.
    """
    suffix = PurePosixPath(file_path.replace("\\", "/")).suffix.lower()
    tag = _EXTENSIONS.get(suffix)
    if tag is None:
        return None
    return LanguageSpec(tag=tag, prefix=_COMMENT_PREFIXES[tag])


def supported_extensions() -> tuple[str, ...]:
    """All registered extensions, sorted, each with its leading dot."""
    return tuple(sorted(_EXTENSIONS))


def extensions_for(tag: LanguageTag) -> tuple[str, ...]:
    """Registered extensions that resolve to ``tag``."""
    return tuple(sorted(ext for ext, t in _EXTENSIONS.items() if t is tag))


__all__ = [
    "CommentPrefix",
    "LanguageSpec",
    "LanguageTag",
    "comment_prefix",
    "extensions_for",
    "resolve",
    "supported_extensions",
]
