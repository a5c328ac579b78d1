"""
The languages package maps source files to the language they are written in
and the comment syntax their fragment markers use.
"""

from .registry import (
    CommentPrefix,
    LanguageSpec,
    LanguageTag,
    comment_prefix,
    extensions_for,
    resolve,
    supported_extensions,
)

__all__ = [
    "CommentPrefix",
    "LanguageSpec",
    "LanguageTag",
    "comment_prefix",
    "extensions_for",
    "resolve",
    "supported_extensions",
]
