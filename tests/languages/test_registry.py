import pytest

from docfrag.languages import (
    CommentPrefix,
    LanguageTag,
    comment_prefix,
    extensions_for,
    resolve,
    supported_extensions,
)


@pytest.mark.parametrize(
    ("file_path", "tag", "prefix"),
    [
        ("js/file.js", LanguageTag.JAVASCRIPT, CommentPrefix.DOUBLE_SLASH),
        ("js/component.jsx", LanguageTag.JAVASCRIPT, CommentPrefix.DOUBLE_SLASH),
        ("ts/file.ts", LanguageTag.TYPESCRIPT, CommentPrefix.DOUBLE_SLASH),
        ("php/file.php", LanguageTag.PHP, CommentPrefix.DOUBLE_SLASH),
        ("javarx/unpublishing.java", LanguageTag.JAVA_RX, CommentPrefix.DOUBLE_SLASH),
        ("net/Program.cs", LanguageTag.CSHARP, CommentPrefix.DOUBLE_SLASH),
        ("python/file.py", LanguageTag.PYTHON, CommentPrefix.HASH),
        ("ruby/file.rb", LanguageTag.RUBY, CommentPrefix.HASH),
        ("curl/request.sh", LanguageTag.SHELL, CommentPrefix.HASH),
    ],
)
def test_resolve_known_extensions(file_path: str, tag: LanguageTag, prefix: CommentPrefix) -> None:
    spec = resolve(file_path)
    assert spec is not None
    assert spec.tag is tag
    assert spec.prefix is prefix


@pytest.mark.parametrize("file_path", ["README.md", "Makefile", "archive.tar.gz", ".js", "js/"])
def test_resolve_unknown_extension_returns_none(file_path: str) -> None:
    assert resolve(file_path) is None


def test_resolve_is_case_insensitive_and_accepts_windows_separators() -> None:
    spec = resolve("Samples\\JS\\FILE.JS")
    assert spec is not None
    assert spec.tag is LanguageTag.JAVASCRIPT


def test_several_extensions_share_a_tag() -> None:
    assert {".js", ".jsx", ".mjs"} <= set(extensions_for(LanguageTag.JAVASCRIPT))


def test_several_tags_share_a_prefix() -> None:
    assert comment_prefix(LanguageTag.JAVASCRIPT) == comment_prefix(LanguageTag.PHP)
    assert comment_prefix(LanguageTag.PYTHON) == comment_prefix(LanguageTag.RUBY)


def test_every_tag_has_a_prefix_and_an_extension() -> None:
    for tag in LanguageTag:
        assert comment_prefix(tag) in CommentPrefix
        assert extensions_for(tag)


def test_supported_extensions_are_sorted_and_dotted() -> None:
    extensions = supported_extensions()
    assert list(extensions) == sorted(extensions)
    assert all(ext.startswith(".") for ext in extensions)
