from docfrag.batch import SourceFile, scan_many
from docfrag.errors import ErrorKind

GOOD_JS = SourceFile(path="js/a.js", content="// DocSection: a\nconst a = 1;\n// EndDocSection")
GOOD_PY = SourceFile(path="python/b.py", content="# DocSection: b\nb = 2\n# EndDocSection")
BROKEN = SourceFile(path="js/broken.js", content="// DocSection: open\nnever closed")
README = SourceFile(path="README.md", content="// DocSection: ignored")


def test_scan_many_isolates_failing_files(caplog) -> None:
    batch = scan_many([GOOD_JS, BROKEN, GOOD_PY])

    assert [f.file_path for f in batch.code_files] == ["js/a.js", "python/b.py"]
    assert len(batch.failures) == 1
    assert batch.failures[0].kind is ErrorKind.MALFORMED_MARKERS
    assert not batch.succeeded
    assert "js/broken.js" in caplog.text


def test_scan_many_flattens_fragments_in_file_order() -> None:
    batch = scan_many([GOOD_PY, README, GOOD_JS])
    assert batch.succeeded
    assert [f.identifier for f in batch.fragments] == ["b", "a"]


def test_scan_many_reports_invalid_paths() -> None:
    batch = scan_many([SourceFile(path="", content="x"), GOOD_JS])
    assert [e.kind for e in batch.failures] == [ErrorKind.INVALID_INPUT]
    assert len(batch.code_files) == 1


def test_scan_many_with_thread_pool_keeps_input_order() -> None:
    sources = [
        SourceFile(path=f"js/f{i}.js", content=f"// DocSection: s{i}\nx{i}\n// EndDocSection")
        for i in range(20)
    ]
    sequential = scan_many(sources)
    parallel = scan_many(sources, max_workers=4)

    assert parallel == sequential
    assert [f.identifier for f in parallel.fragments] == [f"s{i}" for i in range(20)]


def test_identifiers_may_repeat_across_files() -> None:
    other = SourceFile(path="js/other.js", content=GOOD_JS.content)
    batch = scan_many([GOOD_JS, other])
    assert batch.succeeded
    assert [f.identifier for f in batch.fragments] == ["a", "a"]
