from docfrag import parse_content
from docfrag.events import CodeFragmentEvent, FunctionMode


def test_event_flattens_fragments_of_all_files() -> None:
    files = [
        parse_content("js/a.js", "// DocSection: a\n1\n// EndDocSection"),
        parse_content("README.md", "nothing"),
        parse_content(
            "python/b.py",
            "# DocSection: b\n2\n# EndDocSection\n# DocSection: c\n3\n# EndDocSection",
        ),
    ]

    event = CodeFragmentEvent.from_code_files(FunctionMode.INITIALIZE, files)

    assert event.mode is FunctionMode.INITIALIZE
    assert [f.identifier for f in event.code_fragments] == ["a", "b", "c"]


def test_event_serializes_with_camel_case_keys() -> None:
    files = [parse_content("js/a.js", "// DocSection: a\n1\n// EndDocSection")]

    payload = CodeFragmentEvent.from_code_files(FunctionMode.UPDATE, files).model_dump(
        mode="json", by_alias=True
    )

    assert payload == {
        "codeFragments": [{"identifier": "a", "language": "javascript", "content": "1"}],
        "mode": "update",
    }


def test_empty_run_gives_empty_event() -> None:
    event = CodeFragmentEvent.from_code_files(FunctionMode.UPDATE, [])
    assert event.code_fragments == ()
