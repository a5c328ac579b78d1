import os

from docfrag.parsing.normalizer import normalize


def test_empty_input_gives_empty_content() -> None:
    assert normalize([]) == ""
    assert normalize(["", "   ", "\t"]) == ""


def test_boundary_blank_lines_are_removed() -> None:
    assert normalize(["", "", "int i = 1;", "", ""]) == "int i = 1;"


def test_outer_whitespace_of_first_and_last_lines_is_removed() -> None:
    assert normalize(["   first", "  middle  ", "last   "]) == os.linesep.join(
        ["first", "  middle  ", "last"]
    )


def test_interior_blank_lines_and_indentation_are_kept() -> None:
    lines = ["def f():", "", "    return 1", "\t", "f()"]
    assert normalize(lines) == os.linesep.join(lines)


def test_control_characters_survive() -> None:
    lines = [";0123456789", "", "\t\a\b\f\v\\|%$&:+-;~`!#^_{}[], //"]
    assert normalize(lines) == os.linesep.join(lines)
