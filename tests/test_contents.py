from marvin_engine.buffer import Selection
from marvin_engine.text import leading_indentation, select_line_contents


def test_trims_surrounding_spaces() -> None:
    selection = Selection.caret(0, 0)

    select_line_contents(selection, "   hi   ", "   hi   ")

    assert selection.as_cursors() == ((0, 3), (0, 5))


def test_blank_line_collapses_at_line_end() -> None:
    selection = Selection.caret(0, 1)

    select_line_contents(selection, "    ", "    ")

    assert selection.as_cursors() == ((0, 4), (0, 4))


def test_empty_line() -> None:
    selection = Selection.caret(0, 0)

    select_line_contents(selection, "", "")

    assert selection.as_cursors() == ((0, 0), (0, 0))


def test_tabs_and_line_breaks_count_as_space() -> None:
    selection = Selection.caret(0, 0)

    select_line_contents(selection, "\thello world \n", "\thello world \n")

    assert selection.as_cursors() == ((0, 1), (0, 12))


def test_repeated_selection_is_stable() -> None:
    line = "  value = 1  "
    selection = Selection.caret(0, 0)

    select_line_contents(selection, line, line)
    first = selection.as_cursors()
    select_line_contents(selection, line, line)

    assert selection.as_cursors() == first == ((0, 2), (0, 11))


def test_leading_indentation() -> None:
    assert leading_indentation("    foo") == "    "
    assert leading_indentation("\t\tbar") == "\t\t"
    assert leading_indentation("  \n") == "  "
    assert leading_indentation("baz") == ""
