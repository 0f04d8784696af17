from marvin_engine.buffer import Position, Selection
from marvin_engine.text import (
    collapse_to_preceding_word,
    expand_to_word,
    select_adjacent_word,
    select_previous_word,
)
from marvin_engine.text.words import has_word_after, has_word_before, proportional_column


def make_selection(start: int, end: int | None = None, *, line: int = 0) -> Selection:
    return Selection(
        start=Position(line, start),
        end=Position(line, start if end is None else end),
    )


def columns(selection: Selection) -> tuple[int, int]:
    return (selection.start.column, selection.end.column)


def test_expand_inside_word_selects_whole_word() -> None:
    selection = make_selection(5)

    assert expand_to_word(selection, "foo bar")
    assert columns(selection) == (4, 7)


def test_expand_at_line_start() -> None:
    selection = make_selection(0)

    assert expand_to_word(selection, "foo bar")
    assert columns(selection) == (0, 3)


def test_expand_skips_separators_to_next_word() -> None:
    selection = make_selection(1)

    assert expand_to_word(selection, "x = foo(bar)")
    assert columns(selection) == (4, 7)


def test_expand_from_selected_word_moves_to_next_word() -> None:
    selection = make_selection(0, 3)

    assert expand_to_word(selection, "foo bar")
    assert columns(selection) == (4, 7)


def test_expand_after_punctuation_gap() -> None:
    selection = make_selection(0, 3)

    assert expand_to_word(selection, "foo, bar")
    assert columns(selection) == (5, 8)


def test_expand_near_line_end_is_a_noop() -> None:
    for caret in (6, 7):
        selection = make_selection(caret)

        assert not expand_to_word(selection, "foo bar")
        assert columns(selection) == (caret, caret)


def test_expand_shifts_word_start_past_leading_emoji() -> None:
    selection = make_selection(0)

    assert expand_to_word(selection, "👍foo bar")
    assert columns(selection) == (1, 4)


def test_expand_shift_matches_extender_count_of_sequence() -> None:
    heart = make_selection(0)
    family = make_selection(0)

    assert expand_to_word(heart, "\u2764\ufe0ffoo")
    assert expand_to_word(family, "👨\u200d👩\u200d👧word")

    assert columns(heart) == (2, 5)
    assert columns(family) == (5, 9)


def test_expand_with_caret_after_emoji() -> None:
    selection = make_selection(5)

    assert expand_to_word(selection, "ab 👍 cd")
    assert columns(selection) == (5, 7)


def test_empty_word_after_emoji_stays_collapsed() -> None:
    selection = make_selection(1)

    assert expand_to_word(selection, "\U0001F600(foo)")
    assert columns(selection) == (1, 1)


def test_collapse_lands_on_previous_word_end() -> None:
    selection = make_selection(4)

    assert collapse_to_preceding_word(selection, "foo bar")
    assert columns(selection) == (2, 2)


def test_collapse_at_line_start_is_a_noop() -> None:
    selection = make_selection(0)

    assert not collapse_to_preceding_word(selection, "foo bar")
    assert columns(selection) == (0, 0)


def test_select_previous_word_from_selection() -> None:
    selection = make_selection(4, 7)

    assert select_previous_word(selection, "foo bar")
    assert columns(selection) == (0, 3)


def test_select_previous_word_over_whitespace_run() -> None:
    selection = make_selection(6)

    assert select_previous_word(selection, "foo   bar")
    assert columns(selection) == (0, 3)


def test_select_previous_word_inside_word_selects_it() -> None:
    selection = make_selection(5)

    assert select_previous_word(selection, "foo bar")
    assert columns(selection) == (4, 7)


def test_proportional_column() -> None:
    assert proportional_column(5, 10, 20) == 10
    assert proportional_column(3, 9, 4) == 1
    assert proportional_column(2, 0, 8) is None


def test_adjacent_word_keeps_relative_position() -> None:
    selection = make_selection(5, 7)

    assert select_adjacent_word(selection, "abcde fghi", "alpha beta gamma del", 1)
    assert selection.as_cursors() == ((1, 6), (1, 10))


def test_adjacent_word_with_empty_current_line_leaves_caret() -> None:
    selection = make_selection(0, 0, line=2)

    assert not select_adjacent_word(selection, "", "something", -1)
    assert selection.as_cursors() == ((2, 0), (2, 0))


def test_word_presence_around_column() -> None:
    assert has_word_after("foo bar", 4)
    assert not has_word_after("foo bar", 6)
    assert has_word_before("foo bar", 1)
    assert not has_word_before("  foo", 2)


def test_adjacent_word_ignores_emoji_when_measuring_lines() -> None:
    selection = make_selection(7, 9)

    assert select_adjacent_word(
        selection, "👍👍abcde fghi", "👍👍alpha beta gamma del", 1
    )
    assert selection.as_cursors() == ((1, 8), (1, 12))
