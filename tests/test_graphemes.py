from marvin_engine.text import (
    count_extenders,
    to_logical_column,
    to_raw_end_column,
    to_raw_start_column,
    visible_length,
    visible_text,
)

FAMILY = "👨\u200d👩\u200d👧"


def test_count_extenders() -> None:
    assert count_extenders("plain text") == 0
    assert count_extenders("👍🏽ok") == 2
    assert count_extenders("\u2764\ufe0f") == 2
    assert count_extenders(FAMILY) == 5


def test_visible_text_drops_extenders() -> None:
    assert visible_text("a👍b") == "ab"
    assert visible_text(FAMILY + "x") == "x"
    assert visible_length("\u2764\ufe0ffoo") == 3


def test_logical_column_subtracts_preceding_extenders() -> None:
    assert to_logical_column("👍foo", 2) == 1
    assert to_logical_column("foo", 2) == 2
    assert to_logical_column("ab👍cd", 5) == 4


def test_raw_start_skips_extenders_in_front_of_character() -> None:
    assert to_raw_start_column("\u2764\ufe0ffoo", 0) == 2
    assert to_raw_start_column("ab👍cd", 2) == 3
    assert to_raw_start_column(FAMILY + "word", 0) == 5


def test_raw_end_stops_before_trailing_extenders() -> None:
    assert to_raw_end_column("ab👍cd", 2) == 2
    assert to_raw_end_column("ab👍cd", 4) == 5
    assert to_raw_end_column("foo👍", 3) == 3


def test_columns_past_the_line_keep_their_overshoot() -> None:
    assert to_raw_start_column("foo", 5) == 5
    assert to_raw_end_column("a👍", 3) == 4


def test_plain_lines_are_identity() -> None:
    line = "let value = other_value"
    for column in range(len(line) + 1):
        assert to_logical_column(line, column) == column
        assert to_raw_start_column(line, column) == column
        assert to_raw_end_column(line, column) == column
