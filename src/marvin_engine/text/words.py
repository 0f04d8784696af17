"""Word boundary scanning on a single line.

Every operation converts the selection's raw columns into the visible
projection of ``line`` (see :mod:`marvin_engine.text.graphemes`), walks the
projection, and writes raw columns back. Operations report ``False`` when a
guard fails; whatever they changed before the guard stays changed.
"""

from __future__ import annotations

from typing import Optional

from marvin_engine.buffer import Selection

from .classify import has_word, is_word_char
from .graphemes import (
    to_logical_column,
    to_raw_end_column,
    to_raw_start_column,
    visible_length,
    visible_text,
)


def _char_at(text: str, index: int) -> Optional[str]:
    if 0 <= index < len(text):
        return text[index]
    return None


def _before(text: str, column: int) -> str:
    return text[: max(0, column)]


def _from(text: str, column: int) -> str:
    return text[max(0, column) :]


def has_word_after(line: str, column: int) -> bool:
    """True when a word character follows the character after ``column``."""

    visible = visible_text(line)
    return has_word(_from(visible, to_logical_column(line, column) + 1))


def has_word_before(line: str, column: int) -> bool:
    visible = visible_text(line)
    return has_word(_before(visible, to_logical_column(line, column)))


def expand_to_word(selection: Selection, line: str) -> bool:
    """Select the word at or after the caret.

    A non-empty selection is first collapsed past its end, so repeated calls
    walk from word to word. Columns step one per scanned character even on
    the character that ends the forward search.
    """

    visible = visible_text(line)
    start = to_logical_column(line, selection.start.column)
    end = to_logical_column(line, selection.end.column)

    next_char = _char_at(visible, end + 1)
    if next_char is None:
        return False

    if not selection.is_collapsed:
        end += 2
        start = end
        selection.start.line = selection.end.line

    if not is_word_char(next_char):
        for ch in _from(visible, start):
            start += 1
            if is_word_char(ch):
                break

    for ch in reversed(_before(visible, start)):
        if not is_word_char(ch):
            break
        start -= 1

    end = start
    for ch in _from(visible, start):
        if not is_word_char(ch):
            break
        end += 1

    selection.start.column = to_raw_start_column(line, start)
    if end == start:
        selection.end.column = selection.start.column
    else:
        selection.end.column = to_raw_end_column(line, end)
    return True


def collapse_to_preceding_word(selection: Selection, line: str) -> bool:
    """Collapse onto the last character of the word before the caret."""

    visible = visible_text(line)
    start = to_logical_column(line, selection.start.column)

    previous = _char_at(visible, start - 1)
    if previous is None:
        return False

    start -= 1
    if not is_word_char(previous):
        for ch in reversed(_before(visible, start)):
            start -= 1
            if is_word_char(ch):
                break

    selection.start.column = to_raw_start_column(line, start)
    selection.collapse_to_start()
    return True


def select_previous_word(selection: Selection, line: str) -> bool:
    if not collapse_to_preceding_word(selection, line):
        return False
    return expand_to_word(selection, line)


def proportional_column(column: int, length: int, target_length: int) -> Optional[int]:
    """Column on a line of ``target_length`` at the same relative offset."""

    if length <= 0:
        return None
    return target_length * column // length


def select_adjacent_word(
    selection: Selection, current_line: str, adjacent_line: str, step: int
) -> bool:
    """Snap onto the word on the line ``step`` rows away.

    The caret keeps its relative horizontal position: a caret halfway along
    the current line starts halfway along the adjacent one.
    """

    target = proportional_column(
        to_logical_column(current_line, selection.start.column),
        visible_length(current_line),
        visible_length(adjacent_line),
    )
    if target is None:
        return False

    selection.start.line += step
    selection.start.column = to_raw_start_column(adjacent_line, target)
    selection.collapse_to_start()
    return select_previous_word(selection, adjacent_line)


__all__ = [
    "collapse_to_preceding_word",
    "expand_to_word",
    "has_word_after",
    "has_word_before",
    "proportional_column",
    "select_adjacent_word",
    "select_previous_word",
]
