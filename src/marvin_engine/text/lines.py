"""Vertical scanning for the nearest line that contains a word."""

from __future__ import annotations

from typing import Optional

from marvin_engine.buffer import Position, Selection, TextBuffer

from .classify import has_word


def previous_word_line(document: TextBuffer, from_line: int) -> Optional[int]:
    """Index of the closest line strictly above ``from_line`` holding a word."""

    for index in range(min(from_line, document.line_count) - 1, -1, -1):
        if has_word(document[index]):
            return index
    return None


def next_word_line(document: TextBuffer, from_line: int) -> Optional[int]:
    """Index of the first line at or below ``from_line`` holding a word."""

    for index in range(max(from_line, 0), document.line_count):
        if has_word(document[index]):
            return index
    return None


def find_previous_line(document: TextBuffer, selection: Selection) -> Optional[str]:
    """Move ``selection`` onto the previous line with a word and return it.

    The caret lands one line above the match, at the match's last column, so
    the backward word scan that follows starts from the end of that line.
    Without a match the caret is parked at the start of the buffer and
    ``None`` is returned.
    """

    index = previous_word_line(document, selection.start.line)
    if index is None:
        selection.start = Position(0, 0)
        selection.collapse_to_start()
        return None

    line = document[index]
    selection.start = Position(max(index - 1, 0), len(line) - 1)
    selection.collapse_to_start()
    return line


def find_next_line(document: TextBuffer, selection: Selection) -> Optional[str]:
    """Move ``selection`` to column 0 of the next line with a word.

    Without a match the caret is parked at the end of the last line and
    ``None`` is returned.
    """

    selection.end.line += 1
    index = next_word_line(document, selection.end.line)
    if index is None:
        last = document.line_count - 1
        if last < 0:
            selection.start = Position(0, 0)
        else:
            selection.start = Position(last, len(document[last]))
        selection.collapse_to_start()
        return None

    selection.start = Position(index, 0)
    selection.collapse_to_start()
    return document[index]


__all__ = [
    "find_next_line",
    "find_previous_line",
    "next_word_line",
    "previous_word_line",
]
