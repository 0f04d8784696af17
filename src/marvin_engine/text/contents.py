"""Trimming selections down to the non-blank content of lines."""

from __future__ import annotations

from marvin_engine.buffer import Selection

from .classify import LINE_BREAKS, is_space


def leading_space_count(line: str) -> int:
    count = 0
    for ch in line:
        if not is_space(ch):
            break
        count += 1
    return count


def trailing_space_count(line: str) -> int:
    count = 0
    for ch in reversed(line):
        if not is_space(ch):
            break
        count += 1
    return count


def select_line_contents(selection: Selection, start_line: str, end_line: str) -> None:
    selection.start.column = leading_space_count(start_line)
    trailing = trailing_space_count(end_line)
    if trailing == len(end_line):
        # blank line: zero-width selection at its end
        selection.end.column = len(end_line)
    else:
        selection.end.column = len(end_line) - trailing


def leading_indentation(line: str) -> str:
    """Leading whitespace of ``line``, stopping at a line break."""

    indent = []
    for ch in line:
        if not is_space(ch) or ch in LINE_BREAKS:
            break
        indent.append(ch)
    return "".join(indent)


__all__ = [
    "leading_indentation",
    "leading_space_count",
    "select_line_contents",
    "trailing_space_count",
]
