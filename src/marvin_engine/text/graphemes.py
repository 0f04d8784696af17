"""Column translation between host strings and the visible projection.

Host columns are raw indices into the line string. The word scanner works on
the visible projection of a line, which is the same string with every
extender scalar (emoji, variation selectors, joiners, symbol combining marks)
removed. A logical column therefore differs from the raw one by the number
of extenders in front of it.
"""

from __future__ import annotations

from typing import Iterable

from .classify import is_extender


def count_extenders(span: Iterable[str]) -> int:
    return sum(1 for ch in span if is_extender(ch))


def visible_text(line: str) -> str:
    return "".join(ch for ch in line if not is_extender(ch))


def visible_length(line: str) -> int:
    return len(line) - count_extenders(line)


def to_logical_column(line: str, column: int) -> int:
    if column <= 0:
        return column
    return column - count_extenders(line[:column])


def to_raw_start_column(line: str, column: int) -> int:
    """Raw column of the visible character at ``column``.

    Extenders sitting directly in front of that character are skipped so a
    word start never lands inside an emoji sequence.
    """

    if column < 0:
        return column
    seen = 0
    for raw, ch in enumerate(line):
        if is_extender(ch):
            continue
        if seen == column:
            return raw
        seen += 1
    return len(line) + (column - seen)


def to_raw_end_column(line: str, column: int) -> int:
    """Raw column right after the visible character at ``column - 1``."""

    if column <= 0:
        return column
    seen = 0
    for raw, ch in enumerate(line):
        if is_extender(ch):
            continue
        seen += 1
        if seen == column:
            return raw + 1
    return len(line) + (column - seen)


__all__ = [
    "count_extenders",
    "to_logical_column",
    "to_raw_end_column",
    "to_raw_start_column",
    "visible_length",
    "visible_text",
]
