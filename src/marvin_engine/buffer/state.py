"""Positions and selections tracked against a text buffer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple

Cursor = Tuple[int, int]  # (line, column)


@dataclass(slots=True)
class Position:
    """Mutable line/column pair. Columns index into the host's line string."""

    line: int = 0
    column: int = 0

    @classmethod
    def from_cursor(cls, cursor: Cursor) -> "Position":
        line, column = cursor
        return cls(line=line, column=column)

    def copy(self) -> "Position":
        return Position(self.line, self.column)

    def as_cursor(self) -> Cursor:
        return (self.line, self.column)


@dataclass(slots=True)
class Selection:
    """Start/end pair mutated in place by the engine.

    ``start`` may temporarily sit after ``end`` while an operation runs; the
    host only ever sees the pair once the operation has returned.
    """

    start: Position = field(default_factory=Position)
    end: Position = field(default_factory=Position)

    @classmethod
    def caret(cls, line: int, column: int) -> "Selection":
        return cls(start=Position(line, column), end=Position(line, column))

    @classmethod
    def from_cursors(cls, start: Cursor, end: Cursor) -> "Selection":
        return cls(start=Position.from_cursor(start), end=Position.from_cursor(end))

    @property
    def is_collapsed(self) -> bool:
        return self.start == self.end

    def collapse_to_start(self) -> None:
        self.end = self.start.copy()

    def copy(self) -> "Selection":
        return Selection(start=self.start.copy(), end=self.end.copy())

    def as_cursors(self) -> Tuple[Cursor, Cursor]:
        return (self.start.as_cursor(), self.end.as_cursor())
