"""Bounds helpers shared by the buffer façade and host adapters."""

from __future__ import annotations

from .document import TextBuffer
from .state import Position, Selection
from .sync import BufferValidationError


def position_in_bounds(document: TextBuffer, position: Position) -> bool:
    line = document.get_line(position.line)
    if line is None:
        return False
    return 0 <= position.column <= len(line)


def selection_in_bounds(document: TextBuffer, selection: Selection) -> bool:
    return position_in_bounds(document, selection.start) and position_in_bounds(
        document, selection.end
    )


def ensure_position(document: TextBuffer, position: Position) -> Position:
    if document.get_line(position.line) is None:
        raise BufferValidationError("Line out of range", cursor=position.as_cursor())
    if not position_in_bounds(document, position):
        raise BufferValidationError(
            "Column out of range", cursor=position.as_cursor()
        )
    return position


def clamp_position(document: TextBuffer, position: Position) -> Position:
    """Pull ``position`` back inside the buffer, in place."""

    if document.line_count == 0:
        position.line = 0
        position.column = 0
        return position
    position.line = max(0, min(position.line, document.line_count - 1))
    line = document[position.line]
    position.column = max(0, min(position.column, len(line)))
    return position
