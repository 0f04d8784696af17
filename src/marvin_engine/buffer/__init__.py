"""Buffer, line storage, and selection data structures."""

from .buffer import Buffer, Transaction
from .document import TextBuffer
from .state import Cursor, Position, Selection
from .sync import BufferMirror, BufferValidationError
from .validation import (
    clamp_position,
    ensure_position,
    position_in_bounds,
    selection_in_bounds,
)

__all__ = [
    "Buffer",
    "Transaction",
    "TextBuffer",
    "Cursor",
    "Position",
    "Selection",
    "BufferMirror",
    "BufferValidationError",
    "clamp_position",
    "ensure_position",
    "position_in_bounds",
    "selection_in_bounds",
]
