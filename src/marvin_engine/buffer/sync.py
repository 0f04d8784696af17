"""Boundary types for exchanging buffer state with host editors."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple

from .state import Cursor


@dataclass(slots=True)
class BufferMirror:
    """Host-friendly snapshot of the lines and the active selection."""

    lines: Tuple[str, ...]
    selection: Tuple[Cursor, Cursor]
    version: int
    attributes: dict[str, str] = field(default_factory=dict)

    @property
    def text(self) -> str:
        return "\n".join(self.lines)


class BufferValidationError(RuntimeError):
    """Raised when a host hands over a position outside the buffer."""

    def __init__(self, message: str, *, cursor: Cursor | None = None) -> None:
        super().__init__(message)
        self.cursor = cursor
