"""Buffer façade pairing the line storage with the host-tracked selections."""

from __future__ import annotations

from contextlib import AbstractContextManager
from typing import ContextManager, List, Optional, Sequence

from marvin_engine.runtime import telemetry

from .document import TextBuffer
from .state import Cursor, Selection
from .sync import BufferMirror
from .validation import ensure_position


class Buffer:
    """What the host delivers for one command: lines plus selections.

    Only the first selection is read or written by the engine; the rest are
    kept so they can be handed back untouched until a command replaces them.
    """

    def __init__(
        self,
        *,
        name: str = "default",
        lines: Optional[TextBuffer] = None,
        selections: Optional[Sequence[Selection]] = None,
    ) -> None:
        self.name = name
        self.lines = lines if lines is not None else TextBuffer.from_lines([""])
        self.selections: List[Selection] = list(selections or [])

    @classmethod
    def from_text(
        cls,
        text: str,
        *,
        selection: Optional[Selection] = None,
        name: str = "default",
    ) -> "Buffer":
        selections = [selection] if selection is not None else [Selection()]
        return cls(name=name, lines=TextBuffer.from_text(text), selections=selections)

    @classmethod
    def from_lines(
        cls,
        lines: Sequence[str],
        *,
        selection: Optional[Selection] = None,
        name: str = "default",
    ) -> "Buffer":
        selections = [selection] if selection is not None else [Selection()]
        return cls(
            name=name, lines=TextBuffer.from_lines(lines), selections=selections
        )

    @property
    def selection(self) -> Optional[Selection]:
        return self.selections[0] if self.selections else None

    def set_selection(self, selection: Selection) -> None:
        self.selections = [selection]

    def set_host_selection(self, start: Cursor, end: Cursor) -> Selection:
        selection = Selection.from_cursors(start, end)
        ensure_position(self.lines, selection.start)
        ensure_position(self.lines, selection.end)
        self.set_selection(selection)
        return selection

    def insert_lines(self, index: int, texts: Sequence[str], *, label: str) -> None:
        with Transaction(self, label) as tx:
            for offset, text in enumerate(texts):
                self.lines.insert_line(index + offset, text)
            tx.record(inserted=len(texts), at=index)

    def mirror(self, *, attributes: Optional[dict[str, str]] = None) -> BufferMirror:
        selection = self.selection or Selection()
        return BufferMirror(
            lines=tuple(self.lines.snapshot()),
            selection=selection.as_cursors(),
            version=self.lines.version,
            attributes=dict(attributes or {}),
        )


class Transaction(AbstractContextManager["Transaction"]):
    """Span wrapping a group of line splices."""

    def __init__(self, buffer: Buffer, label: str) -> None:
        self.buffer = buffer
        self.label = label
        self._span_cm: Optional[ContextManager[telemetry.SpanHandle]] = None
        self._handle: Optional[telemetry.SpanHandle] = None
        self._version_before = buffer.lines.version

    def __enter__(self) -> "Transaction":
        self._version_before = self.buffer.lines.version
        self._span_cm = telemetry.span(
            f"buffer::{self.label}",
            component="buffer",
            metadata={"buffer": self.buffer.name},
        )
        self._handle = self._span_cm.__enter__()
        return self

    def record(self, **details: object) -> None:
        if self._handle is None:
            return
        for key, value in details.items():
            self._handle.add_metadata(key, value)

    def __exit__(self, exc_type, exc, tb) -> bool:
        if self._span_cm is not None:
            self._span_cm.__exit__(exc_type, exc, tb)
        if exc_type is None:
            telemetry.record_event(
                "buffer.splice",
                level="debug",
                data={
                    "label": self.label,
                    "before": self._version_before,
                    "after": self.buffer.lines.version,
                },
            )
        return False
