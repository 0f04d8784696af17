"""List-of-lines text storage used by the buffer façade."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional, Sequence


@dataclass(slots=True)
class TextBuffer:
    """Ordered, mutable sequence of lines.

    Line splicing is the only write operation the engine needs. Reads that
    fall outside the buffer return ``None`` instead of raising so scanning
    code can treat a missing line as a failed guard.
    """

    _lines: List[str] = field(default_factory=list)
    version: int = 0

    @classmethod
    def from_text(cls, text: str) -> "TextBuffer":
        lines = text.split("\n")
        return cls(_lines=lines)

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "TextBuffer":
        return cls(_lines=list(lines))

    def __len__(self) -> int:
        return len(self._lines)

    def __iter__(self) -> Iterator[str]:
        return iter(self._lines)

    def __getitem__(self, index: int) -> str:
        return self._lines[index]

    @property
    def line_count(self) -> int:
        return len(self._lines)

    def snapshot(self) -> Sequence[str]:
        return tuple(self._lines)

    def get_line(self, index: int) -> Optional[str]:
        if 0 <= index < len(self._lines):
            return self._lines[index]
        return None

    def insert_line(self, index: int, text: str) -> None:
        self._lines.insert(index, text)
        self.version += 1

    def to_text(self) -> str:
        return "\n".join(self._lines)
