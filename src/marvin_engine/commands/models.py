"""Command identifiers and handler metadata."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Callable, Mapping, Optional

from marvin_engine.actions import CommandContext, CommandResult

CommandHandler = Callable[[CommandContext], CommandResult]


class CommandId(str, Enum):
    SELECT_CURRENT_WORD = "selectCurrentWord"
    SELECT_NEXT_WORD = "selectNextWord"
    SELECT_PREVIOUS_WORD = "selectPreviousWord"
    SELECT_WORD_ABOVE = "selectWordAbove"
    SELECT_WORD_BELOW = "selectWordBelow"
    SELECT_LINE_CONTENTS = "selectLineContents"
    JOIN_LINE = "joinLine"
    DUPLICATE_LINE = "duplicateLine"
    DELETE_LINE = "deleteLine"
    MOVE_TO_EOL_AND_INSERT_LF = "moveToEOLandInsertLF"

    @classmethod
    def parse(cls, identifier: str) -> Optional["CommandId"]:
        """Match the last dot-separated component of ``identifier``."""

        name = identifier.rsplit(".", 1)[-1]
        try:
            return cls(name)
        except ValueError:
            return None


@dataclass(frozen=True, slots=True)
class CommandRef:
    """Handler registered for a command id."""

    id: CommandId
    handler: CommandHandler
    description: str = ""
    telemetry_name: str | None = None
    metadata: Mapping[str, object] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("CommandRef id cannot be empty")
        if not callable(self.handler):
            raise TypeError("handler must be callable")
        object.__setattr__(self, "id", CommandId(self.id))
        object.__setattr__(self, "metadata", MappingProxyType(dict(self.metadata)))
        if self.telemetry_name is None:
            object.__setattr__(self, "telemetry_name", self.id.value)

    def __call__(self, context: CommandContext) -> CommandResult:
        return self.handler(context)


__all__ = ["CommandHandler", "CommandId", "CommandRef"]
