"""Context and result types shared by every command handler."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional

from marvin_engine.buffer import Buffer, Selection


@dataclass(slots=True)
class CommandResult:
    """Outcome of one command; never carries an error."""

    status: str = "ok"  # ok, noop, aborted or unknown
    message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status == "ok"


@dataclass(slots=True)
class CommandContext:
    """Everything a handler may read or mutate for a single invocation."""

    buffer: Buffer
    selection: Selection
    current_line: str
    bus: "CommandBus"


class CommandBus:
    """Minimal event bus so hosts can observe what a command changed."""

    def __init__(self) -> None:
        self._subscribers: Dict[str, list[Callable[[object], None]]] = {}

    def subscribe(self, event: str, callback: Callable[[object], None]) -> None:
        self._subscribers.setdefault(event, []).append(callback)

    def emit(self, event: str, payload: object | None = None) -> None:
        for callback in self._subscribers.get(event, []):
            callback(payload)


def selection_changed(context: CommandContext, message: str) -> CommandResult:
    context.bus.emit(
        "selection.changed",
        {"command": message, "selection": context.selection.as_cursors()},
    )
    return CommandResult(status="ok", message=message)


def aborted(context: CommandContext, reason: str) -> CommandResult:
    context.bus.emit("command.aborted", reason)
    return CommandResult(status="aborted", message=reason)


__all__ = [
    "CommandBus",
    "CommandContext",
    "CommandResult",
    "aborted",
    "selection_changed",
]
