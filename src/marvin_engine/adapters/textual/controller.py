"""Adapter that runs engine commands on behalf of a Textual text widget."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional

from marvin_engine.actions import CommandResult
from marvin_engine.buffer import Buffer, BufferMirror, Cursor, TextBuffer
from marvin_engine.commands import CommandDispatcher


def _noop(*_args, **_kwargs) -> None:  # pragma: no cover - default hook
    return None


@dataclass(slots=True)
class TextualUIHooks:
    """Callbacks the adapter uses to push state back into widgets."""

    update_buffer: Callable[[BufferMirror], None]
    update_status: Callable[[str], None] = _noop
    handle_event: Callable[[str, object | None], None] = _noop
    log: Callable[[str], None] = _noop


class TextualCommandAdapter:
    """Keeps an engine buffer in step with the host widget.

    The host pushes its text and selection before a command, the adapter
    dispatches the command and hands the resulting mirror back through
    ``hooks.update_buffer``.
    """

    EVENTS = (
        "selection.changed",
        "buffer.lines",
        "command.noop",
        "command.aborted",
        "command.unknown",
    )

    def __init__(
        self,
        dispatcher: CommandDispatcher,
        hooks: TextualUIHooks,
        *,
        buffer: Optional[Buffer] = None,
    ) -> None:
        self.dispatcher = dispatcher
        self.hooks = hooks
        self.buffer = buffer or Buffer.from_text("")
        self._completions = 0
        self._subscribe_events()

    @property
    def completions(self) -> int:
        return self._completions

    def load_text(self, text: str) -> None:
        self.buffer.lines = TextBuffer.from_text(text)

    def set_selection(self, start: Cursor, end: Cursor) -> None:
        self.buffer.set_host_selection(start, end)

    def sync_from_host(self, text: str, start: Cursor, end: Cursor) -> None:
        if text != self.buffer.lines.to_text():
            self.load_text(text)
        self.set_selection(start, end)

    def handle_command(self, identifier: str) -> CommandResult:
        self._log("command ->", identifier=identifier)
        result = self.dispatcher.perform(identifier, self.buffer, self._on_complete)
        self.hooks.update_status(result.message or result.status)
        self.hooks.update_buffer(self.buffer.mirror())
        self._log("result <-", status=result.status, message=result.message)
        return result

    def _on_complete(self, error: Optional[BaseException]) -> None:
        del error
        self._completions += 1

    def _subscribe_events(self) -> None:
        for event in self.EVENTS:
            self.dispatcher.bus.subscribe(
                event, lambda payload, name=event: self._handle_event(name, payload)
            )

    def _handle_event(self, name: str, payload: object | None) -> None:
        self._log("event ->", event=name, payload=payload)
        self.hooks.handle_event(name, payload)

    def _log(self, prefix: str, **fields: object) -> None:
        snapshot = self._state_metadata()
        snapshot.update({k: v for k, v in fields.items() if v is not None})
        parts = [prefix] + [f"{key}={value!r}" for key, value in snapshot.items()]
        self.hooks.log(" ".join(parts))

    def _state_metadata(self) -> Dict[str, object]:
        selection = self.buffer.selection
        return {
            "buffer": self.buffer.name,
            "version": self.buffer.lines.version,
            "selection": selection.as_cursors() if selection else None,
        }


__all__ = ["TextualCommandAdapter", "TextualUIHooks"]
