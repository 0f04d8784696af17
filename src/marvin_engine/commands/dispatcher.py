"""Entry point hosts call with a command identifier and a buffer."""

from __future__ import annotations

from typing import Callable, Optional

from marvin_engine.actions import CommandBus, CommandContext, CommandResult
from marvin_engine.buffer import Buffer, clamp_position, selection_in_bounds
from marvin_engine.runtime import telemetry

from .defaults import load_default_commands
from .models import CommandId
from .registry import CommandRegistry

Completion = Callable[[Optional[BaseException]], None]


def _ignore_completion(error: Optional[BaseException]) -> None:
    del error


class CommandDispatcher:
    """Runs one command against the first selection of a buffer.

    Every call ends by invoking ``completion(None)`` exactly once: unknown
    commands and failed guards are no-ops, not errors.
    """

    def __init__(
        self,
        *,
        registry: CommandRegistry | None = None,
        bus: CommandBus | None = None,
        logger_name: str | None = None,
        load_defaults: bool = True,
    ) -> None:
        self.logger_name = logger_name or "marvin_engine.commands"
        self.registry = registry or CommandRegistry(logger_name=self.logger_name)
        if load_defaults and registry is None:
            load_default_commands(self.registry)
        self.bus = bus or CommandBus()
        stats = self.registry.stats()
        telemetry.record_event(
            "commands.loaded",
            level="debug",
            data={"count": stats.command_count, "commands": stats.commands},
            logger_name=self.logger_name,
        )

    def perform(
        self,
        identifier: str,
        buffer: Buffer,
        completion: Completion | None = None,
    ) -> CommandResult:
        result = self._run(identifier, buffer)
        (completion or _ignore_completion)(None)
        return result

    def _run(self, identifier: str, buffer: Buffer) -> CommandResult:
        command = CommandId.parse(identifier)
        if command is None or command not in self.registry:
            telemetry.record_event(
                "command.unknown",
                level="debug",
                data={"identifier": identifier},
                logger_name=self.logger_name,
            )
            self.bus.emit("command.unknown", identifier)
            return CommandResult(status="unknown", message=identifier)

        selection = buffer.selection
        current_line = (
            buffer.lines.get_line(selection.end.line) if selection is not None else None
        )
        if selection is None or current_line is None:
            telemetry.record_event(
                "command.aborted",
                level="debug",
                data={"command": command.value, "reason": "selection_out_of_range"},
                logger_name=self.logger_name,
            )
            self.bus.emit("command.aborted", "selection_out_of_range")
            return CommandResult(status="aborted", message="selection_out_of_range")

        ref = self.registry.get(command)
        context = CommandContext(
            buffer=buffer,
            selection=selection,
            current_line=current_line,
            bus=self.bus,
        )
        with telemetry.span(
            f"command::{ref.telemetry_name}",
            logger_name=self.logger_name,
            component="commands",
            metadata={"buffer": buffer.name, "line": selection.end.line},
        ) as handle:
            result = ref(context)
            handle.add_metadata("status", result.status)

        if not selection_in_bounds(buffer.lines, selection):
            telemetry.record_event(
                "selection.clamped",
                level="warning",
                data={"command": command.value, "selection": selection.as_cursors()},
                logger_name=self.logger_name,
            )
            clamp_position(buffer.lines, selection.start)
            clamp_position(buffer.lines, selection.end)
        buffer.set_selection(selection)
        telemetry.record_event(
            "command.done" if result.status != "aborted" else "command.aborted",
            level="debug",
            data={
                "command": command.value,
                "status": result.status,
                "selection": selection.as_cursors(),
            },
            logger_name=self.logger_name,
        )
        return result


__all__ = ["CommandDispatcher", "Completion"]
