"""Registry mapping command ids to their handlers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, Optional

from marvin_engine.runtime.telemetry import span

from .models import CommandId, CommandRef


@dataclass(slots=True)
class RegistryStats:
    command_count: int
    commands: tuple[str, ...]


class CommandRegistry:
    """Owns the command references a dispatcher may run."""

    def __init__(self, *, logger_name: str | None = None) -> None:
        self._commands: Dict[CommandId, CommandRef] = {}
        self._logger_name = logger_name

    def __contains__(self, command_id: object) -> bool:
        try:
            return CommandId(command_id) in self._commands
        except ValueError:
            return False

    def __len__(self) -> int:
        return len(self._commands)

    def get(self, command_id: CommandId | str) -> CommandRef:
        try:
            return self._commands[CommandId(command_id)]
        except (KeyError, ValueError) as exc:
            raise KeyError(f"Command '{command_id}' is not registered") from exc

    def register(self, command: CommandRef, *, replace: bool = False) -> CommandRef:
        with span(
            "commands::register",
            logger_name=self._logger_name,
            component="commands",
            metadata={"command_id": command.id.value},
        ) as handle:
            if not replace and command.id in self._commands:
                handle.add_metadata("duplicate", True)
                raise ValueError(f"Command '{command.id.value}' already registered")
            self._commands[command.id] = command
            return command

    def unregister(self, command_id: CommandId | str) -> Optional[CommandRef]:
        with span(
            "commands::unregister",
            logger_name=self._logger_name,
            component="commands",
            metadata={"command_id": str(command_id)},
        ):
            try:
                key = CommandId(command_id)
            except ValueError:
                return None
            return self._commands.pop(key, None)

    def iter_commands(self) -> Iterator[CommandRef]:
        yield from self._commands.values()

    def stats(self) -> RegistryStats:
        return RegistryStats(
            command_count=len(self._commands),
            commands=tuple(sorted(key.value for key in self._commands)),
        )


__all__ = ["CommandRegistry", "RegistryStats"]
