"""Handlers for commands that belong to the set but are left to the host."""

from __future__ import annotations

from .base import CommandContext, CommandResult


def join_line(context: CommandContext) -> CommandResult:
    context.bus.emit("command.noop", "join_line")
    return CommandResult(status="noop", message="join_line")


def delete_line(context: CommandContext) -> CommandResult:
    context.bus.emit("command.noop", "delete_line")
    return CommandResult(status="noop", message="delete_line")


__all__ = ["join_line", "delete_line"]
