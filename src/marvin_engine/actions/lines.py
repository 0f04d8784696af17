"""Commands that splice lines into the buffer."""

from __future__ import annotations

from marvin_engine.buffer import Position
from marvin_engine.text import leading_indentation

from .base import CommandContext, CommandResult, aborted, selection_changed


def duplicate_line(context: CommandContext) -> CommandResult:
    """Copy the selected line range directly above itself."""

    selection = context.selection
    lines = context.buffer.lines
    first, last = selection.start.line, selection.end.line
    if last < first or lines.get_line(first) is None:
        return aborted(context, "bad_line_range")

    copies = [lines[index] for index in range(first, last + 1)]
    context.buffer.insert_lines(first, copies, label="duplicate_line")
    context.bus.emit(
        "buffer.lines",
        {"label": "duplicate_line", "inserted": len(copies), "at": first},
    )
    return CommandResult(status="ok", message="duplicate_line")


def move_to_eol_and_insert_lf(context: CommandContext) -> CommandResult:
    """Open an indented line below the selection and put the caret on it."""

    selection = context.selection
    start_line = context.buffer.lines.get_line(selection.start.line)
    if start_line is None:
        return aborted(context, "no_start_line")

    indent = leading_indentation(start_line)
    target = selection.end.line + 1
    context.buffer.insert_lines(target, [indent], label="open_line")
    context.bus.emit("buffer.lines", {"label": "open_line", "inserted": 1, "at": target})

    selection.start = Position(target, len(indent))
    selection.collapse_to_start()
    return selection_changed(context, "open_line")


__all__ = ["duplicate_line", "move_to_eol_and_insert_lf"]
