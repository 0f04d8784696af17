"""Built-in command table."""

from __future__ import annotations

from typing import Iterable, Sequence

from marvin_engine.actions import core as core_actions
from marvin_engine.actions import lines as line_actions
from marvin_engine.actions import selection as selection_actions

from .models import CommandId, CommandRef
from .registry import CommandRegistry

DEFAULT_COMMANDS: tuple[CommandRef, ...] = (
    CommandRef(
        id=CommandId.SELECT_CURRENT_WORD,
        handler=selection_actions.select_current_word,
        description="Select the word under the caret",
    ),
    CommandRef(
        id=CommandId.SELECT_NEXT_WORD,
        handler=selection_actions.select_next_word,
        description="Select the next word",
    ),
    CommandRef(
        id=CommandId.SELECT_PREVIOUS_WORD,
        handler=selection_actions.select_previous_word,
        description="Select the previous word",
    ),
    CommandRef(
        id=CommandId.SELECT_WORD_ABOVE,
        handler=selection_actions.select_word_above,
        description="Select the nearest word on the line above",
    ),
    CommandRef(
        id=CommandId.SELECT_WORD_BELOW,
        handler=selection_actions.select_word_below,
        description="Select the nearest word on the line below",
    ),
    CommandRef(
        id=CommandId.SELECT_LINE_CONTENTS,
        handler=selection_actions.select_line_contents,
        description="Select the line without surrounding whitespace",
    ),
    CommandRef(
        id=CommandId.JOIN_LINE,
        handler=core_actions.join_line,
        description="Join lines (handled by the host)",
    ),
    CommandRef(
        id=CommandId.DUPLICATE_LINE,
        handler=line_actions.duplicate_line,
        description="Duplicate the selected lines",
    ),
    CommandRef(
        id=CommandId.DELETE_LINE,
        handler=core_actions.delete_line,
        description="Delete lines (handled by the host)",
    ),
    CommandRef(
        id=CommandId.MOVE_TO_EOL_AND_INSERT_LF,
        handler=line_actions.move_to_eol_and_insert_lf,
        description="Open an indented line below",
    ),
)


def load_default_commands(
    registry: CommandRegistry,
    *,
    replace: bool = False,
    include: Sequence[str] | None = None,
    exclude: Sequence[str] | None = None,
    extra_commands: Iterable[CommandRef] | None = None,
) -> None:
    """Register the built-in commands, optionally filtered by id."""

    allowed = set(include) if include else None
    blocked = set(exclude or ())
    for command in DEFAULT_COMMANDS:
        name = command.id.value
        if allowed is not None and name not in allowed:
            continue
        if name in blocked:
            continue
        registry.register(command, replace=replace)

    for command in extra_commands or ():
        registry.register(command, replace=True)


__all__ = ["DEFAULT_COMMANDS", "load_default_commands"]
