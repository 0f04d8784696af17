"""Command handlers, one per identifier in the command set."""

from .base import CommandBus, CommandContext, CommandResult
from .core import delete_line, join_line
from .lines import duplicate_line, move_to_eol_and_insert_lf
from .selection import (
    select_current_word,
    select_line_contents,
    select_next_word,
    select_previous_word,
    select_word_above,
    select_word_below,
)

__all__ = [
    "CommandBus",
    "CommandContext",
    "CommandResult",
    "join_line",
    "delete_line",
    "duplicate_line",
    "move_to_eol_and_insert_lf",
    "select_current_word",
    "select_next_word",
    "select_previous_word",
    "select_word_above",
    "select_word_below",
    "select_line_contents",
]
