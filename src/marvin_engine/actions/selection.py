"""Word and line-content selection commands."""

from __future__ import annotations

from marvin_engine.text import (
    expand_to_word,
    find_next_line,
    find_previous_line,
    has_word_after,
    has_word_before,
    previous_word_line,
    select_adjacent_word,
    select_line_contents as trim_to_contents,
    select_previous_word as snap_to_previous_word,
)

from .base import CommandContext, CommandResult, aborted, selection_changed


def select_current_word(context: CommandContext) -> CommandResult:
    """Select the word under or after the caret, or the next one if selected.

    When nothing word-like is left on the line the caret moves down to the
    next line that has a word.
    """

    selection = context.selection
    target = context.current_line
    if not has_word_after(target, selection.end.column):
        found = find_next_line(context.buffer.lines, selection)
        if found is None:
            return aborted(context, "no_next_line")
        target = found

    if not expand_to_word(selection, target):
        return aborted(context, "no_word")
    return selection_changed(context, "select_word")


select_next_word = select_current_word


def select_previous_word(context: CommandContext) -> CommandResult:
    selection = context.selection
    target = context.current_line
    match = None
    if not has_word_before(target, selection.start.column):
        match = previous_word_line(context.buffer.lines, selection.start.line)
        found = find_previous_line(context.buffer.lines, selection)
        if found is None:
            return aborted(context, "no_previous_line")
        target = found

    if not snap_to_previous_word(selection, target):
        return aborted(context, "no_word")
    if match is not None:
        # columns were taken from the match line, so the selection belongs there
        selection.start.line = match
        selection.end.line = match
    return selection_changed(context, "select_previous_word")


def _select_adjacent(context: CommandContext, step: int) -> CommandResult:
    selection = context.selection
    if selection.is_collapsed:
        if not expand_to_word(selection, context.current_line):
            return aborted(context, "no_word")
        return selection_changed(context, "select_word")

    adjacent = context.buffer.lines.get_line(selection.start.line + step)
    if adjacent is None:
        return aborted(context, "no_adjacent_line")
    if not select_adjacent_word(selection, context.current_line, adjacent, step):
        return aborted(context, "no_word")
    return selection_changed(
        context, "select_word_above" if step < 0 else "select_word_below"
    )


def select_word_above(context: CommandContext) -> CommandResult:
    return _select_adjacent(context, -1)


def select_word_below(context: CommandContext) -> CommandResult:
    return _select_adjacent(context, 1)


def select_line_contents(context: CommandContext) -> CommandResult:
    selection = context.selection
    start_line = context.buffer.lines.get_line(selection.start.line)
    if start_line is None:
        return aborted(context, "no_start_line")
    trim_to_contents(selection, start_line, context.current_line)
    return selection_changed(context, "select_line_contents")


__all__ = [
    "select_current_word",
    "select_next_word",
    "select_previous_word",
    "select_word_above",
    "select_word_below",
    "select_line_contents",
]
