"""Character classification and word/line scanning."""

from .classify import (
    CharClass,
    EXTENDER_RANGES,
    SPACE_CHARACTERS,
    WORD_CHARACTERS,
    classify,
    has_word,
    is_extender,
    is_space,
    is_word_char,
)
from .contents import leading_indentation, select_line_contents
from .graphemes import (
    count_extenders,
    to_logical_column,
    to_raw_end_column,
    to_raw_start_column,
    visible_length,
    visible_text,
)
from .lines import find_next_line, find_previous_line, previous_word_line
from .words import (
    collapse_to_preceding_word,
    expand_to_word,
    has_word_after,
    has_word_before,
    select_adjacent_word,
    select_previous_word,
)

__all__ = [
    "CharClass",
    "EXTENDER_RANGES",
    "SPACE_CHARACTERS",
    "WORD_CHARACTERS",
    "classify",
    "has_word",
    "is_extender",
    "is_space",
    "is_word_char",
    "count_extenders",
    "visible_length",
    "visible_text",
    "to_logical_column",
    "to_raw_start_column",
    "to_raw_end_column",
    "find_next_line",
    "find_previous_line",
    "previous_word_line",
    "expand_to_word",
    "has_word_after",
    "has_word_before",
    "collapse_to_preceding_word",
    "select_previous_word",
    "select_adjacent_word",
    "select_line_contents",
    "leading_indentation",
]
