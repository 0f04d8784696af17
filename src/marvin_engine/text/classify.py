"""Character classes used by the word and line scanners."""

from __future__ import annotations

from enum import Enum
from typing import Iterable

# Deliberately narrow: ASCII alphanumerics, underscore and the Nordic letters.
WORD_CHARACTERS = frozenset(
    "0123456789"
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    "abcdefghijklmnopqrstuvwxyz"
    "_"
    "ÅÄÆÖØåäæöø"
)

SPACE_CHARACTERS = frozenset(" \t\n\r")

LINE_BREAKS = frozenset("\n\r")

# Inclusive code point ranges of scalars that glue onto a visible character.
EXTENDER_RANGES: tuple[tuple[int, int], ...] = (
    (0x1F300, 0x1F5FF),  # misc symbols and pictographs
    (0x1F600, 0x1F64F),  # emoticons
    (0x1F680, 0x1F6FF),  # transport and map
    (0x1F900, 0x1F9FF),  # supplemental symbols and pictographs
    (0x2600, 0x26FF),  # misc symbols
    (0x2700, 0x27BF),  # dingbats
    (0xFE00, 0xFE0F),  # variation selectors
    (0x20D0, 0x20FF),  # combining marks for symbols
    (0x200D, 0x200D),  # zero width joiner
)


class CharClass(str, Enum):
    WORD = "word"
    SPACE = "space"
    EXTENDER = "extender"
    OTHER = "other"


def is_word_char(ch: str) -> bool:
    return ch in WORD_CHARACTERS


def is_space(ch: str) -> bool:
    return ch in SPACE_CHARACTERS


def is_extender(ch: str) -> bool:
    if len(ch) != 1:
        return False
    code = ord(ch)
    return any(low <= code <= high for low, high in EXTENDER_RANGES)


def classify(ch: str) -> CharClass:
    """Classify a single scalar. Total: anything unmatched is ``OTHER``."""

    if is_word_char(ch):
        return CharClass.WORD
    if is_space(ch):
        return CharClass.SPACE
    if is_extender(ch):
        return CharClass.EXTENDER
    return CharClass.OTHER


def has_word(text: Iterable[str]) -> bool:
    """True when ``text`` holds at least one word character."""

    return any(is_word_char(ch) for ch in text)


__all__ = [
    "CharClass",
    "EXTENDER_RANGES",
    "LINE_BREAKS",
    "SPACE_CHARACTERS",
    "WORD_CHARACTERS",
    "classify",
    "has_word",
    "is_extender",
    "is_space",
    "is_word_char",
]
