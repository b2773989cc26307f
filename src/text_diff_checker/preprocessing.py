"""
Comparison-text preprocessing.

The comparison text is what the aligner sees; the index map ties every
comparison character back to the raw offset it came from so highlights can be
drawn over the text exactly as it was entered.
"""

from __future__ import annotations

import unicodedata
from typing import List

from .config import DiffConfig
from .models import ProcessedText
from .tokenization import tokenize_words

PUNCTUATION_CHARS = frozenset('.,!/#$%^&*;:{}=-_`~()"')

VIRTUAL_SPACE = " "


def is_punctuation(char: str) -> bool:
    """Return True for the fixed punctuation set and Unicode P* categories."""
    if char in PUNCTUATION_CHARS:
        return True
    return unicodedata.category(char).startswith("P")


def fold_case(char: str) -> str:
    """Lowercase a single character, keeping it when folding is not 1:1."""
    folded = char.lower()
    if len(folded) != 1:
        return char
    return folded


def build_index_map(raw: str, config: DiffConfig) -> tuple[int, ...]:
    """Return the raw offsets that survive preprocessing, in order."""
    if not config.ignore_punctuation:
        return tuple(range(len(raw)))
    return tuple(
        offset for offset, char in enumerate(raw) if not is_punctuation(char)
    )


def preprocess(raw: str, config: DiffConfig) -> ProcessedText:
    """Build the comparison text and its index map for one raw text."""
    index_map = build_index_map(raw, config)
    chars: List[str] = []
    for offset in index_map:
        char = raw[offset]
        chars.append(fold_case(char) if config.ignore_case else char)
    return ProcessedText(text="".join(chars), index_map=index_map)


def add_virtual_spaces(raw: str) -> str:
    """
    Append a space after every word that is not already followed by whitespace.

    With whitespace-delimited words only the final word can lack one, so this
    amounts to terminating non-empty text that does not end in whitespace.
    """
    tokens = tokenize_words(raw)
    if not tokens:
        return raw
    pieces: List[str] = []
    cursor = 0
    for token in tokens:
        pieces.append(raw[cursor : token.end_char])
        cursor = token.end_char
        if cursor >= len(raw) or not raw[cursor].isspace():
            pieces.append(VIRTUAL_SPACE)
    pieces.append(raw[cursor:])
    return "".join(pieces)
