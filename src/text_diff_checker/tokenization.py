from __future__ import annotations

import re
from typing import List

from .models import Token

TOKEN_PATTERN = re.compile(r"\S+", re.UNICODE)


def tokenize_words(text: str) -> List[Token]:
    """Tokenize text into whitespace-delimited words with character offsets."""
    tokens: List[Token] = []
    for match in TOKEN_PATTERN.finditer(text):
        tokens.append(
            Token(text=match.group(), start_char=match.start(), end_char=match.end())
        )
    return tokens


def span_text(text: str, tokens: List[Token]) -> str:
    """Return the raw substring covering a run of tokens, gaps included."""
    if not tokens:
        return ""
    return text[tokens[0].start_char : tokens[-1].end_char]
