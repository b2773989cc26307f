from __future__ import annotations

from typing import Iterable

from .models import Category, Score, Segment

_ORIGINAL_SIDE = (Category.UNCHANGED, Category.DELETED)


def count_significant(text: str) -> int:
    """Count the non-whitespace characters of a string."""
    return sum(1 for char in text if not char.isspace())


def score_segments(segments: Iterable[Segment]) -> Score:
    """
    Score rendered segments against the original text.

    Only characters of the original (unchanged and deleted) are counted, so
    extra typed text never lowers the percentage. Whitespace and separators
    are ignored.
    """
    correct = 0
    total = 0
    for segment in segments:
        if segment.category not in _ORIGINAL_SIDE:
            continue
        significant = count_significant(segment.text)
        total += significant
        if segment.category == Category.UNCHANGED:
            correct += significant
    percent = 100.0 * correct / total if total > 0 else 0.0
    return Score(correct=correct, total=total, percent=percent)
