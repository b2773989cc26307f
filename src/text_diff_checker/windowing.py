"""
Memoriser mode: compare only as far as the user has typed and show the
differences inside short word windows.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Sequence, Tuple

from .alignment import align_sequences
from .config import DiffConfig
from .highlight import highlight_texts, merge_segments, render_full
from .models import Category, DiffResult, EditKind, Score, Segment, Token, Window
from .preprocessing import preprocess
from .scoring import score_segments
from .tokenization import span_text, tokenize_words

LOGGER = logging.getLogger(__name__)


def word_key(word: str, config: DiffConfig) -> str:
    """Normalized form used to decide whether two words are equal."""
    return preprocess(word, config).text


def find_changed_words(
    old_words: Sequence[str], new_words: Sequence[str], config: DiffConfig
) -> List[int]:
    """
    Return the sorted new-word indices that differ from the aligned original.

    Inserted words are changed, including a leading run with no original
    counterpart. An original word missing before new index j marks
    min(j, len(new_words) - 1) as changed.
    """
    if not new_words:
        return []
    script = align_sequences(
        [word_key(word, config) for word in old_words],
        [word_key(word, config) for word in new_words],
    )
    last_index = len(new_words) - 1
    changed: set[int] = set()
    new_pos = 0
    for op in script:
        if op.kind == EditKind.EQUAL:
            new_pos += op.length
        elif op.kind == EditKind.INSERT:
            changed.update(range(new_pos, new_pos + op.length))
            new_pos += op.length
        else:
            changed.add(min(new_pos, last_index))
    return sorted(changed)


def build_windows(
    changed: Iterable[int], word_count: int, radius: int
) -> List[Window]:
    """
    Expand each changed index into a clipped window and merge the result.

    A window stopping exactly one word short of either end is stretched to
    that end so an ellipsis never stands in for a single word.
    """
    if word_count <= 0:
        return []
    last_index = word_count - 1
    windows: List[Window] = []
    for index in changed:
        start = max(0, index - radius)
        end = min(last_index, index + radius)
        if start == 1:
            start = 0
        if end == last_index - 1:
            end = last_index
        windows.append(Window(start, end))
    return merge_windows(windows)


def merge_windows(windows: Iterable[Window]) -> List[Window]:
    """Merge windows that overlap or touch; the result is sorted."""
    merged: List[Window] = []
    for window in sorted(windows, key=lambda w: (w.start_word_idx, w.end_word_idx)):
        if merged and window.start_word_idx <= merged[-1].end_word_idx + 1:
            last = merged[-1]
            merged[-1] = Window(
                last.start_word_idx, max(last.end_word_idx, window.end_word_idx)
            )
        else:
            merged.append(window)
    return merged


def windowed_render(raw_old: str, raw_new: str, config: DiffConfig) -> DiffResult:
    """
    Render a memoriser comparison.

    The original is cut to as many words as the user has typed and only the
    windows around changed words are shown. The ordinary full-text render is
    scored as well; the one with the higher percentage is returned. Ties keep
    the windows unless the full render is a perfect match.
    """
    new_tokens = tokenize_words(raw_new)
    if not new_tokens:
        return DiffResult(segments=[], score=Score())

    old_tokens = tokenize_words(raw_old)
    word_count = len(new_tokens)
    old_slice = old_tokens[:word_count]
    full = render_full(raw_old, raw_new, config)

    changed = find_changed_words(
        [token.text for token in old_slice],
        [token.text for token in new_tokens],
        config,
    )
    windows = build_windows(changed, word_count, config.context_radius)
    if windows:
        windowed_segments, windowed_score = _render_windows(
            raw_old, raw_new, old_tokens, new_tokens, windows, config
        )
    else:
        windowed_segments = _preview(raw_old, old_tokens, config)
        windowed_score = score_segments(windowed_segments)

    LOGGER.debug(
        "Memoriser compared %d typed words: %d changed, %d windows",
        word_count,
        len(changed),
        len(windows),
    )
    if full.score.percent == 100.0 or full.score.percent > windowed_score.percent:
        LOGGER.info(
            "Full render wins (%.1f%% vs %.1f%%)",
            full.score.percent,
            windowed_score.percent,
        )
        return full
    return DiffResult(
        segments=windowed_segments,
        score=windowed_score,
        windows=windows,
        windowed=True,
    )


def _render_windows(
    raw_old: str,
    raw_new: str,
    old_tokens: List[Token],
    new_tokens: List[Token],
    windows: List[Window],
    config: DiffConfig,
) -> Tuple[List[Segment], Score]:
    slice_length = min(len(old_tokens), len(new_tokens))
    separator = Segment(f" {config.ellipsis} ", Category.OMITTED)
    body: List[Segment] = []
    rendered: List[Segment] = []

    if windows[0].start_word_idx > 0:
        rendered.append(Segment(f"{config.ellipsis} ", Category.OMITTED))
    for position, window in enumerate(windows):
        if position:
            rendered.append(separator)
        start, end = window.start_word_idx, window.end_word_idx + 1
        segments = highlight_texts(
            span_text(raw_old, old_tokens[start : min(end, slice_length)]),
            span_text(raw_new, new_tokens[start:end]),
            config,
        )
        body.extend(segments)
        rendered.extend(segments)

    last_word_idx = max(len(old_tokens), len(new_tokens)) - 1
    if windows[-1].end_word_idx < last_word_idx:
        rendered.append(Segment(f" {config.ellipsis}", Category.OMITTED))
    return merge_segments(rendered), score_segments(body)


def _preview(raw_old: str, old_tokens: List[Token], config: DiffConfig) -> List[Segment]:
    shown = old_tokens[: config.preview_words]
    if not shown:
        return []
    segments = [Segment(span_text(raw_old, shown), Category.UNCHANGED)]
    if len(shown) < len(old_tokens):
        segments.append(Segment(f" {config.ellipsis}", Category.OMITTED))
    return segments
