from __future__ import annotations

from typing import List, Sequence, Tuple

from .alignment import AlignmentContractError, align, validate_script
from .config import DiffConfig
from .models import Category, DiffResult, EditKind, EditOp, Segment
from .preprocessing import add_virtual_spaces, preprocess
from .scoring import score_segments

_RUN_CATEGORIES = {
    EditKind.EQUAL: Category.UNCHANGED,
    EditKind.DELETE: Category.DELETED,
    EditKind.INSERT: Category.INSERTED,
}


def reconstruct(
    script: Sequence[EditOp],
    raw_old: str,
    raw_new: str,
    map_old: Sequence[int],
    map_new: Sequence[int],
) -> List[Segment]:
    """
    Turn an edit script over comparison texts into segments of the raw texts.

    Every run is looked up through its side's index map, so the text shown is
    the raw text (original case, punctuation kept) rather than the comparison
    text. Raw old characters that preprocessing dropped between runs are shown
    as unchanged; dropped characters of the new text are not shown.
    """
    validate_script(script, len(map_old), len(map_new))
    segments: List[Segment] = []
    old_pos = 0
    new_pos = 0
    old_cursor = 0

    for op in script:
        if op.length == 0:
            continue
        category = _RUN_CATEGORIES[EditKind(op.kind)]
        if op.kind == EditKind.INSERT:
            start, end = raw_span(map_new, new_pos, op.length, len(raw_new))
            segments.append(Segment(raw_new[start:end], category))
            new_pos += op.length
            continue

        start, end = raw_span(map_old, old_pos, op.length, len(raw_old))
        if start > old_cursor:
            segments.append(Segment(raw_old[old_cursor:start], Category.UNCHANGED))
        segments.append(Segment(raw_old[start:end], category))
        old_cursor = end
        old_pos += op.length
        if op.kind == EditKind.EQUAL:
            new_pos += op.length

    if old_cursor < len(raw_old):
        segments.append(Segment(raw_old[old_cursor:], Category.UNCHANGED))
    return merge_segments(segments)


def raw_span(
    index_map: Sequence[int], position: int, length: int, raw_length: int
) -> Tuple[int, int]:
    """Return the raw [start, end) covered by comparison chars [position, position+length)."""
    if position < 0 or length <= 0 or position + length > len(index_map):
        raise AlignmentContractError(
            f"Run [{position}, {position + length}) is outside an index map "
            f"of length {len(index_map)}."
        )
    start = index_map[position]
    end = index_map[position + length - 1] + 1
    if start < 0 or end > raw_length or end <= start:
        raise AlignmentContractError(
            f"Index map points outside the raw text ({start}, {end}, {raw_length})."
        )
    return start, end


def merge_segments(segments: Sequence[Segment]) -> List[Segment]:
    """Merge neighbours that share a category and drop empty segments."""
    merged: List[Segment] = []
    for segment in segments:
        if not segment.text:
            continue
        if merged and merged[-1].category == segment.category:
            merged[-1] = Segment(merged[-1].text + segment.text, segment.category)
        else:
            merged.append(Segment(segment.text, segment.category))
    return merged


def highlight_texts(raw_old: str, raw_new: str, config: DiffConfig) -> List[Segment]:
    """Run preprocessing, alignment and reconstruction over two raw texts."""
    processed_old = preprocess(raw_old, config)
    processed_new = preprocess(raw_new, config)
    script = align(processed_old.text, processed_new.text)
    return reconstruct(
        script,
        raw_old,
        raw_new,
        processed_old.index_map,
        processed_new.index_map,
    )


def render_full(raw_old: str, raw_new: str, config: DiffConfig) -> DiffResult:
    """Compare two whole texts, closing their last words with virtual spaces."""
    if config.virtual_spaces:
        raw_old = add_virtual_spaces(raw_old)
        raw_new = add_virtual_spaces(raw_new)
    segments = highlight_texts(raw_old, raw_new, config)
    return DiffResult(segments=segments, score=score_segments(segments))
