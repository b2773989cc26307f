from __future__ import annotations

import html
from typing import Any, Dict, Iterable, List, TypedDict

import typer

from .models import Category, DiffResult, Score, Segment

DELETED_STYLE = (
    "background:#dc3545;color:white;text-decoration:line-through;"
    "padding:2px;border-radius:3px;"
)
INSERTED_STYLE = "background:#28a745;color:black;padding:2px;border-radius:3px;"
OMITTED_STYLE = "color:#888;"


class SegmentPayload(TypedDict):
    text: str
    category: str
    highlighted: bool


class ScorePayload(TypedDict):
    correct: int
    total: int
    percent: float


class WindowPayload(TypedDict):
    start_word_idx: int
    end_word_idx: int


def render_html(segments: Iterable[Segment]) -> str:
    """Render segments as escaped HTML with inline-styled highlight spans."""
    parts: List[str] = []
    for segment in segments:
        text = html.escape(segment.text, quote=False)
        if segment.category == Category.OMITTED:
            parts.append(f'<span style="{OMITTED_STYLE}">{text}</span>')
        elif not segment.highlighted:
            parts.append(text)
        elif segment.category == Category.DELETED:
            parts.append(f'<span style="{DELETED_STYLE}">{text}</span>')
        else:
            parts.append(f'<span style="{INSERTED_STYLE}">{text}</span>')
    return "".join(parts)


def render_terminal(segments: Iterable[Segment]) -> str:
    """Render segments with ANSI styling for terminal output."""
    parts: List[str] = []
    for segment in segments:
        if segment.category == Category.OMITTED:
            parts.append(typer.style(segment.text, dim=True))
        elif not segment.highlighted:
            parts.append(segment.text)
        elif segment.category == Category.DELETED:
            parts.append(
                typer.style(segment.text, fg="white", bg="red", strikethrough=True)
            )
        else:
            parts.append(typer.style(segment.text, fg="black", bg="green"))
    return "".join(parts)


def format_score(score: Score) -> str:
    """Human readable match line; the only place the percentage is rounded."""
    return f"Match: {round(score.percent)}% ({score.correct}/{score.total})"


def result_to_dict(result: DiffResult) -> Dict[str, Any]:
    """Convert a DiffResult into a JSON-serializable dictionary."""
    segments: List[SegmentPayload] = [
        {
            "text": segment.text,
            "category": segment.category.value,
            "highlighted": segment.highlighted,
        }
        for segment in result.segments
    ]
    score: ScorePayload = {
        "correct": result.score.correct,
        "total": result.score.total,
        "percent": result.score.percent,
    }
    windows: List[WindowPayload] = [
        {"start_word_idx": w.start_word_idx, "end_word_idx": w.end_word_idx}
        for w in result.windows
    ]
    return {
        "segments": segments,
        "score": score,
        "windows": windows,
        "windowed": result.windowed,
    }
