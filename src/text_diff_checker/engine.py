from __future__ import annotations

import logging

from .config import DiffConfig
from .highlight import render_full
from .models import DiffResult
from .windowing import windowed_render

LOGGER = logging.getLogger(__name__)


def compute_diff(
    old_text: str, new_text: str, config: DiffConfig | None = None
) -> DiffResult:
    """
    Compare the original text against the modified one.

    In the default mode both texts are compared in full; the rendered segments
    cover the original (with a virtual space closing its last word) and every
    inserted run of the modified text. Memoriser mode hands over to the
    windowed renderer.
    """
    cfg = config or DiffConfig()
    LOGGER.debug(
        "Comparing %d/%d chars (ignore_case=%s, ignore_punctuation=%s, memoriser=%s)",
        len(old_text),
        len(new_text),
        cfg.ignore_case,
        cfg.ignore_punctuation,
        cfg.memoriser,
    )
    if cfg.memoriser:
        return windowed_render(old_text, new_text, cfg)
    return render_full(old_text, new_text, cfg)
