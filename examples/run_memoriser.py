"""
Tiny helper script showing the memoriser mode on a recitation attempt.
"""

from __future__ import annotations

from text_diff_checker import DiffConfig, compute_diff
from text_diff_checker.rendering import format_score, render_terminal


def main() -> None:
    original = (
        "Shall I compare thee to a summer's day? "
        "Thou art more lovely and more temperate."
    )
    attempts = [
        "Shall I compare thee",
        "shall i compare thee to a summers day",
        "Shall I compare you to a summer's day? Thou art more lovely",
    ]
    config = DiffConfig(memoriser=True, ignore_case=True, ignore_punctuation=True)

    for attempt in attempts:
        result = compute_diff(original, attempt, config)
        print("-" * 40)
        print(attempt)
        print(render_terminal(result.segments))
        print(format_score(result.score))


if __name__ == "__main__":
    main()
