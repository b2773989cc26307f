import pytest

from text_diff_checker import DiffConfig, compute_diff
from text_diff_checker.models import Category, Score, Segment
from text_diff_checker.preprocessing import add_virtual_spaces

U, D, I = Category.UNCHANGED, Category.DELETED, Category.INSERTED

PAIRS = [
    ("", ""),
    ("cat", "cat sat"),
    ("The quick brown fox", "The quack brown box jumped"),
    ("line one\nline two\n", "line 1\nline two"),
    ("abc", ""),
    ("", "typed text"),
    ("  leading and trailing  ", "leading, and trailing!"),
]

CONFIGS = [
    DiffConfig(),
    DiffConfig(ignore_case=True),
    DiffConfig(ignore_punctuation=True),
    DiffConfig(ignore_case=True, ignore_punctuation=True),
    DiffConfig(memoriser=True),
]


def _side(segments, *categories):
    return "".join(s.text for s in segments if s.category in categories)


@pytest.mark.parametrize("old, new", PAIRS)
def test_segments_rebuild_both_texts(old: str, new: str):
    result = compute_diff(old, new, DiffConfig())

    assert _side(result.segments, U, D) == add_virtual_spaces(old)
    assert _side(result.segments, U, I) == add_virtual_spaces(new)


@pytest.mark.parametrize("old, new", PAIRS)
def test_segments_rebuild_original_when_ignoring_case_and_punctuation(old: str, new: str):
    config = DiffConfig(ignore_case=True, ignore_punctuation=True)
    result = compute_diff(old, new, config)

    assert _side(result.segments, U, D) == add_virtual_spaces(old)


@pytest.mark.parametrize("config", CONFIGS)
@pytest.mark.parametrize("old, new", PAIRS)
def test_score_bounds_and_idempotence(old: str, new: str, config: DiffConfig):
    first = compute_diff(old, new, config)
    second = compute_diff(old, new, config)

    assert first == second
    assert 0.0 <= first.score.percent <= 100.0
    if first.score.percent == 100.0:
        assert first.score.correct == first.score.total > 0
    if first.score.total == 0:
        assert first.score.percent == 0.0


@pytest.mark.parametrize("config", CONFIGS)
@pytest.mark.parametrize(
    "text",
    ["cat", "Hello, World!", "two\nlines here ", "the quick brown fox jumps over"],
)
def test_identical_texts_are_one_unchanged_segment(text: str, config: DiffConfig):
    result = compute_diff(text, text, config)

    assert result.segments == [Segment(add_virtual_spaces(text), U)]
    assert result.score.percent == 100.0


def test_case_and_punctuation_insensitivity():
    config = DiffConfig(ignore_case=True, ignore_punctuation=True)
    result = compute_diff("Hello, World!", "hello world", config)

    assert result.score.percent == 100.0
    assert result.segments == [Segment("Hello, World! ", U)]


def test_case_sensitive_comparison_flags_capitals():
    result = compute_diff("Hello", "hello", DiffConfig())

    assert result.score.percent < 100.0
    assert any(s.category == D for s in result.segments)


@pytest.mark.parametrize("old", ["cat", "cat "])
def test_pure_insertion(old: str):
    result = compute_diff(old, "cat sat", DiffConfig())

    assert result.segments == [Segment("cat ", U), Segment("sat ", I)]
    assert result.score == Score(correct=3, total=3, percent=100.0)


def test_missing_trailing_letter_stays_inside_the_word():
    result = compute_diff("cats", "cat", DiffConfig())

    assert result.segments == [Segment("cat", U), Segment("s", D), Segment(" ", U)]


def test_empty_texts():
    result = compute_diff("", "", DiffConfig())

    assert result.segments == []
    assert result.score == Score(0, 0, 0.0)


def test_default_config_is_used_when_none_given():
    assert compute_diff("a", "b") == compute_diff("a", "b", DiffConfig())


def test_memoriser_mode_bounds_the_comparison():
    config = DiffConfig(memoriser=True)
    result = compute_diff(
        "the quick brown fox jumps over the lazy dog", "the quick brown fox jukps", config
    )

    assert result.windowed
    assert result.score.total == 21
    assert result.score.correct == 20
