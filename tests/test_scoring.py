import pytest

from text_diff_checker.models import Category, Score, Segment
from text_diff_checker.scoring import count_significant, score_segments

U, D, I, O = Category.UNCHANGED, Category.DELETED, Category.INSERTED, Category.OMITTED


def test_empty_segments_score_zero():
    assert score_segments([]) == Score(correct=0, total=0, percent=0.0)


def test_inserted_text_does_not_lower_the_percentage():
    score = score_segments([Segment("cat ", U), Segment("sat ", I)])

    assert score == Score(correct=3, total=3, percent=100.0)


def test_deleted_characters_count_against_the_total():
    score = score_segments([Segment("ab", U), Segment("cd", D), Segment("xyz", I)])

    assert score.correct == 2
    assert score.total == 4
    assert score.percent == pytest.approx(50.0)


def test_whitespace_and_separators_are_ignored():
    score = score_segments(
        [Segment("a b", U), Segment("  ", D), Segment(" ... ", O), Segment("c", D)]
    )

    assert score == Score(correct=2, total=3, percent=pytest.approx(200 / 3))


def test_percent_is_not_rounded():
    score = score_segments([Segment("ab", U), Segment("c", D)])

    assert score.percent == pytest.approx(66.6666, rel=1e-4)


def test_count_significant():
    assert count_significant("a b\tc\n") == 3
    assert count_significant("") == 0
