import pytest

from skillswap.matching.rating import RatingScorer
from skillswap.matching.weights import ScoringConfig


@pytest.fixture
def scorer():
    return RatingScorer()


def test_scale_endpoints(scorer, make_user):
    assert scorer.score(make_user("low", rating=1.0)) == 0
    assert scorer.score(make_user("high", rating=5.0)) == 100
    assert scorer.score(make_user("mid", rating=3.0)) == 50


def test_missing_rating_is_neutral(scorer, make_user):
    assert scorer.score(make_user("new")) == 50


def test_out_of_range_is_clamped(scorer, make_user):
    assert scorer.score(make_user("zero", rating=0.0)) == 0


def test_monotonic(scorer, make_user):
    ratings = [0.0, 1.0, 1.5, 2.2, 3.0, 3.9, 4.0, 4.5, 4.99, 5.0]
    scores = [scorer.score(make_user(f"u{i}", rating=r)) for i, r in enumerate(ratings)]
    assert scores == sorted(scores)


def test_neutral_default_is_configurable(make_user):
    scorer = RatingScorer(ScoringConfig(rating_neutral_score=70))
    assert scorer.score(make_user("new")) == 70
