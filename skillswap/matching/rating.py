"""Reputation scoring from a candidate's average rating."""

import logging
from typing import Optional

from skillswap.matching.weights import DEFAULT_SCORING_CONFIG, ScoringConfig, round_score
from skillswap.profile.models import User

logger = logging.getLogger(__name__)


class RatingScorer:
    """Maps a star rating onto a 0-100 score."""

    def __init__(self, config: Optional[ScoringConfig] = None):
        self.config = config or DEFAULT_SCORING_CONFIG

    def score(self, candidate: User) -> int:
        """Calculate the rating score of a candidate.

        Linear and monotonic: ``rating_min`` maps to 0, ``rating_max`` to 100,
        values outside the range are clamped. A missing rating gets
        ``rating_neutral_score``.
        """
        return round_score(self.score_rating(candidate.rating))

    def score_rating(self, rating: Optional[float]) -> float:
        cfg = self.config
        if rating is None:
            logger.debug("Missing rating, using neutral rating score")
            return cfg.rating_neutral_score

        clamped = min(cfg.rating_max, max(cfg.rating_min, rating))
        return (clamped - cfg.rating_min) / (cfg.rating_max - cfg.rating_min) * 100.0
